"""
Core value objects, exact arithmetic, and contracts.

This module contains the foundational building blocks that are independent
of any I/O surface (CLI, storage, network).
"""

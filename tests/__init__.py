"""
Test suite for exact-quantity

Contains:
- tests/unit/          : Unit tests for individual modules
"""

"""
Core math modules

Exact arithmetic primitives. No floating point in any computation path.
"""

# Exact rationals
from src.core.math.fraction import (
    DECIMAL_PATTERN,
    MIXED_PATTERN,
    RATIO_PATTERN,
    DivisionByZero,
    Fraction,
    InvalidFormat,
)

__all__ = [
    # Fraction — Literal grammar
    "DECIMAL_PATTERN",
    "MIXED_PATTERN",
    "RATIO_PATTERN",
    # Fraction — Exceptions
    "DivisionByZero",
    "InvalidFormat",
    # Fraction — Types
    "Fraction",
]

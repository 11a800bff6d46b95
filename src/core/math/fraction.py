"""
Fraction — exact rational numbers in canonical reduced form

Immutable Pydantic value object for exact arithmetic on quantities.
Every instance is reduced on construction:

- the denominator is always positive (the sign lives in the numerator);
- gcd(|numerator|, denominator) == 1;
- a zero denominator is rejected with DivisionByZero.

Two string forms are supported:
- canonical: "7/3", "-1/2", "4"
- mixed-number: "2 1/3", "-2 1/3", "1/2", "4" (used when rendering quantities)

CRITICAL INVARIANTS:
1. No floating point is involved in construction, parsing or arithmetic
2. Structurally equal fractions are numerically equal (canonical form)
3. Operations never mutate an instance, they return a new Fraction
"""

import math
import re
from typing import Any, Final, Union

from pydantic import BaseModel, StrictInt, model_validator


# =============================================================================
# LITERAL GRAMMAR
# =============================================================================

# -12 | 12 | 12. | 12.5 | -0.25
DECIMAL_PATTERN: Final[re.Pattern] = re.compile(r"(-?)([0-9]+)(?:\.([0-9]*))?")

# 245/3 | -1/2
RATIO_PATTERN: Final[re.Pattern] = re.compile(r"(-?)([0-9]+)/([0-9]+)")

# 81 2/3 | -2 1/3 (output of Fraction.to_mixed_string)
MIXED_PATTERN: Final[re.Pattern] = re.compile(r"(-?)([0-9]+) +([0-9]+)/([0-9]+)")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DivisionByZero(ZeroDivisionError):
    """Fraction built (or divided) with a zero denominator."""


class InvalidFormat(ValueError):
    """Text does not match any accepted numeric literal shape."""


# =============================================================================
# FRACTION MODEL
# =============================================================================


FractionLike = Union["Fraction", int]


class Fraction(BaseModel):
    """
    Exact rational number.

    Immutable model (frozen=True): arithmetic returns new instances.
    Positional construction is supported: Fraction(245, 3).

    Examples:
        >>> Fraction(10, 20)
        Fraction(numerator=1, denominator=2)
        >>> Fraction(3, -6).to_canonical_string()
        '-1/2'
        >>> Fraction(245, 3).to_mixed_string()
        '81 2/3'
    """

    numerator: StrictInt
    denominator: StrictInt = 1

    model_config = {"frozen": True}  # Immutable

    def __init__(self, numerator: int, denominator: int = 1) -> None:
        super().__init__(numerator=numerator, denominator=denominator)

    @model_validator(mode="before")
    @classmethod
    def reduce_to_canonical(cls, data: Any) -> Any:
        """
        Reduce (numerator, denominator) before field validation.

        Runs for constructor calls as well as model_validate() on raw
        mappings, so no path produces a non-canonical instance.

        Raises:
            DivisionByZero: if the denominator is 0
        """
        if not isinstance(data, dict):
            return data

        numerator = data.get("numerator")
        denominator = data.get("denominator", 1)
        if not (_is_plain_int(numerator) and _is_plain_int(denominator)):
            # Field validation reports the type error
            return data

        if denominator == 0:
            raise DivisionByZero(f"Fraction denominator cannot be zero (numerator={numerator})")

        if denominator < 0:
            numerator, denominator = -numerator, -denominator

        divisor = math.gcd(numerator, denominator)
        return {"numerator": numerator // divisor, "denominator": denominator // divisor}

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def create(cls, numerator: int, denominator: int = 1) -> "Fraction":
        """Build a reduced fraction; denominator defaults to 1."""
        return cls(numerator, denominator)

    @classmethod
    def from_string(cls, text: str) -> "Fraction":
        """
        Parse a numeric literal.

        Accepted shapes:
            "12", "-12"          integer
            "0.5", "1.", "-2.25" decimal (bare trailing point = integer part)
            "245/3", "-1/2"      ratio
            "81 2/3", "-2 1/3"   mixed number

        Args:
            text: Literal without surrounding whitespace

        Returns:
            Reduced Fraction

        Raises:
            InvalidFormat: if text matches none of the shapes
            DivisionByZero: if a ratio has a zero denominator

        Examples:
            >>> Fraction.from_string("0.5")
            Fraction(numerator=1, denominator=2)
            >>> Fraction.from_string("1.")
            Fraction(numerator=1, denominator=1)
        """
        if not isinstance(text, str):
            raise InvalidFormat(f"Fraction literal must be a string, got {type(text).__name__}")

        match = DECIMAL_PATTERN.fullmatch(text)
        if match:
            sign, whole, decimals = match.groups()
            decimals = decimals or ""
            numerator = int(whole + decimals)
            denominator = 10 ** len(decimals)
            return cls(-numerator if sign else numerator, denominator)

        match = RATIO_PATTERN.fullmatch(text)
        if match:
            sign, numerator, denominator = match.groups()
            value = cls(int(numerator), int(denominator))
            return value.negate() if sign else value

        match = MIXED_PATTERN.fullmatch(text)
        if match:
            sign, whole, numerator, denominator = match.groups()
            value = cls(int(numerator), int(denominator)).add(int(whole))
            return value.negate() if sign else value

        raise InvalidFormat(f"Invalid fraction literal: {text!r}")

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, other: FractionLike) -> "Fraction":
        """a/b + c/d = (ad + cb) / bd"""
        other = _as_fraction(other)
        return Fraction(
            self.numerator * other.denominator + other.numerator * self.denominator,
            self.denominator * other.denominator,
        )

    def subtract(self, other: FractionLike) -> "Fraction":
        """a/b - c/d = (ad - cb) / bd"""
        return self.add(_as_fraction(other).negate())

    def multiply(self, other: FractionLike) -> "Fraction":
        """a/b * c/d = ac / bd"""
        other = _as_fraction(other)
        return Fraction(
            self.numerator * other.numerator,
            self.denominator * other.denominator,
        )

    def divide(self, other: FractionLike) -> "Fraction":
        """
        a/b ÷ c/d = ad / bc

        Raises:
            DivisionByZero: if other is zero
        """
        other = _as_fraction(other)
        if other.numerator == 0:
            raise DivisionByZero(f"Cannot divide {self} by zero")
        return Fraction(
            self.numerator * other.denominator,
            self.denominator * other.numerator,
        )

    def negate(self) -> "Fraction":
        return Fraction(-self.numerator, self.denominator)

    # -------------------------------------------------------------------------
    # Predicates
    # -------------------------------------------------------------------------

    def is_integer(self) -> bool:
        return self.denominator == 1

    def is_same_value_as(self, other: "Fraction") -> bool:
        """Canonical form makes structural equality numeric equality."""
        return self == other

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def to_canonical_string(self) -> str:
        """Integer form when the denominator is 1, otherwise numerator/denominator."""
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"

    def to_mixed_string(self) -> str:
        """
        Mixed-number form: integer part plus proper fraction.

        Truncating division splits |n|/d into q and r/d; the sign is
        written once, in front.

        Examples:
            >>> Fraction(245, 3).to_mixed_string()
            '81 2/3'
            >>> Fraction(1, 3).to_mixed_string()
            '1/3'
            >>> Fraction(-7, 3).to_mixed_string()
            '-2 1/3'
        """
        whole, remainder = divmod(abs(self.numerator), self.denominator)

        if whole == 0 or remainder == 0:
            return self.to_canonical_string()

        sign = "-" if self.numerator < 0 else ""
        return f"{sign}{whole} {remainder}/{self.denominator}"

    def to_float(self) -> float:
        """Lossy conversion, for display and interop only."""
        return self.numerator / self.denominator

    def __str__(self) -> str:
        return self.to_canonical_string()

    def __repr__(self) -> str:
        return f"Fraction(numerator={self.numerator}, denominator={self.denominator})"

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> "Fraction":
        if not _is_fraction_like(other):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other: Any) -> "Fraction":
        if not _is_fraction_like(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: Any) -> "Fraction":
        if not _is_fraction_like(other):
            return NotImplemented
        return _as_fraction(other).subtract(self)

    def __mul__(self, other: Any) -> "Fraction":
        if not _is_fraction_like(other):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> "Fraction":
        if not _is_fraction_like(other):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: Any) -> "Fraction":
        if not _is_fraction_like(other):
            return NotImplemented
        return _as_fraction(other).divide(self)

    def __neg__(self) -> "Fraction":
        return self.negate()

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.subtract(other).numerator < 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.subtract(other).numerator <= 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.subtract(other).numerator > 0

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.subtract(other).numerator >= 0


# =============================================================================
# HELPERS
# =============================================================================


def _is_plain_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_fraction_like(value: Any) -> bool:
    return isinstance(value, Fraction) or _is_plain_int(value)


def _as_fraction(value: FractionLike) -> Fraction:
    """Promote int operands; anything else is a caller error."""
    if isinstance(value, Fraction):
        return value
    if _is_plain_int(value):
        return Fraction(value)
    raise TypeError(f"Expected Fraction or int, got {type(value).__name__}")

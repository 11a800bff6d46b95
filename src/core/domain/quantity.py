"""
Quantity — exact amount tied to a unit of measure

Immutable Pydantic model. Subclasses define a quantity family (Weight) by
declaring:
- conversions: the family's ConversionTable (units.py)
- codec: the family's QuantityLiteralCodec (recognised unit symbols)

Equality is structural on (amount, uom): 16 OZ and 1 LB are NOT equal,
even though they convert to the same magnitude. Conversion is always
explicit, through to().
"""

from typing import Any, ClassVar, Dict, Optional

from pydantic import BaseModel

from src.core.contracts.validators import validate_quantity
from src.core.domain.quantity_literal import QuantityLiteralCodec, render_quantity_literal
from src.core.domain.units import EMPTY_CONVERSIONS, ConversionTable
from src.core.domain.uom import UnitOfMeasure
from src.core.math.fraction import Fraction


class Quantity(BaseModel):
    """
    Amount (exact Fraction) in a unit of measure.

    Immutable model (frozen=True). to(), add() and subtract() return new
    instances of the receiver's family.
    """

    amount: Fraction
    uom: UnitOfMeasure

    model_config = {"frozen": True}  # Immutable

    conversions: ClassVar[ConversionTable] = EMPTY_CONVERSIONS
    codec: ClassVar[Optional[QuantityLiteralCodec]] = None

    def __init__(self, amount: Fraction, uom: UnitOfMeasure) -> None:
        super().__init__(amount=amount, uom=uom)

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_string(cls, text: str) -> "Quantity":
        """
        Parse a literal such as "1 LB" or "245/3 OZ".

        Raises:
            InvalidQuantityLiteral: if text does not match the grammar
            UnrecognizedUom: if the symbol is not one of the family's units
            TypeError: if the class has no literal codec (base Quantity)
        """
        if cls.codec is None:
            raise TypeError(f"{cls.__name__} does not define a literal codec")
        amount, uom = cls.codec.parse(text)
        return cls(amount, uom)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Quantity":
        """
        Build from a serialised quantity (the packaged quantity.json contract).

        The amount is reduced to canonical form on the way in.

        Raises:
            jsonschema.ValidationError: if data does not match the contract
            DivisionByZero: if the amount denominator is 0
        """
        validate_quantity(data)
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")

    @classmethod
    def conversion_factor(cls, from_uom: UnitOfMeasure, to_uom: UnitOfMeasure) -> Fraction:
        """Exact factor from the family table (raises ConversionNotSet)."""
        return cls.conversions.factor(from_uom, to_uom)

    # -------------------------------------------------------------------------
    # Conversion engine
    # -------------------------------------------------------------------------

    def to(self, uom: UnitOfMeasure) -> "Quantity":
        """
        Convert to another unit of the same family.

        Args:
            uom: Target unit

        Returns:
            self for the identity conversion, otherwise a new quantity
            with amount = self.amount * factor

        Raises:
            ConversionNotSet: if the family table has no (self.uom, uom) entry
        """
        if uom == self.uom:
            return self

        amount = type(self).conversions.convert(self.amount, self.uom, uom)
        return type(self)(amount, uom)

    def add(self, other: "Quantity") -> "Quantity":
        """
        Sum expressed in the receiver's unit.

        a.add(b) and b.add(a) are the same magnitude but differ in unit.

        Raises:
            ConversionNotSet: if other cannot be converted to self.uom
        """
        converted = _check_operand(self, other).to(self.uom)
        return type(self)(self.amount.add(converted.amount), self.uom)

    def subtract(self, other: "Quantity") -> "Quantity":
        """
        Difference expressed in the receiver's unit.

        Raises:
            ConversionNotSet: if other cannot be converted to self.uom
        """
        converted = _check_operand(self, other).to(self.uom)
        return type(self)(self.amount.subtract(converted.amount), self.uom)

    def is_same_value_as(self, other: "Quantity") -> bool:
        """Structural (amount, uom) equality; no implicit conversion."""
        return self == other

    # -------------------------------------------------------------------------
    # Operators / rendering
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> "Quantity":
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> "Quantity":
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.subtract(other)

    def __str__(self) -> str:
        return render_quantity_literal(self.amount, self.uom)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"


def _check_operand(receiver: Quantity, other: Quantity) -> Quantity:
    """Arithmetic is only defined within one family."""
    if not isinstance(other, Quantity):
        raise TypeError(f"Expected a Quantity, got {type(other).__name__}")
    if type(other).conversions is not type(receiver).conversions:
        raise TypeError(
            f"Cannot combine {type(receiver).__name__} with {type(other).__name__}"
        )
    return other

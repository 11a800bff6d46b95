"""
Weight — quantity family for mass units LB, OZ, KG, G

Conversions use the flat WEIGHT_CONVERSIONS table (units.py). G only
converts to and from KG; G ↔ LB and G ↔ OZ raise ConversionNotSet.

Named factories build the Fraction and the unit in one call:

    Weight.LB(10, 20)   # 1/2 LB
    Weight.KG(3001, 1000)
    Weight.create("OZ", 42)
"""

from typing import Callable, ClassVar, Dict, Final

from src.core.domain.quantity import Quantity
from src.core.domain.quantity_literal import QuantityLiteralCodec, UnrecognizedUom
from src.core.domain.units import WEIGHT_CONVERSIONS, WEIGHT_UOM_SYMBOLS, ConversionTable
from src.core.domain.uom import UnitOfMeasure
from src.core.math.fraction import Fraction


class Weight(Quantity):
    """Mass quantity. Recognised symbols: LB, OZ, KG, G."""

    conversions: ClassVar[ConversionTable] = WEIGHT_CONVERSIONS
    codec: ClassVar[QuantityLiteralCodec] = QuantityLiteralCodec(WEIGHT_UOM_SYMBOLS)

    @classmethod
    def LB(cls, numerator: int, denominator: int = 1) -> "Weight":
        return cls(Fraction(numerator, denominator), UnitOfMeasure.LB())

    @classmethod
    def OZ(cls, numerator: int, denominator: int = 1) -> "Weight":
        return cls(Fraction(numerator, denominator), UnitOfMeasure.OZ())

    @classmethod
    def KG(cls, numerator: int, denominator: int = 1) -> "Weight":
        return cls(Fraction(numerator, denominator), UnitOfMeasure.KG())

    @classmethod
    def G(cls, numerator: int, denominator: int = 1) -> "Weight":
        return cls(Fraction(numerator, denominator), UnitOfMeasure.G())

    @classmethod
    def create(cls, symbol: str, numerator: int, denominator: int = 1) -> "Weight":
        """
        Build a weight from a unit symbol.

        Args:
            symbol: One of LB, OZ, KG, G (case-sensitive)
            numerator: Amount numerator
            denominator: Amount denominator (default: 1)

        Raises:
            UnrecognizedUom: if symbol is not a weight unit
        """
        try:
            factory = WEIGHT_FACTORIES[symbol]
        except KeyError:
            raise UnrecognizedUom(symbol, WEIGHT_FACTORIES) from None
        return factory(numerator, denominator)


# Closed symbol -> constructor mapping
WEIGHT_FACTORIES: Final[Dict[str, Callable[..., Weight]]] = {
    "LB": Weight.LB,
    "OZ": Weight.OZ,
    "KG": Weight.KG,
    "G": Weight.G,
}

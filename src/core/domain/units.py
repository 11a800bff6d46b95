"""
Units — centralised conversion factor tables

The only permitted source of conversion factors between units of a
quantity family. Factors are exact Fractions:

    target_amount = source_amount * factor

Tables are FLAT and NON-TRANSITIVE: only explicitly listed pairs convert.
G ↔ KG is listed and KG ↔ LB is listed, but G → LB is not, and it fails
with ConversionNotSet instead of chaining through KG.

Tables are built once at import time and exposed read-only.
"""

import logging
from types import MappingProxyType
from typing import Dict, Final, Iterator, Mapping, Tuple

from src.core.domain.uom import UnitOfMeasure
from src.core.math.fraction import Fraction

logger = logging.getLogger(__name__)


# =============================================================================
# WEIGHT TABLE
# =============================================================================

# Recognised weight symbols, in display order
WEIGHT_UOM_SYMBOLS: Final[Tuple[str, ...]] = ("LB", "OZ", "KG", "G")

WEIGHT_CONVERSION_FACTORS: Final[Dict[Tuple[str, str], Fraction]] = {
    # Pounds
    ("LB", "KG"): Fraction(50000, 110231),
    ("LB", "OZ"): Fraction(16),
    # Ounces
    ("OZ", "LB"): Fraction(1, 16),
    ("OZ", "KG"): Fraction(10000000, 352739619),
    # Kilograms
    ("KG", "LB"): Fraction(110231, 50000),
    ("KG", "OZ"): Fraction(352739619, 10000000),
    ("KG", "G"): Fraction(1000),
    # Grams
    ("G", "KG"): Fraction(1, 1000),
}


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ConversionNotSet(Exception):
    """
    No factor is registered for the (from_uom, to_uom) pair.

    Never recovered from by chaining or approximating; the caller decides.
    """

    def __init__(self, from_uom: UnitOfMeasure, to_uom: UnitOfMeasure, family: str = "") -> None:
        self.from_uom = from_uom
        self.to_uom = to_uom
        self.family = family
        scope = f" for {family}" if family else ""
        super().__init__(f"Conversion from {from_uom.symbol} to {to_uom.symbol} is not set{scope}")


# =============================================================================
# CONVERSION TABLE
# =============================================================================


class ConversionTable:
    """
    Read-only lookup of exact factors between specific unit pairs.

    Args:
        family: Quantity family name, used in diagnostics ("weight")
        factors: (source_symbol, target_symbol) -> Fraction
    """

    def __init__(self, family: str, factors: Mapping[Tuple[str, str], Fraction]):
        checked: Dict[Tuple[str, str], Fraction] = {}
        for (source, target), factor in factors.items():
            if source == target:
                raise ValueError(f"Identity pair {source}->{target} must not be listed in {family} table")
            if not isinstance(factor, Fraction):
                raise TypeError(
                    f"Factor {source}->{target} must be a Fraction, got {type(factor).__name__}"
                )
            if factor.numerator <= 0:
                raise ValueError(f"Factor {source}->{target} must be positive, got {factor}")
            checked[(source, target)] = factor

        self._family = family
        self._factors: Mapping[Tuple[str, str], Fraction] = MappingProxyType(checked)

    @property
    def family(self) -> str:
        return self._family

    def supports(self, from_uom: UnitOfMeasure, to_uom: UnitOfMeasure) -> bool:
        """True for identity pairs and for explicitly listed pairs."""
        return from_uom == to_uom or (from_uom.symbol, to_uom.symbol) in self._factors

    def factor(self, from_uom: UnitOfMeasure, to_uom: UnitOfMeasure) -> Fraction:
        """
        Exact factor for from_uom → to_uom.

        Args:
            from_uom: Source unit
            to_uom: Target unit

        Returns:
            Fraction such that target_amount = source_amount * factor

        Raises:
            ConversionNotSet: if the pair is not listed
        """
        if from_uom == to_uom:
            return Fraction(1)

        try:
            return self._factors[(from_uom.symbol, to_uom.symbol)]
        except KeyError:
            raise ConversionNotSet(from_uom, to_uom, self._family) from None

    def convert(self, amount: Fraction, from_uom: UnitOfMeasure, to_uom: UnitOfMeasure) -> Fraction:
        """
        Convert an amount between units.

        Raises:
            ConversionNotSet: if the pair is not listed
        """
        factor = self.factor(from_uom, to_uom)
        converted = amount.multiply(factor)
        logger.debug(
            f"{self._family}: {amount} {from_uom.symbol} -> {converted} {to_uom.symbol} (factor {factor})"
        )
        return converted

    def pairs(self) -> Tuple[Tuple[str, str], ...]:
        return tuple(self._factors)

    def symbols(self) -> Tuple[str, ...]:
        """Every symbol appearing in at least one pair, sorted."""
        return tuple(sorted({symbol for pair in self._factors for symbol in pair}))

    def __contains__(self, pair: object) -> bool:
        return pair in self._factors

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self._factors)

    def __len__(self) -> int:
        return len(self._factors)

    def __repr__(self) -> str:
        return f"ConversionTable(family={self._family!r}, pairs={len(self._factors)})"


# Global weight table
WEIGHT_CONVERSIONS: Final[ConversionTable] = ConversionTable("weight", WEIGHT_CONVERSION_FACTORS)

# Families without listed conversions only support identity conversion
EMPTY_CONVERSIONS: Final[ConversionTable] = ConversionTable("quantity", {})

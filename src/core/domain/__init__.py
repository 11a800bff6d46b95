"""
Domain models and value objects.

Contains units of measure, conversion tables and quantity families.
"""

from src.core.domain.uom import UnitOfMeasure, Uom
from src.core.domain.units import (
    EMPTY_CONVERSIONS,
    WEIGHT_CONVERSION_FACTORS,
    WEIGHT_CONVERSIONS,
    WEIGHT_UOM_SYMBOLS,
    ConversionNotSet,
    ConversionTable,
)
from src.core.domain.quantity_literal import (
    InvalidQuantityLiteral,
    QuantityLiteralCodec,
    UnrecognizedUom,
    parse_quantity_literal,
    render_quantity_literal,
)
from src.core.domain.quantity import Quantity
from src.core.domain.weight import WEIGHT_FACTORIES, Weight

__all__ = [
    # Units of measure
    "UnitOfMeasure",
    "Uom",
    # Units module
    "EMPTY_CONVERSIONS",
    "WEIGHT_CONVERSION_FACTORS",
    "WEIGHT_CONVERSIONS",
    "WEIGHT_UOM_SYMBOLS",
    "ConversionNotSet",
    "ConversionTable",
    # Literal codec
    "InvalidQuantityLiteral",
    "QuantityLiteralCodec",
    "UnrecognizedUom",
    "parse_quantity_literal",
    "render_quantity_literal",
    # Quantity models
    "Quantity",
    "Weight",
    "WEIGHT_FACTORIES",
]

"""
UnitOfMeasure — unit identity by symbol

Immutable Pydantic model. Two units are equal iff their symbols are equal,
case-sensitively; no case normalisation is ever performed.

Any non-empty symbol can be constructed. Whether a unit is usable is decided
elsewhere, by two independent checks:
- conversion tables (units.py) decide which pairs convert;
- the literal codec decides which symbols a family parses.
"""

from pydantic import BaseModel, Field


class UnitOfMeasure(BaseModel):
    """
    Unit of measure identified by its symbol ("LB", "OZ", "KG", "G").

    Immutable model (frozen=True), hashable, usable as a dict key.
    """

    symbol: str = Field(..., min_length=1, description="Unit symbol, e.g. 'LB'")

    model_config = {"frozen": True}  # Immutable

    def __init__(self, symbol: str) -> None:
        super().__init__(symbol=symbol)

    @classmethod
    def create(cls, symbol: str) -> "UnitOfMeasure":
        return cls(symbol)

    @property
    def name(self) -> str:
        return self.symbol

    def get_name(self) -> str:
        """Symbol of the unit (kept for parity with name)."""
        return self.symbol

    # -------------------------------------------------------------------------
    # Named factories (weight units)
    # -------------------------------------------------------------------------

    @classmethod
    def LB(cls) -> "UnitOfMeasure":
        return cls("LB")

    @classmethod
    def OZ(cls) -> "UnitOfMeasure":
        return cls("OZ")

    @classmethod
    def KG(cls) -> "UnitOfMeasure":
        return cls("KG")

    @classmethod
    def G(cls) -> "UnitOfMeasure":
        return cls("G")

    def __str__(self) -> str:
        return self.symbol

    def __repr__(self) -> str:
        return f"UnitOfMeasure({self.symbol!r})"


# Short alias used throughout tests and call sites
Uom = UnitOfMeasure

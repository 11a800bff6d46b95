"""
Quantity literals — text codec for (amount, unit) pairs

Grammar (whitespace = any character for which str.isspace() is true):

    literal  := ws* amount ws* symbol ws* END
    amount   := "-"? digits ( "." digits* | "/" digits | ws+ digits "/" digits )?
    symbol   := letters            (must be in the family's recognised set)

Examples:
    "1LB"      -> 1 LB
    " 0.5 OZ " -> 1/2 OZ
    "245/3 OZ" -> 245/3 OZ   rendered "81 2/3 OZ"
    "81 2/3 OZ" -> 245/3 OZ  (mixed form, so rendered text parses back)

Rejected: unknown or case-mismatched symbols ("1 EACH", "1 Lb"), anything
after the symbol ("1 LB 0", "1LB1/2", "1LB/2LB"), concatenated symbols
("1 LBLB").

The scanner walks the text once, one step per grammar element, and reports
the 1-based column of the first offending character.
"""

import logging
from typing import FrozenSet, Iterable, Optional, Tuple

from src.core.domain.uom import UnitOfMeasure
from src.core.math.fraction import Fraction, InvalidFormat

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidQuantityLiteral(InvalidFormat):
    """Quantity literal does not match the grammar."""

    def __init__(self, text: str, column: int, reason: str) -> None:
        self.text = text
        self.column = column
        self.reason = reason
        super().__init__(f"Invalid quantity literal {text!r} at column {column}: {reason}")


class UnrecognizedUom(InvalidQuantityLiteral):
    """
    Unit symbol is not in the recognised set (matching is case-sensitive).

    Raised by the literal parser (text and column set) and by symbol-keyed
    factories such as Weight.create (text and column are None).
    """

    def __init__(
        self,
        symbol: str,
        recognized: Iterable[str],
        text: Optional[str] = None,
        column: Optional[int] = None,
    ) -> None:
        self.symbol = symbol
        options = ", ".join(sorted(recognized))
        reason = f"unrecognized unit {symbol!r} (expected one of: {options})"
        if text is not None:
            super().__init__(text, column or 1, reason)
            return

        self.text = None
        self.column = None
        self.reason = reason
        InvalidFormat.__init__(self, reason[0].upper() + reason[1:])


# =============================================================================
# SCANNER
# =============================================================================

_DIGITS = "0123456789"
_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


class _Scanner:
    """Cursor over a literal; failures report the current column."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    @property
    def column(self) -> int:
        return self.pos + 1

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def accept(self, char: str) -> bool:
        if self.peek() == char:
            self.pos += 1
            return True
        return False

    def skip_whitespace(self) -> str:
        """Any character for which str.isspace() is true."""
        start = self.pos
        while not self.at_end() and self.text[self.pos].isspace():
            self.pos += 1
        return self.text[start:self.pos]

    def take_while(self, allowed: str) -> str:
        start = self.pos
        while not self.at_end() and self.text[self.pos] in allowed:
            self.pos += 1
        return self.text[start:self.pos]

    def fail(self, reason: str) -> InvalidQuantityLiteral:
        logger.debug(f"Rejected quantity literal {self.text!r} at column {self.column}: {reason}")
        return InvalidQuantityLiteral(self.text, self.column, reason)


def _read_amount(scanner: _Scanner) -> str:
    """
    Read the amount token and return it as a Fraction literal.

    Mixed numbers are normalised to a single separating space.
    """
    sign = "-" if scanner.accept("-") else ""

    whole = scanner.take_while(_DIGITS)
    if not whole:
        raise scanner.fail("expected digits")

    if scanner.accept("."):
        decimals = scanner.take_while(_DIGITS)
        return f"{sign}{whole}.{decimals}"

    if scanner.accept("/"):
        denominator = scanner.take_while(_DIGITS)
        if not denominator:
            raise scanner.fail("expected digits after '/'")
        return f"{sign}{whole}/{denominator}"

    # Mixed number: integer, whitespace, then a ratio
    mark = scanner.pos
    if scanner.skip_whitespace() and scanner.peek() != "" and scanner.peek() in _DIGITS:
        numerator = scanner.take_while(_DIGITS)
        if not scanner.accept("/"):
            raise scanner.fail("expected '/' in mixed number")
        denominator = scanner.take_while(_DIGITS)
        if not denominator:
            raise scanner.fail("expected digits after '/'")
        return f"{sign}{whole} {numerator}/{denominator}"

    scanner.pos = mark
    return f"{sign}{whole}"


# =============================================================================
# PARSE / RENDER
# =============================================================================


def parse_quantity_literal(
    text: str, recognized_symbols: Iterable[str]
) -> Tuple[Fraction, UnitOfMeasure]:
    """
    Parse a quantity literal into (amount, unit).

    Args:
        text: Literal such as "1 LB", "0.5OZ", "245/3 OZ"
        recognized_symbols: Exact, case-sensitive unit symbols accepted

    Returns:
        (Fraction, UnitOfMeasure) pair

    Raises:
        InvalidQuantityLiteral: if text does not match the grammar
        UnrecognizedUom: if the unit symbol is not recognised
        DivisionByZero: if a ratio amount has a zero denominator
    """
    if not isinstance(text, str):
        raise InvalidQuantityLiteral(repr(text), 1, f"expected str, got {type(text).__name__}")

    scanner = _Scanner(text)

    scanner.skip_whitespace()
    amount_literal = _read_amount(scanner)

    scanner.skip_whitespace()
    symbol_column = scanner.column
    symbol = scanner.take_while(_LETTERS)
    if not symbol:
        raise scanner.fail("expected unit symbol")

    scanner.skip_whitespace()
    if not scanner.at_end():
        raise scanner.fail(f"unexpected trailing input {text[scanner.pos:]!r}")

    recognized = frozenset(recognized_symbols)
    if symbol not in recognized:
        logger.debug(f"Rejected quantity literal {text!r}: unrecognized unit {symbol!r}")
        raise UnrecognizedUom(symbol, recognized, text, symbol_column)

    return Fraction.from_string(amount_literal), UnitOfMeasure(symbol)


def render_quantity_literal(amount: Fraction, uom: UnitOfMeasure) -> str:
    """
    Canonical text: "<mixed amount> <SYMBOL>".

    Examples:
        >>> render_quantity_literal(Fraction(245, 3), UnitOfMeasure("OZ"))
        '81 2/3 OZ'
        >>> render_quantity_literal(Fraction(1, 2), UnitOfMeasure("OZ"))
        '1/2 OZ'
    """
    return f"{amount.to_mixed_string()} {uom.symbol}"


class QuantityLiteralCodec:
    """
    Literal codec bound to one family's recognised symbols.

    Args:
        recognized_symbols: Unit symbols the family parses, e.g. ("LB", "OZ", "KG", "G")
    """

    def __init__(self, recognized_symbols: Iterable[str]):
        self._recognized: FrozenSet[str] = frozenset(recognized_symbols)
        if not self._recognized:
            raise ValueError("QuantityLiteralCodec needs at least one recognized symbol")

    @property
    def recognized_symbols(self) -> FrozenSet[str]:
        return self._recognized

    def parse(self, text: str) -> Tuple[Fraction, UnitOfMeasure]:
        return parse_quantity_literal(text, self._recognized)

    def render(self, amount: Fraction, uom: UnitOfMeasure) -> str:
        return render_quantity_literal(amount, uom)

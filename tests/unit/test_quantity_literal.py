"""
Tests for the quantity literal codec

Checks:
1. Amount grammar (integer, decimal, ratio, mixed, sign)
2. Whitespace handling around tokens
3. Exact, case-sensitive unit symbol matching
4. Trailing-input rejection with column diagnostics
5. Rendering through Fraction.to_mixed_string
"""

import logging

import pytest

from src.core.domain.quantity_literal import (
    InvalidQuantityLiteral,
    QuantityLiteralCodec,
    UnrecognizedUom,
    parse_quantity_literal,
    render_quantity_literal,
)
from src.core.domain.uom import Uom
from src.core.math.fraction import DivisionByZero, Fraction

WEIGHT_SYMBOLS = ("LB", "OZ", "KG", "G")


# =============================================================================
# PARSING
# =============================================================================


class TestParseAmount:
    """Tests for the amount token"""

    @pytest.mark.parametrize(
        "text,amount",
        [
            ("1 LB", Fraction(1)),
            ("-12 LB", Fraction(-12)),
            ("0.5 LB", Fraction(1, 2)),
            ("1. LB", Fraction(1)),
            ("-0.25LB", Fraction(-1, 4)),
            ("2/3 LB", Fraction(2, 3)),
            ("10/20LB", Fraction(1, 2)),
            ("81 2/3 LB", Fraction(245, 3)),
            ("81  2/3 LB", Fraction(245, 3)),
            ("-2 1/3 LB", Fraction(-7, 3)),
            ("1\t2/3\tLB", Fraction(5, 3)),
        ],
    )
    def test_amount_shapes(self, text: str, amount: Fraction) -> None:
        parsed_amount, uom = parse_quantity_literal(text, WEIGHT_SYMBOLS)
        assert parsed_amount == amount
        assert uom == Uom.LB()

    @pytest.mark.parametrize(
        "text,reason",
        [
            ("LB", "expected digits"),
            ("", "expected digits"),
            ("   ", "expected digits"),
            ("-LB", "expected digits"),
            (".5 LB", "expected digits"),
            ("1/ LB", "expected digits after '/'"),
            ("1 2 LB", "expected '/' in mixed number"),
            ("1 2/ LB", "expected digits after '/'"),
            ("1", "expected unit symbol"),
            ("1 ", "expected unit symbol"),
            ("1.5.5 LB", "expected unit symbol"),
        ],
    )
    def test_malformed_amount(self, text: str, reason: str) -> None:
        with pytest.raises(InvalidQuantityLiteral, match=reason):
            parse_quantity_literal(text, WEIGHT_SYMBOLS)

    def test_zero_denominator(self) -> None:
        with pytest.raises(DivisionByZero):
            parse_quantity_literal("1/0 OZ", WEIGHT_SYMBOLS)


class TestParseSymbol:
    """Tests for the unit symbol token"""

    @pytest.mark.parametrize("symbol", WEIGHT_SYMBOLS)
    def test_recognised_symbols(self, symbol: str) -> None:
        _, uom = parse_quantity_literal(f"1 {symbol}", WEIGHT_SYMBOLS)
        assert uom == Uom(symbol)

    @pytest.mark.parametrize("text", ["1 EACH", "1 L", "1L", "1 Lb", "1 lb", "1 LBLB"])
    def test_unrecognised_symbols(self, text: str) -> None:
        with pytest.raises(UnrecognizedUom) as exc_info:
            parse_quantity_literal(text, WEIGHT_SYMBOLS)

        assert exc_info.value.symbol in text

    def test_unrecognised_symbol_column(self) -> None:
        with pytest.raises(UnrecognizedUom) as exc_info:
            parse_quantity_literal("  12 Lb", WEIGHT_SYMBOLS)

        assert exc_info.value.column == 6
        assert exc_info.value.symbol == "Lb"

    def test_recognised_set_is_configurable(self) -> None:
        """Any family can supply its own symbols"""
        amount, uom = parse_quantity_literal("3 EACH", ["EACH"])
        assert amount == Fraction(3)
        assert uom == Uom("EACH")


class TestParseTrailingInput:
    """Anything after the unit symbol is rejected"""

    @pytest.mark.parametrize(
        "text,column",
        [
            ("1 LB 0", 6),
            ("1 LB 4 OZ", 6),
            ("1LB0", 4),
            ("1LB1/2", 4),
            ("1LB/2LB", 4),
            ("1 LB.", 5),
        ],
    )
    def test_trailing_input(self, text: str, column: int) -> None:
        with pytest.raises(InvalidQuantityLiteral, match="unexpected trailing input") as exc_info:
            parse_quantity_literal(text, WEIGHT_SYMBOLS)

        assert exc_info.value.column == column
        assert exc_info.value.text == text

    def test_surrounding_whitespace_allowed(self) -> None:
        amount, uom = parse_quantity_literal(" \t1 LB \t", WEIGHT_SYMBOLS)
        assert amount == Fraction(1)
        assert uom == Uom.LB()

    @pytest.mark.parametrize("text", ["1 LB\n", "1 LB\r\n", "\n1 LB", "1\x0bLB", "1\u00a0LB"])
    def test_any_unicode_whitespace_allowed(self, text: str) -> None:
        amount, uom = parse_quantity_literal(text, WEIGHT_SYMBOLS)
        assert amount == Fraction(1)
        assert uom == Uom.LB()

    def test_rejection_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="src.core.domain.quantity_literal"):
            with pytest.raises(InvalidQuantityLiteral):
                parse_quantity_literal("1LB0", WEIGHT_SYMBOLS)

        assert "Rejected quantity literal '1LB0'" in caplog.text

    def test_non_string_rejected(self) -> None:
        with pytest.raises(InvalidQuantityLiteral, match="expected str"):
            parse_quantity_literal(1, WEIGHT_SYMBOLS)  # type: ignore


# =============================================================================
# RENDERING / CODEC
# =============================================================================


class TestRender:
    """Tests for render_quantity_literal"""

    def test_mixed(self) -> None:
        assert render_quantity_literal(Fraction(245, 3), Uom.OZ()) == "81 2/3 OZ"

    def test_proper_fraction(self) -> None:
        assert render_quantity_literal(Fraction(1, 2), Uom.OZ()) == "1/2 OZ"

    def test_integer(self) -> None:
        assert render_quantity_literal(Fraction(1), Uom.LB()) == "1 LB"

    @pytest.mark.parametrize(
        "text,rendered",
        [
            ("0.5 OZ", "1/2 OZ"),
            ("245/3 OZ", "81 2/3 OZ"),
            ("1. LB", "1 LB"),
            (" 2/3OZ ", "2/3 OZ"),
            ("81 2/3 OZ", "81 2/3 OZ"),
        ],
    )
    def test_parse_then_render(self, text: str, rendered: str) -> None:
        codec = QuantityLiteralCodec(WEIGHT_SYMBOLS)
        assert codec.render(*codec.parse(text)) == rendered


class TestQuantityLiteralCodec:
    """Tests for the codec object"""

    def test_recognized_symbols(self) -> None:
        codec = QuantityLiteralCodec(["LB", "OZ"])
        assert codec.recognized_symbols == frozenset({"LB", "OZ"})

    def test_binds_symbols(self) -> None:
        codec = QuantityLiteralCodec(["LB"])
        with pytest.raises(UnrecognizedUom):
            codec.parse("1 OZ")

    def test_requires_symbols(self) -> None:
        with pytest.raises(ValueError, match="at least one recognized symbol"):
            QuantityLiteralCodec([])

"""Formatação pt-BR."""
import pytest

from painel_dre.utils.formatting import format_brl, format_int, format_percent, month_label


@pytest.mark.parametrize("value, expected", [
    (0, "R$ 0,00"),
    (20, "R$ 20,00"),
    (1234.5, "R$ 1.234,50"),
    (1500000.5, "R$ 1.500.000,50"),
    (-250.1, "-R$ 250,10"),
])
def test_format_brl(value, expected):
    assert format_brl(value) == expected


def test_format_percent():
    assert format_percent(66.6666) == "66.7%"
    assert format_percent(0) == "0.0%"
    assert format_percent(12.346, decimals=2) == "12.35%"


def test_format_int():
    assert format_int(1234567) == "1.234.567"
    assert format_int(75) == "75"


def test_month_label():
    assert month_label("2025-03") == "Mar/2025"
    assert month_label("2025-03", full=True) == "Março/2025"

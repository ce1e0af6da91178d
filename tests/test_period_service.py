"""Filtros de período."""
from datetime import date

import pytest

from painel_dre.services.normalizer import normalize_sales
from painel_dre.services.period_service import filter_by_period, resolve_period

TODAY = date(2025, 3, 15)


@pytest.mark.parametrize("filter_type, start, end, label", [
    ("hoje", date(2025, 3, 15), date(2025, 3, 15), "Hoje"),
    ("ontem", date(2025, 3, 14), date(2025, 3, 14), "Ontem"),
    ("7dias", date(2025, 3, 9), date(2025, 3, 15), "Últimos 7 dias"),
    ("30dias", date(2025, 2, 14), date(2025, 3, 15), "Últimos 30 dias"),
    ("mes_atual", date(2025, 3, 1), date(2025, 3, 31), "Este mês"),
    ("mes_anterior", date(2025, 2, 1), date(2025, 2, 28), "Mês anterior"),
    ("proximo_mes", date(2025, 4, 1), date(2025, 4, 30), "Próximo mês"),
    ("ano_atual", date(2025, 1, 1), date(2025, 12, 31), "Este ano"),
    ("ano_anterior", date(2024, 1, 1), date(2024, 12, 31), "Ano anterior"),
])
def test_presets(filter_type, start, end, label):
    period = resolve_period(filter_type, today=TODAY)
    assert (period.start, period.end, period.label) == (start, end, label)


def test_month_boundaries_cross_year():
    assert resolve_period("mes_anterior", today=date(2025, 1, 10)).start == date(2024, 12, 1)
    assert resolve_period("proximo_mes", today=date(2025, 12, 10)).end == date(2026, 1, 31)


def test_custom_period_label_and_order():
    period = resolve_period("custom", custom=(date(2025, 3, 31), date(2025, 3, 1)))
    assert period.start == date(2025, 3, 1)
    assert period.label == "01/03/2025 a 31/03/2025"


def test_custom_requires_range():
    with pytest.raises(ValueError):
        resolve_period("custom")


def test_unknown_filter():
    with pytest.raises(ValueError):
        resolve_period("semestre")


def test_filter_is_inclusive_and_drops_undated():
    sales = normalize_sales([
        {"data": "2025-03-01", "valor_bruto": 1},
        {"data": "2025-03-31", "valor_bruto": 2},
        {"data": "2025-04-01", "valor_bruto": 3},
        {"data": None, "valor_bruto": 4},
    ])
    kept = filter_by_period(sales, resolve_period("mes_atual", today=TODAY))
    assert [s.valor_bruto for s in kept] == [1, 2]

"""Ponto de equilíbrio."""
import math
from datetime import date

import pytest

from painel_dre.config import VARIABLE_COST_RATIO_FALLBACK
from painel_dre.services.breakeven_service import (
    breakeven_from_records,
    compute_breakeven,
    compute_historical_ticket,
    split_costs_by_kind,
)


def test_reference_example():
    result = compute_breakeven(
        fixed_expenses=200, variable_expenses=300, revenue=1500,
        current_ticket=20, historical_ticket=0,
    )
    assert result.razao_variavel == pytest.approx(0.20)
    assert result.receita == pytest.approx(250)
    assert result.pedidos == 13
    assert result.atingivel


def test_zero_revenue_uses_fallback_ratio():
    result = compute_breakeven(100, 0, 0, current_ticket=0, historical_ticket=0)
    assert VARIABLE_COST_RATIO_FALLBACK == 0.30
    assert result.razao_variavel == pytest.approx(0.30)
    assert result.receita == pytest.approx(142.857, rel=1e-4)
    assert result.pedidos == 0


def test_historical_ticket_fallback():
    # razão 0,25: 600 / 0,75 é exato em float
    result = compute_breakeven(600, 250, 1000, current_ticket=0, historical_ticket=25)
    assert result.receita == 800
    assert result.ticket_medio == 25
    assert result.pedidos == 32


def test_current_ticket_wins_over_historical():
    result = compute_breakeven(600, 250, 1000, current_ticket=50, historical_ticket=25)
    assert result.ticket_medio == 50
    assert result.pedidos == 16


def test_zero_revenue_from_records_infers_kind_from_category():
    result = breakeven_from_records([], [{"categoria": "CMO", "valor": 100}])
    assert result.razao_variavel == pytest.approx(0.30)
    assert result.receita == pytest.approx(142.857, rel=1e-4)
    assert result.pedidos == 0
    assert result.atingivel


def test_orders_round_up():
    result = compute_breakeven(100, 0, 1000, current_ticket=30)
    assert result.receita == pytest.approx(100)
    assert result.pedidos == 4


@pytest.mark.parametrize("variable", [1000, 1500])
def test_unreachable_when_variable_costs_reach_revenue(variable, caplog):
    with caplog.at_level("WARNING"):
        result = compute_breakeven(200, variable, 1000, current_ticket=20)
    assert not result.atingivel
    assert math.isinf(result.receita)
    assert result.pedidos == 0
    assert "inatingível" in caplog.text


def test_split_costs_by_kind():
    expenses = [
        {"tipo": "fixa", "valor": 100},
        {"tipo": "marketing", "valor": 50},
        {"tipo": "variavel", "valor": 30},
        {"tipo": "taxa_automatica", "valor": 20},
    ]
    assert split_costs_by_kind(expenses) == (150, 50)


def test_unknown_kind_follows_category():
    expenses = [
        {"tipo": "???", "categoria": "CMV", "valor": 10},
        {"tipo": None, "categoria": "Aluguel", "valor": 5},
    ]
    assert split_costs_by_kind(expenses) == (5, 10)


def test_historical_ticket_window():
    sales = [
        {"data": "2025-06-30", "valor_bruto": 1000, "numero_pedidos": 10},
        {"data": "2025-01-15", "valor_bruto": 300, "numero_pedidos": 10},
        {"data": "2024-12-29", "valor_bruto": 9999, "numero_pedidos": 1},  # fora da janela
        {"data": "2025-07-01", "valor_bruto": 9999, "numero_pedidos": 1},  # depois da referência
        {"data": None, "valor_bruto": 9999, "numero_pedidos": 1},
    ]
    ticket = compute_historical_ticket(sales, reference=date(2025, 6, 30))
    assert ticket == pytest.approx(65)


def test_historical_ticket_clamps_month_end():
    sales = [{"data": "2025-02-28", "valor_bruto": 100, "numero_pedidos": 4}]
    assert compute_historical_ticket(sales, reference=date(2025, 8, 31)) == 25
    assert compute_historical_ticket(sales, reference=date(2025, 9, 1)) == 0


def test_breakeven_from_records(sales_rows, expense_rows):
    result = breakeven_from_records(sales_rows, expense_rows)
    assert result.receita == pytest.approx(250)
    assert result.pedidos == 13

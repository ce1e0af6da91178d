"""
Serviço de Ponto de Equilíbrio.

    razao_variavel = despesas variáveis / receita   (30% sem receita)
    receita_equilibrio = despesas fixas / (1 - razao_variavel)
    pedidos_equilibrio = ceil(receita_equilibrio / ticket médio)

O ticket usado é o do período; sem pedidos no período, o histórico dos
últimos meses.
"""

import logging
import math
from datetime import date, timedelta
from typing import Iterable, Optional

from painel_dre.config import HISTORICAL_TICKET_MONTHS, VARIABLE_COST_RATIO_FALLBACK
from painel_dre.models.dre_models import BreakevenResult, Expense, Sale
from painel_dre.services.aggregation_service import average_ticket, total_revenue
from painel_dre.services.normalizer import normalize_expenses, normalize_sales

logger = logging.getLogger(__name__)


def compute_breakeven(
    fixed_expenses: float,
    variable_expenses: float,
    revenue: float,
    current_ticket: float,
    historical_ticket: float = 0.0,
) -> BreakevenResult:
    """
    Calcula o ponto de equilíbrio.

    Com razão variável >= 1 não existe receita que cubra os custos: o
    resultado volta com atingivel=False e receita infinita.
    """
    ratio = variable_expenses / revenue if revenue > 0 else VARIABLE_COST_RATIO_FALLBACK
    ticket = current_ticket if current_ticket > 0 else historical_ticket

    if ratio >= 1:
        logger.warning(
            "Ponto de equilíbrio inatingível: custos variáveis (%.2f) >= receita (%.2f)",
            variable_expenses, revenue,
        )
        return BreakevenResult(
            receita=float("inf"),
            pedidos=0,
            razao_variavel=ratio,
            ticket_medio=ticket,
            atingivel=False,
        )

    breakeven_revenue = fixed_expenses / (1 - ratio)
    orders = math.ceil(breakeven_revenue / ticket) if ticket > 0 else 0

    return BreakevenResult(
        receita=breakeven_revenue,
        pedidos=orders,
        razao_variavel=ratio,
        ticket_medio=ticket,
    )


# ─── Classificação por tipo ───

def split_costs_by_kind(expenses: Iterable[dict | Expense]) -> tuple[float, float]:
    """
    Separa despesas em (fixas, variáveis) pelo tipo.

    fixa e marketing → fixas; variavel e taxa_automatica → variáveis.
    """
    fixed = 0.0
    variable = 0.0
    for expense in normalize_expenses(expenses):
        if expense.tipo.is_variable:
            variable += expense.valor
        else:
            fixed += expense.valor
    return fixed, variable


# ─── Ticket histórico ───

def _months_before(reference: date, months: int) -> date:
    """Mesmo dia N meses antes (limitado ao último dia do mês)."""
    month_index = reference.year * 12 + reference.month - 1 - months
    year, month = divmod(month_index, 12)
    month += 1
    # Último dia do mês de destino
    if month == 12:
        last_day = 31
    else:
        last_day = (date(year, month + 1, 1) - timedelta(days=1)).day
    return date(year, month, min(reference.day, last_day))


def compute_historical_ticket(
    sales: Iterable[dict | Sale],
    reference: Optional[date] = None,
    months: int = HISTORICAL_TICKET_MONTHS,
) -> float:
    """Ticket médio das vendas de [referência - N meses, referência]."""
    today = reference or date.today()
    start = _months_before(today, months)
    window = [
        s for s in normalize_sales(sales)
        if s.data is not None and start <= s.data <= today
    ]
    return average_ticket(window)


# ─── A partir dos registros ───

def breakeven_from_records(
    sales: Iterable[dict | Sale],
    expenses: Iterable[dict | Expense],
    historical_ticket: float = 0.0,
) -> BreakevenResult:
    """Ponto de equilíbrio do período a partir de vendas e despesas."""
    sales = normalize_sales(sales)
    fixed, variable = split_costs_by_kind(expenses)
    return compute_breakeven(
        fixed_expenses=fixed,
        variable_expenses=variable,
        revenue=total_revenue(sales),
        current_ticket=average_ticket(sales),
        historical_ticket=historical_ticket,
    )

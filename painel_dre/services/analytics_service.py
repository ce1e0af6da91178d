"""
Serviço de Análise Temporal da DRE.

Responsabilidades:
- DRE mês a mês de um ano
- DRE consolidada por ano
- Destaques (melhor lucro, maior receita, menor CMV)
- Variação entre períodos
"""

from datetime import date
from typing import Iterable, Optional

from painel_dre.models.dre_models import (
    BestMonths,
    Expense,
    MonthlyDRE,
    Sale,
    Variation,
    YearlyDRE,
)
from painel_dre.services.dre_service import compute_dre
from painel_dre.services.normalizer import normalize_expenses, normalize_sales
from painel_dre.utils.formatting import MONTH_NAMES_PT


def _month_key(day: date) -> str:
    return day.strftime("%Y-%m")


def _group_by_month(records: list, year: Optional[int] = None) -> dict[str, list]:
    groups: dict[str, list] = {}
    for record in records:
        if record.data is None:
            continue
        if year is not None and record.data.year != year:
            continue
        groups.setdefault(_month_key(record.data), []).append(record)
    return groups


# ─── Mensal ───

def compute_monthly_dre(
    sales: Iterable[dict | Sale],
    expenses: Iterable[dict | Expense],
    year: int,
) -> list[MonthlyDRE]:
    """DRE de cada mês (Jan..Dez) do ano informado."""
    sales_by_month = _group_by_month(normalize_sales(sales), year)
    expenses_by_month = _group_by_month(normalize_expenses(expenses), year)

    results = []
    for month in range(1, 13):
        mk = f"{year}-{month:02d}"
        month_sales = sales_by_month.get(mk, [])
        month_expenses = expenses_by_month.get(mk, [])
        results.append(MonthlyDRE(
            mes_chave=mk,
            ano=year,
            mes_nome=MONTH_NAMES_PT[month - 1],
            dre=compute_dre(month_sales, month_expenses),
            tem_dados=bool(month_sales or month_expenses),
        ))
    return results


# ─── Anual ───

def compute_yearly_dre(
    sales: Iterable[dict | Sale],
    expenses: Iterable[dict | Expense],
) -> list[YearlyDRE]:
    """DRE de cada ano com dados, do mais recente para o mais antigo."""
    sales = normalize_sales(sales)
    expenses = normalize_expenses(expenses)

    years = sorted(
        {r.data.year for r in [*sales, *expenses] if r.data is not None},
        reverse=True,
    )

    results = []
    for year in years:
        year_sales = [s for s in sales if s.data is not None and s.data.year == year]
        year_expenses = [e for e in expenses if e.data is not None and e.data.year == year]
        months = set(_group_by_month(year_sales)) | set(_group_by_month(year_expenses))
        results.append(YearlyDRE(
            ano=year,
            dre=compute_dre(year_sales, year_expenses),
            meses_com_dados=len(months),
        ))
    return results


# ─── Destaques ───

def best_months(monthly: list[MonthlyDRE]) -> BestMonths:
    """Melhor lucro líquido, maior receita e menor CMV % entre meses com dados."""
    with_data = [m for m in monthly if m.tem_dados]
    if not with_data:
        return BestMonths()

    with_revenue = [m for m in with_data if m.dre.receita_total > 0]

    # max/min devolvem o primeiro em caso de empate
    return BestMonths(
        melhor_lucro=max(with_data, key=lambda m: m.dre.lucro_liquido),
        maior_receita=max(with_data, key=lambda m: m.dre.receita_total),
        menor_cmv=(
            min(with_revenue, key=lambda m: m.dre.percentual(m.dre.cmv))
            if with_revenue else None
        ),
    )


def variation(current: float, previous: float) -> Variation:
    """Variação percentual de previous para current."""
    if previous == 0:
        return Variation(valor=0, tipo="neutral")
    change = (current - previous) / previous * 100
    if change > 0:
        kind = "positive"
    elif change < 0:
        kind = "negative"
    else:
        kind = "neutral"
    return Variation(valor=abs(change), tipo=kind)

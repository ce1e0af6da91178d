"""
Serviço de Períodos.

Filtros de data pré-definidos (hoje, últimos 7 dias, mês atual...) e
filtragem de registros por período fechado.
"""

from datetime import date, timedelta
from typing import Iterable, Optional, TypeVar

from painel_dre.models.dre_models import Period

T = TypeVar("T")

FILTER_LABELS = {
    "hoje": "Hoje",
    "ontem": "Ontem",
    "7dias": "Últimos 7 dias",
    "30dias": "Últimos 30 dias",
    "mes_atual": "Este mês",
    "mes_anterior": "Mês anterior",
    "proximo_mes": "Próximo mês",
    "ano_atual": "Este ano",
    "ano_anterior": "Ano anterior",
    "custom": "Personalizado",
}


def _first_of_month(year: int, month: int) -> date:
    # Aceita month fora de 1..12 (ex: 0 = dezembro do ano anterior)
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    return date(year, month, 1)


def _last_of_month(year: int, month: int) -> date:
    return _first_of_month(year, month + 1) - timedelta(days=1)


def resolve_period(
    filter_type: str = "mes_atual",
    today: Optional[date] = None,
    custom: Optional[tuple[date, date]] = None,
) -> Period:
    """
    Converte um filtro pré-definido em Period.

    Args:
        filter_type: Uma das chaves de FILTER_LABELS
        today: Data de referência (padrão: hoje)
        custom: (início, fim) quando filter_type == "custom"
    """
    if filter_type not in FILTER_LABELS:
        raise ValueError(f"Filtro de período desconhecido: {filter_type!r}")

    today = today or date.today()
    label = FILTER_LABELS[filter_type]

    if filter_type == "hoje":
        start, end = today, today
    elif filter_type == "ontem":
        start = end = today - timedelta(days=1)
    elif filter_type == "7dias":
        start, end = today - timedelta(days=6), today
    elif filter_type == "30dias":
        start, end = today - timedelta(days=29), today
    elif filter_type == "mes_atual":
        start = _first_of_month(today.year, today.month)
        end = _last_of_month(today.year, today.month)
    elif filter_type == "mes_anterior":
        start = _first_of_month(today.year, today.month - 1)
        end = _last_of_month(today.year, today.month - 1)
    elif filter_type == "proximo_mes":
        start = _first_of_month(today.year, today.month + 1)
        end = _last_of_month(today.year, today.month + 1)
    elif filter_type == "ano_atual":
        start, end = date(today.year, 1, 1), date(today.year, 12, 31)
    elif filter_type == "ano_anterior":
        start, end = date(today.year - 1, 1, 1), date(today.year - 1, 12, 31)
    else:
        if custom is None:
            raise ValueError("Filtro 'custom' exige o intervalo (início, fim)")
        start, end = custom
        if start > end:
            start, end = end, start
        label = f"{start.strftime('%d/%m/%Y')} a {end.strftime('%d/%m/%Y')}"

    return Period(start=start, end=end, label=label)


def filter_by_period(records: Iterable[T], period: Period) -> list[T]:
    """Mantém os registros com data dentro do período (sem data: descartado)."""
    return [r for r in records if period.contains(r.data)]

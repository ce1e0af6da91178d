"""
Normalizador de registros.

Converte linhas brutas (como vêm das tabelas de vendas e despesas) em
entidades tipadas. Nunca rejeita uma linha: números ausentes ou negativos
viram 0 e rótulos ausentes viram sentinelas.
"""

import logging
import math
from datetime import date, datetime
from typing import Iterable, Optional

from painel_dre.config import OTHERS_LABEL, UNKNOWN_LABEL
from painel_dre.models.dre_models import DRECategory, Expense, ExpenseKind, Sale

logger = logging.getLogger(__name__)


# ─── Helpers ───

def _amount(value) -> float:
    """Valor monetário não negativo (lixo vira 0)."""
    try:
        number = float(value or 0)
    except (ValueError, TypeError):
        return 0.0
    # NaN (células vazias do pandas) e inf ("1e400") viram 0
    if not (math.isfinite(number) and number > 0):
        return 0.0
    return number


def _count(value) -> int:
    return int(_amount(value))


def _label(value, default: str) -> str:
    if value is None:
        return default
    text = str(value).strip()
    if not text or text.lower() == "nan":
        return default
    return text


def _parse_date(value) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value)[:10])
    except (ValueError, TypeError):
        return None


def _parse_bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "sim", "s", "yes")
    return bool(value) if value == value else False  # NaN → False


def _kind(value, categoria: str) -> ExpenseKind:
    """Tipo da despesa; desconhecido herda a natureza da categoria DRE."""
    try:
        return ExpenseKind(str(value).strip().lower())
    except ValueError:
        category = DRECategory.from_label(categoria)
        if category is not None and category.is_variable:
            return ExpenseKind.VARIAVEL
        return ExpenseKind.FIXA


# ─── Vendas ───

def normalize_sale(row: dict | Sale) -> Sale:
    """Converte uma linha da tabela de vendas em Sale."""
    if isinstance(row, Sale):
        return row
    return Sale(
        data=_parse_date(row.get("data")),
        canal=_label(row.get("canal"), UNKNOWN_LABEL),
        forma_pagamento=_label(row.get("forma_pagamento"), UNKNOWN_LABEL),
        valor_bruto=_amount(row.get("valor_bruto")),
        numero_pedidos=_count(row.get("numero_pedidos")),
        id=_label(row.get("id"), ""),
    )


def normalize_sales(rows: Iterable[dict | Sale]) -> list[Sale]:
    sales = [normalize_sale(r) for r in rows]
    logger.debug("Normalized %d sales", len(sales))
    return sales


# ─── Despesas ───

def normalize_expense(row: dict | Expense) -> Expense:
    """Converte uma linha da tabela de despesas em Expense."""
    if isinstance(row, Expense):
        return row
    categoria = _label(row.get("categoria"), OTHERS_LABEL)
    return Expense(
        data=_parse_date(row.get("data")),
        nome=_label(row.get("nome"), ""),
        categoria=categoria,
        subcategoria=_label(row.get("subcategoria"), OTHERS_LABEL),
        tipo=_kind(row.get("tipo"), categoria),
        valor=_amount(row.get("valor")),
        pago=_parse_bool(row.get("pago", False)),
        data_vencimento=_parse_date(row.get("data_vencimento")),
        data_pagamento=_parse_date(row.get("data_pagamento")),
        id=_label(row.get("id"), ""),
    )


def normalize_expenses(rows: Iterable[dict | Expense]) -> list[Expense]:
    expenses = [normalize_expense(r) for r in rows]
    logger.debug("Normalized %d expenses", len(expenses))
    return expenses

"""
Serviço de Agregação.

Responsabilidades:
- Receita por canal e por forma de pagamento
- Despesas por categoria e por subcategoria
- Totais de receita, pedidos e ticket médio
- Ranking top N com linha "Outros"
"""

from typing import Iterable

from painel_dre.config import OTHERS_LABEL, TOP_N_CATEGORIES
from painel_dre.models.dre_models import (
    CategoryShare,
    DRECategory,
    Expense,
    Sale,
)

SALE_KEYS = ("canal", "forma_pagamento")


# ─── Vendas ───

def sum_sales_by(sales: Iterable[Sale], key: str) -> dict[str, float]:
    """Soma valor_bruto por canal ou forma de pagamento."""
    if key not in SALE_KEYS:
        raise ValueError(f"Chave de agrupamento inválida: {key!r} (use {SALE_KEYS})")

    totals: dict[str, float] = {}
    for sale in sales:
        group = getattr(sale, key)
        totals[group] = totals.get(group, 0) + sale.valor_bruto
    return totals


def total_revenue(sales: Iterable[Sale]) -> float:
    return sum(s.valor_bruto for s in sales)


def total_orders(sales: Iterable[Sale]) -> int:
    return sum(s.numero_pedidos for s in sales)


def average_ticket(sales: list[Sale]) -> float:
    """Receita / pedidos; 0 quando não há pedidos."""
    orders = total_orders(sales)
    return total_revenue(sales) / orders if orders > 0 else 0


# ─── Despesas ───

def sum_expenses_by_category(expenses: Iterable[Expense]) -> dict[str, float]:
    """Despesas por categoria, sem restringir às categorias DRE."""
    totals: dict[str, float] = {}
    for expense in expenses:
        totals[expense.categoria] = totals.get(expense.categoria, 0) + expense.valor
    return totals


def sum_expenses_by_subcategory(expenses: Iterable[Expense], categoria: str) -> dict[str, float]:
    """Subcategorias de uma categoria (sem subcategoria cai em "Outros")."""
    totals: dict[str, float] = {}
    for expense in expenses:
        if expense.categoria != categoria:
            continue
        key = expense.subcategoria or OTHERS_LABEL
        totals[key] = totals.get(key, 0) + expense.valor
    return totals


def sum_by_dre_category(expenses: Iterable[Expense]) -> dict[DRECategory, float]:
    """Totais das seis categorias DRE; o resto é ignorado."""
    totals = {c: 0.0 for c in DRECategory}
    for expense in expenses:
        category = expense.dre_category
        if category is not None:
            totals[category] += expense.valor
    return totals


# ─── Ranking ───

def top_n(
    totals: dict[str, float],
    n: int = TOP_N_CATEGORIES,
    others_label: str = OTHERS_LABEL,
) -> list[CategoryShare]:
    """
    Top N por valor (desc) + linha "Outros" com o restante.

    sorted() é estável: empates mantêm a ordem em que as chaves apareceram.
    """
    if not totals:
        return []

    sorted_items = sorted(totals.items(), key=lambda x: x[1], reverse=True)
    top = sorted_items[:n]
    others_sum = sum(v for _, v in sorted_items[n:])
    total = sum(v for _, v in sorted_items)

    results = [
        CategoryShare(
            nome=name,
            valor=val,
            percentual=(val / total * 100) if total > 0 else 0,
        )
        for name, val in top
    ]

    if others_sum > 0:
        results.append(CategoryShare(
            nome=others_label,
            valor=others_sum,
            percentual=(others_sum / total * 100) if total > 0 else 0,
        ))

    return results

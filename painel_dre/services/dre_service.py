"""
Serviço da DRE (Demonstração do Resultado do Exercício).

Estrutura:
    Receita Total (bruta, sem descontar taxas)
    (-) Custos variáveis: Impostos, CMV, Despesas com Vendas
    (=) Lucro Bruto
    (-) Despesas fixas: CMO, Marketing, Ocupação
    (=) Lucro Líquido

Taxas de venda entram só como despesa (Despesas com Vendas), nunca como
dedução da receita, para não serem contadas duas vezes.
"""

import logging
from typing import Iterable

from painel_dre.models.dre_models import (
    DRECategory,
    DREResult,
    Expense,
    FIXED_CATEGORIES,
    Sale,
    VARIABLE_CATEGORIES,
)
from painel_dre.services.aggregation_service import (
    sum_by_dre_category,
    sum_expenses_by_category,
    sum_expenses_by_subcategory,
    sum_sales_by,
    total_orders,
    total_revenue,
)
from painel_dre.services.normalizer import normalize_expenses, normalize_sales

logger = logging.getLogger(__name__)


def _margin(value: float, revenue: float) -> float:
    return (value / revenue * 100) if revenue > 0 else 0


def compute_dre(
    sales: Iterable[dict | Sale],
    expenses: Iterable[dict | Expense],
    historical_ticket: float = 0.0,
) -> DREResult:
    """
    Calcula a DRE de um período.

    Args:
        sales: Vendas do período (linhas brutas ou Sale)
        expenses: Despesas do período (linhas brutas ou Expense)
        historical_ticket: Ticket médio usado quando o período não tem pedidos

    Returns:
        DREResult com totais, margens e detalhamentos
    """
    sales = normalize_sales(sales)
    expenses = normalize_expenses(expenses)

    receita_total = total_revenue(sales)
    total_pedidos = total_orders(sales)
    ticket_medio = receita_total / total_pedidos if total_pedidos > 0 else historical_ticket

    by_category = sum_by_dre_category(expenses)
    total_custos_variaveis = sum(by_category[c] for c in VARIABLE_CATEGORIES)
    total_despesas_fixas = sum(by_category[c] for c in FIXED_CATEGORIES)

    despesas_por_categoria = sum_expenses_by_category(expenses)
    despesas_por_subcategoria = {
        categoria: sum_expenses_by_subcategory(expenses, categoria)
        for categoria in despesas_por_categoria
    }

    lucro_bruto = receita_total - total_custos_variaveis
    lucro_liquido = lucro_bruto - total_despesas_fixas

    logger.debug(
        "DRE: %d vendas, %d despesas, receita=%.2f, lucro=%.2f",
        len(sales), len(expenses), receita_total, lucro_liquido,
    )

    return DREResult(
        receita_total=receita_total,
        impostos=by_category[DRECategory.IMPOSTOS],
        cmv=by_category[DRECategory.CMV],
        despesas_vendas=by_category[DRECategory.DESPESAS_VENDAS],
        cmo=by_category[DRECategory.CMO],
        marketing=by_category[DRECategory.MARKETING],
        ocupacao=by_category[DRECategory.OCUPACAO],
        total_custos_variaveis=total_custos_variaveis,
        total_despesas_fixas=total_despesas_fixas,
        total_despesas=total_custos_variaveis + total_despesas_fixas,
        lucro_bruto=lucro_bruto,
        margem_bruta=_margin(lucro_bruto, receita_total),
        lucro_liquido=lucro_liquido,
        margem_liquida=_margin(lucro_liquido, receita_total),
        ticket_medio=ticket_medio,
        total_pedidos=total_pedidos,
        receitas_por_canal=sum_sales_by(sales, "canal"),
        receitas_por_pagamento=sum_sales_by(sales, "forma_pagamento"),
        despesas_por_categoria=despesas_por_categoria,
        despesas_por_subcategoria=despesas_por_subcategoria,
    )

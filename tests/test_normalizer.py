"""Normalização de linhas brutas."""
from datetime import date, datetime

import pytest

from painel_dre.models.dre_models import DRECategory, ExpenseKind
from painel_dre.services.dre_service import compute_dre
from painel_dre.services.normalizer import normalize_expense, normalize_sale


def test_sale_fields():
    sale = normalize_sale({
        "id": "abc", "data": "2025-03-10T12:00:00", "canal": " Salão ",
        "forma_pagamento": "Pix", "valor_bruto": "150.5", "numero_pedidos": "3",
    })
    assert sale.data == date(2025, 3, 10)
    assert sale.canal == "Salão"
    assert sale.valor_bruto == 150.5
    assert sale.numero_pedidos == 3
    assert sale.ticket_medio == 150.5 / 3


def test_sale_defaults():
    sale = normalize_sale({})
    assert sale.data is None
    assert sale.canal == "Desconhecido"
    assert sale.forma_pagamento == "Desconhecido"
    assert sale.valor_bruto == 0
    assert sale.numero_pedidos == 0
    assert sale.ticket_medio is None


def test_negative_and_nan_amounts_become_zero():
    assert normalize_sale({"valor_bruto": -10}).valor_bruto == 0
    assert normalize_sale({"valor_bruto": float("nan")}).valor_bruto == 0
    assert normalize_sale({"numero_pedidos": -4}).numero_pedidos == 0


def test_dates_accept_date_objects_and_reject_garbage():
    assert normalize_sale({"data": date(2025, 1, 2)}).data == date(2025, 1, 2)
    assert normalize_sale({"data": datetime(2025, 1, 2, 8, 30)}).data == date(2025, 1, 2)
    assert normalize_sale({"data": "02/01/2025"}).data is None


def test_expense_fields():
    expense = normalize_expense({
        "id": "e1", "data": "2025-03-05", "nome": "Aluguel", "categoria": "Ocupação",
        "subcategoria": "", "tipo": "FIXA", "valor": 2500, "pago": "true",
        "data_vencimento": "2025-03-10", "data_pagamento": None,
    })
    assert expense.tipo is ExpenseKind.FIXA
    assert expense.subcategoria == "Outros"
    assert expense.pago is True
    assert expense.data_vencimento == date(2025, 3, 10)
    assert expense.data_pagamento is None
    assert expense.dre_category is DRECategory.OCUPACAO


def test_expense_defaults():
    expense = normalize_expense({"valor": None})
    assert expense.categoria == "Outros"
    assert expense.subcategoria == "Outros"
    assert expense.valor == 0
    assert expense.pago is False
    assert expense.tipo is ExpenseKind.FIXA
    assert expense.dre_category is None


def test_kind_predicates():
    assert ExpenseKind.TAXA_AUTOMATICA.is_variable
    assert not ExpenseKind.MARKETING.is_variable
    assert DRECategory.DESPESAS_VENDAS.is_variable
    assert not DRECategory.MARKETING.is_variable


def test_already_normalized_passthrough():
    sale = normalize_sale({"valor_bruto": 10})
    assert normalize_sale(sale) is sale


@pytest.mark.parametrize("value", ["inf", "-inf", "1e400", float("inf")])
def test_non_finite_numbers_become_zero(value):
    sale = normalize_sale({"valor_bruto": value, "numero_pedidos": value})
    assert sale.valor_bruto == 0
    assert sale.numero_pedidos == 0
    assert normalize_expense({"categoria": "CMV", "valor": value}).valor == 0


def test_non_finite_amounts_keep_dre_finite():
    dre = compute_dre(
        [{"valor_bruto": "100", "numero_pedidos": "inf"}, {"valor_bruto": "inf", "numero_pedidos": 1}],
        [{"categoria": "CMV", "valor": "inf"}],
    )
    assert dre.receita_total == 100
    assert dre.lucro_bruto == 100
    assert dre.margem_bruta == 100

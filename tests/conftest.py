"""Fixtures compartilhadas dos testes da DRE."""
import pytest


@pytest.fixture
def sales_rows():
    """Duas vendas do cenário de referência (receita 1500, 75 pedidos)."""
    return [
        {"id": "s1", "data": "2025-03-10", "canal": "Salão", "forma_pagamento": "Pix",
         "valor_bruto": 1000, "numero_pedidos": 50},
        {"id": "s2", "data": "2025-03-11", "canal": "Delivery", "forma_pagamento": "Cartão",
         "valor_bruto": 500, "numero_pedidos": 25},
    ]


@pytest.fixture
def expense_rows():
    """CMV 300 (variável) e CMO 200 (fixa)."""
    return [
        {"id": "e1", "data": "2025-03-05", "nome": "Carnes", "categoria": "CMV",
         "subcategoria": "Proteínas", "tipo": "variavel", "valor": 300, "pago": True},
        {"id": "e2", "data": "2025-03-05", "nome": "Folha", "categoria": "CMO",
         "subcategoria": "Salários", "tipo": "fixa", "valor": 200, "pago": False},
    ]


@pytest.fixture
def full_expense_rows():
    """Uma despesa em cada categoria DRE e uma fora da DRE."""
    return [
        {"data": "2025-03-01", "categoria": "Impostos", "tipo": "variavel", "valor": 50},
        {"data": "2025-03-01", "categoria": "CMV", "subcategoria": "Bebidas", "tipo": "variavel", "valor": 120},
        {"data": "2025-03-01", "categoria": "CMV", "subcategoria": "Proteínas", "tipo": "variavel", "valor": 180},
        {"data": "2025-03-01", "categoria": "Despesas com Vendas", "tipo": "taxa_automatica", "valor": 30},
        {"data": "2025-03-01", "categoria": "CMO", "tipo": "fixa", "valor": 200},
        {"data": "2025-03-01", "categoria": "Marketing", "tipo": "marketing", "valor": 40},
        {"data": "2025-03-01", "categoria": "Ocupação", "tipo": "fixa", "valor": 100},
        {"data": "2025-03-01", "categoria": "Administrativo", "tipo": "fixa", "valor": 75},
    ]

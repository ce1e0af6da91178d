"""
Modelos de dados da DRE.
Dataclasses tipadas para vendas, despesas e resultados de cálculo.
"""

import unicodedata
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional


# ─── Tipo de despesa ───

class ExpenseKind(str, Enum):
    """Natureza da despesa para fins de ponto de equilíbrio."""
    FIXA = "fixa"
    VARIAVEL = "variavel"
    MARKETING = "marketing"
    TAXA_AUTOMATICA = "taxa_automatica"

    @property
    def is_variable(self) -> bool:
        return self in (ExpenseKind.VARIAVEL, ExpenseKind.TAXA_AUTOMATICA)


# ─── Categorias DRE ───

def _fold(text: str) -> str:
    """Remove acentos, espaços extras e caixa para comparar rótulos."""
    decomposed = unicodedata.normalize("NFKD", text)
    ascii_only = "".join(c for c in decomposed if not unicodedata.combining(c))
    return " ".join(ascii_only.lower().split())


class DRECategory(str, Enum):
    """As seis categorias canônicas da DRE."""
    IMPOSTOS = "Impostos"
    CMV = "CMV"
    DESPESAS_VENDAS = "Despesas com Vendas"
    CMO = "CMO"
    MARKETING = "Marketing"
    OCUPACAO = "Ocupação"

    @property
    def is_variable(self) -> bool:
        return self in VARIABLE_CATEGORIES

    @classmethod
    def from_label(cls, label: Optional[str]) -> Optional["DRECategory"]:
        """
        Resolve o rótulo de uma despesa para uma categoria DRE.

        Aceita os rótulos curtos e os longos da tabela de categorias
        ("CMV – Custo da Mercadoria Vendida"). Retorna None fora da DRE.
        """
        if not label:
            return None
        folded = _fold(label)
        for category in cls:
            if folded == _fold(category.value):
                return category
        # Rótulos longos: "CMV – ...", "CMO - ..."
        head = folded.replace("–", "-").split(" - ")[0].strip()
        for category in (cls.CMV, cls.CMO):
            if head == _fold(category.value):
                return category
        return None


VARIABLE_CATEGORIES = (DRECategory.IMPOSTOS, DRECategory.CMV, DRECategory.DESPESAS_VENDAS)
FIXED_CATEGORIES = (DRECategory.CMO, DRECategory.MARKETING, DRECategory.OCUPACAO)


# ─── Registros ───

@dataclass(frozen=True)
class Sale:
    """Lançamento de venda de um canal/forma de pagamento."""
    data: Optional[date]
    canal: str
    forma_pagamento: str
    valor_bruto: float = 0.0
    numero_pedidos: int = 0
    id: str = ""

    @property
    def ticket_medio(self) -> Optional[float]:
        if self.numero_pedidos > 0:
            return self.valor_bruto / self.numero_pedidos
        return None


@dataclass(frozen=True)
class Expense:
    """Lançamento de despesa."""
    data: Optional[date]
    nome: str
    categoria: str
    subcategoria: str
    tipo: ExpenseKind
    valor: float = 0.0
    pago: bool = False
    data_vencimento: Optional[date] = None
    data_pagamento: Optional[date] = None
    id: str = ""

    @property
    def dre_category(self) -> Optional[DRECategory]:
        return DRECategory.from_label(self.categoria)


# ─── Resultados ───

@dataclass(frozen=True)
class DREResult:
    """Demonstração do Resultado do Exercício de um período."""
    receita_total: float = 0.0

    # Custos e despesas por categoria DRE
    impostos: float = 0.0
    cmv: float = 0.0
    despesas_vendas: float = 0.0
    cmo: float = 0.0
    marketing: float = 0.0
    ocupacao: float = 0.0

    # Totais
    total_custos_variaveis: float = 0.0
    total_despesas_fixas: float = 0.0
    total_despesas: float = 0.0

    # Resultado
    lucro_bruto: float = 0.0
    margem_bruta: float = 0.0
    lucro_liquido: float = 0.0
    margem_liquida: float = 0.0

    # Métricas
    ticket_medio: float = 0.0
    total_pedidos: int = 0

    # Detalhamento
    receitas_por_canal: dict[str, float] = field(default_factory=dict)
    receitas_por_pagamento: dict[str, float] = field(default_factory=dict)
    despesas_por_categoria: dict[str, float] = field(default_factory=dict)
    despesas_por_subcategoria: dict[str, dict[str, float]] = field(default_factory=dict)

    def category_total(self, category: DRECategory) -> float:
        return {
            DRECategory.IMPOSTOS: self.impostos,
            DRECategory.CMV: self.cmv,
            DRECategory.DESPESAS_VENDAS: self.despesas_vendas,
            DRECategory.CMO: self.cmo,
            DRECategory.MARKETING: self.marketing,
            DRECategory.OCUPACAO: self.ocupacao,
        }[category]

    def percentual(self, valor: float) -> float:
        """Participação de um valor na receita (0 sem receita)."""
        return (valor / self.receita_total * 100) if self.receita_total > 0 else 0


@dataclass(frozen=True)
class BreakevenResult:
    """Ponto de equilíbrio em receita e em número de pedidos."""
    receita: float = 0.0
    pedidos: int = 0
    razao_variavel: float = 0.0
    ticket_medio: float = 0.0
    atingivel: bool = True


# ─── Período ───

@dataclass(frozen=True)
class Period:
    """Intervalo de datas fechado nas duas pontas."""
    start: date
    end: date
    label: str = ""

    def contains(self, day: Optional[date]) -> bool:
        return day is not None and self.start <= day <= self.end


# ─── Análise temporal ───

@dataclass(frozen=True)
class MonthlyDRE:
    """DRE de um mês do ano."""
    mes_chave: str  # "YYYY-MM"
    ano: int
    mes_nome: str
    dre: DREResult
    tem_dados: bool = False


@dataclass(frozen=True)
class YearlyDRE:
    """DRE consolidada de um ano."""
    ano: int
    dre: DREResult
    meses_com_dados: int = 0


@dataclass(frozen=True)
class BestMonths:
    """Destaques do ano."""
    melhor_lucro: Optional[MonthlyDRE] = None
    maior_receita: Optional[MonthlyDRE] = None
    menor_cmv: Optional[MonthlyDRE] = None


@dataclass(frozen=True)
class Variation:
    """Variação percentual entre dois valores."""
    valor: float = 0.0
    tipo: str = "neutral"  # positive, negative, neutral


# ─── Breakdown ───

@dataclass
class CategoryShare:
    """Participação de uma categoria (ou canal) no total."""
    nome: str
    valor: float = 0.0
    percentual: float = 0.0

"""
Exportação da DRE em texto simples.
"""

import logging
import re
from pathlib import Path

from painel_dre.models.dre_models import DREResult
from painel_dre.utils.formatting import format_brl, format_percent

logger = logging.getLogger(__name__)

DRE_TEMPLATE = """\
DEMONSTRAÇÃO DO RESULTADO DO EXERCÍCIO
{restaurante}
Período: {periodo}

RECEITAS
Receita Total: {receita_total}

CUSTOS E DESPESAS VARIÁVEIS
(-) Impostos: {impostos}
(-) CMV: {cmv}
(-) Despesas com Vendas: {despesas_vendas}
(=) Total Custos Variáveis: {total_custos_variaveis}

(=) Lucro Bruto: {lucro_bruto} ({margem_bruta})

DESPESAS FIXAS
(-) CMO: {cmo}
(-) Marketing: {marketing}
(-) Ocupação: {ocupacao}
(=) Total Despesas Fixas: {total_despesas_fixas}

RESULTADO
(=) Lucro Líquido: {lucro_liquido} ({margem_liquida})

MÉTRICAS
Ticket Médio: {ticket_medio}
Total de Pedidos: {total_pedidos}
"""


def render_dre_text(dre: DREResult, restaurant_name: str, period_label: str) -> str:
    """Relatório da DRE no modelo fixo de exportação."""
    return DRE_TEMPLATE.format(
        restaurante=restaurant_name,
        periodo=period_label,
        receita_total=format_brl(dre.receita_total),
        impostos=format_brl(dre.impostos),
        cmv=format_brl(dre.cmv),
        despesas_vendas=format_brl(dre.despesas_vendas),
        total_custos_variaveis=format_brl(dre.total_custos_variaveis),
        lucro_bruto=format_brl(dre.lucro_bruto),
        margem_bruta=format_percent(dre.margem_bruta),
        cmo=format_brl(dre.cmo),
        marketing=format_brl(dre.marketing),
        ocupacao=format_brl(dre.ocupacao),
        total_despesas_fixas=format_brl(dre.total_despesas_fixas),
        lucro_liquido=format_brl(dre.lucro_liquido),
        margem_liquida=format_percent(dre.margem_liquida),
        ticket_medio=format_brl(dre.ticket_medio),
        total_pedidos=dre.total_pedidos,
    )


def export_filename(restaurant_name: str, period_label: str) -> str:
    """Nome do arquivo: DRE_<restaurante>_<período>.txt (sem barras)."""
    name = f"DRE_{restaurant_name}_{period_label}.txt"
    return re.sub(r'[\\/:*?"<>|]', "-", name)


def write_dre_report(
    directory: Path,
    dre: DREResult,
    restaurant_name: str,
    period_label: str,
) -> Path:
    """Grava o relatório em directory e retorna o caminho do arquivo."""
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / export_filename(restaurant_name, period_label)
    path.write_text(render_dre_text(dre, restaurant_name, period_label), encoding="utf-8")
    logger.info("DRE exportada em %s", path)
    return path

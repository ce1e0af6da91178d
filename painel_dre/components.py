"""
Componentes HTML reutilizáveis para o painel.
Retornam strings HTML para uso com st.markdown(html, unsafe_allow_html=True).
"""

from html import escape

from painel_dre.models.dre_models import BreakevenResult, DRECategory, DREResult
from painel_dre.styles import SECTION_COLORS
from painel_dre.utils.formatting import format_brl, format_percent


def page_header(restaurant: str, period_label: str) -> str:
    """Header da página da DRE."""
    return f"""
    <div class="dre-header">
        <h1>DRE &middot; {escape(restaurant)}</h1>
        <div class="meta">Demonstração do Resultado do Exercício &middot; {escape(period_label)}</div>
    </div>
    """


def section_header(title: str, subtitle: str = None) -> str:
    """Header de seção com borda accent."""
    sub_html = f'<div class="sub">{escape(subtitle)}</div>' if subtitle else ""
    return f"""
    <div class="section-hdr">
        <h2>{escape(title)}</h2>
        {sub_html}
    </div>
    """


def warning_banner(message: str) -> str:
    """Banner de alerta (message pode conter <strong>)."""
    return f'<div class="warn-banner">{message}</div>'


def loss_banner(dre: DREResult, breakeven: BreakevenResult) -> str:
    """Alerta de prejuízo; a distância ao equilíbrio só aparece quando positiva."""
    gap = ""
    if breakeven.atingivel and breakeven.receita > dre.receita_total:
        gap = f" (faltam {format_brl(breakeven.receita - dre.receita_total)} para o equilíbrio)"
    return warning_banner(f"Prejuízo no período: <strong>{format_brl(dre.lucro_liquido)}</strong>{gap}")


def _row(label: str, valor: float, dre: DREResult, css: str = "", color: str = None) -> str:
    style = f' style="color:{color}"' if color else ""
    return (
        f'<tr class="{css}"><td{style}>{escape(label)}</td>'
        f'<td class="valor">{format_brl(valor)}</td>'
        f'<td class="valor">{format_percent(dre.percentual(valor))}</td></tr>'
    )


def _subcategories(dre: DREResult, category: DRECategory) -> dict[str, float]:
    """Subcategorias de todos os rótulos que resolvem para a categoria DRE."""
    merged: dict[str, float] = {}
    for label, subs in dre.despesas_por_subcategoria.items():
        if DRECategory.from_label(label) is category:
            for sub, valor in subs.items():
                merged[sub] = merged.get(sub, 0) + valor
    return merged


def dre_table(dre: DREResult, show_subcategories: bool = False) -> str:
    """Tabela da DRE: valor e % da receita em cada linha."""
    rows = [_row("Receita Total", dre.receita_total, dre, "total", SECTION_COLORS["receita"])]

    def block(categories, total_label, total_value, color):
        for category in categories:
            rows.append(_row(f"(-) {category.value}", dre.category_total(category), dre))
            if show_subcategories:
                for sub, valor in _subcategories(dre, category).items():
                    rows.append(_row(sub, valor, dre, "sub"))
        rows.append(_row(total_label, total_value, dre, "total", color))

    block(
        (DRECategory.IMPOSTOS, DRECategory.CMV, DRECategory.DESPESAS_VENDAS),
        "(=) Total Custos Variáveis", dre.total_custos_variaveis, SECTION_COLORS["variaveis"],
    )
    rows.append(_row("(=) Lucro Bruto", dre.lucro_bruto, dre, "total", SECTION_COLORS["resultado"]))
    block(
        (DRECategory.CMO, DRECategory.MARKETING, DRECategory.OCUPACAO),
        "(=) Total Despesas Fixas", dre.total_despesas_fixas, SECTION_COLORS["fixas"],
    )
    rows.append(_row("(=) Lucro Líquido", dre.lucro_liquido, dre, "total", SECTION_COLORS["resultado"]))

    return f'<table class="dre-table">{"".join(rows)}</table>'


def footer(restaurant: str) -> str:
    """Footer minimalista."""
    return f"""
    <div class="dre-footer">
        Painel DRE &middot; {escape(restaurant)} &middot; Valores brutos, taxas lançadas como despesa
    </div>
    """

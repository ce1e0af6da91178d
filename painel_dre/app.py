"""
Painel DRE — Demonstração do Resultado e Ponto de Equilíbrio.

Executar:
    streamlit run painel_dre/app.py --server.port 8502
"""

import logging
import sys
from datetime import date
from pathlib import Path

# Garante que o diretório raiz do projeto está no sys.path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import streamlit as st
import plotly.graph_objects as go
import pandas as pd

from painel_dre.components import dre_table, footer, loss_banner, page_header, section_header, warning_banner
from painel_dre.config import CACHE_TTL, RESTAURANT_NAME, TOP_N_CATEGORIES
from painel_dre.data.loaders import load_expenses, load_sales
from painel_dre.exceptions import DataLoadError
from painel_dre.services.aggregation_service import top_n
from painel_dre.services.analytics_service import (
    best_months,
    compute_monthly_dre,
    compute_yearly_dre,
    variation,
)
from painel_dre.services.breakeven_service import breakeven_from_records, compute_historical_ticket
from painel_dre.services.dre_service import compute_dre
from painel_dre.services.export_service import export_filename, render_dre_text
from painel_dre.services.normalizer import normalize_expenses, normalize_sales
from painel_dre.services.period_service import FILTER_LABELS, filter_by_period, resolve_period
from painel_dre.styles import CHART_COLORS, COLORS, CUSTOM_CSS, PLOTLY_TEMPLATE
from painel_dre.utils.formatting import format_brl, format_int, format_percent, month_label
from painel_dre.utils.logger import setup_logging

setup_logging()
logger = logging.getLogger("painel_dre.app")


# ═══════════════════════════════════════════════════════
# PAGE CONFIG
# ═══════════════════════════════════════════════════════

st.set_page_config(
    page_title="Painel DRE",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown(CUSTOM_CSS, unsafe_allow_html=True)


# ═══════════════════════════════════════════════════════
# DATA LOADING (cached)
# ═══════════════════════════════════════════════════════

@st.cache_data(ttl=CACHE_TTL, show_spinner=False)
def load_raw_data():
    """Lê as tabelas exportadas de vendas e despesas (cache de 5 min)."""
    return load_sales(), load_expenses()


# ═══════════════════════════════════════════════════════
# SIDEBAR
# ═══════════════════════════════════════════════════════

with st.sidebar:
    st.title("Filtros")
    filter_type = st.selectbox(
        "Período",
        options=list(FILTER_LABELS),
        index=list(FILTER_LABELS).index("mes_atual"),
        format_func=FILTER_LABELS.get,
    )
    custom_range = None
    if filter_type == "custom":
        today = date.today()
        picked = st.date_input("Intervalo", value=(today.replace(day=1), today))
        if isinstance(picked, tuple) and len(picked) == 2:
            custom_range = picked
        else:
            st.info("Selecione início e fim.")
            st.stop()
    show_subcategories = st.checkbox("Detalhar subcategorias", value=False)
    st.divider()
    if st.button("Recarregar Dados", use_container_width=True):
        load_raw_data.clear()
        st.rerun()
    st.caption("Cache: 5 minutos")

period = resolve_period(filter_type, custom=custom_range)


# ═══════════════════════════════════════════════════════
# LOAD & COMPUTE
# ═══════════════════════════════════════════════════════

st.markdown(page_header(RESTAURANT_NAME, period.label), unsafe_allow_html=True)

try:
    with st.spinner("Carregando vendas e despesas..."):
        sales_raw, expenses_raw = load_raw_data()
except DataLoadError as e:
    logger.exception("Falha ao carregar dados da DRE")
    st.error(f"Não foi possível carregar os dados da DRE: {e}")
    st.info("Verifique PAINEL_DRE_DATA_DIR e os arquivos vendas.csv / despesas.csv.")
    st.stop()

all_sales = normalize_sales(sales_raw)
all_expenses = normalize_expenses(expenses_raw)

sales = filter_by_period(all_sales, period)
expenses = filter_by_period(all_expenses, period)

hist_ticket = compute_historical_ticket(all_sales)
dre = compute_dre(sales, expenses, historical_ticket=hist_ticket)
breakeven = breakeven_from_records(sales, expenses, historical_ticket=hist_ticket)


# ═══════════════════════════════════════════════════════
# WARNINGS
# ═══════════════════════════════════════════════════════

warnings_html = []

if not sales and not expenses:
    warnings_html.append(warning_banner("Nenhuma venda ou despesa registrada no período."))

if not breakeven.atingivel:
    warnings_html.append(warning_banner(
        f"Ponto de equilíbrio inatingível: custos variáveis representam "
        f"<strong>{format_percent(breakeven.razao_variavel * 100)}</strong> da receita."
    ))
elif dre.receita_total > 0 and dre.lucro_liquido < 0:
    warnings_html.append(loss_banner(dre, breakeven))

if warnings_html:
    st.markdown("".join(warnings_html), unsafe_allow_html=True)


# ═══════════════════════════════════════════════════════
# ROW 1 — RESUMO
# ═══════════════════════════════════════════════════════

st.markdown(section_header("Resumo do Período"), unsafe_allow_html=True)

c1, c2, c3, c4 = st.columns(4)

with c1:
    st.metric(label="Receita Total", value=format_brl(dre.receita_total))

with c2:
    st.metric(
        label="Lucro Bruto",
        value=format_brl(dre.lucro_bruto),
        delta=format_percent(dre.margem_bruta),
        delta_color="off",
        help="Receita - custos variáveis (Impostos, CMV, Despesas com Vendas)",
    )

with c3:
    st.metric(
        label="Lucro Líquido",
        value=format_brl(dre.lucro_liquido),
        delta=format_percent(dre.margem_liquida),
        delta_color="normal" if dre.lucro_liquido >= 0 else "inverse",
        help="Lucro bruto - despesas fixas (CMO, Marketing, Ocupação)",
    )

with c4:
    st.metric(
        label="Ticket Médio",
        value=format_brl(dre.ticket_medio),
        help=f"{format_int(dre.total_pedidos)} pedidos no período",
    )


# ═══════════════════════════════════════════════════════
# ROW 2 — DRE
# ═══════════════════════════════════════════════════════

st.markdown(section_header("Demonstração do Resultado", "Valores e % da receita"), unsafe_allow_html=True)
st.markdown(dre_table(dre, show_subcategories=show_subcategories), unsafe_allow_html=True)

st.download_button(
    "Exportar DRE (.txt)",
    data=render_dre_text(dre, RESTAURANT_NAME, period.label),
    file_name=export_filename(RESTAURANT_NAME, period.label),
    mime="text/plain",
)


# ═══════════════════════════════════════════════════════
# ROW 3 — PONTO DE EQUILÍBRIO
# ═══════════════════════════════════════════════════════

st.markdown(section_header("Ponto de Equilíbrio"), unsafe_allow_html=True)

b1, b2, b3 = st.columns(3)

with b1:
    st.metric(
        label="Receita de Equilíbrio",
        value=format_brl(breakeven.receita) if breakeven.atingivel else "Inatingível",
        help="Despesas fixas / (1 - % custos variáveis)",
    )

with b2:
    st.metric(
        label="Pedidos de Equilíbrio",
        value=format_int(breakeven.pedidos) if breakeven.atingivel else "—",
        help=f"Ticket usado: {format_brl(breakeven.ticket_medio)}",
    )

with b3:
    st.metric(
        label="% Custos Variáveis",
        value=format_percent(breakeven.razao_variavel * 100),
        help="Sem receita no período, usa 30%",
    )


# ═══════════════════════════════════════════════════════
# ROW 4 — RECEITAS E DESPESAS
# ═══════════════════════════════════════════════════════

st.markdown(section_header("Receitas e Despesas", "Canais, formas de pagamento e categorias"), unsafe_allow_html=True)


def make_donut(totals: dict[str, float], title: str):
    shares = top_n(totals, TOP_N_CATEGORIES)
    fig = go.Figure(go.Pie(
        labels=[s.nome for s in shares],
        values=[s.valor for s in shares],
        hole=0.5,
        textinfo="label+percent",
        marker=dict(colors=CHART_COLORS[:len(shares)]),
    ))
    fig.update_layout(
        template=PLOTLY_TEMPLATE,
        title=dict(text=title, font=dict(size=14, color=COLORS["text_primary"])),
        height=320,
        showlegend=False,
        annotations=[dict(
            text=f"<b>{format_brl(sum(s.valor for s in shares))}</b>",
            x=0.5, y=0.5, showarrow=False,
            font=dict(size=13, color=COLORS["text_primary"]),
        )],
    )
    return fig


d1, d2, d3 = st.columns(3)

for col, totals, title in [
    (d1, dre.receitas_por_canal, "Receita por Canal"),
    (d2, dre.receitas_por_pagamento, "Receita por Pagamento"),
    (d3, dre.despesas_por_categoria, "Despesas por Categoria"),
]:
    with col:
        if totals:
            st.plotly_chart(make_donut(totals, title), use_container_width=True)
        else:
            st.info(f"{title}: sem dados no período.")


# ═══════════════════════════════════════════════════════
# ROW 5 — ANÁLISE TEMPORAL
# ═══════════════════════════════════════════════════════

yearly = compute_yearly_dre(all_sales, all_expenses)

if yearly:
    st.markdown(section_header("Análise Temporal", "Evolução mensal da DRE"), unsafe_allow_html=True)

    years = [y.ano for y in yearly]
    selected_year = st.selectbox("Ano", years, index=0)
    monthly = compute_monthly_dre(all_sales, all_expenses, selected_year)

    fig_monthly = go.Figure()
    fig_monthly.add_trace(go.Bar(
        x=[m.mes_nome for m in monthly],
        y=[m.dre.receita_total for m in monthly],
        name="Receita",
        marker_color=CHART_COLORS[1],
    ))
    fig_monthly.add_trace(go.Bar(
        x=[m.mes_nome for m in monthly],
        y=[m.dre.total_despesas for m in monthly],
        name="Custos e Despesas",
        marker_color=COLORS["danger"],
    ))
    fig_monthly.add_trace(go.Scatter(
        x=[m.mes_nome for m in monthly],
        y=[m.dre.lucro_liquido for m in monthly],
        name="Lucro Líquido",
        mode="lines+markers",
        line=dict(color=COLORS["primary"], width=2),
    ))
    fig_monthly.update_layout(
        template=PLOTLY_TEMPLATE,
        barmode="group",
        height=360,
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
        yaxis=dict(title="R$", tickformat=",.0f"),
    )
    st.plotly_chart(fig_monthly, use_container_width=True)

    highlights = best_months(monthly)
    h1, h2, h3 = st.columns(3)
    with h1:
        m = highlights.melhor_lucro
        st.metric("Melhor Mês", month_label(m.mes_chave, full=True) if m else "—",
                  help=f"Lucro: {format_brl(m.dre.lucro_liquido)}" if m else "Sem dados")
    with h2:
        m = highlights.maior_receita
        st.metric("Maior Receita", month_label(m.mes_chave, full=True) if m else "—",
                  help=f"Receita: {format_brl(m.dre.receita_total)}" if m else "Sem dados")
    with h3:
        m = highlights.menor_cmv
        st.metric("Menor CMV", month_label(m.mes_chave, full=True) if m else "—",
                  help=f"CMV: {format_percent(m.dre.percentual(m.dre.cmv))}" if m else "Sem dados")

    with st.expander("Resumo anual"):
        rows = []
        for i, y in enumerate(yearly):
            prev = yearly[i + 1].dre.receita_total if i + 1 < len(yearly) else 0
            var = variation(y.dre.receita_total, prev)
            sign = {"positive": "+", "negative": "-"}.get(var.tipo, "")
            rows.append({
                "Ano": y.ano,
                "Meses": y.meses_com_dados,
                "Receita": format_brl(y.dre.receita_total),
                "Var. Receita": f"{sign}{format_percent(var.valor)}",
                "Lucro Líquido": format_brl(y.dre.lucro_liquido),
                "Margem Líquida": format_percent(y.dre.margem_liquida),
                "CMV %": format_percent(y.dre.percentual(y.dre.cmv)),
            })
        st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)


# ═══════════════════════════════════════════════════════
# FOOTER
# ═══════════════════════════════════════════════════════

st.markdown(footer(RESTAURANT_NAME), unsafe_allow_html=True)

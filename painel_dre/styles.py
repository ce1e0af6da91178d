"""
Design system do Painel DRE.
Tokens de cor, CSS customizado e template Plotly.
"""

# ─── Color Tokens ───

COLORS = {
    "bg_surface": "#ffffff",
    "bg_muted": "#f9fafb",
    "border": "#e5e7eb",
    "text_primary": "#111827",
    "text_secondary": "#4b5563",
    "text_muted": "#9ca3af",
    "primary": "#f97316",
    "primary_dim": "rgba(249,115,22,0.10)",
    "success": "#059669",
    "danger": "#dc2626",
    "warning": "#d97706",
    "warning_dim": "rgba(217,119,6,0.10)",
}

# Uma cor por bloco da DRE
SECTION_COLORS = {
    "receita": "#16a34a",
    "variaveis": "#dc2626",
    "fixas": "#2563eb",
    "resultado": COLORS["primary"],
}

CHART_COLORS = [
    COLORS["primary"],
    "#16a34a",
    "#2563eb",
    "#9333ea",
    "#db2777",
    "#0891b2",
    "#ca8a04",
    "#4f46e5",
    COLORS["text_muted"],
]


# ─── Plotly Template ───

PLOTLY_TEMPLATE = {
    "layout": {
        "paper_bgcolor": "rgba(0,0,0,0)",
        "plot_bgcolor": "rgba(0,0,0,0)",
        "font": {"family": "Inter, sans-serif", "color": COLORS["text_secondary"], "size": 12},
        "xaxis": {"gridcolor": COLORS["border"], "linecolor": COLORS["border"]},
        "yaxis": {"gridcolor": COLORS["border"], "linecolor": COLORS["border"]},
        "legend": {"bgcolor": "rgba(0,0,0,0)"},
        "colorway": CHART_COLORS,
        "margin": {"l": 10, "r": 10, "t": 30, "b": 10},
    }
}


# ─── Custom CSS ───

CUSTOM_CSS = """
<style>
.block-container { padding-top: 1.5rem !important; max-width: 1200px !important; }

[data-testid="stMetric"] {
    background: """ + COLORS["bg_surface"] + """;
    border: 1px solid """ + COLORS["border"] + """;
    border-radius: 12px;
    padding: 16px;
}
[data-testid="stMetricLabel"] {
    font-size: 0.8rem !important;
    color: """ + COLORS["text_secondary"] + """ !important;
}

.dre-header h1 { font-size: 1.6rem !important; margin: 0 !important; }
.dre-header .meta { font-size: 0.85rem; color: """ + COLORS["text_muted"] + """; }

.section-hdr {
    margin: 1rem 0 0.75rem 0;
    padding-bottom: 0.4rem;
    border-bottom: 2px solid """ + COLORS["primary_dim"] + """;
}
.section-hdr h2 { font-size: 1.15rem !important; margin: 0 !important; }
.section-hdr .sub { font-size: 0.8rem; color: """ + COLORS["text_muted"] + """; }

.warn-banner {
    background: """ + COLORS["warning_dim"] + """;
    border-left: 3px solid """ + COLORS["warning"] + """;
    border-radius: 8px;
    padding: 10px 14px;
    margin-bottom: 10px;
    font-size: 0.88rem;
}

table.dre-table { width: 100%; border-collapse: collapse; font-size: 0.9rem; }
table.dre-table td { padding: 6px 10px; border-bottom: 1px solid """ + COLORS["border"] + """; }
table.dre-table td.valor { text-align: right; font-variant-numeric: tabular-nums; }
table.dre-table tr.total td { font-weight: 700; background: """ + COLORS["bg_muted"] + """; }
table.dre-table tr.sub td:first-child { padding-left: 28px; color: """ + COLORS["text_secondary"] + """; }

.dre-footer {
    text-align: center;
    padding: 1.25rem 0 0.5rem 0;
    font-size: 0.75rem;
    color: """ + COLORS["text_muted"] + """;
    border-top: 1px solid """ + COLORS["border"] + """;
    margin-top: 1rem;
}
</style>
"""

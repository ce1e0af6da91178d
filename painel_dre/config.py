"""
Configuração centralizada do Painel DRE.
Carrega variáveis de ambiente (.env local) ou st.secrets (Streamlit Cloud).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Carrega .env a partir da raiz do projeto (apenas local)
PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(PROJECT_ROOT / ".env")


def _get_secret(key: str, default: str = None) -> str | None:
    """Busca config em st.secrets (Cloud) ou os.environ (.env local)."""
    try:
        import streamlit as st
        if hasattr(st, "secrets") and key in st.secrets:
            return st.secrets[key]
    except Exception:
        # st.secrets levanta quando não há secrets.toml
        pass
    return os.getenv(key, default)


# ─── Dados ───

DATA_DIR = Path(_get_secret("PAINEL_DRE_DATA_DIR", str(PROJECT_ROOT / "dados")))
SALES_FILE = "vendas.csv"
EXPENSES_FILE = "despesas.csv"
RESTAURANT_NAME = _get_secret("PAINEL_DRE_RESTAURANT_NAME", "Restaurante")

# ─── Logging ───

LOG_LEVEL = _get_secret("PAINEL_DRE_LOG_LEVEL", "INFO")

# ─── Cache ───

CACHE_TTL = 300  # 5 minutos

# ─── Regras de negócio ───

VARIABLE_COST_RATIO_FALLBACK = 0.30  # sem receita no período
HISTORICAL_TICKET_MONTHS = 6
TOP_N_CATEGORIES = 8

# ─── Sentinelas do normalizador ───

UNKNOWN_LABEL = "Desconhecido"
OTHERS_LABEL = "Outros"

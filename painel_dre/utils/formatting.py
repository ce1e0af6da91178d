"""
Utilitários de formatação para valores financeiros brasileiros.
"""

MONTH_NAMES_PT = [
    "Jan", "Fev", "Mar", "Abr", "Mai", "Jun",
    "Jul", "Ago", "Set", "Out", "Nov", "Dez",
]

MONTH_NAMES_PT_FULL = [
    "Janeiro", "Fevereiro", "Março", "Abril", "Maio", "Junho",
    "Julho", "Agosto", "Setembro", "Outubro", "Novembro", "Dezembro",
]


def _swap_separators(text: str) -> str:
    return text.replace(",", "X").replace(".", ",").replace("X", ".")


def format_brl(value: float) -> str:
    """Formata um número como Real brasileiro (R$ 150.000,50)."""
    if value >= 0:
        return _swap_separators(f"R$ {value:,.2f}")
    return _swap_separators(f"-R$ {abs(value):,.2f}")


def format_percent(value: float, decimals: int = 1) -> str:
    """Formata um número como percentual (ex: 23.5%)."""
    return f"{value:.{decimals}f}%"


def format_int(value: int) -> str:
    """Inteiro com separador de milhar pt-BR (1.234)."""
    return f"{value:,d}".replace(",", ".")


def month_label(month_key: str, full: bool = False) -> str:
    """Converte 'YYYY-MM' em 'Mar/2025' (ou 'Março/2025')."""
    year, month = month_key.split("-")
    names = MONTH_NAMES_PT_FULL if full else MONTH_NAMES_PT
    return f"{names[int(month) - 1]}/{year}"

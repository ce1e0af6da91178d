"""
Leitura das tabelas exportadas de vendas e despesas.

Aceita CSV (separador vírgula ou ponto e vírgula) e JSON (lista de objetos).
Devolve linhas brutas (list[dict]); a tipagem fica com o normalizador.
"""

import logging
from pathlib import Path

import pandas as pd

from painel_dre.config import DATA_DIR, EXPENSES_FILE, SALES_FILE
from painel_dre.exceptions import DataLoadError

logger = logging.getLogger(__name__)

SALES_COLUMNS = ["id", "data", "canal", "forma_pagamento", "valor_bruto", "numero_pedidos"]
EXPENSES_COLUMNS = [
    "id", "data", "nome", "categoria", "subcategoria", "tipo", "valor",
    "pago", "data_vencimento", "data_pagamento",
]
NUMERIC_COLUMNS = ["valor_bruto", "numero_pedidos", "valor"]


def _parse_br_numbers(df: pd.DataFrame) -> pd.DataFrame:
    """Converte "1.234,56" em 1234.56 nas colunas numéricas."""
    for col in NUMERIC_COLUMNS:
        if col in df.columns:
            text = df[col].astype(str).str.replace(".", "", regex=False).str.replace(",", ".", regex=False)
            df[col] = pd.to_numeric(text, errors="coerce")
    return df


def _read_frame(path: Path) -> pd.DataFrame:
    suffix = path.suffix.lower()
    try:
        if suffix == ".csv":
            # Exportações em pt-BR usam ";" com vírgula decimal; datas ficam como texto
            with open(path, encoding="utf-8") as fh:
                header = fh.readline()
            if header.count(";") > header.count(","):
                return _parse_br_numbers(pd.read_csv(path, sep=";", dtype=str, encoding="utf-8"))
            return pd.read_csv(path, sep=",", dtype=str, encoding="utf-8")
        if suffix == ".json":
            return pd.read_json(path, orient="records", dtype=False, convert_dates=False)
    except FileNotFoundError as e:
        raise DataLoadError(f"Arquivo não encontrado: {path}") from e
    except (ValueError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise DataLoadError(f"Não foi possível ler {path}: {e}") from e
    raise DataLoadError(f"Formato não suportado: {path.suffix} ({path})")


def _to_rows(df: pd.DataFrame, columns: list[str]) -> list[dict]:
    missing = [c for c in columns if c not in df.columns]
    if missing:
        logger.warning("Colunas ausentes tratadas como vazias: %s", ", ".join(missing))
        for col in missing:
            df[col] = None
    df = df[columns].astype(object)
    return df.where(df.notna(), None).to_dict(orient="records")


def load_rows(path: Path, columns: list[str]) -> list[dict]:
    """Lê um arquivo exportado e devolve as linhas com as colunas esperadas."""
    path = Path(path)
    rows = _to_rows(_read_frame(path), columns)
    logger.info("Carregadas %d linhas de %s", len(rows), path.name)
    return rows


def load_sales(path: Path = None) -> list[dict]:
    return load_rows(path or DATA_DIR / SALES_FILE, SALES_COLUMNS)


def load_expenses(path: Path = None) -> list[dict]:
    return load_rows(path or DATA_DIR / EXPENSES_FILE, EXPENSES_COLUMNS)

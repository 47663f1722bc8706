from __future__ import annotations
from typing import Iterable, List, Optional
import logging

import pandas as pd

from apolicefacil.data_access.storage import read_table, write_csv
from apolicefacil.models import IMPORT_COLUMNS
from apolicefacil.utils.config import paths
from apolicefacil.utils.text import normalize_header

logger = logging.getLogger(__name__)

# ------------- Importação de clientes -------------

def load_customer_sheet(path: Optional[str] = None) -> pd.DataFrame:
    """
    Lê a planilha de importação de clientes. Por padrão usa paths()["CUSTOMERS_IMPORT"].
    Cabeçalhos são normalizados ('Tipo Pessoa' -> 'tipopessoa'); colunas
    desconhecidas são descartadas e as ausentes criadas vazias.
    """
    P = paths()
    _path = path or P["CUSTOMERS_IMPORT"]
    df = read_table(_path)
    df.columns = [normalize_header(c) for c in df.columns]
    df = df.loc[:, ~df.columns.duplicated()]
    missing = [c for c in IMPORT_COLUMNS if c not in df.columns]
    if missing:
        logger.debug("Colunas ausentes na planilha %s: %s", _path, missing)
    for c in missing:
        df[c] = ""
    return df[list(IMPORT_COLUMNS)].copy()

def missing_columns(df: pd.DataFrame, required: Iterable[str]) -> List[str]:
    """Colunas exigidas que não aparecem na planilha (comparação por cabeçalho normalizado)."""
    present = {normalize_header(c) for c in df.columns}
    return [c for c in required if normalize_header(c) not in present]

def save_customer_report(df: pd.DataFrame, path: Optional[str] = None) -> str:
    P = paths()
    _path = path or P["CUSTOMERS_REPORT"]
    return str(write_csv(df, _path))

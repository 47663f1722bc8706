from __future__ import annotations
from pathlib import Path
import os

import pandas as pd

# -------------------- Diretórios & Paths --------------------

def project_root() -> Path:
    # apolicefacil/data_access/storage.py => suba 2 níveis
    return Path(__file__).resolve().parents[2]

def data_dir() -> Path:
    # Permite sobrescrever via env DATA_DIR
    base = os.environ.get("DATA_DIR")
    return Path(base).resolve() if base else project_root() / "data"

def resolve(path: str | Path) -> Path:
    """
    Aceita um path absoluto/relativo ao diretório atual. Se não existir,
    tenta relativo a data/ e à raiz do projeto.
    """
    p = Path(path)
    if p.exists() or p.is_absolute():
        return p.resolve()
    for c in (data_dir() / p, project_root() / p):
        if c.exists():
            return c.resolve()
    return p  # pode não existir ainda

# -------------------- Leitura de Arquivos --------------------

def read_table(path: str | Path, sheet: int | str = 0) -> pd.DataFrame:
    """
    Lê .xlsx (primeira aba por padrão) ou .csv.
    O .csv vem todo como texto; no .xlsx as células ficam com o tipo do openpyxl
    (datas chegam como datetime). Em ambos os casos zeros à esquerda de
    CPF/CNPJ/CEP digitados como texto são preservados.
    """
    p = resolve(path)
    if not p.exists():
        raise FileNotFoundError(f"Arquivo não encontrado: {p}")
    suffix = p.suffix.lower()
    if suffix == ".xlsx":
        df = pd.read_excel(p, sheet_name=sheet, dtype=object, engine="openpyxl")
    elif suffix == ".csv":
        df = pd.read_csv(p, dtype=str, keep_default_na=False)
    else:
        raise ValueError(f"Formato não suportado: {p.suffix} (use .xlsx ou .csv)")
    df.columns = [str(c).strip() for c in df.columns]
    return df

# -------------------- Escrita --------------------

def write_csv(df: pd.DataFrame, path: str | Path, index: bool = False) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(p, index=index)
    return p

def write_excel(df: pd.DataFrame, path: str | Path, sheet: str = "clientes") -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with pd.ExcelWriter(p, engine="openpyxl") as xw:
        df.to_excel(xw, index=False, sheet_name=sheet)
    return p

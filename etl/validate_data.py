# etl/validate_data.py
"""
Confere se a planilha de importação existe e traz as colunas exigidas
pelo contrato (data/docs/data_contracts.yaml).

Uso:
    python -m etl.validate_data [--contract data/docs/data_contracts.yaml] [--src data/raw/clientes.xlsx]
"""
from __future__ import annotations
import argparse
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from apolicefacil.data_access import missing_columns, read_table, resolve
from apolicefacil.utils.config import paths
from etl.common import get_logger

CONTRACT_KEY = "customers_import"

def load_contract(contract_path: str | Path) -> dict:
    p = resolve(contract_path)
    if not p.exists():
        raise FileNotFoundError(f"Contrato não encontrado: {p}")
    doc = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if CONTRACT_KEY not in doc:
        raise KeyError(f"Contrato sem a chave '{CONTRACT_KEY}': {p}")
    return doc[CONTRACT_KEY]

def check(contract_path: str | Path, src: str | Path) -> List[str]:
    """Lista de problemas encontrados (vazia = OK)."""
    contract = load_contract(contract_path)
    p = resolve(src)
    if not p.exists():
        return [f"Faltando: {p}"]
    df = read_table(p)
    miss = missing_columns(df, contract.get("required_columns", []))
    if miss:
        return [f"Colunas faltando em {p.name}: {miss}"]
    return []

def main(argv: Optional[List[str]] = None) -> int:
    P = paths()
    ap = argparse.ArgumentParser(description="Valida a planilha de clientes contra o contrato de colunas.")
    ap.add_argument("--contract", default=P["DATA_CONTRACTS"])
    ap.add_argument("--src", default=P["CUSTOMERS_IMPORT"])
    args = ap.parse_args(argv)

    log = get_logger("validate")
    try:
        problems = check(args.contract, args.src)
    except (FileNotFoundError, KeyError, ValueError) as e:
        log.error(str(e))
        return 1

    for msg in problems:
        log.error(msg)
    if problems:
        return 1
    log.info("✅ Planilha com as colunas essenciais.")
    return 0

if __name__ == "__main__":
    sys.exit(main())

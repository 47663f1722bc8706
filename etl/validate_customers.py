# etl/validate_customers.py
"""
Valida, linha a linha, a planilha de importação de clientes
(nome, tipo de pessoa, CPF/CNPJ, e-mail, documentos repetidos) e gera um
relatório CSV com documento e celular já formatados.

Uso:
    python -m etl.validate_customers --src data/raw/clientes.xlsx --out data/processed/clientes_validados.csv [--strict]
"""
from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from apolicefacil.data_access import load_customer_sheet, save_customer_report
from apolicefacil.services import to_report_frame, validate_customer_sheet
from apolicefacil.utils.config import paths
from etl.common import get_logger

def main(argv: Optional[List[str]] = None) -> int:
    P = paths()
    ap = argparse.ArgumentParser(description="Valida a planilha de importação de clientes.")
    ap.add_argument("--src", default=P["CUSTOMERS_IMPORT"])
    ap.add_argument("--out", default=P["CUSTOMERS_REPORT"])
    ap.add_argument("--strict", action="store_true", help="sai com código 1 se houver linha inválida")
    args = ap.parse_args(argv)

    log = get_logger("customers")
    try:
        df = load_customer_sheet(args.src)
    except (FileNotFoundError, ValueError) as e:
        log.error(str(e))
        return 1

    processed, summary = validate_customer_sheet(df)
    if not processed:
        log.warning(f"Planilha sem registros: {args.src}")
        return 1

    for line in summary.details:
        (log.info if line.startswith("Cliente ") else log.warning)(line)

    out = save_customer_report(to_report_frame(processed), args.out)
    log.info(summary.message)
    log.info(f"✅ relatório salvo em {out} ({summary.total} linhas)")

    if args.strict and summary.invalid:
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())

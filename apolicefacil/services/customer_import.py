from __future__ import annotations
import logging
from typing import Any, Iterable, List, Mapping, Optional, Set, Tuple

import pandas as pd

from apolicefacil.models import CustomerImportRow, ImportSummary, PersonType, ProcessedCustomer
from apolicefacil.utils.formatters import format_phone
from apolicefacil.utils.validators_br import (
    format_cpf_cnpj,
    is_valid_cpf_cnpj,
    is_valid_email,
    only_digits,
)

logger = logging.getLogger(__name__)

_PERSON_TYPES = {p.value for p in PersonType}


def row_errors(row: CustomerImportRow) -> List[str]:
    """Erros de uma linha isolada, na ordem em que aparecem para o usuário."""
    errors: List[str] = []
    if not row.nome:
        errors.append("Nome é obrigatório")

    if not row.tipo_pessoa:
        errors.append("Tipo de pessoa é obrigatório")
    elif row.tipo_pessoa.upper() not in _PERSON_TYPES:
        errors.append("Tipo de pessoa deve ser PF ou PJ")

    if row.cnpj_cpf and not is_valid_cpf_cnpj(row.cnpj_cpf):
        errors.append("CPF/CNPJ inválido")

    if row.email and not is_valid_email(row.email):
        errors.append("E-mail inválido")
    return errors


def process_row(row: CustomerImportRow, seen_documents: Optional[Set[str]] = None) -> ProcessedCustomer:
    """
    Valida e formata uma linha. Se `seen_documents` for passado, acusa documento
    repetido em linhas anteriores e registra o documento atual.
    """
    errors = row_errors(row)
    digits = only_digits(row.cnpj_cpf)
    if seen_documents is not None and digits:
        if digits in seen_documents:
            errors.append("Documento duplicado na planilha")
        seen_documents.add(digits)

    data = row.model_dump()
    data.update(
        cnpj_cpf=format_cpf_cnpj(row.cnpj_cpf) if row.cnpj_cpf else "",
        telefone_celular=(format_phone(row.telefone_celular) or row.telefone_celular) if row.telefone_celular else "",
        is_valid=not errors,
        errors=errors,
    )
    return ProcessedCustomer(**data)


def process_rows(rows: Iterable[Mapping[str, Any]]) -> List[ProcessedCustomer]:
    """Processa linhas cruas (dicts com cabeçalhos da planilha), pulando as vazias."""
    seen: Set[str] = set()
    out: List[ProcessedCustomer] = []
    for raw in rows:
        row = CustomerImportRow.from_row(raw)
        if not any(row.model_dump().values()):
            continue
        out.append(process_row(row, seen))
    return out


def process_customer_sheet(df: Optional[pd.DataFrame]) -> List[ProcessedCustomer]:
    if df is None or df.empty:
        return []
    return process_rows(df.to_dict(orient="records"))


def summarize(processed: Iterable[ProcessedCustomer]) -> ImportSummary:
    summary = ImportSummary()
    for c in processed:
        summary.total += 1
        label = c.nome or "(sem nome)"
        if c.is_valid:
            summary.valid += 1
            summary.details.append(f"Cliente {label} validado com sucesso")
        else:
            summary.invalid += 1
            summary.details.append(f"Erro ao validar cliente {label}: {'; '.join(c.errors)}")
            logger.debug("Linha recusada: %s -> %s", label, c.errors)
    return summary


def validate_customer_sheet(df: Optional[pd.DataFrame]) -> Tuple[List[ProcessedCustomer], ImportSummary]:
    """Atalho: processa a planilha inteira e devolve (linhas, resumo)."""
    processed = process_customer_sheet(df)
    summary = summarize(processed)
    logger.info("Planilha de clientes: total=%d válidos=%d inválidos=%d",
                summary.total, summary.valid, summary.invalid)
    return processed, summary


def to_report_frame(processed: Iterable[ProcessedCustomer]) -> pd.DataFrame:
    return pd.DataFrame([c.to_display_dict() for c in processed])

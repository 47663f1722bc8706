from .config import paths, set_paths, reset_paths, path
from .text import strip_accents, normalize_header, cell_to_str
from .dates import format_date_br
from .formatters import format_phone, format_cep, format_currency
from .validators_br import (
    DocumentKind,
    only_digits,
    clean_document,
    classify_document,
    get_document_type,
    validate_cpf,
    validate_cnpj,
    validate_document,
    format_cpf,
    format_cnpj,
    format_document,
    is_valid_cpf_cnpj,
    format_cpf_cnpj,
    is_valid_cep,
    is_valid_email,
)

__all__ = [
    "paths", "set_paths", "reset_paths", "path",
    "strip_accents", "normalize_header", "cell_to_str",
    "format_date_br",
    "format_phone", "format_cep", "format_currency",
    "DocumentKind", "only_digits", "clean_document", "classify_document", "get_document_type",
    "validate_cpf", "validate_cnpj", "validate_document",
    "format_cpf", "format_cnpj", "format_document",
    "is_valid_cpf_cnpj", "format_cpf_cnpj", "is_valid_cep", "is_valid_email",
]

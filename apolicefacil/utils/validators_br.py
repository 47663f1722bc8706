from __future__ import annotations
import re
from enum import Enum
from typing import Optional

_NON_DIGITS = re.compile(r"[^0-9]")
_EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


class DocumentKind(str, Enum):
    """Tipo de documento inferido pelo número de dígitos."""
    CPF = "CPF"
    CNPJ = "CNPJ"
    UNKNOWN = "UNKNOWN"


CPF_LENGTH = 11
CNPJ_LENGTH = 14

# (tamanho do bloco, separador antes do bloco)
_CPF_LAYOUT = ((3, ""), (3, "."), (3, "."), (2, "-"))
_CNPJ_LAYOUT = ((2, ""), (3, "."), (3, "."), (4, "/"), (2, "-"))

_CNPJ_WEIGHTS_1 = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
_CNPJ_WEIGHTS_2 = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


def only_digits(value: Optional[str]) -> str:
    """Mantém apenas os dígitos ASCII 0-9, na ordem em que aparecem."""
    return _NON_DIGITS.sub("", value or "")


def clean_document(value: Optional[str]) -> str:
    return only_digits(value)


def classify_document(value: Optional[str]) -> DocumentKind:
    n = only_digits(value)
    if len(n) == CPF_LENGTH:
        return DocumentKind.CPF
    if len(n) == CNPJ_LENGTH:
        return DocumentKind.CNPJ
    return DocumentKind.UNKNOWN


def get_document_type(value: Optional[str]) -> Optional[DocumentKind]:
    """CPF, CNPJ ou None quando o tamanho não fecha com nenhum dos dois."""
    kind = classify_document(value)
    return None if kind is DocumentKind.UNKNOWN else kind


def _coerce_kind(kind) -> Optional[DocumentKind]:
    if isinstance(kind, DocumentKind):
        return kind
    try:
        return DocumentKind(str(kind or "").strip().upper())
    except ValueError:
        return None


def _check_digit(digits: str, weights) -> int:
    s = sum(int(d) * w for d, w in zip(digits, weights))
    r = s % 11
    return 0 if r < 2 else 11 - r


# ---------------- CPF ----------------

def validate_cpf(cpf: Optional[str]) -> bool:
    """
    Valida CPF com cálculo de dígitos verificadores.
    Aceita com/sem máscara. Nunca levanta exceção.
    """
    n = only_digits(cpf)
    if len(n) != CPF_LENGTH or n == n[0] * CPF_LENGTH:
        return False

    # 1º DV: pesos 10..2 sobre os 9 primeiros dígitos
    d1 = _check_digit(n[:9], range(10, 1, -1))
    if int(n[9]) != d1:
        return False

    # 2º DV: pesos 11..2 sobre os 10 primeiros dígitos
    d2 = _check_digit(n[:10], range(11, 1, -1))
    return int(n[10]) == d2


def format_cpf(cpf: Optional[str]) -> str:
    """
    Máscara progressiva 000.000.000-00 (serve para digitação parcial).
    Dígitos além do 11º são descartados.
    """
    return _apply_layout(only_digits(cpf)[:CPF_LENGTH], _CPF_LAYOUT)

# ---------------- CNPJ ----------------

def validate_cnpj(cnpj: Optional[str]) -> bool:
    """
    Valida CNPJ com dígitos verificadores.
    """
    n = only_digits(cnpj)
    if len(n) != CNPJ_LENGTH or n == n[0] * CNPJ_LENGTH:
        return False

    d1 = _check_digit(n[:12], _CNPJ_WEIGHTS_1)
    if int(n[12]) != d1:
        return False

    d2 = _check_digit(n[:13], _CNPJ_WEIGHTS_2)
    return int(n[13]) == d2


def format_cnpj(cnpj: Optional[str]) -> str:
    """Máscara progressiva 00.000.000/0000-00; trunca em 14 dígitos."""
    return _apply_layout(only_digits(cnpj)[:CNPJ_LENGTH], _CNPJ_LAYOUT)


def _apply_layout(digits: str, layout) -> str:
    out = []
    pos = 0
    for size, sep in layout:
        chunk = digits[pos:pos + size]
        if not chunk:
            break
        out.append(sep + chunk if pos else chunk)
        pos += size
    return "".join(out)

# ---------------- Despacho por tipo ----------------

def validate_document(value: Optional[str], kind) -> bool:
    k = _coerce_kind(kind)
    if k is DocumentKind.CPF:
        return validate_cpf(value)
    if k is DocumentKind.CNPJ:
        return validate_cnpj(value)
    return False


def format_document(value: Optional[str], kind) -> str:
    """
    Formata conforme o tipo informado. Para tipo desconhecido devolve só os dígitos.
    """
    k = _coerce_kind(kind)
    if k is DocumentKind.CPF:
        return format_cpf(value)
    if k is DocumentKind.CNPJ:
        return format_cnpj(value)
    return only_digits(value)


def is_valid_cpf_cnpj(value: Optional[str]) -> bool:
    """Infere o tipo pelo tamanho e valida (usado na importação de planilhas)."""
    return validate_document(value, classify_document(value))


def format_cpf_cnpj(value: Optional[str]) -> str:
    """
    Máscara completa apenas para documentos com 11 ou 14 dígitos;
    qualquer outra entrada volta como veio.
    """
    kind = classify_document(value)
    if kind is DocumentKind.UNKNOWN:
        return value or ""
    return format_document(value, kind)

# ---------------- Outros ----------------

def is_valid_cep(cep: Optional[str]) -> bool:
    return len(only_digits(cep)) == 8


def is_valid_email(email: Optional[str]) -> bool:
    if not email:
        return False
    return _EMAIL_RE.fullmatch(email.strip()) is not None

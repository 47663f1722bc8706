from __future__ import annotations
import math
from typing import Optional, Union

from .validators_br import only_digits


def format_phone(phone: Optional[str]) -> Optional[str]:
    """
    (99) 99999-9999 para celular (11 dígitos), (99) 9999-9999 para fixo (10).
    Retorna None para qualquer outra coisa, evitando exibir número mal formatado.
    """
    if not phone:
        return None
    n = only_digits(phone)
    if len(n) == 11:
        return f"({n[0:2]}) {n[2:7]}-{n[7:]}"
    if len(n) == 10:
        return f"({n[0:2]}) {n[2:6]}-{n[6:]}"
    return None


def format_cep(cep: Optional[str]) -> str:
    n = only_digits(cep)
    if len(n) != 8:
        return n
    return f"{n[:5]}-{n[5:]}"


def format_currency(value: Union[int, float, None]) -> str:
    """Valor em reais no padrão pt-BR: R$ 1.234,56"""
    if value is None:
        return "R$ 0,00"
    try:
        v = float(value)
    except (TypeError, ValueError):
        return "R$ 0,00"
    if math.isnan(v) or math.isinf(v):
        return "R$ 0,00"
    sign = "-" if v < 0 else ""
    # 1,234.56 -> 1.234,56
    s = f"{abs(v):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}R$ {s}"

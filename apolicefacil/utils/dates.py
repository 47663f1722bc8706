from __future__ import annotations
import re
from datetime import date, datetime
from typing import Union

_BR_DATE = re.compile(r"^\d{2}/\d{2}/\d{4}$")
_ISO_DATE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})")


def format_date_br(value: Union[str, date, datetime, None]) -> str:
    """
    Converte para DD/MM/AAAA.
    - date/datetime: formata direto
    - 'DD/MM/AAAA': devolve como está
    - vigência '01/01/2024 a 01/01/2025' ou '2024-01-01 a 2025-01-01': usa a 1ª parte
    - 'AAAA-MM-DD' (com ou sem hora): interpreta como data local
    Qualquer coisa inválida vira "".
    """
    if value is None or value == "":
        return ""
    if isinstance(value, (date, datetime)):
        return value.strftime("%d/%m/%Y")
    if not isinstance(value, str):
        return ""

    s = value.strip()
    if _BR_DATE.match(s):
        return s
    if " a " in s:
        return format_date_br(s.split(" a ")[0].strip())

    m = _ISO_DATE.match(s)
    if m:
        try:
            d = date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
        except ValueError:
            return ""
        return d.strftime("%d/%m/%Y")
    return ""

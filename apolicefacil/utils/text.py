from __future__ import annotations
import math
import re
import unicodedata
from datetime import date
from typing import Any, Optional

from .dates import format_date_br

def strip_accents(s: Optional[str]) -> str:
    if s is None:
        return ""
    return "".join(ch for ch in unicodedata.normalize("NFKD", str(s)) if not unicodedata.combining(ch))

def normalize_header(s: Any) -> str:
    """'Tipo Pessoa ' -> 'tipopessoa' (minúsculas, sem espaços, sem acentos)"""
    if s is None:
        return ""
    return re.sub(r"\s+", "", strip_accents(str(s)).lower())

def cell_to_str(v: Any) -> str:
    """
    Converte o valor de uma célula de planilha em texto.
    None/NaN -> "", 52998224725.0 -> "52998224725", datas -> DD/MM/AAAA.
    """
    if v is None:
        return ""
    if isinstance(v, bool):
        return str(v)
    if isinstance(v, float):
        if math.isnan(v):
            return ""
        if v.is_integer():
            return str(int(v))
        return str(v)
    if isinstance(v, date):
        # pd.NaT também é datetime, mas NaT != NaT
        return format_date_br(v) if v == v else ""
    s = str(v).strip()
    # pandas representa vazio como 'nan'/'NaT' quando lido como texto
    return "" if s in {"nan", "NaN", "NaT", "None"} else s

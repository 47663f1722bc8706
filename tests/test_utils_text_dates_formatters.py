from __future__ import annotations
import math
from datetime import date, datetime

from apolicefacil.utils.dates import format_date_br
from apolicefacil.utils.formatters import format_cep, format_currency, format_phone
from apolicefacil.utils.text import cell_to_str, normalize_header, strip_accents

def test_format_phone():
    assert format_phone("11987654321") == "(11) 98765-4321"
    assert format_phone("(11) 3456-7890") == "(11) 3456-7890"
    assert format_phone("123") is None
    assert format_phone("") is None
    assert format_phone(None) is None

def test_format_cep():
    assert format_cep("01310100") == "01310-100"
    assert format_cep("01310-100") == "01310-100"
    assert format_cep("0131") == "0131"

def test_format_currency():
    assert format_currency(1234.5) == "R$ 1.234,50"
    assert format_currency(0) == "R$ 0,00"
    assert format_currency(1234567.891) == "R$ 1.234.567,89"
    assert format_currency(-10) == "-R$ 10,00"
    assert format_currency(None) == "R$ 0,00"
    assert format_currency(math.nan) == "R$ 0,00"

def test_format_date_br():
    assert format_date_br(date(2024, 3, 5)) == "05/03/2024"
    assert format_date_br(datetime(2024, 12, 31, 23, 59)) == "31/12/2024"
    assert format_date_br("05/03/2024") == "05/03/2024"
    assert format_date_br("2024-03-05") == "05/03/2024"
    assert format_date_br("2024-03-05T10:00:00Z") == "05/03/2024"
    assert format_date_br("2024-01-01 a 2025-01-01") == "01/01/2024"
    assert format_date_br("2024-02-30") == ""
    assert format_date_br("ontem") == ""
    assert format_date_br(None) == ""

def test_text_helpers():
    assert strip_accents("Endereço") == "Endereco"
    assert normalize_header(" Tipo Pessoa ") == "tipopessoa"
    assert normalize_header("Endereço") == "endereco"
    assert cell_to_str(None) == ""
    assert cell_to_str(float("nan")) == ""
    assert cell_to_str(52998224725.0) == "52998224725"
    assert cell_to_str(" SP ") == "SP"
    assert cell_to_str(datetime(2024, 1, 2)) == "02/01/2024"

from __future__ import annotations
from pathlib import Path
import pandas as pd
import pytest

from apolicefacil.data_access import repositories as repo
from apolicefacil.data_access.storage import read_table
from apolicefacil.models import IMPORT_COLUMNS
from apolicefacil.services import process_customer_sheet

def test_load_customer_sheet_from_tmp(tmp_customers_xlsx):
    df = repo.load_customer_sheet(tmp_customers_xlsx)
    assert list(df.columns) == list(IMPORT_COLUMNS)
    assert len(df) == 4
    assert df.iloc[0]["cnpjcpf"] == "52998224725"
    assert df.iloc[1]["tipopessoa"] == "pj"

def test_load_customer_sheet_uses_configured_default(tmp_customers_xlsx):
    # conftest aponta CUSTOMERS_IMPORT para o mesmo arquivo temporário
    df = repo.load_customer_sheet()
    assert len(df) == 4

def test_csv_keeps_leading_zeros(tmpdir_path: Path):
    p = tmpdir_path / "clientes.csv"
    p.write_text("nome,tipoPessoa,cnpjCpf\nJoão,PF,09702414458\n", encoding="utf-8")
    df = repo.load_customer_sheet(str(p))
    assert df.iloc[0]["cnpjcpf"] == "09702414458"
    assert df.iloc[0]["email"] == ""

def test_read_table_errors(tmpdir_path: Path):
    with pytest.raises(FileNotFoundError):
        read_table(tmpdir_path / "nao_existe.xlsx")
    odd = tmpdir_path / "clientes.txt"
    odd.write_text("x", encoding="utf-8")
    with pytest.raises(ValueError):
        read_table(odd)

def test_missing_columns_compares_normalized_headers():
    df = pd.DataFrame(columns=["Nome", "Tipo Pessoa"])
    assert repo.missing_columns(df, ["nome", "tipoPessoa", "cnpjCpf"]) == ["cnpjCpf"]

def test_save_customer_report_default_path(tmpdir_path: Path):
    out = repo.save_customer_report(pd.DataFrame([{"Nome": "A"}]))
    assert Path(out) == tmpdir_path / "out" / "clientes_validados.csv"
    assert Path(out).exists()

def test_xlsx_date_cell_reaches_import_as_br_date(tmp_customers_xlsx):
    processed = process_customer_sheet(repo.load_customer_sheet(tmp_customers_xlsx))
    assert processed[0].complemento == "15/01/2024"
    assert processed[1].complemento == ""
    assert processed[0].cnpj_cpf == "529.982.247-25"

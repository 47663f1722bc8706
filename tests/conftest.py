from __future__ import annotations
from datetime import datetime
from pathlib import Path
import pytest
import pandas as pd

from apolicefacil.data_access.storage import write_excel
from apolicefacil.utils.config import reset_paths

# ---------- FIXTURES DE DADOS BÁSICOS ----------

@pytest.fixture
def tmpdir_path(tmp_path: Path) -> Path:
    return tmp_path

@pytest.fixture
def customers_df() -> pd.DataFrame:
    # cabeçalhos propositalmente "sujos", como vêm das planilhas dos corretores
    return pd.DataFrame([
        {
            "Nome": "Maria Souza",
            "Tipo Pessoa": "PF",
            "CNPJ CPF": "52998224725",
            "Email": "maria@exemplo.com.br",
            "Telefone Celular": "11987654321",
            "Cidade": "São Paulo",
            "Estado": "SP",
            # célula de data no Excel, como vem de algumas planilhas
            "Complemento": datetime(2024, 1, 15),
        },
        {
            "Nome": "Empresa Teste Ltda",
            "Tipo Pessoa": "pj",
            "CNPJ CPF": "11222333000181",
            "Email": "",
            "Telefone Celular": "",
            "Cidade": "Campinas",
            "Estado": "SP",
        },
        {
            "Nome": "",
            "Tipo Pessoa": "XX",
            "CNPJ CPF": "12345678900",
            "Email": "sem-arroba",
            "Telefone Celular": "123",
            "Cidade": "",
            "Estado": "",
        },
        {
            "Nome": "Maria Duplicada",
            "Tipo Pessoa": "PF",
            "CNPJ CPF": "529.982.247-25",
            "Email": "",
            "Telefone Celular": "",
            "Cidade": "",
            "Estado": "",
        },
    ])

@pytest.fixture
def tmp_customers_xlsx(tmpdir_path: Path, customers_df) -> str:
    out = tmpdir_path / "clientes.xlsx"
    write_excel(customers_df, out, sheet="clientes")
    return str(out)

@pytest.fixture
def tmp_contract_yaml(tmpdir_path: Path) -> str:
    out = tmpdir_path / "data_contracts.yaml"
    out.write_text(
        "customers_import:\n"
        "  required_columns: [nome, tipoPessoa, cnpjCpf]\n",
        encoding="utf-8",
    )
    return str(out)

# ---------- AJUSTES DE AMBIENTE PARA PATHS ----------
@pytest.fixture(autouse=True)
def ensure_env_paths(tmpdir_path: Path, monkeypatch):
    # Redireciona entrada/saída padrão da importação para o tmp
    monkeypatch.setenv("CUSTOMERS_IMPORT", str(tmpdir_path / "clientes.xlsx"))
    monkeypatch.setenv("CUSTOMERS_REPORT", str(tmpdir_path / "out" / "clientes_validados.csv"))
    reset_paths()
    yield
    reset_paths()

from __future__ import annotations
import pytest
from pydantic import ValidationError

from apolicefacil.models import (
    BrazilianDocument,
    CustomerImportRow,
    CustomerPayload,
    ImportSummary,
    PersonType,
    ProcessedCustomer,
)
from apolicefacil.utils.validators_br import DocumentKind

def test_brazilian_document_from_raw():
    doc = BrazilianDocument.from_raw("529.982.247-25")
    assert doc.number == "52998224725"
    assert doc.kind is DocumentKind.CPF
    assert doc.formatted == "529.982.247-25"
    assert doc.is_valid is True

def test_brazilian_document_unknown_and_frozen():
    doc = BrazilianDocument.from_raw("12.3")
    assert doc.kind is DocumentKind.UNKNOWN
    assert doc.formatted == "123"
    assert doc.is_valid is False
    with pytest.raises(ValidationError):
        doc.number = "1"

def test_customer_payload_normalization():
    p = CustomerPayload(name="  Ana Lima ", person_type="PF", cnpj_cpf="52998224725", email="  ")
    assert p.name == "Ana Lima"
    assert p.person_type is PersonType.PF
    assert p.email is None

def test_customer_import_row_from_raw_headers():
    row = CustomerImportRow.from_row({
        "Nome": " João ",
        "Tipo Pessoa": "PF",
        "CNPJ CPF": 52998224725.0,
        "Endereço": "Rua A",
        "Coluna Extra": "ignorada",
        "Cidade": float("nan"),
    })
    assert row.nome == "João"
    assert row.tipo_pessoa == "PF"
    assert row.cnpj_cpf == "52998224725"
    assert row.endereco == "Rua A"
    assert row.cidade == ""
    assert row.email == ""

def test_processed_customer_display_dict():
    c = ProcessedCustomer(nome="Ana", tipo_pessoa="PF", cnpj_cpf="529.982.247-25",
                          is_valid=False, errors=["E-mail inválido"])
    d = c.to_display_dict()
    assert d["CPF/CNPJ"] == "529.982.247-25"
    assert d["Status"] == "ATIVO"
    assert d["Válido"] == "Não" and d["Erros"] == "E-mail inválido"

def test_import_summary_message():
    s = ImportSummary(total=3, valid=2, invalid=1)
    assert "2 de 3" in s.message

from __future__ import annotations
from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, Field, ConfigDict, field_validator

from apolicefacil.utils.text import cell_to_str, normalize_header


class PersonType(str, Enum):
    PF = "PF"  # pessoa física -> CPF
    PJ = "PJ"  # pessoa jurídica -> CNPJ


class CustomerPayload(BaseModel):
    """Dados mínimos de cadastro/edição de cliente, já validados."""
    model_config = ConfigDict(extra="ignore")

    name: str
    person_type: PersonType
    cnpj_cpf: str = Field(..., description="Somente dígitos")
    email: str | None = None

    @field_validator("name", mode="before")
    @classmethod
    def _strip(cls, v: Any):
        return str(v).strip() if v is not None else v

    @field_validator("email", mode="before")
    @classmethod
    def _empty_as_none(cls, v: Any):
        if v is None:
            return None
        s = str(v).strip()
        return s or None


# Cabeçalhos da planilha de importação (já normalizados: minúsculas, sem espaços)
IMPORT_COLUMNS = (
    "nome",
    "tipopessoa",
    "cnpjcpf",
    "email",
    "telefoneresidencial",
    "telefonecomercial",
    "telefonecelular",
    "cep",
    "endereco",
    "numero",
    "complemento",
    "bairro",
    "cidade",
    "estado",
)


class CustomerImportRow(BaseModel):
    """
    Uma linha da planilha de importação de clientes.
    Colunas ausentes viram "" e todas as células são tratadas como texto.
    """
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    nome: str = ""
    tipo_pessoa: str = Field("", alias="tipopessoa")
    cnpj_cpf: str = Field("", alias="cnpjcpf")
    email: str = ""
    telefone_residencial: str = Field("", alias="telefoneresidencial")
    telefone_comercial: str = Field("", alias="telefonecomercial")
    telefone_celular: str = Field("", alias="telefonecelular")
    cep: str = ""
    endereco: str = ""
    numero: str = ""
    complemento: str = ""
    bairro: str = ""
    cidade: str = ""
    estado: str = ""

    @field_validator(
        "nome", "tipo_pessoa", "cnpj_cpf", "email",
        "telefone_residencial", "telefone_comercial", "telefone_celular",
        "cep", "endereco", "numero", "complemento", "bairro", "cidade", "estado",
        mode="before",
    )
    @classmethod
    def _as_text(cls, v: Any):
        return cell_to_str(v)

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "CustomerImportRow":
        """Aceita cabeçalhos crus ('Tipo Pessoa', 'CNPJ CPF'...)."""
        return cls.model_validate({normalize_header(k): v for k, v in row.items()})


class ProcessedCustomer(CustomerImportRow):
    """Linha após validação, com documento e celular formatados para exibição."""
    status: str = "ATIVO"
    is_valid: bool = True
    errors: list[str] = Field(default_factory=list)

    def to_display_dict(self) -> dict[str, Any]:
        """Dicionário pronto para relatório (CSV) ou tabela."""
        return {
            "Nome": self.nome,
            "Tipo Pessoa": self.tipo_pessoa,
            "CPF/CNPJ": self.cnpj_cpf,
            "E-mail": self.email,
            "Celular": self.telefone_celular,
            "Cidade": self.cidade,
            "Estado": self.estado,
            "Status": self.status,
            "Válido": "Sim" if self.is_valid else "Não",
            "Erros": "; ".join(self.errors),
        }


class ImportSummary(BaseModel):
    total: int = 0
    valid: int = 0
    invalid: int = 0
    details: list[str] = Field(default_factory=list)

    @property
    def message(self) -> str:
        return f"Validação concluída: {self.valid} de {self.total} clientes sem erros."

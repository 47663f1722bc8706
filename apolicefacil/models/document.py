from __future__ import annotations
from typing import Any, Optional

from pydantic import BaseModel, Field, ConfigDict, field_validator

from apolicefacil.utils.validators_br import (
    DocumentKind,
    classify_document,
    format_document,
    only_digits,
    validate_document,
)


class BrazilianDocument(BaseModel):
    """
    CPF ou CNPJ já normalizado (apenas dígitos) com o tipo inferido.
    Imutável; máscara e validade são derivadas sob demanda.
    """
    model_config = ConfigDict(frozen=True)

    number: str = Field(..., description="Somente dígitos")
    kind: DocumentKind = Field(default=DocumentKind.UNKNOWN)

    @field_validator("number", mode="before")
    @classmethod
    def _digits(cls, v: Any):
        return only_digits(None if v is None else str(v))

    @classmethod
    def from_raw(cls, raw: Optional[str]) -> "BrazilianDocument":
        return cls(number=raw or "", kind=classify_document(raw))

    @property
    def formatted(self) -> str:
        return format_document(self.number, self.kind)

    @property
    def is_valid(self) -> bool:
        return validate_document(self.number, self.kind)

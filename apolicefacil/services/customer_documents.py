from __future__ import annotations
import logging
import re
from typing import Any, Mapping

from apolicefacil.models import BrazilianDocument, CustomerPayload, PersonType
from apolicefacil.services.exceptions import CustomerValidationError
from apolicefacil.utils.validators_br import DocumentKind

logger = logging.getLogger(__name__)

# Tipo de pessoa -> documento exigido
_EXPECTED_KIND = {
    PersonType.PF: DocumentKind.CPF,
    PersonType.PJ: DocumentKind.CNPJ,
}

_KIND_MISMATCH = {
    PersonType.PF: "Para Pessoa Física, é necessário informar um CPF válido.",
    PersonType.PJ: "Para Pessoa Jurídica, é necessário informar um CNPJ válido.",
}

# Mesmo critério do formulário de cliente: algo@algo.algo, sem espaços.
# A importação de planilhas usa o is_valid_email, mais estrito.
_PAYLOAD_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def parse_person_type(value: Any) -> PersonType:
    s = str(value or "").strip().upper()
    try:
        return PersonType(s)
    except ValueError:
        raise CustomerValidationError(
            "Tipo de pessoa é obrigatório e deve ser PF ou PJ.", field="personType"
        ) from None


def check_customer_document(person_type: Any, raw: Any) -> BrazilianDocument:
    """
    Regra usada pelos handlers de criação/edição de cliente.
    Levanta CustomerValidationError com a primeira falha encontrada:
    documento ausente, tipo não inferível, PF sem CPF / PJ sem CNPJ, dígitos inválidos.
    """
    pt = person_type if isinstance(person_type, PersonType) else parse_person_type(person_type)

    if not raw or not isinstance(raw, str):
        raise CustomerValidationError("Documento (CPF/CNPJ) é obrigatório.", field="cnpjCpf")

    doc = BrazilianDocument.from_raw(raw)
    if doc.kind is DocumentKind.UNKNOWN:
        raise CustomerValidationError(
            "Formato de documento inválido. Informe um CPF ou CNPJ válido.", field="cnpjCpf"
        )

    if doc.kind is not _EXPECTED_KIND[pt]:
        logger.debug("Documento %s incompatível com tipo de pessoa %s", doc.kind.value, pt.value)
        raise CustomerValidationError(_KIND_MISMATCH[pt], field="cnpjCpf")

    if not doc.is_valid:
        raise CustomerValidationError(
            f"{doc.kind.value} inválido. Verifique os dígitos informados.", field="cnpjCpf"
        )
    return doc


def validate_customer_payload(data: Mapping[str, Any]) -> CustomerPayload:
    """
    Valida o corpo de um POST/PUT de cliente na mesma ordem dos handlers:
    corpo (precisa ser um objeto), nome, tipo de pessoa, documento, e-mail (opcional).
    Chaves aceitas: name, personType, cnpjCpf, email.
    """
    if not isinstance(data, Mapping):
        raise CustomerValidationError("Payload inválido.")

    name = data.get("name")
    if not isinstance(name, str) or len(name.strip()) < 3:
        raise CustomerValidationError(
            "Nome é obrigatório e deve ter no mínimo 3 caracteres.", field="name"
        )

    person_type = parse_person_type(data.get("personType"))
    doc = check_customer_document(person_type, data.get("cnpjCpf"))

    email = data.get("email")
    if email and not _PAYLOAD_EMAIL_RE.fullmatch(str(email)):
        raise CustomerValidationError("Email inválido.", field="email")

    payload = CustomerPayload(
        name=name, person_type=person_type, cnpj_cpf=doc.number,
        email=str(email) if email else None,
    )
    logger.info("Cliente validado: tipo=%s documento=%s", payload.person_type.value, doc.kind.value)
    return payload

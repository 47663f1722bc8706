from .document import BrazilianDocument
from .customer import (
    PersonType,
    CustomerPayload,
    CustomerImportRow,
    ProcessedCustomer,
    ImportSummary,
    IMPORT_COLUMNS,
)

__all__ = [
    "BrazilianDocument",
    "PersonType",
    "CustomerPayload",
    "CustomerImportRow",
    "ProcessedCustomer",
    "ImportSummary",
    "IMPORT_COLUMNS",
]

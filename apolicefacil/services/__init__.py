from .exceptions import CustomerValidationError
from .customer_documents import (
    parse_person_type,
    check_customer_document,
    validate_customer_payload,
)
from .customer_import import (
    row_errors,
    process_row,
    process_rows,
    process_customer_sheet,
    summarize,
    validate_customer_sheet,
    to_report_frame,
)

__all__ = [
    "CustomerValidationError",
    "parse_person_type",
    "check_customer_document",
    "validate_customer_payload",
    "row_errors",
    "process_row",
    "process_rows",
    "process_customer_sheet",
    "summarize",
    "validate_customer_sheet",
    "to_report_frame",
]

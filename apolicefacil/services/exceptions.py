from __future__ import annotations


class CustomerValidationError(ValueError):
    """Dados de cliente recusados; `message` já vem pronto para o usuário (HTTP 400)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field

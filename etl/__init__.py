# etl/__init__.py
"""Jobs de linha de comando do ApoliceFacil.

Use como módulos:
    python -m etl.validate_data       # planilha x contrato de colunas
    python -m etl.validate_customers  # valida CPF/CNPJ, e-mail etc. linha a linha
    python -m etl.run_all
"""
__all__ = []

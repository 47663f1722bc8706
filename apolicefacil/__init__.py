"""ApoliceFacil: validação e formatação de CPF/CNPJ e importação de clientes."""
__version__ = "0.1.0"

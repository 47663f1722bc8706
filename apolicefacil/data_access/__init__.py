from .repositories import load_customer_sheet, missing_columns, save_customer_report
from .storage import read_table, write_csv, write_excel, resolve, data_dir

__all__ = [
    "load_customer_sheet",
    "missing_columns",
    "save_customer_report",
    "read_table",
    "write_csv",
    "write_excel",
    "resolve",
    "data_dir",
]

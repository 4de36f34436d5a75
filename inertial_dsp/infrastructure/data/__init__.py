"""
Fontes de dados tabulares.
"""

from .csv_reader import ColumnReadResult, read_csv_column, parse_float, READ_ERROR

__all__ = ["ColumnReadResult", "read_csv_column", "parse_float", "READ_ERROR"]

"""Report validators"""
from .column_validator import ColumnNameValidator

__all__ = ['ColumnNameValidator']

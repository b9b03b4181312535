"""
Row-level quality checks over the data section
"""
import json
import logging
from typing import List

from ..models import RowQuality
from .rounding import round_half_up

logger = logging.getLogger(__name__)


def _is_blank(cell: str) -> bool:
    return not cell or cell.strip() == ''


class RowQualityAnalyzer:
    """Detect duplicate, empty, complete and misshapen rows"""

    def count_duplicates(self, rows: List[List[str]]) -> int:
        """Number of rows that repeat an earlier row exactly"""
        serialized = [json.dumps(row) for row in rows]
        return len(serialized) - len(set(serialized))

    def analyze(self, rows: List[List[str]], column_count: int) -> RowQuality:
        """
        Analyze data rows

        Args:
            rows: Tokenized data rows, header excluded
            column_count: Number of columns in the header

        Returns:
            RowQuality with counts and structural errors
        """
        empty_rows = sum(1 for row in rows if all(_is_blank(cell) for cell in row))
        complete_rows = sum(1 for row in rows if all(not _is_blank(cell) for cell in row))

        total_chars = sum(len(''.join(row)) for row in rows)
        cell_count = len(rows) * column_count
        average_field_length = round_half_up(total_chars / cell_count) if cell_count > 0 else 0.0

        inconsistent = sum(1 for row in rows if len(row) != column_count)
        errors = []
        if inconsistent > 0:
            errors.append(f"Found {inconsistent} row(s) with inconsistent column count")
            logger.debug(f"{inconsistent} of {len(rows)} rows do not have {column_count} fields")

        return RowQuality(
            duplicate_rows=self.count_duplicates(rows),
            empty_rows=empty_rows,
            complete_rows=complete_rows,
            average_field_length=average_field_length,
            inconsistent_rows=inconsistent,
            errors=errors,
        )

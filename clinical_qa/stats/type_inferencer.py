"""
Dominant data type inference for a single column
"""
import logging
import re
from datetime import datetime
from typing import List, Optional

import numpy as np
import pandas as pd
from dateutil import parser as dateparser

from ..config import QaConfig
from ..models import DataType

logger = logging.getLogger(__name__)

BOOLEAN_TOKENS = {'true', 'false', 'yes', 'no', '0', '1'}
DATE_PATTERN = re.compile(r'\d{4}-\d{2}-\d{2}|\d{2}/\d{2}/\d{4}')


def non_empty_values(values: List[Optional[str]]) -> List[str]:
    """Trimmed values that are neither None nor blank, in row order"""
    return [v.strip() for v in values if v is not None and v.strip() != '']


def numeric_series(values: List[str]) -> pd.Series:
    """Parse values to floats; unparseable or non-finite entries become NaN"""
    parsed = pd.to_numeric(pd.Series(values, dtype=object), errors='coerce').astype(float)
    return parsed.where(np.isfinite(parsed))


def is_boolean(value: str) -> bool:
    return value.lower() in BOOLEAN_TOKENS


def is_date(value: str) -> bool:
    """A value counts as a date only if it looks like one and actually parses"""
    match = DATE_PATTERN.search(value)
    if not match:
        return False
    day_first = '/' in match.group(0)
    try:
        # The matched part must be a real calendar date on its own
        datetime.strptime(match.group(0), '%d/%m/%Y' if day_first else '%Y-%m-%d')
        dateparser.parse(value, dayfirst=day_first)
        return True
    except (ValueError, OverflowError):
        return False


class TypeInferencer:
    """Classify a column as number, date, boolean, mixed, string or empty"""

    def __init__(self, config: QaConfig):
        """
        Initialize type inferencer

        Args:
            config: QaConfig instance
        """
        self.threshold = config.type_threshold

    def detect(self, values: List[Optional[str]]) -> DataType:
        """
        Infer the dominant type of a column

        Args:
            values: Raw values of the column across all data rows

        Returns:
            Inferred data type
        """
        present = non_empty_values(values)
        if not present:
            return 'empty'

        number_count = int(numeric_series(present).notna().sum())
        date_count = sum(1 for v in present if is_date(v))
        boolean_count = sum(1 for v in present if is_boolean(v))

        total = len(present)
        logger.debug(
            f"Type buckets over {total} values: number={number_count}, "
            f"date={date_count}, boolean={boolean_count}"
        )

        # Checked in priority order
        if number_count / total >= self.threshold:
            return 'number'
        if date_count / total >= self.threshold:
            return 'date'
        if boolean_count / total >= self.threshold:
            return 'boolean'

        if number_count or date_count or boolean_count:
            return 'mixed'
        return 'string'

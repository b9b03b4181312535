"""
Per-column statistics
"""
import logging
from typing import List, Optional

import numpy as np

from ..config import QaConfig
from ..models import (
    ColumnProfile,
    NumberColumnProfile,
    NumericStats,
    PlainColumnProfile,
    StringColumnProfile,
    StringStats,
)
from .rounding import round_half_up
from .type_inferencer import TypeInferencer, non_empty_values, numeric_series

logger = logging.getLogger(__name__)


class StatsExtractor:
    """Build a ColumnProfile from one column's raw values"""

    def __init__(self, config: QaConfig, type_inferencer: Optional[TypeInferencer] = None):
        """
        Initialize stats extractor

        Args:
            config: QaConfig instance
            type_inferencer: Inferencer to use (built from config when omitted)
        """
        self.sample_values_count = config.sample_values_count
        self.type_inferencer = type_inferencer or TypeInferencer(config)

    def extract_numeric_stats(self, values: List[str]) -> Optional[NumericStats]:
        """
        Compute min, max, mean, median and population standard deviation

        Args:
            values: Non-empty values of a numeric column

        Returns:
            NumericStats, or None when nothing parses
        """
        series = numeric_series(values).dropna()
        if series.empty:
            return None

        mean, median, std_dev = self._moments(series)
        if not np.isfinite([mean, median, std_dev]).all():
            # Sums near the float limit overflow; redo the moments on values scaled into [-1, 1]
            scale = float(series.abs().max())
            mean, median, std_dev = (m * scale for m in self._moments(series / scale))

        stats = NumericStats(
            min=float(series.min()),
            max=float(series.max()),
            mean=mean,
            median=median,
            stdDev=std_dev,
        )
        logger.debug(f"Numeric stats: {stats}")
        return stats

    @staticmethod
    def _moments(series):
        mean = series.mean()
        return (
            float(mean),
            float(series.median()),
            float(np.sqrt(((series - mean) ** 2).mean())),
        )

    def extract_string_stats(self, values: List[str]) -> Optional[StringStats]:
        """
        Compute character length statistics

        Args:
            values: Non-empty values of a string column

        Returns:
            StringStats, or None for an empty list
        """
        if not values:
            return None

        lengths = [len(v) for v in values]
        return StringStats(
            minLength=min(lengths),
            maxLength=max(lengths),
            avgLength=round_half_up(sum(lengths) / len(lengths)),
        )

    def analyze_column(self,
                       values: List[Optional[str]],
                       name: str,
                       index: int,
                       total_rows: int) -> ColumnProfile:
        """
        Profile a single column

        Args:
            values: Raw values of the column, one per data row
            name: Column name from the header
            index: Zero-based column position
            total_rows: Number of data rows (header excluded)

        Returns:
            ColumnProfile variant matching the inferred data type
        """
        present = non_empty_values(values)
        missing = total_rows - len(present)
        data_type = self.type_inferencer.detect(values)

        common = dict(
            name=name,
            index=index,
            uniqueValues=len(set(present)),
            missingValues=missing,
            missingPercentage=(missing / total_rows * 100) if total_rows > 0 else 0.0,
            sampleValues=present[:self.sample_values_count],
        )

        if data_type == 'number':
            # Samples of a numeric column only show values that parse
            parsed = numeric_series(present).notna()
            common['sampleValues'] = [v for v, ok in zip(present, parsed) if ok][:self.sample_values_count]
            return NumberColumnProfile(numericStats=self.extract_numeric_stats(present), **common)
        if data_type == 'string':
            return StringColumnProfile(stringStats=self.extract_string_stats(present), **common)
        return PlainColumnProfile(dataType=data_type, **common)

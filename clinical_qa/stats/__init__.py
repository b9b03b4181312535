"""Column and row statistics"""
from .type_inferencer import TypeInferencer
from .column_stats import StatsExtractor
from .row_quality import RowQualityAnalyzer

__all__ = ['TypeInferencer', 'StatsExtractor', 'RowQualityAnalyzer']

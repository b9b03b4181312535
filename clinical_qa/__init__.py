"""
Clinical CSV QA - package exports
"""
from .analyzer import QaAnalyzer, analyze_csv
from .config import QaConfig
from .formatting import format_file_size, generate_qa_summary
from .models import (
    NumberColumnProfile,
    NumericStats,
    PlainColumnProfile,
    QaReport,
    QaSummary,
    StringColumnProfile,
    StringStats,
)

__all__ = [
    'QaAnalyzer',
    'analyze_csv',
    'QaConfig',
    'QaReport',
    'QaSummary',
    'NumberColumnProfile',
    'StringColumnProfile',
    'PlainColumnProfile',
    'NumericStats',
    'StringStats',
    'format_file_size',
    'generate_qa_summary',
]

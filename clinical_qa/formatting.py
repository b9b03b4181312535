"""
Human-readable renderings of QA results
"""
from .models import QaReport

SIZE_UNITS = ['Bytes', 'KB', 'MB', 'GB']


def format_file_size(size: int) -> str:
    """Format a byte count, e.g. 1536 -> '1.5 KB'"""
    if size <= 0:
        return '0 Bytes'
    value = float(size)
    unit = 0
    while value >= 1024 and unit < len(SIZE_UNITS) - 1:
        value /= 1024
        unit += 1
    text = f"{value:.2f}".rstrip('0').rstrip('.')
    return f"{text} {SIZE_UNITS[unit]}"


def generate_qa_summary(report: QaReport) -> str:
    """One-line summary of a report for upload listings"""
    if not report.isValid:
        return f"QA Failed: {', '.join(report.errors)}"

    parts = [
        f"{report.totalRows} rows",
        f"{report.totalColumns} columns",
        f"{report.missingValuesPercentage:.1f}% missing",
        f"{report.duplicateRowsCount} duplicates",
    ]
    if report.warnings:
        parts.append(f"{len(report.warnings)} warning(s)")

    return ', '.join(parts)

"""
QaAnalyzer - CSV quality assurance orchestrator
"""
from datetime import datetime, timezone
from typing import Dict, List, Optional, Union
import logging

from .classification import FileTypeClassifier
from .config import QaConfig
from .loaders import CSVLoader, FileLoader
from .models import QaReport, QaSummary
from .parsing import detect_delimiter, parse_csv_content
from .stats import RowQualityAnalyzer, StatsExtractor, TypeInferencer
from .validators import ColumnNameValidator

logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class QaAnalyzer:
    """
    QA Analyzer: profiles a CSV upload and decides whether it passes.
    Detects the delimiter, tokenizes the file, profiles each column, checks
    row-level quality and assembles everything into a single QaReport.
    """

    def __init__(self, config: Optional[QaConfig] = None):
        """
        Initialize QaAnalyzer with configuration

        Args:
            config: QaConfig instance (defaults to env-based config)
        """
        self.config = config or QaConfig.from_env()

        # Initialize components
        self.loaders = [CSVLoader()]
        self.type_inferencer = TypeInferencer(self.config)
        self.stats_extractor = StatsExtractor(self.config, self.type_inferencer)
        self.file_type_classifier = FileTypeClassifier(self.config)
        self.row_analyzer = RowQualityAnalyzer()
        self.column_validator = ColumnNameValidator()

    def analyze_file(self,
                     file_name: str,
                     file_data: bytes,
                     modality: Optional[str] = None) -> QaReport:
        """
        Analyze an uploaded file using the loader matching its name

        Args:
            file_name: Declared file name
            file_data: Raw file bytes
            modality: Declared data modality

        Returns:
            QaReport (a failure report when no loader accepts the file)
        """
        for loader in self.loaders:
            if loader.can_load(file_name):
                return self.analyze(file_data, file_name, len(file_data), modality, loader=loader)

        logger.warning(f"No loader found for file: {file_name}")
        return _error_report(
            file_name, len(file_data),
            [f"Failed to analyze CSV: No loader found for file: {file_name}"]
        )

    def analyze(self,
                content: Union[str, bytes],
                file_name: str,
                file_size: int,
                modality: Optional[str] = None,
                loader: Optional[FileLoader] = None) -> QaReport:
        """
        Run the full QA pass over one file

        Never raises: any failure is reported through the errors list of
        the returned report.

        Args:
            content: File content as text or UTF-8 bytes
            file_name: Declared file name
            file_size: Declared size in bytes
            modality: Declared data modality
            loader: Loader used to decode bytes

        Returns:
            QaReport
        """
        try:
            if isinstance(content, bytes):
                content = (loader or self.loaders[0]).load(content)
            return self._analyze_text(content, file_name, file_size, modality)
        except Exception as e:
            logger.exception(f"QA analysis failed for {file_name}")
            return _error_report(file_name, file_size, [f"Failed to analyze CSV: {e}"])

    def _analyze_text(self,
                      content: str,
                      file_name: str,
                      file_size: int,
                      modality: Optional[str]) -> QaReport:
        errors: List[str] = []
        warnings: List[str] = []

        if not content or not content.strip():
            return _error_report(file_name, file_size, ["File is empty"])

        delimiter = detect_delimiter(content)
        rows = parse_csv_content(content, delimiter)
        if not rows:
            return _error_report(file_name, file_size, ["No rows found in CSV file"])

        # First row is always the header
        column_names = rows[0]
        data_rows = rows[1:]
        total_rows = len(data_rows)
        total_columns = len(column_names)

        file_type = self.file_type_classifier.detect(column_names, modality)

        column_validation = self.column_validator.validate(column_names)
        errors.extend(column_validation['errors'])
        warnings.extend(column_validation['warnings'])

        if total_rows == 0:
            warnings.append("CSV file contains only header row, no data")

        # Column profiles
        column_metrics = []
        missing_by_column: Dict[str, int] = {}
        total_missing = 0
        for index, name in enumerate(column_names):
            values = [row[index] if index < len(row) else '' for row in data_rows]
            profile = self.stats_extractor.analyze_column(values, name, index, total_rows)
            column_metrics.append(profile)
            total_missing += profile.missingValues
            missing_by_column[name] = profile.missingValues

        row_quality = self.row_analyzer.analyze(data_rows, total_columns)

        if row_quality.duplicate_rows > 0:
            warnings.append(f"Found {row_quality.duplicate_rows} duplicate row(s)")

        if row_quality.empty_rows > 0:
            warnings.append(f"Found {row_quality.empty_rows} completely empty row(s)")

        cell_count = total_rows * total_columns
        missing_percentage = (total_missing / cell_count * 100) if cell_count > 0 else 0.0
        if missing_percentage > self.config.missing_warning_percent:
            warnings.append(f"High percentage of missing values: {missing_percentage:.2f}%")

        errors.extend(row_quality.errors)

        logger.info(
            f"Analyzed {file_name}: {total_rows} rows, {total_columns} columns, "
            f"{len(errors)} error(s), {len(warnings)} warning(s)"
        )

        return QaReport(
            fileName=file_name,
            fileSize=file_size,
            encoding="UTF-8",
            fileType=file_type,
            totalRows=total_rows,
            totalColumns=total_columns,
            columnNames=column_names,
            delimiter=delimiter,
            hasHeader=True,
            missingValuesCount=total_missing,
            missingValuesByColumn=missing_by_column,
            missingValuesPercentage=missing_percentage,
            duplicateRowsCount=row_quality.duplicate_rows,
            duplicateRowsPercentage=(row_quality.duplicate_rows / total_rows * 100) if total_rows > 0 else 0.0,
            columnMetrics=column_metrics,
            isValid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
            summary=QaSummary(
                emptyRows=row_quality.empty_rows,
                completeRows=row_quality.complete_rows,
                averageFieldLength=row_quality.average_field_length,
            ),
            analyzedAt=_now(),
        )


def _error_report(file_name: str, file_size: int, errors: List[str]) -> QaReport:
    """Failure report with no structure"""
    return QaReport(
        fileName=file_name,
        fileSize=file_size,
        encoding="unknown",
        totalRows=0,
        totalColumns=0,
        columnNames=[],
        delimiter=",",
        hasHeader=False,
        missingValuesCount=0,
        missingValuesByColumn={},
        missingValuesPercentage=0.0,
        duplicateRowsCount=0,
        duplicateRowsPercentage=0.0,
        columnMetrics=[],
        isValid=False,
        errors=errors,
        warnings=[],
        summary=QaSummary(),
        analyzedAt=_now(),
    )


def analyze_csv(content: Union[str, bytes],
                file_name: str,
                file_size: Optional[int] = None,
                modality: Optional[str] = None) -> QaReport:
    """Analyze one CSV file with the environment configuration"""
    if file_size is None:
        file_size = len(content.encode('utf-8')) if isinstance(content, str) else len(content)
    try:
        analyzer = QaAnalyzer()
    except ValueError as e:
        logger.exception("Invalid QA configuration in environment")
        return _error_report(file_name, file_size, [f"Failed to analyze CSV: {e}"])
    return analyzer.analyze(content, file_name, file_size, modality)

"""Report storage backends"""
from .base import ReportNotFoundError, ReportStore
from .minio_storage import MinIOReportStore

__all__ = ['ReportNotFoundError', 'ReportStore', 'MinIOReportStore']

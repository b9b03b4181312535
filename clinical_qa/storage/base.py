"""
Abstract base class for report storage backends
"""
from abc import ABC, abstractmethod

from ..models import QaReport


class ReportNotFoundError(Exception):
    """Raised when no report is stored for an upload"""


class ReportStore(ABC):
    """Abstract report sink keyed by upload record id"""

    @abstractmethod
    def save_report(self, upload_id: str, report: QaReport) -> str:
        """
        Persist a report alongside an upload record

        Args:
            upload_id: Upload record identifier
            report: Report to store

        Returns:
            Storage key of the stored report
        """
        pass

    @abstractmethod
    def load_report(self, upload_id: str) -> QaReport:
        """
        Read a stored report back

        Args:
            upload_id: Upload record identifier

        Returns:
            The stored QaReport

        Raises:
            ReportNotFoundError: If nothing is stored for the upload
        """
        pass

    @abstractmethod
    def delete_report(self, upload_id: str) -> None:
        """Remove the report stored for an upload, if any"""
        pass

"""
Shared fixtures for the QA pipeline tests
"""
from typing import Dict

import pytest

from clinical_qa.analyzer import QaAnalyzer
from clinical_qa.config import QaConfig
from clinical_qa.models import QaReport
from clinical_qa.storage import ReportNotFoundError, ReportStore


class InMemoryReportStore(ReportStore):
    """Report store keeping serialized reports in a dict"""

    def __init__(self):
        self.objects: Dict[str, str] = {}

    def save_report(self, upload_id: str, report: QaReport) -> str:
        self.objects[upload_id] = report.to_json()
        return f"{upload_id}.json"

    def load_report(self, upload_id: str) -> QaReport:
        if upload_id not in self.objects:
            raise ReportNotFoundError(f"No QA report stored for upload {upload_id}")
        return QaReport.from_json(self.objects[upload_id])

    def delete_report(self, upload_id: str) -> None:
        self.objects.pop(upload_id, None)


@pytest.fixture
def config():
    """Default analysis configuration"""
    return QaConfig()


@pytest.fixture
def analyzer(config):
    """QaAnalyzer with default configuration"""
    return QaAnalyzer(config)


@pytest.fixture
def report_store():
    """Empty in-memory report store"""
    return InMemoryReportStore()


def build_csv(rows) -> str:
    """Join rows of fields into comma separated text"""
    return ''.join(','.join(row) + '\n' for row in rows)

"""
Unit tests for MinIO report storage
"""

import json
from unittest.mock import Mock

import pytest

from clinical_qa.config import Settings
from clinical_qa.models import QaReport
from clinical_qa.storage import MinIOReportStore


class TestMinIOReportStore:
    """Test cases for MinIOReportStore"""

    @pytest.fixture
    def mock_client(self):
        """Create a mock MinIO client"""
        client = Mock()
        client.bucket_exists.return_value = True
        return client

    @pytest.fixture
    def store(self, mock_client):
        """Create a MinIOReportStore backed by the mock client"""
        settings = Settings(MINIO_BUCKET="qa-reports", REPORT_PREFIX="reports")
        return MinIOReportStore(settings, client=mock_client)

    @pytest.fixture
    def report(self, analyzer):
        """A small valid report"""
        return analyzer.analyze("a,b\n1,x\n2,y\n", "small.csv", 12)

    def test_save_report(self, store, mock_client, report):
        """Test reports are written as JSON under the prefix"""
        key = store.save_report("upload-1", report)

        assert key == "reports/upload-1.json"
        args, kwargs = mock_client.put_object.call_args
        assert args[0] == "qa-reports"
        assert args[1] == "reports/upload-1.json"
        payload = args[2].read()
        assert kwargs["length"] == len(payload)
        assert kwargs["content_type"] == "application/json"
        assert json.loads(payload)["fileName"] == "small.csv"

    def test_save_creates_missing_bucket_once(self, store, mock_client, report):
        """Test the bucket is created when absent and checked only once"""
        mock_client.bucket_exists.return_value = False

        store.save_report("u1", report)
        store.save_report("u2", report)

        mock_client.make_bucket.assert_called_once_with("qa-reports")
        assert mock_client.bucket_exists.call_count == 1

    def test_load_report(self, store, mock_client, report):
        """Test stored JSON is rebuilt into a report"""
        response = Mock()
        response.read.return_value = report.to_json().encode("utf-8")
        mock_client.get_object.return_value = response

        loaded = store.load_report("upload-1")

        assert loaded == report
        assert isinstance(loaded, QaReport)
        mock_client.get_object.assert_called_once_with("qa-reports", "reports/upload-1.json")
        response.close.assert_called_once()

    def test_save_failure_propagates(self, store, mock_client, report):
        """Test storage errors are raised to the caller"""
        mock_client.put_object.side_effect = ConnectionError("minio down")

        with pytest.raises(ConnectionError):
            store.save_report("upload-1", report)

    def test_delete_report(self, store, mock_client):
        """Test report deletion"""
        store.delete_report("upload-1")
        mock_client.remove_object.assert_called_once_with("qa-reports", "reports/upload-1.json")

    def test_object_name_without_prefix(self, mock_client):
        """Test keys when no prefix is configured"""
        store = MinIOReportStore(Settings(REPORT_PREFIX=""), client=mock_client)
        assert store.object_name("abc") == "abc.json"

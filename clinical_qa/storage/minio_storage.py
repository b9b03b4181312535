"""
MinIO report storage implementation
"""
import io
import logging

from minio import Minio
from minio.error import S3Error

from ..config import Settings
from ..models import QaReport
from .base import ReportNotFoundError, ReportStore

logger = logging.getLogger(__name__)


class MinIOReportStore(ReportStore):
    """Stores reports as JSON objects in a MinIO bucket"""

    def __init__(self, settings: Settings, client: Minio = None):
        """
        Initialize MinIO report store

        Args:
            settings: Service settings with MinIO connection details
            client: Preconfigured client (created from settings when omitted)
        """
        self.endpoint = settings.MINIO_ENDPOINT
        self.bucket = settings.MINIO_BUCKET
        self.prefix = settings.REPORT_PREFIX.strip('/')
        self.client = client or self._create_client(settings)
        self._bucket_checked = False
        logger.info(f"MinIO report store initialized: {self.endpoint}, bucket: {self.bucket}")

    def _create_client(self, settings: Settings) -> Minio:
        """Create MinIO client"""
        endpoint = settings.MINIO_ENDPOINT
        secure = False if ":9000" in endpoint or endpoint.startswith("minio") else True
        return Minio(
            endpoint,
            access_key=settings.MINIO_ACCESS_KEY,
            secret_key=settings.MINIO_SECRET_KEY,
            secure=secure
        )

    def _ensure_bucket(self) -> None:
        if self._bucket_checked:
            return
        if not self.client.bucket_exists(self.bucket):
            logger.info(f"Creating bucket {self.bucket}")
            self.client.make_bucket(self.bucket)
        self._bucket_checked = True

    def object_name(self, upload_id: str) -> str:
        """Object key for an upload's report"""
        return f"{self.prefix}/{upload_id}.json" if self.prefix else f"{upload_id}.json"

    def save_report(self, upload_id: str, report: QaReport) -> str:
        """Upload the report JSON"""
        object_name = self.object_name(upload_id)
        data = report.to_json().encode('utf-8')
        try:
            self._ensure_bucket()
            self.client.put_object(
                self.bucket,
                object_name,
                io.BytesIO(data),
                length=len(data),
                content_type="application/json"
            )
            logger.info(f"Stored QA report for upload {upload_id}: {object_name} ({len(data)} bytes)")
            return object_name
        except Exception as e:
            logger.error(f"Failed to store QA report for upload {upload_id}: {e}")
            raise

    def load_report(self, upload_id: str) -> QaReport:
        """Download and rebuild a stored report"""
        object_name = self.object_name(upload_id)
        try:
            response = self.client.get_object(self.bucket, object_name)
        except S3Error as e:
            if e.code == "NoSuchKey":
                raise ReportNotFoundError(f"No QA report stored for upload {upload_id}") from e
            logger.error(f"Failed to read QA report {object_name}: {e}")
            raise

        try:
            data = response.read()
        finally:
            response.close()
            response.release_conn()

        logger.debug(f"Downloaded {object_name}: {len(data)} bytes")
        return QaReport.from_json(data)

    def delete_report(self, upload_id: str) -> None:
        """Delete the stored report"""
        object_name = self.object_name(upload_id)
        try:
            self.client.remove_object(self.bucket, object_name)
            logger.info(f"Deleted QA report {object_name}")
        except Exception as e:
            logger.error(f"Failed to delete QA report {object_name}: {e}")
            raise

"""
Configuration for the CSV QA pipeline and the service around it
"""
from dataclasses import dataclass
import os

from pydantic_settings import BaseSettings


@dataclass(frozen=True)
class QaConfig:
    """Thresholds and limits used by the analysis pipeline"""

    # Column profiling
    sample_values_count: int = 5
    type_threshold: float = 0.8

    # Report policy
    missing_warning_percent: float = 20.0

    # File-type fingerprinting
    signature_min_matches: int = 4

    @classmethod
    def from_env(cls) -> 'QaConfig':
        """Create configuration from environment variables"""
        return cls(
            sample_values_count=int(os.getenv("QA_SAMPLE_VALUES", "5")),
            type_threshold=float(os.getenv("QA_TYPE_THRESHOLD", "0.8")),
            missing_warning_percent=float(os.getenv("QA_MISSING_WARNING_PERCENT", "20")),
            signature_min_matches=int(os.getenv("QA_SIGNATURE_MIN_MATCHES", "4")),
        )


class Settings(BaseSettings):
    """Service settings"""

    # Service info
    SERVICE_NAME: str = "CSV QA Service"
    SERVICE_HOST: str = os.getenv("SERVICE_HOST", "0.0.0.0")
    SERVICE_PORT: int = int(os.getenv("SERVICE_PORT", "8000"))

    # Uploads
    MAX_UPLOAD_BYTES: int = int(os.getenv("MAX_UPLOAD_BYTES", str(50 * 1024 * 1024)))

    # Report storage
    MINIO_ENDPOINT: str = os.getenv("MINIO_ENDPOINT", "minio:9000")
    MINIO_ACCESS_KEY: str = os.getenv("MINIO_ACCESS_KEY", "minioadmin")
    MINIO_SECRET_KEY: str = os.getenv("MINIO_SECRET_KEY", "minioadmin")
    MINIO_BUCKET: str = os.getenv("MINIO_BUCKET", "qa-reports")
    REPORT_PREFIX: str = os.getenv("REPORT_PREFIX", "reports")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    class Config:
        case_sensitive = True


settings = Settings()

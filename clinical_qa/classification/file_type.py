"""
Header-based file type classification
"""
from typing import List, Optional
import logging

from ..config import QaConfig
from .signatures import GENERIC_FILE_TYPES, UNKNOWN_FILE_TYPE, WEARABLE_SIGNATURES, WEARABLE_UNKNOWN

logger = logging.getLogger(__name__)


class FileTypeClassifier:
    """Fingerprint a file from its column names and declared modality"""

    def __init__(self, config: QaConfig):
        self.min_matches = config.signature_min_matches

    def detect(self, column_names: List[str], modality: Optional[str] = None) -> str:
        """
        Classify a file

        Args:
            column_names: Header fields
            modality: Modality declared by the uploader

        Returns:
            File type tag such as 'wearable-fitbit' or 'unknown'
        """
        if modality in GENERIC_FILE_TYPES:
            return GENERIC_FILE_TYPES[modality]

        if modality != 'wearable':
            return UNKNOWN_FILE_TYPE

        normalized = {name.strip().lower() for name in column_names}
        for file_type, signature in WEARABLE_SIGNATURES.items():
            matches = sum(1 for col in signature if col in normalized)
            logger.debug(f"{file_type}: {matches}/{len(signature)} signature columns present")
            if matches >= self.min_matches:
                return file_type

        return WEARABLE_UNKNOWN

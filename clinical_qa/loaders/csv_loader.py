"""
CSV file loader implementation
"""
import logging
from .base import FileLoader

logger = logging.getLogger(__name__)


class CSVLoader(FileLoader):
    """Delimited text loader (csv, tsv, txt)"""

    extensions = ('.csv', '.tsv', '.txt')

    def can_load(self, file_name: str) -> bool:
        """Check if file is delimited text"""
        return file_name.lower().endswith(self.extensions)

    def load(self, file_data: bytes) -> str:
        """Decode CSV bytes as UTF-8, dropping a leading byte order mark"""
        try:
            text = file_data.decode('utf-8-sig')
            logger.debug(f"Decoded CSV: {len(file_data)} bytes, {len(text)} characters")
            return text
        except UnicodeDecodeError as e:
            logger.error(f"Failed to decode CSV as UTF-8: {e}")
            raise

"""
Header validation
"""
import re
from typing import Dict, List

# Letters, digits, underscore, space and hyphen
_ALLOWED_NAME = re.compile(r'[A-Za-z0-9_ \-]*')


class ColumnNameValidator:
    """Check header names for blanks, duplicates and unusual characters"""

    def validate(self, column_names: List[str]) -> Dict[str, List[str]]:
        """
        Validate column names

        Args:
            column_names: Header fields

        Returns:
            Dictionary with 'errors' and 'warnings' lists
        """
        errors = []
        warnings = []

        empty_count = sum(1 for name in column_names if not name or name.strip() == '')
        if empty_count > 0:
            errors.append(f"Found {empty_count} empty column name(s)")

        if len(set(column_names)) != len(column_names):
            warnings.append("Found duplicate column names")

        for name in column_names:
            if name and not _ALLOWED_NAME.fullmatch(name):
                warnings.append(f'Column "{name}" contains special characters')

        return {'errors': errors, 'warnings': warnings}

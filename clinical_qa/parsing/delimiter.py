"""
Delimiter detection from the header line
"""
import logging

logger = logging.getLogger(__name__)

# Candidate order doubles as the tie-break order
CANDIDATE_DELIMITERS = [',', ';', '\t', '|']
DEFAULT_DELIMITER = ','


def detect_delimiter(content: str) -> str:
    """
    Pick the field separator used by a CSV file

    Args:
        content: Full decoded file text

    Returns:
        The candidate seen most often on the first line, or a comma
    """
    first_line = content.split('\n')[0]
    counts = {delimiter: first_line.count(delimiter) for delimiter in CANDIDATE_DELIMITERS}

    best = max(CANDIDATE_DELIMITERS, key=lambda d: counts[d])
    if counts[best] == 0:
        return DEFAULT_DELIMITER

    logger.debug(f"Delimiter counts on header line: {counts}")
    return best

"""
Line-oriented CSV tokenizer
"""
from enum import Enum
from typing import List


class ScanState(Enum):
    """Position of the scanner relative to quoted regions"""
    UNQUOTED = "unquoted"
    QUOTED = "quoted"
    QUOTE_IN_QUOTED = "quote_in_quoted"


QUOTE = '"'


def split_line(line: str, delimiter: str) -> List[str]:
    """
    Split one line into trimmed fields

    A doubled quote inside a quoted region yields one literal quote.
    Any other quote only opens or closes a region and is dropped.
    """
    fields = []
    current = []
    state = ScanState.UNQUOTED

    for char in line:
        if state is ScanState.UNQUOTED:
            if char == QUOTE:
                state = ScanState.QUOTED
            elif char == delimiter:
                fields.append(''.join(current).strip())
                current = []
            else:
                current.append(char)

        elif state is ScanState.QUOTED:
            if char == QUOTE:
                state = ScanState.QUOTE_IN_QUOTED
            else:
                current.append(char)

        else:
            if char == QUOTE:
                current.append(QUOTE)
                state = ScanState.QUOTED
            elif char == delimiter:
                fields.append(''.join(current).strip())
                current = []
                state = ScanState.UNQUOTED
            else:
                current.append(char)
                state = ScanState.UNQUOTED

    fields.append(''.join(current).strip())
    return fields


def parse_csv_content(content: str, delimiter: str) -> List[List[str]]:
    """
    Tokenize CSV text into rows of fields

    Args:
        content: Full decoded file text
        delimiter: Field separator

    Returns:
        One row per non-blank line; rows are not padded to the header width
    """
    lines = [line for line in content.split('\n') if line.strip()]
    return [split_line(line, delimiter) for line in lines]

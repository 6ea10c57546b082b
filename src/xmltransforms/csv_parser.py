"""
CSV Parser for xmltransforms (Layer 1: Raw Text → Records).

Converts customer CSV text into fixed-width ``Record`` objects.

CSV Format:
    CustomerID,CompanyName,ContactName,ContactTitle,Phone,
    Address,City,Region,PostalCode,Country

Syntax Notes:
    - Lines are separated by CR and/or LF; empty lines are skipped
    - Fields are NOT quoted or escaped: a line is split on every comma
    - There is no header row
"""

import logging
import re
from typing import List

from xmltransforms.exceptions import FormatError
from xmltransforms.model import RECORD_WIDTH, Record


logger = logging.getLogger(__name__)

_LINE_BREAK_RE = re.compile(r"[\r\n]")


def split_lines(content: str) -> List[str]:
    """Split on CR and LF, dropping empty lines."""
    return [line for line in _LINE_BREAK_RE.split(content) if line]


def parse_record(line: str, line_number: int = 1) -> Record:
    """
    Split one CSV line into a Record.

    Args:
        line: A single non-empty line
        line_number: 1-based position among the non-empty lines (for errors)

    Returns:
        Record with exactly RECORD_WIDTH fields

    Raises:
        FormatError: If the line has fewer than RECORD_WIDTH fields
    """
    fields = line.split(",")
    if len(fields) < RECORD_WIDTH:
        raise FormatError(
            f"Line {line_number}: expected {RECORD_WIDTH} fields, got {len(fields)}: {line!r}"
        )
    if len(fields) > RECORD_WIDTH:
        logger.debug(
            "Line %d: ignoring %d trailing field(s)", line_number, len(fields) - RECORD_WIDTH
        )
    return Record(fields=tuple(fields[:RECORD_WIDTH]))


def parse_records(content: str) -> List[Record]:
    """
    Parse CSV content into Records.

    Args:
        content: CSV as string

    Returns:
        One Record per non-empty line, in input order

    Raises:
        FormatError: If any line has too few fields
    """
    return [
        parse_record(line, line_number)
        for line_number, line in enumerate(split_lines(content), start=1)
    ]


__all__ = [
    "split_lines",
    "parse_record",
    "parse_records",
]

"""
Input reading module.

This module reads customer favorite-artist lists from a plain text file,
one customer per line, for the artist pair finder.
"""

import logging
from typing import List

from ..constants import ARTIST_DELIMITER
from ..models import InputUnavailable, ReadResult

logger = logging.getLogger(__name__)


def split_record(line: str, delimiter: str = ARTIST_DELIMITER, strip_names: bool = False) -> List[str]:
    """
    Split one input line into a customer's artist names.

    No quoting or escaping is recognized. Trailing empty fields are
    dropped, so an empty line becomes an empty record and ``"a,b,"``
    becomes ``["a", "b"]``.

    Args:
        line: Input line without its line terminator
        delimiter: Field separator
        strip_names: Strip surrounding whitespace from each name

    Returns:
        List of artist names in line order
    """
    names = line.split(delimiter)
    if strip_names:
        names = [name.strip() for name in names]

    while names and names[-1] == "":
        names.pop()
    return names


def read_records(
    file_path: str,
    delimiter: str = ARTIST_DELIMITER,
    strip_names: bool = False,
) -> ReadResult:
    """
    Read every customer record from an input file.

    Lines are never rejected: blank lines yield empty records and a line
    without a delimiter yields a single-artist record.

    Args:
        file_path: Path to the input file
        delimiter: Field separator
        strip_names: Strip surrounding whitespace from each name

    Returns:
        ReadResult with records in file order, or with ``error`` set when
        the file cannot be opened or decoded as UTF-8
    """
    records = []

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            for line in f:
                records.append(split_record(line.rstrip("\r\n"), delimiter, strip_names))
    except OSError as e:
        logger.debug(f"Unable to open input file {file_path}: {e}")
        return ReadResult(
            records=[],
            lines_read=0,
            error=InputUnavailable(path=file_path, reason=e.strerror or str(e)),
        )
    except UnicodeDecodeError as e:
        logger.debug(f"Unable to decode input file {file_path}: {e}")
        return ReadResult(
            records=[],
            lines_read=0,
            error=InputUnavailable(path=file_path, reason=f"not valid UTF-8: {e.reason}"),
        )

    logger.info(f"Read {len(records)} customer records from {file_path}")
    return ReadResult(records=records, lines_read=len(records))

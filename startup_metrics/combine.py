"""Union of already-produced comparison tables, tagged by platform."""

import logging
from typing import Iterable

from startup_metrics.formatter import COMBINED_HEADER, DELIMITER
from startup_metrics.reader import get_lines

logger = logging.getLogger(__name__)


def infer_platform(filename: str) -> str:
    """``desktop`` if the path mentions it, ``web`` for everything else."""
    return "desktop" if "desktop" in filename else "web"


def tag_records(lines: list[str], platform: str) -> list[list[str]]:
    """Split table rows (header skipped) and append *platform*.

    Rows that do not end up with exactly one cell per combined column are dropped.
    """
    records = []
    for line in lines[1:]:
        record = line.split(DELIMITER) + [platform]
        if len(record) == len(COMBINED_HEADER):
            records.append(record)
        elif line:
            logger.debug("Dropping malformed row: %r", line)
    return records


def get_records(filename: str) -> list[list[str]]:
    return tag_records(get_lines(filename), infer_platform(filename))


def combine_tables(filenames: Iterable[str]) -> list[list[str]]:
    """Header row followed by the tagged rows of every file, in argument order."""
    all_records = [list(COMBINED_HEADER)]
    for filename in filenames:
        records = get_records(filename)
        logger.info("%s: %d rows", filename, len(records))
        all_records.extend(records)
    return all_records

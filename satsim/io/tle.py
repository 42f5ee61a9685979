"""
TLE Catalogs
============

Parsing of two-line element catalogs and bulk loading into a universe.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

logger = logging.getLogger(__name__)

_LINE1 = re.compile(r'^1\s')
_LINE2 = re.compile(r'^2\s')


@dataclass
class TleEntry:
    """One catalog entry."""
    name: str
    line1: str
    line2: str


def parse_tle_catalog_text(text: Optional[str], limit: Optional[int] = None) -> List[TleEntry]:
    """
    Parse TLE text in 2-line or 3-line format.

    Blank lines and surrounding whitespace are ignored, and lines that do
    not start an entry are skipped. Entries without a name line are named
    after their catalog number.

    Args:
        text: Catalog text
        limit: Maximum number of entries, None for all

    Returns:
        Parsed entries in file order
    """
    lines = [line.strip() for line in str(text or '').splitlines()]
    lines = [line for line in lines if line]

    entries: List[TleEntry] = []
    i = 0
    while i < len(lines) and (limit is None or len(entries) < limit):
        a = lines[i]
        b = lines[i + 1] if i + 1 < len(lines) else ''
        c = lines[i + 2] if i + 2 < len(lines) else ''

        if _LINE1.match(a) and _LINE2.match(b):
            entries.append(TleEntry(a[2:7].strip() or 'SAT', a, b))
            i += 2
        elif _LINE1.match(b) and _LINE2.match(c):
            entries.append(TleEntry(a, b, c))
            i += 3
        else:
            i += 1

    return entries


def read_tle_catalog(path: Union[str, Path], limit: Optional[int] = None) -> List[TleEntry]:
    """
    Read and parse a TLE catalog file.

    Args:
        path: Catalog file path
        limit: Maximum number of entries

    Returns:
        Parsed entries
    """
    text = Path(path).read_text()
    entries = parse_tle_catalog_text(text, limit)
    logger.info("Read %d TLE entries from %s", len(entries), path)
    return entries


def add_tle_catalog(universe, entries, orientation: str = 'nadir',
                    lagrange_interpolated: bool = True, limit: Optional[int] = None) -> list:
    """
    Add SGP4 satellites for each catalog entry.

    Args:
        universe: Target universe
        entries: Parsed entries, or raw catalog text
        orientation: Attitude mode label
        lagrange_interpolated: Wrap each satellite in a Lagrange cache
        limit: Maximum number of satellites

    Returns:
        Added satellites
    """
    if isinstance(entries, str):
        entries = parse_tle_catalog_text(entries, limit)
    elif limit is not None:
        entries = list(entries)[:limit]

    satellites = []
    for entry in entries:
        satellites.append(universe.add_sgp4_satellite(
            entry.name, entry.line1, entry.line2, orientation, lagrange_interpolated))

    logger.info("Added %d TLE satellites", len(satellites))
    return satellites

"""
IO Module
=========

Catalog readers.
"""

from .tle import TleEntry, parse_tle_catalog_text, read_tle_catalog, add_tle_catalog

__all__ = [
    'TleEntry',
    'parse_tle_catalog_text',
    'read_tle_catalog',
    'add_tle_catalog',
]

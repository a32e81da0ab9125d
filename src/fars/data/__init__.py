"""
FARS Data Package (Imperative Shell)

This package handles all file I/O for the FARS toolkit.

Modules:
- reader: Filename convention, single-file and multi-year loaders
"""

from .reader import (
    make_filename,
    fars_read,
    fars_read_years,
    read_year,
)

__all__ = [
    'make_filename',
    'fars_read',
    'fars_read_years',
    'read_year',
]

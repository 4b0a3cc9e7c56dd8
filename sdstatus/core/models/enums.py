"""
Enumerations shared by the scanner models.
"""

from enum import Enum


class OutputFormat(str, Enum):
    """How collected results are rendered."""
    JSON = 'json'
    CSV = 'csv'
    TABLE = 'table'

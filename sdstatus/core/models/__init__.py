"""
Pydantic models for scan results.
"""

from sdstatus.core.models.enums import OutputFormat
from sdstatus.core.models.result import SDMetadata, ProbeResult

__all__ = [
    'OutputFormat',
    'SDMetadata',
    'ProbeResult',
]

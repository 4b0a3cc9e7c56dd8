"""
Configuration model for a status scan.
"""

import math
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from sdstatus.core.models.enums import OutputFormat

# local SOCKS port opened by the Tor daemon
DEFAULT_PROXY_ADDR = '127.0.0.1:9050'
DEFAULT_METADATA_PATH = '/metadata'
DEFAULT_TARGETS_FILE = 'sdonion.txt'


class ScanConfig(BaseModel):
    """
    Settings shared by every probe of a scan.
    """
    proxy_addr: str = Field(default=DEFAULT_PROXY_ADDR, description="SOCKS5 proxy as host:port")
    metadata_path: str = Field(default=DEFAULT_METADATA_PATH, description="Path requested on each target")
    targets_file: str = Field(default=DEFAULT_TARGETS_FILE, description="Fallback newline-delimited target list")
    output: OutputFormat = Field(default=OutputFormat.JSON, description="Result rendering")
    timeout: Optional[float] = Field(default=None, description="Per-request timeout, None waits forever")

    @field_validator('metadata_path')
    @classmethod
    def _leading_slash(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith('/'):
            value = '/' + value
        return value

    @field_validator('timeout')
    @classmethod
    def _positive(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and not (math.isfinite(value) and value > 0):
            raise ValueError('timeout must be a finite number greater than zero')
        return value

    def metadata_url(self, target: str) -> str:
        """Return the URL probed for a target."""
        return f'http://{target}{self.metadata_path}'

    def to_dict(self) -> dict:
        return self.model_dump(mode='json')

    @classmethod
    def from_dict(cls, data: dict) -> 'ScanConfig':
        return cls.model_validate(data)

    def __str__(self):
        return (
            f'ScanCfg(proxy={self.proxy_addr}, path={self.metadata_path}, '
            f'output={self.output.value}, timeout={self.timeout})'
        )

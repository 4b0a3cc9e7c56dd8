"""
Probe result Pydantic models.

Field aliases keep the serialized form identical to the format published
by earlier releases: ``{"Info": {"sd_version", "gpg_fpr"}, "Url", "Available"}``.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SDMetadata(BaseModel):
    """Metadata document served by a SecureDrop instance."""
    # populated from the wire keys only
    model_config = ConfigDict(frozen=True, extra='ignore')

    version: str = Field(default='', alias='sd_version', description="SecureDrop version")
    fingerprint: str = Field(default='', alias='gpg_fpr', description="Submission key fingerprint")

    @field_validator('version', 'fingerprint', mode='before')
    @classmethod
    def _coerce_string(cls, value: Any) -> str:
        # anything that isn't a string is treated as missing
        return value if isinstance(value, str) else ''

    @classmethod
    def from_body(cls, body: Any) -> "SDMetadata":
        """
        Build metadata from a decoded JSON body.

        Raises:
            ValueError: if the body is not a JSON object
        """
        if not isinstance(body, dict):
            raise ValueError(f"Expected a JSON object, got {type(body).__name__}")
        return cls.model_validate(body)


class ProbeResult(BaseModel):
    """
    Outcome of a single probe.

    ``metadata`` is always empty when ``available`` is false.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    metadata: SDMetadata = Field(
        default_factory=SDMetadata, alias='Info', description="Metadata served by the target")
    target: str = Field(alias='Url', description="Probed address")
    available: bool = Field(default=False, alias='Available', description="Whether the probe succeeded")

    @classmethod
    def unavailable(cls, target: str) -> "ProbeResult":
        """Result for a probe that failed for any reason."""
        return cls(target=target, available=False)

    @classmethod
    def reachable(cls, target: str, metadata: SDMetadata) -> "ProbeResult":
        """Result for a probe that returned a metadata document."""
        return cls(target=target, available=True, metadata=metadata)

    @property
    def version(self) -> str:
        return self.metadata.version

    @property
    def fingerprint(self) -> str:
        return self.metadata.fingerprint

    def csv_line(self) -> str:
        """Return ``target,version,fingerprint``."""
        return f"{self.target},{self.version},{self.fingerprint}"

    def to_dict(self) -> dict:
        """Serialize using the published field names."""
        return self.model_dump(by_alias=True)

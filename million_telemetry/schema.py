"""Telemetry event schema.

``TelemetryEvent`` is what callers hand to the recorder; ``Envelope`` is what
goes over the wire.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from million_telemetry.system_info import SystemInfo


class TelemetryEvent(BaseModel):
    """Caller-supplied event."""

    event: str = Field(..., description="Event name")
    payload: dict[str, Any] = Field(default_factory=dict, description="Opaque event data")


class Envelope(BaseModel):
    """Anonymized event ready for delivery."""

    model_config = ConfigDict(populate_by_name=True)

    event: str = Field(..., description="Event name")
    anonymous_id: str = Field(
        ..., alias="anonymousId", description="Persisted anonymous id or CI label"
    )
    anonymous_session_id: str = Field(
        ..., alias="anonymousSessionId", description="Per-process session id"
    )
    payload: dict[str, Any] = Field(default_factory=dict, description="Opaque event data")
    meta: SystemInfo = Field(..., description="System facts")

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON-ready wire representation."""
        return self.model_dump(mode="json", by_alias=True)

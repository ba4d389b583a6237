"""Telemetry recorder for million.

Decides whether an event may be sent, anonymizes it and hands it to the
transport. Recording is fire-and-forget: nothing raised while collecting or
sending an event reaches the caller.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from million_telemetry.ci import get_ci_info
from million_telemetry.config import GlobalConfig, is_disabled_by_env
from million_telemetry.identity import IdentityManager
from million_telemetry.project_info import ProjectInfo, get_project_info
from million_telemetry.schema import Envelope, TelemetryEvent
from million_telemetry.system_info import SystemInfo, get_system_info
from million_telemetry.transport import post

logger = logging.getLogger(__name__)

Transport = Callable[[Envelope], Awaitable[Any]]


class MillionTelemetry:
    """Records anonymous usage events."""

    def __init__(
        self,
        telemetry_disabled: bool = False,
        config: GlobalConfig | None = None,
        transport: Transport = post,
        system_info: Callable[[], SystemInfo] = get_system_info,
    ):
        """Initialize the recorder.

        Args:
            telemetry_disabled: Disable recording regardless of stored settings
            config: Settings store (defaults to the ``million`` namespace)
            transport: Coroutine function delivering an envelope
            system_info: Provider of system facts
        """
        self.telemetry_disabled = telemetry_disabled
        self.config = config or GlobalConfig()
        self.identity = IdentityManager(self.config)
        self.transport = transport
        self.system_info = system_info
        self._project_info: ProjectInfo | None = None

    @classmethod
    def from_env(cls, **kwargs: Any) -> "MillionTelemetry":
        """Create a recorder honoring the opt-out environment variables."""
        return cls(telemetry_disabled=is_disabled_by_env(), **kwargs)

    @property
    def is_disabled(self) -> bool:
        if self.telemetry_disabled:
            return True
        return not self.identity.enabled

    @property
    def project_info(self) -> ProjectInfo:
        if self._project_info is None:
            self._project_info = get_project_info(get_ci_info().is_ci)
        return self._project_info

    def set_enabled(self, value: bool) -> None:
        self.identity.set_enabled(value)

    def clear(self) -> None:
        self.identity.clear()

    def build_envelope(self, event: TelemetryEvent, meta: SystemInfo) -> Envelope:
        """Assemble the wire envelope for an event."""
        return Envelope(
            event=event.event,
            anonymous_id=self.identity.resolve_anonymous_id(meta),
            anonymous_session_id=self.identity.session_id,
            payload=event.payload,
            meta=meta,
        )

    async def record(self, event: TelemetryEvent) -> None:
        """Record an event.

        Returns immediately when telemetry is disabled. Failures are logged
        at debug level and never raised.

        Args:
            event: Event to record
        """
        try:
            if self.is_disabled:
                return

            envelope = self.build_envelope(event, self.system_info())
            await self.transport(envelope)
        except Exception as e:
            logger.debug(f"Telemetry event {event.event!r} not sent: {e}")

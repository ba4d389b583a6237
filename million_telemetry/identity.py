"""Anonymous identity and session handling."""

import secrets

from million_telemetry.config import GlobalConfig
from million_telemetry.system_info import SystemInfo

ANONYMOUS_ID_KEY = "telemetry_anonymousId"
ENABLED_KEY = "telemetry_enabled"
UNKNOWN_CI_NAME = "UNKNOWN"


def generate_id() -> str:
    """Random 32-byte identifier, hex encoded."""
    return secrets.token_hex(32)


class IdentityManager:
    """Owns the persisted anonymous id, the enabled flag and the session id.

    Persisted values are created on first access and written back, so they
    are generated only once per store. The session id lives in memory only.
    """

    def __init__(self, config: GlobalConfig):
        self.config = config
        self._session_id: str | None = None

    def _get_or_init(self, key, factory):
        value = self.config.get(key)
        if value is not None:
            return value
        value = factory()
        self.config.set(key, value)
        return value

    @property
    def anonymous_id(self) -> str:
        return self._get_or_init(ANONYMOUS_ID_KEY, generate_id)

    @property
    def session_id(self) -> str:
        if self._session_id is None:
            self._session_id = generate_id()
        return self._session_id

    @property
    def enabled(self) -> bool:
        # Only a stored boolean true counts; hand-edited strings disable
        return self._get_or_init(ENABLED_KEY, lambda: True) is True

    def set_enabled(self, value: bool) -> None:
        self.config.set(ENABLED_KEY, value)

    def clear(self) -> None:
        """Erase persisted telemetry state. The session id is kept."""
        self.config.clear()

    def resolve_anonymous_id(self, meta: SystemInfo) -> str:
        """Identifier to report for an event.

        CI runs are reported under a ``CI.<vendor>`` label so that they are
        never attributed to a developer's persisted id.
        """
        if not meta.is_ci:
            return self.anonymous_id
        return f"CI.{meta.ci_name or UNKNOWN_CI_NAME}"

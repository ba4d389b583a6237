"""Version information for million-telemetry."""

__version__ = "0.3.1"

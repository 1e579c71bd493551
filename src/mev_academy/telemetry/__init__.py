"""Telemetry module for logging."""

from mev_academy.telemetry.logger import AsyncLogger, MicrosecondFormatter, setup_logging


__all__ = [
    "AsyncLogger",
    "MicrosecondFormatter",
    "setup_logging",
]

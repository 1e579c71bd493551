"""Utility functions for the MEV Academy backend."""

from mev_academy.utils.math import (
    clamp,
    parse_int,
    percentage,
    round2,
    safe_divide,
    wei_to_eth,
    wei_to_gwei,
)
from mev_academy.utils.time import (
    LatencyTimer,
    format_duration_us,
    from_unix_seconds,
    get_timestamp_us,
    utc_now,
)


__all__ = [
    "LatencyTimer",
    "clamp",
    "format_duration_us",
    "from_unix_seconds",
    "get_timestamp_us",
    "parse_int",
    "percentage",
    "round2",
    "safe_divide",
    "utc_now",
    "wei_to_eth",
    "wei_to_gwei",
]

"""Configuration module for the MEV Academy backend."""

from mev_academy.config.constants import (
    EXPLORER_BASE_URL,
    KNOWN_DEX_ADDRESSES,
    KNOWN_SEARCHERS,
    UNISWAP_V2_SUBGRAPH_URL,
)
from mev_academy.config.settings import Settings, get_settings


__all__ = [
    "EXPLORER_BASE_URL",
    "KNOWN_DEX_ADDRESSES",
    "KNOWN_SEARCHERS",
    "Settings",
    "UNISWAP_V2_SUBGRAPH_URL",
    "get_settings",
]

"""Mock implementations for testing."""

from tests.mocks.gateways import (
    MockExplorer,
    MockSubgraph,
    make_gas_oracle,
    make_raw_transaction,
    make_swap,
)
from tests.mocks.websocket import MockWebSocket


__all__ = [
    "MockExplorer",
    "MockSubgraph",
    "MockWebSocket",
    "make_gas_oracle",
    "make_raw_transaction",
    "make_swap",
]

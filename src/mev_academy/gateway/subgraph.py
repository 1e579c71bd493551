"""
Async client for the Uniswap V2 subgraph (GraphQL).

Fetches recent swaps of a pair; any failure yields an empty list.
"""

import logging
from typing import Any

import aiohttp
from pydantic import ValidationError

from mev_academy.config.constants import UNISWAP_V2_SUBGRAPH_URL
from mev_academy.gateway.base import GatewayError, GatewayPayloadError, JsonGateway
from mev_academy.gateway.models import SwapRecord


logger = logging.getLogger(__name__)


POOL_SWAPS_QUERY = """
query PoolSwaps($pair: String!, $first: Int!) {
  swaps(
    first: $first
    orderBy: timestamp
    orderDirection: desc
    where: { pair: $pair }
  ) {
    id
    transaction { id timestamp }
    sender
    to
    amount0In
    amount1In
    amount0Out
    amount1Out
    amountUSD
    pair { id }
  }
}
"""


class SubgraphGateway(JsonGateway):
    """Read-only GraphQL client for pool swap history."""

    def __init__(
        self,
        url: str = UNISWAP_V2_SUBGRAPH_URL,
        timeout: float = 10.0,
        retry_attempts: int = 1,
        retry_backoff: float = 0.5,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        super().__init__(
            url,
            timeout=timeout,
            retry_attempts=retry_attempts,
            retry_backoff=retry_backoff,
            session=session,
        )

    async def _query(self, query: str, variables: dict[str, Any]) -> dict[str, Any]:
        """Run a GraphQL query and return its ``data`` member."""
        body = await self._request_json(
            "POST", payload={"query": query, "variables": variables}
        )
        if not isinstance(body, dict):
            raise GatewayPayloadError("GraphQL response is not an object")
        if body.get("errors"):
            raise GatewayPayloadError(f"GraphQL errors: {body['errors']}")

        data = body.get("data")
        if not isinstance(data, dict):
            raise GatewayPayloadError("GraphQL response has no data")
        return data

    @staticmethod
    def _to_swap(entry: dict[str, Any]) -> SwapRecord:
        transaction = entry["transaction"]
        return SwapRecord(
            tx_hash=transaction["id"],
            timestamp=int(transaction["timestamp"]),
            sender=entry["sender"],
            recipient=entry["to"],
            amount0_in=entry["amount0In"],
            amount1_in=entry["amount1In"],
            amount0_out=entry["amount0Out"],
            amount1_out=entry["amount1Out"],
            amount_usd=entry["amountUSD"],
        )

    async def get_pool_swaps(self, pool_address: str, limit: int = 10) -> list[SwapRecord]:
        """
        Get the most recent swaps of a pair.

        Args:
            pool_address: Pair contract address (any case).
            limit: Maximum number of swaps.

        Returns:
            Swaps newest first, empty on any failure.
        """
        try:
            data = await self._query(
                POOL_SWAPS_QUERY,
                {"pair": pool_address.lower(), "first": limit},
            )
            entries = data.get("swaps")
            if not isinstance(entries, list):
                raise GatewayPayloadError("GraphQL response has no swaps")
            return [self._to_swap(entry) for entry in entries]
        except (GatewayError, ValidationError, KeyError, TypeError, ValueError) as e:
            logger.warning(f"Error fetching swaps for pool {pool_address}: {e}")
            return []

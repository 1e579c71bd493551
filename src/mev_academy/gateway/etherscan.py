"""
Async block explorer client (Etherscan API).

Every public method returns parsed data or an empty/absent result;
upstream failures are logged and never raised to the caller.
"""

import logging
from typing import Any

import aiohttp
from pydantic import ValidationError

from mev_academy.config.constants import (
    DEFAULT_EXPLORER_REQUESTS_PER_SECOND,
    EXPLORER_BASE_URL,
    EXPLORER_CHAIN_ID,
    EXPLORER_STATUS_OK,
)
from mev_academy.gateway.base import GatewayError, GatewayPayloadError, JsonGateway
from mev_academy.gateway.models import ExplorerEnvelope, GasOracle, RawChainTransaction
from mev_academy.gateway.rate_limiter import TokenBucket
from mev_academy.utils.math import parse_int


logger = logging.getLogger(__name__)


class EtherscanGateway(JsonGateway):
    """
    Read-only Etherscan client.

    Features:
    - Account, gas tracker and JSON-RPC proxy modules
    - Token bucket throttling to the provider's request budget
    - Per-entry validation of transaction lists
    """

    def __init__(
        self,
        api_key: str = "",
        base_url: str = EXPLORER_BASE_URL,
        chain_id: int = EXPLORER_CHAIN_ID,
        requests_per_second: int = DEFAULT_EXPLORER_REQUESTS_PER_SECOND,
        timeout: float = 10.0,
        retry_attempts: int = 1,
        retry_backoff: float = 0.5,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        """
        Initialize the explorer client.

        Args:
            api_key: Explorer API key.
            base_url: Explorer API endpoint.
            chain_id: Chain to query.
            requests_per_second: Outbound request budget.
            timeout: Total timeout per attempt in seconds.
            retry_attempts: Retries after the first failed attempt.
            retry_backoff: Base delay before a retry.
            session: Optional externally managed session.
        """
        super().__init__(
            base_url,
            timeout=timeout,
            retry_attempts=retry_attempts,
            retry_backoff=retry_backoff,
            session=session,
        )
        self._api_key = api_key
        self._chain_id = chain_id
        self._bucket = TokenBucket(
            capacity=requests_per_second,
            refill_rate=float(requests_per_second),
        )

    # =========================================================================
    # Request Helpers
    # =========================================================================

    async def _call(self, module: str, action: str, **params: Any) -> Any:
        """Make a throttled explorer call and return the raw JSON body."""
        await self._bucket.acquire()
        query = {
            "chainid": self._chain_id,
            "module": module,
            "action": action,
            **params,
        }
        if self._api_key:
            query["apikey"] = self._api_key
        return await self._request_json("GET", params=query)

    async def _call_status(self, module: str, action: str, **params: Any) -> Any:
        """Call an account/gastracker action and unwrap its ``result``."""
        body = await self._call(module, action, **params)
        try:
            envelope = ExplorerEnvelope.model_validate(body)
        except ValidationError as e:
            raise GatewayPayloadError(f"Unexpected explorer payload: {e}") from e

        if envelope.status != EXPLORER_STATUS_OK:
            raise GatewayPayloadError(
                f"Explorer {module}.{action} error: {envelope.message} {envelope.result}"
            )
        return envelope.result

    async def _call_proxy(self, action: str, **params: Any) -> Any:
        """Call a JSON-RPC proxy action and unwrap its ``result``."""
        body = await self._call("proxy", action, **params)
        if not isinstance(body, dict):
            raise GatewayPayloadError("Proxy response is not an object")
        if "error" in body:
            raise GatewayPayloadError(f"Proxy {action} error: {body['error']}")
        # Rate-limit notices come back in the account-style envelope
        if body.get("status") == "0":
            raise GatewayPayloadError(f"Proxy {action} error: {body.get('result')}")
        return body.get("result")

    @staticmethod
    def _parse_transactions(result: Any) -> list[RawChainTransaction]:
        """Validate each entry, skipping malformed ones."""
        if not isinstance(result, list):
            raise GatewayPayloadError("Transaction list is not an array")

        transactions: list[RawChainTransaction] = []
        for entry in result:
            try:
                transactions.append(RawChainTransaction.model_validate(entry))
            except ValidationError as e:
                logger.debug(f"Skipping malformed transaction entry: {e}")
        return transactions

    # =========================================================================
    # Account Module
    # =========================================================================

    async def get_transactions(
        self,
        address: str,
        start_block: int = 0,
        end_block: int = 99_999_999,
        limit: int | None = None,
    ) -> list[RawChainTransaction]:
        """
        Get normal transactions of an address, newest first.

        Args:
            address: Account address.
            start_block: First block of the window.
            end_block: Last block of the window.
            limit: Maximum number of transactions to request.

        Returns:
            Parsed transactions, empty on any failure.
        """
        params: dict[str, Any] = {
            "address": address,
            "startblock": start_block,
            "endblock": end_block,
            "sort": "desc",
        }
        if limit:
            params["page"] = 1
            params["offset"] = limit

        try:
            result = await self._call_status("account", "txlist", **params)
            return self._parse_transactions(result)
        except GatewayError as e:
            logger.warning(f"Error fetching transactions for {address}: {e}")
            return []

    async def get_block_transactions(self, block_number: int) -> list[dict[str, Any]]:
        """
        Get internal transactions executed in a single block.

        Returns:
            Raw internal transaction entries, empty on any failure.
        """
        try:
            result = await self._call_status(
                "account",
                "txlistinternal",
                startblock=block_number,
                endblock=block_number,
                sort="desc",
            )
        except GatewayError as e:
            logger.warning(f"Error fetching internal transactions of block {block_number}: {e}")
            return []

        if not isinstance(result, list):
            logger.warning(f"Unexpected internal transaction payload for block {block_number}")
            return []
        return [entry for entry in result if isinstance(entry, dict)]

    # =========================================================================
    # Gas Tracker Module
    # =========================================================================

    async def get_gas_oracle(self) -> GasOracle | None:
        """Get safe/proposed/fast gas prices and the suggested base fee."""
        try:
            result = await self._call_status("gastracker", "gasoracle")
            return GasOracle.model_validate(result)
        except (GatewayError, ValidationError) as e:
            logger.warning(f"Error fetching gas oracle: {e}")
            return None

    # =========================================================================
    # Proxy Module
    # =========================================================================

    async def get_latest_block_number(self) -> int | None:
        """Get the most recent block number."""
        try:
            result = await self._call_proxy("eth_blockNumber")
            return parse_int(result)
        except (GatewayError, ValueError, TypeError, AttributeError) as e:
            logger.warning(f"Error fetching latest block number: {e}")
            return None

    async def get_block_by_number(self, block_number: int) -> dict[str, Any] | None:
        """Get a block with its full transaction objects."""
        try:
            result = await self._call_proxy(
                "eth_getBlockByNumber", tag=hex(block_number), boolean="true"
            )
        except GatewayError as e:
            logger.warning(f"Error fetching block {block_number}: {e}")
            return None
        return result if isinstance(result, dict) else None

    async def get_transaction_receipt(self, tx_hash: str) -> dict[str, Any] | None:
        """Get the receipt of a mined transaction."""
        try:
            result = await self._call_proxy("eth_getTransactionReceipt", txhash=tx_hash)
        except GatewayError as e:
            logger.warning(f"Error fetching receipt for {tx_hash}: {e}")
            return None
        return result if isinstance(result, dict) else None

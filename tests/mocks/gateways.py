"""
Mock explorer and subgraph gateways for testing.

Serve canned data without network calls and record what was asked.
"""

from typing import Any

from mev_academy.gateway.models import GasOracle, RawChainTransaction, SwapRecord


def make_raw_transaction(
    tx_hash: str = "0xabc",
    input_data: str = "0x",
    gas_used: int = 21_000,
    gas_price_gwei: int = 10,
    to: str = "0x1111111111111111111111111111111111111111",
    value: str = "1000000000000000000",
    is_error: str = "0",
    block_number: int = 19_000_000,
    timestamp: int = 1_704_067_200,
) -> RawChainTransaction:
    """Build an explorer ``txlist`` entry; defaults describe a plain transfer."""
    return RawChainTransaction.model_validate(
        {
            "blockNumber": str(block_number),
            "timeStamp": str(timestamp),
            "hash": tx_hash,
            "from": "0xDAFEA492D9c6733ae3d56b7Ed1ADB60692c98Bc5",
            "to": to,
            "value": value,
            "gas": "300000",
            "gasPrice": str(gas_price_gwei * 10**9),
            "gasUsed": str(gas_used),
            "input": input_data,
            "isError": is_error,
        }
    )


def make_gas_oracle(
    safe: float = 20.0,
    propose: float = 22.0,
    fast: float = 25.0,
    base_fee: float = 19.5,
) -> GasOracle:
    return GasOracle.model_validate(
        {
            "SafeGasPrice": str(safe),
            "ProposeGasPrice": str(propose),
            "FastGasPrice": str(fast),
            "suggestBaseFee": str(base_fee),
            "gasUsedRatio": "0.45,0.52,0.61",
        }
    )


def make_swap(tx_hash: str = "0xswap", amount_usd: str = "1523.42") -> SwapRecord:
    return SwapRecord(
        tx_hash=tx_hash,
        timestamp=1_704_067_200,
        sender="0x7a250d5630B4cF539739dF2C5dAcb4c659F2488D",
        recipient="0x2222222222222222222222222222222222222222",
        amount0_in="1523.42",
        amount1_in="0",
        amount0_out="0",
        amount1_out="0.65",
        amount_usd=amount_usd,
    )


class MockExplorer:
    """
    Mock block explorer gateway.

    Transactions are keyed by lowercase searcher address.
    """

    def __init__(
        self,
        latest_block: int | None = None,
        transactions: dict[str, list[RawChainTransaction]] | None = None,
        gas_oracle: GasOracle | None = None,
    ) -> None:
        self.latest_block = latest_block
        self.gas_oracle = gas_oracle
        self._transactions = {k.lower(): v for k, v in (transactions or {}).items()}
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    async def get_latest_block_number(self) -> int | None:
        return self.latest_block

    async def get_transactions(
        self,
        address: str,
        start_block: int = 0,
        end_block: int = 99_999_999,
        limit: int | None = None,
    ) -> list[RawChainTransaction]:
        self.calls.append(
            {
                "address": address,
                "start_block": start_block,
                "end_block": end_block,
                "limit": limit,
            }
        )
        transactions = self._transactions.get(address.lower(), [])
        return transactions[:limit] if limit else list(transactions)

    async def get_gas_oracle(self) -> GasOracle | None:
        return self.gas_oracle

    async def close(self) -> None:
        self.closed = True


class MockSubgraph:
    """Mock swap subgraph; pools without canned swaps return an empty list."""

    def __init__(self, swaps: dict[str, list[SwapRecord]] | None = None) -> None:
        self._swaps = {k.lower(): v for k, v in (swaps or {}).items()}
        self.calls: list[tuple[str, int]] = []
        self.closed = False

    async def get_pool_swaps(self, pool_address: str, limit: int = 10) -> list[SwapRecord]:
        self.calls.append((pool_address, limit))
        return self._swaps.get(pool_address.lower(), [])[:limit]

    async def close(self) -> None:
        self.closed = True

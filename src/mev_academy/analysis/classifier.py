"""
Heuristic MEV transaction classifier.

Scans recent transactions of known searchers and flags the ones that look
like MEV: large calldata, heavy gas usage or a high gas price. The category
and profit of a flagged transaction are placeholders drawn at random; they
are not derived from what the transaction did.
"""

import asyncio
import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Protocol

from mev_academy.analysis.aggregation import summarize
from mev_academy.analysis.synthetic import SyntheticGenerator
from mev_academy.config.constants import (
    COMPLEX_INPUT_LENGTH,
    HIGH_GAS_PRICE_WEI,
    HIGH_GAS_USED,
    KNOWN_DEX_ADDRESSES,
    KNOWN_SEARCHERS,
    MAX_PLACEHOLDER_PROFIT,
    MEV_CHAIN,
    SCAN_WINDOW_BLOCKS,
    UNKNOWN_PROTOCOL,
)
from mev_academy.core.types import MevCategory, MevStats, MevTransaction, TrendPoint, TxStatus
from mev_academy.gateway.models import RawChainTransaction
from mev_academy.utils.math import wei_to_gwei
from mev_academy.utils.time import from_unix_seconds


logger = logging.getLogger(__name__)


class TransactionSource(Protocol):
    """The part of the explorer gateway the analyzer needs."""

    async def get_latest_block_number(self) -> int | None: ...

    async def get_transactions(
        self,
        address: str,
        start_block: int = 0,
        end_block: int = 99_999_999,
        limit: int | None = None,
    ) -> list[RawChainTransaction]: ...


def is_possible_mev(tx: RawChainTransaction) -> bool:
    """
    Check the MEV heuristic.

    A transaction is a candidate if its calldata is longer than 100 hex
    characters, it used more than 200k gas, or it paid more than 50 gwei.
    """
    return (
        len(tx.input) > COMPLEX_INPUT_LENGTH
        or tx.gas_used_int > HIGH_GAS_USED
        or tx.gas_price_wei > HIGH_GAS_PRICE_WEI
    )


class MevAnalyzer:
    """
    Classifies explorer transactions and backfills with synthetic ones.

    Features:
    - Concurrent per-searcher fetches over the last 1000 blocks
    - Case-insensitive DEX router matching
    - Exact ``limit`` output, padded with synthetic records
    - Total fallback to synthetic records when the explorer is unavailable
    """

    def __init__(
        self,
        source: TransactionSource,
        generator: SyntheticGenerator | None = None,
        searchers: Sequence[str] = KNOWN_SEARCHERS,
        dex_addresses: Mapping[str, str] = KNOWN_DEX_ADDRESSES,
    ) -> None:
        """
        Initialize analyzer.

        Args:
            source: Explorer gateway.
            generator: Synthetic data generator for padding and fallback.
            searchers: Searcher addresses to scan.
            dex_addresses: Protocol name to router address.
        """
        self._source = source
        self._generator = generator or SyntheticGenerator()
        self._searchers = tuple(searchers)
        self._dex_by_address = {addr.lower(): name for name, addr in dex_addresses.items()}

    @property
    def searchers(self) -> tuple[str, ...]:
        return self._searchers

    @property
    def active_searchers(self) -> int:
        return len(self._searchers)

    # =========================================================================
    # Classification
    # =========================================================================

    def match_protocol(self, address: str | None) -> str:
        """Protocol name for a router address, ``Unknown`` when not listed."""
        if not address:
            return UNKNOWN_PROTOCOL
        return self._dex_by_address.get(address.lower(), UNKNOWN_PROTOCOL)

    def classify_transaction(self, tx: RawChainTransaction) -> MevTransaction | None:
        """
        Classify a single transaction.

        Returns:
            MevTransaction if the heuristic flags it, None if it does not
            or if its fields cannot be parsed.
        """
        try:
            if not is_possible_mev(tx):
                return None

            category = MevCategory.UNKNOWN
            profit = 0.0
            protocol = UNKNOWN_PROTOCOL

            if len(tx.input) > COMPLEX_INPUT_LENGTH:
                protocol = self.match_protocol(tx.recipient)
                # Placeholder policy: neither value is derived from the transaction
                rng = self._generator.rng
                profit = rng.random() * MAX_PLACEHOLDER_PROFIT
                category = rng.choice(MevCategory.named())

            return MevTransaction(
                id=f"tx-{tx.hash}",
                hash=tx.hash,
                category=category,
                profit=profit,
                gas_used=tx.gas_used_int,
                gas_price=wei_to_gwei(tx.gas_price_wei),
                timestamp=from_unix_seconds(tx.timestamp_int),
                chain=MEV_CHAIN,
                protocol=protocol,
                description=f"MEV transaction on {protocol}",
                status=TxStatus.SUCCESS if tx.succeeded else TxStatus.FAILED,
                sender=tx.sender,
                recipient=tx.recipient,
                value=tx.value,
                block_number=tx.block_number_int,
            )
        except (ValueError, TypeError, OverflowError) as e:
            logger.debug(f"Skipping transaction {tx.hash}: {e}")
            return None

    def classify(self, transactions: Iterable[RawChainTransaction]) -> list[MevTransaction]:
        """Classify a batch, dropping transactions that are not MEV candidates."""
        flagged = []
        for tx in transactions:
            mev_tx = self.classify_transaction(tx)
            if mev_tx is not None:
                flagged.append(mev_tx)
        return flagged

    # =========================================================================
    # Pipeline
    # =========================================================================

    async def analyze_transactions(self, limit: int = 50) -> list[MevTransaction]:
        """
        Return exactly ``limit`` MEV transactions.

        Real classified transactions come first; the remainder is synthetic.
        If the latest block is unavailable or the pass fails, every record
        is synthetic.
        """
        try:
            latest_block = await self._source.get_latest_block_number()
            if latest_block is None:
                logger.info("Latest block unavailable, serving synthetic transactions")
                return self._generator.transactions(limit)

            start_block = max(0, latest_block - SCAN_WINDOW_BLOCKS)
            per_searcher = limit // len(self._searchers) if self._searchers else 0

            batches: list[list[RawChainTransaction]] = []
            if per_searcher > 0:
                batches = await asyncio.gather(
                    *(
                        self._source.get_transactions(
                            address, start_block, latest_block, limit=per_searcher
                        )
                        for address in self._searchers
                    )
                )

            flagged: list[MevTransaction] = []
            for batch in batches:
                flagged.extend(self.classify(batch[:per_searcher]))

            if len(flagged) < limit:
                logger.debug(f"Padding {len(flagged)} classified transactions to {limit}")
                flagged.extend(self._generator.transactions(limit - len(flagged)))

            return flagged[:limit]

        except Exception as e:
            logger.error(f"Error analyzing transactions: {e}", exc_info=True)
            return self._generator.transactions(limit)

    async def get_stats(self, sample_size: int = 100) -> MevStats:
        """Aggregate statistics over ``sample_size`` analysed transactions."""
        try:
            transactions = await self.analyze_transactions(sample_size)
            return summarize(transactions, self.active_searchers)
        except Exception as e:
            logger.error(f"Error computing MEV stats: {e}", exc_info=True)
            return self._generator.stats()

    def get_trends(self, hours: int) -> list[TrendPoint]:
        """Hourly MEV activity buckets ending now."""
        return self._generator.trends(hours)

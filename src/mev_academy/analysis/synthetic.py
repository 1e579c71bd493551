"""
Synthetic data generation.

Every mock record served by the API comes from here. Hourly series share
one primitive, ``base + amplitude * sin(i / period) + U[0, 1) * noise``,
so endpoints differ only in their field parameters. Pass a seeded
``random.Random`` for reproducible output; by default every call draws
fresh values.
"""

import math
import random
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import TypeVar

from mev_academy.config.constants import MEV_CHAIN, MOCK_PROTOCOLS, WEI_PER_ETH
from mev_academy.core.types import (
    CurrentGas,
    GasSnapshot,
    MevCategory,
    MevStats,
    MevTransaction,
    Trend,
    TrendPoint,
    TxStatus,
)
from mev_academy.utils.math import round2
from mev_academy.utils.time import hour_offset, utc_now


T = TypeVar("T")


@dataclass(slots=True, frozen=True)
class SeriesField:
    """Parameters of one field of an hourly series."""

    base: float
    noise: float = 0.0
    amplitude: float = 0.0
    period: float = 1.0


@dataclass(slots=True, frozen=True)
class SeriesPoint:
    index: int
    timestamp: datetime
    values: dict[str, float]


# MEV activity per hour
TREND_FIELDS: Mapping[str, SeriesField] = {
    "volume": SeriesField(base=50_000, noise=20_000),
    "profit": SeriesField(base=3_000, noise=1_500),
    "transactions": SeriesField(base=500, noise=200),
}

MARKET_SERIES_FIELDS: Mapping[str, SeriesField] = {
    "volume": SeriesField(base=50_000, noise=10_000, amplitude=20_000, period=10),
    "profit": SeriesField(base=3_000, noise=1_000, amplitude=1_500, period=8),
    "transactions": SeriesField(base=500, noise=100, amplitude=200, period=12),
}

# Gas fees in gwei
GAS_PREDICTION_FIELDS: Mapping[str, SeriesField] = {
    "base_fee": SeriesField(base=25, noise=20, amplitude=8, period=3),
    "priority_fee": SeriesField(base=2, noise=4),
    "confidence": SeriesField(base=70, noise=25),
    "mev_impact": SeriesField(base=0, noise=15),
}

GAS_HISTORY_FIELDS: Mapping[str, SeriesField] = {
    "base_fee": SeriesField(base=20, noise=30, amplitude=10, period=6),
    "priority_fee": SeriesField(base=1, noise=5),
}

HIGH_MEV_IMPACT = 10.0
HISTORY_START_BLOCK = 18_000_000
BLOCKS_PER_HOUR = 240


def bucket_count(timeframe: str) -> int:
    """Number of hourly buckets for a timeframe: 24 for ``24h``, otherwise 6."""
    return 24 if timeframe == "24h" else 6


class SyntheticGenerator:
    """
    Produces synthetic MEV, gas and market records.

    Never raises and never performs I/O.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        """
        Initialize generator.

        Args:
            rng: Random source; a fresh unseeded one when omitted.
        """
        self._rng = rng or random.Random()

    @property
    def rng(self) -> random.Random:
        return self._rng

    # =========================================================================
    # Primitives
    # =========================================================================

    def uniform(self, low: float, spread: float) -> float:
        """Draw from ``[low, low + spread)``."""
        return low + self._rng.random() * spread

    def choice(self, options: Sequence[T]) -> T:
        return self._rng.choice(options)

    def change(self, spread: float) -> float:
        """Signed change centred on zero, within ``±spread / 2``."""
        return (self._rng.random() - 0.5) * spread

    def trend(self) -> Trend:
        """Up half the time, otherwise down or stable with equal odds."""
        if self._rng.random() > 0.5:
            return Trend.UP
        return Trend.DOWN if self._rng.random() > 0.5 else Trend.STABLE

    def address(self) -> str:
        return f"0x{self._rng.getrandbits(160):040x}"

    def tx_hash(self) -> str:
        return f"0x{self._rng.getrandbits(256):064x}"

    def value(self, field: SeriesField, index: int = 0) -> float:
        """Evaluate a series field at bucket ``index``."""
        return (
            field.base
            + field.amplitude * math.sin(index / field.period)
            + self._rng.random() * field.noise
        )

    def hourly_series(
        self,
        hours: int,
        fields: Mapping[str, SeriesField],
        forward: bool = False,
        now: datetime | None = None,
    ) -> list[SeriesPoint]:
        """
        Generate hourly buckets.

        Args:
            hours: Number of buckets.
            fields: Field name to parameters.
            forward: Buckets start one hour after ``now`` instead of ending at it.
            now: Reference time, current UTC time when omitted.

        Returns:
            Points in chronological order.
        """
        now = now or utc_now()
        points = []
        for i in range(hours):
            offset = i + 1 if forward else -(hours - i - 1)
            points.append(
                SeriesPoint(
                    index=i,
                    timestamp=hour_offset(now, offset),
                    values={name: self.value(field, i) for name, field in fields.items()},
                )
            )
        return points

    # =========================================================================
    # MEV Records
    # =========================================================================

    def transactions(self, count: int) -> list[MevTransaction]:
        """Synthetic MEV transactions spread over the last 24 hours."""
        now = utc_now()
        records = []
        for i in range(max(0, count)):
            tx_hash = self.tx_hash()
            records.append(
                MevTransaction(
                    id=f"tx-{tx_hash}",
                    hash=tx_hash,
                    category=self.choice(MevCategory.named()),
                    profit=self.uniform(0, 10_000),
                    gas_used=self._rng.randrange(100_000, 600_000),
                    gas_price=self.uniform(20, 200),
                    timestamp=hour_offset(now, -self.uniform(0, 24)),
                    chain=MEV_CHAIN,
                    protocol=self.choice(MOCK_PROTOCOLS),
                    description=f"MEV transaction {i}",
                    status=self.choice(tuple(TxStatus)),
                    sender=self.address(),
                    recipient=self.address(),
                    value=str(self._rng.randrange(WEI_PER_ETH)),
                    block_number=HISTORY_START_BLOCK + self._rng.randrange(1000),
                )
            )
        return records

    def stats(self) -> MevStats:
        return MevStats(
            total_volume=self.uniform(1_250_000, 500_000),
            total_profit=self.uniform(85_000, 25_000),
            avg_profit=self.uniform(125, 50),
            success_rate=self.uniform(78, 15),
            transaction_count=int(self.uniform(12_500, 5_000)),
            active_searchers=int(self.uniform(45, 20)),
        )

    def trends(
        self, hours: int, fields: Mapping[str, SeriesField] = TREND_FIELDS
    ) -> list[TrendPoint]:
        return [
            TrendPoint(timestamp=point.timestamp, **point.values)
            for point in self.hourly_series(hours, fields)
        ]

    # =========================================================================
    # Gas Records
    # =========================================================================

    def gas_predictions(self, hours: int) -> list[GasSnapshot]:
        """Forecast for the next ``hours`` hours."""
        snapshots = []
        for point in self.hourly_series(hours, GAS_PREDICTION_FIELDS, forward=True):
            v = point.values
            mev_impact = round2(v["mev_impact"])
            snapshots.append(
                GasSnapshot(
                    timestamp=point.timestamp,
                    base_fee=round2(v["base_fee"]),
                    priority_fee=round2(v["priority_fee"]),
                    max_fee=round2(v["base_fee"] + v["priority_fee"]),
                    confidence=v["confidence"],
                    mev_impact=mev_impact,
                    recommendation=(
                        "Consider delaying transaction"
                        if mev_impact > HIGH_MEV_IMPACT
                        else "Good time to transact"
                    ),
                )
            )
        return snapshots

    def gas_history(self, hours: int) -> list[GasSnapshot]:
        """Observed fees for the last ``hours`` hours."""
        snapshots = []
        for point in self.hourly_series(hours, GAS_HISTORY_FIELDS):
            v = point.values
            snapshots.append(
                GasSnapshot(
                    timestamp=point.timestamp,
                    base_fee=round2(v["base_fee"]),
                    priority_fee=round2(v["priority_fee"]),
                    max_fee=round2(v["base_fee"] + v["priority_fee"]),
                    block_number=HISTORY_START_BLOCK + point.index * BLOCKS_PER_HOUR,
                    mev_transactions=self._rng.randrange(10, 60),
                )
            )
        return snapshots

    def current_gas(self) -> CurrentGas:
        return CurrentGas(
            base_fee=self.uniform(25, 10),
            priority_fee=self.uniform(2, 3),
            max_fee=self.uniform(30, 15),
            network_status="Normal",
            last_updated=utc_now(),
        )

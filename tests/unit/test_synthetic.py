"""
Unit tests for the synthetic data generator.
"""

import math
import random
from datetime import UTC, datetime, timedelta

import pytest

from mev_academy.analysis.synthetic import (
    GAS_PREDICTION_FIELDS,
    HIGH_MEV_IMPACT,
    HISTORY_START_BLOCK,
    SeriesField,
    SyntheticGenerator,
    bucket_count,
)
from mev_academy.core.types import MevCategory
from mev_academy.utils.math import parse_int


class TestBucketCount:
    @pytest.mark.parametrize(
        ("timeframe", "expected"),
        [("24h", 24), ("6h", 6), ("1h", 6), ("", 6), ("24H", 6)],
    )
    def test_bucket_count(self, timeframe: str, expected: int) -> None:
        assert bucket_count(timeframe) == expected


class TestPrimitives:
    """Tests for the generator primitives."""

    def test_uniform_range(self, generator: SyntheticGenerator) -> None:
        for _ in range(200):
            assert 10 <= generator.uniform(10, 5) < 15

    def test_change_is_centred(self, generator: SyntheticGenerator) -> None:
        for _ in range(200):
            assert -10 <= generator.change(20) <= 10

    def test_address_and_hash_shape(self, generator: SyntheticGenerator) -> None:
        assert len(generator.address()) == 42
        assert len(generator.tx_hash()) == 66
        assert generator.tx_hash().startswith("0x")

    def test_value_without_noise_is_exact(self, generator: SyntheticGenerator) -> None:
        field = SeriesField(base=10, amplitude=4, period=2)
        assert generator.value(field, 3) == pytest.approx(10 + 4 * math.sin(1.5))

    def test_seeded_generators_agree(self) -> None:
        first = SyntheticGenerator(random.Random(7))
        second = SyntheticGenerator(random.Random(7))

        assert [tx.hash for tx in first.transactions(5)] == [
            tx.hash for tx in second.transactions(5)
        ]


class TestHourlySeries:
    """Tests for SyntheticGenerator.hourly_series."""

    NOW = datetime(2024, 1, 1, 12, tzinfo=UTC)

    def test_backward_series_ends_now(self, generator: SyntheticGenerator) -> None:
        points = generator.hourly_series(6, GAS_PREDICTION_FIELDS, now=self.NOW)

        assert len(points) == 6
        assert points[-1].timestamp == self.NOW
        assert points[0].timestamp == self.NOW - timedelta(hours=5)

    def test_forward_series_starts_next_hour(self, generator: SyntheticGenerator) -> None:
        points = generator.hourly_series(6, GAS_PREDICTION_FIELDS, forward=True, now=self.NOW)

        assert points[0].timestamp == self.NOW + timedelta(hours=1)
        assert points[-1].timestamp == self.NOW + timedelta(hours=6)

    def test_points_are_chronological(self, generator: SyntheticGenerator) -> None:
        points = generator.hourly_series(24, GAS_PREDICTION_FIELDS, now=self.NOW)
        timestamps = [p.timestamp for p in points]

        assert timestamps == sorted(timestamps)
        assert set(points[0].values) == set(GAS_PREDICTION_FIELDS)


class TestRecords:
    """Tests for the record generators."""

    @pytest.mark.parametrize("count", [0, 1, 50])
    def test_transaction_count(self, generator: SyntheticGenerator, count: int) -> None:
        assert len(generator.transactions(count)) == count

    def test_transactions_are_well_formed(self, generator: SyntheticGenerator) -> None:
        for tx in generator.transactions(30):
            assert tx.category is not MevCategory.UNKNOWN
            assert tx.id == f"tx-{tx.hash}"
            assert 0 <= tx.profit < 10_000
            assert 100_000 <= tx.gas_used < 600_000
            assert parse_int(tx.value) >= 0
            assert tx.block_number >= HISTORY_START_BLOCK

    def test_gas_predictions(self, generator: SyntheticGenerator) -> None:
        predictions = generator.gas_predictions(6)

        assert len(predictions) == 6
        for snapshot in predictions:
            assert snapshot.max_fee == pytest.approx(
                snapshot.base_fee + snapshot.priority_fee, abs=0.011
            )
            assert snapshot.mev_impact is not None
            expected = (
                "Consider delaying transaction"
                if snapshot.mev_impact > HIGH_MEV_IMPACT
                else "Good time to transact"
            )
            assert snapshot.recommendation == expected

    def test_gas_history_blocks(self, generator: SyntheticGenerator) -> None:
        history = generator.gas_history(24)

        assert len(history) == 24
        assert history[0].block_number == HISTORY_START_BLOCK
        assert history[1].block_number == HISTORY_START_BLOCK + 240
        assert all(10 <= s.mev_transactions < 60 for s in history)

    def test_current_gas(self, generator: SyntheticGenerator) -> None:
        current = generator.current_gas()

        assert current.network_status == "Normal"
        assert 25 <= current.base_fee < 35
        assert current.to_api().keys() >= {"baseFee", "priorityFee", "maxFee", "lastUpdated"}

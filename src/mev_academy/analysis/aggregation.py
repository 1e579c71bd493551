"""
Aggregate statistics over MEV transactions and dashboard records.

All averages and rates are defined for empty inputs (they are 0.0).
"""

from collections.abc import Sequence

from mev_academy.core.types import MevStats, MevTransaction, TxStatus
from mev_academy.utils.math import parse_int, percentage, safe_divide, wei_to_eth


def total_volume_eth(transactions: Sequence[MevTransaction]) -> float:
    """Sum of transaction values in ether; unparseable values count as zero."""
    total_wei = 0
    for tx in transactions:
        try:
            total_wei += parse_int(tx.value)
        except ValueError:
            continue
    return wei_to_eth(total_wei)


def success_rate(transactions: Sequence[MevTransaction]) -> float:
    """Share of successful transactions in percent, 0.0 for an empty list."""
    successes = sum(1 for tx in transactions if tx.status is TxStatus.SUCCESS)
    return percentage(successes, len(transactions))


def summarize(transactions: Sequence[MevTransaction], active_searchers: int) -> MevStats:
    """
    Compute MEV statistics.

    Args:
        transactions: Classified or synthetic MEV transactions.
        active_searchers: Number of searchers being tracked.

    Returns:
        MevStats with totals, averages and success rate.
    """
    total_profit = sum(tx.profit for tx in transactions)
    return MevStats(
        total_volume=total_volume_eth(transactions),
        total_profit=total_profit,
        avg_profit=safe_divide(total_profit, len(transactions)),
        success_rate=success_rate(transactions),
        transaction_count=len(transactions),
        active_searchers=active_searchers,
    )


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean, 0.0 for an empty sequence."""
    return safe_divide(sum(values), len(values))

"""Analysis module: classification, synthetic data, aggregation and advice."""

from mev_academy.analysis.arbitrage import ArbitrageCalculator
from mev_academy.analysis.classifier import MevAnalyzer, is_possible_mev
from mev_academy.analysis.dashboard import DashboardBuilder
from mev_academy.analysis.protection import ProposedTransaction, ProtectionAdvisor
from mev_academy.analysis.synthetic import SyntheticGenerator, bucket_count


__all__ = [
    "ArbitrageCalculator",
    "DashboardBuilder",
    "MevAnalyzer",
    "ProposedTransaction",
    "ProtectionAdvisor",
    "SyntheticGenerator",
    "bucket_count",
    "is_possible_mev",
]

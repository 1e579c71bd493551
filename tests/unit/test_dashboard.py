"""
Unit tests for DashboardBuilder.
"""

import pytest

from mev_academy.analysis.dashboard import DashboardBuilder
from mev_academy.analysis.synthetic import SyntheticGenerator
from mev_academy.config.constants import CHAINS, DEX_NAMES, MARKET_PROTOCOLS, SEARCHER_NAMES


@pytest.fixture
def builder(generator: SyntheticGenerator) -> DashboardBuilder:
    return DashboardBuilder(generator)


class TestMarket:
    def test_market_overview(self, builder: DashboardBuilder) -> None:
        market = builder.market()

        assert [p.name for p in market.protocols] == list(MARKET_PROTOCOLS)
        assert len(market.time_series_data) == 24
        for protocol in market.protocols:
            assert protocol.market_share > 0

    def test_market_hours(self, builder: DashboardBuilder) -> None:
        assert len(builder.market(6).time_series_data) == 6


class TestLeaderboard:
    def test_ranked_by_profit(self, builder: DashboardBuilder) -> None:
        board = builder.leaderboard()
        profits = [s.total_profit for s in board.searchers]

        assert len(board.searchers) == len(SEARCHER_NAMES)
        assert profits == sorted(profits, reverse=True)
        assert [s.rank for s in board.searchers] == list(range(1, len(SEARCHER_NAMES) + 1))

    def test_stats(self, builder: DashboardBuilder) -> None:
        board = builder.leaderboard()

        assert board.stats.total_searchers == len(SEARCHER_NAMES)
        assert board.stats.top_profit == board.searchers[0].total_profit
        assert board.stats.total_profit == pytest.approx(
            sum(s.total_profit for s in board.searchers)
        )
        assert 0 <= board.stats.active_today <= len(SEARCHER_NAMES)

    def test_strategies(self, builder: DashboardBuilder) -> None:
        for searcher in builder.leaderboard().searchers:
            assert 1 <= len(searcher.strategies) <= 4
            assert len(set(searcher.strategies)) == len(searcher.strategies)


class TestDexEfficiency:
    def test_scores_are_clamped(self, builder: DashboardBuilder) -> None:
        efficiency = builder.dex_efficiency()

        assert len(efficiency.dexes) == len(DEX_NAMES)
        for dex in efficiency.dexes:
            assert 0 <= dex.efficiency_score <= 100

    def test_metrics(self, builder: DashboardBuilder) -> None:
        efficiency = builder.dex_efficiency()
        scores = [d.efficiency_score for d in efficiency.dexes]

        assert efficiency.metrics.best_efficiency == max(scores)
        assert efficiency.metrics.worst_efficiency == min(scores)
        assert efficiency.metrics.to_api()["totalDEXs"] == len(DEX_NAMES)


class TestCrossChain:
    def test_flows_connect_distinct_chains(self, builder: DashboardBuilder) -> None:
        overview = builder.cross_chain()
        names = {name for name, _ in CHAINS}

        assert len(overview.chains) == len(CHAINS)
        assert len(overview.flows) == 20
        for flow in overview.flows:
            assert flow.from_chain != flow.to_chain
            assert {flow.from_chain, flow.to_chain} <= names

    def test_best_chain(self, builder: DashboardBuilder) -> None:
        overview = builder.cross_chain(flow_count=3)
        best = max(overview.chains, key=lambda c: c.efficiency)

        assert overview.metrics.best_chain == best.name
        assert len(overview.flows) == 3

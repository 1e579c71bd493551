"""
Dashboard bundles: market overview, searcher leaderboard, DEX efficiency
and cross-chain activity. All figures are synthetic and regenerated on
every call.
"""

from mev_academy.analysis.aggregation import mean
from mev_academy.analysis.synthetic import MARKET_SERIES_FIELDS, SyntheticGenerator
from mev_academy.config.constants import (
    BRIDGES,
    CHAINS,
    CROSS_CHAIN_FLOW_COUNT,
    DEX_NAMES,
    MARKET_PROTOCOLS,
    SEARCHER_NAMES,
    SEARCHER_STRATEGIES,
)
from mev_academy.core.types import (
    ChainMetric,
    ChainMetrics,
    CrossChainFlow,
    CrossChainOverview,
    DexEfficiency,
    DexMetric,
    DexMetrics,
    Leaderboard,
    LeaderboardEntry,
    LeaderboardStats,
    MarketOverview,
    ProtocolMetric,
)
from mev_academy.utils.math import clamp, percentage
from mev_academy.utils.time import hour_offset, utc_now


MARKET_SERIES_HOURS = 24


class DashboardBuilder:
    """Assembles the synthetic dashboard bundles."""

    def __init__(self, generator: SyntheticGenerator | None = None) -> None:
        self._gen = generator or SyntheticGenerator()

    def market(self, hours: int = MARKET_SERIES_HOURS) -> MarketOverview:
        """Market totals, per-protocol share and an hourly activity series."""
        gen = self._gen
        market_data = gen.stats()

        protocols = []
        for name in MARKET_PROTOCOLS:
            volume = gen.uniform(100_000, 300_000)
            protocols.append(
                ProtocolMetric(
                    name=name,
                    volume=volume,
                    profit=gen.uniform(5_000, 15_000),
                    transactions=gen.uniform(1_000, 3_000),
                    market_share=percentage(volume, market_data.total_volume),
                    trend=gen.trend(),
                    change=gen.change(20),
                )
            )

        return MarketOverview(
            market_data=market_data,
            protocols=protocols,
            time_series_data=gen.trends(hours, MARKET_SERIES_FIELDS),
        )

    def leaderboard(self) -> Leaderboard:
        """Searchers ranked by total profit, with summary stats."""
        gen = self._gen
        now = utc_now()

        drafts = []
        for index, name in enumerate(SEARCHER_NAMES):
            profit = gen.uniform(5_000, 45_000)
            transaction_count = gen.uniform(100, 900)
            strategies = gen.rng.sample(SEARCHER_STRATEGIES, gen.rng.randint(1, 4))
            drafts.append(
                {
                    "id": f"searcher-{index}",
                    "name": name,
                    "address": gen.address(),
                    "total_profit": profit,
                    "total_volume": gen.uniform(50_000, 450_000),
                    "success_rate": gen.uniform(60, 35),
                    "transaction_count": transaction_count,
                    "avg_profit": profit / transaction_count,
                    "change": gen.change(30),
                    "strategies": strategies,
                    "last_active": hour_offset(now, -gen.uniform(0, 24)),
                    "win_streak": gen.rng.randint(1, 15),
                }
            )

        drafts.sort(key=lambda d: d["total_profit"], reverse=True)
        searchers = [LeaderboardEntry(rank=rank, **d) for rank, d in enumerate(drafts, start=1)]

        profits = [s.total_profit for s in searchers]
        day_ago = hour_offset(now, -24)
        stats = LeaderboardStats(
            total_searchers=len(searchers),
            total_profit=sum(profits),
            avg_profit=mean(profits),
            top_profit=profits[0] if profits else 0.0,
            active_today=sum(1 for s in searchers if s.last_active > day_ago),
        )
        return Leaderboard(searchers=searchers, stats=stats)

    def dex_efficiency(self) -> DexEfficiency:
        """Per-DEX MEV exposure and efficiency, with aggregate metrics."""
        gen = self._gen

        dexes = []
        for name in DEX_NAMES:
            mev_exposure = gen.uniform(0, 100)
            dexes.append(
                DexMetric(
                    name=name,
                    volume=gen.uniform(100_000, 900_000),
                    mev_exposure=mev_exposure,
                    efficiency_score=clamp(100 - mev_exposure + gen.uniform(0, 20), 0, 100),
                    avg_slippage=gen.uniform(0.1, 0.9),
                    gas_efficiency=gen.uniform(60, 40),
                    liquidity_depth=gen.uniform(50, 50),
                    transaction_count=gen.uniform(1_000, 9_000),
                    success_rate=gen.uniform(80, 20),
                    mev_protection=gen.uniform(0, 100),
                    trend=gen.trend(),
                    change=gen.change(20),
                )
            )

        scores = [d.efficiency_score for d in dexes]
        metrics = DexMetrics(
            total_dexs=len(dexes),
            avg_efficiency=mean(scores),
            best_efficiency=max(scores, default=0.0),
            worst_efficiency=min(scores, default=0.0),
            total_volume=sum(d.volume for d in dexes),
            total_mev=sum(d.volume * d.mev_exposure / 100 for d in dexes),
        )
        return DexEfficiency(dexes=dexes, metrics=metrics)

    def cross_chain(self, flow_count: int = CROSS_CHAIN_FLOW_COUNT) -> CrossChainOverview:
        """Per-chain MEV activity and bridge flows between chains."""
        gen = self._gen
        now = utc_now()

        chains = []
        for name, symbol in CHAINS:
            volume = gen.uniform(500_000, 1_500_000)
            chains.append(
                ChainMetric(
                    name=name,
                    symbol=symbol,
                    volume=volume,
                    mev_volume=volume * gen.uniform(0.05, 0.15),
                    transaction_count=gen.uniform(50_000, 200_000),
                    avg_gas_price=gen.uniform(10, 50),
                    avg_block_time=gen.uniform(1, 20),
                    total_value=volume * gen.uniform(0.8, 0.4),
                    mev_opportunities=gen.uniform(100, 900),
                    cross_chain_flows=gen.uniform(50, 450),
                    efficiency=gen.uniform(60, 40),
                    trend=gen.trend(),
                    change=gen.change(30),
                )
            )

        chain_names = [name for name, _ in CHAINS]
        flows = []
        for _ in range(flow_count):
            from_chain, to_chain = gen.rng.sample(chain_names, 2)
            flows.append(
                CrossChainFlow(
                    from_chain=from_chain,
                    to_chain=to_chain,
                    volume=gen.uniform(10_000, 100_000),
                    opportunities=gen.uniform(10, 90),
                    avg_profit=gen.uniform(50, 450),
                    bridge=gen.choice(BRIDGES),
                    timestamp=hour_offset(now, -gen.uniform(0, 24)),
                )
            )

        best = max(chains, key=lambda c: c.efficiency)
        metrics = ChainMetrics(
            total_chains=len(chains),
            total_volume=sum(c.volume for c in chains),
            total_mev=sum(c.mev_volume for c in chains),
            total_flows=sum(c.cross_chain_flows for c in chains),
            avg_efficiency=mean([c.efficiency for c in chains]),
            best_chain=best.name,
        )
        return CrossChainOverview(chains=chains, flows=flows, metrics=metrics)

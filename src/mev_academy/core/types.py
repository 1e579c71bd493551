"""
Type definitions for the MEV Academy backend.

This module contains the enums and the record models returned by the API.
Records are Pydantic models so they validate on construction and serialize
to the camelCase JSON the dashboard expects.
"""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# =============================================================================
# Enums
# =============================================================================


class MevCategory(str, Enum):
    """MEV transaction category."""

    ARBITRAGE = "arbitrage"
    SANDWICH = "sandwich"
    FRONTRUN = "frontrun"
    BACKRUN = "backrun"
    LIQUIDATION = "liquidation"
    UNKNOWN = "unknown"

    @classmethod
    def named(cls) -> tuple["MevCategory", ...]:
        """Categories that can be assigned to a classified transaction."""
        return tuple(c for c in cls if c is not cls.UNKNOWN)


class TxStatus(str, Enum):
    """Execution status of a transaction."""

    SUCCESS = "success"
    FAILED = "failed"
    PENDING = "pending"


class RiskLevel(str, Enum):
    """Ordered risk level; comparisons follow severity."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return _RISK_RANK[self]

    def raise_to(self, other: "RiskLevel") -> "RiskLevel":
        """Return the more severe of the two levels."""
        return other if other.rank > self.rank else self


_RISK_RANK = {RiskLevel.LOW: 0, RiskLevel.MEDIUM: 1, RiskLevel.HIGH: 2}


class Trend(str, Enum):
    """Direction of a metric over the last period."""

    UP = "up"
    DOWN = "down"
    STABLE = "stable"


# =============================================================================
# Base Model
# =============================================================================


class ApiModel(BaseModel):
    """Base for API records: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_api(self) -> dict[str, Any]:
        """Serialize to a JSON-ready dict, omitting absent optional fields."""
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)


# =============================================================================
# MEV Transactions
# =============================================================================


class MevTransaction(ApiModel):
    """A transaction flagged (or synthesized) as MEV activity."""

    id: str
    hash: str
    category: MevCategory = Field(alias="type")
    profit: float
    gas_used: int = Field(ge=0)
    gas_price: float = Field(ge=0.0)  # gwei
    timestamp: datetime
    chain: str
    protocol: str
    description: str
    status: TxStatus
    sender: str = Field(alias="from")
    recipient: str = Field(alias="to")
    value: str  # wei, decimal string
    block_number: int = Field(ge=0)


class MevStats(ApiModel):
    """Aggregate statistics over a batch of MEV transactions."""

    total_volume: float
    total_profit: float
    avg_profit: float
    success_rate: float
    transaction_count: int
    active_searchers: int


class TrendPoint(ApiModel):
    """One hourly bucket of MEV activity."""

    timestamp: datetime
    volume: float
    profit: float
    transactions: float


# =============================================================================
# Gas
# =============================================================================


class GasSnapshot(ApiModel):
    """
    Gas fee snapshot in gwei.

    Used for history and prediction series; the optional fields are only
    present for the variant that produces them.
    """

    timestamp: datetime
    base_fee: float
    priority_fee: float
    max_fee: float
    confidence: float | None = None
    mev_impact: float | None = None
    recommendation: str | None = None
    block_number: int | None = None
    mev_transactions: int | None = None


class CurrentGas(ApiModel):
    """Current network gas status in gwei."""

    base_fee: float
    priority_fee: float
    max_fee: float
    network_status: str
    last_updated: datetime
    safe_low: float | None = None
    standard: float | None = None
    fast: float | None = None
    gas_used_ratio: str | None = None


# =============================================================================
# Arbitrage
# =============================================================================


class ArbitrageCalculation(ApiModel):
    """Profit breakdown for a single buy-low sell-high round trip."""

    buy_price: float
    sell_price: float
    profit_percentage: float
    estimated_profit: float
    gas_cost: float
    slippage_cost: float
    net_profit: float
    is_profitable: bool


class Opportunity(ApiModel):
    """A synthetic cross-venue arbitrage opportunity."""

    id: str
    buy_dex: str
    sell_dex: str
    buy_price: float
    sell_price: float
    price_difference: float
    profit_percentage: float
    estimated_profit: float
    gas_cost: float
    net_profit: float
    min_amount: float
    max_amount: float
    risk: RiskLevel


# =============================================================================
# Protection
# =============================================================================


class ProtectionMethod(ApiModel):
    name: str
    description: str
    effectiveness: int
    cost: float
    implementation: str
    pros: tuple[str, ...]
    cons: tuple[str, ...]


class ProtectionAnalysis(ApiModel):
    """Front-running exposure of a proposed transaction."""

    vulnerability: RiskLevel
    risk_factors: list[str]
    recommendations: list[str]
    estimated_loss: float
    protection_methods: list[ProtectionMethod]


# =============================================================================
# Dashboards
# =============================================================================


class ProtocolMetric(ApiModel):
    name: str
    volume: float
    profit: float
    transactions: float
    market_share: float
    trend: Trend
    change: float


class MarketOverview(ApiModel):
    market_data: MevStats
    protocols: list[ProtocolMetric]
    time_series_data: list[TrendPoint]


class LeaderboardEntry(ApiModel):
    id: str
    name: str
    address: str
    total_profit: float
    total_volume: float
    success_rate: float
    transaction_count: float
    avg_profit: float
    rank: int
    change: float
    strategies: list[str]
    last_active: datetime
    win_streak: int


class LeaderboardStats(ApiModel):
    total_searchers: int
    total_profit: float
    avg_profit: float
    top_profit: float
    active_today: int


class Leaderboard(ApiModel):
    searchers: list[LeaderboardEntry]
    stats: LeaderboardStats


class DexMetric(ApiModel):
    name: str
    volume: float
    mev_exposure: float
    efficiency_score: float = Field(ge=0.0, le=100.0)
    avg_slippage: float
    gas_efficiency: float
    liquidity_depth: float
    transaction_count: float
    success_rate: float
    mev_protection: float
    trend: Trend
    change: float


class DexMetrics(ApiModel):
    total_dexs: int = Field(alias="totalDEXs")
    avg_efficiency: float
    best_efficiency: float
    worst_efficiency: float
    total_volume: float
    total_mev: float = Field(alias="totalMEV")


class DexEfficiency(ApiModel):
    dexes: list[DexMetric]
    metrics: DexMetrics


class ChainMetric(ApiModel):
    name: str
    symbol: str
    volume: float
    mev_volume: float
    transaction_count: float
    avg_gas_price: float
    avg_block_time: float
    total_value: float
    mev_opportunities: float
    cross_chain_flows: float
    efficiency: float
    trend: Trend
    change: float


class CrossChainFlow(ApiModel):
    from_chain: str
    to_chain: str
    volume: float
    opportunities: float
    avg_profit: float
    bridge: str
    timestamp: datetime


class ChainMetrics(ApiModel):
    total_chains: int
    total_volume: float
    total_mev: float = Field(alias="totalMEV")
    total_flows: float
    avg_efficiency: float
    best_chain: str


class CrossChainOverview(ApiModel):
    chains: list[ChainMetric]
    flows: list[CrossChainFlow]
    metrics: ChainMetrics

"""
Hardcoded values and catalogs.

This module contains the fixed address tables, name lists and reference
catalogs used throughout the backend. Values are organized by category for
easy maintenance and auditing.
"""

from typing import Final


# =============================================================================
# External Endpoints
# =============================================================================

EXPLORER_BASE_URL: Final[str] = "https://api.etherscan.io/v2/api"
EXPLORER_CHAIN_ID: Final[int] = 1

UNISWAP_V2_SUBGRAPH_URL: Final[str] = (
    "https://api.thegraph.com/subgraphs/name/uniswap/uniswap-v2"
)

# Explorer response markers
EXPLORER_STATUS_OK: Final[str] = "1"

# Etherscan free tier allows 5 calls/sec
DEFAULT_EXPLORER_REQUESTS_PER_SECOND: Final[int] = 5


# =============================================================================
# Outbound HTTP Policy
# =============================================================================

DEFAULT_HTTP_TIMEOUT: Final[float] = 10.0  # seconds
DEFAULT_HTTP_RETRY_ATTEMPTS: Final[int] = 1
DEFAULT_HTTP_RETRY_BACKOFF: Final[float] = 0.5  # seconds


# =============================================================================
# Inbound Rate Limiting
# =============================================================================

# 100 requests per client per 15 minutes
DEFAULT_RATE_LIMIT_REQUESTS: Final[int] = 100
DEFAULT_RATE_LIMIT_WINDOW: Final[float] = 15 * 60.0  # seconds


# =============================================================================
# Classification Heuristic
# =============================================================================

WEI_PER_GWEI: Final[int] = 10**9
WEI_PER_ETH: Final[int] = 10**18

SCAN_WINDOW_BLOCKS: Final[int] = 1000
COMPLEX_INPUT_LENGTH: Final[int] = 100  # hex characters
HIGH_GAS_USED: Final[int] = 200_000
HIGH_GAS_PRICE_WEI: Final[int] = 50 * WEI_PER_GWEI

MAX_PLACEHOLDER_PROFIT: Final[float] = 10_000.0

MEV_CHAIN: Final[str] = "Ethereum"
UNKNOWN_PROTOCOL: Final[str] = "Unknown"

# Known MEV searcher addresses
KNOWN_SEARCHERS: Final[tuple[str, ...]] = (
    "0xDAFEA492D9c6733ae3d56b7Ed1ADB60692c98Bc5",  # Flashbots
    "0x0000000000000000000000000000000000000000",
)

# Router addresses of known DEXes, matched case-insensitively
KNOWN_DEX_ADDRESSES: Final[dict[str, str]] = {
    "Uniswap V3": "0xE592427A0AEce92De3Edee1F18E0157C05861564",
    "SushiSwap": "0xd9e1cE17f2641f24aE83637ab66a2cca9C378B9F",
    "PancakeSwap": "0x10ED43C718714eb63d5aA57B78B54704E256024E",
    "Curve": "0x99a58482BD75cbab83b27EC03CA68fF489b5788f",
}


# =============================================================================
# Data Source Markers
# =============================================================================

SOURCE_MEV_ANALYSIS: Final[str] = "Etherscan API with MEV analysis"
SOURCE_GAS_TRACKER: Final[str] = "Etherscan Gas Tracker"
SOURCE_GAS_MOCK: Final[str] = "Mock data (Etherscan API unavailable)"
SOURCE_SUBGRAPH: Final[str] = "Uniswap V2 subgraph"


# =============================================================================
# Dashboard Catalogs
# =============================================================================

MOCK_PROTOCOLS: Final[tuple[str, ...]] = ("Uniswap", "SushiSwap", "PancakeSwap", "Curve")

ARBITRAGE_VENUES: Final[tuple[str, ...]] = (
    "Uniswap V3",
    "SushiSwap",
    "PancakeSwap",
    "Curve",
    "Balancer",
)

MARKET_PROTOCOLS: Final[tuple[str, ...]] = (
    "Uniswap",
    "SushiSwap",
    "PancakeSwap",
    "Curve",
    "Balancer",
    "1inch",
)

SEARCHER_NAMES: Final[tuple[str, ...]] = (
    "FlashMaster",
    "ArbitrageKing",
    "MEVHunter",
    "ProfitSeeker",
    "BlockRunner",
    "GasWizard",
    "SlippageSlayer",
    "LiquidationLord",
    "SandwichSniper",
    "FrontrunFury",
    "BackrunBaron",
    "CrossChainCrusher",
    "FlashLoanFighter",
    "TimeBoostTitan",
    "JITJuggernaut",
)

SEARCHER_STRATEGIES: Final[tuple[str, ...]] = (
    "Arbitrage",
    "Sandwich",
    "Frontrun",
    "Backrun",
    "Liquidation",
    "JIT",
    "Time Boost",
    "Cross-Chain",
    "Flash Loan",
)

DEX_NAMES: Final[tuple[str, ...]] = (
    "Uniswap V3",
    "SushiSwap",
    "PancakeSwap",
    "Curve",
    "Balancer",
    "1inch",
    "dYdX",
    "GMX",
    "Trader Joe",
    "Orca",
)

CHAINS: Final[tuple[tuple[str, str], ...]] = (
    ("Ethereum", "ETH"),
    ("Polygon", "MATIC"),
    ("BSC", "BNB"),
    ("Arbitrum", "ARB"),
    ("Optimism", "OP"),
    ("Avalanche", "AVAX"),
    ("Fantom", "FTM"),
    ("Solana", "SOL"),
)

BRIDGES: Final[tuple[str, ...]] = (
    "Multichain",
    "Stargate",
    "Hop",
    "Across",
    "Synapse",
    "Celer",
)

CROSS_CHAIN_FLOW_COUNT: Final[int] = 20
OPPORTUNITY_COUNT: Final[int] = 10

# Uniswap V2 pools shown on the popular pools page
POPULAR_POOLS: Final[tuple[tuple[str, str], ...]] = (
    ("Uniswap V2 USDC/WETH", "0xB4e16d0168e52d35CaCD2c6185b44281Ec28C9Dc"),
    ("Uniswap V2 DAI/WETH", "0xA478c2975Ab1Ea89e8196811F51A7B7Ade33eB11"),
)
POOL_SWAP_LIMIT: Final[int] = 10

# Static gas impact catalog
MEV_GAS_IMPACTS: Final[tuple[dict[str, object], ...]] = (
    {
        "type": "Arbitrage Bots",
        "impact": 12.5,
        "description": "High arbitrage activity increasing gas competition",
        "recommendation": "Wait for lower activity periods (2-4 AM UTC)",
    },
    {
        "type": "Liquidations",
        "impact": 8.2,
        "description": "Moderate liquidation activity in DeFi protocols",
        "recommendation": "Monitor liquidation thresholds before large trades",
    },
    {
        "type": "NFT Mints",
        "impact": 5.8,
        "description": "Popular NFT collection launches driving gas up",
        "recommendation": "Avoid peak minting hours (6-8 PM UTC)",
    },
    {
        "type": "DEX Swaps",
        "impact": 15.3,
        "description": "High volume DEX trading with sandwich attacks",
        "recommendation": "Use Flashbots or private mempools for large swaps",
    },
)


# =============================================================================
# Logging & Telemetry
# =============================================================================

LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

# Maximum log queue size
MAX_LOG_QUEUE_SIZE: Final[int] = 10_000

"""External data gateways: block explorer and swap subgraph."""

from mev_academy.gateway.base import GatewayError, GatewayHTTPError, GatewayPayloadError
from mev_academy.gateway.etherscan import EtherscanGateway
from mev_academy.gateway.models import GasOracle, RawChainTransaction, SwapRecord
from mev_academy.gateway.rate_limiter import ClientRateLimiter, TokenBucket
from mev_academy.gateway.subgraph import SubgraphGateway


__all__ = [
    "ClientRateLimiter",
    "EtherscanGateway",
    "GasOracle",
    "GatewayError",
    "GatewayHTTPError",
    "GatewayPayloadError",
    "RawChainTransaction",
    "SubgraphGateway",
    "SwapRecord",
    "TokenBucket",
]

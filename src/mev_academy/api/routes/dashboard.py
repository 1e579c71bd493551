"""Dashboard endpoints and recent pool swaps."""

import asyncio
import logging

from fastapi import APIRouter
from fastapi.responses import Response

from mev_academy.analysis.synthetic import bucket_count
from mev_academy.api.responses import failure, ok
from mev_academy.api.services import ServicesDep
from mev_academy.config.constants import POOL_SWAP_LIMIT, POPULAR_POOLS, SOURCE_SUBGRAPH


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("/market")
async def get_market(services: ServicesDep, timeframe: str = "24h") -> Response:
    return ok(services.dashboards.market(bucket_count(timeframe)))


@router.get("/leaderboard")
async def get_leaderboard(services: ServicesDep) -> Response:
    return ok(services.dashboards.leaderboard())


@router.get("/dex-efficiency")
async def get_dex_efficiency(services: ServicesDep) -> Response:
    return ok(services.dashboards.dex_efficiency())


@router.get("/cross-chain")
async def get_cross_chain(services: ServicesDep) -> Response:
    return ok(services.dashboards.cross_chain())


@router.get("/pools/transactions")
async def get_pool_transactions(services: ServicesDep) -> Response:
    """
    Recent swaps of the tracked pools, keyed by pool address.

    A pool whose query fails maps to an empty list.
    """
    addresses = [address for _, address in POPULAR_POOLS]
    try:
        results = await asyncio.gather(
            *(services.swaps.get_pool_swaps(address, POOL_SWAP_LIMIT) for address in addresses)
        )
    except Exception as e:
        logger.error(f"Error fetching pool transactions: {e}", exc_info=True)
        return failure("Failed to fetch pool transactions")

    return ok(dict(zip(addresses, results)), source=SOURCE_SUBGRAPH)

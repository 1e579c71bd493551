"""MEV transaction, statistics and trend endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Query
from fastapi.responses import Response

from mev_academy.analysis.synthetic import bucket_count
from mev_academy.api.responses import failure, ok
from mev_academy.api.services import ServicesDep
from mev_academy.config.constants import SOURCE_MEV_ANALYSIS
from mev_academy.core.types import MevCategory


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/mev", tags=["mev"])

DEFAULT_LIMIT = 50
MAX_LIMIT = 500


@router.get("/transactions")
async def get_transactions(
    services: ServicesDep,
    limit: Annotated[int, Query(ge=1, le=MAX_LIMIT)] = DEFAULT_LIMIT,
    category: Annotated[MevCategory | None, Query(alias="type")] = None,
    chain: str | None = None,
) -> Response:
    """Classified MEV transactions, padded with synthetic ones to ``limit``."""
    try:
        transactions = await services.analyzer.analyze_transactions(limit)
    except Exception as e:
        logger.error(f"Error fetching MEV transactions: {e}", exc_info=True)
        return failure("Failed to fetch MEV transactions", data=[])

    if category is not None:
        transactions = [tx for tx in transactions if tx.category is category]
    if chain:
        wanted = chain.lower()
        transactions = [tx for tx in transactions if tx.chain.lower() == wanted]

    return ok(transactions, count=len(transactions), source=SOURCE_MEV_ANALYSIS)


@router.get("/stats")
async def get_stats(services: ServicesDep) -> Response:
    try:
        stats = await services.analyzer.get_stats()
    except Exception as e:
        logger.error(f"Error fetching MEV stats: {e}", exc_info=True)
        return failure("Failed to fetch MEV statistics")
    return ok(stats)


@router.get("/trends")
async def get_trends(services: ServicesDep, timeframe: str = "24h") -> Response:
    return ok(services.analyzer.get_trends(bucket_count(timeframe)))

"""Gas fee endpoints. Only ``current`` consults the explorer."""

import logging

from fastapi import APIRouter
from fastapi.responses import Response

from mev_academy.analysis.synthetic import bucket_count
from mev_academy.api.responses import ok
from mev_academy.api.services import ServicesDep
from mev_academy.config.constants import MEV_GAS_IMPACTS, SOURCE_GAS_MOCK, SOURCE_GAS_TRACKER
from mev_academy.core.types import CurrentGas
from mev_academy.gateway.models import GasOracle
from mev_academy.utils.time import utc_now


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/gas", tags=["gas"])


def current_from_oracle(oracle: GasOracle) -> CurrentGas:
    """Map explorer gas tracker prices (gwei) to the current-gas record."""
    return CurrentGas(
        base_fee=oracle.suggest_base_fee,
        priority_fee=oracle.priority_fee,
        max_fee=oracle.fast_gas_price,
        network_status="Normal",
        last_updated=utc_now(),
        safe_low=oracle.safe_gas_price,
        standard=oracle.propose_gas_price,
        fast=oracle.fast_gas_price,
        gas_used_ratio=oracle.gas_used_ratio or None,
    )


@router.get("/predictions")
async def get_predictions(services: ServicesDep, timeframe: str = "6h") -> Response:
    return ok(services.generator.gas_predictions(bucket_count(timeframe)))


@router.get("/history")
async def get_history(services: ServicesDep, timeframe: str = "24h") -> Response:
    return ok(services.generator.gas_history(bucket_count(timeframe)))


@router.get("/mev-impact")
async def get_mev_impact() -> Response:
    return ok(list(MEV_GAS_IMPACTS))


@router.get("/current")
async def get_current(services: ServicesDep) -> Response:
    """Live gas tracker prices, or synthetic ones when the explorer is unavailable."""
    oracle = await services.explorer.get_gas_oracle()
    if oracle is not None:
        return ok(current_from_oracle(oracle), source=SOURCE_GAS_TRACKER)

    logger.info("Gas oracle unavailable, serving synthetic gas prices")
    return ok(services.generator.current_gas(), source=SOURCE_GAS_MOCK)

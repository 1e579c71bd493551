"""Arbitrage opportunity and profit calculation endpoints."""

from typing import Annotated

from fastapi import APIRouter, Query
from fastapi.responses import Response

from mev_academy.analysis.arbitrage import DEFAULT_AMOUNT, DEFAULT_GAS_PRICE, DEFAULT_SLIPPAGE
from mev_academy.api.responses import ok
from mev_academy.api.schemas import ArbitrageRequest
from mev_academy.api.services import ServicesDep


router = APIRouter(prefix="/api/arbitrage", tags=["arbitrage"])

Amount = Annotated[float, Query(ge=0, allow_inf_nan=False)]
GasPrice = Annotated[float, Query(alias="gasPrice", ge=0, allow_inf_nan=False)]
Slippage = Annotated[float, Query(ge=0, le=100, allow_inf_nan=False)]


@router.get("/opportunities")
async def get_opportunities(
    services: ServicesDep,
    token_a: Annotated[str | None, Query(alias="tokenA")] = None,
    token_b: Annotated[str | None, Query(alias="tokenB")] = None,
    amount: Amount = DEFAULT_AMOUNT,
    gas_price: GasPrice = DEFAULT_GAS_PRICE,
    slippage: Slippage = DEFAULT_SLIPPAGE,
) -> Response:
    """Synthetic opportunities; the token pair is accepted but not used for pricing."""
    opportunities = services.calculator.opportunities(amount, gas_price, slippage)
    return ok(opportunities, count=len(opportunities))


@router.post("/calculate")
async def calculate(services: ServicesDep, body: ArbitrageRequest) -> Response:
    return ok(services.calculator.calculate(body.amount, body.gas_price, body.slippage))

"""Request bodies accepted by the API."""

from pydantic import BaseModel, ConfigDict, Field


class ArbitrageRequest(BaseModel):
    """Body of ``POST /api/arbitrage/calculate``; token fields are informational."""

    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False, extra="ignore")

    token_a: str | None = Field(default=None, alias="tokenA")
    token_b: str | None = Field(default=None, alias="tokenB")
    amount: float = Field(ge=0.0)
    gas_price: float = Field(ge=0.0, alias="gasPrice")
    slippage: float = Field(ge=0.0, le=100.0)

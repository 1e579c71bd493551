"""
Pydantic models for block explorer and subgraph responses.

These models provide type-safe parsing of upstream payloads with
automatic validation; anything that fails validation is treated as
missing data by the gateways.
"""

from pydantic import BaseModel, Field

from mev_academy.core.types import ApiModel
from mev_academy.utils.math import parse_int


class RawChainTransaction(BaseModel):
    """Normal transaction entry from the explorer ``txlist`` action."""

    block_number: str = Field(alias="blockNumber")
    time_stamp: str = Field(alias="timeStamp")
    hash: str
    sender: str = Field(alias="from")
    recipient: str = Field(default="", alias="to")
    value: str = "0"
    gas: str = "0"
    gas_price: str = Field(default="0", alias="gasPrice")
    gas_used: str = Field(default="0", alias="gasUsed")
    input: str = "0x"
    is_error: str = Field(default="0", alias="isError")

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def succeeded(self) -> bool:
        """Check if the transaction executed without error."""
        return self.is_error == "0"

    @property
    def block_number_int(self) -> int:
        return parse_int(self.block_number)

    @property
    def timestamp_int(self) -> int:
        return parse_int(self.time_stamp)

    @property
    def gas_used_int(self) -> int:
        return parse_int(self.gas_used)

    @property
    def gas_price_wei(self) -> int:
        return parse_int(self.gas_price)

    @property
    def gas_limit_int(self) -> int:
        return parse_int(self.gas)


class ExplorerEnvelope(BaseModel):
    """Standard explorer response wrapper for account/gastracker modules."""

    status: str
    message: str = ""
    result: object = None


class GasOracle(BaseModel):
    """Gas oracle result; all prices are quoted in gwei."""

    safe_gas_price: float = Field(alias="SafeGasPrice")
    propose_gas_price: float = Field(alias="ProposeGasPrice")
    fast_gas_price: float = Field(alias="FastGasPrice")
    suggest_base_fee: float = Field(alias="suggestBaseFee")
    gas_used_ratio: str = Field(default="", alias="gasUsedRatio")

    model_config = {"populate_by_name": True, "frozen": True, "allow_inf_nan": False}

    @property
    def priority_fee(self) -> float:
        """Tip implied by the proposed price over the base fee."""
        return max(0.0, self.propose_gas_price - self.suggest_base_fee)


class SwapRecord(ApiModel):
    """A single pool swap as returned to the dashboard."""

    tx_hash: str
    block_number: int = 0  # not exposed by the V2 subgraph
    timestamp: int
    sender: str
    recipient: str
    amount0_in: str = Field(alias="amount0In")
    amount1_in: str = Field(alias="amount1In")
    amount0_out: str = Field(alias="amount0Out")
    amount1_out: str = Field(alias="amount1Out")
    amount_usd: str = Field(alias="amountUSD")

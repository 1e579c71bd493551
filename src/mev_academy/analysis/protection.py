"""
Front-running protection advice.

A fixed decision table: rules are evaluated in order, each may add a risk
factor, a recommendation and an estimated loss, and may raise (never lower)
the vulnerability level. A zero or blank field counts as not supplied. The protection catalog is then filtered by an
effectiveness cutoff that depends on the final level.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mev_academy.core.types import ProtectionAnalysis, ProtectionMethod, RiskLevel


logger = logging.getLogger(__name__)


class ProposedTransaction(BaseModel):
    """Descriptor of a transaction the user intends to send."""

    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False, extra="ignore")

    to: str | None = None
    data: str | None = None
    value: float | None = None
    gas_limit: float | None = Field(default=None, alias="gasLimit")
    gas_price: float | None = Field(default=None, alias="gasPrice")
    max_fee_per_gas: float | None = Field(default=None, alias="maxFeePerGas")
    max_priority_fee_per_gas: float | None = Field(default=None, alias="maxPriorityFeePerGas")
    nonce: int | None = Field(default=None, ge=0)

    @field_validator("*", mode="before")
    @classmethod
    def blank_as_missing(cls, v: object) -> object:
        """Form fields left blank arrive as empty strings."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


@dataclass(slots=True, frozen=True)
class ProtectionRule:
    """One row of the decision table."""

    applies: Callable[[ProposedTransaction], bool]
    risk_factor: str
    level: RiskLevel | None = None
    estimated_loss: float = 0.0
    recommendation: str | None = None


PROTECTION_RULES: tuple[ProtectionRule, ...] = (
    ProtectionRule(
        applies=lambda tx: bool(tx.value) and tx.value > 10_000,
        risk_factor="High transaction value increases MEV attractiveness",
        level=RiskLevel.MEDIUM,
        estimated_loss=50,
    ),
    ProtectionRule(
        applies=lambda tx: bool(tx.data) and len(tx.data) > 100,
        risk_factor="Complex transaction data may indicate DEX interaction",
        level=RiskLevel.HIGH,
        estimated_loss=100,
    ),
    ProtectionRule(
        applies=lambda tx: bool(tx.gas_price) and tx.gas_price < 20,
        risk_factor="Low gas price makes transaction vulnerable to front-running",
        level=RiskLevel.HIGH,
        estimated_loss=75,
    ),
    ProtectionRule(
        applies=lambda tx: not tx.max_fee_per_gas or not tx.max_priority_fee_per_gas,
        risk_factor="Missing EIP-1559 gas parameters",
        recommendation="Use EIP-1559 gas parameters for better protection",
    ),
)

LEVEL_RECOMMENDATIONS: dict[RiskLevel, tuple[str, ...]] = {
    RiskLevel.HIGH: (
        "Consider using Flashbots bundle for maximum protection",
        "Increase gas price to prioritize execution",
        "Use private mempool if available",
    ),
    RiskLevel.MEDIUM: (
        "Set appropriate slippage tolerance",
        "Consider time boost for important transactions",
        "Monitor mempool for similar transactions",
    ),
    RiskLevel.LOW: (
        "Transaction appears safe, but monitor for unusual activity",
        "Consider basic protection methods for peace of mind",
    ),
}

# Methods are offered only above this effectiveness for the level
EFFECTIVENESS_CUTOFFS: dict[RiskLevel, int] = {
    RiskLevel.HIGH: 80,
    RiskLevel.MEDIUM: 70,
    RiskLevel.LOW: 50,
}

PROTECTION_CATALOG: tuple[ProtectionMethod, ...] = (
    ProtectionMethod(
        name="Flashbots Bundle",
        description="Submit transactions through Flashbots to avoid front-running",
        effectiveness=95,
        cost=0.1,
        implementation="Use Flashbots RPC endpoint and bundle transactions",
        pros=("High protection against front-running", "No additional gas costs", "Widely adopted"),
        cons=("Requires technical setup", "Not available on all chains", "May delay transaction"),
    ),
    ProtectionMethod(
        name="Private Mempool",
        description="Use a private mempool service to keep transactions hidden",
        effectiveness=90,
        cost=0.05,
        implementation="Connect to private mempool RPC endpoint",
        pros=("High privacy", "Fast execution", "Available on multiple chains"),
        cons=("Additional cost", "Requires trusted service", "Limited availability"),
    ),
    ProtectionMethod(
        name="Time Boost",
        description="Increase gas price to prioritize transaction execution",
        effectiveness=70,
        cost=0.2,
        implementation="Set higher maxFeePerGas and maxPriorityFeePerGas",
        pros=("Simple to implement", "Immediate effect", "Works on all chains"),
        cons=("Higher gas costs", "Not always effective", "Can be outbid"),
    ),
)


class ProtectionAdvisor:
    """Evaluates the protection decision table."""

    def __init__(
        self,
        rules: Sequence[ProtectionRule] = PROTECTION_RULES,
        catalog: Sequence[ProtectionMethod] = PROTECTION_CATALOG,
    ) -> None:
        self._rules = tuple(rules)
        self._catalog = tuple(catalog)

    def methods_for(self, level: RiskLevel) -> list[ProtectionMethod]:
        """Catalog entries strictly above the cutoff for ``level``."""
        cutoff = EFFECTIVENESS_CUTOFFS[level]
        return [m for m in self._catalog if m.effectiveness > cutoff]

    def analyze(self, tx: ProposedTransaction) -> ProtectionAnalysis:
        """
        Assess a proposed transaction.

        Args:
            tx: Transaction descriptor.

        Returns:
            ProtectionAnalysis with level, factors, advice and methods.
        """
        level = RiskLevel.LOW
        risk_factors: list[str] = []
        recommendations: list[str] = []
        estimated_loss = 0.0

        for rule in self._rules:
            if not rule.applies(tx):
                continue
            risk_factors.append(rule.risk_factor)
            estimated_loss += rule.estimated_loss
            if rule.level is not None:
                level = level.raise_to(rule.level)
            if rule.recommendation:
                recommendations.append(rule.recommendation)

        recommendations.extend(LEVEL_RECOMMENDATIONS[level])

        logger.debug(f"Protection analysis for {tx.to}: {level.value}, loss {estimated_loss}")

        return ProtectionAnalysis(
            vulnerability=level,
            risk_factors=risk_factors,
            recommendations=recommendations,
            estimated_loss=estimated_loss,
            protection_methods=self.methods_for(level),
        )

"""
Unit tests for the protection advisor.

Tests the decision table, level escalation and method filtering.
"""

import pytest
from pydantic import ValidationError

from mev_academy.analysis.protection import (
    PROTECTION_RULES,
    ProposedTransaction,
    ProtectionAdvisor,
    ProtectionRule,
)
from mev_academy.core.types import RiskLevel


EIP_1559 = {"maxFeePerGas": 40, "maxPriorityFeePerGas": 2}


@pytest.fixture
def advisor() -> ProtectionAdvisor:
    return ProtectionAdvisor()


class TestProposedTransaction:
    def test_aliases(self) -> None:
        tx = ProposedTransaction.model_validate({"gasPrice": 30, "gasLimit": 21000})
        assert tx.gas_price == 30
        assert tx.gas_limit == 21000

    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_non_finite_rejected(self, value: float) -> None:
        with pytest.raises(ValidationError):
            ProposedTransaction.model_validate({"value": value})

    def test_negative_nonce_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ProposedTransaction.model_validate({"nonce": -1})


class TestProtectionAdvisor:
    """Tests for ProtectionAdvisor.analyze."""

    def test_every_rule_fires(self, advisor: ProtectionAdvisor) -> None:
        tx = ProposedTransaction.model_validate(
            {"to": "0xdead", "data": "0x" + "a" * 150, "value": 20_000, "gasPrice": 10}
        )

        analysis = advisor.analyze(tx)

        assert analysis.vulnerability is RiskLevel.HIGH
        assert analysis.estimated_loss == 225
        assert len(analysis.risk_factors) == 4
        assert analysis.recommendations[0] == "Use EIP-1559 gas parameters for better protection"
        assert "Consider using Flashbots bundle for maximum protection" in analysis.recommendations
        assert [m.name for m in analysis.protection_methods] == [
            "Flashbots Bundle",
            "Private Mempool",
        ]

    def test_safe_transaction(self, advisor: ProtectionAdvisor) -> None:
        tx = ProposedTransaction.model_validate(
            {"to": "0xdead", "value": 1, "gasPrice": 30, **EIP_1559}
        )

        analysis = advisor.analyze(tx)

        assert analysis.vulnerability is RiskLevel.LOW
        assert analysis.estimated_loss == 0
        assert analysis.risk_factors == []
        assert len(analysis.protection_methods) == 3

    def test_high_value_is_medium(self, advisor: ProtectionAdvisor) -> None:
        tx = ProposedTransaction.model_validate({"value": 20_000, "gasPrice": 30, **EIP_1559})

        analysis = advisor.analyze(tx)

        assert analysis.vulnerability is RiskLevel.MEDIUM
        assert analysis.estimated_loss == 50
        assert [m.effectiveness for m in analysis.protection_methods] == [95, 90]

    def test_value_boundary(self, advisor: ProtectionAdvisor) -> None:
        tx = ProposedTransaction.model_validate({"value": 10_000, "gasPrice": 30, **EIP_1559})
        assert advisor.analyze(tx).vulnerability is RiskLevel.LOW

    def test_missing_fields_only_flag_eip_1559(self, advisor: ProtectionAdvisor) -> None:
        analysis = advisor.analyze(ProposedTransaction())

        assert analysis.vulnerability is RiskLevel.LOW
        assert analysis.risk_factors == ["Missing EIP-1559 gas parameters"]

    def test_zero_gas_price_is_not_supplied(self, advisor: ProtectionAdvisor) -> None:
        tx = ProposedTransaction.model_validate({"gasPrice": 0, "value": 0, **EIP_1559})

        analysis = advisor.analyze(tx)

        assert analysis.vulnerability is RiskLevel.LOW
        assert analysis.estimated_loss == 0
        assert analysis.risk_factors == []

    def test_blank_form_fields(self, advisor: ProtectionAdvisor) -> None:
        fields = (
            "to", "data", "value", "gasLimit", "gasPrice",
            "maxFeePerGas", "maxPriorityFeePerGas", "nonce",
        )
        tx = ProposedTransaction.model_validate({name: "" for name in fields})

        assert tx.value is None
        assert tx.nonce is None
        analysis = advisor.analyze(tx)
        assert analysis.vulnerability is RiskLevel.LOW
        assert analysis.risk_factors == ["Missing EIP-1559 gas parameters"]

    def test_level_never_lowered(self) -> None:
        high, medium = PROTECTION_RULES[1], PROTECTION_RULES[0]
        advisor = ProtectionAdvisor(rules=[high, medium])
        tx = ProposedTransaction.model_validate({"data": "0x" + "a" * 150, "value": 20_000})

        assert advisor.analyze(tx).vulnerability is RiskLevel.HIGH

    def test_custom_rule(self) -> None:
        rule = ProtectionRule(
            applies=lambda tx: tx.nonce == 0,
            risk_factor="Fresh account",
            level=RiskLevel.MEDIUM,
            estimated_loss=5,
        )
        advisor = ProtectionAdvisor(rules=[rule])

        analysis = advisor.analyze(ProposedTransaction(nonce=0))

        assert analysis.risk_factors == ["Fresh account"]
        assert analysis.estimated_loss == 5

    @pytest.mark.parametrize(
        ("level", "expected"),
        [(RiskLevel.HIGH, 2), (RiskLevel.MEDIUM, 2), (RiskLevel.LOW, 3)],
    )
    def test_methods_for(
        self, advisor: ProtectionAdvisor, level: RiskLevel, expected: int
    ) -> None:
        assert len(advisor.methods_for(level)) == expected

"""
Unit tests for ArbitrageCalculator.
"""

import pytest

from mev_academy.analysis.arbitrage import ArbitrageCalculator, opportunity_risk
from mev_academy.analysis.synthetic import SyntheticGenerator
from mev_academy.config.constants import ARBITRAGE_VENUES, OPPORTUNITY_COUNT
from mev_academy.core.types import RiskLevel


@pytest.fixture
def calculator(generator: SyntheticGenerator) -> ArbitrageCalculator:
    return ArbitrageCalculator(generator)


class TestEvaluate:
    """Tests for the profit breakdown arithmetic."""

    def test_known_prices(self) -> None:
        calc = ArbitrageCalculator.evaluate(
            buy_price=1000.0, sell_price=1050.0, amount=1000.0, gas_price=25.0, slippage=0.5
        )

        assert calc.profit_percentage == pytest.approx(5.0)
        assert calc.estimated_profit == pytest.approx(50.0)
        assert calc.gas_cost == pytest.approx(0.0025)
        assert calc.slippage_cost == pytest.approx(5.0)
        assert calc.net_profit == pytest.approx(44.9975)
        assert calc.is_profitable is True

    def test_unprofitable(self) -> None:
        calc = ArbitrageCalculator.evaluate(1000.0, 1001.0, 1000.0, 25.0, 0.5)

        assert calc.net_profit < 0
        assert calc.is_profitable is False


class TestCalculate:
    def test_net_profit_identity(self, calculator: ArbitrageCalculator) -> None:
        for _ in range(50):
            calc = calculator.calculate(1000.0, 25.0, 0.5)

            assert calc.net_profit == pytest.approx(
                calc.estimated_profit - calc.gas_cost - calc.slippage_cost
            )
            assert calc.gas_cost == pytest.approx(0.0025)
            assert calc.slippage_cost == pytest.approx(5.0)
            assert calc.is_profitable == (calc.net_profit > 0)

    def test_price_draw(self, calculator: ArbitrageCalculator) -> None:
        for _ in range(50):
            buy, sell = calculator.draw_prices()
            assert 1000 <= buy < 2000
            assert buy <= sell <= buy * 1.1


class TestOpportunities:
    def test_count_and_venues(self, calculator: ArbitrageCalculator) -> None:
        opportunities = calculator.opportunities()

        assert len(opportunities) == OPPORTUNITY_COUNT
        for opp in opportunities:
            assert opp.buy_dex in ARBITRAGE_VENUES
            assert opp.sell_dex in ARBITRAGE_VENUES
            assert opp.price_difference == pytest.approx(opp.sell_price - opp.buy_price)
            assert opp.risk is opportunity_risk(opp.net_profit)
            assert 1000 <= opp.min_amount < 10_000 <= opp.max_amount

    @pytest.mark.parametrize(
        ("net", "expected"),
        [
            (100.0, RiskLevel.LOW),
            (50.01, RiskLevel.LOW),
            (50.0, RiskLevel.MEDIUM),
            (10.01, RiskLevel.MEDIUM),
            (10.0, RiskLevel.HIGH),
            (-5.0, RiskLevel.HIGH),
        ],
    )
    def test_risk_grades(self, net: float, expected: RiskLevel) -> None:
        assert opportunity_risk(net) is expected

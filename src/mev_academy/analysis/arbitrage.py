"""
Arbitrage profit calculation.

Illustrates the buy-low sell-high arithmetic with randomly drawn venue
prices: gross profit from the price spread, minus gas and slippage.
"""

import logging

from mev_academy.analysis.synthetic import SyntheticGenerator
from mev_academy.config.constants import ARBITRAGE_VENUES, OPPORTUNITY_COUNT
from mev_academy.core.types import ArbitrageCalculation, Opportunity, RiskLevel


logger = logging.getLogger(__name__)


# Gas cost per gwei of gas price, in quote currency
GAS_COST_PER_GWEI = 0.0001

DEFAULT_AMOUNT = 1000.0
DEFAULT_GAS_PRICE = 25.0
DEFAULT_SLIPPAGE = 0.5  # percent

LOW_RISK_NET_PROFIT = 50.0
MEDIUM_RISK_NET_PROFIT = 10.0


def opportunity_risk(net_profit: float) -> RiskLevel:
    """Risk grade of an opportunity by its net profit."""
    if net_profit > LOW_RISK_NET_PROFIT:
        return RiskLevel.LOW
    if net_profit > MEDIUM_RISK_NET_PROFIT:
        return RiskLevel.MEDIUM
    return RiskLevel.HIGH


class ArbitrageCalculator:
    """
    Computes arbitrage profit breakdowns.

    Prices are synthetic: the buy price is drawn from [1000, 2000) and the
    sell price sits up to 10% above it.
    """

    __slots__ = ("_generator",)

    def __init__(self, generator: SyntheticGenerator | None = None) -> None:
        self._generator = generator or SyntheticGenerator()

    def draw_prices(self) -> tuple[float, float]:
        """Draw a (buy, sell) price pair with sell >= buy."""
        buy_price = self._generator.uniform(1000, 1000)
        sell_price = buy_price * (1 + self._generator.rng.random() * 0.1)
        return buy_price, sell_price

    @staticmethod
    def evaluate(
        buy_price: float,
        sell_price: float,
        amount: float,
        gas_price: float,
        slippage: float,
    ) -> ArbitrageCalculation:
        """
        Compute the profit breakdown for given prices.

        Args:
            buy_price: Price paid on the cheaper venue.
            sell_price: Price received on the dearer venue.
            amount: Trade size in quote currency.
            gas_price: Gas price in gwei.
            slippage: Slippage tolerance in percent.

        Returns:
            ArbitrageCalculation where net = estimated - gas - slippage.
        """
        profit_percentage = ((sell_price - buy_price) / buy_price) * 100
        estimated_profit = amount * (profit_percentage / 100)
        gas_cost = gas_price * GAS_COST_PER_GWEI
        slippage_cost = amount * (slippage / 100)
        net_profit = estimated_profit - gas_cost - slippage_cost

        return ArbitrageCalculation(
            buy_price=buy_price,
            sell_price=sell_price,
            profit_percentage=profit_percentage,
            estimated_profit=estimated_profit,
            gas_cost=gas_cost,
            slippage_cost=slippage_cost,
            net_profit=net_profit,
            is_profitable=net_profit > 0,
        )

    def calculate(
        self,
        amount: float,
        gas_price: float,
        slippage: float,
    ) -> ArbitrageCalculation:
        """Profit breakdown at freshly drawn prices."""
        buy_price, sell_price = self.draw_prices()
        return self.evaluate(buy_price, sell_price, amount, gas_price, slippage)

    def opportunities(
        self,
        amount: float = DEFAULT_AMOUNT,
        gas_price: float = DEFAULT_GAS_PRICE,
        slippage: float = DEFAULT_SLIPPAGE,
        count: int = OPPORTUNITY_COUNT,
    ) -> list[Opportunity]:
        """Synthetic opportunities between randomly chosen venues."""
        opportunities = []
        for i in range(count):
            calc = self.calculate(amount, gas_price, slippage)
            opportunities.append(
                Opportunity(
                    id=f"opp-{i}",
                    buy_dex=self._generator.choice(ARBITRAGE_VENUES),
                    sell_dex=self._generator.choice(ARBITRAGE_VENUES),
                    buy_price=calc.buy_price,
                    sell_price=calc.sell_price,
                    price_difference=calc.sell_price - calc.buy_price,
                    profit_percentage=calc.profit_percentage,
                    estimated_profit=calc.estimated_profit,
                    gas_cost=calc.gas_cost,
                    net_profit=calc.net_profit,
                    min_amount=self._generator.uniform(1000, 9000),
                    max_amount=self._generator.uniform(10_000, 90_000),
                    risk=opportunity_risk(calc.net_profit),
                )
            )
        logger.debug(f"Generated {count} arbitrage opportunities for amount {amount}")
        return opportunities

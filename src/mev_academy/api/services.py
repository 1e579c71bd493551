"""
Service container.

Gateways, the analyzer and the generators are constructed once per app
and handed to request handlers through a FastAPI dependency, so tests can
swap any of them for a fake.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Annotated

from fastapi import Depends, Request

from mev_academy.analysis.arbitrage import ArbitrageCalculator
from mev_academy.analysis.classifier import MevAnalyzer
from mev_academy.analysis.dashboard import DashboardBuilder
from mev_academy.analysis.protection import ProtectionAdvisor
from mev_academy.analysis.synthetic import SyntheticGenerator
from mev_academy.api.feeds import FeedHub
from mev_academy.config.settings import Settings
from mev_academy.gateway.etherscan import EtherscanGateway
from mev_academy.gateway.subgraph import SubgraphGateway


logger = logging.getLogger(__name__)


@dataclass
class Services:
    """Everything a request handler may need."""

    explorer: EtherscanGateway
    swaps: SubgraphGateway
    analyzer: MevAnalyzer
    generator: SyntheticGenerator
    dashboards: DashboardBuilder
    calculator: ArbitrageCalculator
    advisor: ProtectionAdvisor
    feeds: FeedHub = field(default_factory=FeedHub)

    async def close(self) -> None:
        """Release gateway sessions."""
        await self.explorer.close()
        await self.swaps.close()
        logger.debug("Gateway sessions closed")


def build_services(settings: Settings, rng: random.Random | None = None) -> Services:
    """
    Construct the production service graph.

    Args:
        settings: Application settings.
        rng: Optional shared random source for synthetic data.
    """
    explorer = EtherscanGateway(
        api_key=settings.explorer_api_key,
        base_url=settings.explorer_base_url,
        chain_id=settings.explorer_chain_id,
        requests_per_second=settings.explorer_requests_per_second,
        timeout=settings.http_timeout_seconds,
        retry_attempts=settings.http_retry_attempts,
        retry_backoff=settings.http_retry_backoff_seconds,
    )
    swaps = SubgraphGateway(
        url=settings.subgraph_url,
        timeout=settings.http_timeout_seconds,
        retry_attempts=settings.http_retry_attempts,
        retry_backoff=settings.http_retry_backoff_seconds,
    )
    generator = SyntheticGenerator(rng)

    return Services(
        explorer=explorer,
        swaps=swaps,
        analyzer=MevAnalyzer(explorer, generator),
        generator=generator,
        dashboards=DashboardBuilder(generator),
        calculator=ArbitrageCalculator(generator),
        advisor=ProtectionAdvisor(),
    )


def get_services(request: Request) -> Services:
    """FastAPI dependency returning the app's service container."""
    services: Services = request.app.state.services
    return services


ServicesDep = Annotated[Services, Depends(get_services)]

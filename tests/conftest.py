"""
Pytest configuration and shared fixtures.

Provides reusable test fixtures for all test modules.
"""

import random

import pytest
from fastapi.testclient import TestClient

from mev_academy.analysis.arbitrage import ArbitrageCalculator
from mev_academy.analysis.classifier import MevAnalyzer
from mev_academy.analysis.dashboard import DashboardBuilder
from mev_academy.analysis.protection import ProtectionAdvisor
from mev_academy.analysis.synthetic import SyntheticGenerator
from mev_academy.api.server import create_app
from mev_academy.api.services import Services
from mev_academy.config.settings import Settings
from tests.mocks.gateways import MockExplorer, MockSubgraph


# =============================================================================
# Synthetic Data Fixtures
# =============================================================================


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible synthetic data."""
    return random.Random(1337)


@pytest.fixture
def generator(rng: random.Random) -> SyntheticGenerator:
    return SyntheticGenerator(rng)


# =============================================================================
# Gateway Fixtures
# =============================================================================


@pytest.fixture
def explorer() -> MockExplorer:
    """Explorer that knows no latest block, forcing synthetic data."""
    return MockExplorer()


@pytest.fixture
def subgraph() -> MockSubgraph:
    return MockSubgraph()


@pytest.fixture
def analyzer(explorer: MockExplorer, generator: SyntheticGenerator) -> MevAnalyzer:
    return MevAnalyzer(explorer, generator)


# =============================================================================
# Application Fixtures
# =============================================================================


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from any local .env file, inbound limiter off."""
    return Settings(_env_file=None, rate_limit_requests=0, environment="test")


@pytest.fixture
def services(
    explorer: MockExplorer,
    subgraph: MockSubgraph,
    analyzer: MevAnalyzer,
    generator: SyntheticGenerator,
) -> Services:
    return Services(
        explorer=explorer,  # type: ignore[arg-type]
        swaps=subgraph,  # type: ignore[arg-type]
        analyzer=analyzer,
        generator=generator,
        dashboards=DashboardBuilder(generator),
        calculator=ArbitrageCalculator(generator),
        advisor=ProtectionAdvisor(),
    )


@pytest.fixture
def client(test_settings: Settings, services: Services) -> TestClient:
    """HTTP client for an app wired to mock gateways."""
    return TestClient(create_app(test_settings, services))

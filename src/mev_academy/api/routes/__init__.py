"""HTTP route groups."""

from mev_academy.api.routes import arbitrage, dashboard, gas, health, mev, protection


ROUTERS = (
    mev.router,
    arbitrage.router,
    protection.router,
    gas.router,
    dashboard.router,
    health.router,
)

__all__ = ["ROUTERS"]

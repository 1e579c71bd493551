"""HTTP and WebSocket API."""

from mev_academy.api.server import create_app
from mev_academy.api.services import Services, build_services


__all__ = ["Services", "build_services", "create_app"]

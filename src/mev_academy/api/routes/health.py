"""Liveness probe."""

import time

from fastapi import APIRouter, Request
from fastapi.responses import Response

from mev_academy.api.responses import OrjsonResponse
from mev_academy.utils.time import utc_now


router = APIRouter(tags=["health"])


@router.get("/health")
async def health(request: Request) -> Response:
    settings = request.app.state.settings
    return OrjsonResponse(
        {
            "status": "OK",
            "timestamp": utc_now().isoformat(),
            "uptime": time.monotonic() - request.app.state.started_at,
            "environment": settings.environment,
        }
    )

"""Front-running protection endpoint."""

from fastapi import APIRouter
from fastapi.responses import Response

from mev_academy.analysis.protection import ProposedTransaction
from mev_academy.api.responses import ok
from mev_academy.api.services import ServicesDep


router = APIRouter(prefix="/api/protection", tags=["protection"])


@router.post("/analyze")
async def analyze(services: ServicesDep, transaction: ProposedTransaction) -> Response:
    return ok(services.advisor.analyze(transaction))

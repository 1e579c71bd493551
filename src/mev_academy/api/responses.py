"""
JSON envelope helpers.

Every endpoint answers ``{"success": ..., "data": ...}`` with optional
``count`` and ``source`` members on success and an ``error`` member on
failure. Bodies are rendered with orjson.
"""

from typing import Any

import orjson
from fastapi.responses import JSONResponse

from mev_academy.core.types import ApiModel


class OrjsonResponse(JSONResponse):
    """JSONResponse rendered with orjson."""

    def render(self, content: Any) -> bytes:
        return orjson.dumps(content)


def serialize(value: Any) -> Any:
    """Convert API models (also nested in lists and dicts) to plain JSON values."""
    if isinstance(value, ApiModel):
        return value.to_api()
    if isinstance(value, (list, tuple)):
        return [serialize(v) for v in value]
    if isinstance(value, dict):
        return {k: serialize(v) for k, v in value.items()}
    return value


def ok(
    data: Any,
    count: int | None = None,
    source: str | None = None,
) -> OrjsonResponse:
    """Success envelope."""
    body: dict[str, Any] = {"success": True, "data": serialize(data)}
    if count is not None:
        body["count"] = count
    if source is not None:
        body["source"] = source
    return OrjsonResponse(body)


def failure(
    message: str,
    status_code: int = 500,
    data: Any = None,
) -> OrjsonResponse:
    """Error envelope; ``data`` defaults to an empty object."""
    return OrjsonResponse(
        {"success": False, "error": message, "data": {} if data is None else data},
        status_code=status_code,
    )

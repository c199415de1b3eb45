"""Catch-all proxy route that turns a resolved path into an enveloped response."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from errors import NotFoundError
from routes.resolver import Operation, ResolvedOperation, resolve
from services.comics import ComicService, FetchResult

logger = logging.getLogger(__name__)

router = APIRouter()


async def run_operation(service: ComicService, resolved: ResolvedOperation, path: str) -> FetchResult:
    op = resolved.operation
    if op is Operation.LATEST:
        return await service.get_latest()
    if op is Operation.RANDOM:
        return await service.get_random()
    if op is Operation.COMIC:
        return await service.get_comic(resolved.number)
    if op is Operation.CACHE_STATS:
        return FetchResult(service.stats(), False)
    if op is Operation.CACHE_CLEAR:
        return FetchResult(service.clear(), False)
    raise NotFoundError(path)


def success_envelope(result: FetchResult, endpoint: str) -> dict:
    return {
        "success": True,
        "data": result.data,
        "cached": result.cached,
        "endpoint": endpoint,
        "timestamp": datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
    }


@router.api_route("/{path:path}", methods=["GET", "POST", "PUT", "PATCH", "DELETE"])
async def proxy(request: Request) -> JSONResponse:
    path = request.url.path
    resolved = resolve(path)
    result = await run_operation(request.app.state.comics, resolved, path)

    return JSONResponse(
        success_envelope(result, resolved.endpoint),
        headers={"X-Cache": "HIT" if result.cached else "MISS"},
    )

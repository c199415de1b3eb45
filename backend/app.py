"""FastAPI application entry point for the xkcd proxy."""

import logging
import random
import sys
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response

from config import settings
from errors import error_response, register_error_handlers
from services.cache import TTLCache
from services.comics import ComicService
from services.xkcd import XkcdClient

# Structured logging: JSON for production, human-readable for local
if settings.is_production:
    logging.basicConfig(
        level=logging.INFO,
        format='{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}',
        stream=sys.stdout,
    )
else:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization, X-Requested-With",
    "Access-Control-Max-Age": "86400",
}

ENDPOINTS = """Endpoints:
   GET /            -> Latest comic
   GET /latest      -> Latest comic
   GET /random      -> Random comic
   GET /{number}    -> Specific comic
   GET /cache/stats -> Cache statistics
   GET /cache/clear -> Clear cache"""


def create_app(
    cache: TTLCache | None = None,
    client: XkcdClient | None = None,
    rng: random.Random | None = None,
) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        comics: ComicService = app.state.comics
        logger.info("xkcd proxy upstream: %s", comics.client.base_url)
        logger.info(ENDPOINTS)
        logger.info("CORS enabled for all origins; in-memory cache TTL %ds", comics.cache.ttl_seconds)
        yield

    app = FastAPI(title="xkcd Proxy", version="1.0.0", lifespan=lifespan)

    app.state.comics = ComicService(
        cache=cache if cache is not None else TTLCache(),
        client=client if client is not None else XkcdClient(),
        rng=rng,
    )

    # CORS preflight, response headers and request logging
    @app.middleware("http")
    async def dispatch(request: Request, call_next):
        start = time.perf_counter()

        if request.method == "OPTIONS":
            response = Response(status_code=204, headers=CORS_HEADERS)
        else:
            try:
                response = await call_next(request)
            except Exception:
                logger.exception("Unhandled error for %s %s", request.method, request.url.path)
                response = error_response("Internal Server Error", 500)

            response.headers.update(CORS_HEADERS)
            response.headers["Cache-Control"] = f"public, max-age={int(app.state.comics.cache.ttl_seconds)}"
            response.headers["X-Content-Type-Options"] = "nosniff"

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info("%s %s - %d (%.0fms)", request.method, request.url.path, response.status_code, elapsed_ms)
        return response

    # Centralized error handlers
    register_error_handlers(app)

    from routes.proxy import router as proxy_router

    app.include_router(proxy_router)

    return app


app = create_app()


def main() -> None:
    import uvicorn

    logger.info("Starting xkcd proxy on http://%s:%d", settings.host, settings.port)
    # uvicorn drains in-flight requests on SIGTERM/SIGINT
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()

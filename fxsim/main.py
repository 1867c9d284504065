"""fxsim — application entry point.

Boots the FastAPI server that serves synthetic market data and provides
the CLI entry point.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from fxsim.api.routers import router

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}

app = FastAPI(title="fxsim Market Data API", version="0.1.0")
app.include_router(router)
# Legacy mount path used by existing dashboard clients.
app.include_router(router, prefix="/forex-data")

logger = logging.getLogger("fxsim")


@app.middleware("http")
async def cors_and_fault_boundary(request: Request, call_next):
    """Answer preflights and stamp CORS headers; faults become JSON 500s."""
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)
    try:
        response = await call_next(request)
    except Exception as exc:
        logger.exception("Request to %s failed", request.url.path)
        return JSONResponse(
            status_code=500,
            content={"error": str(exc)},
            headers=CORS_HEADERS,
        )
    response.headers.update(CORS_HEADERS)
    return response


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """Unknown endpoints get a plain-text 404; other HTTP errors stay JSON."""
    if exc.status_code == 404:
        return PlainTextResponse("Endpoint not found", status_code=404)
    return await http_exception_handler(request, exc)


@app.get("/health")
async def health():
    """Liveness check."""
    return {"status": "ok"}


# ── CLI ──────────────────────────────────────────────────────────────────


def _seed_arg(raw: str) -> int:
    """argparse type for ``--seed``: an integer numpy can seed from."""
    import argparse

    from fxsim.config import check_seed

    try:
        return check_seed(int(raw), name="--seed")
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _run_cli() -> None:
    """Parse CLI arguments, configure the engine and serve the API."""
    import argparse
    import dataclasses

    import uvicorn

    from fxsim.api.routers import configure_routers
    from fxsim.config import LOG_LEVELS, load_config

    config = load_config()

    parser = argparse.ArgumentParser(description="fxsim synthetic market data server")
    parser.add_argument("--host", default=config.host, help="Bind address")
    parser.add_argument("--port", type=int, default=config.port, help="Bind port")
    parser.add_argument(
        "--seed",
        type=_seed_arg,
        default=config.seed,
        help="Replay the same random stream on every request",
    )
    parser.add_argument(
        "--log-level",
        default=config.log_level,
        choices=LOG_LEVELS,
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    config = dataclasses.replace(
        config, host=args.host, port=args.port, seed=args.seed, log_level=args.log_level,
    )
    configure_routers(config=config)

    if config.deterministic:
        logger.warning("Seed %d set: every request replays the same random stream.", config.seed)
    logger.info(
        "Serving %d symbol(s) on http://%s:%d", len(config.symbols), config.host, config.port,
    )
    uvicorn.run(app, host=config.host, port=config.port, log_level=args.log_level.lower())


if __name__ == "__main__":
    _run_cli()

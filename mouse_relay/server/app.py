"""FastAPI application translating JSON requests into mouse input."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from mouse_relay.actions.executor import MouseActionExecutor
from mouse_relay.interfaces.actions import DecodeError
from mouse_relay.models.actions import (
    MouseActionResponse,
    MouseActionsResponse,
    decode_action,
    decode_batch,
)

logger = logging.getLogger(__name__)


async def decode_error_handler(request: Request, exc: DecodeError) -> PlainTextResponse:
    """Malformed bodies are the client's fault: 400, no input injected."""
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return PlainTextResponse(f"Bad request: {exc}", status_code=status.HTTP_400_BAD_REQUEST)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> PlainTextResponse:
    """Render routing errors (404, 405) as plain text."""
    detail = "Not found" if exc.status_code == status.HTTP_404_NOT_FOUND else str(exc.detail)
    return PlainTextResponse(detail, status_code=exc.status_code, headers=exc.headers)


async def generic_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
    """Catch-all so unexpected errors never reach the client as a traceback."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return PlainTextResponse(
        "Internal server error",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def create_app(executor: MouseActionExecutor | None = None) -> FastAPI:
    """Create the FastAPI app with the mouse action endpoints.

    Args:
        executor: Shared executor for all requests. If None, one backed by
            the null injector is created and stored on app.state.
    """
    app = FastAPI(title="Mouse Relay", version="0.1.0")
    app.state.executor = executor or MouseActionExecutor()

    app.add_exception_handler(DecodeError, decode_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    @app.post("/mouse-actions", response_model=MouseActionsResponse)
    async def post_mouse_actions(request: Request) -> MouseActionsResponse | JSONResponse:
        batch = decode_batch(await request.body())
        executor: MouseActionExecutor = request.app.state.executor
        # Batches block on the injector and on delays; keep them off the event loop
        results = await run_in_threadpool(executor.execute, batch)
        messages = [r.message for r in results]

        if not all(r.success for r in results):
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": "Input injection failed", "messages": messages},
            )
        return MouseActionsResponse(messages=messages)

    @app.post("/mouse-action", response_model=MouseActionResponse)
    async def post_mouse_action(request: Request) -> MouseActionResponse | JSONResponse:
        action = decode_action(await request.body())
        executor: MouseActionExecutor = request.app.state.executor
        result = await run_in_threadpool(executor.apply_one, action)

        if not result.success:
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": "Input injection failed", "message": result.message},
            )
        return MouseActionResponse(message=result.message)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        executor: MouseActionExecutor = app.state.executor
        return {"status": "healthy", "injector": executor.injector.name}

    return app

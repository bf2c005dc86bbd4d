"""
FastAPI application factory.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.api.middleware import setup_middleware
from src.api.observability import ObservabilityMiddleware, generate_request_id, get_request_id
from src.api.routes import agents as agents_routes
from src.api.routes import catalog as catalog_routes
from src.api.routes import insights as insights_routes
from src.api.state import AppState
from src.config import settings
from src.data_store import get_store, seed_store
from src.exceptions import CatalogError, exception_to_http_status, handle_exception
from src.store import DocumentStore


def create_app(
    *,
    store: DocumentStore | None = None,
    seed: bool | None = None,
) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        state = getattr(app.state, "state", None)
        if state is None:
            state = AppState(store=store or get_store())
            app.state.state = state
        if settings.seed_on_startup if seed is None else seed:
            seed_store(state.store)
        yield

    app = FastAPI(
        title=f"{settings.site_name} API",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    if store is not None:
        app.state.state = AppState(store=store)

    setup_middleware(app)

    # Observability middleware (must be added last to wrap all others)
    app.add_middleware(ObservabilityMiddleware)

    @app.get("/v1/health")
    def health(response: Response) -> dict:
        response.headers["Cache-Control"] = "no-store"
        return {"ok": True}

    app.include_router(agents_routes.router)
    app.include_router(insights_routes.router)
    app.include_router(catalog_routes.router)
    if settings.enable_admin_routes:
        app.include_router(agents_routes.admin_router)
        app.include_router(insights_routes.admin_router)
        app.include_router(catalog_routes.admin_router)

    def _error_headers(request: Request) -> dict[str, str]:
        # Ensure clients always get a request id for correlation, even on errors.
        rid = request.headers.get("x-request-id") or get_request_id() or generate_request_id()
        return {"X-Request-ID": rid, "Cache-Control": "no-store"}

    @app.exception_handler(CatalogError)
    def _catalog_error(request: Request, exc: CatalogError) -> JSONResponse:
        headers = _error_headers(request)
        body = handle_exception(exc, request_id=headers["X-Request-ID"])
        status_code = exception_to_http_status(exc)
        if status_code >= 500:
            exc.log()
        return JSONResponse(status_code=status_code, content=body, headers=headers)

    @app.exception_handler(RequestValidationError)
    def _request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        headers = _error_headers(request)
        return JSONResponse(
            status_code=422,
            content={
                "error": "validation_error",
                "message": "Invalid request",
                "detail": jsonable_errors(exc),
                "request_id": headers["X-Request-ID"],
            },
            headers=headers,
        )

    @app.exception_handler(Exception)
    def _unhandled(request: Request, exc: Exception) -> JSONResponse:
        headers = _error_headers(request)
        body = handle_exception(exc, request_id=headers["X-Request-ID"])
        return JSONResponse(status_code=500, content=body, headers=headers)

    return app


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    return [
        {"loc": list(err.get("loc", ())), "msg": str(err.get("msg", "")), "type": str(err.get("type", ""))}
        for err in exc.errors()
    ]


app = create_app()

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from call_tracker.api import export, health, records, stats
from call_tracker.core.config import Settings, get_settings
from call_tracker.errors import StorageError, ValidationError
from call_tracker.schemas import ErrorResponse
from call_tracker.services.record_store import RecordStore

logger = logging.getLogger(__name__)


def format_request_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts) or "Invalid request"


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title=settings.app_name)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    def on_startup() -> None:
        store = RecordStore.from_path(settings.db_path)
        store.init_schema()
        app.state.store = store

    @app.on_event("shutdown")
    def on_shutdown() -> None:
        store = getattr(app.state, "store", None)
        if store:
            store.close()

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content=ErrorResponse(error=exc.message).model_dump())

    @app.exception_handler(RequestValidationError)
    async def request_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        payload = ErrorResponse(error=format_request_errors(exc))
        return JSONResponse(status_code=400, content=payload.model_dump())

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
        return JSONResponse(status_code=500, content=ErrorResponse(error=exc.message).model_dump())

    app.include_router(health.router)
    app.include_router(records.router)
    app.include_router(stats.router)
    app.include_router(export.router)

    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        logger.info("Static directory %s not found; frontend not served", static_dir)

    return app


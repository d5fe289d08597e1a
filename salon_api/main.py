# salon_api/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings
from .context import AppContext
from .db import create_db_and_tables
from .routers import auth_routes, calendar_routes, products_routes, upload_routes, users_routes

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    # Reduce verbosity of third-party libraries
    logging.getLogger("botocore").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    content = {"success": False, "errors": exc.detail}
    message = getattr(exc, "message", None)
    if message:
        content["message"] = message
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = [f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in exc.errors()]
    logger.warning(f"Validation error for {request.url.path}: {errors}")
    return JSONResponse(status_code=400, content={"success": False, "errors": errors})


async def server_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"success": False, "errors": "Server error"})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    if settings is None:
        settings = Settings.from_env()
    configure_logging(settings.log_level)
    context = AppContext.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Application starting up...")
        create_db_and_tables(context.engine)
        yield
        context.engine.dispose()
        logger.info("Application shutting down...")

    app = FastAPI(title="Salon Shop & Booking API", lifespan=lifespan)
    app.state.context = context

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, server_error_handler)

    @app.get("/")
    def read_root():
        return {"success": True, "message": "Salon API is running"}

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    app.include_router(upload_routes.router)
    app.include_router(products_routes.router)
    app.include_router(auth_routes.router)
    app.include_router(users_routes.router)
    app.include_router(calendar_routes.router)

    return app


if __name__ == "__main__":
    import uvicorn

    settings = Settings.from_env()
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)

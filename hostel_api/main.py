from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from contextlib import asynccontextmanager
from typing import Optional
import logging
import time

from .core.config import Settings, get_settings
from .core.database import create_engine_for, create_session_factory, init_db
from .core.error_handlers import register_exception_handlers
from .core.logging import setup_logging
from .services.photo_storage import PhotoStorage, URL_PREFIX

from .routers import health, students, ledgers, attendance, monthly_accounts

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Hostel Admin API")
    await init_db(app.state.engine)

    yield

    logger.info("Shutting down Hostel Admin API")
    await app.state.engine.dispose()
    logger.info("Shutdown complete")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application with its engine, session factory and photo storage on app.state"""
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Hostel Admin API",
        description="Students, rent, extra food, attendance and EB accounting for hostels",
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.engine = create_engine_for(settings)
    app.state.session_factory = create_session_factory(app.state.engine)
    app.state.photo_storage = PhotoStorage(settings.upload_dir, settings.max_upload_bytes)

    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)
        logger.info(f"{request.method} {request.url.path} - {response.status_code} - {process_time:.3f}s")
        return response

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(students.router)
    app.include_router(ledgers.router)
    app.include_router(attendance.router)
    app.include_router(monthly_accounts.router)

    if settings.serve_uploads:
        app.state.photo_storage.ensure_dir()
        app.mount(f"/{URL_PREFIX}", StaticFiles(directory=settings.upload_dir), name="uploads")

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("hostel_api.main:create_app", factory=True, host="0.0.0.0", port=8000)

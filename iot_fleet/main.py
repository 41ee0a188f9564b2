# iot_fleet/main.py
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from iot_fleet.database import Settings, create_db_engine, create_session_factory
from iot_fleet.exceptions import FleetError
from iot_fleet.init_db import init_database

# Routers
from iot_fleet.routers import (
    health_router, users_router, zones_router,
    devices_router, sensors_router, readings_router,
)

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    package_logger = logging.getLogger("iot_fleet")
    package_logger.setLevel(level.upper())
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
        package_logger.addHandler(handler)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(FleetError)
    async def fleet_error_handler(request: Request, exc: FleetError):
        logger.warning(f"{request.method} {request.url.path} -> {exc.http_status} {exc.code}: {exc}")
        return JSONResponse(
            status_code=exc.http_status,
            content={"error": exc.code, "detail": str(exc)},
        )

    @app.exception_handler(RequestValidationError)
    async def payload_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"error": "INVALID_PAYLOAD", "detail": jsonable_encoder(exc.errors())},
        )

    # unique indexes catch what a concurrent request slipped past the checks;
    # any other constraint failure keeps a generic code
    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError):
        logger.warning(f"{request.method} {request.url.path} -> integrity error: {exc.orig}")
        if "unique" in str(exc.orig).lower():
            content = {"error": "DUPLICATE_VALUE", "detail": "A unique value is already in use"}
        else:
            content = {"error": "CONSTRAINT_VIOLATION", "detail": "The write violates a database constraint"}
        return JSONResponse(status_code=400, content=content)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content={"error": "INTERNAL_ERROR", "detail": "Internal server error"},
        )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="IoT Fleet API",
        description="Users, zones, devices, sensors and readings with referential checks",
        version="1.0.0",
    )

    # Store handle: opened here, disposed on shutdown
    engine = create_db_engine(settings.database_url, echo=settings.debug)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Mount router
    app.include_router(health_router)     # /healthz, /api/v1/health
    app.include_router(users_router)      # /api/v1/users/...
    app.include_router(zones_router)      # /api/v1/zones/...
    app.include_router(devices_router)    # /api/v1/devices/...
    app.include_router(sensors_router)    # /api/v1/sensors/...
    app.include_router(readings_router)   # /api/v1/readings/...

    @app.on_event("startup")
    def _startup():
        logger.info(f"Starting IoT Fleet API on {engine.url.render_as_string(hide_password=True)}")
        init_database(engine, app.state.session_factory, settings)

    @app.on_event("shutdown")
    def _shutdown():
        logger.info("Closing database connections")
        engine.dispose()

    return app


app = create_app()

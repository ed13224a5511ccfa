import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel

from src.depends import (
    build_encryption_codec,
    build_engine,
    build_key_value_store,
    build_session_factory,
)
from .error import ClientError, ServerError

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    client_name = getattr(request.state, "client_name", None) or "-"
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} "
        f"({elapsed_ms:.1f} ms, client={client_name})"
    )
    return response


def create_app(config) -> FastAPI:
    """
    Build the application around one configuration object.

    Everything long-lived (DB engine, key-value store, codec) is built here
    from config and kept on app.state; request dependencies read it from there.
    """
    # Registers the table models on SQLModel.metadata
    import src.domain.entities  # noqa: F401

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if config.AUTO_CREATE_TABLES:
            async with app.state.engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
        yield
        await app.state.key_value_store.close()
        await app.state.engine.dispose()

    app = FastAPI(title="Session Gateway", version="0.1.0", lifespan=lifespan)

    app.state.config = config
    app.state.engine = build_engine(config)
    app.state.session_factory = build_session_factory(app.state.engine)
    app.state.key_value_store = build_key_value_store(config)
    app.state.encryption_codec = build_encryption_codec(config)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=config.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if config.ENABLE_LOGGING_MIDDLEWARE:
        app.middleware("http")(log_requests)

    from src.api.routes import admin, auth, health_check

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, prefix=config.API_PREFIX, tags=["Authentication"])
    app.include_router(admin.router, prefix=config.API_PREFIX, tags=["Admin"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)

    return app

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fintrackr import __version__
from fintrackr.core.config import get_settings
from fintrackr.core.container import get_container
from fintrackr.infrastructure.database.session import init_db
from fintrackr.interfaces.http import create_api_router
from fintrackr.modules.common import BackendError
from fintrackr.schemas import HealthResponse

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = get_container()
    await init_db()
    logger.info("%s %s started (%s)", settings.project_name, __version__, settings.environment)
    yield
    await container.shutdown()


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.project_name,
        description="Personal finance tracker: wallets, transfers, income, expenses and loans",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(create_api_router(settings.api_prefix))

    @app.exception_handler(BackendError)
    async def backend_error_handler(request: Request, exc: BackendError) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content={"detail": str(exc)})

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__)

    return app


app = create_app()

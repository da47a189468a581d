import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware

from automobile import __version__
from automobile.config import LOG_FORMAT, Settings
from automobile.database import create_database
from automobile.dependencies import verify_api_key
from automobile.repositories import Repositories
from automobile.routers.records import router as records_router
from automobile.routers.vehicles import router as vehicles_router
from automobile.services.reports import ReportsService
from automobile.utils.exceptions import register_exception_handlers
from automobile.utils.response import success_response

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    database = create_database(settings)
    repositories = Repositories.from_database(database)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
        if database.is_sqlite:
            Path(settings.data_dir).mkdir(parents=True, exist_ok=True)
        await database.create_tables()
        logger.info("Automobile API %s started", __version__)
        yield
        await database.dispose()

    app = FastAPI(
        title="Automobile API",
        description="Vehicle ownership tracker: vehicles, maintenance, recharges, accidents, insurance and trips",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.database = database
    app.state.repositories = repositories
    app.state.reports = ReportsService(
        displacements=repositories.displacements,
        recharges=repositories.recharges,
        maintenance=repositories.maintenance,
        insurance=repositories.insurance,
        accidents=repositories.accidents,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    _api_key_dep = [Depends(verify_api_key)]

    app.include_router(vehicles_router, prefix="/api/v1", dependencies=_api_key_dep)
    app.include_router(records_router, prefix="/api/v1", dependencies=_api_key_dep)

    @app.get("/health")
    async def health_check():
        return success_response(data={"service": "automobile-api", "version": __version__})

    return app


app = create_app()

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import Settings
from app.core.errors import register_error_handlers
from app.db.store import ScoreStore
from app.scripts.seed_data import initialize_data

# Importar las rutas (los routers)
from app.api.auth import router as auth_router
from app.api.teams import router as teams_router
from app.api.categories import router as categories_router
from app.api.events import router as events_router
from app.api.standings import router as standings_router
from app.api.results import router as results_router

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, store: ScoreStore | None = None) -> FastAPI:
    settings = settings or Settings()
    # Solo cerramos el store si lo hemos creado aquí; uno inyectado es del que llama
    owns_store = store is None
    store = store or ScoreStore()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.seed_on_startup:
            initialize_data(store, settings)
        logger.info(f"Scoreboard ready (medal policy: {settings.medal_policy.value})")
        yield
        if owns_store:
            store.close()

    app = FastAPI(
        title="Festival Scoreboard",
        version="1.0.0",
        lifespan=lifespan
    )

    # El store va en app.state: nada de singletons a nivel de módulo
    app.state.settings = settings
    app.state.store = store

    register_error_handlers(app)

    # Conectamos las piezas (routers)
    app.include_router(auth_router)
    app.include_router(teams_router)
    app.include_router(categories_router)
    app.include_router(events_router)
    app.include_router(standings_router)
    app.include_router(results_router)

    # Permiso para que el frontend hable con la API
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    def read_root():
        return {"message": "Festival Scoreboard API funcionando 🏅"}

    return app


def configure_logging(level: str = "INFO"):
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()]
    )

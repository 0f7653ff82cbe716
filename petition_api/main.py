"""Punto de entrada de la aplicación FastAPI."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import make_url

from petition_api.api import router as api_router
from petition_api.core.config import Settings, settings as default_settings
from petition_api.core.database import build_engine, build_sessionmaker, init_db
from petition_api.core.errors import register_exception_handlers
from petition_api.models import *  # noqa: F401, F403 - Registra modelos en Base.metadata antes de init_db

logger = logging.getLogger(__name__)

OPENAPI_TAGS = [
    {"name": "academics", "description": "Académicos: alta, consulta, listado, edición y baja."},
    {"name": "petitions", "description": "Peticiones académicas."},
    {"name": "requests", "description": "Tipos de solicitud."},
    {"name": "subjects", "description": "Materias, con materia padre opcional."},
    {"name": "salud", "description": "Comprobación del estado del servicio."},
]


def create_app(settings: Settings | None = None) -> FastAPI:
    """Construye la app: engine, sesiones, rutas y manejadores de error."""
    settings = settings or default_settings
    logging.basicConfig(level=settings.log_level.upper())

    engine = build_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Gestiona el ciclo de vida: crea tablas al iniciar y cierra el pool al terminar."""
        await init_db(engine)
        logger.info(
            "Base de datos lista en '%s'",
            make_url(settings.database_url_async).render_as_string(hide_password=True),
        )
        try:
            yield
        finally:
            await engine.dispose()

    app = FastAPI(
        title=settings.app_name,
        description="API REST CRUD de académicos, peticiones, solicitudes y materias.",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.sessionmaker = build_sessionmaker(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    app.include_router(api_router)

    @app.get(
        "/health",
        tags=["salud"],
        summary="Estado del servicio",
        response_description="Indica que la API está en ejecución",
    )
    async def health_check():
        """Comprueba que el servicio está activo."""
        return {"status": "ok", "message": "Servicio en ejecución"}

    return app


app = create_app()

"""Conexión asíncrona a la base de datos con SQLAlchemy 2.0.

El engine y la fábrica de sesiones se crean en ``create_app`` y se guardan en
``app.state``; los controladores reciben la sesión por ``Depends(get_db)``.
"""
from fastapi import Request
from sqlalchemy import BigInteger, Integer, event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from petition_api.core.config import Settings

# BIGINT en PostgreSQL; en SQLite solo INTEGER PRIMARY KEY es autoincremental
IdType = BigInteger().with_variant(Integer, "sqlite")


class Base(DeclarativeBase):
    """Base para todos los modelos SQLAlchemy."""

    pass


def _sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite no aplica las FK (ni ON DELETE SET NULL) salvo que se active por conexión
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(settings: Settings) -> AsyncEngine:
    """Crea el engine asíncrono a partir de la configuración."""
    url = settings.database_url_async
    if make_url(url).get_backend_name() == "sqlite":
        engine = create_async_engine(url, echo=settings.debug, poolclass=NullPool)
        event.listen(engine.sync_engine, "connect", _sqlite_foreign_keys)
        return engine
    return create_async_engine(
        url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=10,
    )


def build_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def get_db(request: Request):
    """Dependencia para obtener una sesión de base de datos por request."""
    async with request.app.state.sessionmaker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db(engine: AsyncEngine) -> None:
    """Inicializa la base de datos (crear tablas si no existen)."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

"""Modelo Academic."""
from sqlalchemy import Identity, Text
from sqlalchemy.orm import Mapped, mapped_column

from petition_api.core.database import Base, IdType


class Academic(Base):
    """Académico (docente o autoridad académica) al que se dirige una petición."""

    __tablename__ = "academics"
    # En SQLite, AUTOINCREMENT evita reutilizar ids de filas borradas
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(IdType, Identity(always=True), primary_key=True)
    academic_name: Mapped[str] = mapped_column(Text, nullable=False, unique=True)

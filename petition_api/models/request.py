"""Modelo Request."""
from sqlalchemy import Identity, Text
from sqlalchemy.orm import Mapped, mapped_column

from petition_api.core.database import Base, IdType


class Request(Base):
    """Tipo de solicitud académica (ej. retiro de materia, cambio de paralelo)."""

    __tablename__ = "requests"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(IdType, Identity(always=True), primary_key=True)
    request_name: Mapped[str] = mapped_column(Text, nullable=False, unique=True)

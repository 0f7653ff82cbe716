"""Modelo Petition."""
from sqlalchemy import Identity, Text
from sqlalchemy.orm import Mapped, mapped_column

from petition_api.core.database import Base, IdType


class Petition(Base):
    """Petición académica registrada por un estudiante."""

    __tablename__ = "petitions"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(IdType, Identity(always=True), primary_key=True)
    petition_name: Mapped[str] = mapped_column(Text, nullable=False, unique=True)

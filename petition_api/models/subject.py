"""Modelo Subject (materia, con materia padre opcional)."""
from sqlalchemy import ForeignKey, Identity, Text
from sqlalchemy.orm import Mapped, mapped_column

from petition_api.core.database import Base, IdType


class Subject(Base):
    """Materia: ej. Calculo I; puede colgar de otra materia (``subject_id``)."""

    __tablename__ = "subjects"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(IdType, Identity(always=True), primary_key=True)
    subject_name: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    parent_id: Mapped[int | None] = mapped_column(
        "subject_id", IdType, ForeignKey("subjects.id", ondelete="SET NULL"), nullable=True
    )

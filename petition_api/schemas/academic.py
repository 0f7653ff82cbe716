"""Esquemas para académicos."""
from pydantic import BaseModel, ConfigDict, Field


class AcademicCreate(BaseModel):
    """Request para crear un académico."""

    model_config = ConfigDict(populate_by_name=True)

    academic_name: str = Field(alias="AcademicName", description="Nombre (ej. Math)")


class AcademicUpdate(BaseModel):
    """Request para actualizar; solo se modifican los campos enviados."""

    model_config = ConfigDict(populate_by_name=True)

    academic_name: str | None = Field(default=None, alias="AcademicName")


class AcademicItem(BaseModel):
    """Académico con su id."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    academic_name: str = Field(alias="AcademicName")

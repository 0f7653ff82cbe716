"""Esquemas para peticiones."""
from pydantic import BaseModel, ConfigDict, Field


class PetitionCreate(BaseModel):
    """Request para crear una petición."""

    model_config = ConfigDict(populate_by_name=True)

    petition_name: str = Field(alias="PetitionName", description="Nombre (ej. Petición de examen de mesa)")


class PetitionUpdate(BaseModel):
    """Request para actualizar; solo se modifican los campos enviados."""

    model_config = ConfigDict(populate_by_name=True)

    petition_name: str | None = Field(default=None, alias="PetitionName")


class PetitionItem(BaseModel):
    """Petición persistida, con el id asignado por la base de datos."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    petition_name: str = Field(alias="PetitionName")

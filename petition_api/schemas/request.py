"""Esquemas para solicitudes."""
from pydantic import BaseModel, ConfigDict, Field


class RequestCreate(BaseModel):
    """Request para crear un tipo de solicitud."""

    model_config = ConfigDict(populate_by_name=True)

    request_name: str = Field(alias="RequestName", description="Nombre (ej. Retiro de materia)")


class RequestUpdate(BaseModel):
    """Request para actualizar una solicitud."""

    model_config = ConfigDict(populate_by_name=True)

    request_name: str | None = Field(default=None, alias="RequestName")


class RequestItem(BaseModel):
    """Fila de solicitudes."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    request_name: str = Field(alias="RequestName")

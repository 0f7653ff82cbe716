"""Respuestas comunes a todas las entidades."""
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Cuerpo de todas las respuestas de error (400, 404, 500)."""

    error: str = Field(description="Mensaje de error")


class DeleteResponse(BaseModel):
    """Confirmación de borrado: ``ok deleted <id>``."""

    result: str

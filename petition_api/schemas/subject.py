"""Esquemas para materias."""
from pydantic import BaseModel, ConfigDict, Field

# Rango de BIGINT: fuera de él el driver falla antes de llegar a la base de datos
ID_MIN = -(2**63)
ID_MAX = 2**63 - 1


class SubjectCreate(BaseModel):
    """Request para crear una materia, opcionalmente colgada de otra."""

    model_config = ConfigDict(populate_by_name=True)

    subject_name: str = Field(alias="SubjectName", description="Nombre de la materia (ej. Calculo I)")
    parent_id: int | None = Field(
        default=None,
        ge=ID_MIN,
        le=ID_MAX,
        alias="ParentSubjectID",
        description="ID de la materia padre; debe existir",
    )


class SubjectUpdate(BaseModel):
    """Request para actualizar; solo se modifican los campos enviados."""

    model_config = ConfigDict(populate_by_name=True)

    subject_name: str | None = Field(default=None, alias="SubjectName")
    parent_id: int | None = Field(default=None, ge=ID_MIN, le=ID_MAX, alias="ParentSubjectID")


class SubjectItem(BaseModel):
    """Materia con su id y el id de la materia padre (o null)."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    subject_name: str = Field(alias="SubjectName")
    parent_id: int | None = Field(default=None, ge=ID_MIN, le=ID_MAX, alias="ParentSubjectID")

"""Endpoints de materias (/subjects).

``ParentSubjectID`` debe apuntar a una materia existente; si no, la FK rechaza
el guardado (400 ``saving failed`` / ``update failed``). Al borrar una materia
sus hijas quedan sin padre.
"""
from petition_api.api.controller import EntityController
from petition_api.models import Subject
from petition_api.schemas.subject import SubjectCreate, SubjectItem, SubjectUpdate

controller = EntityController(
    model=Subject,
    create_schema=SubjectCreate,
    update_schema=SubjectUpdate,
    item_schema=SubjectItem,
    label="Subject",
)
router = controller.router

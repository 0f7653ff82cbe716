"""Endpoints de académicos (/academics)."""
from petition_api.api.controller import EntityController
from petition_api.models import Academic
from petition_api.schemas.academic import AcademicCreate, AcademicItem, AcademicUpdate

controller = EntityController(
    model=Academic,
    create_schema=AcademicCreate,
    update_schema=AcademicUpdate,
    item_schema=AcademicItem,
    label="Academic",
)
router = controller.router

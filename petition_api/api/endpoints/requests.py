"""Endpoints de tipos de solicitud (/requests)."""
from petition_api.api.controller import EntityController
from petition_api.models import Request
from petition_api.schemas.request import RequestCreate, RequestItem, RequestUpdate

controller = EntityController(
    model=Request,
    create_schema=RequestCreate,
    update_schema=RequestUpdate,
    item_schema=RequestItem,
    label="Request",
)
router = controller.router

"""Endpoints de peticiones (/petitions).

Mismo CRUD que el resto de entidades: el listado consulta la tabla
``petitions`` y el alta no hace búsquedas previas.
"""
from petition_api.api.controller import EntityController
from petition_api.models import Petition
from petition_api.schemas.petition import PetitionCreate, PetitionItem, PetitionUpdate

controller = EntityController(
    model=Petition,
    create_schema=PetitionCreate,
    update_schema=PetitionUpdate,
    item_schema=PetitionItem,
    label="Petition",
)
router = controller.router

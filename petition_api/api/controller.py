"""Controlador CRUD genérico.

Cada entidad (académicos, peticiones, solicitudes, materias) se expone con una
instancia de ``EntityController``, que registra cinco rutas bajo el prefijo en
plural de la entidad:

- ``POST   /{entidad}s``       crear
- ``GET    /{entidad}s/{id}``  obtener por id
- ``GET    /{entidad}s``       listar (``limit`` / ``offset``)
- ``PUT    /{entidad}s/{id}``  actualizar
- ``DELETE /{entidad}s/{id}``  eliminar

Cada handler hace una sola operación contra la base de datos.
"""
import logging
import re
from typing import Annotated, Any, Callable

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from pydantic import BaseModel, ValidationError
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from petition_api.core.database import Base, get_db
from petition_api.schemas.common import DeleteResponse, ErrorResponse

logger = logging.getLogger(__name__)

_DECIMAL_INT = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def parse_int(raw: str) -> int:
    """Parsea un entero decimal de 64 bits. Lanza ValueError con el motivo."""
    if not _DECIMAL_INT.fullmatch(raw):
        raise ValueError(f'parsing "{raw}": invalid syntax')
    value = int(raw)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f'parsing "{raw}": value out of range')
    return value


def page_param(raw: str | None, default: int) -> int:
    """Valor de ``limit``/``offset``: si falta o no es un entero >= 0 se usa el default."""
    if raw is None or raw == "":
        return default
    try:
        value = parse_int(raw)
    except ValueError:
        return default
    return value if value >= 0 else default


def path_id(entity_id: str) -> int:
    """Dependencia: id de la ruta como entero; 400 con el mensaje de parseo si no lo es."""
    try:
        return parse_int(entity_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


def bind_body(schema: type[BaseModel], label: str) -> Callable:
    """Dependencia que lee el body JSON y lo valida contra ``schema``."""

    async def _bind(request: Request) -> BaseModel:
        try:
            data = await request.json()
            return schema.model_validate(data)
        except (ValueError, ValidationError):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"{label} binding failed",
            )

    return _bind


def _json_body(schema: type[BaseModel]) -> dict[str, Any]:
    # El body se valida a mano en bind_body; esto solo lo documenta en /docs
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": schema.model_json_schema()}},
        }
    }


ERROR_400 = {400: {"model": ErrorResponse, "description": "Id, body o guardado inválido"}}
ERROR_404 = {404: {"model": ErrorResponse, "description": "No existe la entidad"}}


class EntityController:
    """Registra las rutas CRUD de una entidad en su propio ``APIRouter``.

    ``get_session`` es la dependencia que entrega la ``AsyncSession``; por
    defecto ``get_db``, que toma la fábrica de sesiones de ``app.state``.
    """

    def __init__(
        self,
        *,
        model: type[Base],
        create_schema: type[BaseModel],
        update_schema: type[BaseModel],
        item_schema: type[BaseModel],
        label: str,
        prefix: str | None = None,
        get_session: Callable = get_db,
    ):
        self.model = model
        self.create_schema = create_schema
        self.update_schema = update_schema
        self.item_schema = item_schema
        self.label = label
        self.name = label.lower()
        self.prefix = prefix or f"/{self.name}s"
        self.get_session = get_session
        self.router = APIRouter(prefix=self.prefix, tags=[self.prefix.strip("/")])
        self.register()

    def register(self) -> None:
        router = self.router
        router.add_api_route(
            "",
            self._list_handler(),
            methods=["GET"],
            response_model=list[self.item_schema],
            summary=f"Listar {self.name}s",
            responses=ERROR_400,
        )
        router.add_api_route(
            "",
            self._create_handler(),
            methods=["POST"],
            response_model=self.item_schema,
            summary=f"Crear {self.name}",
            responses=ERROR_400,
            openapi_extra=_json_body(self.create_schema),
        )
        router.add_api_route(
            "/{entity_id}",
            self._get_handler(),
            methods=["GET"],
            response_model=self.item_schema,
            summary=f"Obtener {self.name} por id",
            responses={**ERROR_400, **ERROR_404},
        )
        router.add_api_route(
            "/{entity_id}",
            self._update_handler(),
            methods=["PUT"],
            response_model=self.item_schema,
            summary=f"Actualizar {self.name} por id",
            responses=ERROR_400,
            openapi_extra=_json_body(self.update_schema),
        )
        router.add_api_route(
            "/{entity_id}",
            self._delete_handler(),
            methods=["DELETE"],
            response_model=DeleteResponse,
            summary=f"Eliminar {self.name} por id",
            responses={**ERROR_400, **ERROR_404},
        )

    def _create_handler(self) -> Callable:
        model = self.model
        label = self.label

        async def create(
            payload: BaseModel = Depends(bind_body(self.create_schema, label)),
            db: AsyncSession = Depends(self.get_session),
        ):
            obj = model(**payload.model_dump())
            db.add(obj)
            try:
                await db.commit()
            except SQLAlchemyError as exc:
                await db.rollback()
                logger.warning("No se pudo crear %s: %s", label, exc)
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="saving failed")
            return obj

        return create

    def _get_handler(self) -> Callable:
        model = self.model
        name = self.name

        async def get(
            obj_id: int = Depends(path_id),
            db: AsyncSession = Depends(self.get_session),
        ):
            obj = await db.get(model, obj_id)
            if obj is None:
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{name} not found")
            return obj

        return get

    def _list_handler(self) -> Callable:
        model = self.model

        async def list_(
            request: Request,
            limit: Annotated[str | None, Query(description="Máximo de filas (por defecto 10)")] = None,
            offset: Annotated[str | None, Query(description="Filas a saltar (por defecto 0)")] = None,
            db: AsyncSession = Depends(self.get_session),
        ):
            settings = request.app.state.settings
            q = (
                select(model)
                .order_by(model.id)
                .limit(page_param(limit, settings.default_page_limit))
                .offset(page_param(offset, settings.default_page_offset))
            )
            try:
                result = await db.execute(q)
            except SQLAlchemyError as exc:
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
            return result.scalars().all()

        return list_

    def _update_handler(self) -> Callable:
        model = self.model
        label = self.label

        async def update(
            obj_id: int = Depends(path_id),
            payload: BaseModel = Depends(bind_body(self.update_schema, label)),
            db: AsyncSession = Depends(self.get_session),
        ):
            # El id de la ruta manda; un "id" en el body se ignora
            campos = payload.model_dump(exclude_unset=True)
            logger.debug("Actualizando %s id=%s campos=%s", label, obj_id, sorted(campos))
            try:
                obj = await db.get(model, obj_id)
                if obj is None:
                    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="update failed")
                for campo, valor in campos.items():
                    setattr(obj, campo, valor)
                await db.commit()
            except SQLAlchemyError as exc:
                await db.rollback()
                logger.warning("No se pudo actualizar %s id=%s: %s", label, obj_id, exc)
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="update failed")
            return obj

        return update

    def _delete_handler(self) -> Callable:
        model = self.model
        name = self.name

        async def delete_(
            obj_id: int = Depends(path_id),
            db: AsyncSession = Depends(self.get_session),
        ):
            result = await db.execute(delete(model).where(model.id == obj_id))
            if result.rowcount == 0:
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{name} not found")
            await db.commit()
            return DeleteResponse(result=f"ok deleted {obj_id}")

        return delete_

"""Modelos SQLAlchemy (tablas de la base de datos)."""
from petition_api.models.academic import Academic
from petition_api.models.petition import Petition
from petition_api.models.request import Request
from petition_api.models.subject import Subject

__all__ = [
    "Academic",
    "Petition",
    "Request",
    "Subject",
]

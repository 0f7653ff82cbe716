"""Routers de la API."""
from fastapi import APIRouter

from petition_api.api.endpoints import academics, petitions, requests, subjects

router = APIRouter()
router.include_router(academics.router)
router.include_router(petitions.router)
router.include_router(requests.router)
router.include_router(subjects.router)

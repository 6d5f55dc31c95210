"""
Landing endpoint: which organisms can be browsed.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from chado.dependencies import get_backend
from chado.repository import ChadoBackend
from core import settings

from . import service

router = APIRouter()


@router.get("/")
async def root(backend: ChadoBackend = Depends(get_backend)) -> dict:
    return await service.landing(backend, service_address=settings.service_address())

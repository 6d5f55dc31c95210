"""
Track configuration endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from chado.dependencies import get_backend
from chado.repository import ChadoBackend
from core import settings

from . import service

router = APIRouter()


@router.get("/link/{organism}/trackList.json")
async def track_list(
    organism: str,
    backend: ChadoBackend = Depends(get_backend),
) -> dict:
    catalog = await service.build_track_catalog(
        backend,
        organism,
        service_address=settings.service_address(),
    )
    return catalog.model_dump(by_alias=True)


@router.get("/link/{organism}/tracks.conf")
async def tracks_conf(organism: str) -> Response:
    return Response(status_code=200)

"""
Feature and sequence range endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from chado.dependencies import get_backend
from chado.repository import ChadoBackend

from . import service
from .coordinates import is_sequence_request, parse_coordinate

router = APIRouter()


@router.get("/link/{organism}/features/{refseq}")
async def features(
    organism: str,
    refseq: str,
    start: str = "",
    end: str = "",
    sequence: str = "",
    so_type: str = Query(default="", alias="soType"),
    backend: ChadoBackend = Depends(get_backend),
) -> dict:
    container = await service.resolve_range(
        backend,
        organism,
        refseq,
        parse_coordinate(start),
        parse_coordinate(end),
        sequence=is_sequence_request(sequence),
        so_type=so_type,
    )
    return container.model_dump(by_alias=True)


@router.get("/link/{organism}/stats/global")
async def stats_global(organism: str) -> dict:
    return {"featureDensity": 0.01}

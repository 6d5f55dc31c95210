"""
Reference-sequence API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from chado.dependencies import get_backend
from chado.repository import ChadoBackend

from . import service

router = APIRouter()


@router.get("/link/{organism}/refSeqs.json")
async def ref_seqs(
    organism: str,
    backend: ChadoBackend = Depends(get_backend),
) -> list[dict]:
    seqs = await service.list_reference_sequences(backend, organism)
    return [s.model_dump(by_alias=True) for s in seqs]

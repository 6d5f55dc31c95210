"""
Range query dispatch.

Flow:
1) Validate the requested [start, end)
2) Sequence mode: read `end - start` bases from `start`, report the requested span
3) Feature mode: read overlapping features, attach empty `subfeatures`
"""

from __future__ import annotations

from chado.repository import ChadoBackend
from core.errors import guarded

from .coordinates import validate_range
from .schemas import Feature, FeatureContainer, SequenceContainer


async def fetch_sequence_slices(
    backend: ChadoBackend,
    organism: str,
    refseq: str,
    start: int,
    end: int,
) -> SequenceContainer:
    slices = await guarded(
        "sequence",
        lambda: backend.fetch_sequence(organism, refseq, start, end - start),
        organism=organism,
        refseq=refseq,
        start=start,
        end=end,
    )
    # Clients keep displaying the requested coordinates, even when fewer
    # bases come back near the end of a sequence.
    return SequenceContainer(
        features=[s.model_copy(update={"start": start, "end": end}) for s in slices],
    )


async def fetch_features(
    backend: ChadoBackend,
    organism: str,
    refseq: str,
    start: int,
    end: int,
    *,
    so_type: str = "",
) -> FeatureContainer:
    rows = await guarded(
        "features",
        lambda: backend.fetch_features(organism, refseq, so_type, start, end),
        organism=organism,
        refseq=refseq,
        so_type=so_type,
        start=start,
        end=end,
    )
    return FeatureContainer(
        features=[Feature(**row.model_dump(), subfeatures=[]) for row in rows],
    )


async def resolve_range(
    backend: ChadoBackend,
    organism: str,
    refseq: str,
    start: int,
    end: int,
    *,
    sequence: bool = False,
    so_type: str = "",
) -> SequenceContainer | FeatureContainer:
    start, end = validate_range(start, end)
    if sequence:
        return await fetch_sequence_slices(backend, organism, refseq, start, end)
    return await fetch_features(backend, organism, refseq, start, end, so_type=so_type)

"""
Reference-sequence catalog.
"""

from __future__ import annotations

from chado.repository import ChadoBackend
from core.errors import guarded

from .schemas import ReferenceSequence

# Rendering chunk hint for clients; fixed, not derived from the data.
SEQ_CHUNK_SIZE = 20000


async def list_reference_sequences(backend: ChadoBackend, organism: str) -> list[ReferenceSequence]:
    """
    Every reference sequence of `organism`, spanning [0, length).

    Returns [] when the backend fails so the endpoint always serves valid JSON.
    """
    rows = await guarded("ref_seqs", lambda: backend.list_ref_seqs(organism), organism=organism)
    return [
        ReferenceSequence(
            name=row.name,
            start=0,
            end=row.length,
            length=row.length,
            seq_chunk_size=SEQ_CHUNK_SIZE,
        )
        for row in rows
    ]

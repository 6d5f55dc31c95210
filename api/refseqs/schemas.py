"""
Reference-sequence listing entries, as read by JBrowse `refSeqs.json`.
"""

from __future__ import annotations

from chado.schemas import ChadoModel


class ReferenceSequence(ChadoModel):
    name: str
    start: int = 0
    end: int
    length: int
    seq_chunk_size: int

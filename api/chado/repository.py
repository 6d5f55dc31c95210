"""
Chado SQL (raw).

The four reads this service needs, behind the `ChadoBackend` port:
- organisms
- distinct feature types (SO terms) per organism
- reference sequences per organism
- sequence slices and located features within a range

Organisms are addressed by `organism.common_name`, reference sequences by
`feature.name`. Coordinates are Chado interbase (0-based, half-open), the
same convention JBrowse uses, so no conversion is needed.
"""

from __future__ import annotations

from typing import Protocol

import asyncpg

from core import db

from .schemas import FeatureRow, Organism, RefSeqRow, SequenceSlice, SoType


class ChadoBackend(Protocol):
    """
    Read-only port over the annotation store.

    Implementations must be safe for concurrent use by multiple requests.
    """

    async def list_organisms(self) -> list[Organism]: ...

    async def list_so_types(self, organism: str) -> list[SoType]: ...

    async def list_ref_seqs(self, organism: str) -> list[RefSeqRow]: ...

    async def fetch_sequence(self, organism: str, refseq: str, start: int, length: int) -> list[SequenceSlice]: ...

    async def fetch_features(
        self,
        organism: str,
        refseq: str,
        so_type: str,
        start: int,
        end: int,
    ) -> list[FeatureRow]: ...


class ChadoRepository:
    """
    `ChadoBackend` over an asyncpg pool.
    """

    def __init__(self, pool: asyncpg.Pool) -> None:
        self._pool = pool

    async def list_organisms(self) -> list[Organism]:
        rows = await db.fetch_all(
            self._pool,
            "organisms",
            """
            SELECT organism_id, common_name, genus, species
            FROM organism
            WHERE common_name IS NOT NULL
            ORDER BY common_name ASC
            """,
        )
        return [Organism(**row) for row in rows if row["common_name"] is not None]

    async def list_so_types(self, organism: str) -> list[SoType]:
        rows = await db.fetch_all(
            self._pool,
            "so_types",
            """
            SELECT DISTINCT cvterm.name AS type
            FROM feature
            JOIN organism ON organism.organism_id = feature.organism_id
            JOIN cvterm ON cvterm.cvterm_id = feature.type_id
            WHERE organism.common_name = $1
            ORDER BY cvterm.name ASC
            """,
            organism,
        )
        return [SoType(**row) for row in rows]

    async def list_ref_seqs(self, organism: str) -> list[RefSeqRow]:
        # A reference sequence is named, carries residues and is not itself located on another feature.
        rows = await db.fetch_all(
            self._pool,
            "ref_seqs",
            """
            SELECT
              feature.name,
              COALESCE(feature.seqlen, length(feature.residues)) AS length
            FROM feature
            JOIN organism ON organism.organism_id = feature.organism_id
            WHERE organism.common_name = $1
              AND feature.name IS NOT NULL
              AND feature.residues IS NOT NULL
              AND NOT EXISTS (
                SELECT 1 FROM featureloc WHERE featureloc.feature_id = feature.feature_id
              )
            ORDER BY feature.name ASC
            """,
            organism,
        )
        return [RefSeqRow(**row) for row in rows if row["name"] is not None]

    async def fetch_sequence(self, organism: str, refseq: str, start: int, length: int) -> list[SequenceSlice]:
        """
        Substring of the reference residues, `length` bases from 0-based `start`.

        The returned `start`/`end` describe what was actually read.
        """
        rows = await db.fetch_all(
            self._pool,
            "sequence",
            """
            WITH slice AS (
              SELECT substring(feature.residues FROM $3::int + 1 FOR $4::int) AS seq
              FROM feature
              JOIN organism ON organism.organism_id = feature.organism_id
              WHERE organism.common_name = $1
                AND feature.name = $2
                AND feature.residues IS NOT NULL
            )
            SELECT seq, $3::int AS start, $3::int + length(seq) AS "end"
            FROM slice
            """,
            organism,
            refseq,
            start,
            length,
        )
        return [SequenceSlice(**row) for row in rows]

    async def fetch_features(
        self,
        organism: str,
        refseq: str,
        so_type: str,
        start: int,
        end: int,
    ) -> list[FeatureRow]:
        """
        Features on `refseq` overlapping [start, end). An empty `so_type` means no filter.
        """
        rows = await db.fetch_all(
            self._pool,
            "features",
            """
            SELECT
              featureloc.fmin AS start,
              featureloc.fmax AS "end",
              featureloc.strand,
              cvterm.name AS type,
              feature.name,
              feature.uniquename AS unique_id
            FROM feature
            JOIN organism ON organism.organism_id = feature.organism_id
            JOIN cvterm ON cvterm.cvterm_id = feature.type_id
            JOIN featureloc ON featureloc.feature_id = feature.feature_id
            JOIN feature src ON src.feature_id = featureloc.srcfeature_id
            WHERE organism.common_name = $1
              AND src.name = $2
              AND ($3 = '' OR cvterm.name = $3)
              AND featureloc.fmax > $4
              AND featureloc.fmin < $5
            ORDER BY featureloc.fmin ASC, featureloc.fmax ASC, feature.uniquename ASC
            """,
            organism,
            refseq,
            so_type,
            start,
            end,
        )
        return [FeatureRow(**row) for row in rows]

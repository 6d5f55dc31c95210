"""
Pool helpers and backend error wrapping.
"""

from unittest.mock import AsyncMock, MagicMock

import asyncpg
import pytest

from chado.repository import ChadoRepository
from core import db
from core.errors import BackendUnavailable
from organisms.service import landing
from refseqs.service import list_reference_sequences


class TestDatabaseUrl:

    def test_sslmode_is_stripped(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@h:5432/chado?sslmode=require&application_name=jb")
        assert db.database_url() == "postgresql://u:p@h:5432/chado?application_name=jb"

    def test_missing_url_is_an_error(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        with pytest.raises(RuntimeError):
            db.database_url()


class TestFetchAll:

    @pytest.mark.asyncio
    async def test_rows_become_dicts(self):
        pool = MagicMock()
        pool.fetch = AsyncMock(return_value=[{"type": "gene"}, {"type": "exon"}])
        rows = await db.fetch_all(pool, "so_types", "SELECT 1", "Oryza")
        assert rows == [{"type": "gene"}, {"type": "exon"}]
        pool.fetch.assert_awaited_once_with("SELECT 1", "Oryza")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [asyncpg.PostgresError("boom"), ConnectionRefusedError(), TimeoutError()],
    )
    async def test_driver_failures_become_backend_unavailable(self, error):
        pool = MagicMock()
        pool.fetch = AsyncMock(side_effect=error)
        with pytest.raises(BackendUnavailable) as exc_info:
            await db.fetch_all(pool, "features", "SELECT 1")
        assert exc_info.value.operation == "features"


class TestChadoRepository:

    @pytest.mark.asyncio
    async def test_feature_rows_are_typed(self):
        pool = MagicMock()
        pool.fetch = AsyncMock(
            return_value=[
                {"start": 5, "end": 50, "strand": -1, "type": "gene", "name": "g", "unique_id": "g.u"},
            ]
        )
        rows = await ChadoRepository(pool).fetch_features("Oryza", "chr1", "", 0, 100)
        assert rows[0].unique_id == "g.u"
        assert pool.fetch.await_args.args[1:] == ("Oryza", "chr1", "", 0, 100)

    @pytest.mark.asyncio
    async def test_sequence_query_receives_length(self):
        pool = MagicMock()
        pool.fetch = AsyncMock(return_value=[{"seq": "ACGT", "start": 10, "end": 14}])
        rows = await ChadoRepository(pool).fetch_sequence("Oryza", "chr1", 10, 4)
        assert rows[0].seq == "ACGT"
        assert pool.fetch.await_args.args[1:] == ("Oryza", "chr1", 10, 4)

    @pytest.mark.asyncio
    async def test_unnamed_reference_sequences_are_skipped(self):
        pool = MagicMock()
        pool.fetch = AsyncMock(return_value=[{"name": None, "length": 100}, {"name": "chr1", "length": 500}])
        seqs = await list_reference_sequences(ChadoRepository(pool), "Oryza")
        assert [(s.name, s.end) for s in seqs] == [("chr1", 500)]
        assert "feature.name IS NOT NULL" in pool.fetch.await_args.args[0]

    @pytest.mark.asyncio
    async def test_organisms_without_common_name_are_skipped(self):
        pool = MagicMock()
        pool.fetch = AsyncMock(
            return_value=[
                {"organism_id": 1, "common_name": None, "genus": "Oryza", "species": "sativa"},
                {"organism_id": 2, "common_name": "yeast", "genus": "Saccharomyces", "species": "cerevisiae"},
            ]
        )
        body = await landing(ChadoRepository(pool), service_address="http://jb.test")
        assert body["organisms"] == ["yeast"]
        assert "common_name IS NOT NULL" in pool.fetch.await_args.args[0]

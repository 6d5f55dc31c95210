"""
Shared fixtures: a fake Chado backend and an HTTP client wired to it.

No database is needed; routes get the fake through `app.dependency_overrides`.
"""

import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ["SERVICE_ADDRESS"] = "http://jb.test"

from chado.schemas import FeatureRow, Organism, RefSeqRow, SequenceSlice, SoType  # noqa: E402
from core.errors import BackendUnavailable  # noqa: E402

RESIDUES = "ACGT" * 125  # 500 bases


class FakeBackend:
    """
    In-memory `ChadoBackend` with canned rows.

    Operations listed in `failing` raise BackendUnavailable.
    """

    def __init__(self, failing=()):
        self.failing = set(failing)
        self.calls = []
        self.organisms = [
            Organism(organism_id=1, common_name="Oryza", genus="Oryza", species="sativa"),
            Organism(organism_id=2, common_name="yeast", genus="Saccharomyces", species="cerevisiae"),
        ]
        self.so_types = {"Oryza": [SoType(type="gene"), SoType(type="exon")]}
        self.ref_seqs = {"Oryza": [RefSeqRow(name="chr1", length=500), RefSeqRow(name="chr2", length=1200)]}
        self.features = [
            FeatureRow(start=10, end=200, strand=1, type="gene", name="g1", unique_id="g1.u"),
            FeatureRow(start=20, end=80, strand=1, type="exon", name="e1", unique_id="e1.u"),
            FeatureRow(start=300, end=450, strand=-1, type="gene", name="g2", unique_id="g2.u"),
        ]

    def _check(self, operation, *args):
        self.calls.append((operation, *args))
        if operation in self.failing:
            raise BackendUnavailable(operation)

    async def list_organisms(self):
        self._check("organisms")
        return list(self.organisms)

    async def list_so_types(self, organism):
        self._check("so_types", organism)
        return list(self.so_types.get(organism, []))

    async def list_ref_seqs(self, organism):
        self._check("ref_seqs", organism)
        return list(self.ref_seqs.get(organism, []))

    async def fetch_sequence(self, organism, refseq, start, length):
        self._check("sequence", organism, refseq, start, length)
        if organism != "Oryza" or refseq != "chr1":
            return []
        seq = RESIDUES[max(start, 0):max(start, 0) + length]
        return [SequenceSlice(seq=seq, start=start, end=start + len(seq))]

    async def fetch_features(self, organism, refseq, so_type, start, end):
        self._check("features", organism, refseq, so_type, start, end)
        if organism != "Oryza" or refseq != "chr1":
            return []
        return [
            f for f in self.features
            if f.end > start and f.start < end and (so_type == "" or f.type == so_type)
        ]


@pytest.fixture
def fake_backend():
    return FakeBackend()


@pytest.fixture
def failing_backend():
    return FakeBackend(failing={"organisms", "so_types", "ref_seqs", "features", "sequence"})


def _client_for(backend):
    from chado.dependencies import get_backend
    from main import app

    app.dependency_overrides[get_backend] = lambda: backend
    transport = ASGITransport(app=app)
    return app, AsyncClient(transport=transport, base_url="http://test")


@pytest_asyncio.fixture
async def test_client(fake_backend):
    app, client = _client_for(fake_backend)
    async with client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def failing_client(failing_backend):
    app, client = _client_for(failing_backend)
    async with client:
        yield client
    app.dependency_overrides.clear()

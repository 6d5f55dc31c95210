"""
Track catalog assembly.

The catalog is built in two steps, with no per-feature reads:
1) fetch the distinct feature types of the organism
2) map them to descriptors, after one fixed reference-sequence track

Track order follows the backend order (feature types sorted by name).
"""

from __future__ import annotations

from chado.repository import ChadoBackend
from chado.schemas import SoType
from core.errors import guarded

from .schemas import FeatureTypeTrack, NamesEndpoint, SequenceTrack, TrackCatalog

FEATURE_TRACK_CATEGORY = "Generic SO Type Tracks"


def organism_url(service_address: str, organism: str) -> str:
    return f"{service_address}/link/{organism}/"


def sequence_track(service_address: str, organism: str) -> SequenceTrack:
    return SequenceTrack(base_url=organism_url(service_address, organism))


def feature_type_track(organism: str, so_type: SoType) -> FeatureTypeTrack:
    return FeatureTypeTrack(
        category=FEATURE_TRACK_CATEGORY,
        label=f"{organism}_{so_type.type}",
        key=so_type.type,
        query={"soType": so_type.type},
    )


def compose_catalog(service_address: str, organism: str, so_types: list[SoType]) -> TrackCatalog:
    tracks: list[SequenceTrack | FeatureTypeTrack] = [sequence_track(service_address, organism)]
    tracks.extend(feature_type_track(organism, t) for t in so_types)
    return TrackCatalog(
        ref_seqs=f"{organism_url(service_address, organism)}refSeqs.json",
        # No handler serves this yet; JBrowse only queries it on name search.
        names=NamesEndpoint(url=f"{service_address}/link/names"),
        tracks=tracks,
    )


async def build_track_catalog(
    backend: ChadoBackend,
    organism: str,
    *,
    service_address: str,
) -> TrackCatalog:
    so_types = await guarded("so_types", lambda: backend.list_so_types(organism), organism=organism)
    return compose_catalog(service_address, organism, so_types)

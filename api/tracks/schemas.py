"""
JBrowse trackList.json descriptors.
"""

from __future__ import annotations

from pydantic import Field

from chado.schemas import ChadoModel

REST_STORE_CLASS = "JBrowse/Store/SeqFeature/REST"
SEQUENCE_TRACK_TYPE = "JBrowse/View/Track/Sequence"
FEATURE_TRACK_TYPE = "JBrowse/View/Track/HTMLFeatures"


class SequenceTrack(ChadoModel):
    use_as_ref_seq_store: bool = True
    label: str = "ref_seq"
    key: str = "REST Reference Sequence"
    type: str = SEQUENCE_TRACK_TYPE
    store_class: str = REST_STORE_CLASS
    base_url: str
    query: dict[str, str] = Field(default_factory=lambda: {"sequence": "true"})


class FeatureTypeTrack(ChadoModel):
    category: str
    label: str
    key: str
    query: dict[str, str]
    region_feature_densities: bool = True
    type: str = FEATURE_TRACK_TYPE
    track_type: str = FEATURE_TRACK_TYPE
    store_class: str = REST_STORE_CLASS


class NamesEndpoint(ChadoModel):
    type: str = "REST"
    url: str


class TrackCatalog(ChadoModel):
    ref_seqs: str
    names: NamesEndpoint
    tracks: list[SequenceTrack | FeatureTypeTrack]

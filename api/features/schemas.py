"""
Response containers for range queries.
"""

from __future__ import annotations

from pydantic import Field

from chado.schemas import ChadoModel, FeatureRow, SequenceSlice


class Feature(FeatureRow):
    # Always empty: results are flat, one level deep.
    subfeatures: list[Feature] = Field(default_factory=list)


class SequenceContainer(ChadoModel):
    features: list[SequenceSlice]


class FeatureContainer(ChadoModel):
    features: list[Feature]

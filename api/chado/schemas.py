"""
Typed records returned by the Chado backend.

Field names are snake_case in Python and camelCase on the wire, which is
what the JBrowse REST store reads.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ChadoModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class Organism(ChadoModel):
    organism_id: int
    common_name: str
    genus: str
    species: str


class SoType(ChadoModel):
    type: str


class RefSeqRow(ChadoModel):
    name: str
    length: int


class SequenceSlice(ChadoModel):
    seq: str
    start: int
    end: int


class FeatureRow(ChadoModel):
    start: int
    end: int
    strand: int | None = None
    type: str
    name: str | None = None
    unique_id: str = Field(alias="uniqueID")

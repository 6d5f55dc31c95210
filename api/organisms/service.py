"""
Organism listing for the landing endpoint.
"""

from __future__ import annotations

from chado.repository import ChadoBackend
from core.errors import guarded

TITLE = "Chado-JBrowse Connector"


async def landing(backend: ChadoBackend, *, service_address: str) -> dict:
    organisms = await guarded("organisms", backend.list_organisms)
    return {
        "title": TITLE,
        "link": f"{service_address}/link",
        "organisms": [o.common_name for o in organisms],
    }

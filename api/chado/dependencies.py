"""
Backend dependency for FastAPI routes.
"""

from __future__ import annotations

from fastapi import Request

from .repository import ChadoBackend


def get_backend(request: Request) -> ChadoBackend:
    """
    The backend built in the app lifespan (see `api/main.py`).

    Tests replace it through `app.dependency_overrides[get_backend]`.
    """
    return request.app.state.backend

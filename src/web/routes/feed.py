"""Routes des flux statiques pre-generes."""

from typing import Any

from fastapi import APIRouter, Depends

from ...container import Container
from ..deps import get_container

router = APIRouter(prefix="/feed", tags=["feed"])


@router.get("/collections")
def get_collections(container: Container = Depends(get_container)) -> list[dict[str, Any]]:
    """Collections de l'accueil."""
    return container.feed_provider_service().get_collections()


@router.get("/trending")
def get_trending(container: Container = Depends(get_container)) -> list[dict[str, Any]]:
    """Selection tendance."""
    return container.feed_provider_service().get_trending()

"""
Routes de consultation du catalogue.

Les entites canoniques (dataclasses) sont serialisees telles quelles par
FastAPI ; les erreurs du domaine sont converties en statut HTTP par les
gestionnaires declares dans app.py.
"""

from fastapi import APIRouter, Depends, Path, Query

from ...container import Container
from ...core.entities.media import Episode, Show, ShowEntry, VideoAsset
from ..deps import get_container

router = APIRouter(tags=["catalog"])


@router.get("/search")
async def search(
    q: str = Query("", description="Texte a rechercher dans les titres"),
    container: Container = Depends(get_container),
) -> list[ShowEntry]:
    """Recherche des series dans le catalogue principal."""
    return await container.catalog_service().search(q)


@router.get("/shows/{show_id}")
async def get_show(
    show_id: str,
    container: Container = Depends(get_container),
) -> Show:
    """Fiche agregee d'une serie."""
    return await container.show_aggregator_service().fetch_show(show_id)


@router.get("/shows/{show_id}/seasons/{season}/episodes")
async def get_episodes(
    show_id: str,
    season: int = Path(ge=0),
    container: Container = Depends(get_container),
) -> list[Episode]:
    """Episodes d'une fenetre de saison."""
    return await container.episode_windower_service().fetch_episodes(show_id, season)


@router.get("/videos/{media_ref:path}")
async def get_video(
    media_ref: str,
    container: Container = Depends(get_container),
) -> list[VideoAsset]:
    """Manifeste video d'un episode (<id>-<slug>/<media>) ou d'un film."""
    return await container.video_resolver_service().fetch_video_assets(media_ref)

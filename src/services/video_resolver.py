"""
Service de resolution video.

Chaine de resolution, sans relance :

    Start -> IdDecoded -> MediaIdResolved -> EmbedUrlFetched -> AssetResolved

Toute erreur d'une etape termine la resolution (etat Failed) et remonte
inchangee a l'appelant.

- Identifiant d'episode ("<serie>/<media>") : le media id est lu dans
  l'identifiant, sans appel reseau.
- Identifiant de film ("<id>-<slug>") : le media id est celui du premier
  episode d'une fenetre d'un seul episode.
"""

from enum import Enum
from typing import Optional

from loguru import logger

from src.core.entities.media import VideoAsset
from src.core.exceptions import MediaNotFoundError
from src.core.identifiers import decompose_episode_id, decompose_show_id, is_episode_id
from src.core.ports.api_clients import IPrimaryCatalogClient
from src.core.ports.playlist import IPlaylistResolver


class ResolutionStep(Enum):
    """Etapes de la chaine de resolution."""

    START = "start"
    ID_DECODED = "id_decoded"
    MEDIA_ID_RESOLVED = "media_id_resolved"
    EMBED_URL_FETCHED = "embed_url_fetched"
    ASSET_RESOLVED = "asset_resolved"


def parse_media_id(raw: Optional[str]) -> Optional[int]:
    """Lit un media id entier strictement positif, None sinon."""
    if raw is None:
        return None
    text = str(raw).strip()
    if not text.isdecimal():
        return None
    value = int(text)
    return value if value > 0 else None


class VideoResolverService:
    """
    Resout un identifiant composite en asset video lisible.

    Example:
        resolver = VideoResolverService(catalog, VixcloudPlaylistResolver())
        assets = await resolver.fetch_video_assets("1234-one-piece/56789")
    """

    def __init__(
        self,
        catalog: IPrimaryCatalogClient,
        playlist_resolver: IPlaylistResolver,
    ) -> None:
        self._catalog = catalog
        self._playlist_resolver = playlist_resolver

    async def fetch_video_assets(self, media_ref: str) -> list[VideoAsset]:
        """
        Resout un identifiant de film ou d'episode.

        Returns:
            Liste contenant exactement un VideoAsset

        Raises:
            MalformedIdError: Identifiant invalide
            MediaNotFoundError: Aucun media id determinable
            UpstreamFetchError: Echec du catalogue principal
        """
        step = ResolutionStep.START
        try:
            media_id = await self.resolve_media_id(media_ref)
            step = ResolutionStep.MEDIA_ID_RESOLVED

            embed_url = await self._catalog.get_embed_url(media_id)
            step = ResolutionStep.EMBED_URL_FETCHED

            asset = await self._playlist_resolver.resolve(embed_url)
            step = ResolutionStep.ASSET_RESOLVED
        except Exception:
            logger.debug(f"Resolution de {media_ref} echouee apres l'etape {step.value}")
            raise

        logger.debug(f"Resolution de {media_ref} terminee ({step.value})")
        return [asset]

    async def resolve_media_id(self, media_ref: str) -> int:
        """
        Determine le media id d'un identifiant composite.

        Raises:
            MalformedIdError: Identifiant invalide
            MediaNotFoundError: Media id absent ou non numerique
        """
        raw: Optional[str]
        if is_episode_id(media_ref):
            raw = decompose_episode_id(media_ref).media_id
        else:
            show_id = decompose_show_id(media_ref)
            logger.debug(f"{media_ref}: {ResolutionStep.ID_DECODED.value}, film {show_id}")
            episodes = await self._catalog.get_episodes(show_id, start=1, limit=1)
            raw = episodes[0].id if episodes else None

        media_id = parse_media_id(raw)
        if media_id is None:
            raise MediaNotFoundError(f"Media id introuvable pour {media_ref}")
        return media_id

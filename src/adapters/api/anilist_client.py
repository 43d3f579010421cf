"""
Client AniList (GraphQL).

Implemente IBannerClient : banniere d'une serie et miniatures des episodes
de streaming. AniList ne fournit pas de numero d'episode : il est extrait du
titre libre "Episode N - Titre".
"""

import re
from typing import Any, Optional

from src.adapters.api.transport import BaseAPIClient
from src.core.exceptions import MalformedResponseError
from src.core.ports.api_clients import AnilistEpisode, AnilistShow, IBannerClient

EPISODE_TITLE_PATTERN = re.compile(r"Episode\s+(\d+)\s*-\s*(.+)", re.IGNORECASE)

SHOW_QUERY = """
query ($id: Int) {
  Media(id: $id, type: ANIME) {
    title {
      romaji
      english
      native
    }
    coverImage {
      extraLarge
      large
      medium
    }
    bannerImage
  }
}
"""

EPISODES_QUERY = """
query ($id: Int) {
  Media(id: $id, type: ANIME) {
    streamingEpisodes {
      title
      thumbnail
    }
  }
}
"""


def parse_episode_title(title: str) -> tuple[int, str]:
    """
    Extrait (numero, titre) d'un titre d'episode de streaming.

    Example:
        >>> parse_episode_title("Episode 5 - The Arrival")
        (5, 'The Arrival')

    Raises:
        MalformedResponseError: Si le titre ne suit pas "Episode <N> - <texte>"
    """
    match = EPISODE_TITLE_PATTERN.search(title or "")
    if not match:
        raise MalformedResponseError(f"Format de titre d'episode invalide: {title!r}")
    return int(match.group(1)), match.group(2).strip()


def parse_show(media: Any) -> AnilistShow:
    """Traduit un objet Media AniList en AnilistShow."""
    try:
        title = media.get("title") or {}
        cover = media.get("coverImage") or {}
        return AnilistShow(
            title_romaji=title.get("romaji") or "",
            title_english=title.get("english"),
            cover_image=cover.get("extraLarge"),
            banner_image=media.get("bannerImage"),
        )
    except AttributeError as e:
        raise MalformedResponseError(f"Media AniList inattendu: {e!r}") from e


class AnilistClient(BaseAPIClient, IBannerClient):
    """
    Client AniList GraphQL.

    Toutes les requetes sont des POST sur l'URL de base avec un corps
    {"query": ..., "variables": {"id": ...}}.
    """

    DEFAULT_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "anilist"

    async def _query_media(self, query: str, anilist_id: int) -> dict[str, Any]:
        """
        Execute une requete Media et retourne l'objet Media.

        Raises:
            MalformedResponseError: Erreurs GraphQL ou Media absent
        """
        payload = await self._post_json(
            "", json={"query": query, "variables": {"id": anilist_id}}
        )
        if not isinstance(payload, dict):
            raise MalformedResponseError("Reponse GraphQL inattendue")
        errors = payload.get("errors")
        if errors:
            messages = ", ".join(str(err.get("message", err)) for err in errors)
            raise MalformedResponseError(f"Erreur GraphQL AniList: {messages}")
        media: Optional[dict[str, Any]] = (payload.get("data") or {}).get("Media")
        if not isinstance(media, dict):
            raise MalformedResponseError(f"Media AniList {anilist_id} absent")
        return media

    async def get_show(self, anilist_id: int) -> AnilistShow:
        """Recupere titre, couverture et banniere d'une serie."""
        return parse_show(await self._query_media(SHOW_QUERY, anilist_id))

    async def get_episodes(self, anilist_id: int) -> list[AnilistEpisode]:
        """
        Recupere les episodes de streaming avec leur miniature.

        Un seul titre non conforme fait echouer tout l'appel : aucune entree
        n'est ignoree silencieusement.
        """
        media = await self._query_media(EPISODES_QUERY, anilist_id)
        episodes = []
        for item in media.get("streamingEpisodes") or []:
            number, title = parse_episode_title(item.get("title", ""))
            episodes.append(
                AnilistEpisode(number=number, title=title, thumbnail=item.get("thumbnail"))
            )
        return episodes

"""
Client Jikan (miroir de MyAnimeList).

Implemente IEpisodeTitleClient : fiche d'une serie (affiche, note) et liste
paginee des episodes avec leurs titres (100 episodes par page).
"""

from typing import Any, Optional

from src.adapters.api.transport import BaseAPIClient
from src.core.exceptions import MalformedResponseError
from src.core.ports.api_clients import IEpisodeTitleClient, JikanEpisode, JikanShow


def _unwrap_data(payload: Any) -> Any:
    """Retourne le champ "data" de l'enveloppe Jikan."""
    if not isinstance(payload, dict) or "data" not in payload:
        raise MalformedResponseError("Enveloppe Jikan sans champ 'data'")
    return payload["data"]


def parse_show(data: Any) -> JikanShow:
    """Traduit une fiche Jikan en JikanShow."""
    try:
        images = data.get("images") or {}
        jpg = images.get("jpg") or {}
        score = data.get("score")
        return JikanShow(
            mal_id=int(data["mal_id"]),
            title=data.get("title") or "",
            large_image_url=jpg.get("large_image_url"),
            score=float(score) if isinstance(score, (int, float)) else None,
            synopsis=data.get("synopsis"),
        )
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise MalformedResponseError(f"Fiche Jikan inattendue: {e!r}") from e


def parse_episode(data: Any) -> JikanEpisode:
    """Traduit un episode Jikan en JikanEpisode."""
    try:
        return JikanEpisode(mal_id=int(data["mal_id"]), title=data.get("title"))
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise MalformedResponseError(f"Episode Jikan inattendu: {e!r}") from e


class JikanClient(BaseAPIClient, IEpisodeTitleClient):
    """
    Client Jikan v4.

    Source d'enrichissement : ses erreurs sont absorbees par les services,
    qui conservent alors les valeurs du catalogue principal.

    Example:
        client = JikanClient(base_url="https://api.jikan.moe/v4/")
        show = await client.get_show(21)
        episodes = await client.get_episodes(21, page=2)
    """

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "jikan"

    async def get_show(self, mal_id: int) -> JikanShow:
        """Recupere la fiche MAL d'une serie."""
        payload = await self._get_json(f"anime/{mal_id}")
        return parse_show(_unwrap_data(payload))

    async def get_episodes(
        self, mal_id: int, page: Optional[int] = None
    ) -> list[JikanEpisode]:
        """
        Recupere une page de la liste des episodes.

        Args:
            mal_id: ID MyAnimeList
            page: Page a recuperer (omise = premiere page)
        """
        params = {"page": page} if page else None
        payload = await self._get_json(f"anime/{mal_id}/episodes", params=params)
        items = _unwrap_data(payload)
        if not isinstance(items, list):
            raise MalformedResponseError("Liste d'episodes Jikan attendue")
        return [parse_episode(item) for item in items]

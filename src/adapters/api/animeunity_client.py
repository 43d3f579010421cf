"""
Client du catalogue principal AnimeUnity.

Implemente IPrimaryCatalogClient. Les fiches et listes de series sont
extraites du JSON embarque dans les pages HTML ; les episodes et les URLs
d'embed proviennent d'endpoints JSON/texte.

Usage:
    client = AnimeUnityClient(base_url="https://www.animeunity.so/")
    show = await client.get_show(1234)
    episodes = await client.get_episodes(1234, start=1, limit=100)
    embed_url = await client.get_embed_url(int(episodes[0].id))
    await client.close()
"""

from typing import Any, Optional

from src.adapters.api.embedded_json import (
    find_element,
    load_embedded_json,
    parse_json_attribute,
    read_int_attribute,
)
from src.adapters.api.transport import BaseAPIClient
from src.core.exceptions import MalformedResponseError
from src.core.ports.api_clients import (
    ArchiveOrder,
    AUEpisode,
    AUShow,
    IPrimaryCatalogClient,
)


def _optional_int(value: Any) -> Optional[int]:
    """Convertit une valeur native en entier, None si absente ou invalide."""
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def parse_show(payload: Any, episodes_count: Optional[int] = None) -> AUShow:
    """
    Traduit un objet serie natif en AUShow.

    Args:
        payload: Objet JSON d'une serie
        episodes_count: Nombre d'episodes lu hors de l'objet (attribut HTML)

    Raises:
        MalformedResponseError: Si l'id est absent ou la forme inattendue
    """
    try:
        genres = tuple(
            genre["name"] for genre in (payload.get("genres") or []) if genre.get("name")
        )
        if episodes_count is None:
            episodes_count = _optional_int(payload.get("episodes_count"))
        return AUShow(
            id=int(payload["id"]),
            slug=str(payload.get("slug") or ""),
            title=payload.get("title_eng") or payload.get("title") or "",
            type=payload.get("type") or "",
            date=str(payload.get("date") or ""),
            plot=payload.get("plot"),
            season=payload.get("season"),
            episodes_length=_optional_int(payload.get("episodes_length")),
            score=payload.get("score"),
            dub=str(payload.get("dub")) == "1" or payload.get("dub") is True,
            image_url=payload.get("imageurl"),
            cover_url=payload.get("imageurl_cover"),
            status=payload.get("status"),
            anilist_id=_optional_int(payload.get("anilist_id")),
            mal_id=_optional_int(payload.get("mal_id")),
            genres=genres,
            episodes_count=episodes_count,
        )
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise MalformedResponseError(f"Fiche AnimeUnity inattendue: {e!r}") from e


def parse_episode(payload: Any) -> AUEpisode:
    """Traduit un episode natif en AUEpisode."""
    try:
        return AUEpisode(
            id=str(payload["id"]),
            number=str(payload.get("number") or ""),
            show_id=_optional_int(payload.get("anime_id")),
            scws_id=_optional_int(payload.get("scws_id")),
        )
    except (KeyError, TypeError, AttributeError) as e:
        raise MalformedResponseError(f"Episode AnimeUnity inattendu: {e!r}") from e


def _parse_show_list(items: Any) -> list[AUShow]:
    if not isinstance(items, list):
        raise MalformedResponseError("Liste de series attendue")
    return [parse_show(item) for item in items]


class AnimeUnityClient(BaseAPIClient, IPrimaryCatalogClient):
    """
    Client du catalogue principal.

    Seule source de verite pour l'existence des series, la liste des episodes
    et les URLs d'embed. Ses erreurs ne sont jamais absorbees par les services.
    """

    DEFAULT_HEADERS = {"Accept-Language": "it-IT"}

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "animeunity"

    async def search(self, query: str) -> list[AUShow]:
        """
        Recherche des series par titre via la page d'archive.

        Args:
            query: Titre recherche

        Returns:
            Liste de AUShow (vide si aucun resultat)
        """
        html = await self._get_text("archivio", params={"title": query})
        return _parse_show_list(load_embedded_json(html, "archivio", "records"))

    async def get_show(self, show_id: int) -> AUShow:
        """
        Recupere la fiche d'une serie depuis sa page.

        Le nombre d'episodes est lu dans l'attribut episodes_count de
        l'element video-player, a cote du JSON de la serie.
        """
        html = await self._get_text(f"anime/{show_id}")
        tag = find_element(html, "video-player", "anime")
        payload = parse_json_attribute(tag, "anime")
        return parse_show(payload, episodes_count=read_int_attribute(tag, "episodes_count"))

    async def get_episodes(
        self, show_id: int, start: int = 1, limit: int = 100
    ) -> list[AUEpisode]:
        """
        Recupere les episodes numerotes de start a start + limit - 1.

        Returns:
            Liste de AUEpisode dans l'ordre de la source (vide si hors plage)
        """
        data = await self._get_json(
            f"info_api/{show_id}/1",
            params={"start_range": start, "end_range": start + limit - 1},
            headers={"Accept": "application/json"},
        )
        if not isinstance(data, dict):
            raise MalformedResponseError("Objet JSON attendu pour les episodes")
        return [parse_episode(item) for item in data.get("episodes") or []]

    async def get_embed_url(self, media_id: int) -> str:
        """Recupere l'URL d'embed du lecteur pour un media."""
        text = await self._get_text(
            f"embed-url/{media_id}", headers={"Accept": "text/plain"}
        )
        embed_url = text.strip()
        if not embed_url:
            raise MalformedResponseError(f"URL d'embed vide pour le media {media_id}")
        return embed_url

    async def get_archive(
        self,
        page: int = 1,
        order_by: Optional[ArchiveOrder] = None,
        show_type: Optional[str] = None,
    ) -> list[AUShow]:
        """
        Recupere une page du classement (top-anime).

        Args:
            page: Numero de page (1 = premiere page, parametre omis)
            order_by: "popularity" ou "views"
            show_type: Filtre de categorie ("TV", "Movie", ...)
        """
        params: dict[str, Any] = {}
        if page > 1:
            params["page"] = page
        if order_by == "popularity":
            params["popular"] = "true"
        elif order_by == "views":
            params["order"] = "most_viewed"
        if show_type:
            params["type"] = show_type

        html = await self._get_text("top-anime", params=params)
        data = load_embedded_json(html, "top-anime", "animes")
        if not isinstance(data, dict):
            raise MalformedResponseError("Objet JSON attendu pour le classement")
        return _parse_show_list(data.get("data") or [])

"""
Client Kitsu (JSON-API).

Implemente ICoverImageClient. Une fiche est accessible par son ID Kitsu, ou
par un ID MyAnimeList via l'endpoint de mappings : le mapping renvoie un
lien "related" vers la fiche, suivi tel quel.
"""

from typing import Any, Optional

from src.adapters.api.transport import BaseAPIClient
from src.core.exceptions import MalformedResponseError, MappingNotFoundError
from src.core.ports.api_clients import ICoverImageClient, KitsuImage, KitsuShow

MAL_EXTERNAL_SITE = "myanimelist/anime"


def _parse_image(data: Any) -> Optional[KitsuImage]:
    if not isinstance(data, dict):
        return None
    return KitsuImage(
        original=data.get("original"),
        tiny=data.get("tiny"),
        small=data.get("small"),
        medium=data.get("medium"),
        large=data.get("large"),
    )


def parse_show(payload: Any) -> KitsuShow:
    """Traduit une ressource anime Kitsu en KitsuShow."""
    try:
        attributes = payload["data"]["attributes"]
        return KitsuShow(
            poster_image=_parse_image(attributes.get("posterImage")),
            cover_image=_parse_image(attributes.get("coverImage")),
        )
    except (KeyError, TypeError, AttributeError) as e:
        raise MalformedResponseError(f"Ressource Kitsu inattendue: {e!r}") from e


def parse_related_link(payload: Any, mal_id: int) -> str:
    """
    Extrait le lien vers la fiche depuis une reponse de mappings.

    Raises:
        MappingNotFoundError: Aucun mapping pour l'ID MAL
        MalformedResponseError: Forme inattendue
    """
    try:
        mappings = payload["data"]
        if not mappings:
            raise MappingNotFoundError(f"Aucun mapping Kitsu pour l'ID MAL {mal_id}")
        return str(mappings[0]["relationships"]["item"]["links"]["related"])
    except (KeyError, TypeError, IndexError) as e:
        raise MalformedResponseError(f"Mapping Kitsu inattendu: {e!r}") from e


class KitsuClient(BaseAPIClient, ICoverImageClient):
    """
    Client Kitsu edge API.

    Example:
        client = KitsuClient(base_url="https://kitsu.io/api/edge/")
        show = await client.get_show(mal_id=21)
        poster = show.poster_image.original if show.poster_image else None
    """

    DEFAULT_HEADERS = {
        "Accept": "application/vnd.api+json",
        "Content-Type": "application/vnd.api+json",
    }

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "kitsu"

    async def get_show(
        self,
        kitsu_id: Optional[int] = None,
        mal_id: Optional[int] = None,
    ) -> KitsuShow:
        """
        Recupere les images d'une fiche Kitsu.

        Args:
            kitsu_id: ID Kitsu natif
            mal_id: ID MyAnimeList (resolu via les mappings)

        Raises:
            ValueError: Si aucun ou les deux identifiants sont fournis
            MappingNotFoundError: Aucun mapping pour l'ID MAL
        """
        if (kitsu_id is None) == (mal_id is None):
            raise ValueError("Fournir exactement un identifiant: kitsu_id ou mal_id")

        if kitsu_id is not None:
            endpoint = f"anime/{kitsu_id}"
        else:
            mapping = await self._get_json(
                "mappings",
                params={
                    "filter[externalSite]": MAL_EXTERNAL_SITE,
                    "filter[externalId]": mal_id,
                },
            )
            endpoint = parse_related_link(mapping, mal_id)

        return parse_show(await self._get_json(endpoint))

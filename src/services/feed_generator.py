"""
Generation hors ligne des flux statiques.

Produit les collections de l'accueil a partir du classement du catalogue
principal, et la liste des series tendance a partir d'une selection
editoriale fixe. Le seul rate limiting est un delai aleatoire fixe entre
deux collections.

Usage:
    generator = FeedGeneratorService(catalog, store, delay_range=(2.0, 3.0))
    await generator.generate_collections()
    generator.generate_trending()
"""

import asyncio
import random
import re
from dataclasses import dataclass
from typing import Any, Callable, Optional

from loguru import logger

from src.core.entities.media import FeedCollection
from src.core.ports.api_clients import ArchiveOrder, AUShow, IPrimaryCatalogClient
from src.core.ports.feeds import IFeedStore
from src.services.mappers import show_entry_from_au, show_entry_payload

ARCHIVE_PAGES = (1, 2)


@dataclass(frozen=True)
class CollectionDefinition:
    """
    Definition d'une collection generee.

    Attributes:
        name: Nom affiche
        order_by: Tri du classement
        show_type: Filtre de categorie native
        dub: True pour ne garder que les versions doublees, False pour les exclure
    """

    name: str
    order_by: Optional[ArchiveOrder] = None
    show_type: Optional[str] = None
    dub: bool = False


COLLECTION_DEFINITIONS = (
    CollectionDefinition("Gli anime più visti", order_by="views"),
    CollectionDefinition("Gli anime doppiati più visti", order_by="views", dub=True),
    CollectionDefinition("Anime del momento", order_by="popularity"),
    CollectionDefinition("I film anime più apprezzati", show_type="Movie"),
    CollectionDefinition("I film anime doppiati più apprezzati", show_type="Movie", dub=True),
    CollectionDefinition("Le serie anime più amate", show_type="TV"),
    CollectionDefinition("Le serie anime doppiate più amate", show_type="TV", dub=True),
)

# Selection editoriale (images TMDB en taille originale)
TRENDING_SHOWS: tuple[dict[str, Any], ...] = (
    {
        "title": "Il castello errante di Howl",
        "kind": "movie",
        "id": "336-il-castello-errante-di-howl-ita",
        "poster_url": "https://image.tmdb.org/t/p/original/fXKg3wkHfWoZEiJUZYxcrdPNWKi.jpg",
        "backdrop_url": "https://image.tmdb.org/t/p/original/tjMiLkVfOmbx3kUtKSmkLimiw8x.jpg",
        "logo_url": "https://image.tmdb.org/t/p/original/cOcqGC1mgPoRYvaUxPMACEKOKjz.png",
        "overview": "Cosa farà Sophie e cosa capiterà tra lei e Howl?",
        "release_date": "2005-06-10",
        "genres": ["Fantasy"],
        "duration_seconds": 0,
    },
    {
        "title": "Nana",
        "kind": "series",
        "id": "4821-nana",
        "poster_url": "https://image.tmdb.org/t/p/original/eWqk7Hih3t2t1ZhiDbHFMZVJCrF.jpg",
        "backdrop_url": "https://image.tmdb.org/t/p/original/q3EV3IdRCdREZXIKLHAhoZufteg.jpg",
        "logo_url": "https://image.tmdb.org/t/p/original/u7OPSU24Ib5G8iYCswMYPrMUwp2.png",
        "overview": "Due ventenni accomunate dal nome e dalla decisione di trasferirsi a Tokyo",
        "release_date": "2006-04-05",
        "genres": ["Drama"],
        "duration_seconds": 0,
    },
    {
        "title": "Jujutsu Kaisen",
        "kind": "series",
        "id": "2791-jujutsu-kaisen",
        "poster_url": "https://image.tmdb.org/t/p/original/g1p1Vx6FgUEY6fDRnOCncQ9V21o.jpg",
        "backdrop_url": "https://image.tmdb.org/t/p/original/prJcvQ5uRuqo2Um1loBbqoKoyBS.jpg",
        "logo_url": "https://image.tmdb.org/t/p/original/n0xjdQWNVVUCXyIEJjpUDqWDcw.png",
        "overview": "A boy fights... for 'the right death'",
        "release_date": "2020-10-03",
        "genres": ["Shounen"],
        "duration_seconds": 0,
    },
)

# Taille TMDB cible par type d'image
TRENDING_IMAGE_SIZES = {
    "logo_url": "w500",
    "poster_url": "w780",
    "backdrop_url": "w1280",
}


def collection_id(name: str) -> str:
    """
    Identifiant stable d'une collection.

    Example:
        >>> collection_id("Anime del momento")
        'au-anime-del-momento'
    """
    return "au-" + re.sub(r"\s", "-", name.lower())


def resize_tmdb_image(url: Optional[str], size: str) -> Optional[str]:
    """Remplace la taille "original" d'une URL d'image TMDB."""
    if not url:
        return url
    return url.replace("/original/", f"/{size}/", 1)


def make_collection(name: str, shows: list[AUShow]) -> FeedCollection:
    """Construit une collection a partir de fiches du catalogue."""
    logger.info(f"Collection '{name}': {len(shows)} serie(s)")
    return FeedCollection(
        id=collection_id(name),
        name=name,
        shows=tuple(show_entry_from_au(show) for show in shows),
    )


def collection_payload(collection: FeedCollection) -> dict[str, Any]:
    """Serialise une collection pour le stockage JSON."""
    return {
        "id": collection.id,
        "name": collection.name,
        "shows": [show_entry_payload(entry) for entry in collection.shows],
    }


class FeedGeneratorService:
    """
    Generateur des flux statiques.

    Attributes:
        delay_range: Bornes (min, max) du delai aleatoire entre collections
    """

    def __init__(
        self,
        catalog: IPrimaryCatalogClient,
        store: IFeedStore,
        delay_range: tuple[float, float] = (2.0, 3.0),
        definitions: tuple[CollectionDefinition, ...] = COLLECTION_DEFINITIONS,
    ) -> None:
        self._catalog = catalog
        self._store = store
        self.delay_range = delay_range
        self.definitions = definitions

    async def _fetch_collection(self, definition: CollectionDefinition) -> FeedCollection:
        shows: list[AUShow] = []
        for page in ARCHIVE_PAGES:
            shows.extend(
                await self._catalog.get_archive(
                    page, order_by=definition.order_by, show_type=definition.show_type
                )
            )
        selected = [show for show in shows if show.dub == definition.dub]
        return make_collection(definition.name, selected)

    async def generate_collections(
        self,
        on_progress: Optional[Callable[[FeedCollection], None]] = None,
    ) -> list[FeedCollection]:
        """
        Genere et ecrit toutes les collections.

        Une erreur du catalogue principal interrompt la generation : aucun
        fichier partiel n'est ecrit.

        Args:
            on_progress: Callback appele apres chaque collection

        Returns:
            Collections generees, dans l'ordre des definitions
        """
        collections = []
        for index, definition in enumerate(self.definitions):
            if index > 0:
                await self._pause()
            collection = await self._fetch_collection(definition)
            collections.append(collection)
            if on_progress:
                on_progress(collection)

        self._store.write_collections([collection_payload(c) for c in collections])
        return collections

    def generate_trending(self) -> list[dict[str, Any]]:
        """Ecrit la selection tendance avec des images redimensionnees."""
        trending = []
        for show in TRENDING_SHOWS:
            item = dict(show)
            for key, size in TRENDING_IMAGE_SIZES.items():
                item[key] = resize_tmdb_image(item.get(key), size)
            trending.append(item)
        self._store.write_trending(trending)
        return trending

    async def _pause(self) -> None:
        low, high = self.delay_range
        delay = random.uniform(low, high)
        if delay > 0:
            logger.info(f"Pause de {delay:.1f}s avant la collection suivante")
            await asyncio.sleep(delay)

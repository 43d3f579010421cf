"""
Service de fenetrage des episodes.

Les episodes d'une serie sont decoupes en fenetres fixes de 100 episodes
("saisons" d'affichage, sans rapport avec les saisons de diffusion). Pour une
fenetre donnee, le service recupere les episodes du catalogue principal puis
les joint aux titres Jikan et aux miniatures AniList.

Cle de jointure : le numero absolu de l'episode. Jikan le fournit dans le
champ mal_id de ses episodes (100 par page, page = fenetre + 1), AniList
dans le titre libre "Episode N - Titre". Un numero fractionnaire ("12.5")
ne correspond a aucune entree d'enrichissement.
"""

import asyncio
import math
from typing import Union

from loguru import logger

from src.core.entities.media import Episode
from src.core.identifiers import compose_episode_id, decompose_show_id
from src.core.ports.api_clients import (
    AUShow,
    IBannerClient,
    IEpisodeTitleClient,
    IPrimaryCatalogClient,
)
from src.core.value_objects import Season
from src.services.enrichment import EnrichmentOutcome, attempt_enrichment
from src.services.mappers import parse_episode_number

WINDOW_SIZE = 100

EpisodeNumber = Union[int, float]


def season_window(season: int) -> tuple[int, int]:
    """
    Retourne la plage inclusive (debut, fin) d'une fenetre.

    Example:
        >>> season_window(1)
        (101, 200)
    """
    if season < 0:
        raise ValueError(f"Index de saison negatif: {season}")
    start = season * WINDOW_SIZE + 1
    return start, start + WINDOW_SIZE - 1


def season_name(season: int, episodes_count: int) -> str:
    """Libelle d'une fenetre, borne par le nombre total d'episodes."""
    start, end = season_window(season)
    return f"{start}-{min(end, episodes_count)}"


def compute_seasons(episodes_count: int) -> tuple[Season, ...]:
    """
    Decoupe un nombre d'episodes en fenetres de 100.

    Example:
        250 episodes -> "1-100", "101-200", "201-250" ; 0 episode -> ()
    """
    count = max(episodes_count, 0)
    return tuple(
        Season(number=index, name=season_name(index, count))
        for index in range(math.ceil(count / WINDOW_SIZE))
    )


class EpisodeWindowerService:
    """
    Service de recuperation d'une fenetre d'episodes enrichie.

    Example:
        windower = EpisodeWindowerService(catalog, jikan, anilist)
        episodes = await windower.fetch_episodes("1234-one-piece", season=2)
    """

    def __init__(
        self,
        catalog: IPrimaryCatalogClient,
        title_client: IEpisodeTitleClient,
        banner_client: IBannerClient,
    ) -> None:
        """
        Initialise le service.

        Args:
            catalog: Catalogue principal (episodes, fiche)
            title_client: Source des titres d'episodes (Jikan)
            banner_client: Source des miniatures (AniList)
        """
        self._catalog = catalog
        self._title_client = title_client
        self._banner_client = banner_client

    async def fetch_episodes(self, show_id: str, season: int) -> list[Episode]:
        """
        Recupere les episodes d'une fenetre, dans l'ordre du catalogue.

        Args:
            show_id: Identifiant composite de la serie
            season: Index de fenetre (0 = episodes 1-100)

        Returns:
            Liste d'Episode, vide si la fenetre ne contient aucun episode

        Raises:
            MalformedIdError: Identifiant de serie invalide
            UpstreamFetchError: Echec du catalogue principal
        """
        primary_id = decompose_show_id(show_id)
        start, end = season_window(season)

        window = await self._catalog.get_episodes(primary_id, start, WINDOW_SIZE)
        if not window:
            logger.debug(f"Fenetre {start}-{end} vide pour {show_id}")
            return []

        record = await self._catalog.get_show(primary_id)
        titles, thumbnails = await asyncio.gather(
            self._title_lookup(record, season),
            self._thumbnail_lookup(record),
        )

        episodes = []
        for index, item in enumerate(window):
            number = parse_episode_number(item.number)
            if number is None:
                number = start + index
            episodes.append(
                Episode(
                    id=compose_episode_id(show_id, item.id),
                    number=number,
                    title=titles.get(number),
                    thumbnail_url=thumbnails.get(number),
                )
            )
        return episodes

    async def _title_lookup(
        self, record: AUShow, season: int
    ) -> dict[EpisodeNumber, str]:
        """Numero -> titre depuis la page Jikan correspondant a la fenetre."""
        outcome = await self._attempt_titles(record, season)
        if not outcome.value:
            return {}
        return {ep.mal_id: ep.title for ep in outcome.value if ep.title}

    async def _thumbnail_lookup(self, record: AUShow) -> dict[EpisodeNumber, str]:
        """Numero -> miniature depuis les episodes de streaming AniList."""
        outcome = await self._attempt_thumbnails(record)
        if not outcome.value:
            return {}
        return {ep.number: ep.thumbnail for ep in outcome.value if ep.thumbnail}

    async def _attempt_titles(self, record: AUShow, season: int) -> EnrichmentOutcome:
        source = self._title_client.source
        if not record.mal_id:
            return EnrichmentOutcome.skipped(source)
        mal_id: int = record.mal_id
        return await attempt_enrichment(
            source,
            lambda: self._title_client.get_episodes(mal_id, page=season + 1),
            subject=f"episodes MAL {mal_id} page {season + 1}",
        )

    async def _attempt_thumbnails(self, record: AUShow) -> EnrichmentOutcome:
        source = self._banner_client.source
        if not record.anilist_id:
            return EnrichmentOutcome.skipped(source)
        anilist_id: int = record.anilist_id
        return await attempt_enrichment(
            source,
            lambda: self._banner_client.get_episodes(anilist_id),
            subject=f"episodes AniList {anilist_id}",
        )

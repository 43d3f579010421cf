"""
Service d'agregation d'une serie.

Construit l'entite Show canonique a partir de la fiche du catalogue principal,
puis l'enrichit de facon additive et independante :
- Jikan (ID MAL) : grande affiche, note si strictement positive
- AniList (ID AniList) : banniere comme image de fond
- Kitsu (ID MAL, optionnel) : couverture et affiche, uniquement quand le
  catalogue principal n'en fournit pas

Precedence :
- poster_url : Jikan > catalogue principal > Kitsu
- backdrop_url : AniList > catalogue principal > Kitsu

Un echec du catalogue principal est fatal ; un echec d'enrichissement est
journalise et la valeur de base est conservee.
"""

import asyncio
from dataclasses import dataclass
from typing import Optional

from loguru import logger

from src.core.entities.media import Show
from src.core.identifiers import decompose_show_id
from src.core.ports.api_clients import (
    AnilistShow,
    AUShow,
    IBannerClient,
    ICoverImageClient,
    IEpisodeTitleClient,
    IPrimaryCatalogClient,
    JikanShow,
    KitsuShow,
)
from src.core.value_objects import ShowKind
from src.services.enrichment import EnrichmentOutcome, attempt_enrichment
from src.services.episode_windower import compute_seasons
from src.services.mappers import (
    kind_from_type,
    map_status,
    parse_score,
    parse_year,
    release_date_from_season,
)


@dataclass(frozen=True)
class AggregatedShow:
    """
    Serie agregee et diagnostic des enrichissements.

    Attributes:
        show: Entite canonique
        outcomes: Resultat de chaque tentative d'enrichissement
    """

    show: Show
    outcomes: tuple[EnrichmentOutcome, ...] = ()

    @property
    def degraded_sources(self) -> tuple[str, ...]:
        """Sources tentees sans succes."""
        return tuple(o.source for o in self.outcomes if o.attempted and not o.succeeded)


class ShowAggregatorService:
    """
    Orchestration de la fiche principale et des trois sources d'enrichissement.

    Example:
        aggregator = ShowAggregatorService(catalog, jikan, anilist, kitsu)
        show = await aggregator.fetch_show("1234-one-piece")
    """

    def __init__(
        self,
        catalog: IPrimaryCatalogClient,
        title_client: IEpisodeTitleClient,
        banner_client: IBannerClient,
        cover_client: Optional[ICoverImageClient] = None,
    ) -> None:
        """
        Initialise le service.

        Args:
            catalog: Catalogue principal (source de verite)
            title_client: Jikan, pour l'affiche et la note
            banner_client: AniList, pour la banniere
            cover_client: Kitsu, pour la couverture (None = desactive)
        """
        self._catalog = catalog
        self._title_client = title_client
        self._banner_client = banner_client
        self._cover_client = cover_client

    async def fetch_show(self, show_id: str) -> Show:
        """
        Construit la serie canonique.

        Raises:
            MalformedIdError: Identifiant invalide
            UpstreamFetchError: Echec du catalogue principal
            MalformedResponseError: Fiche principale illisible
        """
        return (await self.aggregate(show_id)).show

    async def aggregate(self, show_id: str) -> AggregatedShow:
        """Construit la serie canonique avec le diagnostic des enrichissements."""
        record = await self._catalog.get_show(decompose_show_id(show_id))

        jikan, anilist, kitsu = await asyncio.gather(
            self._attempt_jikan(record),
            self._attempt_anilist(record),
            self._attempt_kitsu(record),
        )

        poster_url = record.image_url
        backdrop_url = record.cover_url
        rating = parse_score(record.score)

        kitsu_show: Optional[KitsuShow] = kitsu.value
        if kitsu_show is not None:
            if not backdrop_url and kitsu_show.cover_image:
                backdrop_url = kitsu_show.cover_image.original
            if not poster_url and kitsu_show.poster_image:
                poster_url = kitsu_show.poster_image.original

        jikan_show: Optional[JikanShow] = jikan.value
        if jikan_show is not None:
            if jikan_show.large_image_url:
                poster_url = jikan_show.large_image_url
            if jikan_show.score is not None and jikan_show.score > 0:
                rating = jikan_show.score

        anilist_show: Optional[AnilistShow] = anilist.value
        if anilist_show is not None and anilist_show.banner_image:
            backdrop_url = anilist_show.banner_image

        kind = kind_from_type(record.type)
        show = Show(
            id=show_id,
            kind=kind,
            title=record.title,
            overview=record.plot or "",
            genres=record.genres,
            duration_seconds=(record.episodes_length or 0) * 60,
            release_date=release_date_from_season(parse_year(record.date), record.season),
            seasons=compute_seasons(record.episodes_count or 0)
            if kind == ShowKind.SERIES
            else None,
            poster_url=poster_url,
            backdrop_url=backdrop_url,
            rating=rating,
            status=map_status(record.status),
        )
        outcomes = (jikan, anilist, kitsu)
        logger.debug(
            "Serie {show_id} agregee",
            show_id=show_id,
            enriched=[o.source for o in outcomes if o.succeeded],
        )
        return AggregatedShow(show=show, outcomes=outcomes)

    async def _attempt_jikan(self, record: AUShow) -> EnrichmentOutcome[JikanShow]:
        source = self._title_client.source
        if not record.mal_id:
            return EnrichmentOutcome.skipped(source)
        mal_id: int = record.mal_id
        return await attempt_enrichment(
            source, lambda: self._title_client.get_show(mal_id), subject=f"MAL {mal_id}"
        )

    async def _attempt_anilist(self, record: AUShow) -> EnrichmentOutcome[AnilistShow]:
        source = self._banner_client.source
        if not record.anilist_id:
            return EnrichmentOutcome.skipped(source)
        anilist_id: int = record.anilist_id
        return await attempt_enrichment(
            source,
            lambda: self._banner_client.get_show(anilist_id),
            subject=f"AniList {anilist_id}",
        )

    async def _attempt_kitsu(self, record: AUShow) -> EnrichmentOutcome[KitsuShow]:
        if self._cover_client is None:
            return EnrichmentOutcome.skipped("kitsu")
        source = self._cover_client.source
        if not record.mal_id:
            return EnrichmentOutcome.skipped(source)
        mal_id: int = record.mal_id
        cover_client = self._cover_client
        return await attempt_enrichment(
            source,
            lambda: cover_client.get_show(mal_id=mal_id),
            subject=f"Kitsu via MAL {mal_id}",
        )

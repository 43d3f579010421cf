"""
Tests unitaires pour ShowAggregatorService.

Tests couvrant:
- Construction de la serie canonique depuis le catalogue principal
- Precedence des images (Jikan, AniList, Kitsu) et de la note
- Degradation quand une source d'enrichissement echoue
- Propagation des erreurs du catalogue principal
"""

import dataclasses
from datetime import date
from unittest.mock import MagicMock

import pytest

from src.core.exceptions import (
    MalformedIdError,
    MappingNotFoundError,
    UpstreamFetchError,
)
from src.core.ports.api_clients import (
    AnilistShow,
    AUShow,
    JikanShow,
    KitsuImage,
    KitsuShow,
)
from src.core.value_objects import ShowKind, ShowStatus
from src.services.show_aggregator import ShowAggregatorService

JIKAN_POSTER = "https://cdn.myanimelist.net/images/anime/6/73245l.jpg"
ANILIST_BANNER = "https://s4.anilist.co/banner/21.jpg"
KITSU_COVER = "https://media.kitsu.io/cover/original.jpg"
KITSU_POSTER = "https://media.kitsu.io/poster/original.jpg"


@pytest.fixture
def aggregator(
    mock_catalog: MagicMock,
    mock_title_client: MagicMock,
    mock_banner_client: MagicMock,
    mock_cover_client: MagicMock,
) -> ShowAggregatorService:
    mock_title_client.get_show.return_value = JikanShow(
        mal_id=21, large_image_url=JIKAN_POSTER, score=8.72
    )
    mock_banner_client.get_show.return_value = AnilistShow(banner_image=ANILIST_BANNER)
    mock_cover_client.get_show.return_value = KitsuShow(
        poster_image=KitsuImage(original=KITSU_POSTER),
        cover_image=KitsuImage(original=KITSU_COVER),
    )
    return ShowAggregatorService(
        mock_catalog, mock_title_client, mock_banner_client, mock_cover_client
    )


class TestFetchShow:
    """Tests de la fiche agregee complete."""

    @pytest.mark.asyncio
    async def test_all_sources_available(
        self, aggregator: ShowAggregatorService, mock_catalog: MagicMock
    ) -> None:
        show = await aggregator.fetch_show("12-one-piece")

        mock_catalog.get_show.assert_awaited_once_with(12)
        assert show.id == "12-one-piece"
        assert show.kind == ShowKind.SERIES
        assert show.title == "One Piece"
        assert show.genres == ("Action", "Adventure")
        assert show.duration_seconds == 24 * 60
        assert show.release_date == date(1999, 10, 1)
        assert show.status == ShowStatus.AIRING
        assert show.poster_url == JIKAN_POSTER
        assert show.backdrop_url == ANILIST_BANNER
        assert show.rating == pytest.approx(8.72)
        assert [s.name for s in show.seasons] == ["1-100", "101-200", "201-250"]

    @pytest.mark.asyncio
    async def test_enrichment_uses_foreign_ids(
        self,
        aggregator: ShowAggregatorService,
        mock_title_client: MagicMock,
        mock_banner_client: MagicMock,
        mock_cover_client: MagicMock,
    ) -> None:
        await aggregator.fetch_show("12-one-piece")

        mock_title_client.get_show.assert_awaited_once_with(21)
        mock_banner_client.get_show.assert_awaited_once_with(21)
        mock_cover_client.get_show.assert_awaited_once_with(mal_id=21)

    @pytest.mark.asyncio
    async def test_jikan_failure_keeps_primary_poster_and_score(
        self, aggregator: ShowAggregatorService, mock_title_client: MagicMock
    ) -> None:
        mock_title_client.get_show.side_effect = UpstreamFetchError("HTTP 503", status_code=503)

        aggregated = await aggregator.aggregate("12-one-piece")

        assert aggregated.show.poster_url == "https://img.au/one-piece.jpg"
        assert aggregated.show.rating == pytest.approx(8.7)
        assert aggregated.degraded_sources == ("jikan",)

    @pytest.mark.asyncio
    async def test_zero_mal_score_does_not_override(
        self, aggregator: ShowAggregatorService, mock_title_client: MagicMock
    ) -> None:
        mock_title_client.get_show.return_value = JikanShow(mal_id=21, score=0.0)

        show = await aggregator.fetch_show("12-one-piece")

        assert show.rating == pytest.approx(8.7)
        assert show.poster_url == "https://img.au/one-piece.jpg"

    @pytest.mark.asyncio
    async def test_anilist_failure_keeps_primary_cover(
        self, aggregator: ShowAggregatorService, mock_banner_client: MagicMock
    ) -> None:
        mock_banner_client.get_show.side_effect = UpstreamFetchError("HTTP 503", status_code=503)

        aggregated = await aggregator.aggregate("12-one-piece")

        assert aggregated.show.backdrop_url == "https://img.au/one-piece-cover.jpg"
        assert aggregated.degraded_sources == ("anilist",)

    @pytest.mark.asyncio
    async def test_jikan_failure_keeps_primary_cover_with_kitsu(
        self,
        aggregator: ShowAggregatorService,
        mock_title_client: MagicMock,
        mock_banner_client: MagicMock,
    ) -> None:
        mock_title_client.get_show.side_effect = UpstreamFetchError("HTTP 503", status_code=503)
        mock_banner_client.get_show.return_value = AnilistShow(banner_image=None)

        show = await aggregator.fetch_show("12-one-piece")

        assert show.backdrop_url == "https://img.au/one-piece-cover.jpg"
        assert show.poster_url == "https://img.au/one-piece.jpg"
        assert show.rating == pytest.approx(8.7)

    @pytest.mark.asyncio
    async def test_kitsu_cover_when_primary_has_none(
        self,
        aggregator: ShowAggregatorService,
        mock_catalog: MagicMock,
        mock_banner_client: MagicMock,
        au_show: AUShow,
    ) -> None:
        mock_catalog.get_show.return_value = dataclasses.replace(au_show, cover_url=None)
        mock_banner_client.get_show.return_value = AnilistShow(banner_image=None)

        show = await aggregator.fetch_show("12-one-piece")

        assert show.backdrop_url == KITSU_COVER

    @pytest.mark.asyncio
    async def test_primary_cover_when_no_enrichment_image(
        self,
        aggregator: ShowAggregatorService,
        mock_banner_client: MagicMock,
        mock_cover_client: MagicMock,
    ) -> None:
        mock_banner_client.get_show.side_effect = UpstreamFetchError("timeout")
        mock_cover_client.get_show.side_effect = MappingNotFoundError("aucun mapping")

        aggregated = await aggregator.aggregate("12-one-piece")

        assert aggregated.show.backdrop_url == "https://img.au/one-piece-cover.jpg"
        assert set(aggregated.degraded_sources) == {"anilist", "kitsu"}

    @pytest.mark.asyncio
    async def test_kitsu_poster_when_primary_has_none(
        self,
        aggregator: ShowAggregatorService,
        mock_catalog: MagicMock,
        mock_title_client: MagicMock,
        au_show: AUShow,
    ) -> None:
        mock_catalog.get_show.return_value = dataclasses.replace(au_show, image_url=None)
        mock_title_client.get_show.return_value = JikanShow(mal_id=21, score=None)

        show = await aggregator.fetch_show("12-one-piece")

        assert show.poster_url == KITSU_POSTER

    @pytest.mark.asyncio
    async def test_missing_foreign_ids_skip_enrichment(
        self,
        aggregator: ShowAggregatorService,
        mock_catalog: MagicMock,
        mock_title_client: MagicMock,
        mock_banner_client: MagicMock,
        mock_cover_client: MagicMock,
        au_show: AUShow,
    ) -> None:
        mock_catalog.get_show.return_value = dataclasses.replace(
            au_show, mal_id=None, anilist_id=None
        )

        aggregated = await aggregator.aggregate("12-one-piece")

        mock_title_client.get_show.assert_not_awaited()
        mock_banner_client.get_show.assert_not_awaited()
        mock_cover_client.get_show.assert_not_awaited()
        assert aggregated.degraded_sources == ()

    @pytest.mark.asyncio
    async def test_movie_has_no_seasons(
        self, aggregator: ShowAggregatorService, mock_catalog: MagicMock, au_show: AUShow
    ) -> None:
        mock_catalog.get_show.return_value = dataclasses.replace(
            au_show, type="Movie", date="?", season=None, status=None
        )

        show = await aggregator.fetch_show("12-one-piece")

        assert show.kind == ShowKind.MOVIE
        assert show.seasons is None
        assert show.release_date is None
        assert show.status is None

    @pytest.mark.asyncio
    async def test_kitsu_disabled(
        self,
        mock_catalog: MagicMock,
        mock_title_client: MagicMock,
        mock_banner_client: MagicMock,
    ) -> None:
        mock_title_client.get_show.return_value = JikanShow(mal_id=21)
        mock_banner_client.get_show.return_value = AnilistShow()
        service = ShowAggregatorService(mock_catalog, mock_title_client, mock_banner_client)

        aggregated = await service.aggregate("12-one-piece")

        assert aggregated.show.backdrop_url == "https://img.au/one-piece-cover.jpg"
        assert "kitsu" not in aggregated.degraded_sources


class TestFetchShowErrors:
    """Tests de propagation des erreurs fatales."""

    @pytest.mark.asyncio
    async def test_malformed_id(self, aggregator: ShowAggregatorService) -> None:
        with pytest.raises(MalformedIdError):
            await aggregator.fetch_show("one-piece")

    @pytest.mark.asyncio
    async def test_primary_failure_is_fatal(
        self,
        aggregator: ShowAggregatorService,
        mock_catalog: MagicMock,
        mock_title_client: MagicMock,
    ) -> None:
        mock_catalog.get_show.side_effect = UpstreamFetchError("HTTP 500", status_code=500)

        with pytest.raises(UpstreamFetchError):
            await aggregator.fetch_show("12-one-piece")
        mock_title_client.get_show.assert_not_awaited()

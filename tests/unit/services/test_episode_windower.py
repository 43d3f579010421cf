"""
Tests unitaires pour le fenetrage des episodes.

Tests couvrant:
- Calcul des fenetres de 100 episodes
- Jointure par numero absolu avec Jikan et AniList
- Degradation quand une source d'enrichissement echoue
"""

import dataclasses
from unittest.mock import MagicMock

import pytest

from src.core.exceptions import MalformedResponseError, UpstreamFetchError
from src.core.ports.api_clients import AnilistEpisode, AUEpisode, AUShow, JikanEpisode
from src.core.value_objects import Season
from src.services.episode_windower import (
    EpisodeWindowerService,
    compute_seasons,
    season_name,
    season_window,
)


class TestSeasons:
    """Tests pour le decoupage en fenetres."""

    def test_season_window(self) -> None:
        assert season_window(0) == (1, 100)
        assert season_window(2) == (201, 300)

    def test_negative_season_rejected(self) -> None:
        with pytest.raises(ValueError):
            season_window(-1)

    def test_compute_seasons_250(self) -> None:
        assert compute_seasons(250) == (
            Season(number=0, name="1-100"),
            Season(number=1, name="101-200"),
            Season(number=2, name="201-250"),
        )

    @pytest.mark.parametrize("count, expected", [(0, 0), (1, 1), (100, 1), (101, 2), (1100, 11)])
    def test_compute_seasons_count(self, count: int, expected: int) -> None:
        assert len(compute_seasons(count)) == expected

    def test_season_name_capped_by_total(self) -> None:
        assert season_name(0, 12) == "1-12"


@pytest.fixture
def windower(
    mock_catalog: MagicMock,
    mock_title_client: MagicMock,
    mock_banner_client: MagicMock,
) -> EpisodeWindowerService:
    mock_catalog.get_episodes.return_value = [
        AUEpisode(id="5001", number="1"),
        AUEpisode(id="5002", number="2"),
        AUEpisode(id="5003", number="2.5"),
    ]
    mock_title_client.get_episodes.return_value = [
        JikanEpisode(mal_id=1, title="I'm Luffy!"),
        JikanEpisode(mal_id=2, title="Enter the Great Swordsman!"),
    ]
    mock_banner_client.get_episodes.return_value = [
        AnilistEpisode(number=2, title="Enter the Great Swordsman!", thumbnail="https://thumb/2.jpg"),
    ]
    return EpisodeWindowerService(mock_catalog, mock_title_client, mock_banner_client)


class TestFetchEpisodes:
    """Tests pour EpisodeWindowerService.fetch_episodes."""

    @pytest.mark.asyncio
    async def test_joins_enrichment_by_number(self, windower: EpisodeWindowerService) -> None:
        episodes = await windower.fetch_episodes("12-one-piece", 0)

        assert [ep.id for ep in episodes] == [
            "12-one-piece/5001",
            "12-one-piece/5002",
            "12-one-piece/5003",
        ]
        assert [ep.number for ep in episodes] == [1, 2, 2.5]
        assert episodes[0].title == "I'm Luffy!"
        assert episodes[0].thumbnail_url is None
        assert episodes[1].thumbnail_url == "https://thumb/2.jpg"
        assert episodes[2].title is None

    @pytest.mark.asyncio
    async def test_requests_window_and_matching_jikan_page(
        self,
        windower: EpisodeWindowerService,
        mock_catalog: MagicMock,
        mock_title_client: MagicMock,
        mock_banner_client: MagicMock,
    ) -> None:
        await windower.fetch_episodes("12-one-piece", 2)

        mock_catalog.get_episodes.assert_awaited_once_with(12, 201, 100)
        mock_title_client.get_episodes.assert_awaited_once_with(21, page=3)
        mock_banner_client.get_episodes.assert_awaited_once_with(21)

    @pytest.mark.asyncio
    async def test_empty_window_returns_empty_list(
        self,
        windower: EpisodeWindowerService,
        mock_catalog: MagicMock,
        mock_title_client: MagicMock,
    ) -> None:
        mock_catalog.get_episodes.return_value = []

        assert await windower.fetch_episodes("12-one-piece", 5) == []
        mock_catalog.get_show.assert_not_awaited()
        mock_title_client.get_episodes.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_enrichment_failures_keep_bare_episodes(
        self,
        windower: EpisodeWindowerService,
        mock_title_client: MagicMock,
        mock_banner_client: MagicMock,
    ) -> None:
        mock_title_client.get_episodes.side_effect = UpstreamFetchError("HTTP 429", status_code=429)
        mock_banner_client.get_episodes.side_effect = MalformedResponseError("titre invalide")

        episodes = await windower.fetch_episodes("12-one-piece", 0)

        assert len(episodes) == 3
        assert all(ep.title is None and ep.thumbnail_url is None for ep in episodes)

    @pytest.mark.asyncio
    async def test_missing_foreign_ids_skip_enrichment(
        self,
        windower: EpisodeWindowerService,
        mock_catalog: MagicMock,
        mock_title_client: MagicMock,
        mock_banner_client: MagicMock,
        au_show: AUShow,
    ) -> None:
        mock_catalog.get_show.return_value = dataclasses.replace(
            au_show, mal_id=None, anilist_id=0
        )

        episodes = await windower.fetch_episodes("12-one-piece", 0)

        assert len(episodes) == 3
        mock_title_client.get_episodes.assert_not_awaited()
        mock_banner_client.get_episodes.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unreadable_number_falls_back_to_position(
        self, windower: EpisodeWindowerService, mock_catalog: MagicMock
    ) -> None:
        mock_catalog.get_episodes.return_value = [
            AUEpisode(id="6001", number=""),
            AUEpisode(id="6002", number="102"),
        ]

        episodes = await windower.fetch_episodes("12-one-piece", 1)

        assert [ep.number for ep in episodes] == [101, 102]

    @pytest.mark.asyncio
    async def test_primary_failure_propagates(
        self, windower: EpisodeWindowerService, mock_catalog: MagicMock
    ) -> None:
        mock_catalog.get_episodes.side_effect = UpstreamFetchError("HTTP 500", status_code=500)

        with pytest.raises(UpstreamFetchError):
            await windower.fetch_episodes("12-one-piece", 0)

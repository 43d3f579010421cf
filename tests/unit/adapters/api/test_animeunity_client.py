"""
Tests du client du catalogue AnimeUnity.

Utilise respx pour simuler les requetes HTTP. Les pages sont construites a partir
des fixtures JSON et embarquees en attributs HTML, comme sur le vrai site.
"""

import httpx
import pytest
import respx

from src.adapters.api.animeunity_client import AnimeUnityClient, parse_show
from src.core.exceptions import MalformedResponseError, UpstreamFetchError
from src.core.ports.api_clients import IPrimaryCatalogClient
from tests.fixtures.animeunity_responses import (
    AU_BASE_URL,
    AU_EMBED_URL,
    AU_EPISODES_RESPONSE,
    AU_SHOW_MOVIE,
    AU_SHOW_ONE_PIECE,
    archive_page,
    show_page,
    top_anime_page,
)


@pytest.fixture
def client() -> AnimeUnityClient:
    return AnimeUnityClient(base_url=AU_BASE_URL)


class TestParseShow:
    """Tests de la traduction des fiches natives."""

    def test_translates_native_fields(self) -> None:
        show = parse_show(AU_SHOW_ONE_PIECE, episodes_count=1100)

        assert show.id == 12
        assert show.slug == "one-piece"
        assert show.title == "One Piece"
        assert show.score == "8.7"
        assert show.dub is False
        assert show.mal_id == 21
        assert show.anilist_id == 21
        assert show.genres == ("Action", "Adventure")
        assert show.episodes_count == 1100

    def test_falls_back_to_original_title_and_reads_dub(self) -> None:
        show = parse_show({**AU_SHOW_MOVIE, "title_eng": None})

        assert show.title == "Howl no Ugoku Shiro"
        assert show.dub is True
        assert show.mal_id is None

    def test_missing_id_is_malformed(self) -> None:
        with pytest.raises(MalformedResponseError):
            parse_show({"slug": "no-id"})


class TestAnimeUnityClient:
    """Tests des endpoints du client AnimeUnity."""

    def test_implements_interface(self, client: AnimeUnityClient) -> None:
        assert isinstance(client, IPrimaryCatalogClient)
        assert client.source == "animeunity"

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_reads_archive_records(self, client: AnimeUnityClient) -> None:
        route = respx.get(f"{AU_BASE_URL}archivio").mock(
            return_value=httpx.Response(200, text=archive_page([AU_SHOW_ONE_PIECE]))
        )
        try:
            results = await client.search("one piece")

            assert [show.id for show in results] == [12]
            assert route.calls[0].request.url.params["title"] == "one piece"
        finally:
            await client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_show_reads_video_player(self, client: AnimeUnityClient) -> None:
        respx.get(f"{AU_BASE_URL}anime/12").mock(
            return_value=httpx.Response(200, text=show_page(AU_SHOW_ONE_PIECE, 250))
        )
        try:
            show = await client.get_show(12)

            assert show.title == "One Piece"
            assert show.episodes_count == 250
        finally:
            await client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_show_without_player_is_malformed(self, client: AnimeUnityClient) -> None:
        respx.get(f"{AU_BASE_URL}anime/12").mock(
            return_value=httpx.Response(200, text="<html><body>Maintenance</body></html>")
        )
        try:
            with pytest.raises(MalformedResponseError):
                await client.get_show(12)
        finally:
            await client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_show_http_error_is_upstream(self, client: AnimeUnityClient) -> None:
        respx.get(f"{AU_BASE_URL}anime/12").mock(return_value=httpx.Response(500))
        try:
            with pytest.raises(UpstreamFetchError):
                await client.get_show(12)
        finally:
            await client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_episodes_requests_window(self, client: AnimeUnityClient) -> None:
        route = respx.get(f"{AU_BASE_URL}info_api/12/1").mock(
            return_value=httpx.Response(200, json=AU_EPISODES_RESPONSE)
        )
        try:
            episodes = await client.get_episodes(12, start=101, limit=100)

            params = route.calls[0].request.url.params
            assert params["start_range"] == "101"
            assert params["end_range"] == "200"
            assert [ep.id for ep in episodes] == ["5001", "5002", "5003"]
            assert episodes[2].number == "2.5"
        finally:
            await client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_embed_url_strips_text(self, client: AnimeUnityClient) -> None:
        respx.get(f"{AU_BASE_URL}embed-url/5001").mock(
            return_value=httpx.Response(200, text=f"  {AU_EMBED_URL}\n")
        )
        try:
            assert await client.get_embed_url(5001) == AU_EMBED_URL
        finally:
            await client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_empty_embed_url_is_malformed(self, client: AnimeUnityClient) -> None:
        respx.get(f"{AU_BASE_URL}embed-url/5001").mock(return_value=httpx.Response(200, text=""))
        try:
            with pytest.raises(MalformedResponseError):
                await client.get_embed_url(5001)
        finally:
            await client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_archive_builds_ranking_params(self, client: AnimeUnityClient) -> None:
        route = respx.get(f"{AU_BASE_URL}top-anime").mock(
            return_value=httpx.Response(
                200, text=top_anime_page([AU_SHOW_ONE_PIECE, AU_SHOW_MOVIE])
            )
        )
        try:
            shows = await client.get_archive(2, order_by="views", show_type="TV")

            params = route.calls[0].request.url.params
            assert params["page"] == "2"
            assert params["order"] == "most_viewed"
            assert params["type"] == "TV"
            assert "popular" not in params
            assert [show.id for show in shows] == [12, 336]
        finally:
            await client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_archive_first_page_by_popularity(self, client: AnimeUnityClient) -> None:
        route = respx.get(f"{AU_BASE_URL}top-anime").mock(
            return_value=httpx.Response(200, text=top_anime_page([]))
        )
        try:
            assert await client.get_archive(1, order_by="popularity") == []

            params = route.calls[0].request.url.params
            assert "page" not in params
            assert params["popular"] == "true"
        finally:
            await client.close()

"""
Fixtures pytest partagees pour les tests AnimeBridge.

Ce module contient les fixtures communes utilisees dans les tests:
- Mocks des ports (catalogue principal et sources d'enrichissement)
- Settings de test avec chemins temporaires
"""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.config import Settings
from src.core.ports.api_clients import (
    AUShow,
    IBannerClient,
    ICoverImageClient,
    IEpisodeTitleClient,
    IPrimaryCatalogClient,
)


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Les URLs pointent vers des hotes fictifs : les tests ne doivent jamais
    atteindre le reseau.
    """
    return Settings(
        animeunity_base_url="https://au.test/",
        jikan_base_url="https://jikan.test/v4/",
        anilist_base_url="https://anilist.test/",
        kitsu_base_url="https://kitsu.test/api/edge/",
        feed_dir=tmp_path / "assets",
        feed_delay_min=0,
        feed_delay_max=0,
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def au_show() -> AUShow:
    """Fiche du catalogue principal d'une serie de 250 episodes."""
    return AUShow(
        id=12,
        slug="one-piece",
        title="One Piece",
        type="TV",
        date="1999",
        plot="Monkey D. Luffy vuole diventare il Re dei pirati.",
        season="Autunno",
        episodes_length=24,
        score="8.7",
        image_url="https://img.au/one-piece.jpg",
        cover_url="https://img.au/one-piece-cover.jpg",
        status="In Corso",
        anilist_id=21,
        mal_id=21,
        genres=("Action", "Adventure"),
        episodes_count=250,
    )


@pytest.fixture
def mock_catalog(au_show: AUShow) -> MagicMock:
    """
    Mock de IPrimaryCatalogClient.

    get_show retourne au_show par defaut ; les autres methodes retournent
    des listes vides.
    """
    mock = MagicMock(spec=IPrimaryCatalogClient)
    mock.source = "animeunity"
    mock.search = AsyncMock(return_value=[])
    mock.get_show = AsyncMock(return_value=au_show)
    mock.get_episodes = AsyncMock(return_value=[])
    mock.get_embed_url = AsyncMock(return_value="https://vixcloud.co/embed/90001")
    mock.get_archive = AsyncMock(return_value=[])
    return mock


@pytest.fixture
def mock_title_client() -> MagicMock:
    """Mock de IEpisodeTitleClient (Jikan)."""
    mock = MagicMock(spec=IEpisodeTitleClient)
    mock.source = "jikan"
    mock.get_show = AsyncMock()
    mock.get_episodes = AsyncMock(return_value=[])
    return mock


@pytest.fixture
def mock_banner_client() -> MagicMock:
    """Mock de IBannerClient (AniList)."""
    mock = MagicMock(spec=IBannerClient)
    mock.source = "anilist"
    mock.get_show = AsyncMock()
    mock.get_episodes = AsyncMock(return_value=[])
    return mock


@pytest.fixture
def mock_cover_client() -> MagicMock:
    """Mock de ICoverImageClient (Kitsu)."""
    mock = MagicMock(spec=ICoverImageClient)
    mock.source = "kitsu"
    mock.get_show = AsyncMock()
    return mock

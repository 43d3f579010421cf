"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web.
Chaque client recoit son URL de base depuis Settings a la construction.
"""

from dependency_injector import containers, providers

from .adapters.api.anilist_client import AnilistClient
from .adapters.api.animeunity_client import AnimeUnityClient
from .adapters.api.jikan_client import JikanClient
from .adapters.api.kitsu_client import KitsuClient
from .adapters.feeds.json_feed_store import JsonFeedStore
from .adapters.playlist.vixcloud import VixcloudPlaylistResolver
from .config import Settings
from .services.catalog import CatalogService
from .services.episode_windower import EpisodeWindowerService
from .services.feed_generator import FeedGeneratorService
from .services.feed_provider import FeedProviderService
from .services.show_aggregator import ShowAggregatorService
from .services.video_resolver import VideoResolverService


def _optional_cover_client(enabled: bool, client: KitsuClient):
    """Retourne le client Kitsu si la couverture Kitsu est activee."""
    return client if enabled else None


def _delay_range(low: float, high: float) -> tuple[float, float]:
    return (low, high)


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        aggregator = container.show_aggregator_service()
        show = await aggregator.fetch_show("1234-one-piece")
        await close_clients(container)
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Clients API - Singleton pour partager le pool de connexions httpx
    animeunity_client = providers.Singleton(
        AnimeUnityClient,
        base_url=config.provided.animeunity_base_url,
        timeout=config.provided.http_timeout,
        max_attempts=config.provided.http_max_attempts,
    )
    jikan_client = providers.Singleton(
        JikanClient,
        base_url=config.provided.jikan_base_url,
        timeout=config.provided.http_timeout,
        max_attempts=config.provided.http_max_attempts,
    )
    anilist_client = providers.Singleton(
        AnilistClient,
        base_url=config.provided.anilist_base_url,
        timeout=config.provided.http_timeout,
        max_attempts=config.provided.http_max_attempts,
    )
    kitsu_client = providers.Singleton(
        KitsuClient,
        base_url=config.provided.kitsu_base_url,
        timeout=config.provided.http_timeout,
        max_attempts=config.provided.http_max_attempts,
    )
    playlist_resolver = providers.Singleton(
        VixcloudPlaylistResolver,
        timeout=config.provided.http_timeout,
        max_attempts=config.provided.http_max_attempts,
    )

    # Stockage des flux statiques
    feed_store = providers.Singleton(
        JsonFeedStore,
        feed_dir=config.provided.feed_dir,
    )

    # Services (sans etat - Factory)
    catalog_service = providers.Factory(
        CatalogService,
        catalog=animeunity_client,
    )
    show_aggregator_service = providers.Factory(
        ShowAggregatorService,
        catalog=animeunity_client,
        title_client=jikan_client,
        banner_client=anilist_client,
        cover_client=providers.Callable(
            _optional_cover_client,
            enabled=config.provided.kitsu_enabled,
            client=kitsu_client,
        ),
    )
    episode_windower_service = providers.Factory(
        EpisodeWindowerService,
        catalog=animeunity_client,
        title_client=jikan_client,
        banner_client=anilist_client,
    )
    video_resolver_service = providers.Factory(
        VideoResolverService,
        catalog=animeunity_client,
        playlist_resolver=playlist_resolver,
    )
    feed_provider_service = providers.Factory(
        FeedProviderService,
        store=feed_store,
    )
    feed_generator_service = providers.Factory(
        FeedGeneratorService,
        catalog=animeunity_client,
        store=feed_store,
        delay_range=providers.Callable(
            _delay_range,
            config.provided.feed_delay_min,
            config.provided.feed_delay_max,
        ),
    )


async def close_clients(container: Container) -> None:
    """Ferme les connexions HTTP des clients partages par le container."""
    for provider in (
        container.animeunity_client,
        container.jikan_client,
        container.anilist_client,
        container.kitsu_client,
        container.playlist_resolver,
    ):
        await provider().close()

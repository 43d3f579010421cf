"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports client API : Contrats pour les catalogues externes
- IPrimaryCatalogClient : Catalogue principal (AnimeUnity)
- IEpisodeTitleClient : Titres d'épisodes (Jikan)
- IBannerClient : Bannières et miniatures (AniList)
- ICoverImageClient : Affiches et couvertures (Kitsu)

Autres ports :
- IPlaylistResolver : Extraction de playlist depuis une URL d'embed
- IFeedStore : Flux statiques pré-générés
"""

from src.core.ports.api_clients import (
    AnilistEpisode,
    AnilistShow,
    AUEpisode,
    AUShow,
    IBannerClient,
    ICoverImageClient,
    IEpisodeTitleClient,
    IPrimaryCatalogClient,
    JikanEpisode,
    JikanShow,
    KitsuImage,
    KitsuShow,
)
from src.core.ports.feeds import IFeedStore
from src.core.ports.playlist import IPlaylistResolver

__all__ = [
    # Clients API
    "IPrimaryCatalogClient",
    "IEpisodeTitleClient",
    "IBannerClient",
    "ICoverImageClient",
    # DTOs
    "AUShow",
    "AUEpisode",
    "JikanShow",
    "JikanEpisode",
    "AnilistShow",
    "AnilistEpisode",
    "KitsuImage",
    "KitsuShow",
    # Autres
    "IPlaylistResolver",
    "IFeedStore",
]

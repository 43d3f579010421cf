"""
Clients API des catalogues externes.

Ce module fournit les adaptateurs pour communiquer avec les sources :
- AnimeUnity : catalogue principal (HTML avec JSON embarque + endpoints JSON)
- Jikan : miroir MyAnimeList (titres d'episodes, affiche, note)
- AniList : GraphQL (banniere, miniatures)
- Kitsu : JSON-API (affiche, couverture)

Infrastructure partagee:
- BaseAPIClient, fetch_json, fetch_text : transport httpx et conversion d'erreurs
- RateLimitError, request_with_retry : relance sur 429 avec backoff exponentiel
- extract_embedded_json : lecture du JSON embarque dans le HTML

Les clients implementent les ports definis dans core/ports/api_clients.py.
"""

from src.adapters.api.anilist_client import AnilistClient
from src.adapters.api.animeunity_client import AnimeUnityClient
from src.adapters.api.jikan_client import JikanClient
from src.adapters.api.kitsu_client import KitsuClient
from src.adapters.api.retry import RateLimitError, request_with_retry, with_retry
from src.adapters.api.transport import BaseAPIClient, fetch_json, fetch_text

__all__ = [
    "AnimeUnityClient",
    "JikanClient",
    "AnilistClient",
    "KitsuClient",
    "BaseAPIClient",
    "fetch_json",
    "fetch_text",
    "RateLimitError",
    "request_with_retry",
    "with_retry",
]

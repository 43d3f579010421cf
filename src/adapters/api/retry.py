"""
Relance des requetes HTTP sur rate limiting (429).

Jikan et AniList imposent un quota de requetes par minute : une reponse 429
est relancee avec un backoff exponentiel et du jitter. Aucune autre erreur
n'est relancee, les echecs du catalogue principal comme des sources
d'enrichissement remontent immediatement.

Usage:
    response = await request_with_retry(client, "GET", "anime/1", max_attempts=3)
"""

from typing import Optional

import httpx
from loguru import logger
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)


class RateLimitError(Exception):
    """
    Exception levee quand l'API retourne 429 Too Many Requests.

    Attributes:
        retry_after: Secondes a attendre (header Retry-After), ou None.
    """

    def __init__(self, retry_after: Optional[int] = None) -> None:
        self.retry_after = retry_after
        super().__init__(f"Rate limited. Retry after: {retry_after}s")


def _log_retry(retry_state: RetryCallState) -> None:
    """Trace chaque relance avant la pause de backoff."""
    logger.debug(
        "Rate limit atteint, nouvelle tentative",
        attempt=retry_state.attempt_number,
    )


def with_retry(max_attempts: int = 3, max_wait: int = 30):
    """
    Decorateur relancant une coroutine sur RateLimitError.

    Args:
        max_attempts: Nombre maximum de tentatives
        max_wait: Delai maximum entre deux tentatives en secondes
    """
    return retry(
        retry=retry_if_exception_type(RateLimitError),
        wait=wait_random_exponential(multiplier=1, min=1, max=max_wait),
        stop=stop_after_attempt(max_attempts),
        before_sleep=_log_retry,
        reraise=True,
    )


def _parse_retry_after(value: Optional[str]) -> Optional[int]:
    """Lit le header Retry-After (secondes), ignore les formats date."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    max_attempts: int = 3,
    **kwargs,
) -> httpx.Response:
    """
    Execute une requete HTTP avec relance automatique sur 429.

    Args:
        client: Client httpx async
        method: Methode HTTP
        url: URL absolue ou relative a la base du client
        max_attempts: Nombre maximum de tentatives
        **kwargs: Arguments passes a client.request()

    Returns:
        httpx.Response en cas de succes (2xx)

    Raises:
        RateLimitError: Si 429 apres epuisement des tentatives
        httpx.HTTPStatusError: Pour les autres reponses non-2xx
        httpx.RequestError: Pour les erreurs reseau
    """

    @with_retry(max_attempts=max_attempts)
    async def _do_request() -> httpx.Response:
        response = await client.request(method, url, **kwargs)
        if response.status_code == 429:
            raise RateLimitError(_parse_retry_after(response.headers.get("Retry-After")))
        response.raise_for_status()
        return response

    return await _do_request()

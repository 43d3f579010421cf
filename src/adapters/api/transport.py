"""
Transport HTTP partage par les clients des catalogues.

Fournit :
- BaseAPIClient : gestion paresseuse d'un httpx.AsyncClient par source
- fetch_json / fetch_text : requetes avec relance sur 429 et conversion des
  erreurs httpx vers les exceptions du domaine

Conversion des erreurs :
- httpx.HTTPStatusError, httpx.RequestError, RateLimitError -> UpstreamFetchError
- corps JSON illisible -> MalformedResponseError
"""

from typing import Any, Optional

import httpx
from loguru import logger

from src.adapters.api.retry import RateLimitError, request_with_retry
from src.core.exceptions import MalformedResponseError, UpstreamFetchError


async def _send(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    max_attempts: int,
    **kwargs,
) -> httpx.Response:
    """Execute la requete et convertit les erreurs de transport."""
    try:
        return await request_with_retry(
            client, method, url, max_attempts=max_attempts, **kwargs
        )
    except httpx.HTTPStatusError as e:
        raise UpstreamFetchError(
            f"{method} {e.request.url} -> HTTP {e.response.status_code}",
            url=str(e.request.url),
            status_code=e.response.status_code,
        ) from e
    except RateLimitError as e:
        raise UpstreamFetchError(
            f"{method} {url} -> rate limit persistant", url=url, status_code=429
        ) from e
    except httpx.RequestError as e:
        raise UpstreamFetchError(f"{method} {url} -> {e!r}", url=url) from e


async def fetch_json(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    max_attempts: int = 3,
    **kwargs,
) -> Any:
    """
    Execute une requete et decode le corps JSON.

    Raises:
        UpstreamFetchError: Erreur reseau ou reponse non-2xx
        MalformedResponseError: Corps non JSON
    """
    response = await _send(client, method, url, max_attempts, **kwargs)
    try:
        return response.json()
    except ValueError as e:
        raise MalformedResponseError(f"Reponse JSON invalide pour {url}") from e


async def fetch_text(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    max_attempts: int = 3,
    **kwargs,
) -> str:
    """
    Execute une requete et retourne le corps texte (HTML ou texte brut).

    Raises:
        UpstreamFetchError: Erreur reseau ou reponse non-2xx
    """
    response = await _send(client, method, url, max_attempts, **kwargs)
    return response.text


class BaseAPIClient:
    """
    Base commune des clients HTTP.

    Chaque client recoit son URL de base par injection (Settings) et cree
    son httpx.AsyncClient a la premiere requete.

    Attributes:
        DEFAULT_HEADERS: En-tetes envoyes a chaque requete de la source
    """

    DEFAULT_HEADERS: dict[str, str] = {}

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        max_attempts: int = 3,
    ) -> None:
        """
        Initialise le client.

        Args:
            base_url: URL de base de la source (terminee par "/")
            timeout: Timeout par requete en secondes
            max_attempts: Tentatives maximum sur 429
        """
        self._base_url = base_url
        self._timeout = timeout
        self._max_attempts = max_attempts
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def base_url(self) -> str:
        """URL de base injectee."""
        return self._base_url

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers=self.DEFAULT_HEADERS,
                timeout=self._timeout,
                follow_redirects=True,
            )
        return self._client

    async def _get_json(self, url: str, **kwargs) -> Any:
        """GET JSON relatif a la base (ou absolu)."""
        logger.debug("GET JSON", url=url, params=kwargs.get("params"))
        return await fetch_json(
            self._get_client(), "GET", url, max_attempts=self._max_attempts, **kwargs
        )

    async def _post_json(self, url: str, **kwargs) -> Any:
        """POST avec reponse JSON."""
        logger.debug("POST JSON", url=url)
        return await fetch_json(
            self._get_client(), "POST", url, max_attempts=self._max_attempts, **kwargs
        )

    async def _get_text(self, url: str, **kwargs) -> str:
        """GET texte (HTML ou texte brut)."""
        logger.debug("GET texte", url=url, params=kwargs.get("params"))
        return await fetch_text(
            self._get_client(), "GET", url, max_attempts=self._max_attempts, **kwargs
        )

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

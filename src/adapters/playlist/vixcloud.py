"""
Resolveur de playlist Vixcloud.

La page d'embed declare la playlist maitre dans un script :

    window.masterPlaylist = {
        params: {'token': '...', 'expires': '...'},
        url: 'https://vixcloud.co/playlist/123?b=1',
    }
    window.canPlayFHD = true

L'URL HLS finale est l'URL de la playlist completee par token et expires,
plus h=1 quand la version 1080p est disponible.
"""

import re

import httpx

from src.adapters.api.transport import BaseAPIClient
from src.core.entities.media import VideoAsset
from src.core.exceptions import MalformedResponseError
from src.core.ports.playlist import IPlaylistResolver

MASTER_PLAYLIST_PATTERN = re.compile(
    r"window\.masterPlaylist\s*=\s*(?P<body>.*?)(?:window\.|</script>|$)", re.DOTALL
)
URL_PATTERN = re.compile(r"""\burl\s*:\s*['"](?P<value>[^'"]+)['"]""")
TOKEN_PATTERN = re.compile(r"""['"]?token['"]?\s*:\s*['"](?P<value>[^'"]*)['"]""")
EXPIRES_PATTERN = re.compile(r"""['"]?expires['"]?\s*:\s*['"](?P<value>[^'"]*)['"]""")
FHD_PATTERN = re.compile(r"window\.canPlayFHD\s*=\s*true")


def _extract(pattern: re.Pattern, content: str, name: str, embed_url: str) -> str:
    """Extrait un groupe nomme ou leve MalformedResponseError."""
    match = pattern.search(content)
    if not match:
        raise MalformedResponseError(f"{name} introuvable dans {embed_url}")
    return match.group("value")


def build_playlist_asset(html: str, embed_url: str) -> VideoAsset:
    """
    Construit le VideoAsset a partir du HTML de la page d'embed.

    Raises:
        MalformedResponseError: Si masterPlaylist ou l'un de ses champs manque
    """
    block = MASTER_PLAYLIST_PATTERN.search(html)
    if not block:
        raise MalformedResponseError(f"masterPlaylist introuvable dans {embed_url}")
    body = block.group("body")

    playlist_url = _extract(URL_PATTERN, body, "URL de playlist", embed_url)
    params = {
        "token": _extract(TOKEN_PATTERN, body, "token", embed_url),
        "expires": _extract(EXPIRES_PATTERN, body, "expires", embed_url),
    }
    if FHD_PATTERN.search(html):
        params["h"] = "1"

    url = httpx.URL(playlist_url).copy_merge_params(params)
    return VideoAsset(url=str(url), format="hls", headers={"Referer": embed_url})


class VixcloudPlaylistResolver(BaseAPIClient, IPlaylistResolver):
    """Resout une URL d'embed Vixcloud en playlist HLS."""

    def __init__(self, timeout: float = 30.0, max_attempts: int = 3) -> None:
        super().__init__(base_url="", timeout=timeout, max_attempts=max_attempts)

    async def resolve(self, embed_url: str) -> VideoAsset:
        """Telecharge la page d'embed et en extrait la playlist."""
        html = await self._get_text(embed_url)
        return build_playlist_asset(html, embed_url)

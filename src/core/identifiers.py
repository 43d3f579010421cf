"""
Codec des identifiants composites.

Un identifiant de serie a la forme "<id numerique>-<slug>" ; un identifiant
d'episode a la forme "<id de serie>/<media id>". Ces fonctions sont l'unique
source de verite du format : aucun autre module ne doit re-decouper un
identifiant a la main.

Exemples:
    >>> compose_show_id(1234, "one-piece")
    '1234-one-piece'
    >>> decompose_show_id("1234-one-piece")
    1234
    >>> decompose_episode_id("1234-one-piece/56789")
    EpisodeRef(show_id='1234-one-piece', media_id='56789')
"""

from typing import NamedTuple, Union

from src.core.exceptions import MalformedIdError

SHOW_ID_SEPARATOR = "-"
EPISODE_ID_SEPARATOR = "/"


class EpisodeRef(NamedTuple):
    """Identifiant d'episode decompose (id de serie complet + media id)."""

    show_id: str
    media_id: str


def compose_show_id(primary_id: int, slug: str) -> str:
    """Construit l'identifiant composite d'une serie."""
    return f"{primary_id}{SHOW_ID_SEPARATOR}{slug}"


def decompose_show_id(show_id: str) -> int:
    """
    Extrait l'id numerique du catalogue principal d'un identifiant de serie.

    Le slug n'est jamais interprete : seul le segment avant le premier "-"
    est lu.

    Raises:
        MalformedIdError: Si le segment initial n'est pas numerique
    """
    leading, _, _ = show_id.partition(SHOW_ID_SEPARATOR)
    if not leading.isdecimal():
        raise MalformedIdError(show_id, "le segment initial n'est pas numerique")
    return int(leading)


def compose_episode_id(show_id: str, media_id: Union[int, str]) -> str:
    """Construit l'identifiant composite d'un episode."""
    return f"{show_id}{EPISODE_ID_SEPARATOR}{media_id}"


def decompose_episode_id(episode_id: str) -> EpisodeRef:
    """
    Separe un identifiant d'episode en (id de serie, media id).

    Raises:
        MalformedIdError: Si l'identifiant ne contient pas exactement un "/"
            ou si l'un des segments est vide
    """
    show_id, separator, media_id = episode_id.partition(EPISODE_ID_SEPARATOR)
    if not separator:
        raise MalformedIdError(episode_id, "separateur '/' absent")
    if EPISODE_ID_SEPARATOR in media_id:
        raise MalformedIdError(episode_id, "plus d'un separateur '/'")
    if not show_id or not media_id:
        raise MalformedIdError(episode_id, "segment vide")
    return EpisodeRef(show_id=show_id, media_id=media_id)


def is_episode_id(identifier: str) -> bool:
    """Indique si l'identifiant est de forme episode (contient un "/")."""
    return EPISODE_ID_SEPARATOR in identifier

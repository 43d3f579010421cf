"""
Etape d'enrichissement optionnelle.

Un enrichissement est tente aupres d'une source secondaire ; en cas d'echec
connu (AnimeBridgeError) l'appelant recoit un EnrichmentOutcome sans valeur
mais portant l'erreur, et conserve ses valeurs de base. Les erreurs de
programmation ne sont pas capturees.
"""

from dataclasses import dataclass
from typing import Awaitable, Callable, Generic, Optional, TypeVar

from loguru import logger

from src.core.exceptions import AnimeBridgeError

T = TypeVar("T")


@dataclass(frozen=True)
class EnrichmentOutcome(Generic[T]):
    """
    Resultat d'une tentative d'enrichissement.

    Attributes:
        source: Identifiant de la source ("jikan", "anilist", "kitsu")
        value: Donnees obtenues, None si ignoree ou en echec
        error: Erreur capturee, None si succes ou ignoree
        attempted: False si l'enrichissement n'a pas ete tente (id etranger absent)
    """

    source: str
    value: Optional[T] = None
    error: Optional[AnimeBridgeError] = None
    attempted: bool = True

    @property
    def succeeded(self) -> bool:
        """Vrai si l'appel a ete tente et a abouti."""
        return self.attempted and self.error is None

    @classmethod
    def skipped(cls, source: str) -> "EnrichmentOutcome[T]":
        """Enrichissement non tente faute d'identifiant etranger."""
        return cls(source=source, attempted=False)


async def attempt_enrichment(
    source: str,
    fetch: Callable[[], Awaitable[T]],
    subject: str = "",
) -> EnrichmentOutcome[T]:
    """
    Tente un appel d'enrichissement.

    Args:
        source: Identifiant de la source
        fetch: Fabrique de la coroutine a executer
        subject: Description de l'objet enrichi, pour les logs

    Returns:
        EnrichmentOutcome avec la valeur, ou avec l'erreur capturee
    """
    try:
        value = await fetch()
    except AnimeBridgeError as e:
        logger.warning(f"Enrichissement {source} indisponible ({subject}): {e}")
        return EnrichmentOutcome(source=source, error=e)
    logger.debug(f"Enrichissement {source} obtenu ({subject})")
    return EnrichmentOutcome(source=source, value=value)

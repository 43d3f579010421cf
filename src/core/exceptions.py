"""
Exceptions du domaine AnimeBridge.

Toutes les erreurs levees par les clients et les services heritent de
AnimeBridgeError, ce qui permet aux etapes d'enrichissement de ne capturer
que les erreurs connues sans masquer les erreurs de programmation.
"""

from typing import Optional


class AnimeBridgeError(Exception):
    """Erreur de base du domaine AnimeBridge."""


class UpstreamFetchError(AnimeBridgeError):
    """
    Echec de transport ou reponse non-2xx d'une source externe.

    Attributes:
        url: URL appelee
        status_code: Code HTTP recu, ou None pour une erreur reseau
    """

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class MalformedResponseError(AnimeBridgeError):
    """Reponse JSON/HTML dont la forme ne correspond pas au contrat attendu."""


class MalformedIdError(AnimeBridgeError):
    """
    Identifiant composite impossible a decoder.

    Attributes:
        identifier: L'identifiant fautif
    """

    def __init__(self, identifier: str, reason: str) -> None:
        self.identifier = identifier
        super().__init__(f"Identifiant invalide '{identifier}': {reason}")


class MediaNotFoundError(AnimeBridgeError):
    """Aucun media id n'a pu etre determine pour la resolution video."""


class MappingNotFoundError(AnimeBridgeError):
    """L'indirection id etranger -> id natif ne donne aucun resultat."""

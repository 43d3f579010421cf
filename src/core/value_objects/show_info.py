"""
Objets valeur decrivant une serie du catalogue.

Enumerations canoniques (type de serie, statut de diffusion) et fenetre de
saison. Ces objets sont immutables et comparables par valeur.
"""

from dataclasses import dataclass
from enum import Enum


class ShowKind(str, Enum):
    """Type de serie canonique.

    Valeurs:
        MOVIE: Film (un seul media lisible)
        SERIES: Serie (episodes repartis en fenetres de saison)
    """

    MOVIE = "movie"
    SERIES = "series"


class ShowStatus(str, Enum):
    """Statut de diffusion canonique.

    Valeurs:
        AIRING: En cours de diffusion
        ENDED: Terminee
        UPCOMING: A venir
        CANCELED: Abandonnee
    """

    AIRING = "airing"
    ENDED = "ended"
    UPCOMING = "upcoming"
    CANCELED = "canceled"


@dataclass(frozen=True)
class Season:
    """
    Fenetre de 100 episodes utilisee pour la pagination.

    Sans rapport avec une saison de diffusion : la saison 0 couvre les
    episodes 1-100, la saison 1 les episodes 101-200, etc.

    Attributs:
        number: Index de la fenetre (commence a 0)
        name: Plage d'episodes lisible (ex: "101-200")
    """

    number: int
    name: str

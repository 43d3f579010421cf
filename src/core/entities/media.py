"""
Entites canoniques du catalogue.

Entites representant les series, episodes et assets video produits par
la fusion du catalogue principal et des sources d'enrichissement.
Toutes sont reconstruites a chaque requete et jamais modifiees ensuite.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Union

from src.core.value_objects import Season, ShowKind, ShowStatus


@dataclass(frozen=True)
class ShowEntry:
    """
    Projection d'une serie dans un resultat de recherche ou une collection.

    Attributes:
        kind: Type de serie (film ou serie)
        id: Identifiant composite "<id>-<slug>"
        title: Titre affiche
        poster_url: URL de l'affiche
        year: Annee de sortie, None si illisible
    """

    kind: ShowKind
    id: str
    title: str
    poster_url: Optional[str] = None
    year: Optional[int] = None


@dataclass(frozen=True)
class Show:
    """
    Serie canonique issue de l'agregation des sources.

    Attributes:
        id: Identifiant composite "<id>-<slug>"
        kind: Type de serie
        title: Titre affiche
        overview: Synopsis (chaine vide si absent)
        genres: Noms des genres dans l'ordre de la source
        duration_seconds: Duree d'un episode en secondes
        release_date: Date de sortie (toujours le 1er du mois), None si annee illisible
        seasons: Fenetres d'episodes, None pour un film
        poster_url: URL de l'affiche
        backdrop_url: URL de l'image de fond
        rating: Note (0 si inconnue)
        status: Statut de diffusion, None si inconnu
    """

    id: str
    kind: ShowKind
    title: str
    overview: str = ""
    genres: tuple[str, ...] = ()
    duration_seconds: int = 0
    release_date: Optional[date] = None
    seasons: Optional[tuple[Season, ...]] = None
    poster_url: Optional[str] = None
    backdrop_url: Optional[str] = None
    rating: float = 0.0
    status: Optional[ShowStatus] = None


@dataclass(frozen=True)
class Episode:
    """
    Episode d'une fenetre de saison.

    Attributes:
        id: Identifiant composite "<id de serie>/<media id>"
        number: Numero absolu de l'episode (entier si possible)
        title: Titre issu de Jikan, si disponible
        thumbnail_url: Miniature issue d'AniList, si disponible
    """

    id: str
    number: Union[int, float]
    title: Optional[str] = None
    thumbnail_url: Optional[str] = None


@dataclass(frozen=True)
class VideoAsset:
    """
    Manifeste video lisible renvoye par le resolveur de playlist.

    Attributes:
        url: URL de la playlist
        format: Format du manifeste (ex: "hls")
        headers: En-tetes HTTP requis pour la lecture
    """

    url: str
    format: str = "hls"
    headers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class FeedCollection:
    """Collection pre-generee de series pour le flux d'accueil."""

    id: str
    name: str
    shows: tuple[ShowEntry, ...] = ()

"""
Fonctions de traduction DTO -> champs canoniques.

Chaque fonction est totale : une valeur native absente ou illisible donne
la valeur canonique par defaut (0, None, janvier...) au lieu d'une erreur.
"""

import math
from datetime import date
from typing import Any, Optional, Union

from src.core.entities.media import ShowEntry
from src.core.identifiers import compose_show_id
from src.core.ports.api_clients import AUShow
from src.core.value_objects import ShowKind, ShowStatus

# Categorie native designant un film dans le catalogue principal
MOVIE_TYPE = "Movie"

# Saison de sortie (libelles italiens) -> mois de sortie
SEASON_TO_MONTH = {
    "inverno": 1,
    "primavera": 4,
    "estate": 7,
    "autunno": 10,
}

# Statut natif (libelles italiens, casse ignoree) -> statut canonique
STATUS_MAPPING = {
    "in corso": ShowStatus.AIRING,
    "terminato": ShowStatus.ENDED,
    "in uscita": ShowStatus.UPCOMING,
    "droppato": ShowStatus.CANCELED,
}


def kind_from_type(show_type: Optional[str]) -> ShowKind:
    """MOVIE si la categorie native est exactement "Movie", SERIES sinon."""
    return ShowKind.MOVIE if show_type == MOVIE_TYPE else ShowKind.SERIES


def parse_year(raw: Any) -> Optional[int]:
    """Lit une annee "YYYY", None si absente ou non numerique."""
    if raw is None or isinstance(raw, bool):
        return None
    text = str(raw).strip()
    return int(text) if text.isdecimal() else None


def parse_score(raw: Any) -> float:
    """
    Lit une note numerique ou decimale en chaine.

    Examples:
        >>> parse_score("7.5")
        7.5
        >>> parse_score("abc")
        0.0
        >>> parse_score(None)
        0.0
    """
    if raw is None or isinstance(raw, bool):
        return 0.0
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        try:
            value = float(str(raw).strip())
        except ValueError:
            return 0.0
    return value if math.isfinite(value) else 0.0


def release_date_from_season(
    year: Optional[int], season: Optional[str] = None
) -> Optional[date]:
    """
    Synthetise une date de sortie au 1er du mois de la saison.

    Saison inconnue ou absente -> janvier. Annee absente -> None.
    """
    if year is None or not 1 <= year <= 9999:
        return None
    month = SEASON_TO_MONTH.get((season or "").strip().lower(), 1)
    return date(year, month, 1)


def map_status(raw: Optional[str]) -> Optional[ShowStatus]:
    """Traduit un statut natif, None si absent ou non reconnu."""
    if not raw:
        return None
    return STATUS_MAPPING.get(raw.strip().lower())


def parse_episode_number(raw: Any) -> Union[int, float, None]:
    """
    Lit un numero d'episode natif ("12", "12.5").

    Retourne un int quand le numero est entier, un float sinon, None si illisible.
    """
    try:
        value = float(str(raw).strip())
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return int(value) if value.is_integer() else value


def show_entry_from_au(show: AUShow) -> ShowEntry:
    """Projette une fiche du catalogue principal en ShowEntry."""
    return ShowEntry(
        kind=kind_from_type(show.type),
        id=compose_show_id(show.id, show.slug),
        title=show.title,
        poster_url=show.image_url,
        year=parse_year(show.date),
    )


def show_entry_payload(entry: ShowEntry) -> dict[str, Any]:
    """Serialise un ShowEntry pour les flux JSON."""
    return {
        "kind": entry.kind.value,
        "id": entry.id,
        "title": entry.title,
        "poster_url": entry.poster_url,
        "year": entry.year,
    }

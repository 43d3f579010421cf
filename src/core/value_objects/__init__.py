"""
Objets valeur immutables representant des concepts du domaine sans identite.

Les objets valeur sont definis par leurs attributs plutot que par une identite.
Ils sont immutables et peuvent etre librement partages et compares par valeur.

Exports :
- ShowKind : Type de serie (MOVIE, SERIES)
- ShowStatus : Statut de diffusion (AIRING, ENDED, UPCOMING, CANCELED)
- Season : Fenetre de 100 episodes
"""

from src.core.value_objects.show_info import Season, ShowKind, ShowStatus

__all__ = [
    "Season",
    "ShowKind",
    "ShowStatus",
]

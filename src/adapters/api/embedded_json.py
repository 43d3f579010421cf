"""
Extraction du JSON embarque dans les pages HTML du catalogue principal.

Le catalogue principal n'expose pas d'API pour ses fiches : les donnees sont
serialisees en JSON dans un attribut d'un element personnalise, par exemple
<video-player anime="{...}" episodes_count="12">.
"""

import json
from typing import Any, Optional

from bs4 import BeautifulSoup, Tag

from src.core.exceptions import MalformedResponseError


def find_element(html: str, element: str, attribute: str) -> Tag:
    """
    Retourne le premier element portant l'attribut demande.

    Raises:
        MalformedResponseError: Si aucun element ne porte l'attribut
    """
    soup = BeautifulSoup(html, "html.parser")
    tag = soup.find(element, attrs={attribute: True})
    if not isinstance(tag, Tag):
        raise MalformedResponseError(f"Element {element}[{attribute}] introuvable")
    return tag


def extract_embedded_json(html: str, element: str, attribute: str) -> str:
    """
    Retourne la valeur brute de element[attribute].

    Raises:
        MalformedResponseError: Si l'attribut est absent ou vide
    """
    return _raw_attribute(find_element(html, element, attribute), element, attribute)


def parse_json_attribute(tag: Tag, attribute: str) -> Any:
    """
    Decode le JSON porte par un attribut d'un element deja localise.

    Raises:
        MalformedResponseError: Si l'attribut est absent ou non JSON
    """
    raw = _raw_attribute(tag, tag.name, attribute)
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedResponseError(
            f"JSON embarque illisible dans {tag.name}[{attribute}]"
        ) from e


def load_embedded_json(html: str, element: str, attribute: str) -> Any:
    """Extrait et decode le JSON de element[attribute]."""
    return parse_json_attribute(find_element(html, element, attribute), attribute)


def read_int_attribute(tag: Tag, attribute: str) -> Optional[int]:
    """Lit un attribut entier, None si absent ou non numerique."""
    value = tag.get(attribute)
    if not isinstance(value, str):
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _raw_attribute(tag: Tag, element: str, attribute: str) -> str:
    value = tag.get(attribute)
    if not value or not isinstance(value, str):
        raise MalformedResponseError(f"Attribut {element}[{attribute}] vide")
    return value

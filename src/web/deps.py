"""
Dépendances partagées de l'application web.

Fournit la version de l'application et l'accès au container DI.
"""

import tomllib
from pathlib import Path

from fastapi import Request

from ..container import Container

_WEB_DIR = Path(__file__).parent
_PROJECT_ROOT = _WEB_DIR.parent.parent

# Version dynamique lue depuis pyproject.toml
with open(_PROJECT_ROOT / "pyproject.toml", "rb") as f:
    _pyproject = tomllib.load(f)
APP_VERSION = _pyproject["project"]["version"]


def get_container(request: Request) -> Container:
    """Container DI cree au demarrage de l'application."""
    return request.app.state.container

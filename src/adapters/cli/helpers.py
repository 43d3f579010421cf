"""
Utilitaires partages pour les commandes CLI d'AnimeBridge.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container initialise
- exit_on_error : conversion des erreurs du domaine en message + code de sortie
"""

from contextlib import contextmanager
from functools import wraps

import typer
from loguru import logger as loguru_logger
from rich.console import Console
from rich.markup import escape

from src.container import Container, close_clients
from src.core.exceptions import AnimeBridgeError

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("src")
    try:
        yield
    finally:
        loguru_logger.enable("src")


def with_container():
    """
    Decorateur qui injecte un container initialise en premier argument.

    Les clients HTTP du container sont fermes a la fin de la commande.

    Usage:
        @with_container()
        async def my_command(container, ...):
            config = container.config()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            try:
                return await func(container, *args, **kwargs)
            finally:
                await close_clients(container)
        return wrapper
    return decorator


def exit_on_error(func):
    """
    Affiche les erreurs du domaine en rouge et termine avec le code 1.

    S'applique a la commande Typer synchrone qui appelle asyncio.run().
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except AnimeBridgeError as e:
            console.print(f"[red]Erreur:[/red] {escape(str(e))}")
            raise typer.Exit(code=1) from e
    return wrapper

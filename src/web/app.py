"""
Application FastAPI d'AnimeBridge.

Initialise l'application web avec le Container DI, convertit les erreurs
du domaine en statuts HTTP et monte les routes.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from ..container import Container, close_clients
from ..core.exceptions import (
    AnimeBridgeError,
    MalformedIdError,
    MalformedResponseError,
    MappingNotFoundError,
    MediaNotFoundError,
    UpstreamFetchError,
)
from .deps import APP_VERSION
from .routes.catalog import router as catalog_router
from .routes.feed import router as feed_router

# Statut HTTP par type d'erreur, du plus specifique au plus general
ERROR_STATUS: tuple[tuple[type[AnimeBridgeError], int], ...] = (
    (MalformedIdError, 400),
    (MediaNotFoundError, 404),
    (MappingNotFoundError, 404),
    (UpstreamFetchError, 502),
    (MalformedResponseError, 502),
)


def status_for_error(error: AnimeBridgeError) -> int:
    """Statut HTTP d'une erreur du domaine (500 si non repertoriee)."""
    for error_type, status_code in ERROR_STATUS:
        if isinstance(error, error_type):
            return status_code
    return 500


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialise le Container DI au démarrage et le ferme à l'arrêt."""
    container = Container()
    app.state.container = container
    yield
    await close_clients(container)


app = FastAPI(title="AnimeBridge", version=APP_VERSION, lifespan=lifespan)


@app.exception_handler(AnimeBridgeError)
async def handle_domain_error(request: Request, exc: AnimeBridgeError) -> JSONResponse:
    """Convertit une erreur du domaine en reponse JSON."""
    status_code = status_for_error(exc)
    logger.warning(
        "{method} {path} -> {status_code}",
        method=request.method,
        path=request.url.path,
        status_code=status_code,
        error=type(exc).__name__,
    )
    return JSONResponse(
        status_code=status_code,
        content={"error": type(exc).__name__, "detail": str(exc)},
    )


@app.get("/health")
def health() -> dict[str, str]:
    """Etat du service."""
    return {"status": "ok", "version": APP_VERSION}


# Routes
app.include_router(catalog_router)
app.include_router(feed_router)

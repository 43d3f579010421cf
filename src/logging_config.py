"""
Configuration du logging de l'application via loguru.

Fournit un logging structuré avec :
- Sortie console : lisible, colorée, niveau ajusté par la verbosité de la CLI
- Sortie fichier : sérialisée en JSON, avec rotation, pour l'analyse des
  dégradations d'enrichissement (sources externes indisponibles)
"""

import logging
import sys
from pathlib import Path

from loguru import logger

# Niveaux console selon le nombre de -v passés à la CLI
_VERBOSITY_LEVELS = ("WARNING", "INFO", "DEBUG", "TRACE")


def level_for_verbosity(base_level: str, verbose: int = 0, quiet: bool = False) -> str:
    """
    Calcule le niveau console effectif.

    Args :
        base_level : Niveau configuré (Settings.log_level), utilisé sans -v
        verbose : Nombre d'options -v (0 a 3)
        quiet : Mode silencieux, prioritaire sur verbose

    Retourne :
        Nom du niveau loguru
    """
    if quiet:
        return "ERROR"
    if verbose <= 0:
        return base_level.upper()
    return _VERBOSITY_LEVELS[min(verbose, len(_VERBOSITY_LEVELS) - 1)]


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/animebridge.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau de log minimum pour la sortie console
        log_file : Chemin vers le fichier de log
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs à conserver

    Les logs httpx (une ligne par requête) sont limités à WARNING pour ne pas
    noyer les avertissements d'enrichissement.
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    logging.getLogger("httpx").setLevel(logging.WARNING)

    logger.debug("Logging configuré", log_file=str(log_file), level=log_level)

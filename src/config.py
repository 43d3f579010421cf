"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe ANIMEBRIDGE_,
et peut optionnellement être fournie via un fichier .env.

Chaque source externe reçoit son URL de base via cette configuration, injectée
à la construction du client par le container : aucune constante d'endpoint globale.
"""

from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de src/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe ANIMEBRIDGE_.
    Exemple : ANIMEBRIDGE_JIKAN_BASE_URL=http://localhost:8080/v4/

    Les URLs de base sont normalisées avec un "/" final pour que les chemins
    relatifs des clients se résolvent sous le préfixe de l'API.
    """

    model_config = SettingsConfigDict(
        env_prefix="ANIMEBRIDGE_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Sources externes
    animeunity_base_url: str = Field(default="https://www.animeunity.so/")
    jikan_base_url: str = Field(default="https://api.jikan.moe/v4/")
    anilist_base_url: str = Field(default="https://graphql.anilist.co/")
    kitsu_base_url: str = Field(default="https://kitsu.io/api/edge/")
    kitsu_enabled: bool = Field(default=True)

    # Transport
    http_timeout: float = Field(default=30.0, gt=0)
    http_max_attempts: int = Field(default=3, ge=1)

    # Flux statiques et generateur hors ligne
    feed_dir: Path = Field(default=Path("assets"))
    feed_delay_min: float = Field(default=2.0, ge=0)
    feed_delay_max: float = Field(default=3.0, ge=0)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/animebridge.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("feed_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator(
        "animeunity_base_url",
        "jikan_base_url",
        "anilist_base_url",
        "kitsu_base_url",
    )
    @classmethod
    def ensure_trailing_slash(cls, v: str) -> str:
        """Ajoute le "/" final manquant aux URLs de base."""
        return v if v.endswith("/") else f"{v}/"

    @model_validator(mode="after")
    def check_feed_delay(self) -> "Settings":
        """Vérifie que la plage de délai du générateur est ordonnée."""
        if self.feed_delay_min > self.feed_delay_max:
            raise ValueError("feed_delay_min doit être <= feed_delay_max")
        return self

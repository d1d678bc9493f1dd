"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe
SCENETITLE_, et peut optionnellement être fournie via un fichier .env.

Seul le logging est configurable : les règles de parsing sont fixes.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de scenetitle/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les parametres peuvent être surchargés via des variables d'environnement
    avec le prefixe SCENETITLE_.
    Exemple : SCENETITLE_LOG_LEVEL=DEBUG

    Sans log_file, les logs ne sont écrits que sur stderr.
    """

    model_config = SettingsConfigDict(
        env_prefix="SCENETITLE_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Logging (stderr + fichier optionnel, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Optional[Path] = Field(default=None)
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5, ge=1)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Met le niveau en majuscules et rejette les niveaux inconnus."""
        level = str(v).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Niveau de log inconnu : {v}")
        return level

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Optional[str | Path]) -> Optional[Path]:
        """Étend ~ vers le répertoire home dans le chemin du fichier de log."""
        if v is None or v == "":
            return None
        return Path(v).expanduser()

    @property
    def file_logging_enabled(self) -> bool:
        """Vérifie si un fichier de log est configure."""
        return self.log_file is not None

# --------------------------------------------------------------
# File: config.py
# Description: Parámetros configurables del códec leídos de entorno y .env.
# --------------------------------------------------------------
"""Carga de configuración desde variables de entorno."""

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from cryptocodec.models import KdfParams

load_dotenv()

ENV_PREFIX = "CRYPTOCODEC_"


class Settings(BaseModel):
    """Configuración efectiva del códec y de la interfaz Streamlit.

    Attributes:
        kdf (KdfParams): Costes Argon2id aplicados al cifrar.
        max_file_mb (int): Tamaño máximo de archivo aceptado por la interfaz.
        log_level (str): Nivel de logging de la interfaz.

    """

    kdf: KdfParams = Field(default_factory=KdfParams)
    max_file_mb: int = Field(default=10, ge=1, le=100)
    log_level: str = Field(default="INFO", pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

    @property
    def max_file_bytes(self) -> int:
        return self.max_file_mb * 1024 * 1024


def configure_logging(settings: Settings) -> None:
    """Configura el logging raíz de la interfaz; el códec nunca escribe logs."""

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _env(name: str, default: str) -> str:
    return os.getenv(ENV_PREFIX + name, default)


def load_settings() -> Settings:
    """Construye la configuración leyendo el entorno en el momento de la llamada.

    Returns:
        Settings: Configuración validada.

    Raises:
        pydantic.ValidationError: Si algún valor está fuera de rango.

    """

    kdf = KdfParams(
        t=_env("KDF_TIME_COST", "3"),
        m=_env("KDF_MEMORY_KIB", str(64 * 1024)),
        p=_env("KDF_PARALLELISM", "1"),
    )
    return Settings(
        kdf=kdf,
        max_file_mb=_env("MAX_FILE_MB", "10"),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
    )

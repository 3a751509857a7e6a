# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para abaratar Argon2id y aislar la configuración.
# --------------------------------------------------------------

from typing import Iterator

import pytest

from cryptocodec.models import KdfParams


@pytest.fixture(autouse=True)
def _cheap_kdf(monkeypatch) -> Iterator[None]:
    """Reduce los costes Argon2id para que cada prueba cifre en milisegundos.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    monkeypatch.setenv("CRYPTOCODEC_KDF_TIME_COST", "1")
    monkeypatch.setenv("CRYPTOCODEC_KDF_MEMORY_KIB", "1024")
    monkeypatch.setenv("CRYPTOCODEC_KDF_PARALLELISM", "1")
    yield


@pytest.fixture
def fast_params() -> KdfParams:
    """Parámetros Argon2id mínimos para pruebas que los pasan explícitamente."""
    return KdfParams(t=1, m=1024, p=1)

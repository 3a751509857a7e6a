# --------------------------------------------------------------
# File: test_config.py
# Description: Pruebas de carga de configuración desde variables de entorno.
# --------------------------------------------------------------

import logging

import pytest
from pydantic import ValidationError

from cryptocodec.config import configure_logging, load_settings


def test_load_settings_reads_environment(monkeypatch):
    monkeypatch.setenv("CRYPTOCODEC_KDF_TIME_COST", "2")
    monkeypatch.setenv("CRYPTOCODEC_KDF_MEMORY_KIB", "4096")
    monkeypatch.setenv("CRYPTOCODEC_KDF_PARALLELISM", "2")
    monkeypatch.setenv("CRYPTOCODEC_MAX_FILE_MB", "5")
    monkeypatch.setenv("CRYPTOCODEC_LOG_LEVEL", "debug")
    settings = load_settings()
    assert (settings.kdf.t, settings.kdf.m, settings.kdf.p) == (2, 4096, 2)
    assert settings.max_file_bytes == 5 * 1024 * 1024
    assert settings.log_level == "DEBUG"


def test_load_settings_defaults(monkeypatch):
    for name in (
        "KDF_TIME_COST",
        "KDF_MEMORY_KIB",
        "KDF_PARALLELISM",
        "MAX_FILE_MB",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(f"CRYPTOCODEC_{name}", raising=False)
    settings = load_settings()
    assert (settings.kdf.t, settings.kdf.m, settings.kdf.p) == (3, 64 * 1024, 1)
    assert settings.max_file_mb == 10
    assert settings.log_level == "INFO"


@pytest.mark.parametrize(
    "name,value",
    [
        ("KDF_TIME_COST", "0"),
        ("KDF_MEMORY_KIB", "mucho"),
        ("MAX_FILE_MB", "0"),
        ("LOG_LEVEL", "VERBOSE"),
    ],
)
def test_load_settings_rejects_invalid_values(monkeypatch, name, value):
    monkeypatch.setenv(f"CRYPTOCODEC_{name}", value)
    with pytest.raises(ValidationError):
        load_settings()


def test_configure_logging_sets_root_level(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
    monkeypatch.setenv("CRYPTOCODEC_LOG_LEVEL", "WARNING")
    configure_logging(load_settings())
    assert calls["level"] == "WARNING"

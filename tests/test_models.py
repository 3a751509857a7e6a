# --------------------------------------------------------------
# File: test_models.py
# Description: Pruebas de validación de los modelos del sobre cifrado.
# --------------------------------------------------------------

import pytest
from pydantic import ValidationError

from cryptocodec.models import MAX_MEMORY_KIB, Envelope, KdfParams


def test_kdf_defaults():
    params = KdfParams()
    assert (params.alg, params.t, params.m, params.p) == ("argon2id", 3, 64 * 1024, 1)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"t": 0},
        {"t": 11},
        {"m": 4},
        {"m": 2 * 1024 * 1024},
        {"m": MAX_MEMORY_KIB + 1},
        {"p": 0},
        {"p": 17},
        {"m": 64, "p": 16},
        {"alg": "pbkdf2"},
        {"extra": 1},
    ],
)
def test_kdf_params_out_of_range(kwargs):
    with pytest.raises(ValidationError):
        KdfParams(**kwargs)


def test_envelope_rejects_unknown_version_and_alg():
    base = {"kdf": KdfParams(), "salt": "", "nonce": "", "ct": "", "tag": ""}
    with pytest.raises(ValidationError):
        Envelope(v=2, **base)
    with pytest.raises(ValidationError):
        Envelope(alg="AES-128-CBC", **base)


def test_envelope_header_aad_covers_kdf():
    """La cabecera autenticada cambia si cambian los parámetros Argon2id."""
    base = {"salt": "", "nonce": "", "ct": "", "tag": ""}
    a = Envelope(kdf=KdfParams(t=1, m=1024, p=1), **base)
    b = Envelope(kdf=KdfParams(t=2, m=1024, p=1), **base)
    assert a.header_aad() != b.header_aad()
    assert a.header_aad().startswith(b"v=1;alg=AES-256-GCM;")


def test_kdf_memory_upper_bound_is_inclusive():
    assert KdfParams(m=MAX_MEMORY_KIB).m == 256 * 1024

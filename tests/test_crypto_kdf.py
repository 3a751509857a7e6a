# --------------------------------------------------------------
# File: test_crypto_kdf.py
# Description: Pruebas de la derivación Argon2id de claves AES.
# --------------------------------------------------------------

import os

from cryptocodec.crypto_kdf import KEY_LEN, derive_key
from cryptocodec.models import KdfParams


def test_derive_key_is_deterministic(fast_params):
    salt = os.urandom(16)
    assert derive_key("clave", salt, fast_params) == derive_key("clave", salt, fast_params)
    assert len(derive_key("clave", salt, fast_params)) == KEY_LEN


def test_derive_key_depends_on_salt_passphrase_and_params(fast_params):
    salt = os.urandom(16)
    base = derive_key("clave", salt, fast_params)
    assert derive_key("clave", os.urandom(16), fast_params) != base
    assert derive_key("Clave", salt, fast_params) != base
    assert derive_key("clave", salt, KdfParams(t=2, m=1024, p=1)) != base


def test_derive_key_accepts_empty_passphrase(fast_params):
    """Una passphrase vacía es material de clave válido."""
    assert len(derive_key("", os.urandom(16), fast_params)) == KEY_LEN

# --------------------------------------------------------------
# File: crypto_kdf.py
# Description: Derivación de la clave AES a partir de la passphrase con Argon2id.
# --------------------------------------------------------------
"""Derivación de claves simétricas a partir de passphrases arbitrarias."""

from argon2.low_level import Type, hash_secret_raw

from cryptocodec.models import KdfParams

KEY_LEN = 32
SALT_LEN = 16


def derive_key(passphrase: str, salt: bytes, params: KdfParams, *, outlen: int = KEY_LEN) -> bytes:
    """Deriva una clave AES-256 usando Argon2id.

    La passphrase vacía es material de clave válido: Argon2 acepta secretos de
    longitud cero.

    Args:
        passphrase (str): Passphrase de entrada del usuario.
        salt (bytes): Salt aleatoria de al menos 8 bytes.
        params (KdfParams): Costes temporal, de memoria y paralelismo.
        outlen (int): Longitud en bytes de la clave resultante.

    Returns:
        bytes: Clave simétrica derivada.

    """

    return hash_secret_raw(
        passphrase.encode("utf-8"),
        salt,
        time_cost=params.t,
        memory_cost=params.m,
        parallelism=params.p,
        hash_len=outlen,
        type=Type.ID,
    )

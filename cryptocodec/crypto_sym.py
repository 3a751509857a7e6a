# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-GCM para cifrado y descifrado simétrico.
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico con clave ya derivada."""

import os
from typing import Optional, Tuple

from cryptography.hazmat.primitives.ciphers.aead import AESGCM

NONCE_LEN = 12
TAG_LEN = 16


def aes_gcm_encrypt_with_key(
    key: bytes, plaintext: bytes, aad: Optional[bytes] = None
) -> Tuple[bytes, bytes, bytes]:
    """Cifra datos con AES-GCM utilizando una clave proporcionada.

    Args:
        key (bytes): Clave simétrica de 128, 192 o 256 bits.
        plaintext (bytes): Datos a cifrar.
        aad (Optional[bytes]): Datos autenticados adicionales.

    Returns:
        Tuple[bytes, bytes, bytes]: Ciphertext sin etiqueta, nonce y tag.

    """

    nonce = os.urandom(NONCE_LEN)
    ct_full = AESGCM(key).encrypt(nonce, plaintext, aad)
    return ct_full[:-TAG_LEN], nonce, ct_full[-TAG_LEN:]


def aes_gcm_decrypt_with_key(
    key: bytes, nonce: bytes, ciphertext: bytes, tag: bytes, aad: Optional[bytes] = None
) -> bytes:
    """Descifra y autentica datos AES-GCM.

    Solo se aceptan nonces de 96 bits y etiquetas de 128 bits, las longitudes
    que produce :func:`aes_gcm_encrypt_with_key`.

    Raises:
        cryptography.exceptions.InvalidTag: Si clave, nonce, datos o tag no cuadran.
        ValueError: Si el nonce o el tag tienen una longitud distinta.

    """

    if len(nonce) != NONCE_LEN:
        raise ValueError(f"El nonce debe tener {NONCE_LEN} bytes, tiene {len(nonce)}")
    if len(tag) != TAG_LEN:
        raise ValueError(f"El tag debe tener {TAG_LEN} bytes, tiene {len(tag)}")
    return AESGCM(key).decrypt(nonce, ciphertext + tag, aad)

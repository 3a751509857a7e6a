# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública de utilidades criptográficas del paquete cryptocodec.
# --------------------------------------------------------------
"""Inicializa el paquete `cryptocodec` y reexporta las operaciones del códec."""

from cryptocodec.codec import (
    data_url_to_file,
    decrypt,
    describe_decrypted,
    encrypt,
    file_to_data_url,
    get_file_info_from_data_url,
    hash_sha512,
    infer_extension,
    is_valid_base64,
)
from cryptocodec.errors import CodecError, DecryptionError, ParseError

__all__ = [
    "CodecError",
    "DecryptionError",
    "ParseError",
    "data_url_to_file",
    "decrypt",
    "describe_decrypted",
    "encrypt",
    "file_to_data_url",
    "get_file_info_from_data_url",
    "hash_sha512",
    "infer_extension",
    "is_valid_base64",
]

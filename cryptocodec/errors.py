# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de excepciones expuestas por el códec criptográfico.
# --------------------------------------------------------------
"""Errores que el códec propaga a sus llamadores."""

__all__ = ["CodecError", "DecryptionError", "ParseError"]


class CodecError(Exception):
    """Error base de todas las operaciones del códec."""


class DecryptionError(CodecError):
    """El token no pudo descifrarse con la passphrase indicada.

    Cubre passphrase incorrecta, token manipulado o truncado y contenido que
    no es texto UTF-8 válido.
    """


class ParseError(CodecError, ValueError):
    """Un data-URL no cumple la forma ``data:<mime>;base64,<payload>``."""

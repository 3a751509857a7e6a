# --------------------------------------------------------------
# File: codec.py
# Description: Cifrado con passphrase, hash SHA-512 y conversión archivo/data-URL.
# --------------------------------------------------------------
"""Operaciones puras que consume la interfaz para cifrar y descifrar datos.

Un token cifrado es el JSON de :class:`Envelope` codificado en Base64 URL-safe
sin relleno. Lleva consigo la salt, el nonce y los parámetros Argon2id, de modo
que solo hace falta la passphrase para descifrarlo. La cabecera del sobre se
autentica como AAD, por lo que una passphrase incorrecta o cualquier byte
alterado provoca :class:`DecryptionError` en lugar de texto corrupto.
"""

from __future__ import annotations

import asyncio
import base64
import binascii
import hashlib
import mimetypes
import os
import re
from pathlib import Path
from typing import BinaryIO, Optional, Union

from argon2.exceptions import HashingError
from cryptography.exceptions import InvalidTag
from pydantic import ValidationError

from cryptocodec.config import load_settings
from cryptocodec.crypto_kdf import SALT_LEN, derive_key
from cryptocodec.crypto_sym import aes_gcm_decrypt_with_key, aes_gcm_encrypt_with_key
from cryptocodec.errors import DecryptionError, ParseError
from cryptocodec.models import (
    DecodedFile,
    DecryptionResult,
    Envelope,
    FileDescriptor,
    KdfParams,
)

__all__ = [
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

DEFAULT_MIME = "application/octet-stream"
UNKNOWN = "unknown"
DECRYPTED_FILE_STEM = "decrypted-file"
DECRYPTION_FAILED = "Decryption failed: Invalid key or corrupted data"

EXTENSIONS = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/gif": "gif",
    "text/csv": "csv",
}

# data:<mime>[;param=value]*;base64,<payload>; los parámetros forman parte del MIME.
DATA_URL_RE = re.compile(
    r"data:(?P<mime>[^;,]+(?:;[^;,=]+=[^;,]*)*);base64,(?P<payload>[^,]*)"
)
MIME_PREFIX_RE = re.compile(r"data:(?P<mime>[^;,]+);")
B64U_RE = re.compile(r"[A-Za-z0-9_-]*")

FileSource = Union[bytes, bytearray, memoryview, str, "os.PathLike[str]", BinaryIO]


def _b64u(data: bytes) -> str:
    """Codifica datos binarios en Base64 URL-safe sin relleno."""

    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def _unb64u(value: str) -> bytes:
    """Decodifica Base64 URL-safe sin relleno aceptando solo la forma canónica.

    Raises:
        binascii.Error: Si hay caracteres fuera del alfabeto o la codificación
            no es la única posible para esos bytes.

    """

    if B64U_RE.fullmatch(value) is None:
        raise binascii.Error("Alfabeto Base64 URL-safe inválido")
    pad = "=" * (-len(value) % 4)
    data = base64.urlsafe_b64decode(value + pad)
    if _b64u(data) != value:
        raise binascii.Error("Codificación Base64 no canónica")
    return data


def encrypt(plaintext: str, passphrase: str, params: Optional[KdfParams] = None) -> str:
    """Cifra texto con AES-256-GCM bajo una clave Argon2id de la passphrase.

    Args:
        plaintext (str): Texto a cifrar; puede ser un data-URL de un archivo.
        passphrase (str): Passphrase del usuario, se admite la cadena vacía.
        params (Optional[KdfParams]): Costes Argon2id; por defecto los de
            :func:`cryptocodec.config.load_settings`.

    Returns:
        str: Token imprimible autocontenido.

    """

    kdf = params or load_settings().kdf
    salt = os.urandom(SALT_LEN)
    key = derive_key(passphrase, salt, kdf)

    header = Envelope(kdf=kdf, salt=_b64u(salt), nonce="", ct="", tag="")
    ciphertext, nonce, tag = aes_gcm_encrypt_with_key(
        key, plaintext.encode("utf-8"), header.header_aad()
    )
    envelope = header.model_copy(
        update={"nonce": _b64u(nonce), "ct": _b64u(ciphertext), "tag": _b64u(tag)}
    )
    return _b64u(envelope.model_dump_json().encode("utf-8"))


def _load_envelope(token: str) -> Envelope:
    try:
        raw = _unb64u(token)
        envelope = Envelope.model_validate_json(raw)
    except (binascii.Error, ValueError, ValidationError) as exc:
        raise DecryptionError(DECRYPTION_FAILED) from exc
    # Solo se acepta la serialización exacta que produce encrypt().
    if envelope.model_dump_json().encode("utf-8") != raw:
        raise DecryptionError(DECRYPTION_FAILED)
    return envelope


def decrypt(ciphertext: str, passphrase: str) -> str:
    """Descifra un token producido por :func:`encrypt`.

    Args:
        ciphertext (str): Token sin modificar.
        passphrase (str): Passphrase usada al cifrar.

    Returns:
        str: Texto original exacto.

    Raises:
        DecryptionError: Si el token está malformado o manipulado, la
            passphrase no es la correcta o el resultado no es UTF-8.

    """

    envelope = _load_envelope(ciphertext)
    try:
        salt = _unb64u(envelope.salt)
        nonce = _unb64u(envelope.nonce)
        body = _unb64u(envelope.ct)
        tag = _unb64u(envelope.tag)
    except (binascii.Error, ValueError) as exc:
        raise DecryptionError(DECRYPTION_FAILED) from exc

    if len(salt) != SALT_LEN:
        raise DecryptionError(DECRYPTION_FAILED)

    try:
        key = derive_key(passphrase, salt, envelope.kdf)
    except (HashingError, MemoryError) as exc:
        raise DecryptionError(DECRYPTION_FAILED) from exc
    try:
        plaintext = aes_gcm_decrypt_with_key(key, nonce, body, tag, envelope.header_aad())
        return plaintext.decode("utf-8")
    except (InvalidTag, ValueError) as exc:
        # UnicodeDecodeError es subclase de ValueError.
        raise DecryptionError(DECRYPTION_FAILED) from exc


def hash_sha512(plaintext: str) -> str:
    """Devuelve el SHA-512 hexadecimal (128 caracteres) del texto en UTF-8."""

    return hashlib.sha512(plaintext.encode("utf-8")).hexdigest()


def _guess_mime(name: Optional[str]) -> Optional[str]:
    if not name:
        return None
    guessed, _ = mimetypes.guess_type(name)
    return guessed


async def file_to_data_url(source: FileSource, mime_type: Optional[str] = None) -> str:
    """Lee un archivo y lo codifica como ``data:<mime>;base64,<payload>``.

    Una ``str`` se interpreta siempre como ruta, nunca como contenido. La
    lectura de rutas y flujos se delega a un hilo para no bloquear el bucle.

    Args:
        source (FileSource): Bytes, ruta o flujo binario con ``read()``.
        mime_type (Optional[str]): Tipo MIME explícito. Si falta se usa el
            atributo ``type`` del flujo, luego el nombre del archivo y por
            último ``application/octet-stream``.

    Returns:
        str: Data-URL con el contenido exacto.

    Raises:
        TypeError: Si el flujo devuelve texto en lugar de bytes.

    """

    name: Optional[str] = None
    if isinstance(source, (bytes, bytearray, memoryview)):
        data = bytes(source)
    elif isinstance(source, (str, os.PathLike)):
        path = Path(source)
        name = path.name
        data = await asyncio.to_thread(path.read_bytes)
    else:
        name = getattr(source, "name", None)
        mime_type = mime_type or getattr(source, "type", None)
        data = await asyncio.to_thread(source.read)
        if not isinstance(data, bytes):
            raise TypeError("file_to_data_url requiere un flujo binario")

    mime = mime_type or _guess_mime(name) or DEFAULT_MIME
    payload = base64.b64encode(data).decode("ascii")
    return f"data:{mime};base64,{payload}"


def data_url_to_file(data_url: str, filename: str) -> DecodedFile:
    """Reconstruye un archivo desde un data-URL.

    Args:
        data_url (str): Cadena ``data:<mime>;base64,<payload>``.
        filename (str): Nombre que se asignará al archivo.

    Returns:
        DecodedFile: Bytes originales, tipo MIME y nombre.

    Raises:
        ParseError: Si falta la coma, el MIME o el marcador ``;base64``, o si
            el payload no es Base64 válido.

    """

    match = DATA_URL_RE.fullmatch(data_url)
    if match is None:
        raise ParseError("Data-URL malformado: se esperaba data:<mime>;base64,<payload>")
    try:
        data = base64.b64decode(match.group("payload"), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ParseError("Payload Base64 inválido en el data-URL") from exc
    return DecodedFile(filename=filename, mime_type=match.group("mime"), data=data)


def infer_extension(mime_type: str) -> str:
    """Extensión asociada a un tipo MIME, ``unknown`` si no se reconoce."""

    return EXTENSIONS.get(mime_type, UNKNOWN)


def is_valid_base64(value: str) -> bool:
    """Indica si ``value`` es Base64 estándar canónico."""

    try:
        decoded = base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError):
        return False
    return base64.b64encode(decoded).decode("ascii") == value


def get_file_info_from_data_url(data_url: str) -> FileDescriptor:
    """Extrae tipo y extensión del prefijo de un data-URL sin lanzar errores.

    Args:
        data_url (str): Texto que debería empezar por ``data:<mime>;``.

    Returns:
        FileDescriptor: Tipo, extensión y nombre ``decrypted-file.<ext>``;
        ``unknown`` en tipo y extensión si el prefijo no es reconocible.

    """

    match = MIME_PREFIX_RE.match(data_url)
    if match is None:
        return FileDescriptor(
            mime_type=UNKNOWN,
            extension=UNKNOWN,
            filename=f"{DECRYPTED_FILE_STEM}.{UNKNOWN}",
        )
    mime = match.group("mime")
    extension = infer_extension(mime)
    return FileDescriptor(
        mime_type=mime, extension=extension, filename=f"{DECRYPTED_FILE_STEM}.{extension}"
    )


def describe_decrypted(plaintext: str) -> DecryptionResult:
    """Clasifica el resultado de :func:`decrypt` como texto o archivo embebido.

    Solo se considera archivo un data-URL completo con payload Base64 válido;
    un texto que simplemente empieza por ``data:`` sigue siendo texto.
    """

    match = DATA_URL_RE.fullmatch(plaintext)
    if match is None or not is_valid_base64(match.group("payload")):
        return DecryptionResult(data=plaintext, is_file=False)
    info = get_file_info_from_data_url(plaintext)
    return DecryptionResult(
        data=plaintext, is_file=True, file_type=info.mime_type, file_name=info.filename
    )

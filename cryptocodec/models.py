# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan estructuras de intercambio criptográfico."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

ENVELOPE_VERSION = 1
CIPHER_ALG = "AES-256-GCM"
KDF_ALG = "argon2id"
MAX_MEMORY_KIB = 256 * 1024


class KdfParams(BaseModel):
    """Parámetros Argon2id con los que se deriva la clave de un token.

    Los límites impiden que un token manipulado exija memoria o tiempo
    desproporcionados al descifrar.

    Attributes:
        alg (str): Identificador del algoritmo, siempre ``argon2id``.
        t (int): Coste temporal en iteraciones.
        m (int): Memoria en KiB.
        p (int): Paralelismo.

    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    alg: Literal["argon2id"] = KDF_ALG
    t: int = Field(default=3, ge=1, le=10)
    m: int = Field(default=64 * 1024, ge=8, le=MAX_MEMORY_KIB)
    p: int = Field(default=1, ge=1, le=16)

    @model_validator(mode="after")
    def _memory_covers_lanes(self) -> "KdfParams":
        # Argon2 exige al menos 8 KiB por carril.
        if self.m < 8 * self.p:
            raise ValueError("m debe ser al menos 8 * p KiB")
        return self


class Envelope(BaseModel):
    """Contenido serializado dentro de un token cifrado.

    Attributes:
        v (int): Versión del formato.
        alg (str): Algoritmo de cifrado simétrico.
        kdf (KdfParams): Parámetros de derivación usados al cifrar.
        salt (str): Salt Argon2id en Base64 URL-safe sin relleno.
        nonce (str): Nonce AES-GCM en Base64 URL-safe sin relleno.
        ct (str): Ciphertext sin etiqueta en Base64 URL-safe sin relleno.
        tag (str): Etiqueta de autenticación en Base64 URL-safe sin relleno.

    """

    model_config = ConfigDict(extra="forbid")

    v: Literal[1] = ENVELOPE_VERSION
    alg: Literal["AES-256-GCM"] = CIPHER_ALG
    kdf: KdfParams
    salt: str
    nonce: str
    ct: str
    tag: str

    def header_aad(self) -> bytes:
        """Cabecera autenticada como datos adicionales de AES-GCM."""

        return f"v={self.v};alg={self.alg};kdf={self.kdf.model_dump_json()}".encode("utf-8")


class FileDescriptor(BaseModel):
    """Tipo MIME, extensión y nombre sugerido de un archivo embebido."""

    mime_type: str
    extension: str
    filename: str


class DecodedFile(BaseModel):
    """Archivo reconstruido a partir de un data-URL.

    Attributes:
        filename (str): Nombre asignado por el llamador.
        mime_type (str): Tipo MIME extraído del prefijo.
        data (bytes): Contenido binario exacto.

    """

    filename: str
    mime_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


class DecryptionResult(BaseModel):
    """Clasificación del texto obtenido tras descifrar.

    Attributes:
        data (str): Texto descifrado tal cual.
        is_file (bool): ``True`` si el texto es un data-URL.
        file_type (Optional[str]): Tipo MIME del archivo embebido.
        file_name (Optional[str]): Nombre propuesto para la descarga.

    """

    data: str
    is_file: bool
    file_type: Optional[str] = None
    file_name: Optional[str] = None

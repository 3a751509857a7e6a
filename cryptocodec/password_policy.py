# --------------------------------------------------------------
# File: password_policy.py
# Description: Evaluación orientativa de la robustez de passphrases de cifrado.
# --------------------------------------------------------------
"""Puntuación de passphrases mostrada en la interfaz antes de cifrar.

El códec no aplica esta política: cualquier cadena, incluida la vacía, es
material de clave válido. La interfaz solo la usa como aviso.
"""

from __future__ import annotations

import re
from typing import List

from pydantic import BaseModel

COMMON = {
    "123456",
    "123456789",
    "12345678",
    "qwerty",
    "password",
    "111111",
    "123123",
    "000000",
    "abc123",
    "letmein",
    "iloveyou",
    "admin",
    "welcome",
    "secret",
    "patient",
    "hospital",
    "qwertyuiop",
    "passw0rd",
}

MIN_LENGTH = 12

LOWER = re.compile(r"[a-z]")
UPPER = re.compile(r"[A-Z]")
DIGIT = re.compile(r"\d")
SYMBOL = re.compile(r"[^\w\s]")


class PassphraseAssessment(BaseModel):
    """Resultado de evaluar una passphrase.

    Attributes:
        ok (bool): ``True`` si no hay recomendaciones pendientes.
        score (int): Puntuación entre 0 y 100.
        reasons (List[str]): Recomendaciones para reforzarla.

    """

    ok: bool
    score: int
    reasons: List[str]


def class_count(passphrase: str) -> int:
    """Cuenta los grupos de caracteres presentes en la passphrase."""

    return sum(
        1 for pattern in (LOWER, UPPER, DIGIT, SYMBOL) if pattern.search(passphrase)
    )


def has_long_repetition(passphrase: str, max_run: int = 3) -> bool:
    """Detecta repeticiones largas de un mismo carácter dentro de la passphrase."""

    pattern = rf"(.)\1{{{max_run},}}"
    return re.search(pattern, passphrase) is not None


def assess_passphrase(passphrase: str) -> PassphraseAssessment:
    """Evalúa la passphrase y devuelve puntuación y recomendaciones.

    A diferencia de una política de cuentas, los espacios están permitidos: una
    frase de varias palabras es una buena passphrase de cifrado.

    Args:
        passphrase (str): Passphrase introducida por el usuario.

    Returns:
        PassphraseAssessment: Cumplimiento, puntuación y motivos.

    """

    reasons: List[str] = []
    score = 0

    length = len(passphrase)
    if length < MIN_LENGTH:
        reasons.append(f"Usa al menos {MIN_LENGTH} caracteres.")
    else:
        score += min(50, (length - MIN_LENGTH + 1) * 4)

    classes = class_count(passphrase)
    if classes < 3:
        reasons.append("Combina al menos 3 de: minúsculas, mayúsculas, dígitos, símbolos.")
    else:
        score += 30

    if passphrase.lower() in COMMON:
        reasons.append("Passphrase demasiado común.")
    else:
        score += 10

    if has_long_repetition(passphrase):
        reasons.append("Evita repeticiones largas del mismo carácter.")
    else:
        score += 10

    if not passphrase:
        score = 0
    score = max(0, min(100, score))
    return PassphraseAssessment(ok=not reasons, score=score, reasons=reasons)

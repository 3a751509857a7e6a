# --------------------------------------------------------------
# File: test_password_policy.py
# Description: Pruebas para la evaluación orientativa de passphrases.
# --------------------------------------------------------------

import pytest

from cryptocodec.password_policy import assess_passphrase


def test_policy_accepts_strong_pass():
    """Valida que una passphrase sólida no reciba recomendaciones."""
    result = assess_passphrase("Str0ng_P@ssw0rd!!")
    assert result.ok
    assert result.score >= 70
    assert not result.reasons


def test_policy_allows_spaces():
    assert assess_passphrase("Correct Horse Battery 9!").ok


@pytest.mark.parametrize(
    "pw",
    [
        "short7!",  # menor a 12 caracteres
        "alllowercaseletters",  # solo una clase
        "PASSWORDONLY",  # solo mayúsculas
        "123456789012",  # solo dígitos
        "qwertyuiop",  # demasiado común
    ],
)
def test_policy_flags_weak(pw):
    result = assess_passphrase(pw)
    assert not result.ok
    assert result.reasons


def test_policy_flags_repetitions():
    result = assess_passphrase("AAAaaaa1111!!!!")
    assert not result.ok
    assert any("repeticiones" in r.lower() for r in result.reasons)


def test_empty_passphrase_scores_zero():
    result = assess_passphrase("")
    assert result.score == 0
    assert not result.ok

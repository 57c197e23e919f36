# --------------------------------------------------------------
# File: test_functions.py
# Description: Pruebas de las funciones SQL expuestas por credapi.
# --------------------------------------------------------------

import pytest

from credapi.functions import call, is_deterministic, result_kind, signature
from credcore.errors import InvalidFunctionCall, TypeMismatch, UnknownCipher
from credcore.password import MASK, PasswordValue
from credcore.values import NULL, BinaryValue, BooleanValue, TextValue, ValueKind


def test_hunter2_example(engine):
    """TO_PASSWORD, PASSWORD_VERIFY y PASSWORD_ALGO encadenados."""
    credential = call("TO_PASSWORD", "hunter2", 10, engine=engine)
    assert isinstance(credential, PasswordValue)
    assert call("PASSWORD_VERIFY", "hunter2", credential, engine=engine) == BooleanValue(value=True)
    assert call("PASSWORD_VERIFY", "wrong", credential, engine=engine) == BooleanValue(value=False)
    assert call("PASSWORD_ALGO", credential) == TextValue(value="PBKDF2-HMAC-SHA-256")


def test_to_password_default_cost_and_text_cost():
    """Sin coste usa el configurado; un coste textual se interpreta como entero."""
    assert call("to_password", "pw").cost_factor == 0
    assert call("TO_PASSWORD", "pw", TextValue(value="1")).cost_factor == 1


def test_verify_accepts_stored_blob(engine):
    """Un blob binario almacenado es coercible a credencial."""
    credential = call("TO_PASSWORD", "pw", 0, engine=engine)
    stored = BinaryValue(value=credential.encoded)
    assert call("PASSWORD_VERIFY", "pw", stored).value is True
    assert call("PASSWORD_ALGO", stored).value == "PBKDF2-HMAC-SHA-256"


@pytest.mark.parametrize("bad", ["hunter2", 5, True, b"\x01\x02"])
def test_verify_type_mismatch(bad):
    """El segundo argumento de PASSWORD_VERIFY debe ser una credencial.

    Args:
        bad (Any): Valor que no es ni coercible a credencial.
    """
    with pytest.raises(TypeMismatch) as info:
        call("PASSWORD_VERIFY", "pw", bad)
    assert "credential" in str(info.value)


@pytest.mark.parametrize("bad", ["hunter2", 5, b"junk"])
def test_algo_type_mismatch(bad):
    """PASSWORD_ALGO exige una credencial como primer argumento.

    Args:
        bad (Any): Valor no coercible a credencial.
    """
    with pytest.raises(TypeMismatch):
        call("PASSWORD_ALGO", bad)


def test_to_password_rejects_credential_as_plaintext(engine):
    """Una credencial no sirve como passphrase (su texto está enmascarado)."""
    credential = call("TO_PASSWORD", "pw", 0, engine=engine)
    with pytest.raises(TypeMismatch):
        call("TO_PASSWORD", credential)


def test_error_messages_do_not_leak_secrets(engine):
    """Los mensajes de error identifican el papel, nunca el contenido."""
    with pytest.raises(TypeMismatch) as info:
        call("PASSWORD_VERIFY", "pw", "my-secret-plaintext")
    assert "my-secret-plaintext" not in str(info.value)


def test_encrypt_decrypt_roundtrip():
    """ENCRYPT seguido de DECRYPT recupera los datos (con relleno de ceros)."""
    ct = call("ENCRYPT", "AES", b"key", b"attack at dawn")
    assert isinstance(ct, BinaryValue)
    assert len(ct.value) == 16
    pt = call("DECRYPT", "AES", b"key", ct)
    assert pt.value[:14] == b"attack at dawn"
    assert pt.value[14:] == b"\x00\x00"


def test_encrypt_accepts_text_key_and_data():
    """Clave y datos textuales se convierten a binario en UTF-8."""
    assert call("ENCRYPT", "AES", "key", "data") == call("ENCRYPT", "AES", b"key", b"data")


def test_encrypt_rejects_credential_key(engine):
    """Una credencial no puede usarse como nombre de cifrador."""
    credential = call("TO_PASSWORD", "pw", 0, engine=engine)
    with pytest.raises(TypeMismatch):
        call("ENCRYPT", credential, b"key", b"data")


def test_encrypt_unknown_cipher():
    """Nombres de cifrador desconocidos se propagan como UnknownCipher."""
    with pytest.raises(UnknownCipher):
        call("ENCRYPT", "XOR", b"key", b"data")


def test_null_arguments_propagate():
    """Cualquier argumento NULL produce un resultado NULL."""
    assert call("ENCRYPT", "AES", None, b"data") is NULL
    assert call("PASSWORD_VERIFY", None, None) is NULL


@pytest.mark.parametrize(
    "name, count, kind",
    [
        ("TO_PASSWORD", 1, ValueKind.CREDENTIAL),
        ("TO_PASSWORD", 2, ValueKind.CREDENTIAL),
        ("PASSWORD_VERIFY", 2, ValueKind.BOOLEAN),
        ("PASSWORD_ALGO", 1, ValueKind.TEXT),
        ("ENCRYPT", 3, ValueKind.BINARY),
        ("DECRYPT", 3, ValueKind.BINARY),
    ],
)
def test_result_kinds_are_fixed(name, count, kind):
    """El tipo del resultado se conoce antes de evaluar.

    Args:
        name (str): Función SQL.
        count (int): Número de argumentos.
        kind (ValueKind): Tipo de resultado esperado.
    """
    assert result_kind(name, count) is kind


def test_determinism_flags():
    """Solo TO_PASSWORD queda excluida del plegado de constantes."""
    assert is_deterministic("TO_PASSWORD") is False
    for name in ("PASSWORD_VERIFY", "PASSWORD_ALGO", "ENCRYPT", "DECRYPT"):
        assert is_deterministic(name) is True


def test_arity_and_unknown_function():
    """Aridad incorrecta o función inexistente producen InvalidFunctionCall."""
    with pytest.raises(InvalidFunctionCall):
        call("TO_PASSWORD")
    with pytest.raises(InvalidFunctionCall):
        call("PASSWORD_ALGO", b"a", b"b")
    with pytest.raises(InvalidFunctionCall):
        signature("PASSWORD_HASH")


def test_to_password_result_renders_masked(engine):
    """El texto de una credencial devuelta por TO_PASSWORD está enmascarado."""
    assert str(call("TO_PASSWORD", "pw", 0, engine=engine)) == MASK


def test_to_password_accepts_lone_surrogates(engine):
    """TO_PASSWORD y PASSWORD_VERIFY son totales para cualquier texto."""
    credential = call("TO_PASSWORD", "pw\ud800", 0, engine=engine)
    assert call("PASSWORD_VERIFY", "pw\ud800", credential, engine=engine).value is True
    assert call("PASSWORD_VERIFY", "pw", credential, engine=engine).value is False

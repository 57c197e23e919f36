# --------------------------------------------------------------
# File: functions.py
# Description: Funciones SQL de contraseñas y de cifrado por bloques.
# --------------------------------------------------------------
"""Puente entre las funciones SQL invocables y las operaciones del núcleo.

Cada función declara su tipo de resultado y si es determinista, de modo que el
motor anfitrión pueda comprobar tipos y plegar constantes antes de evaluar.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from credcore.conversion import convert
from credcore.crypto_kdf import KeyDerivationEngine
from credcore.crypto_sym import block_decrypt, block_encrypt
from credcore.errors import (
    InvalidFunctionCall,
    MalformedCredential,
    TypeMismatch,
    UnsupportedConversion,
)
from credcore.password import PasswordValue
from credcore.values import NULL, BinaryValue, BooleanValue, TextValue, ValueKind, wrap

logger = logging.getLogger(__name__)


class FunctionSignature(BaseModel):
    """Firma pública de una función SQL.

    Attributes:
        name (str): Nombre SQL en mayúsculas.
        min_args (int): Número mínimo de argumentos.
        max_args (int): Número máximo de argumentos.
        result_kind (ValueKind): Tipo del resultado, independiente de los argumentos.
        deterministic (bool): False si dos llamadas idénticas pueden diferir.

    """

    model_config = ConfigDict(frozen=True)

    name: str
    min_args: int
    max_args: int
    result_kind: ValueKind
    deterministic: bool = True


def _argument(function: str, role: str, value: Any, kind: ValueKind) -> Any:
    """Convierte un argumento al tipo esperado identificando su papel si falla."""

    # el texto enmascarado de una credencial no es un texto en claro utilizable
    if kind is ValueKind.TEXT and value.kind is ValueKind.CREDENTIAL:
        raise TypeMismatch(f"{function}: el argumento '{role}' no admite PASSWORD")
    try:
        return convert(value, kind)
    except (UnsupportedConversion, TypeMismatch) as exc:
        raise TypeMismatch(
            f"{function}: el argumento '{role}' debe ser {kind.value}, "
            f"se recibió {value.kind.value}"
        ) from exc


def _credential(function: str, value: Any) -> PasswordValue:
    try:
        return _argument(function, "credential", value, ValueKind.CREDENTIAL)
    except MalformedCredential as exc:
        raise TypeMismatch(
            f"{function}: el argumento 'credential' no es una credencial válida"
        ) from exc


def _to_password(args: List[Any], engine: Optional[KeyDerivationEngine]) -> PasswordValue:
    plaintext = _argument("TO_PASSWORD", "plaintext", args[0], ValueKind.TEXT).value
    cost = None
    if len(args) > 1:
        cost = _argument("TO_PASSWORD", "cost", args[1], ValueKind.INTEGER).value
    return PasswordValue.create(plaintext, cost, engine=engine)


def _password_verify(args: List[Any], engine: Optional[KeyDerivationEngine]) -> BooleanValue:
    plaintext = _argument("PASSWORD_VERIFY", "plaintext", args[0], ValueKind.TEXT).value
    credential = _credential("PASSWORD_VERIFY", args[1])
    return BooleanValue(value=credential.verify(plaintext, engine=engine))


def _password_algo(args: List[Any], engine: Optional[KeyDerivationEngine]) -> TextValue:
    return TextValue(value=_credential("PASSWORD_ALGO", args[0]).algorithm_name())


def _cipher_args(function: str, args: List[Any]) -> Tuple[str, bytes, bytes]:
    name = _argument(function, "cipher", args[0], ValueKind.TEXT).value
    key = _argument(function, "key", args[1], ValueKind.BINARY).value
    data = _argument(function, "data", args[2], ValueKind.BINARY).value
    return name, key, data


def _encrypt(args: List[Any], engine: Optional[KeyDerivationEngine]) -> BinaryValue:
    return BinaryValue(value=block_encrypt(*_cipher_args("ENCRYPT", args)))


def _decrypt(args: List[Any], engine: Optional[KeyDerivationEngine]) -> BinaryValue:
    return BinaryValue(value=block_decrypt(*_cipher_args("DECRYPT", args)))


Handler = Callable[[List[Any], Optional[KeyDerivationEngine]], Any]

FUNCTIONS: Dict[str, Tuple[FunctionSignature, Handler]] = {
    "TO_PASSWORD": (
        FunctionSignature(
            name="TO_PASSWORD",
            min_args=1,
            max_args=2,
            result_kind=ValueKind.CREDENTIAL,
            deterministic=False,
        ),
        _to_password,
    ),
    "PASSWORD_VERIFY": (
        FunctionSignature(
            name="PASSWORD_VERIFY", min_args=2, max_args=2, result_kind=ValueKind.BOOLEAN
        ),
        _password_verify,
    ),
    "PASSWORD_ALGO": (
        FunctionSignature(
            name="PASSWORD_ALGO", min_args=1, max_args=1, result_kind=ValueKind.TEXT
        ),
        _password_algo,
    ),
    "ENCRYPT": (
        FunctionSignature(name="ENCRYPT", min_args=3, max_args=3, result_kind=ValueKind.BINARY),
        _encrypt,
    ),
    "DECRYPT": (
        FunctionSignature(name="DECRYPT", min_args=3, max_args=3, result_kind=ValueKind.BINARY),
        _decrypt,
    ),
}


def signature(name: str) -> FunctionSignature:
    """Devuelve la firma de la función SQL `name`.

    Raises:
        InvalidFunctionCall: Si la función no existe.

    """

    entry = FUNCTIONS.get(name.upper())
    if entry is None:
        raise InvalidFunctionCall(f"Función desconocida: {name}")
    return entry[0]


def result_kind(name: str, arg_count: int) -> ValueKind:
    """Comprueba la aridad y devuelve el tipo de resultado sin evaluar."""

    sig = signature(name)
    if not sig.min_args <= arg_count <= sig.max_args:
        raise InvalidFunctionCall(
            f"{sig.name} espera entre {sig.min_args} y {sig.max_args} argumentos, "
            f"se recibieron {arg_count}"
        )
    return sig.result_kind


def is_deterministic(name: str) -> bool:
    """Indica si la función admite plegado de constantes."""

    return signature(name).deterministic


def call(name: str, *args: Any, engine: Optional[KeyDerivationEngine] = None) -> Any:
    """Evalúa la función SQL `name` con los argumentos dados.

    Args:
        name (str): Nombre de la función (sin distinguir mayúsculas).
        *args (Any): Valores del sistema u objetos nativos de Python.
        engine (Optional[KeyDerivationEngine]): Motor de derivación de la sesión.

    Returns:
        Any: Valor del tipo declarado en la firma, o NULL si algún argumento
        es NULL.

    """

    result_kind(name, len(args))
    sig, handler = FUNCTIONS[name.upper()]
    values = [wrap(arg) for arg in args]
    if any(value.kind is ValueKind.NULL for value in values):
        return NULL
    logger.debug("Evaluando %s con %d argumentos", sig.name, len(values))
    return handler(values, engine)

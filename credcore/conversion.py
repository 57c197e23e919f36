# --------------------------------------------------------------
# File: conversion.py
# Description: Tabla explícita de conversiones entre tipos de valor.
# --------------------------------------------------------------
"""Coerción de valores indexada por (tipo origen, tipo destino).

Una credencial convertida a binario produce el blob codificado; convertida a
texto produce siempre el marcador enmascarado. Cualquier otro destino falla.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Tuple

from credcore.errors import InvalidValue, UnsupportedConversion
from credcore.password import MASK, PasswordValue
from credcore.values import (
    NULL,
    BinaryValue,
    BooleanValue,
    IntegerValue,
    TextValue,
    ValueKind,
    wrap,
)

Converter = Callable[[Any], Any]


def _identity(value: Any) -> Any:
    return value


def _text_to_integer(value: TextValue) -> IntegerValue:
    try:
        return IntegerValue(value=int(value.value.strip()))
    except ValueError as exc:
        raise InvalidValue("Texto no convertible a INTEGER") from exc


_CONVERSIONS: Dict[Tuple[ValueKind, ValueKind], Converter] = {
    (ValueKind.CREDENTIAL, ValueKind.CREDENTIAL): _identity,
    (ValueKind.CREDENTIAL, ValueKind.BINARY): lambda v: BinaryValue(value=v.encoded),
    (ValueKind.CREDENTIAL, ValueKind.TEXT): lambda v: TextValue(value=MASK),
    (ValueKind.BINARY, ValueKind.CREDENTIAL): lambda v: PasswordValue.from_encoded(v.value),
    (ValueKind.BINARY, ValueKind.BINARY): _identity,
    (ValueKind.BINARY, ValueKind.TEXT): lambda v: TextValue(value=v.value.hex()),
    (ValueKind.TEXT, ValueKind.TEXT): _identity,
    (ValueKind.TEXT, ValueKind.BINARY): lambda v: BinaryValue(value=v.value.encode("utf-8")),
    (ValueKind.TEXT, ValueKind.INTEGER): _text_to_integer,
    (ValueKind.INTEGER, ValueKind.INTEGER): _identity,
    (ValueKind.INTEGER, ValueKind.TEXT): lambda v: TextValue(value=str(v.value)),
    (ValueKind.INTEGER, ValueKind.BOOLEAN): lambda v: BooleanValue(value=v.value != 0),
    (ValueKind.BOOLEAN, ValueKind.BOOLEAN): _identity,
    (ValueKind.BOOLEAN, ValueKind.INTEGER): lambda v: IntegerValue(value=int(v.value)),
    (ValueKind.BOOLEAN, ValueKind.TEXT): lambda v: TextValue(value="TRUE" if v.value else "FALSE"),
}


def can_convert(source: ValueKind, target: ValueKind) -> bool:
    """Indica si existe una conversión definida entre ambos tipos."""

    return source is ValueKind.NULL or (source, target) in _CONVERSIONS


def convert(value: Any, target: ValueKind) -> Any:
    """Convierte `value` al tipo `target` según la tabla de conversiones.

    Args:
        value (Any): Valor del sistema u objeto nativo de Python.
        target (ValueKind): Tipo de destino.

    Returns:
        Any: Valor convertido; NULL se conserva como NULL.

    Raises:
        UnsupportedConversion: Si el par (origen, destino) no está definido.
        MalformedCredential: Si un binario no es un blob de credencial válido.

    """

    value = wrap(value)
    if value.kind is ValueKind.NULL:
        return NULL
    converter = _CONVERSIONS.get((value.kind, target))
    if converter is None:
        raise UnsupportedConversion(value.kind.value, target.value)
    return converter(value)


def display(value: Any) -> str:
    """Representación textual para la salida de consultas."""

    value = wrap(value)
    if value.kind is ValueKind.NULL:
        return "NULL"
    return convert(value, ValueKind.TEXT).value


def sql_literal(value: Any) -> str:
    """Literal SQL usado al regenerar sentencias.

    Las credenciales se representan con el marcador, nunca con el blob.
    """

    value = wrap(value)
    kind = value.kind
    if kind is ValueKind.NULL:
        return "NULL"
    if kind is ValueKind.BOOLEAN:
        return "TRUE" if value.value else "FALSE"
    if kind is ValueKind.INTEGER:
        return str(value.value)
    if kind is ValueKind.BINARY:
        return f"X'{value.value.hex()}'"
    text = convert(value, ValueKind.TEXT).value
    return "'" + text.replace("'", "''") + "'"

# --------------------------------------------------------------
# File: values.py
# Description: Variantes cerradas del sistema de valores SQL.
# --------------------------------------------------------------
"""Tipos de valor simples y envoltorio de objetos nativos de Python."""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from credcore.errors import TypeMismatch


class ValueKind(str, Enum):
    NULL = "NULL"
    BOOLEAN = "BOOLEAN"
    INTEGER = "INTEGER"
    TEXT = "VARCHAR"
    BINARY = "VARBINARY"
    CREDENTIAL = "PASSWORD"


class _SimpleValue(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    kind: ClassVar[ValueKind]


class NullValue(_SimpleValue):
    kind: ClassVar[ValueKind] = ValueKind.NULL


class BooleanValue(_SimpleValue):
    kind: ClassVar[ValueKind] = ValueKind.BOOLEAN
    value: bool


class IntegerValue(_SimpleValue):
    kind: ClassVar[ValueKind] = ValueKind.INTEGER
    value: int


class TextValue(_SimpleValue):
    kind: ClassVar[ValueKind] = ValueKind.TEXT
    value: str


class BinaryValue(_SimpleValue):
    kind: ClassVar[ValueKind] = ValueKind.BINARY
    value: bytes


NULL = NullValue()


def is_value(obj: Any) -> bool:
    """Indica si `obj` ya es un valor del sistema (simple o credencial)."""

    return isinstance(getattr(obj, "kind", None), ValueKind)


def wrap(obj: Any) -> Any:
    """Convierte un objeto nativo de Python en el valor correspondiente.

    Args:
        obj (Any): None, bool, int, str, bytes-like o un valor existente.

    Returns:
        Any: Valor del sistema; los valores existentes se devuelven tal cual.

    Raises:
        TypeMismatch: Si el objeto no tiene variante equivalente.

    """

    if is_value(obj):
        return obj
    if obj is None:
        return NULL
    if isinstance(obj, bool):
        return BooleanValue(value=obj)
    if isinstance(obj, int):
        return IntegerValue(value=obj)
    if isinstance(obj, str):
        return TextValue(value=obj)
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return BinaryValue(value=bytes(obj))
    raise TypeMismatch(f"Tipo de Python sin valor SQL equivalente: {type(obj).__name__}")

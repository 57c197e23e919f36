# --------------------------------------------------------------
# File: encoding.py
# Description: Empaquetado y validación del blob binario de credenciales.
# --------------------------------------------------------------
"""Formato binario versionado de una credencial.

Estructura (orientada a byte, sin relleno)::

    version(1) | algorithm_id(1) | cost(1) | salt_len(1) | salt(N) | hash(32)
"""

from __future__ import annotations

from credcore.crypto_kdf import HASH_LEN
from credcore.errors import InvalidValue, MalformedCredential
from credcore.models import CredentialHeader

VERSION = 1
ALGO_PBKDF2_SHA256 = 1
HEADER_LEN = 4
MIN_SALT_LEN = 8
MAX_SALT_LEN = 64


def _byte(field: str, value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise InvalidValue(f"El campo {field} no cabe en un byte")
    return value


def encode(algorithm_id: int, cost_factor: int, salt: bytes, derived_hash: bytes) -> bytes:
    """Concatena cabecera, sal y hash. No valida la semántica del algoritmo.

    Args:
        algorithm_id (int): Identificador del algoritmo de derivación.
        cost_factor (int): Factor de coste ya acotado.
        salt (bytes): Sal aleatoria de la credencial.
        derived_hash (bytes): Hash derivado de 32 bytes.

    Returns:
        bytes: Blob listo para almacenarse.

    """

    header = bytes(
        [
            VERSION,
            _byte("algorithm_id", algorithm_id),
            _byte("cost_factor", cost_factor),
            _byte("salt_length", len(salt)),
        ]
    )
    return header + bytes(salt) + bytes(derived_hash)


def decode(blob: bytes) -> CredentialHeader:
    """Valida la estructura del blob y devuelve su cabecera.

    Args:
        blob (bytes): Credencial codificada.

    Returns:
        CredentialHeader: Campos de la cabecera.

    Raises:
        MalformedCredential: Si la longitud, la versión o la sal son incoherentes.

    """

    if blob is None or len(blob) < HEADER_LEN:
        raise MalformedCredential("Credencial truncada: cabecera incompleta")
    version, algorithm_id, cost_factor, salt_length = blob[0], blob[1], blob[2], blob[3]
    if version != VERSION:
        raise MalformedCredential(f"Versión de credencial no soportada: {version}")
    if not MIN_SALT_LEN <= salt_length <= MAX_SALT_LEN:
        raise MalformedCredential(f"Longitud de sal fuera de rango: {salt_length}")
    if len(blob) != HEADER_LEN + salt_length + HASH_LEN:
        raise MalformedCredential(f"Longitud de credencial inconsistente: {len(blob)}")
    return CredentialHeader(
        version=version,
        algorithm_id=algorithm_id,
        cost_factor=cost_factor,
        salt_length=salt_length,
    )


def extract_salt(blob: bytes) -> bytes:
    """Devuelve la sal de un blob ya validado."""

    return bytes(blob[HEADER_LEN:HEADER_LEN + blob[3]])


def extract_hash(blob: bytes) -> bytes:
    """Devuelve el hash derivado de un blob ya validado."""

    return bytes(blob[HEADER_LEN + blob[3]:])

# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Cifrado y descifrado por bloques sin estado (ENCRYPT/DECRYPT).
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico por bloques con relleno de ceros.

Cada bloque se transforma de forma independiente y el descifrado no elimina
el relleno: quien llama debe conservar la longitud original si la necesita.
"""

import logging
from typing import Dict

from cryptography.exceptions import InternalError, UnsupportedAlgorithm
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from credcore.crypto_kdf import wipe
from credcore.errors import CryptoProviderError, InvalidValue, UnknownCipher
from credcore.models import BlockCipherSpec

logger = logging.getLogger(__name__)

BLOCK_ALIGN = 16

CIPHERS: Dict[str, BlockCipherSpec] = {
    "AES": BlockCipherSpec(
        name="AES", algorithm=algorithms.AES, key_length=16, block_size=BLOCK_ALIGN
    ),
}


def resolve_cipher(name: str) -> BlockCipherSpec:
    """Obtiene el cifrador registrado con `name` (sin distinguir mayúsculas).

    Raises:
        UnknownCipher: Si el nombre no está registrado.

    """

    spec = CIPHERS.get((name or "").strip().upper())
    if spec is None:
        raise UnknownCipher(name)
    return spec


def pad_key(key: bytes, key_length: int) -> bytearray:
    """Rellena la clave con ceros a la derecha hasta `key_length`.

    Args:
        key (bytes): Material de clave suministrado.
        key_length (int): Longitud exigida por el cifrador.

    Returns:
        bytearray: Copia rellenada, que el llamante debe borrar tras usarla.

    Raises:
        InvalidValue: Si la clave excede la longitud exigida; nunca se trunca.

    """

    if len(key) > key_length:
        raise InvalidValue(
            f"La clave supera la longitud del cifrador ({len(key)} > {key_length} bytes)"
        )
    padded = bytearray(key_length)
    padded[: len(key)] = key
    return padded


def pad_to_block(data: bytes, block_size: int) -> bytes:
    """Rellena con ceros hasta el siguiente múltiplo de `block_size`."""

    remainder = len(data) % block_size
    if remainder == 0:
        return bytes(data)
    return bytes(data) + bytes(block_size - remainder)


def _transform(cipher_name: str, key: bytes, data: bytes, *, encrypt: bool) -> bytes:
    spec = resolve_cipher(cipher_name)
    padded_key = pad_key(key, spec.key_length)
    buffer = pad_to_block(data, spec.block_size)
    try:
        cipher = Cipher(spec.algorithm(bytes(padded_key)), modes.ECB())
        ctx = cipher.encryptor() if encrypt else cipher.decryptor()
        out = ctx.update(buffer) + ctx.finalize()
    except (UnsupportedAlgorithm, InternalError) as exc:
        logger.error("Cifrador %s no disponible en el backend", spec.name)
        raise CryptoProviderError(f"Cifrador {spec.name} no disponible") from exc
    finally:
        wipe(padded_key)
    logger.debug(
        "%s %s: %d bytes -> %d bytes",
        "ENCRYPT" if encrypt else "DECRYPT",
        spec.name,
        len(data),
        len(out),
    )
    return out


def block_encrypt(cipher_name: str, key: bytes, data: bytes) -> bytes:
    """Cifra `data` con el cifrador de bloque indicado.

    Args:
        cipher_name (str): Nombre del cifrador (`AES`).
        key (bytes): Clave; se rellena con ceros hasta la longitud exigida.
        data (bytes): Datos en claro; se rellenan hasta múltiplo de bloque.

    Returns:
        bytes: Datos cifrados, de longitud múltiplo del bloque.

    """

    return _transform(cipher_name, key, data, encrypt=True)


def block_decrypt(cipher_name: str, key: bytes, data: bytes) -> bytes:
    """Aplica la transformación inversa de `block_encrypt` sin quitar relleno."""

    return _transform(cipher_name, key, data, encrypt=False)

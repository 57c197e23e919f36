# --------------------------------------------------------------
# File: crypto_kdf.py
# Description: Derivación PBKDF2-HMAC-SHA-256 de hashes de contraseña.
# --------------------------------------------------------------
"""Motor de derivación de claves y fuente aleatoria segura para las sales."""

from __future__ import annotations

import logging
import os
from typing import Optional

from cryptography.exceptions import InternalError, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from credcore.errors import CryptoProviderError

logger = logging.getLogger(__name__)

HASH_LEN = 32
MIN_COST = 0
MAX_COST = 0xFF
# iterations = 2^(10 + cost), con exponente acotado a [10, 20]
_MIN_EXP = 10
_MAX_EXP = 20


def clamp_cost(cost: int) -> int:
    """Acota el factor de coste al rango de un byte en lugar de rechazarlo.

    El valor acotado es el que se almacena en bruto en la cabecera; la
    traducción a iteraciones aplica su propio límite en `iterations_for_cost`.
    """

    return max(MIN_COST, min(MAX_COST, int(cost)))


def iterations_for_cost(cost: int) -> int:
    """Traduce el factor de coste almacenado a número de iteraciones PBKDF2.

    Args:
        cost (int): Factor de coste tal y como figura en la cabecera.

    Returns:
        int: Iteraciones, `2 ** clamp(10 + cost, 10, 20)`.

    """

    return 1 << max(_MIN_EXP, min(_MAX_EXP, 10 + int(cost)))


def wipe(buffer: bytearray) -> None:
    """Sobrescribe con ceros un búfer mutable que contuvo material sensible."""

    buffer[:] = bytes(len(buffer))


class SecureRandomSource:
    """Fuente aleatoria criptográfica basada en el CSPRNG del sistema.

    `os.urandom` es seguro frente a llamadas concurrentes y no requiere
    bloqueos, por lo que una única instancia puede compartirse entre sesiones.
    """

    def token_bytes(self, length: int) -> bytes:
        return os.urandom(length)


class KeyDerivationEngine:
    """Deriva secretos de 32 bytes a partir de una passphrase, sal y coste."""

    def __init__(self, random_source: Optional[SecureRandomSource] = None) -> None:
        self._random = random_source or SecureRandomSource()

    @property
    def random_source(self) -> SecureRandomSource:
        return self._random

    def new_salt(self, length: int) -> bytes:
        """Genera una sal nueva de `length` bytes."""

        return self._random.token_bytes(length)

    def derive(self, plaintext: str, salt: bytes, cost: int) -> bytes:
        """Deriva el hash PBKDF2-HMAC-SHA-256 de la passphrase.

        Args:
            plaintext (str): Passphrase en claro; nunca se conserva.
            salt (bytes): Sal asociada a la credencial.
            cost (int): Factor de coste; se traduce con `iterations_for_cost`.

        Returns:
            bytes: Secreto derivado de exactamente 32 bytes.

        Raises:
            CryptoProviderError: Si el backend criptográfico no está disponible
                o falla durante la derivación.

        """

        iterations = iterations_for_cost(cost)
        # surrogatepass: todo str es derivable, incluso con sustitutos sueltos
        secret = bytearray(plaintext.encode("utf-8", "surrogatepass"))
        try:
            kdf = PBKDF2HMAC(
                algorithm=hashes.SHA256(),
                length=HASH_LEN,
                salt=bytes(salt),
                iterations=iterations,
            )
            derived = kdf.derive(secret)
        except (UnsupportedAlgorithm, InternalError) as exc:
            logger.error("Fallo del proveedor PBKDF2 (iteraciones=%d)", iterations)
            raise CryptoProviderError("PBKDF2-HMAC-SHA-256 no disponible") from exc
        finally:
            wipe(secret)
        logger.debug("Derivación PBKDF2 completada: iteraciones=%d", iterations)
        return derived


_default_engine: Optional[KeyDerivationEngine] = None


def default_engine() -> KeyDerivationEngine:
    """Devuelve el motor compartido, creándolo en el primer uso."""

    global _default_engine
    if _default_engine is None:
        _default_engine = KeyDerivationEngine()
    return _default_engine

# --------------------------------------------------------------
# File: password.py
# Description: Valor de dominio inmutable para credenciales con hash PBKDF2.
# --------------------------------------------------------------
"""Tipo de valor `PASSWORD`: creación, verificación e introspección."""

from __future__ import annotations

import logging
from typing import Optional

from credcore import config, encoding
from credcore.crypto_kdf import (
    KeyDerivationEngine,
    clamp_cost,
    default_engine,
    iterations_for_cost,
    wipe,
)
from credcore.ct_compare import constant_time_equals
from credcore.errors import InvalidValue
from credcore.values import ValueKind

logger = logging.getLogger(__name__)

MASK = "*PASSWORD*"

ALGORITHM_NAMES = {
    encoding.ALGO_PBKDF2_SHA256: "PBKDF2-HMAC-SHA-256",
}


class PasswordValue:
    """Credencial versionada con sal: nunca guarda ni expone el texto en claro.

    Solo se construye mediante `create` (derivación con sal nueva) o
    `from_encoded` (blob almacenado previamente). La igualdad y el hash se
    definen únicamente sobre el hash derivado.
    """

    __slots__ = ("_blob", "_header")

    kind = ValueKind.CREDENTIAL

    def __init__(self, blob: bytes) -> None:
        object.__setattr__(self, "_header", encoding.decode(blob))
        object.__setattr__(self, "_blob", bytes(blob))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("PasswordValue es inmutable")

    @classmethod
    def create(
        cls,
        plaintext: str,
        cost: Optional[int] = None,
        *,
        engine: Optional[KeyDerivationEngine] = None,
        salt_length: Optional[int] = None,
    ) -> "PasswordValue":
        """Deriva una credencial nueva a partir de la passphrase.

        Dos llamadas con la misma entrada producen blobs distintos (sal nueva),
        aunque ambos verifiquen contra la misma passphrase.

        Args:
            plaintext (str): Passphrase en claro.
            cost (Optional[int]): Factor de coste; fuera de rango se acota.
            engine (Optional[KeyDerivationEngine]): Motor de derivación propio.
            salt_length (Optional[int]): Longitud de sal en bytes, en [8, 64].

        Returns:
            PasswordValue: Credencial recién derivada.

        Raises:
            InvalidValue: Si la longitud de sal está fuera de rango.

        """

        engine = engine or default_engine()
        requested = config.DEFAULT_COST if cost is None else cost
        effective = clamp_cost(requested)
        if effective != requested:
            logger.debug("Factor de coste %s acotado a %d", requested, effective)
        if salt_length is None:
            salt_length = config.DEFAULT_SALT_LENGTH
        if not encoding.MIN_SALT_LEN <= salt_length <= encoding.MAX_SALT_LEN:
            raise InvalidValue(f"Longitud de sal fuera de rango: {salt_length}")

        salt = engine.new_salt(salt_length)
        derived = bytearray(engine.derive(plaintext, salt, effective))
        try:
            blob = encoding.encode(encoding.ALGO_PBKDF2_SHA256, effective, salt, derived)
        finally:
            wipe(derived)
        logger.debug("Credencial creada: coste=%d sal=%d bytes", effective, salt_length)
        return cls(blob)

    @classmethod
    def from_encoded(cls, blob: bytes) -> "PasswordValue":
        """Reconstruye una credencial almacenada sin volver a derivar.

        Raises:
            MalformedCredential: Si el blob no respeta el formato.

        """

        return cls(blob)

    @property
    def version(self) -> int:
        return self._header.version

    @property
    def algorithm_id(self) -> int:
        return self._header.algorithm_id

    @property
    def cost_factor(self) -> int:
        return self._header.cost_factor

    @property
    def iterations(self) -> int:
        return iterations_for_cost(self._header.cost_factor)

    @property
    def salt(self) -> bytes:
        return encoding.extract_salt(self._blob)

    @property
    def encoded(self) -> bytes:
        """Blob completo (cabecera, sal y hash); nunca el texto en claro."""

        return self._blob

    def verify(
        self, candidate: str, *, engine: Optional[KeyDerivationEngine] = None
    ) -> bool:
        """Comprueba si `candidate` corresponde a esta credencial.

        Args:
            candidate (str): Passphrase a comprobar.
            engine (Optional[KeyDerivationEngine]): Motor de derivación propio.

        Returns:
            bool: True si coincide; un desajuste es False, nunca una excepción.

        """

        engine = engine or default_engine()
        actual = bytearray(engine.derive(candidate, self.salt, self.cost_factor))
        try:
            return constant_time_equals(encoding.extract_hash(self._blob), actual)
        finally:
            wipe(actual)

    def algorithm_name(self) -> str:
        """Nombre canónico del algoritmo, o `UNKNOWN(<id>)` si no se reconoce."""

        algo = self._header.algorithm_id
        return ALGORITHM_NAMES.get(algo, f"UNKNOWN({algo})")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PasswordValue):
            return NotImplemented
        return constant_time_equals(
            encoding.extract_hash(self._blob), encoding.extract_hash(other._blob)
        )

    def __hash__(self) -> int:
        return hash(encoding.extract_hash(self._blob))

    def __bytes__(self) -> bytes:
        return self._blob

    def __str__(self) -> str:
        return MASK

    def __repr__(self) -> str:
        return f"PasswordValue({MASK})"

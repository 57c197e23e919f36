# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de errores de credenciales, conversiones y cifrado.
# --------------------------------------------------------------
"""Excepciones públicas del paquete `credcore`.

Ningún mensaje incluye el contenido secreto del valor afectado: solo su tipo
o el papel que ocupa en la llamada.
"""


class CredentialCoreError(Exception):
    """Error base para todas las operaciones del núcleo."""


class MalformedCredential(CredentialCoreError, ValueError):
    """El blob codificado no respeta la estructura versionada."""


class TypeMismatch(CredentialCoreError, TypeError):
    """Se recibió un tipo de valor distinto del esperado en un argumento."""


class UnsupportedConversion(CredentialCoreError, TypeError):
    """No existe conversión definida entre el tipo origen y el destino."""

    def __init__(self, source: str, target: str) -> None:
        super().__init__(f"No se puede convertir {source} a {target}")
        self.source = source
        self.target = target


class UnknownCipher(CredentialCoreError, ValueError):
    """El nombre de cifrador de bloque no está registrado."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Cifrador de bloque desconocido: {name!r}")
        self.name = name


class CryptoProviderError(CredentialCoreError):
    """Fallo fatal del proveedor criptográfico subyacente (no se reintenta)."""


class InvalidValue(CredentialCoreError, ValueError):
    """Argumento fuera de rango o imposible de interpretar."""


class InvalidFunctionCall(CredentialCoreError):
    """Función SQL desconocida o número de argumentos incorrecto."""

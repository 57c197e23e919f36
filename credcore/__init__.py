# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública del núcleo de credenciales y cifrado.
# --------------------------------------------------------------
"""Inicializa el paquete `credcore` y documenta sus módulos principales."""

__all__ = [
    "config",
    "conversion",
    "crypto_kdf",
    "crypto_sym",
    "ct_compare",
    "encoding",
    "errors",
    "log",
    "models",
    "password",
    "values",
]

# --------------------------------------------------------------
# File: __init__.py
# Description: Capa de funciones SQL sobre el núcleo de credenciales.
# --------------------------------------------------------------
"""Inicializa el paquete `credapi`."""

from credapi.functions import call, is_deterministic, result_kind, signature

__all__ = ["call", "is_deterministic", "result_kind", "signature"]

# --------------------------------------------------------------
# File: log.py
# Description: Configuración básica del logging de la aplicación.
# --------------------------------------------------------------
"""Punto único de configuración de logging para el núcleo y la capa SQL."""

from __future__ import annotations

import logging
import sys

from credcore import config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str | None = None) -> None:
    """Configura el logging raíz con salida a stdout.

    Args:
        level (str | None): Nivel a aplicar; si es None se usa `LOG_LEVEL`.

    """

    logging.basicConfig(
        level=(level or config.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para aislar la configuración y el motor KDF.
# --------------------------------------------------------------

import importlib
from typing import Iterator

import pytest

from credcore.crypto_kdf import KeyDerivationEngine


@pytest.fixture(autouse=True)
def _fast_config(monkeypatch) -> Iterator[None]:
    """Fija un coste mínimo por defecto y recarga credcore.config.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante cada test.
    """
    monkeypatch.setenv("PASSWORD_DEFAULT_COST", "0")
    monkeypatch.delenv("PASSWORD_SALT_LENGTH", raising=False)

    import credcore.config as config_module

    importlib.reload(config_module)

    yield

    monkeypatch.undo()
    importlib.reload(config_module)


@pytest.fixture
def engine() -> KeyDerivationEngine:
    """Motor de derivación propio de cada test."""
    return KeyDerivationEngine()

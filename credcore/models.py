# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic que describen cabeceras de credencial y cifradores."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class CredentialHeader(BaseModel):
    """Cabecera decodificada de un blob de credencial.

    Attributes:
        version (int): Versión del formato (actualmente 1).
        algorithm_id (int): Identificador del algoritmo de derivación.
        cost_factor (int): Factor de coste en bruto, sin acotar.
        salt_length (int): Longitud en bytes de la sal.

    """

    model_config = ConfigDict(frozen=True)

    version: int
    algorithm_id: int
    cost_factor: int
    salt_length: int


class BlockCipherSpec(BaseModel):
    """Descripción de un cifrador de bloque registrado.

    Attributes:
        name (str): Nombre canónico en mayúsculas.
        algorithm (Any): Clase de `cryptography` que implementa el bloque.
        key_length (int): Longitud de clave exigida en bytes.
        block_size (int): Alineación de bloque en bytes.

    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    algorithm: Any
    key_length: int
    block_size: int

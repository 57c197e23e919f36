# --------------------------------------------------------------
# File: ct_compare.py
# Description: Comparación de secuencias de bytes en tiempo constante.
# --------------------------------------------------------------
"""Comparador resistente a ataques de temporización."""


def constant_time_equals(a: bytes, b: bytes) -> bool:
    """Compara dos secuencias sin cortocircuitar en la primera diferencia.

    La longitud no es secreta: si difiere se devuelve False de inmediato. En
    caso contrario se recorren todos los bytes acumulando el XOR de cada par.

    Args:
        a (bytes): Primera secuencia (admite cualquier objeto bytes-like).
        b (bytes): Segunda secuencia.

    Returns:
        bool: True si ambas secuencias son idénticas.

    """

    if len(a) != len(b):
        return False
    acc = 0
    for x, y in zip(a, b):
        acc |= x ^ y
    return acc == 0

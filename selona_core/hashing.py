# --------------------------------------------------------------
# File: hashing.py
# Description: Hashes SHA-256 de passphrase y PIN para verificación local.
# --------------------------------------------------------------
"""Digests unidireccionales para comprobar passphrase y PIN en el dispositivo.

Los hashes no llevan salt: sólo sirven para comparaciones locales contra un
valor almacenado por el llamante. Los PIN se prefijan con una etiqueta fija
para que nunca coincidan con el digest de una passphrase idéntica.
"""

import hashlib
import hmac

from selona_core.config import PIN_PREFIX

__all__ = [
    "sha256_hex",
    "hash_passphrase",
    "verify_passphrase",
    "hash_pin",
    "verify_pin",
]


def sha256_hex(data: bytes) -> str:
    """Devuelve el SHA-256 de `data` en hexadecimal en minúsculas."""

    return hashlib.sha256(data).hexdigest()


def _matches(computed: str, stored: str) -> bool:
    if not isinstance(stored, str):
        return False
    try:
        candidate = stored.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return hmac.compare_digest(computed.encode("ascii"), candidate)


def hash_passphrase(passphrase: str) -> str:
    """Calcula el digest de una passphrase.

    Args:
        passphrase (str): Passphrase en claro.

    Returns:
        str: 64 caracteres hexadecimales.

    """

    return sha256_hex(passphrase.encode("utf-8"))


def verify_passphrase(passphrase: str, stored_hash: str) -> bool:
    """Comprueba una passphrase contra un digest almacenado previamente."""

    try:
        computed = hash_passphrase(passphrase)
    except UnicodeEncodeError:
        return False
    return _matches(computed, stored_hash)


def hash_pin(pin: str) -> str:
    """Calcula el digest de un PIN con el prefijo de dominio `selona_pin_`.

    Args:
        pin (str): PIN en claro, de longitud arbitraria.

    Returns:
        str: 64 caracteres hexadecimales.

    """

    return sha256_hex(f"{PIN_PREFIX}{pin}".encode("utf-8"))


def verify_pin(pin: str, stored_hash: str) -> bool:
    try:
        computed = hash_pin(pin)
    except UnicodeEncodeError:
        return False
    return _matches(computed, stored_hash)

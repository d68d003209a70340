# --------------------------------------------------------------
# File: config.py
# Description: Parámetros criptográficos y configuración por entorno.
# --------------------------------------------------------------
"""Constantes del formato sellado y ajustes leídos del entorno (.env)."""

import os

from dotenv import load_dotenv

load_dotenv()

# Formato del contenedor: salt ‖ nonce ‖ ciphertext ‖ tag.
PASSPHRASE_LENGTH = 9
SALT_SIZE = 16
NONCE_SIZE = 12
TAG_SIZE = 16
KEY_SIZE = 32
MIN_CONTAINER_SIZE = SALT_SIZE + NONCE_SIZE + TAG_SIZE

# Prefijo fijo de separación de dominio para los hashes de PIN.
PIN_PREFIX = "selona_pin_"

DEFAULT_PBKDF2_ITERATIONS = 100_000


def _read_iterations() -> int:
    """Lee SELONA_PBKDF2_ITERATIONS validando que sea un entero positivo."""

    raw = os.getenv("SELONA_PBKDF2_ITERATIONS", str(DEFAULT_PBKDF2_ITERATIONS))
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"SELONA_PBKDF2_ITERATIONS debe ser un entero: {raw!r}") from None
    if value <= 0:
        raise ValueError("SELONA_PBKDF2_ITERATIONS debe ser mayor que cero.")
    return value


PBKDF2_ITERATIONS = _read_iterations()

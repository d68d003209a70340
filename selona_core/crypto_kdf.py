# --------------------------------------------------------------
# File: crypto_kdf.py
# Description: Derivación de claves simétricas mediante PBKDF2-HMAC-SHA256.
# --------------------------------------------------------------
"""Funciones de derivación de claves para el cifrado sellado."""

import logging
from typing import Optional

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from selona_core import config
from selona_core.models import Pbkdf2Params

logger = logging.getLogger(__name__)


def kdf_params(iterations: Optional[int] = None) -> Pbkdf2Params:
    """Resuelve los parámetros PBKDF2 usando la configuración vigente."""

    return Pbkdf2Params(
        iterations=config.PBKDF2_ITERATIONS if iterations is None else iterations,
        length=config.KEY_SIZE,
    )


def derive_key(passphrase: bytes, salt: bytes, *, iterations: Optional[int] = None) -> bytes:
    """Deriva una clave AES-256 a partir de la passphrase y la salt.

    Args:
        passphrase (bytes): Passphrase del usuario ya codificada en UTF-8.
        salt (bytes): Salt aleatoria asociada al contenedor.
        iterations (Optional[int]): Iteraciones PBKDF2; por defecto las de
            `SELONA_PBKDF2_ITERATIONS`.

    Returns:
        bytes: Clave simétrica de 32 bytes, determinista para (passphrase, salt).

    """

    params = kdf_params(iterations)
    logger.debug("[KDF] %s iter=%d outlen=%d", params.alg, params.iterations, params.length)
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=params.length,
        salt=salt,
        iterations=params.iterations,
    )
    return kdf.derive(passphrase)

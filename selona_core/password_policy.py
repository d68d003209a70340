# --------------------------------------------------------------
# File: password_policy.py
# Description: Regla de longitud de passphrases para el cifrado sellado.
# --------------------------------------------------------------
"""Validación de la passphrase de 9 bytes exigida por el cifrado."""

from __future__ import annotations

import logging
from typing import List, Tuple

from selona_core.config import PASSPHRASE_LENGTH
from selona_core.errors import InvalidPassphrase

__all__ = ["check_passphrase", "encode_passphrase"]

logger = logging.getLogger(__name__)


def check_passphrase(passphrase: str) -> Tuple[bool, List[str]]:
    """Evalúa la passphrase y devuelve cumplimiento y motivos de rechazo.

    La longitud se mide en bytes UTF-8, no en caracteres: "contraseñ" tiene
    9 caracteres pero 10 bytes y se rechaza.

    Args:
        passphrase (str): Passphrase propuesta por el usuario.

    Returns:
        Tuple[bool, List[str]]: Resultado de validación y motivos de rechazo.

    """

    reasons: List[str] = []
    try:
        size = len(passphrase.encode("utf-8"))
    except UnicodeEncodeError:
        reasons.append("La passphrase contiene caracteres no representables en UTF-8.")
        return False, reasons
    if size != PASSPHRASE_LENGTH:
        reasons.append(
            f"La passphrase debe medir exactamente {PASSPHRASE_LENGTH} bytes (tiene {size})."
        )
    return not reasons, reasons


def encode_passphrase(passphrase: str) -> bytes:
    """Codifica la passphrase en UTF-8 lanzando excepción si no es válida.

    Raises:
        InvalidPassphrase: Si la codificación falla o no mide 9 bytes.

    """

    ok, reasons = check_passphrase(passphrase)
    if not ok:
        logger.debug("[POLICY] passphrase rechazada")
        raise InvalidPassphrase(reasons[0])
    return passphrase.encode("utf-8")

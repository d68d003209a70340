# --------------------------------------------------------------
# File: errors.py
# Description: Taxonomía cerrada de errores de la capa criptográfica.
# --------------------------------------------------------------
"""Excepciones tipadas que exponen cifrado, descifrado y derivación."""

from enum import Enum

__all__ = [
    "ErrorKind",
    "SelonaCryptoError",
    "InvalidPassphrase",
    "InvalidContainer",
    "CipherInitFailure",
    "EncryptionFailure",
    "DecryptionFailed",
]


class ErrorKind(str, Enum):
    """Categorías de fallo sobre las que el llamante puede ramificar."""

    INVALID_PASSPHRASE = "invalid_passphrase"
    INVALID_CONTAINER = "invalid_container"
    CIPHER_INIT_FAILURE = "cipher_init_failure"
    ENCRYPTION_FAILURE = "encryption_failure"
    DECRYPTION_FAILED = "decryption_failed"


class SelonaCryptoError(Exception):
    """Base común de todos los errores del núcleo criptográfico."""

    kind: ErrorKind

    @property
    def code(self) -> str:
        return self.kind.value


class InvalidPassphrase(SelonaCryptoError):
    """La passphrase no mide exactamente 9 bytes en UTF-8."""

    kind = ErrorKind.INVALID_PASSPHRASE


class InvalidContainer(SelonaCryptoError):
    """El contenedor sellado está malformado o es demasiado corto."""

    kind = ErrorKind.INVALID_CONTAINER


class CipherInitFailure(SelonaCryptoError):
    """AES-GCM rechazó la clave derivada (tamaño inesperado)."""

    kind = ErrorKind.CIPHER_INIT_FAILURE


class EncryptionFailure(SelonaCryptoError):
    """Fallo interno del sellado AEAD."""

    kind = ErrorKind.ENCRYPTION_FAILURE


class DecryptionFailed(SelonaCryptoError):
    """El tag no verifica: passphrase incorrecta o datos alterados.

    Ambas causas comparten mensaje para no ofrecer un oráculo sobre la
    validez de la passphrase.
    """

    kind = ErrorKind.DECRYPTION_FAILED

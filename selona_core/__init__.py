# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública de utilidades criptográficas del paquete selona_core.
# --------------------------------------------------------------
"""Cifrado sellado con passphrase y hashes de verificación local."""

from selona_core.crypto_kdf import derive_key
from selona_core.crypto_sym import decrypt, encrypt
from selona_core.errors import (
    CipherInitFailure,
    DecryptionFailed,
    EncryptionFailure,
    ErrorKind,
    InvalidContainer,
    InvalidPassphrase,
    SelonaCryptoError,
)
from selona_core.hashing import hash_passphrase, hash_pin, verify_passphrase, verify_pin
from selona_core.models import SealedContainer

__all__ = [
    "encrypt",
    "decrypt",
    "derive_key",
    "hash_passphrase",
    "verify_passphrase",
    "hash_pin",
    "verify_pin",
    "SealedContainer",
    "ErrorKind",
    "SelonaCryptoError",
    "InvalidPassphrase",
    "InvalidContainer",
    "CipherInitFailure",
    "EncryptionFailure",
    "DecryptionFailed",
]

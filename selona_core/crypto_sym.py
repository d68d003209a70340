# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Sellado y apertura AES-256-GCM con clave derivada de passphrase.
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico autenticado para proteger datos sensibles."""

import logging
import os
from typing import Callable, Optional, Tuple

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from selona_core.config import NONCE_SIZE, SALT_SIZE, TAG_SIZE
from selona_core.crypto_kdf import derive_key
from selona_core.errors import CipherInitFailure, DecryptionFailed, EncryptionFailure
from selona_core.models import SealedContainer
from selona_core.password_policy import encode_passphrase

logger = logging.getLogger(__name__)

# Fuente de bytes aleatorios: recibe un tamaño y devuelve esa cantidad de bytes.
RandomSource = Callable[[int], bytes]


def _new_cipher(key: bytes) -> AESGCM:
    try:
        return AESGCM(key)
    except ValueError as exc:
        logger.debug("[AES-GCM] clave rechazada: %d bytes", len(key))
        raise CipherInitFailure(f"No se ha podido crear el cifrador: {exc}") from exc


def _draw(random_source: RandomSource, size: int, label: str) -> bytes:
    value = random_source(size)
    if len(value) != size:
        logger.debug("[ENCRYPT] fuente aleatoria corta: %s=%d bytes", label, len(value))
        raise EncryptionFailure(
            f"La fuente aleatoria devolvió {len(value)} bytes de {label}, se esperaban {size}."
        )
    return value


def aes_gcm_encrypt_with_key(
    key: bytes, plaintext: bytes, nonce: bytes, aad: Optional[bytes] = None
) -> Tuple[bytes, bytes]:
    """Cifra datos con AES-GCM utilizando una clave y un nonce proporcionados.

    Args:
        key (bytes): Clave simétrica de 128, 192 o 256 bits.
        plaintext (bytes): Datos a cifrar.
        nonce (bytes): Vector de inicialización de 96 bits, único por clave.
        aad (Optional[bytes]): Datos autenticados adicionales.

    Returns:
        Tuple[bytes, bytes]: Ciphertext sin etiqueta y tag.

    Raises:
        CipherInitFailure: Si la clave no tiene un tamaño AES válido.
        EncryptionFailure: Si la primitiva AEAD rechaza la entrada.

    """

    aes = _new_cipher(key)
    try:
        ct_full = aes.encrypt(nonce, plaintext, aad)
    except (OverflowError, ValueError) as exc:
        raise EncryptionFailure(f"Cifrado fallido: {exc}") from exc
    return ct_full[:-TAG_SIZE], ct_full[-TAG_SIZE:]


def aes_gcm_decrypt_with_key(
    key: bytes, nonce: bytes, ciphertext: bytes, tag: bytes, aad: Optional[bytes] = None
) -> bytes:
    """Descifra datos con AES-GCM utilizando la clave simétrica proporcionada.

    Args:
        key (bytes): Clave simétrica que protege los datos.
        nonce (bytes): Vector de inicialización de 96 bits.
        ciphertext (bytes): Datos cifrados sin etiqueta.
        tag (bytes): Etiqueta de autenticación de 128 bits.
        aad (Optional[bytes]): Datos autenticados adicionales.

    Returns:
        bytes: Mensaje original en claro.

    Raises:
        CipherInitFailure: Si la clave no tiene un tamaño AES válido.
        DecryptionFailed: Si la etiqueta no verifica.

    """

    aes = _new_cipher(key)
    try:
        return aes.decrypt(nonce, ciphertext + tag, aad)
    except InvalidTag:
        raise DecryptionFailed(
            "Descifrado fallido: passphrase incorrecta o datos corruptos."
        ) from None


def encrypt(
    plaintext: bytes,
    passphrase: str,
    *,
    random_source: RandomSource = os.urandom,
    iterations: Optional[int] = None,
) -> bytes:
    """Sella un payload con una clave derivada de la passphrase.

    Cada llamada genera salt y nonce nuevos, por lo que cifrar dos veces el
    mismo mensaje produce contenedores distintos.

    Args:
        plaintext (bytes): Datos en claro que se cifrarán.
        passphrase (str): Passphrase de 9 bytes en UTF-8.
        random_source (RandomSource): Generador criptográfico; `os.urandom`
            por defecto.
        iterations (Optional[int]): Iteraciones PBKDF2 a aplicar.

    Returns:
        bytes: Contenedor salt ‖ nonce ‖ ciphertext ‖ tag.

    Raises:
        InvalidPassphrase: Si la passphrase no mide 9 bytes.
        CipherInitFailure: Si la clave derivada no es aceptada por AES-GCM.
        EncryptionFailure: Si el sellado AEAD falla.

    """

    secret = encode_passphrase(passphrase)
    salt = _draw(random_source, SALT_SIZE, "salt")
    nonce = _draw(random_source, NONCE_SIZE, "nonce")
    key = derive_key(secret, salt, iterations=iterations)
    ciphertext, tag = aes_gcm_encrypt_with_key(key, plaintext, nonce)
    logger.debug("[ENCRYPT] AES-GCM-256 payload=%d bytes", len(plaintext))
    return SealedContainer(salt=salt, nonce=nonce, ciphertext=ciphertext, tag=tag).to_bytes()


def decrypt(container: bytes, passphrase: str, *, iterations: Optional[int] = None) -> bytes:
    """Abre un contenedor sellado con `encrypt`.

    Args:
        container (bytes): Contenedor salt ‖ nonce ‖ ciphertext ‖ tag.
        passphrase (str): Passphrase de 9 bytes usada al cifrar.
        iterations (Optional[int]): Iteraciones PBKDF2 usadas al cifrar.

    Returns:
        bytes: Datos originales en claro.

    Raises:
        InvalidPassphrase: Si la passphrase no mide 9 bytes.
        InvalidContainer: Si el contenedor mide menos de 44 bytes.
        CipherInitFailure: Si la clave derivada no es aceptada por AES-GCM.
        DecryptionFailed: Si la passphrase es incorrecta o los datos están alterados.

    """

    secret = encode_passphrase(passphrase)
    sealed = SealedContainer.from_bytes(container)
    key = derive_key(secret, sealed.salt, iterations=iterations)
    try:
        plaintext = aes_gcm_decrypt_with_key(key, sealed.nonce, sealed.ciphertext, sealed.tag)
    except DecryptionFailed:
        logger.debug("[DECRYPT] tag inválido, container=%d bytes", len(container))
        raise
    logger.debug("[DECRYPT] AES-GCM-256 payload=%d bytes", len(plaintext))
    return plaintext

# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan parámetros y contenedores sellados."""

import base64
import binascii
import logging

from pydantic import BaseModel, Field

from selona_core.config import KEY_SIZE, MIN_CONTAINER_SIZE, NONCE_SIZE, SALT_SIZE, TAG_SIZE
from selona_core.errors import InvalidContainer

logger = logging.getLogger(__name__)


class Pbkdf2Params(BaseModel):
    """Parámetros de estiramiento PBKDF2-HMAC-SHA256.

    Attributes:
        iterations (int): Número de iteraciones aplicadas.
        length (int): Longitud en bytes de la clave derivada.
        alg (str): Identificador del algoritmo.

    """

    iterations: int = Field(gt=0)
    length: int = KEY_SIZE
    alg: str = "pbkdf2-hmac-sha256"


class SealedContainer(BaseModel):
    """Representa el resultado autodescriptivo de un sellado AES-GCM.

    Disposición en bytes (offsets fijos, sin cabecera de versión)::

        0..16   salt
        16..28  nonce
        28..fin ciphertext ‖ tag (16 bytes)

    Attributes:
        salt (bytes): Salt aleatoria usada para derivar la clave.
        nonce (bytes): Vector de inicialización de 96 bits.
        ciphertext (bytes): Datos cifrados sin etiqueta.
        tag (bytes): Etiqueta de autenticación de 128 bits.

    """

    salt: bytes = Field(min_length=SALT_SIZE, max_length=SALT_SIZE)
    nonce: bytes = Field(min_length=NONCE_SIZE, max_length=NONCE_SIZE)
    ciphertext: bytes
    tag: bytes = Field(min_length=TAG_SIZE, max_length=TAG_SIZE)

    @classmethod
    def from_bytes(cls, data: bytes) -> "SealedContainer":
        """Divide posicionalmente un contenedor serializado.

        Args:
            data (bytes): Contenedor completo salt ‖ nonce ‖ ciphertext ‖ tag.

        Returns:
            SealedContainer: Componentes del contenedor.

        Raises:
            InvalidContainer: Si `data` no es binario o mide menos de 44 bytes.

        """

        try:
            data = memoryview(data).tobytes()
        except TypeError:
            logger.debug("[CONTAINER] tipo no binario: %s", type(data).__name__)
            raise InvalidContainer("Contenedor cifrado inválido: se esperaban bytes.") from None
        if len(data) < MIN_CONTAINER_SIZE:
            logger.debug("[CONTAINER] demasiado corto: %d bytes", len(data))
            raise InvalidContainer(
                f"Contenedor cifrado inválido: {len(data)} bytes, mínimo {MIN_CONTAINER_SIZE}."
            )
        body = data[SALT_SIZE + NONCE_SIZE :]
        return cls(
            salt=data[:SALT_SIZE],
            nonce=data[SALT_SIZE : SALT_SIZE + NONCE_SIZE],
            ciphertext=body[:-TAG_SIZE],
            tag=body[-TAG_SIZE:],
        )

    def to_bytes(self) -> bytes:
        """Serializa el contenedor en su disposición binaria fija."""

        return self.salt + self.nonce + self.ciphertext + self.tag

    def to_b64u(self) -> str:
        """Codifica el contenedor en Base64 URL-safe sin relleno."""

        return base64.urlsafe_b64encode(self.to_bytes()).decode("ascii").rstrip("=")

    @classmethod
    def from_b64u(cls, value: str) -> "SealedContainer":
        """Decodifica un contenedor Base64 URL-safe gestionando el relleno."""

        pad = "=" * (-len(value) % 4)
        try:
            data = base64.urlsafe_b64decode(value + pad)
        except (binascii.Error, ValueError) as exc:
            logger.debug("[CONTAINER] Base64 malformado")
            raise InvalidContainer("Contenedor cifrado inválido: Base64 malformado.") from exc
        return cls.from_bytes(data)

# --------------------------------------------------------------
# File: test_crypto_kdf.py
# Description: Pruebas de la derivación de claves PBKDF2-HMAC-SHA256.
# --------------------------------------------------------------

import hashlib
import logging
import os

from selona_core import config
from selona_core.crypto_kdf import derive_key, kdf_params


def test_derive_key_is_deterministic():
    """La misma (passphrase, salt) produce siempre la misma clave de 32 bytes.

    Returns:
        None: Las aserciones comparan ambas derivaciones.
    """
    salt = os.urandom(16)
    k1 = derive_key(b"a3f7b2c1e", salt)
    k2 = derive_key(b"a3f7b2c1e", salt)
    assert k1 == k2
    assert len(k1) == 32


def test_derive_key_depends_on_salt_and_passphrase():
    """Cambiar la salt o la passphrase produce otra clave.

    Returns:
        None: Las aserciones comparan las derivaciones.
    """
    salt = os.urandom(16)
    base = derive_key(b"a3f7b2c1e", salt)
    assert derive_key(b"a3f7b2c1e", os.urandom(16)) != base
    assert derive_key(b"wrong1234", salt) != base


def test_derive_key_matches_reference_at_default_iterations():
    """Con 100.000 iteraciones coincide con hashlib.pbkdf2_hmac.

    Returns:
        None: La aserción compara contra la implementación de referencia.
    """
    salt = bytes(range(16))
    expected = hashlib.pbkdf2_hmac("sha256", b"a3f7b2c1e", salt, 100_000, dklen=32)
    got = derive_key(b"a3f7b2c1e", salt, iterations=config.DEFAULT_PBKDF2_ITERATIONS)
    assert got == expected


def test_derive_key_uses_configured_iterations():
    """Sin override se aplican las iteraciones configuradas en el entorno.

    Returns:
        None: La aserción compara contra hashlib.pbkdf2_hmac.
    """
    salt = bytes(16)
    expected = hashlib.pbkdf2_hmac("sha256", b"a3f7b2c1e", salt, config.PBKDF2_ITERATIONS, dklen=32)
    assert derive_key(b"a3f7b2c1e", salt) == expected


def test_kdf_params_override():
    """El argumento iterations prevalece sobre la configuración.

    Returns:
        None: Las aserciones revisan los parámetros resueltos.
    """
    params = kdf_params(42)
    assert params.iterations == 42
    assert params.length == 32
    assert kdf_params().iterations == config.PBKDF2_ITERATIONS


def test_derive_key_traces_algorithm_without_secrets(caplog):
    """La traza DEBUG incluye algoritmo e iteraciones, nunca la passphrase.

    Args:
        caplog (pytest.LogCaptureFixture): Captura de registros de logging.

    Returns:
        None: Las aserciones revisan el mensaje registrado.
    """
    caplog.set_level(logging.DEBUG, logger="selona_core.crypto_kdf")
    derive_key(b"a3f7b2c1e", bytes(16), iterations=1_234)
    messages = [r.getMessage() for r in caplog.records]
    assert any("pbkdf2-hmac-sha256" in m and "iter=1234" in m for m in messages)
    assert all("a3f7b2c1e" not in m for m in messages)

# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para acelerar PBKDF2 y recargar la configuración.
# --------------------------------------------------------------

import importlib
from typing import Iterator

import pytest

FAST_ITERATIONS = 1_000


@pytest.fixture(autouse=True)
def _fast_kdf(monkeypatch) -> Iterator[None]:
    """Reduce las iteraciones PBKDF2 y recarga selona_core.config para cada prueba.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    monkeypatch.setenv("SELONA_PBKDF2_ITERATIONS", str(FAST_ITERATIONS))

    import selona_core.config as config_module

    importlib.reload(config_module)

    yield


@pytest.fixture
def passphrase() -> str:
    """Passphrase válida de 9 bytes."""
    return "a3f7b2c1e"


@pytest.fixture
def fixed_random():
    """Fuente aleatoria determinista: salt de 0x01 y nonce de 0x02."""

    def source(size: int) -> bytes:
        return (b"\x01" if size == 16 else b"\x02") * size

    return source

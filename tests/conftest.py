"""Configuração do pytest para o cliente FindFolder."""

import sys
from pathlib import Path

import pytest

# Adiciona a raiz do repositório ao PYTHONPATH para permitir imports absolutos
root_path = Path(__file__).parent.parent
if str(root_path) not in sys.path:
    sys.path.insert(0, str(root_path))

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def fixture_bytes():
    def _load(name: str) -> bytes:
        return (FIXTURES_DIR / name).read_bytes()

    return _load

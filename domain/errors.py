from __future__ import annotations

from typing import Optional


class FindFolderError(Exception):
    """Raiz da taxonomia de falhas da operação FindFolder."""


class InputValidationError(FindFolderError):
    """Parâmetro informado vazio ou inválido; detectado antes de qualquer I/O."""


class TransportError(FindFolderError):
    """Falha de conexão ou status HTTP diferente de 200."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ResponseParseError(FindFolderError):
    """Corpo da resposta não é um documento SOAP bem-formado."""


class OfflineFixtureError(FindFolderError):
    """O documento estático do modo offline não pôde ser lido."""

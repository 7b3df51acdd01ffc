from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from domain.errors import InputValidationError

DEFAULT_PARENT_FOLDER_ID = "root"
DEFAULT_FOLDER_SHAPE = "Default"

@dataclass(frozen=True)
class FindFolderRequest:
    parent_folder_id: str = DEFAULT_PARENT_FOLDER_ID
    folder_shape: str = DEFAULT_FOLDER_SHAPE

    @classmethod
    def from_params(
        cls,
        parent_folder_id: Optional[str] = None,
        folder_shape: Optional[str] = None,
    ) -> "FindFolderRequest":
        """
        Ausente (None) assume o padrão do protocolo; string vazia informada
        explicitamente é erro de entrada do chamador.
        """
        return cls(
            parent_folder_id=_validated("parent_folder_id", parent_folder_id, DEFAULT_PARENT_FOLDER_ID),
            folder_shape=_validated("folder_shape", folder_shape, DEFAULT_FOLDER_SHAPE),
        )


def _validated(name: str, value: Optional[str], default: str) -> str:
    if value is None:
        return default
    if not isinstance(value, str):
        raise InputValidationError(f"{name} must be a string, got {type(value).__name__}")
    if not value.strip():
        raise InputValidationError(f"{name} must not be empty")
    return value

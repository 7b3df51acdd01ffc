from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Optional, Tuple

# Valor usado quando o elemento/atributo não vem na resposta
MISSING = "N/A"

@dataclass(frozen=True, slots=True)
class Folder:
    folder_id: str = MISSING
    display_name: str = MISSING
    total_count: str = MISSING

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class FolderList:
    folders: Tuple[Folder, ...] = ()
    response_code: Optional[str] = None
    # False quando não havia FindFolderResponse no corpo (≠ zero pastas)
    has_payload: bool = True

    def __len__(self) -> int:
        return len(self.folders)

    def __iter__(self):
        return iter(self.folders)


@dataclass(frozen=True, slots=True)
class FaultResult:
    code: str
    message: str

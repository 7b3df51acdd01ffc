from __future__ import annotations
import xml.etree.ElementTree as ET
from dataclasses import dataclass


@dataclass(frozen=True)
class Envelope:
    """
    Requisição FindFolder já serializada.
    Guarda os parâmetros resolvidos e o XML em bytes (UTF-8); não muda depois de criada.
    """
    parent_folder_id: str
    folder_shape: str
    payload: bytes

    def to_element(self) -> ET.Element:
        """Árvore nova a cada chamada, para inspeção sem tocar no payload."""
        return ET.fromstring(self.payload)


@dataclass(frozen=True)
class ResponseDocument:
    raw: bytes
    body: ET.Element

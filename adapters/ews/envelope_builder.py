from __future__ import annotations
import xml.etree.ElementTree as ET
from typing import Optional

from adapters.ews.namespaces import MESSAGES_NS, SOAP_NS, TYPES_NS, qname
from application.dto.find_folder_request import DEFAULT_FOLDER_SHAPE, DEFAULT_PARENT_FOLDER_ID
from domain.model.soap import Envelope


def build_find_folder_envelope(
    parent_folder_id: Optional[str] = None,
    folder_shape: Optional[str] = None,
) -> Envelope:
    """
    Monta o envelope SOAP do FindFolder (Traversal=Shallow).
    Valores ausentes ou vazios viram os padrões do protocolo ("root" / "Default").
    """
    parent_folder_id = _or_default(parent_folder_id, DEFAULT_PARENT_FOLDER_ID)
    folder_shape = _or_default(folder_shape, DEFAULT_FOLDER_SHAPE)

    envelope = ET.Element(qname(SOAP_NS, "Envelope"))
    ET.SubElement(envelope, qname(SOAP_NS, "Header"))
    body = ET.SubElement(envelope, qname(SOAP_NS, "Body"))

    find_folder = ET.SubElement(body, qname(MESSAGES_NS, "FindFolder"), {"Traversal": "Shallow"})

    # FolderShape
    shape = ET.SubElement(find_folder, qname(MESSAGES_NS, "FolderShape"))
    ET.SubElement(shape, qname(TYPES_NS, "BaseShape")).text = folder_shape

    # ParentFolderIds
    parent_ids = ET.SubElement(find_folder, qname(MESSAGES_NS, "ParentFolderIds"))
    ET.SubElement(parent_ids, qname(TYPES_NS, "FolderId"), {"Id": parent_folder_id})

    return Envelope(
        parent_folder_id=parent_folder_id,
        folder_shape=folder_shape,
        payload=ET.tostring(envelope, encoding="utf-8", xml_declaration=True),
    )


def _or_default(value: Optional[str], default: str) -> str:
    return value if value and value.strip() else default

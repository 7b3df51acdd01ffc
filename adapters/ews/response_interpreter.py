from __future__ import annotations
import xml.etree.ElementTree as ET
from typing import Optional, Union

from adapters.ews.namespaces import MESSAGES_NS, SOAP12_NS, SOAP_NS, TYPES_NS, qname
from domain.model.folder import MISSING, FaultResult, Folder, FolderList
from domain.model.soap import ResponseDocument

_FIND_FOLDER_RESPONSE = qname(MESSAGES_NS, "FindFolderResponse")
_RESPONSE_CODE = qname(MESSAGES_NS, "ResponseCode")
_FOLDER = qname(TYPES_NS, "Folder")


def interpret(doc: ResponseDocument) -> Union[FaultResult, FolderList]:
    """
    Transforma o documento de resposta em FaultResult ou FolderList.

    - Fault no Body: devolve código e mensagem exatamente como vieram, sem olhar o resto.
    - Sem FindFolderResponse: FolderList vazia com ``has_payload=False``.
    - Caso contrário: todas as t:Folder do Body, em ordem de documento, em qualquer
      profundidade (normalmente dentro de RootFolder/Folders).

    Não imprime nem loga nada; apresentação é com quem chama.
    """
    fault = _find_fault(doc.body)
    if fault is not None:
        return fault

    response = doc.body.find(f".//{_FIND_FOLDER_RESPONSE}")
    if response is None:
        return FolderList(has_payload=False)

    folders = tuple(_folder_from_element(el) for el in doc.body.iter(_FOLDER))
    return FolderList(folders=folders, response_code=_response_code(response))


# -------- helpers ---------------------------------------------------------- #
def _find_fault(body: ET.Element) -> Optional[FaultResult]:
    fault = body.find(qname(SOAP_NS, "Fault"))
    if fault is not None:
        # SOAP 1.1: faultcode/faultstring sem namespace
        return FaultResult(
            code=_text(fault.find("faultcode")),
            message=_text(fault.find("faultstring")),
        )

    fault = body.find(qname(SOAP12_NS, "Fault"))
    if fault is not None:
        return FaultResult(
            code=_text(fault.find(f"{qname(SOAP12_NS, 'Code')}/{qname(SOAP12_NS, 'Value')}")),
            message=_text(fault.find(f"{qname(SOAP12_NS, 'Reason')}/{qname(SOAP12_NS, 'Text')}")),
        )
    return None


def _response_code(response: ET.Element) -> Optional[str]:
    # ResponseCode fica na mensagem (primeiro filho), ex.: ResponseMessages/FindFolderResponseMessage
    message = next(iter(response), None)
    scope = message if message is not None else response
    code = scope.find(f".//{_RESPONSE_CODE}")
    if code is None and scope is not response:
        code = response.find(f".//{_RESPONSE_CODE}")
    if code is None:
        return None
    return code.text or ""


def _folder_from_element(folder: ET.Element) -> Folder:
    """Cada campo é resolvido de forma independente; o que faltar vira MISSING."""
    folder_id = folder.find(f".//{qname(TYPES_NS, 'FolderId')}")
    return Folder(
        folder_id=folder_id.get("Id", MISSING) if folder_id is not None else MISSING,
        display_name=_child_text(folder, "DisplayName"),
        total_count=_child_text(folder, "TotalCount"),
    )


def _child_text(folder: ET.Element, local_name: str) -> str:
    el = folder.find(f".//{qname(TYPES_NS, local_name)}")
    if el is None:
        return MISSING
    return el.text or ""


def _text(el: Optional[ET.Element]) -> str:
    if el is None:
        return ""
    return el.text or ""

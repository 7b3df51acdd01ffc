from __future__ import annotations
import xml.etree.ElementTree as ET

from adapters.ews.namespaces import SOAP12_NS, SOAP_NS, qname
from domain.errors import ResponseParseError
from domain.model.soap import ResponseDocument


def parse_response_document(raw: bytes) -> ResponseDocument:
    """Converte o corpo bruto em ResponseDocument; exige XML bem-formado com Body SOAP."""
    try:
        root = ET.fromstring(raw)
    except ET.ParseError as e:
        raise ResponseParseError(f"malformed XML in SOAP response: {e}") from e

    body = root.find(qname(SOAP_NS, "Body"))
    if body is None:
        body = root.find(qname(SOAP12_NS, "Body"))
    if body is None:
        raise ResponseParseError(f"no SOAP Body element in response (root is {root.tag})")

    return ResponseDocument(raw=raw, body=body)

import xml.etree.ElementTree as ET

SOAP_NS = "http://schemas.xmlsoap.org/soap/envelope/"
SOAP12_NS = "http://www.w3.org/2003/05/soap-envelope"
TYPES_NS = "http://schemas.microsoft.com/exchange/services/2006/types"
MESSAGES_NS = "http://schemas.microsoft.com/exchange/services/2006/messages"

# Namespaces do XML para facilitar a busca de elementos
XML_NS = {
    "soap": SOAP_NS,
    "t": TYPES_NS,
    "m": MESSAGES_NS,
}

SOAP_ACTION = f'"{MESSAGES_NS}/FindFolder"'

# Prefixos estáveis na serialização (senão o ElementTree gera ns0, ns1...)
for _prefix, _uri in XML_NS.items():
    ET.register_namespace(_prefix, _uri)


def qname(namespace: str, local_name: str) -> str:
    return f"{{{namespace}}}{local_name}"

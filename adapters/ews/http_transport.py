from __future__ import annotations

import structlog
import requests

from adapters.ews.namespaces import SOAP_ACTION
from adapters.ews.soap_document import parse_response_document
from domain.errors import ResponseParseError, TransportError
from domain.model.soap import Envelope, ResponseDocument
from ports.ews_transport import EwsTransportPort

logger = structlog.get_logger(__name__)


class HttpTransport(EwsTransportPort):
    """
    Adaptador HTTP do FindFolder.
    Um POST por chamada, sem retry; sessão e resposta são fechadas ao final
    de cada requisição, então nada de keep-alive entre chamadas.
    """

    _HEADERS = {
        "Content-Type": "text/xml; charset=utf-8",
        "SOAPAction": SOAP_ACTION,
    }

    def __init__(self, endpoint: str) -> None:
        self.endpoint = endpoint

    def send(self, envelope: Envelope) -> ResponseDocument:
        log = logger.bind(endpoint=self.endpoint, parent_folder_id=envelope.parent_folder_id)
        log.info("ews.transport.send.start", bytes=len(envelope.payload))

        try:
            with requests.Session() as session:
                with session.post(
                    self.endpoint, data=envelope.payload, headers=self._HEADERS
                ) as resp:
                    if resp.status_code != 200:
                        log.error("ews.transport.send.http_status", status=resp.status_code)
                        raise TransportError(
                            f"HTTP error code: {resp.status_code}", status_code=resp.status_code
                        )
                    raw = resp.content
        except requests.RequestException as e:
            log.exception("ews.transport.send.connection_error")
            raise TransportError(f"request to {self.endpoint} failed: {e}") from e

        try:
            document = parse_response_document(raw)
        except ResponseParseError:
            log.exception("ews.transport.send.parse_error")
            raise

        log.info("ews.transport.send.success", bytes=len(raw))
        return document

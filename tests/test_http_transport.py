"""Testes para o transporte HTTP do FindFolder (requests mockado)."""

from __future__ import annotations

from unittest.mock import patch

import pytest
import requests
import requests_mock

from adapters.ews.envelope_builder import build_find_folder_envelope
from adapters.ews.http_transport import HttpTransport
from domain.errors import ResponseParseError, TransportError

ENDPOINT = "http://ews.test/ews/FindFolder"


@pytest.fixture
def envelope():
    return build_find_folder_envelope("root", "AllProperties")


class TestHttpTransportRequest:
    """O que sai na requisição."""

    def test_posts_envelope_with_protocol_headers(self, envelope, fixture_bytes) -> None:
        with requests_mock.Mocker() as m:
            m.post(ENDPOINT, content=fixture_bytes("multiple-folders.xml"))
            HttpTransport(ENDPOINT).send(envelope)

        assert m.call_count == 1
        sent = m.request_history[0]
        assert sent.method == "POST"
        assert sent.headers["Content-Type"] == "text/xml; charset=utf-8"
        assert (
            sent.headers["SOAPAction"]
            == '"http://schemas.microsoft.com/exchange/services/2006/messages/FindFolder"'
        )
        assert sent.body == envelope.payload


class TestHttpTransportResponse:
    """Tratamento da resposta HTTP."""

    def test_returns_parsed_document(self, envelope, fixture_bytes) -> None:
        raw = fixture_bytes("multiple-folders.xml")
        with requests_mock.Mocker() as m:
            m.post(ENDPOINT, content=raw)
            document = HttpTransport(ENDPOINT).send(envelope)

        assert document.raw == raw
        assert document.body.tag == "{http://schemas.xmlsoap.org/soap/envelope/}Body"

    @pytest.mark.parametrize("status", [201, 204, 302, 400, 401, 500, 503])
    def test_non_200_status_is_transport_error(self, envelope, status: int) -> None:
        with requests_mock.Mocker() as m:
            m.post(ENDPOINT, status_code=status, content=b"")
            with pytest.raises(TransportError) as exc:
                HttpTransport(ENDPOINT).send(envelope)

        assert exc.value.status_code == status
        assert str(status) in str(exc.value)

    def test_soap_fault_with_500_is_still_transport_error(self, envelope, fixture_bytes) -> None:
        with requests_mock.Mocker() as m:
            m.post(ENDPOINT, status_code=500, content=fixture_bytes("fault-invalid-folder-id.xml"))
            with pytest.raises(TransportError):
                HttpTransport(ENDPOINT).send(envelope)

    def test_connection_failure_is_transport_error(self, envelope) -> None:
        with requests_mock.Mocker() as m:
            m.post(ENDPOINT, exc=requests.exceptions.ConnectionError("refused"))
            with pytest.raises(TransportError) as exc:
                HttpTransport(ENDPOINT).send(envelope)

        assert exc.value.status_code is None
        assert isinstance(exc.value.__cause__, requests.exceptions.ConnectionError)

    def test_malformed_xml_is_parse_error(self, envelope) -> None:
        with requests_mock.Mocker() as m:
            m.post(ENDPOINT, content=b"<soap:Envelope><unclosed>")
            with pytest.raises(ResponseParseError):
                HttpTransport(ENDPOINT).send(envelope)

    def test_document_without_body_is_parse_error(self, envelope) -> None:
        with requests_mock.Mocker() as m:
            m.post(ENDPOINT, content=b"<html><body>gateway</body></html>")
            with pytest.raises(ResponseParseError):
                HttpTransport(ENDPOINT).send(envelope)

    def test_parse_error_is_not_transport_error(self, envelope) -> None:
        with requests_mock.Mocker() as m:
            m.post(ENDPOINT, content=b"not xml at all")
            with pytest.raises(ResponseParseError) as exc:
                HttpTransport(ENDPOINT).send(envelope)

        assert not isinstance(exc.value, TransportError)


class TestHttpTransportResources:
    """Sessão aberta e fechada por requisição."""

    def test_session_closed_on_success(self, envelope, fixture_bytes) -> None:
        with requests_mock.Mocker() as m, patch.object(requests.Session, "close") as close:
            m.post(ENDPOINT, content=fixture_bytes("multiple-folders.xml"))
            HttpTransport(ENDPOINT).send(envelope)

        close.assert_called_once()

    def test_session_closed_on_http_error(self, envelope) -> None:
        with requests_mock.Mocker() as m, patch.object(requests.Session, "close") as close:
            m.post(ENDPOINT, status_code=503)
            with pytest.raises(TransportError):
                HttpTransport(ENDPOINT).send(envelope)

        close.assert_called_once()

    def test_session_closed_on_connection_error(self, envelope) -> None:
        with requests_mock.Mocker() as m, patch.object(requests.Session, "close") as close:
            m.post(ENDPOINT, exc=requests.exceptions.ConnectTimeout)
            with pytest.raises(TransportError):
                HttpTransport(ENDPOINT).send(envelope)

        close.assert_called_once()

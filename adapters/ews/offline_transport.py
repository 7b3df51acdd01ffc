from __future__ import annotations

from importlib.resources.abc import Traversable
from pathlib import Path

import structlog

from adapters.ews.soap_document import parse_response_document
from config.settings import DEFAULT_SIMULATED_RESPONSE_FILE
from domain.errors import OfflineFixtureError
from domain.model.soap import Envelope, ResponseDocument
from ports.ews_transport import EwsTransportPort

logger = structlog.get_logger(__name__)


class OfflineTransport(EwsTransportPort):
    """
    Devolve um documento estático no lugar da troca HTTP (testes determinísticos,
    sem servidor). O envelope é aceito, mas não sai do processo.
    """

    def __init__(self, fixture_path: Traversable | Path | str | None = None) -> None:
        if fixture_path is None:
            self.fixture_path = DEFAULT_SIMULATED_RESPONSE_FILE
        elif isinstance(fixture_path, str):
            self.fixture_path = Path(fixture_path)
        else:
            self.fixture_path = fixture_path

    def send(self, envelope: Envelope) -> ResponseDocument:
        log = logger.bind(fixture=str(self.fixture_path), parent_folder_id=envelope.parent_folder_id)
        log.info("ews.offline.send")

        try:
            raw = self.fixture_path.read_bytes()
        except OSError as e:
            log.error("ews.offline.fixture_not_found", reason=str(e))
            raise OfflineFixtureError(f"Simulation file not found: {self.fixture_path}") from e

        return parse_response_document(raw)

from __future__ import annotations

import structlog
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Optional, Union

from adapters.ews.envelope_builder import build_find_folder_envelope
from adapters.ews.http_transport import HttpTransport
from adapters.ews.offline_transport import OfflineTransport
from adapters.ews.response_interpreter import interpret
from application.dto.find_folder_request import FindFolderRequest
from config.settings import DEFAULT_ENDPOINT
from domain.errors import FindFolderError
from domain.model.folder import FaultResult, FolderList
from ports.ews_transport import EwsTransportPort
from ports.reporter import FindFolderReporterPort

logger = structlog.get_logger(__name__)


class FindFoldersClient:
    """
    Fachada da operação FindFolder: valida a entrada, monta o envelope,
    envia pelo transporte escolhido na construção e interpreta a resposta.

    Só guarda configuração imutável; a mesma instância pode ser reutilizada
    em chamadas sequenciais.
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        offline: bool = False,
        fixture_path: Traversable | Path | str | None = None,
        reporter: Optional[FindFolderReporterPort] = None,
        transport: Optional[EwsTransportPort] = None,
    ) -> None:
        self._endpoint = endpoint or DEFAULT_ENDPOINT
        self._offline = offline
        self._reporter = reporter
        self._transport = transport or self._select_transport(fixture_path)

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def offline(self) -> bool:
        return self._offline

    # ------------------------------------------------------------------ #
    #  API pública                                                       #
    # ------------------------------------------------------------------ #
    def find_folders(
        self,
        parent_folder_id: Optional[str] = None,
        folder_shape: Optional[str] = None,
    ) -> Union[FolderList, FaultResult]:
        request = FindFolderRequest.from_params(parent_folder_id, folder_shape)

        log = logger.new(
            use_case="find_folders",
            parent_folder_id=request.parent_folder_id,
            folder_shape=request.folder_shape,
            offline=self._offline,
        )
        log.info("start")

        envelope = build_find_folder_envelope(request.parent_folder_id, request.folder_shape)
        document = self._transport.send(envelope)
        result = interpret(document)

        if isinstance(result, FaultResult):
            log.warning("soap_fault", fault_code=result.code)
        else:
            log.info("finish", folders=len(result.folders), response_code=result.response_code)
        return result

    def run(
        self,
        parent_folder_id: Optional[str] = None,
        folder_shape: Optional[str] = None,
    ) -> Union[FolderList, FaultResult]:
        """
        Executa ``find_folders`` e entrega o desfecho ao reporter injetado.
        Erros são reportados e propagados.
        """
        try:
            result = self.find_folders(parent_folder_id, folder_shape)
        except FindFolderError as e:
            if self._reporter is not None:
                self._reporter.report_error(e)
            raise

        if self._reporter is not None:
            if isinstance(result, FaultResult):
                self._reporter.report_fault(result)
            else:
                self._reporter.report_folders(result)
        return result

    # ------------------------------------------------------------------ #
    #  Helpers                                                           #
    # ------------------------------------------------------------------ #
    def _select_transport(self, fixture_path: Traversable | Path | str | None) -> EwsTransportPort:
        if self._offline:
            return OfflineTransport(fixture_path)
        return HttpTransport(self._endpoint)

from __future__ import annotations

import structlog

from domain.errors import FindFolderError, TransportError
from domain.model.folder import FaultResult, FolderList
from ports.reporter import FindFolderReporterPort


class StructlogReporter(FindFolderReporterPort):
    """Publica cada desfecho como evento estruturado (um evento por pasta)."""

    def __init__(self, logger=None) -> None:
        self.log = logger or structlog.get_logger(__name__).bind(reporter="find_folder")

    def report_folders(self, result: FolderList) -> None:
        if not result.has_payload:
            self.log.warning("find_folder.response.missing")
            return

        self.log.info(
            "find_folder.response",
            response_code=result.response_code,
            total=len(result.folders),
        )
        for position, folder in enumerate(result.folders):
            self.log.info("find_folder.folder", position=position, **folder.to_dict())

    def report_fault(self, fault: FaultResult) -> None:
        self.log.error("find_folder.soap_fault", fault_code=fault.code, fault_string=fault.message)

    def report_error(self, error: FindFolderError) -> None:
        extra = {}
        if isinstance(error, TransportError) and error.status_code is not None:
            extra["status"] = error.status_code
        self.log.error(
            "find_folder.error",
            error_type=type(error).__name__,
            reason=str(error),
            **extra,
        )

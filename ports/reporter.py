from domain.errors import FindFolderError
from domain.model.folder import FaultResult, FolderList

class FindFolderReporterPort:
    """Destino de apresentação dos resultados (console, log, ...)."""

    def report_folders(self, result: FolderList) -> None:
        raise NotImplementedError

    def report_fault(self, fault: FaultResult) -> None:
        raise NotImplementedError

    def report_error(self, error: FindFolderError) -> None:
        raise NotImplementedError

from __future__ import annotations
import sys
from typing import TextIO

from domain.errors import FindFolderError
from domain.model.folder import FaultResult, FolderList
from ports.reporter import FindFolderReporterPort


class ConsoleReporter(FindFolderReporterPort):
    """Saída em texto: uma linha por campo, faults e erros no stderr."""

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None) -> None:
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def report_folders(self, result: FolderList) -> None:
        if not result.has_payload:
            print("No FindFolderResponse found in SOAP body", file=self.out)
            return

        print(f"Response Code: {result.response_code or 'N/A'}", file=self.out)
        if not result.folders:
            print("No folders found in response", file=self.out)
            return

        for folder in result.folders:
            print(f"FolderId: {folder.folder_id}", file=self.out)
            print(f"DisplayName: {folder.display_name}", file=self.out)
            print(f"TotalCount: {folder.total_count}", file=self.out)

    def report_fault(self, fault: FaultResult) -> None:
        print("SOAP Fault encountered:", file=self.err)
        print(f"Fault Code: {fault.code}", file=self.err)
        print(f"Fault String: {fault.message}", file=self.err)

    def report_error(self, error: FindFolderError) -> None:
        print(f"Error during FindFolder operation: {error}", file=self.err)

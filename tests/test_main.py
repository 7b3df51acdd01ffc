"""Testes para o ponto de entrada de linha de comando."""

from __future__ import annotations

from pathlib import Path

import requests_mock

from application import main as cli


class TestMain:

    def test_offline_run_prints_folders(self, capsys) -> None:
        code = cli.main(["--offline", "--reporter", "console"])
        out = capsys.readouterr().out
        assert code == cli.EXIT_OK
        assert "FolderId: AAA=" in out
        assert "DisplayName: Inbox" in out

    def test_fault_exit_code(self, fixtures_dir: Path, capsys) -> None:
        code = cli.main(["--offline", "--fixture", str(fixtures_dir / "fault-invalid-folder-id.xml")])
        assert code == cli.EXIT_FAULT
        assert "ErrorInvalidFolderId" in capsys.readouterr().err

    def test_input_error_exit_code(self, capsys) -> None:
        code = cli.main(["--offline", "--parent-folder-id", ""])
        assert code == cli.EXIT_ERROR
        assert "parent_folder_id" in capsys.readouterr().err

    def test_live_http_error(self, capsys) -> None:
        with requests_mock.Mocker() as m:
            m.post("http://ews.test/ews", status_code=401)
            code = cli.main(["--live", "--endpoint", "http://ews.test/ews"])
        assert code == cli.EXIT_ERROR
        assert "HTTP error code: 401" in capsys.readouterr().err

    def test_parser_defaults(self) -> None:
        args = cli.build_parser().parse_args([])
        assert args.reporter == "console"
        assert args.parent_folder_id

import argparse
import sys

from config.settings import (
    EWS_ENDPOINT,
    EWS_FOLDER_SHAPE,
    EWS_OFFLINE,
    EWS_PARENT_FOLDER_ID,
    EWS_SIMULATED_RESPONSE_FILE,
    LOG_LEVEL,
)
from config.logging import configure_logging
configure_logging(LOG_LEVEL)

import structlog  # noqa: E402
from adapters.reporting.console_reporter import ConsoleReporter  # noqa: E402
from adapters.reporting.structlog_reporter import StructlogReporter  # noqa: E402
from application.usecase.find_folders import FindFoldersClient  # noqa: E402
from domain.errors import FindFolderError  # noqa: E402
from domain.model.folder import FaultResult  # noqa: E402
logger = structlog.get_logger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_FAULT = 2

_REPORTERS = {
    "console": ConsoleReporter,
    "log": StructlogReporter,
}

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Executa um FindFolder (EWS) e lista as pastas.")
    parser.add_argument("--parent-folder-id", default=EWS_PARENT_FOLDER_ID)
    parser.add_argument("--folder-shape", default=EWS_FOLDER_SHAPE)
    parser.add_argument("--endpoint", default=EWS_ENDPOINT)
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--offline", dest="offline", action="store_true", default=EWS_OFFLINE,
        help="Usa a resposta simulada em vez do servidor."
    )
    mode.add_argument("--live", dest="offline", action="store_false")
    parser.add_argument("--fixture", default=EWS_SIMULATED_RESPONSE_FILE)
    parser.add_argument("--reporter", choices=sorted(_REPORTERS), default="console")
    return parser

def make_client(args: argparse.Namespace) -> FindFoldersClient:
    logger.info("boot.make_client", offline=args.offline, endpoint=args.endpoint)
    return FindFoldersClient(
        endpoint=args.endpoint,
        offline=args.offline,
        fixture_path=args.fixture,
        reporter=_REPORTERS[args.reporter](),
    )

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    client = make_client(args)

    try:
        result = client.run(args.parent_folder_id, args.folder_shape)
    except FindFolderError:
        return EXIT_ERROR

    return EXIT_FAULT if isinstance(result, FaultResult) else EXIT_OK

if __name__ == "__main__":
    sys.exit(main())

import logging.config
from datetime import datetime, timezone
from typing import Any
import structlog

#
# --- helpers --------------------------------------------------------------
#
def _add_timestamp(_, __, event: dict[str, Any]):
    event["timestamp"] = datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")
    return event


def _normalize_level(level: str | None) -> str:
    name = (level or "").strip().upper()
    return name if isinstance(logging.getLevelName(name), int) else "INFO"


#
# --- public API -----------------------------------------------------------
#
def configure_logging(level: str = "INFO") -> None:
    """
    Liga o structlog ao logging da stdlib, com saída em JSON (uma linha por evento).
    Pode ser chamada mais de uma vez; a última configuração vale.
    Nível desconhecido cai para INFO.
    """
    level = _normalize_level(level)
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"plain": {"format": "%(message)s"}},
            "handlers": {
                "default": {"class": "logging.StreamHandler", "formatter": "plain"}
            },
            "loggers": {"": {"handlers": ["default"], "level": level}},
        }
    )

    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level)),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.CallsiteParameterAdder(
                [structlog.processors.CallsiteParameter.FILENAME,
                 structlog.processors.CallsiteParameter.LINENO]
            ),
            _add_timestamp,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
    )

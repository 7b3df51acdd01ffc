import os
from importlib.resources import files
from pathlib import Path

# --- Configurações ---
def _env_flag(value: str | None, default: bool) -> bool:
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

def _log_level(value: str | None, default: str = "INFO") -> str:
    level = (value or "").strip().upper()
    return level if level in VALID_LOG_LEVELS else default

DEFAULT_ENDPOINT = "http://localhost:8080/ews/FindFolder"
# Recurso empacotado junto de adapters.ews (package-data no pyproject)
DEFAULT_SIMULATED_RESPONSE_FILE = files("adapters.ews").joinpath("resources").joinpath("simulated-response.xml")

EWS_ENDPOINT = os.getenv("EWS_ENDPOINT", DEFAULT_ENDPOINT)
# Modo offline ligado por padrão (sem servidor EWS local)
EWS_OFFLINE = _env_flag(os.getenv("EWS_OFFLINE"), default=True)
_fixture_override = os.getenv("EWS_SIMULATED_RESPONSE_FILE")
EWS_SIMULATED_RESPONSE_FILE = Path(_fixture_override) if _fixture_override else DEFAULT_SIMULATED_RESPONSE_FILE
EWS_PARENT_FOLDER_ID = os.getenv("EWS_PARENT_FOLDER_ID", "root")
EWS_FOLDER_SHAPE = os.getenv("EWS_FOLDER_SHAPE", "AllProperties")
LOG_LEVEL = _log_level(os.getenv("LOG_LEVEL"))

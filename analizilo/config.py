"""
Configuration for Analizilo.

Defaults live here; environment variables override them:
- ANALIZILO_VORTARO: path to the dictionary file (tab-separated)
- ANALIZILO_LOG_FILE: path to the log file used by the CLI
"""
import os
from pathlib import Path

# Default paths
DEFAULT_DICTIONARY_PATH = Path(__file__).parent.parent / "data" / "vortaro.tsv"
DEFAULT_LOG_FILE = "analizilo.log"

DICTIONARY_ENV_VAR = "ANALIZILO_VORTARO"
LOG_FILE_ENV_VAR = "ANALIZILO_LOG_FILE"


def dictionary_path() -> Path:
    """Path of the dictionary file to load."""
    override = os.environ.get(DICTIONARY_ENV_VAR)
    if override:
        return Path(override)
    return DEFAULT_DICTIONARY_PATH


def log_file() -> str:
    """Path of the log file."""
    return os.environ.get(LOG_FILE_ENV_VAR) or DEFAULT_LOG_FILE

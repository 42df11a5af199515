import os
import logging
from pathlib import Path

# --- Spec tables ---
# JSON tables with the per-family name maps and occupancy constants.
DEFAULT_SPECS_DIR = Path(__file__).resolve().parent.parent / "data" / "specs"
SPECS_DIR_ENV_VAR = "GPUCAPS_SPECS_DIR"

ADRENO_SPEC_FILE_NAME = "adreno_specs.json"
MALI_SPEC_FILE_NAME = "mali_specs.json"


def get_specs_dir() -> Path:
    """Spec directory, overridable through the environment."""
    override = os.environ.get(SPECS_DIR_ENV_VAR)
    return Path(override) if override else DEFAULT_SPECS_DIR


# --- Logging Configuration ---
# Default log level, can be overridden by environment variable or the CLI
DEFAULT_LOG_LEVEL = logging.WARNING
LOG_LEVEL_ENV_VAR = "GPUCAPS_LOG_LEVEL"


def get_log_level() -> int:
    log_level_str = os.environ.get(LOG_LEVEL_ENV_VAR, logging.getLevelName(DEFAULT_LOG_LEVEL)).upper()
    level = getattr(logging, log_level_str, DEFAULT_LOG_LEVEL)
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Tuple

from gpucaps.config.settings import get_specs_dir
from gpucaps.utils.logging_config import logger


class SpecTableError(ValueError):
    """A static classification table is malformed (duplicate key, unknown enum name, ...)."""


def _reject_duplicate_keys(pairs: List[Tuple[str, Any]]) -> Dict[str, Any]:
    # json.load would silently keep the last value of a repeated key
    seen: Dict[str, Any] = {}
    for key, value in pairs:
        if key in seen:
            raise SpecTableError(f"Duplicate key '{key}' in spec table")
        seen[key] = value
    return seen


@lru_cache(maxsize=None)
def _load_spec_file(spec_path: Path) -> Dict[str, Any]:
    if not spec_path.exists():
        logger.warning(f"Spec file not found at {spec_path}. Using empty specs.")
        return {}
    logger.debug(f"Loading spec table {spec_path}")
    with open(spec_path, 'r') as f:
        try:
            return json.load(f, object_pairs_hook=_reject_duplicate_keys)
        except json.JSONDecodeError as e:
            raise SpecTableError(f"Spec file {spec_path} is not valid JSON: {e}") from e


def load_specs(file_name: str) -> Dict[str, Any]:
    """Loads a JSON spec table from the spec directory. Results are cached per path."""
    return _load_spec_file((get_specs_dir() / file_name).resolve())


def clear_spec_cache() -> None:
    _load_spec_file.cache_clear()

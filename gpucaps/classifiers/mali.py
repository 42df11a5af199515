from functools import lru_cache

from gpucaps.config.settings import MALI_SPEC_FILE_NAME
from gpucaps.models import MaliGPU, MaliInfo
from gpucaps.utils.logging_config import logger
from gpucaps.utils.spec_loader import load_specs
from .base import SubstringResolver


class MaliResolver(SubstringResolver[MaliGPU]):
    """Mali model lookup by model code ("T880", "G78", ...) in the device name."""

    @classmethod
    def from_specs(cls) -> "MaliResolver":
        specs = load_specs(MALI_SPEC_FILE_NAME)
        resolver = cls.from_name_map(specs.get("name_map", {}), MaliGPU, MaliGPU.UNKNOWN)
        logger.debug(f"Mali resolver loaded with {len(resolver)} models")
        return resolver


@lru_cache(maxsize=None)
def get_mali_resolver() -> MaliResolver:
    return MaliResolver.from_specs()


def resolve_mali_gpu(device_name: str) -> MaliGPU:
    gpu = get_mali_resolver().resolve(device_name)
    if gpu == MaliGPU.UNKNOWN:
        logger.debug(f"No Mali model found in '{device_name}'")
    return gpu


def create_mali_info(device_name: str) -> MaliInfo:
    return MaliInfo(gpu_version=resolve_mali_gpu(device_name))

from functools import lru_cache

from gpucaps.config.settings import ADRENO_SPEC_FILE_NAME
from gpucaps.models import AdrenoGpu, AdrenoInfo
from gpucaps.utils.logging_config import logger
from gpucaps.utils.spec_loader import load_specs
from .base import SubstringResolver


class AdrenoResolver(SubstringResolver[AdrenoGpu]):
    """Adreno model lookup by model number in the device version string.

    Keys are scanned in file order, newest family first, so a version string that
    also carries an older model number elsewhere (e.g. in a build hash) resolves
    to the newer model.
    """

    @classmethod
    def from_specs(cls) -> "AdrenoResolver":
        specs = load_specs(ADRENO_SPEC_FILE_NAME)
        resolver = cls.from_name_map(specs.get("name_map", {}), AdrenoGpu, AdrenoGpu.UNKNOWN)
        logger.debug(f"Adreno resolver loaded with {len(resolver)} models")
        return resolver


@lru_cache(maxsize=None)
def get_adreno_resolver() -> AdrenoResolver:
    return AdrenoResolver.from_specs()


def resolve_adreno_gpu(device_version: str) -> AdrenoGpu:
    gpu = get_adreno_resolver().resolve(device_version)
    if gpu == AdrenoGpu.UNKNOWN:
        logger.debug(f"No Adreno model found in '{device_version}'")
    return gpu


def create_adreno_info(device_version: str) -> AdrenoInfo:
    return AdrenoInfo(adreno_gpu=resolve_adreno_gpu(device_version))

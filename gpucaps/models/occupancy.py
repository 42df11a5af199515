from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Dict, Mapping

from gpucaps.config.settings import ADRENO_SPEC_FILE_NAME
from gpucaps.utils.spec_loader import SpecTableError, load_specs
from .enums import ADRENO_FAMILIES, AdrenoGpu

# Conservative answer for hardware without occupancy data
FALLBACK_VALUE = 1

OCCUPANCY_FIELDS = (
    "wave_size_full",
    "wave_size_half",
    "register_memory_per_compute_unit",
    "max_waves_count",
)


@dataclass(frozen=True)
class AdrenoOccupancy:
    """Occupancy constants of one Adreno model, fixed when the model is resolved."""
    wave_size_full: int = FALLBACK_VALUE
    wave_size_half: int = FALLBACK_VALUE
    register_memory_per_compute_unit: int = FALLBACK_VALUE
    max_waves_count: int = FALLBACK_VALUE


class AdrenoOccupancyTable:
    """Per-model occupancy constants: model override, then family default, then 1."""

    def __init__(self, occupancy_spec: Mapping[str, Any]):
        values: Dict[AdrenoGpu, Dict[str, int]] = {}

        for family, constants in occupancy_spec.get("family_defaults", {}).items():
            if family not in ADRENO_FAMILIES:
                raise SpecTableError(f"Unknown Adreno family '{family}' in occupancy table")
            for gpu in ADRENO_FAMILIES[family]:
                values.setdefault(gpu, {}).update(self._checked(constants, family))

        for model_name, constants in occupancy_spec.get("model_overrides", {}).items():
            try:
                gpu = AdrenoGpu[model_name]
            except KeyError:
                raise SpecTableError(f"Unknown AdrenoGpu member '{model_name}' in occupancy table") from None
            values.setdefault(gpu, {}).update(self._checked(constants, model_name))

        self._values = MappingProxyType({gpu: MappingProxyType(v) for gpu, v in values.items()})

    @staticmethod
    def _checked(constants: Mapping[str, Any], owner: str) -> Dict[str, int]:
        for field_name, value in constants.items():
            if field_name not in OCCUPANCY_FIELDS:
                raise SpecTableError(f"Unknown occupancy field '{field_name}' for {owner}")
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise SpecTableError(f"Occupancy field '{field_name}' for {owner} must be a positive integer, got {value!r}")
        return dict(constants)

    def lookup(self, gpu: AdrenoGpu, field_name: str) -> int:
        return self._values.get(gpu, {}).get(field_name, FALLBACK_VALUE)

    def resolve(self, gpu: AdrenoGpu) -> AdrenoOccupancy:
        return AdrenoOccupancy(**{name: self.lookup(gpu, name) for name in OCCUPANCY_FIELDS})


@lru_cache(maxsize=None)
def get_adreno_occupancy_table() -> AdrenoOccupancyTable:
    specs = load_specs(ADRENO_SPEC_FILE_NAME)
    return AdrenoOccupancyTable(specs.get("occupancy", {}))

# gpucaps/models/data_schemas.py
from dataclasses import dataclass, field, asdict as dataclass_asdict
from typing import Any, Dict, FrozenSet, Optional, Tuple

from .enums import (
    GpuVendor, OpenCLVersion, DataType, AdrenoGpu, MaliGPU,
    ADRENO_1XX, ADRENO_2XX, ADRENO_3XX, ADRENO_4XX, ADRENO_5XX, ADRENO_6XX,
    MALI_T6XX, MALI_T7XX, MALI_T8XX,
    MALI_BIFROST_GEN1, MALI_BIFROST_GEN2, MALI_BIFROST_GEN3, MALI_VALHALL,
)
from .formatters import gpu_vendor_to_string, opencl_version_to_string
from .occupancy import AdrenoOccupancy, get_adreno_occupancy_table


@dataclass(frozen=True)
class AdrenoInfo:
    """Resolved Adreno model with generation predicates and occupancy arithmetic.

    Occupancy constants are looked up once, when the record is built, unless the
    caller passes them in.
    """
    adreno_gpu: AdrenoGpu = AdrenoGpu.UNKNOWN
    occupancy: Optional[AdrenoOccupancy] = None

    def __post_init__(self):
        if self.occupancy is None:
            object.__setattr__(self, 'occupancy', get_adreno_occupancy_table().resolve(self.adreno_gpu))

    def is_adreno_1xx(self) -> bool:
        return self.adreno_gpu in ADRENO_1XX

    def is_adreno_2xx(self) -> bool:
        return self.adreno_gpu in ADRENO_2XX

    def is_adreno_3xx(self) -> bool:
        return self.adreno_gpu in ADRENO_3XX

    def is_adreno_4xx(self) -> bool:
        return self.adreno_gpu in ADRENO_4XX

    def is_adreno_5xx(self) -> bool:
        return self.adreno_gpu in ADRENO_5XX

    def is_adreno_6xx(self) -> bool:
        return self.adreno_gpu in ADRENO_6XX

    def is_adreno_6xx_or_higher(self) -> bool:
        # No family above 6xx is modeled yet
        return self.is_adreno_6xx()

    def get_wave_size(self, full_wave: bool) -> int:
        """SIMD width in threads; 1 for families without data."""
        return self.occupancy.wave_size_full if full_wave else self.occupancy.wave_size_half

    def get_register_memory_size_per_compute_unit(self) -> int:
        """Register file capacity of one compute unit, in scalar registers."""
        return self.occupancy.register_memory_per_compute_unit

    def get_maximum_waves_count(self, register_footprint_per_thread: Optional[int] = None, full_wave: bool = True) -> int:
        """Maximum resident waves per compute unit.

        Without a register footprint this is the hardware wave-slot limit. With one,
        the register file divided among waves of the given footprint also bounds the
        result. A footprint of zero or less puts no pressure on the register file.
        """
        max_waves = self.occupancy.max_waves_count
        if register_footprint_per_thread is None or register_footprint_per_thread <= 0:
            return max_waves
        register_usage_per_wave = self.get_wave_size(full_wave) * register_footprint_per_thread
        possible_waves_count = self.get_register_memory_size_per_compute_unit() // register_usage_per_wave
        return min(possible_waves_count, max_waves)

    def to_dict(self) -> Dict[str, Any]:
        return {'adreno_gpu': self.adreno_gpu.name, 'occupancy': dataclass_asdict(self.occupancy)}


@dataclass(frozen=True)
class MaliInfo:
    """Resolved Mali model with microarchitecture predicates."""
    gpu_version: MaliGPU = MaliGPU.UNKNOWN

    def is_mali_t6xx(self) -> bool:
        return self.gpu_version in MALI_T6XX

    def is_mali_t7xx(self) -> bool:
        return self.gpu_version in MALI_T7XX

    def is_mali_t8xx(self) -> bool:
        return self.gpu_version in MALI_T8XX

    def is_midgard(self) -> bool:
        return self.is_mali_t6xx() or self.is_mali_t7xx() or self.is_mali_t8xx()

    def is_bifrost_gen1(self) -> bool:
        return self.gpu_version in MALI_BIFROST_GEN1

    def is_bifrost_gen2(self) -> bool:
        return self.gpu_version in MALI_BIFROST_GEN2

    def is_bifrost_gen3(self) -> bool:
        return self.gpu_version in MALI_BIFROST_GEN3

    def is_bifrost(self) -> bool:
        return self.is_bifrost_gen1() or self.is_bifrost_gen2() or self.is_bifrost_gen3()

    def is_valhall(self) -> bool:
        return self.gpu_version in MALI_VALHALL

    def to_dict(self) -> Dict[str, Any]:
        return {'gpu_version': self.gpu_version.name}


@dataclass(frozen=True)
class TextureSupport:
    """Raw 2-D texture format support as reported by the platform"""
    supports_r_f16_tex2d: bool = False
    supports_rg_f16_tex2d: bool = False
    supports_rgb_f16_tex2d: bool = False
    supports_rgba_f16_tex2d: bool = False
    supports_r_f32_tex2d: bool = False
    supports_rg_f32_tex2d: bool = False
    supports_rgb_f32_tex2d: bool = False
    supports_rgba_f32_tex2d: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return dataclass_asdict(self)


@dataclass(frozen=True)
class DeviceLimits:
    """Numeric device limits reported alongside the identification strings"""
    compute_units_count: int = 0
    max_work_group_size: Tuple[int, int, int] = (0, 0, 0) # x, y, z
    max_work_group_total_size: int = 0
    buffer_max_size: int = 0 # bytes
    image2d_max_width: int = 0
    image2d_max_height: int = 0
    image3d_max_width: int = 0
    image3d_max_height: int = 0
    image3d_max_depth: int = 0
    image_array_max_layers: int = 0
    supports_fp16: bool = False

    def to_dict(self) -> Dict[str, Any]:
        data = dataclass_asdict(self)
        data['max_work_group_size'] = list(self.max_work_group_size)
        return data


@dataclass(frozen=True)
class DeviceInfo:
    """Capability description of one GPU, built once from platform strings"""
    gpu_vendor: GpuVendor = GpuVendor.UNKNOWN
    cl_version: OpenCLVersion = OpenCLVersion.CL_1_0
    adreno_info: AdrenoInfo = field(default_factory=AdrenoInfo)
    mali_info: MaliInfo = field(default_factory=MaliInfo)
    texture_support: TextureSupport = field(default_factory=TextureSupport)
    supports_image3d_writes: bool = False
    extensions: FrozenSet[str] = frozenset()
    supported_subgroup_sizes: FrozenSet[int] = frozenset()
    limits: DeviceLimits = field(default_factory=DeviceLimits)

    def __post_init__(self):
        # OpenCL reports extensions as one space-separated string
        extensions = self.extensions.split() if isinstance(self.extensions, str) else self.extensions
        object.__setattr__(self, 'extensions', frozenset(ext for ext in extensions if ext))
        object.__setattr__(self, 'supported_subgroup_sizes', frozenset(self.supported_subgroup_sizes))

    # --- OpenCL version gating ---
    def supports_texture_array(self) -> bool:
        return self.cl_version >= OpenCLVersion.CL_1_2

    def supports_image_buffer(self) -> bool:
        return self.cl_version >= OpenCLVersion.CL_1_2

    def is_cl20_or_higher(self) -> bool:
        return self.cl_version > OpenCLVersion.CL_1_2

    # --- Image support ---
    def supports_image3d(self) -> bool:
        if self.is_mali() and self.mali_info.is_midgard():
            # read_imageh does not compile with image3d_t on Midgard drivers (seen on T880)
            return False
        return self.supports_image3d_writes

    def supports_float_image2d(self, data_type: DataType, channels: int) -> bool:
        tex = self.texture_support
        is_f32 = data_type == DataType.FLOAT32
        if channels == 1:
            return tex.supports_r_f32_tex2d if is_f32 else tex.supports_r_f16_tex2d
        elif channels == 2:
            return tex.supports_rg_f32_tex2d if is_f32 else tex.supports_rg_f16_tex2d
        elif channels == 3:
            return tex.supports_rgb_f32_tex2d if is_f32 else tex.supports_rgb_f16_tex2d
        elif channels == 4:
            return tex.supports_rgba_f32_tex2d if is_f32 else tex.supports_rgba_f16_tex2d
        return False

    # --- Membership queries ---
    def supports_extension(self, extension: str) -> bool:
        return extension in self.extensions

    def supports_subgroup_with_size(self, sub_group_size: int) -> bool:
        return sub_group_size in self.supported_subgroup_sizes

    # --- Vendor predicates ---
    def is_adreno(self) -> bool:
        return self.gpu_vendor == GpuVendor.QUALCOMM

    def is_apple(self) -> bool:
        return self.gpu_vendor == GpuVendor.APPLE

    def is_mali(self) -> bool:
        return self.gpu_vendor == GpuVendor.MALI

    def is_powervr(self) -> bool:
        return self.gpu_vendor == GpuVendor.POWERVR

    def is_nvidia(self) -> bool:
        return self.gpu_vendor == GpuVendor.NVIDIA

    def is_amd(self) -> bool:
        return self.gpu_vendor == GpuVendor.AMD

    def is_intel(self) -> bool:
        return self.gpu_vendor == GpuVendor.INTEL

    def to_dict(self) -> Dict[str, Any]:
        return {
            'gpu_vendor': gpu_vendor_to_string(self.gpu_vendor),
            'cl_version': opencl_version_to_string(self.cl_version),
            'adreno_info': self.adreno_info.to_dict(),
            'mali_info': self.mali_info.to_dict(),
            'texture_support': self.texture_support.to_dict(),
            'supports_image3d_writes': self.supports_image3d_writes,
            'extensions': sorted(self.extensions),
            'supported_subgroup_sizes': sorted(self.supported_subgroup_sizes),
            'limits': self.limits.to_dict(),
        }

# gpucaps/models/__init__.py
from .enums import GpuVendor, OpenCLVersion, DataType, AdrenoGpu, MaliGPU
from .occupancy import AdrenoOccupancy
from .data_schemas import (
    AdrenoInfo,
    MaliInfo,
    TextureSupport,
    DeviceLimits,
    DeviceInfo,
)
from .formatters import gpu_vendor_to_string, opencl_version_to_string

__all__ = [
    "GpuVendor", "OpenCLVersion", "DataType", "AdrenoGpu", "MaliGPU",
    "AdrenoOccupancy", "AdrenoInfo", "MaliInfo", "TextureSupport", "DeviceLimits", "DeviceInfo",
    "gpu_vendor_to_string", "opencl_version_to_string",
]

from enum import Enum
from typing import Dict, Type

from .enums import GpuVendor, OpenCLVersion

_GPU_VENDOR_NAMES: Dict[GpuVendor, str] = {
    GpuVendor.APPLE: "Apple",
    GpuVendor.QUALCOMM: "Qualcomm",
    GpuVendor.MALI: "Mali",
    GpuVendor.POWERVR: "PowerVR",
    GpuVendor.NVIDIA: "NVIDIA",
    GpuVendor.AMD: "AMD",
    GpuVendor.INTEL: "Intel",
    GpuVendor.UNKNOWN: "unknown vendor",
}

_OPENCL_VERSION_NAMES: Dict[OpenCLVersion, str] = {
    OpenCLVersion.CL_1_0: "1.0",
    OpenCLVersion.CL_1_1: "1.1",
    OpenCLVersion.CL_1_2: "1.2",
    OpenCLVersion.CL_2_0: "2.0",
    OpenCLVersion.CL_2_1: "2.1",
    OpenCLVersion.CL_2_2: "2.2",
    OpenCLVersion.CL_3_0: "3.0",
}


def _check_exhaustive(names: Dict[Enum, str], enum_cls: Type[Enum]) -> None:
    """Fails at import time when an enum member has no formatted name."""
    missing = [member.name for member in enum_cls if member not in names]
    if missing:
        raise RuntimeError(f"No string form for {enum_cls.__name__} members: {', '.join(missing)}")


_check_exhaustive(_GPU_VENDOR_NAMES, GpuVendor)
_check_exhaustive(_OPENCL_VERSION_NAMES, OpenCLVersion)


def gpu_vendor_to_string(vendor: GpuVendor) -> str:
    return _GPU_VENDOR_NAMES[vendor]


def opencl_version_to_string(version: OpenCLVersion) -> str:
    return _OPENCL_VERSION_NAMES[version]

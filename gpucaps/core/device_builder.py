from typing import Iterable, Optional, Union

from gpucaps.classifiers import (
    classify_vendor, create_adreno_info, create_mali_info, parse_opencl_version,
    get_adreno_resolver, get_mali_resolver,
)
from gpucaps.models import DeviceInfo, DeviceLimits, TextureSupport, gpu_vendor_to_string, opencl_version_to_string
from gpucaps.models.occupancy import get_adreno_occupancy_table
from gpucaps.utils.logging_config import logger
from gpucaps.utils.spec_loader import clear_spec_cache


def build_device_info(
    vendor_name: str,
    device_name: str = "",
    device_version: str = "",
    opencl_version: str = "",
    extensions: Union[str, Iterable[str]] = (),
    supported_subgroup_sizes: Iterable[int] = (),
    texture_support: Optional[TextureSupport] = None,
    supports_image3d_writes: bool = False,
    limits: Optional[DeviceLimits] = None,
) -> DeviceInfo:
    """Classifies raw platform strings into an immutable DeviceInfo.

    The Adreno model is read from the device version string and the Mali model from
    the device name. When ``opencl_version`` is empty the device version string is
    parsed for the OpenCL version instead.
    """
    gpu_vendor = classify_vendor(vendor_name, device_name)
    cl_version = parse_opencl_version(opencl_version or device_version)

    device_info = DeviceInfo(
        gpu_vendor=gpu_vendor,
        cl_version=cl_version,
        adreno_info=create_adreno_info(device_version),
        mali_info=create_mali_info(device_name),
        texture_support=texture_support or TextureSupport(),
        supports_image3d_writes=supports_image3d_writes,
        extensions=extensions,
        supported_subgroup_sizes=frozenset(supported_subgroup_sizes),
        limits=limits or DeviceLimits(),
    )
    logger.info(
        f"Resolved device '{device_name}': vendor={gpu_vendor_to_string(gpu_vendor)}, "
        f"OpenCL {opencl_version_to_string(cl_version)}, "
        f"adreno={device_info.adreno_info.adreno_gpu.name}, mali={device_info.mali_info.gpu_version.name}"
    )
    return device_info


def reset_spec_tables() -> None:
    """Drops every cached spec table so the next lookup re-reads the spec directory."""
    clear_spec_cache()
    get_adreno_resolver.cache_clear()
    get_mali_resolver.cache_clear()
    get_adreno_occupancy_table.cache_clear()

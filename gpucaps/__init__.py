from gpucaps.models import (
    GpuVendor, OpenCLVersion, DataType, AdrenoGpu, MaliGPU,
    AdrenoInfo, MaliInfo, TextureSupport, DeviceLimits, DeviceInfo,
    gpu_vendor_to_string, opencl_version_to_string,
)
from gpucaps.classifiers import classify_vendor, resolve_adreno_gpu, resolve_mali_gpu, parse_opencl_version
from gpucaps.core import build_device_info, reset_spec_tables
from gpucaps.utils.logging_config import logger

__version__ = "0.1.0"

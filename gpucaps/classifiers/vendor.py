from gpucaps.models import GpuVendor
from gpucaps.utils.logging_config import logger
from .base import SubstringResolver

# Short vendor tokens are only trusted as the whole vendor string
_EXACT_VENDOR_NAMES = {
    "arm": GpuVendor.MALI,
    "amd": GpuVendor.AMD,
    "img": GpuVendor.POWERVR,
}

VENDOR_RESOLVER = SubstringResolver(
    [
        ("qualcomm", GpuVendor.QUALCOMM),
        ("adreno", GpuVendor.QUALCOMM),
        ("mali", GpuVendor.MALI),
        ("arm limited", GpuVendor.MALI),
        ("apple", GpuVendor.APPLE),
        ("powervr", GpuVendor.POWERVR),
        ("imagination", GpuVendor.POWERVR),
        ("nvidia", GpuVendor.NVIDIA),
        ("advanced micro devices", GpuVendor.AMD),
        ("radeon", GpuVendor.AMD),
        ("intel", GpuVendor.INTEL),
    ],
    unknown=GpuVendor.UNKNOWN,
)


def classify_vendor(vendor_name: str, device_name: str = "") -> GpuVendor:
    """Maps the platform vendor string (and optionally the device name) to a GpuVendor."""
    vendor_lower = vendor_name.strip().lower()
    if vendor_lower in _EXACT_VENDOR_NAMES:
        return _EXACT_VENDOR_NAMES[vendor_lower]

    # Vendor name first so a well-known vendor string wins over device name hints
    vendor = VENDOR_RESOLVER.resolve(vendor_lower)
    if vendor == GpuVendor.UNKNOWN and device_name:
        vendor = VENDOR_RESOLVER.resolve(device_name.lower())
    if vendor == GpuVendor.UNKNOWN:
        logger.debug(f"No vendor match for vendor='{vendor_name}' device='{device_name}'")
    return vendor

from .base import SubstringResolver
from .vendor import classify_vendor
from .adreno import AdrenoResolver, get_adreno_resolver, resolve_adreno_gpu, create_adreno_info
from .mali import MaliResolver, get_mali_resolver, resolve_mali_gpu, create_mali_info
from .opencl import parse_opencl_version

__all__ = [
    "SubstringResolver",
    "classify_vendor",
    "AdrenoResolver", "get_adreno_resolver", "resolve_adreno_gpu", "create_adreno_info",
    "MaliResolver", "get_mali_resolver", "resolve_mali_gpu", "create_mali_info",
    "parse_opencl_version",
]

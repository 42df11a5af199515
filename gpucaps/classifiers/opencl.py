import re

from gpucaps.models import OpenCLVersion
from gpucaps.utils.logging_config import logger

_VERSION_PATTERN = re.compile(r"(\d+)\.(\d+)")
_VERSIONS_BY_NUMBER = {version.value: version for version in OpenCLVersion}

def parse_opencl_version(version_string: str) -> OpenCLVersion:
    """Parses "OpenCL 2.0 <vendor info>", "OpenCL C 1.2 ..." or a bare "1.2".

    The first major.minor pair is used. Anything unrecognised resolves to CL_1_0.
    """
    match = _VERSION_PATTERN.search(version_string)
    if match:
        number = (int(match.group(1)), int(match.group(2)))
        if number in _VERSIONS_BY_NUMBER:
            return _VERSIONS_BY_NUMBER[number]
    logger.warning(f"Unrecognised OpenCL version '{version_string}', assuming 1.0")
    return OpenCLVersion.CL_1_0

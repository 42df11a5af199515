from enum import Enum
from functools import total_ordering

class GpuVendor(Enum):
    APPLE = "apple"
    QUALCOMM = "qualcomm"
    MALI = "mali"
    POWERVR = "powervr"
    NVIDIA = "nvidia"
    AMD = "amd"
    INTEL = "intel"
    UNKNOWN = "unknown"

@total_ordering
class OpenCLVersion(Enum):
    """OpenCL API revision, ordered by release."""
    CL_1_0 = (1, 0)
    CL_1_1 = (1, 1)
    CL_1_2 = (1, 2)
    CL_2_0 = (2, 0)
    CL_2_1 = (2, 1)
    CL_2_2 = (2, 2)
    CL_3_0 = (3, 0)

    def __lt__(self, other):
        if not isinstance(other, OpenCLVersion):
            return NotImplemented
        return self.value < other.value

class DataType(Enum):
    FLOAT32 = "float32"
    FLOAT16 = "float16"

class AdrenoGpu(Enum):
    # Adreno 6xx series
    ADRENO_685 = 685
    ADRENO_680 = 680
    ADRENO_675 = 675
    ADRENO_650 = 650
    ADRENO_640 = 640
    ADRENO_630 = 630
    ADRENO_620 = 620
    ADRENO_618 = 618
    ADRENO_616 = 616
    ADRENO_615 = 615
    ADRENO_612 = 612
    ADRENO_610 = 610
    ADRENO_605 = 605
    # Adreno 5xx series
    ADRENO_540 = 540
    ADRENO_530 = 530
    ADRENO_512 = 512
    ADRENO_510 = 510
    ADRENO_509 = 509
    ADRENO_508 = 508
    ADRENO_506 = 506
    ADRENO_505 = 505
    ADRENO_504 = 504
    # Adreno 4xx series
    ADRENO_430 = 430
    ADRENO_420 = 420
    ADRENO_418 = 418
    ADRENO_405 = 405
    # Adreno 3xx series
    ADRENO_330 = 330
    ADRENO_320 = 320
    ADRENO_308 = 308
    ADRENO_306 = 306
    ADRENO_305 = 305
    ADRENO_304 = 304
    # Adreno 2xx series
    ADRENO_225 = 225
    ADRENO_220 = 220
    ADRENO_205 = 205
    ADRENO_203 = 203
    ADRENO_200 = 200
    # Adreno 1xx series
    ADRENO_130 = 130
    ADRENO_120 = 120
    UNKNOWN = 0

class MaliGPU(Enum):
    # Midgard
    T604 = "T604"
    T622 = "T622"
    T624 = "T624"
    T628 = "T628"
    T658 = "T658"
    T678 = "T678"
    T720 = "T720"
    T760 = "T760"
    T820 = "T820"
    T830 = "T830"
    T860 = "T860"
    T880 = "T880"
    # Bifrost
    G31 = "G31"
    G51 = "G51"
    G71 = "G71"
    G52 = "G52"
    G72 = "G72"
    G76 = "G76"
    # Valhall
    G57 = "G57"
    G77 = "G77"
    G68 = "G68"
    G78 = "G78"
    UNKNOWN = "unknown"


# --- Generation groupings ---
# Each family set is disjoint from the others; UNKNOWN belongs to none.
ADRENO_1XX = frozenset({AdrenoGpu.ADRENO_120, AdrenoGpu.ADRENO_130})
ADRENO_2XX = frozenset({
    AdrenoGpu.ADRENO_200, AdrenoGpu.ADRENO_203, AdrenoGpu.ADRENO_205,
    AdrenoGpu.ADRENO_220, AdrenoGpu.ADRENO_225,
})
ADRENO_3XX = frozenset({
    AdrenoGpu.ADRENO_304, AdrenoGpu.ADRENO_305, AdrenoGpu.ADRENO_306,
    AdrenoGpu.ADRENO_308, AdrenoGpu.ADRENO_320, AdrenoGpu.ADRENO_330,
})
ADRENO_4XX = frozenset({
    AdrenoGpu.ADRENO_405, AdrenoGpu.ADRENO_418, AdrenoGpu.ADRENO_420,
    AdrenoGpu.ADRENO_430,
})
ADRENO_5XX = frozenset({
    AdrenoGpu.ADRENO_504, AdrenoGpu.ADRENO_505, AdrenoGpu.ADRENO_506,
    AdrenoGpu.ADRENO_508, AdrenoGpu.ADRENO_509, AdrenoGpu.ADRENO_510,
    AdrenoGpu.ADRENO_512, AdrenoGpu.ADRENO_530, AdrenoGpu.ADRENO_540,
})
ADRENO_6XX = frozenset({
    AdrenoGpu.ADRENO_605, AdrenoGpu.ADRENO_610, AdrenoGpu.ADRENO_612,
    AdrenoGpu.ADRENO_615, AdrenoGpu.ADRENO_616, AdrenoGpu.ADRENO_618,
    AdrenoGpu.ADRENO_620, AdrenoGpu.ADRENO_630, AdrenoGpu.ADRENO_640,
    AdrenoGpu.ADRENO_650, AdrenoGpu.ADRENO_675, AdrenoGpu.ADRENO_680,
    AdrenoGpu.ADRENO_685,
})

# Family key -> members, used by the occupancy tables ("6xx", "5xx", ...)
ADRENO_FAMILIES = {
    "1xx": ADRENO_1XX,
    "2xx": ADRENO_2XX,
    "3xx": ADRENO_3XX,
    "4xx": ADRENO_4XX,
    "5xx": ADRENO_5XX,
    "6xx": ADRENO_6XX,
}

MALI_T6XX = frozenset({
    MaliGPU.T604, MaliGPU.T622, MaliGPU.T624,
    MaliGPU.T628, MaliGPU.T658, MaliGPU.T678,
})
MALI_T7XX = frozenset({MaliGPU.T720, MaliGPU.T760})
MALI_T8XX = frozenset({MaliGPU.T820, MaliGPU.T830, MaliGPU.T860, MaliGPU.T880})
MALI_BIFROST_GEN1 = frozenset({MaliGPU.G31, MaliGPU.G51, MaliGPU.G71})
MALI_BIFROST_GEN2 = frozenset({MaliGPU.G52, MaliGPU.G72})
MALI_BIFROST_GEN3 = frozenset({MaliGPU.G76})
MALI_VALHALL = frozenset({MaliGPU.G57, MaliGPU.G77, MaliGPU.G68, MaliGPU.G78})

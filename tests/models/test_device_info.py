from __future__ import annotations

import pytest

from gpucaps.models import (
    DataType, DeviceInfo, GpuVendor, MaliGPU, MaliInfo, OpenCLVersion, TextureSupport,
)


@pytest.mark.parametrize(
    "version, at_least_1_2, cl20",
    [
        (OpenCLVersion.CL_1_0, False, False),
        (OpenCLVersion.CL_1_1, False, False),
        (OpenCLVersion.CL_1_2, True, False),
        (OpenCLVersion.CL_2_0, True, True),
        (OpenCLVersion.CL_2_1, True, True),
        (OpenCLVersion.CL_2_2, True, True),
        (OpenCLVersion.CL_3_0, True, True),
    ],
)
def test_opencl_version_gating(version: OpenCLVersion, at_least_1_2: bool, cl20: bool) -> None:
    info = DeviceInfo(cl_version=version)
    assert info.supports_texture_array() == at_least_1_2
    assert info.supports_image_buffer() == at_least_1_2
    assert info.is_cl20_or_higher() == cl20
    assert info.is_cl20_or_higher() == (version >= OpenCLVersion.CL_2_0)


@pytest.mark.parametrize("gpu", [MaliGPU.T604, MaliGPU.T760, MaliGPU.T880])
@pytest.mark.parametrize("raw_flag", [True, False])
def test_image3d_disabled_on_midgard(gpu: MaliGPU, raw_flag: bool) -> None:
    info = DeviceInfo(gpu_vendor=GpuVendor.MALI, mali_info=MaliInfo(gpu), supports_image3d_writes=raw_flag)
    assert info.supports_image3d() is False


@pytest.mark.parametrize(
    "vendor, gpu",
    [
        (GpuVendor.MALI, MaliGPU.G78),
        (GpuVendor.MALI, MaliGPU.G52),
        (GpuVendor.MALI, MaliGPU.UNKNOWN),
        (GpuVendor.QUALCOMM, MaliGPU.T880),  # Midgard model but not a Mali vendor
        (GpuVendor.INTEL, MaliGPU.UNKNOWN),
    ],
)
@pytest.mark.parametrize("raw_flag", [True, False])
def test_image3d_follows_raw_flag_elsewhere(vendor: GpuVendor, gpu: MaliGPU, raw_flag: bool) -> None:
    info = DeviceInfo(gpu_vendor=vendor, mali_info=MaliInfo(gpu), supports_image3d_writes=raw_flag)
    assert info.supports_image3d() is raw_flag


def test_float_image2d_selects_flag_by_channels_and_precision() -> None:
    info = DeviceInfo(texture_support=TextureSupport(
        supports_r_f32_tex2d=True,
        supports_rg_f16_tex2d=True,
        supports_rgb_f32_tex2d=True,
        supports_rgba_f16_tex2d=True,
    ))
    assert info.supports_float_image2d(DataType.FLOAT32, 1)
    assert not info.supports_float_image2d(DataType.FLOAT16, 1)
    assert info.supports_float_image2d(DataType.FLOAT16, 2)
    assert not info.supports_float_image2d(DataType.FLOAT32, 2)
    assert info.supports_float_image2d(DataType.FLOAT32, 3)
    assert not info.supports_float_image2d(DataType.FLOAT16, 3)
    assert info.supports_float_image2d(DataType.FLOAT16, 4)
    assert not info.supports_float_image2d(DataType.FLOAT32, 4)


@pytest.mark.parametrize("channels", [0, 5, -1, 8])
def test_float_image2d_rejects_other_channel_counts(channels: int) -> None:
    all_on = TextureSupport(**{name: True for name in TextureSupport.__dataclass_fields__})
    info = DeviceInfo(texture_support=all_on)
    assert not info.supports_float_image2d(DataType.FLOAT32, channels)
    assert not info.supports_float_image2d(DataType.FLOAT16, channels)


def test_extension_and_subgroup_membership_is_exact() -> None:
    info = DeviceInfo(extensions=["cl_khr_fp16", "cl_khr_subgroups"], supported_subgroup_sizes=[16, 32])
    assert info.supports_extension("cl_khr_fp16")
    assert not info.supports_extension("cl_khr")
    assert not info.supports_extension("CL_KHR_FP16")
    assert info.supports_subgroup_with_size(32)
    assert not info.supports_subgroup_with_size(64)
    assert isinstance(info.extensions, frozenset)
    assert isinstance(info.supported_subgroup_sizes, frozenset)


def test_vendor_predicates() -> None:
    predicates = {
        GpuVendor.QUALCOMM: "is_adreno",
        GpuVendor.APPLE: "is_apple",
        GpuVendor.MALI: "is_mali",
        GpuVendor.POWERVR: "is_powervr",
        GpuVendor.NVIDIA: "is_nvidia",
        GpuVendor.AMD: "is_amd",
        GpuVendor.INTEL: "is_intel",
    }
    for vendor in GpuVendor:
        info = DeviceInfo(gpu_vendor=vendor)
        true_predicates = [name for name in predicates.values() if getattr(info, name)()]
        expected = [predicates[vendor]] if vendor in predicates else []
        assert true_predicates == expected


def test_device_info_is_immutable_and_serialisable() -> None:
    info = DeviceInfo(gpu_vendor=GpuVendor.MALI, cl_version=OpenCLVersion.CL_2_0, extensions=["b", "a"])
    with pytest.raises(AttributeError):
        info.gpu_vendor = GpuVendor.AMD  # type: ignore[misc]
    data = info.to_dict()
    assert data["gpu_vendor"] == "Mali"
    assert data["cl_version"] == "2.0"
    assert data["extensions"] == ["a", "b"]
    assert data["mali_info"] == {"gpu_version": "UNKNOWN"}
    assert data["limits"]["max_work_group_size"] == [0, 0, 0]


def test_extension_string_is_split_on_whitespace() -> None:
    info = DeviceInfo(extensions="cl_khr_fp16  cl_khr_subgroups\tcl_qcom_dot_product8 ")
    assert info.supports_extension("cl_khr_fp16")
    assert info.supports_extension("cl_qcom_dot_product8")
    assert info.extensions == frozenset({"cl_khr_fp16", "cl_khr_subgroups", "cl_qcom_dot_product8"})
    assert not info.supports_extension("c")


def test_empty_extension_names_are_dropped() -> None:
    assert DeviceInfo(extensions=["", "cl_khr_fp16"]).extensions == frozenset({"cl_khr_fp16"})
    assert DeviceInfo(extensions="").extensions == frozenset()

from __future__ import annotations

import json

from typer.testing import CliRunner

from gpucaps.cli import app

runner = CliRunner()


def test_describe_adreno_device() -> None:
    result = runner.invoke(app, [
        "describe",
        "--vendor", "QUALCOMM",
        "--name", "QUALCOMM Adreno(TM)",
        "--device-version", "OpenCL C 2.0 Adreno(TM) 640",
        "-e", "cl_khr_fp16",
        "-s", "64",
        "--f16-textures",
    ])
    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["gpu_vendor"] == "Qualcomm"
    assert data["cl_version"] == "2.0"
    assert data["adreno_info"]["adreno_gpu"] == "ADRENO_640"
    assert data["adreno_info"]["occupancy"]["max_waves_count"] == 30
    assert data["extensions"] == ["cl_khr_fp16"]
    assert data["supported_subgroup_sizes"] == [64]
    caps = data["capabilities"]
    assert caps["is_cl20_or_higher"] is True
    assert caps["is_adreno_6xx_or_higher"] is True
    assert caps["float_image2d"]["float16x4"] is True
    assert caps["float_image2d"]["float32x1"] is False


def test_describe_midgard_disables_image3d() -> None:
    result = runner.invoke(app, [
        "describe", "--vendor", "ARM", "--name", "Mali-T880", "--cl-version", "1.2", "--image3d-writes",
    ])
    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["supports_image3d_writes"] is True
    assert data["capabilities"]["supports_image3d"] is False
    assert data["capabilities"]["is_midgard"] is True


def test_occupancy_command() -> None:
    result = runner.invoke(app, ["occupancy", "OpenCL C 2.0 Adreno(TM) 640", "--registers", "128"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data == {
        "adreno_gpu": "ADRENO_640",
        "wave_size": 128,
        "register_memory_per_compute_unit": 128 * 144 * 16,
        "max_waves_count": 30,
        "max_waves_count_for_registers": 18,
    }


def test_occupancy_half_wave_without_registers() -> None:
    result = runner.invoke(app, ["occupancy", "Adreno (TM) 630", "--half-wave"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["wave_size"] == 64
    assert "max_waves_count_for_registers" not in data


def test_enums_lists_every_variant() -> None:
    result = runner.invoke(app, ["enums"])
    assert result.exit_code == 0, result.output
    assert "unknown vendor" in result.output
    assert "NVIDIA" in result.output
    for version in ["1.0", "1.1", "1.2", "2.0", "2.1", "2.2", "3.0"]:
        assert version in result.output

import json
from typing import List, Optional

import typer

from gpucaps.classifiers import create_adreno_info
from gpucaps.config.settings import get_log_level
from gpucaps.core import build_device_info
from gpucaps.models import (
    AdrenoGpu, DataType, DeviceInfo, GpuVendor, OpenCLVersion, TextureSupport,
    gpu_vendor_to_string, opencl_version_to_string,
)
from gpucaps.utils.logging_config import logger as gc_logger
from gpucaps.utils.spec_loader import SpecTableError

app = typer.Typer(name="gpucaps", help="Classify GPU identification strings and answer capability queries.")


def _capability_answers(device_info: DeviceInfo) -> dict:
    return {
        "supports_texture_array": device_info.supports_texture_array(),
        "supports_image_buffer": device_info.supports_image_buffer(),
        "supports_image3d": device_info.supports_image3d(),
        "is_cl20_or_higher": device_info.is_cl20_or_higher(),
        "float_image2d": {
            f"{data_type.value}x{channels}": device_info.supports_float_image2d(data_type, channels)
            for data_type in DataType
            for channels in (1, 2, 3, 4)
        },
        "is_adreno_6xx_or_higher": device_info.adreno_info.is_adreno_6xx_or_higher(),
        "is_midgard": device_info.mali_info.is_midgard(),
        "is_bifrost": device_info.mali_info.is_bifrost(),
        "is_valhall": device_info.mali_info.is_valhall(),
    }


@app.callback()
def main_callback():
    """
    gpucaps CLI main entry point.
    """
    gc_logger.setLevel(get_log_level())


@app.command()
def describe(
    vendor: str = typer.Option(..., "--vendor", help="Platform vendor string, e.g. 'QUALCOMM' or 'ARM'."),
    name: str = typer.Option("", "--name", help="Device name string, e.g. 'Mali-G78'."),
    device_version: str = typer.Option("", "--device-version", help="Device/driver version string."),
    cl_version: str = typer.Option("", "--cl-version", help="OpenCL version string. Parsed from --device-version when empty."),
    extension: List[str] = typer.Option([], "--extension", "-e", help="Supported extension name (repeatable)."),
    subgroup_size: List[int] = typer.Option([], "--subgroup-size", "-s", help="Supported sub-group size (repeatable)."),
    image3d_writes: bool = typer.Option(False, "--image3d-writes/--no-image3d-writes", help="Raw 3-D image writes flag."),
    f16_textures: bool = typer.Option(False, "--f16-textures", help="Report all half-float 2-D texture formats as supported."),
    f32_textures: bool = typer.Option(False, "--f32-textures", help="Report all 32-bit float 2-D texture formats as supported."),
):
    """
    Builds a device description from raw strings and prints it with the capability answers.
    """
    try:
        texture_support = TextureSupport(
            supports_r_f16_tex2d=f16_textures, supports_rg_f16_tex2d=f16_textures,
            supports_rgb_f16_tex2d=f16_textures, supports_rgba_f16_tex2d=f16_textures,
            supports_r_f32_tex2d=f32_textures, supports_rg_f32_tex2d=f32_textures,
            supports_rgb_f32_tex2d=f32_textures, supports_rgba_f32_tex2d=f32_textures,
        )
        device_info = build_device_info(
            vendor_name=vendor,
            device_name=name,
            device_version=device_version,
            opencl_version=cl_version,
            extensions=extension,
            supported_subgroup_sizes=subgroup_size,
            texture_support=texture_support,
            supports_image3d_writes=image3d_writes,
        )
    except SpecTableError as e:
        gc_logger.critical(f"🚨 Spec tables are invalid: {e}")
        raise typer.Exit(code=1)

    output = device_info.to_dict()
    output["capabilities"] = _capability_answers(device_info)
    typer.echo(json.dumps(output, indent=2))


@app.command()
def occupancy(
    device_version: str = typer.Argument(..., help="Device version string containing the Adreno model, e.g. 'OpenCL C 2.0 Adreno(TM) 640'."),
    registers: Optional[int] = typer.Option(None, "--registers", "-r", help="Register footprint per thread."),
    full_wave: bool = typer.Option(True, "--full-wave/--half-wave", help="Wave mode for the occupancy calculation."),
):
    """
    Prints the Adreno occupancy figures for a device version string.
    """
    try:
        adreno_info = create_adreno_info(device_version)
    except SpecTableError as e:
        gc_logger.critical(f"🚨 Spec tables are invalid: {e}")
        raise typer.Exit(code=1)

    if adreno_info.adreno_gpu == AdrenoGpu.UNKNOWN:
        typer.echo(typer.style(f"No Adreno model found in '{device_version}', conservative values shown.", fg=typer.colors.YELLOW), err=True)

    result = {
        "adreno_gpu": adreno_info.adreno_gpu.name,
        "wave_size": adreno_info.get_wave_size(full_wave),
        "register_memory_per_compute_unit": adreno_info.get_register_memory_size_per_compute_unit(),
        "max_waves_count": adreno_info.get_maximum_waves_count(),
    }
    if registers is not None:
        result["max_waves_count_for_registers"] = adreno_info.get_maximum_waves_count(registers, full_wave)
    typer.echo(json.dumps(result, indent=2))


@app.command()
def enums():
    """
    Lists every vendor and OpenCL version with its display string.
    """
    typer.echo(typer.style("--- Vendors ---", fg=typer.colors.CYAN, bold=True))
    for vendor in GpuVendor:
        typer.echo(f"{vendor.name:<10} {gpu_vendor_to_string(vendor)}")
    typer.echo(typer.style("--- OpenCL versions ---", fg=typer.colors.CYAN, bold=True))
    for version in OpenCLVersion:
        typer.echo(f"{version.name:<10} {opencl_version_to_string(version)}")


if __name__ == "__main__":
    app()

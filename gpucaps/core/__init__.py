from .device_builder import build_device_info, reset_spec_tables

__all__ = ["build_device_info", "reset_spec_tables"]

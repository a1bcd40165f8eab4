"""Shared utilities module."""

__all__ = [
    "cli_common",
    "input_loader",
    "projection_config",
    "render",
    "serialization",
    "stat_mappings",
]

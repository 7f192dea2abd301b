"""Shared file I/O helpers."""

from .json_io import dump_payload, load_json_file, write_json_atomic

__all__ = ["dump_payload", "load_json_file", "write_json_atomic"]

"""Thin wrappers over platform and library helpers."""

from .files import create_directory, file_size, format_bytes
from .system import check_packages, loaded_packages, os_name
from .text import normalize_whitespace, replace_space
from .urls import check_url

__all__ = [
    "check_url",
    "create_directory",
    "file_size",
    "format_bytes",
    "replace_space",
    "normalize_whitespace",
    "os_name",
    "loaded_packages",
    "check_packages",
]

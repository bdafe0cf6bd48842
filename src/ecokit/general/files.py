"""Directory creation and human-readable file sizes."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from ecokit.core.config import SIZE_DIGITS, get_size_units
from ecokit.core.enums import SizeStandard
from ecokit.core.errors import stop_ctx


logger = logging.getLogger(__name__)


def create_directory(path: Union[str, Path, None], verbose: bool = True) -> Path:
    """Create ``path`` (and parents) if it does not exist yet.

    Returns:
        The directory path.
    """
    if path is None:
        stop_ctx("path cannot be NULL", path=path)

    directory = Path(path)
    if directory.is_dir():
        if verbose:
            logger.info("path: %s - already exists", directory.as_posix())
        return directory

    directory.mkdir(parents=True, exist_ok=True)
    if verbose:
        logger.info("path: %s created", directory.as_posix())
    return directory


def _parse_standard(standard: Union[str, SizeStandard]) -> SizeStandard:
    if isinstance(standard, SizeStandard):
        return standard
    try:
        return SizeStandard(str(standard).upper())
    except ValueError as e:
        stop_ctx(
            f"Unknown size standard. Valid: {[s.value for s in SizeStandard]}",
            cause=e,
            standard=standard,
        )


def format_bytes(
    n_bytes: int,
    standard: Union[str, SizeStandard] = SizeStandard.IEC,
    digits: int = SIZE_DIGITS,
) -> str:
    """Format a byte count for humans.

    Examples:
        >>> format_bytes(1536)
        '1.5 KiB'
        >>> format_bytes(1536, standard="SI")
        '1.5 kB'
        >>> format_bytes(512)
        '512 B'
    """
    if n_bytes is None or isinstance(n_bytes, bool) or not isinstance(n_bytes, (int, float)):
        stop_ctx("`n_bytes` must be a number", n_bytes=n_bytes)
    if n_bytes < 0:
        stop_ctx("`n_bytes` cannot be negative", n_bytes=n_bytes)

    base, units = get_size_units(_parse_standard(standard))
    if n_bytes < base:
        return f"{int(n_bytes)} B"

    value = float(n_bytes)
    unit = units[0]
    for unit in units:
        value /= base
        if round(value, digits) < base:
            break
    return f"{value:.{digits}f} {unit}"


def file_size(
    path: Union[str, Path, None],
    standard: Union[str, SizeStandard] = SizeStandard.IEC,
    digits: int = SIZE_DIGITS,
) -> str:
    """Human-readable size of a file.

    Raises:
        InvalidArgument: If ``path`` is None.
        FileNotFoundError: If the file does not exist.
    """
    if path is None:
        stop_ctx("`file` cannot be NULL", path=path)
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"File not found: {file_path}")
    return format_bytes(file_path.stat().st_size, standard=standard, digits=digits)


__all__ = ["create_directory", "format_bytes", "file_size"]

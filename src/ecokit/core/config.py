"""Package-wide defaults.

Adjust these constants to change the behaviour of the helpers without
touching their call sites.
"""

from __future__ import annotations

from ecokit.core.enums import SizeStandard

# ============================================================================
# PARTITIONING
# ============================================================================

DEFAULT_CHUNK_PREFIX = "Chunk"

# Number of chunks used by partition_frame when neither chunk_size nor
# n_chunks is given (capped by the number of rows)
DEFAULT_N_CHUNKS = 5


# ============================================================================
# REPORTS
# ============================================================================

REPORT_SEPARATOR = " ||  "


# ============================================================================
# NETWORK / FILES
# ============================================================================

URL_TIMEOUT_SEC = 2.0

SIZE_DIGITS = 1

# Format: {standard: (base, [unit labels from base^1 upwards])}
_SIZE_UNITS = {
    SizeStandard.IEC: (1024, ["KiB", "MiB", "GiB", "TiB", "PiB", "EiB"]),
    SizeStandard.SI: (1000, ["kB", "MB", "GB", "TB", "PB", "EB"]),
}


def get_size_units(standard: SizeStandard) -> tuple[int, list[str]]:
    """Get the base and unit labels for a size standard.

    Args:
        standard: Unit standard (IEC or SI).

    Returns:
        Tuple of (base, unit labels).

    Examples:
        >>> get_size_units(SizeStandard.SI)[0]
        1000
    """
    return _SIZE_UNITS[SizeStandard(standard)]

"""Operating system and package introspection."""

from __future__ import annotations

import importlib.util
import platform
import sys
from typing import Dict, Iterable, List, Union

from ecokit.core.errors import stop_ctx


def os_name() -> str:
    """Name of the operating system (e.g. ``"Linux"``, ``"Windows"``)."""
    return platform.system()


def loaded_packages() -> List[str]:
    """Sorted top-level names of the currently imported modules.

    Private modules (leading underscore) are skipped.
    """
    names = {name.split(".", 1)[0] for name in list(sys.modules)}
    return sorted(n for n in names if not n.startswith("_"))


def check_packages(names: Union[str, Iterable[str]]) -> Dict[str, bool]:
    """Report whether each package can be imported, without importing it."""
    if names is None:
        stop_ctx("`names` cannot be NULL", names=names)
    if isinstance(names, str):
        names = [names]
    names = list(names)
    if not names or not all(isinstance(n, str) and n for n in names):
        stop_ctx("`names` must be non-empty character strings", names=names)
    result = {}
    for name in names:
        try:
            result[name] = importlib.util.find_spec(name) is not None
        except (ImportError, ValueError):
            result[name] = False
    return result


__all__ = ["os_name", "loaded_packages", "check_packages"]

"""String normalization helpers."""

from __future__ import annotations

import re
from typing import Any, List, Union

from ecokit.core.errors import stop_ctx


_WHITESPACE_RE = re.compile(r"\s+", flags=re.UNICODE)


def replace_space(x: Any) -> Union[str, List[str]]:
    """Replace every space with an underscore.

    Lists and tuples are handled element-wise; other values are converted
    with ``str`` first.

    Examples:
        >>> replace_space("Annual mean temperature")
        'Annual_mean_temperature'
        >>> replace_space(["a b", 1])
        ['a_b', '1']
    """
    if x is None:
        stop_ctx("x name cannot be NULL", x=x)
    if isinstance(x, (list, tuple)):
        return [str(v).replace(" ", "_") for v in x]
    return str(x).replace(" ", "_")


def normalize_whitespace(text: Any) -> str:
    """Trim ``text`` and collapse whitespace runs to a single space."""
    if text is None:
        stop_ctx("`text` cannot be NULL", text=text)
    return _WHITESPACE_RE.sub(" ", str(text)).strip()


__all__ = ["replace_space", "normalize_whitespace"]

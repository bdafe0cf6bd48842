"""Keep only selected names in a working scope."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Iterable, Mapping, MutableMapping
from typing import Any, List, Optional, Union

from ecokit.core.config import REPORT_SEPARATOR
from ecokit.core.errors import stop_ctx


logger = logging.getLogger(__name__)


def _validate_keep_names(keep_names: Any) -> List[str]:
    if keep_names is None:
        stop_ctx("`keep_names` cannot be NULL or empty.", keep_names=keep_names)
    if isinstance(keep_names, str):
        keep_names = [keep_names]
    if not isinstance(keep_names, Iterable) or isinstance(keep_names, Mapping):
        stop_ctx("`keep_names` must be a collection of names.", keep_names=keep_names)
    names = list(keep_names)
    if not names:
        stop_ctx("`keep_names` cannot be NULL or empty.", keep_names=keep_names)
    non_text = [n for n in names if not isinstance(n, str)]
    if non_text:
        stop_ctx("`keep_names` must contain only character strings.", non_text=non_text)
    return names


def _format_listing(title: str, names: List[str]) -> str:
    listing = REPORT_SEPARATOR.join(f"{i}:{name}" for i, name in enumerate(names, start=1))
    return f"{title} ({len(names)}): {listing}"


def prune_scope(
    scope: MutableMapping,
    keep_names: Union[str, Iterable[str]],
    verbose: bool = True,
) -> None:
    """Remove every binding from ``scope`` except those in ``keep_names``.

    Inputs are validated before anything is removed, so an invalid call
    leaves the scope untouched. Names in ``keep_names`` that are not bound
    are ignored.

    Args:
        scope: Mutable mapping of name -> value, modified in place.
        keep_names: Names to keep. A single string counts as one name.
        verbose: Print the removed and kept names.

    Raises:
        InvalidArgument: If ``keep_names`` is missing, empty, or holds
            non-string items, or if ``scope`` is not a mutable mapping.

    Examples:
        >>> scope = {"A": 1, "B": 2, "C": 3}
        >>> prune_scope(scope, ["A"], verbose=False)
        >>> scope
        {'A': 1}
    """
    _prune(scope, _validate_keep_names(keep_names), verbose)


def _is_dunder(name: Any) -> bool:
    return isinstance(name, str) and name.startswith("__") and name.endswith("__")


def _prune(
    scope: MutableMapping, names: List[str], verbose: bool, hide_dunder: bool = False
) -> None:
    keep = set(names)

    if not isinstance(scope, MutableMapping):
        stop_ctx(
            "`scope` must be a mutable mapping of names to values.",
            scope_type=type(scope).__name__,
        )

    to_remove = [name for name in list(scope) if name not in keep]

    if verbose:
        print(_format_listing("Removed Variables", to_remove))

    for name in to_remove:
        del scope[name]
    logger.debug("Removed %d names from scope", len(to_remove))

    if verbose:
        kept = [n for n in scope if not (hide_dunder and _is_dunder(n))]
        print(_format_listing("Kept Variables", kept))


def keep_only(
    objects: Union[str, Iterable[str]],
    verbose: bool = True,
    scope: Optional[MutableMapping] = None,
) -> None:
    """Keep only ``objects`` in the caller's module globals (or ``scope``).

    Handy at the top level of a script or notebook, where the caller's
    globals are the working session. Dunder names (``__name__``,
    ``__builtins__``, ...) are always kept, like hidden objects in an
    interactive session. They are left out of the printed report.
    """
    names = _validate_keep_names(objects)
    if scope is None:
        frame = inspect.currentframe()
        try:
            scope = frame.f_back.f_globals
        finally:
            del frame
    if isinstance(scope, MutableMapping):
        names += [n for n in scope if _is_dunder(n)]
    _prune(scope, names, verbose, hide_dunder=True)


__all__ = ["prune_scope", "keep_only"]

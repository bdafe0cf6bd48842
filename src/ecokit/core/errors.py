"""Error types raised by the helpers.

All precondition failures surface as :class:`InvalidArgument`, raised before
any state is touched. The error keeps the offending values in ``context`` so
the message can show them next to the failure.
"""

from __future__ import annotations

from typing import Any, Dict, NoReturn, Optional


def _format_value(value: Any, max_len: int = 200) -> str:
    if value is None:
        return "NULL"
    text = repr(value)
    if len(text) > max_len:
        text = text[: max_len - 3] + "..."
    return text


class InvalidArgument(ValueError):
    """Raised when a call's input violates a documented precondition.

    Attributes:
        message: Primary error message.
        context: Named values included in the rendered message.

    Examples:
        >>> err = InvalidArgument("`n_splits` cannot be NULL", n_splits=None)
        >>> print(err)
        `n_splits` cannot be NULL
        <BLANKLINE>
        ----- Metadata -----
        n_splits: <NoneType>
        NULL
    """

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context: Dict[str, Any] = dict(context)
        super().__init__(message)

    def __str__(self) -> str:
        if not self.context:
            return self.message
        blocks = []
        for name, value in self.context.items():
            blocks.append(f"{name}: <{type(value).__name__}>\n{_format_value(value)}")
        metadata = "\n\n".join(blocks)
        return f"{self.message}\n\n----- Metadata -----\n{metadata}"


def stop_ctx(message: str, *, cause: Optional[BaseException] = None, **context: Any) -> NoReturn:
    """Raise :class:`InvalidArgument` with named context values.

    Args:
        message: Primary error message.
        cause: Optional exception to chain from.
        **context: Values shown in the metadata block of the message.

    Raises:
        InvalidArgument: Always.
    """
    if cause is not None:
        raise InvalidArgument(message, **context) from cause
    raise InvalidArgument(message, **context)


__all__ = ["InvalidArgument", "stop_ctx"]

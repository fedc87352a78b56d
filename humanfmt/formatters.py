"""
Type and value tokens for exception messages.

Validation errors quote the offending argument through fmt_type() or fmt_value(), so messages
look alike across modules and stay short even for huge inputs or a broken __repr__:

    >>> raise TypeError(f"precision must be int | None, but got {fmt_value('2')}")
    Traceback (most recent call last):
    TypeError: precision must be int | None, but got <str: '2'>
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any

ELLIPSIS = "..."


# Methods --------------------------------------------------------------------------------------------------------------

def fmt_type(obj: Any) -> str:
    """
    Type token of an object, or of a type itself.

    Examples:
        >>> fmt_type(42)
        '<int>'
        >>> fmt_type(int)
        '<int>'
    """
    cls = obj if isinstance(obj, type) else type(obj)
    return f"<{cls.__name__}>"


def fmt_value(obj: Any, *, max_repr: int = 120) -> str:
    """
    Type and repr token of a value.

    A '>' inside the repr is escaped so the token stays unambiguous; reprs longer than
    max_repr are cut, keeping the closing quote of strings.

    Examples:
        >>> fmt_value(42)
        '<int: 42>'
        >>> fmt_value("hello world", max_repr=9)
        "<str: 'hell'...>"
    """
    text = _truncate(_safe_repr(obj).replace(">", "\\>"), max_repr)
    return f"<{type(obj).__name__}: {text}>"


# Private Methods ------------------------------------------------------------------------------------------------------

def _truncate(text: str, max_len: int) -> str:
    if max_len <= 0 or len(text) <= max_len:
        return text

    quote = text[0]
    if len(text) >= 2 and quote in "'\"" and text[-1] == quote:
        keep = max(max_len - 2 - len(ELLIPSIS), 0)
        return f"{quote}{text[1:1 + keep]}{quote}{ELLIPSIS}"
    return text[:max(max_len - len(ELLIPSIS), 0)] + ELLIPSIS


def _safe_repr(obj: Any) -> str:
    try:
        return repr(obj)
    except Exception as exc:
        return f"<{type(obj).__name__} object (repr failed: {type(exc).__name__})>"

"""
Render humanfmt formatters into any writable text sink.

Formatters are plain frozen dataclasses that know their text via __str__; render()
is the single place where text meets an output stream:

    >>> import sys
    >>> render(Bytes.si(82854982), sys.stdout)
    82.855 MB
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Protocol, runtime_checkable

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import fmt_type


@runtime_checkable
class SupportsWrite(Protocol):
    """Protocol for text sinks: io.StringIO, sys.stdout, opened text files."""

    def write(self, s: str, /) -> object: ...


class Renderable:
    """
    Base for formatter dataclasses: subclasses implement __str__, and f-string format
    specs apply to the rendered text.

        >>> f"[{Ordinal(3):>6}]"
        '[   3rd]'
    """
    __slots__ = ()

    def __str__(self) -> str:
        raise NotImplementedError

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


def render(fmt: object, sink: SupportsWrite) -> int:
    """
    Write the text of a formatter to sink.

    Args:
        fmt: Any formatter (or any object with a meaningful __str__).
        sink: Object with a write(str) method.

    Returns:
        Number of characters written.

    Raises:
        TypeError: If sink has no write() method.
        OSError: Write failures of the sink are propagated unchanged.
    """
    if not isinstance(sink, SupportsWrite):
        raise TypeError(f"sink must provide write(str), but got {fmt_type(sink)}")

    text = str(fmt)
    sink.write(text)
    return len(text)

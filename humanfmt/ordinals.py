#
# Humanfmt Ordinal Numbers (1st, 2nd, 3rd)
#

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import fmt_type
from .sink import Renderable

SUFFIXES = frozendict({1: "st", 2: "nd", 3: "rd"})


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class Ordinal(Renderable):
    """
    Ordinal number formatter.

        >>> f"You came in {Ordinal(1)} place!"
        'You came in 1st place!'
    """
    value: int

    def __post_init__(self):
        _validate_int(self.value)

    def __str__(self) -> str:
        return f"{self.value}{ordinal_suffix(self.value)}"


# Methods --------------------------------------------------------------------------------------------------------------

def ordinal_suffix(value: int) -> str:
    """
    English ordinal suffix of an integer: "st", "nd", "rd" or "th".

    The teens rule goes first: 11, 12 and 13 (and 111, 212, ...) take "th".

    Examples:
        >>> ordinal_suffix(21)
        'st'
        >>> ordinal_suffix(112)
        'th'
        >>> ordinal_suffix(-3)
        'rd'
    """
    _validate_int(value)
    abs_value = abs(value)
    if 11 <= abs_value % 100 <= 13:
        return "th"
    return SUFFIXES.get(abs_value % 10, "th")


def ordinal(value: int) -> str:
    """
    Integer followed by its ordinal suffix; the sign is kept in front.

    Examples:
        >>> ordinal(42)
        '42nd'
        >>> ordinal(-11)
        '-11th'
    """
    return str(Ordinal(value))


# Private Methods ------------------------------------------------------------------------------------------------------

def _validate_int(value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"ordinal value must be int, but got {fmt_type(value)}")

"""
Float rendering without trailing zeros.

The shared numeric-to-text step of humanfmt: every fractional output (byte sizes,
SI values, grouped floats) is produced here, so special values and precision
clamping behave the same everywhere.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
from dataclasses import dataclass
from enum import StrEnum, unique
from typing import Self

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from .conf import HumanConf
from .formatters import fmt_type, fmt_value
from .sentinels import UNSET, UnsetType
from .sink import Renderable


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class SpecialFloat(StrEnum):
    """Float classes that render as fixed tokens instead of digits."""
    NAN = "nan"
    POSITIVE_INF = "positive_inf"
    NEGATIVE_INF = "negative_inf"
    NORMAL = "normal"


SPECIAL_TOKENS = frozendict({
    SpecialFloat.NAN: "NaN",
    SpecialFloat.POSITIVE_INF: "+Inf",
    SpecialFloat.NEGATIVE_INF: "-Inf",
})


@dataclass(frozen=True)
class Float(Renderable):
    """
    Float formatter with trimmed precision.

    Attributes:
        value: The number to render.
        precision: Maximum fractional digits, None for HumanConf.FLOAT_PRECISION.

    Examples:
        >>> str(Float(2.24))
        '2.24'
        >>> str(Float(3.14159).with_precision(2))
        '3.14'
        >>> str(Float(float("-inf")))
        '-Inf'
    """
    value: int | float
    precision: int | None = None

    def __post_init__(self):
        _validate_number(self.value)
        validate_precision(self.precision)

    def merge(self,
              value: int | float | UnsetType = UNSET,
              precision: int | None | UnsetType = UNSET,
              ) -> Self:
        """
        Create a new Float with merged options; UNSET arguments are inherited.
        """
        value = self.value if value is UNSET else value
        precision = self.precision if precision is UNSET else precision
        return type(self)(value=value, precision=precision)

    def with_precision(self, precision: int) -> Self:
        return self.merge(precision=precision)

    def __str__(self) -> str:
        return float_to_string(self.value, self.precision)


# Methods --------------------------------------------------------------------------------------------------------------

def classify_float(value: int | float) -> SpecialFloat:
    """
    Classify value as NaN, +Inf, -Inf or a normal (finite) number.
    """
    if isinstance(value, int):
        return SpecialFloat.NORMAL
    if math.isnan(value):
        return SpecialFloat.NAN
    if math.isinf(value):
        return SpecialFloat.POSITIVE_INF if value > 0 else SpecialFloat.NEGATIVE_INF
    return SpecialFloat.NORMAL


def special_float_text(special: SpecialFloat) -> str | None:
    """
    Fixed token of a special float class, None for normal numbers.
    """
    return SPECIAL_TOKENS.get(special)


def clamp_precision(precision: int | None, default: int = HumanConf.FLOAT_PRECISION) -> int:
    """
    Resolve precision to an int in [0, HumanConf.MAX_PRECISION].

    None selects the default; values above the maximum fall back to the maximum and
    negative values to 0.

    Examples:
        >>> clamp_precision(None)
        6
        >>> clamp_precision(42)
        9
        >>> clamp_precision(-1)
        0
    """
    if precision is None:
        precision = default
    return min(max(int(precision), 0), HumanConf.MAX_PRECISION)


def validate_precision(precision) -> None:
    """Reject anything but an int (bool excluded) or None as a precision."""
    if precision is not None and (isinstance(precision, bool) or not isinstance(precision, int)):
        raise TypeError(f"precision must be int | None, but got {fmt_value(precision)}")


def float_to_string(value: int | float, precision: int | None = None) -> str:
    """
    Render value as decimal text with at most `precision` fractional digits,
    stripping trailing zeros and a dangling decimal point.

    NaN, +Inf and -Inf render as "NaN", "+Inf" and "-Inf" regardless of precision.

    Args:
        value: int or float.
        precision: Maximum fractional digits; None for the default of 6.
            Clamped into [0, 9].

    Returns:
        Shortest decimal text at the given precision.

    Examples:
        >>> float_to_string(2.0)
        '2'
        >>> float_to_string(-1.5)
        '-1.5'
        >>> float_to_string(3.14159, 0)
        '3'
        >>> float_to_string(float("nan"), 2)
        'NaN'
    """
    _validate_number(value)

    token = special_float_text(classify_float(value))
    if token is not None:
        return token

    # Exact digits for ints, no float conversion overflow
    if isinstance(value, int):
        return str(value)

    prec = clamp_precision(precision)
    return strip_trailing_zeros(f"{value:.{prec}f}")


def strip_trailing_zeros(s: str, decimal: str = ".") -> str:
    """
    Strip trailing zeros after the decimal point, then a dangling decimal point.

    Text without a decimal point is returned unchanged.

    Examples:
        >>> strip_trailing_zeros("2.2400")
        '2.24'
        >>> strip_trailing_zeros("100.000")
        '100'
        >>> strip_trailing_zeros("100")
        '100'
    """
    if decimal not in s:
        return s
    return s.rstrip("0").removesuffix(decimal)


# Private Methods ------------------------------------------------------------------------------------------------------

def _validate_number(value) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"value must be int | float, but got {fmt_type(value)}")

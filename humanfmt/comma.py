"""
Thousand-separator grouping for integers and floats.

    >>> comma(1000000)
    '1,000,000'
    >>> comma_float(834142.32)
    '834,142.32'
    >>> str(CommaFloat.european(834142.32))
    '834.142,32'
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
from dataclasses import dataclass
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from .conf import HumanConf
from .formatters import fmt_type, fmt_value
from .ftoa import classify_float, clamp_precision, special_float_text, validate_precision
from .sentinels import UNSET, UnsetType
from .sink import Renderable


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class Comma(Renderable):
    """
    Integer formatter with thousand separators.

    Attributes:
        value: Integer to format.
        separator: Single character inserted every three digits.
    """
    value: int
    separator: str = HumanConf.THOUSAND_SEP

    def __post_init__(self):
        _validate_int(self.value)
        _validate_separator(self.separator, "separator")

    def merge(self,
              value: int | UnsetType = UNSET,
              separator: str | UnsetType = UNSET,
              ) -> Self:
        """Create a new Comma with merged options; UNSET arguments are inherited."""
        value = self.value if value is UNSET else value
        separator = self.separator if separator is UNSET else separator
        return type(self)(value=value, separator=separator)

    def with_separator(self, separator: str) -> Self:
        return self.merge(separator=separator)

    def __str__(self) -> str:
        if self.value == 0:
            return "0"
        sign = "-" if self.value < 0 else ""
        return sign + group_digits(str(abs(self.value)), self.separator)


@dataclass(frozen=True)
class CommaFloat(Renderable):
    """
    Float formatter with thousand and decimal separators.

    The absolute value is rendered at `precision` fractional digits, the integer part is
    grouped and the fractional part re-attached with the decimal separator. Without an
    explicit precision trailing fractional zeros are dropped.

    Identical thousand and decimal separators make the output ambiguous and are rejected.

    Attributes:
        value: Number to format.
        separator: Thousand separator, single character.
        decimal: Decimal separator, single character, must differ from separator.
        precision: Fractional digits, None for HumanConf.FLOAT_PRECISION with trimming.

    Raises:
        ValueError: On multi-character or identical separators.
    """
    value: int | float
    separator: str = HumanConf.THOUSAND_SEP
    decimal: str = HumanConf.DECIMAL_SEP
    precision: int | None = None

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise TypeError(f"value must be int | float, but got {fmt_type(self.value)}")
        _validate_separator(self.separator, "separator")
        _validate_separator(self.decimal, "decimal")
        if self.separator == self.decimal:
            raise ValueError(f"thousand and decimal separators must differ, "
                             f"but both are {fmt_value(self.separator)}")
        validate_precision(self.precision)

    @classmethod
    def european(cls, value: int | float, precision: int | None = None) -> Self:
        """
        European format: '.' groups thousands, ',' separates decimals.

            >>> str(CommaFloat.european(1234.56))
            '1.234,56'
        """
        return cls(value=value, separator=".", decimal=",", precision=precision)

    def merge(self,
              value: int | float | UnsetType = UNSET,
              separator: str | UnsetType = UNSET,
              decimal: str | UnsetType = UNSET,
              precision: int | None | UnsetType = UNSET,
              ) -> Self:
        """Create a new CommaFloat with merged options; UNSET arguments are inherited."""
        value = self.value if value is UNSET else value
        separator = self.separator if separator is UNSET else separator
        decimal = self.decimal if decimal is UNSET else decimal
        precision = self.precision if precision is UNSET else precision
        return type(self)(value=value, separator=separator, decimal=decimal, precision=precision)

    def with_separator(self, separator: str) -> Self:
        return self.merge(separator=separator)

    def with_decimal(self, decimal: str) -> Self:
        return self.merge(decimal=decimal)

    def with_precision(self, precision: int) -> Self:
        return self.merge(precision=precision)

    def __str__(self) -> str:
        token = special_float_text(classify_float(self.value))
        if token is not None:
            return token

        prec = clamp_precision(self.precision)
        abs_value = abs(self.value)
        if isinstance(abs_value, int):
            num_str = f"{abs_value}.{'0' * prec}" if prec else str(abs_value)
        else:
            num_str = f"{abs_value:.{prec}f}"

        int_str, _, frac_str = num_str.partition(".")
        if self.precision is None:
            frac_str = frac_str.rstrip("0")

        if isinstance(self.value, float):
            negative = math.copysign(1.0, self.value) < 0
        else:
            negative = self.value < 0
        sign = "-" if negative else ""
        text = sign + group_digits(int_str, self.separator)
        if frac_str:
            text += self.decimal + frac_str
        return text


# Methods --------------------------------------------------------------------------------------------------------------

def comma(value: int, separator: str = HumanConf.THOUSAND_SEP) -> str:
    """
    Format an integer with thousand separators.

    Examples:
        >>> comma(0)
        '0'
        >>> comma(-100000)
        '-100,000'
        >>> comma(1234567, separator=" ")
        '1 234 567'
    """
    return str(Comma(value, separator=separator))


def comma_float(
        value: int | float,
        separator: str = HumanConf.THOUSAND_SEP,
        decimal: str = HumanConf.DECIMAL_SEP,
        precision: int | None = None,
) -> str:
    """
    Format a float with thousand and decimal separators.

    Examples:
        >>> comma_float(-1234567.89)
        '-1,234,567.89'
        >>> comma_float(1000.0)
        '1,000'
        >>> comma_float(1234.5, precision=2)
        '1,234.50'
    """
    return str(CommaFloat(value, separator=separator, decimal=decimal, precision=precision))


def group_digits(digits: str, separator: str) -> str:
    """
    Insert separator every three digits from the right of a plain digit string.

    The leading group holds 1 to 3 digits; no separator is placed before the first or
    after the last digit.

    Examples:
        >>> group_digits("1234567", ",")
        '1,234,567'
        >>> group_digits("123", ",")
        '123'
    """
    head = len(digits) % 3 or 3
    groups = [digits[:head]]
    groups.extend(digits[i:i + 3] for i in range(head, len(digits), 3))
    return separator.join(groups)


# Private Methods ------------------------------------------------------------------------------------------------------

def _validate_int(value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"value must be int, but got {fmt_type(value)}")


def _validate_separator(sep, name: str) -> None:
    if not isinstance(sep, str):
        raise TypeError(f"{name} must be str, but got {fmt_type(sep)}")
    if len(sep) != 1:
        raise ValueError(f"{name} must be a single character, but got {fmt_value(sep)}")

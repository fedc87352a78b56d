"""
Pattern-driven number formatting.

A pattern describes the separators and the number of fractional digits by example:

    "#,###.##"  =>  "12,345.67"   (US format)
    "#.###,##"  =>  "12.345,67"   (European format)
    "# ###,##"  =>  "12 345,67"   (space as thousand separator)

The last '.', ',' or ' ' in the pattern is the decimal separator and the '#' count after it
is the precision; the first separator before it is the thousand separator. A lone
separator followed by exactly "###" is a thousand separator ("#,###" has no decimals).
When the pattern names no thousand separator, ',' is used, or '.' if ',' is the
decimal separator. Fractional digits are truncated, not rounded.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from decimal import Decimal, ROUND_DOWN

# Local ----------------------------------------------------------------------------------------------------------------
from .comma import group_digits
from .conf import HumanConf
from .formatters import fmt_type, fmt_value
from .ftoa import clamp_precision, classify_float, special_float_text

SEPARATORS = (".", ",", " ")


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class NumberPattern:
    """
    Separators and precision parsed from a '#' pattern.

    Attributes:
        thousand_sep: Character grouping the integer part.
        decimal_sep: Character before the fractional part.
        precision: Fractional digits, None when the pattern has no separator at all.
    """
    thousand_sep: str = HumanConf.THOUSAND_SEP
    decimal_sep: str = HumanConf.DECIMAL_SEP
    precision: int | None = HumanConf.PATTERN_PRECISION

    def __post_init__(self):
        if self.thousand_sep == self.decimal_sep:
            raise ValueError(f"thousand and decimal separators must differ, "
                             f"but both are {fmt_value(self.thousand_sep)}")

    @classmethod
    def parse(cls, pattern: str) -> "NumberPattern":
        """
        Parse a '#' pattern.

        Examples:
            >>> NumberPattern.parse("#.###,##")
            NumberPattern(thousand_sep='.', decimal_sep=',', precision=2)
            >>> NumberPattern.parse("####")
            NumberPattern(thousand_sep=',', decimal_sep='.', precision=None)

        Raises:
            ValueError: If the pattern uses one character for both separators, e.g. "#,###,##".
        """
        if not isinstance(pattern, str):
            raise TypeError(f"pattern must be str, but got {fmt_type(pattern)}")

        if not pattern:
            return cls()

        last_pos = max(pattern.rfind(sep) for sep in SEPARATORS)
        if last_pos < 0:
            return cls(precision=None)

        last_sep = pattern[last_pos]
        tail = pattern[last_pos + 1:]
        thousand_sep = next((c for c in pattern[:last_pos] if c in SEPARATORS), None)

        # A lone separator followed by one full group, "#,###", groups thousands
        if thousand_sep is None and tail == "###":
            return cls(thousand_sep=last_sep, decimal_sep=_other_sep(last_sep), precision=0)

        if thousand_sep is None:
            thousand_sep = _other_sep(last_sep)
        return cls(thousand_sep=thousand_sep, decimal_sep=last_sep, precision=tail.count("#"))

    def format(self, value: int | float) -> str:
        token = special_float_text(classify_float(value))
        if token is not None:
            return token

        # Shortest round-trip digits, so 0.67 truncates to 0.67 and not 0.66
        exact = Decimal(value) if isinstance(value, int) else Decimal(repr(value))
        abs_exact = abs(exact)
        int_part = int(abs_exact)

        text = ("-" if exact < 0 else "") + group_digits(str(int_part), self.thousand_sep)

        precision = clamp_precision(self.precision, default=0)
        if precision:
            frac = (abs_exact - int_part).quantize(Decimal(1).scaleb(-precision), rounding=ROUND_DOWN)
            frac_digits = f"{frac:f}".partition(".")[2].rstrip("0")
            if frac_digits:
                text += self.decimal_sep + frac_digits
        return text


# Methods --------------------------------------------------------------------------------------------------------------

def format_number(pattern: str, value: int | float) -> str:
    """
    Format a number with separators and precision taken from pattern.

    Examples:
        >>> format_number("#,###.##", 12345.6789)
        '12,345.67'
        >>> format_number("#,###.", 12345.6789)
        '12,345'
        >>> format_number("", 12345.67)
        '12,345.67'
        >>> format_number("#.###,##", -12345.6789)
        '-12.345,67'
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"value must be int | float, but got {fmt_type(value)}")
    return NumberPattern.parse(pattern).format(value)


def format_integer(pattern: str, value: int) -> str:
    """
    Format an integer with separators taken from pattern.

        >>> format_integer("#,###", 1000000)
        '1,000,000'
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"value must be int, but got {fmt_type(value)}")
    return NumberPattern.parse(pattern).format(value)


# Private Methods ------------------------------------------------------------------------------------------------------

def _other_sep(sep: str) -> str:
    """Default thousand separator that does not collide with sep."""
    return "." if sep == "," else ","

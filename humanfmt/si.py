"""
SI (metric) prefix formatting and parsing.

    >>> si(1000000, "B")
    '1 MB'
    >>> si(2.2345e-12, "F")
    '2.2345 pF'
    >>> parse_si("2.5 kB")
    SIParseResult(value=2500.0, unit='B')
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import sys
from dataclasses import dataclass
from typing import Self

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from .collections import BiDirectionalMap
from .conf import HumanConf
from .errors import InvalidFormatError
from .formatters import fmt_type, fmt_value
from .ftoa import float_to_string, validate_precision
from .sentinels import UNSET, UnsetType
from .sink import Renderable


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class Prefix:
    """Metric prefix: 10**exponent, its symbol and name."""
    exponent: int
    symbol: str
    name: str


# @formatter:off

PREFIXES = (
    Prefix(-30, "q", "quecto"),
    Prefix(-27, "r", "ronto"),
    Prefix(-24, "y", "yocto"),
    Prefix(-21, "z", "zepto"),
    Prefix(-18, "a", "atto"),
    Prefix(-15, "f", "femto"),
    Prefix(-12, "p", "pico"),
    Prefix(-9,  "n", "nano"),
    Prefix(-6,  "µ", "micro"),
    Prefix(-3,  "m", "milli"),
    Prefix(0,   "",  ""),
    Prefix(3,   "k", "kilo"),
    Prefix(6,   "M", "mega"),
    Prefix(9,   "G", "giga"),
    Prefix(12,  "T", "tera"),
    Prefix(15,  "P", "peta"),
    Prefix(18,  "E", "exa"),
    Prefix(21,  "Z", "zetta"),
    Prefix(24,  "Y", "yotta"),
    Prefix(27,  "R", "ronna"),
    Prefix(30,  "Q", "quetta"),
)

# Exponent <-> symbol lookup
SI_PREFIXES = BiDirectionalMap((p.exponent, p.symbol) for p in PREFIXES)

# Symbols accepted by parse_si() in addition to the table, mapped to exponents
PREFIX_ALIASES = frozendict({
    "μ": -6,    # Greek small letter mu, U+03BC; the table uses the micro sign U+00B5
})

# @formatter:on

_ZERO_PREFIX = SI_PREFIXES.get_key("")

# Longest symbol first, so multi-character symbols win over their first letter
_PARSE_SYMBOLS = tuple(sorted(
    [(p.symbol, p.exponent) for p in PREFIXES if p.symbol] + list(PREFIX_ALIASES.items()),
    key=lambda item: len(item[0]),
    reverse=True,
))


@dataclass(frozen=True)
class SIResult:
    """Value scaled to a prefix: input == value * 10**exponent."""
    value: float
    prefix: str
    exponent: int


@dataclass(frozen=True)
class SIParseResult:
    """Parsed value in base units and the unit left after stripping the prefix."""
    value: float
    unit: str


@dataclass(frozen=True)
class SI(Renderable):
    """
    SI prefix formatter.

    Attributes:
        value: Value in base units.
        unit: Unit symbol appended after the prefix, may be empty.
        precision: Fractional digits, None for HumanConf.SI_PRECISION.

    Examples:
        >>> str(SI(0.00000000223, "M"))
        '2.23 nM'
        >>> str(SI(2.2345e-12, "F").with_precision(2))
        '2.23 pF'
    """
    value: int | float
    unit: str = ""
    precision: int | None = None

    def __post_init__(self):
        _validate_value(self.value)
        if not isinstance(self.unit, str):
            raise TypeError(f"unit must be str, but got {fmt_type(self.unit)}")
        validate_precision(self.precision)

    def merge(self,
              value: int | float | UnsetType = UNSET,
              unit: str | UnsetType = UNSET,
              precision: int | None | UnsetType = UNSET,
              ) -> Self:
        """Create a new SI with merged options; UNSET arguments are inherited."""
        value = self.value if value is UNSET else value
        unit = self.unit if unit is UNSET else unit
        precision = self.precision if precision is UNSET else precision
        return type(self)(value=value, unit=unit, precision=precision)

    def with_precision(self, precision: int) -> Self:
        return self.merge(precision=precision)

    def __str__(self) -> str:
        result = compute_si(self.value)
        precision = HumanConf.SI_PRECISION if self.precision is None else self.precision
        return f"{float_to_string(result.value, precision)} {result.prefix}{self.unit}"


# Methods --------------------------------------------------------------------------------------------------------------

def compute_si(value: int | float) -> SIResult:
    """
    Scale value to the largest SI prefix not above its order of magnitude.

    Zero, NaN and infinities are returned unchanged with no prefix; so are values below
    the smallest prefix (quecto).

    Examples:
        >>> compute_si(1000.0)
        SIResult(value=1.0, prefix='k', exponent=3)
        >>> compute_si(-0.005)
        SIResult(value=-5.0, prefix='m', exponent=-3)

    Raises:
        ValueError: If value is an int too large for a float.
    """
    _validate_value(value)
    if value == 0 or not math.isfinite(value):
        return SIResult(value=value, prefix="", exponent=0)

    abs_value = abs(value)
    target_exp = math.floor(math.log10(abs_value))

    best = _ZERO_PREFIX
    for exponent in SI_PREFIXES:
        if exponent > target_exp:
            break
        best = exponent

    scaled = abs_value / 10.0 ** best
    return SIResult(
        value=math.copysign(scaled, value),
        prefix=SI_PREFIXES[best],
        exponent=best,
    )


def si(value: int | float, unit: str = "", precision: int | None = None) -> str:
    """
    Format value with an SI prefix and unit.

    The prefix is glued to the unit, a space separates the number:

    Examples:
        >>> si(1000000, "B")
        '1 MB'
        >>> si(1000000, "B", precision=0)
        '1 MB'
        >>> si(-4200, "m")
        '-4.2 km'
    """
    return str(SI(value, unit=unit, precision=precision))


def parse_si(text: str) -> SIParseResult:
    """
    Parse an SI-prefixed value into its base-unit value and unit.

    The numeric literal supports a sign, one decimal point and an exponent ("2.5e3").
    The longest known prefix at the start of the remaining text is stripped and applied,
    even when nothing follows it, so that si() output without a unit parses back:
    "1 k" is 1000, and "5 m" reads as five milli, not five metres.

    Examples:
        >>> parse_si("1 MB")
        SIParseResult(value=1000000.0, unit='B')
        >>> parse_si("42")
        SIParseResult(value=42.0, unit='')
        >>> parse_si("5 m")
        SIParseResult(value=0.005, unit='')

    Raises:
        InvalidFormatError: If no numeric literal can be extracted.
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be str, but got {fmt_type(text)}")

    trimmed = text.strip()
    num_end = _scan_numeric(trimmed)
    if num_end == 0:
        raise InvalidFormatError(f"no numeric value found in {fmt_value(text)}", text)

    try:
        base_value = float(trimmed[:num_end])
    except ValueError:
        # "2EB" scans as "2E": retry without the dangling exponent marker
        num_end = _exp_start(trimmed, num_end)
        try:
            base_value = float(trimmed[:num_end])
        except ValueError as exc:
            raise InvalidFormatError(f"invalid numeric value in {fmt_value(text)}", text) from exc

    rest = trimmed[num_end:].strip()
    for symbol, exponent in _PARSE_SYMBOLS:
        if rest.startswith(symbol):
            return SIParseResult(value=base_value * 10.0 ** exponent, unit=rest[len(symbol):])

    return SIParseResult(value=base_value, unit=rest)


# Private Methods ------------------------------------------------------------------------------------------------------

def _validate_value(value) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"value must be int | float, but got {fmt_type(value)}")
    if isinstance(value, int) and abs(value) > sys.float_info.max:
        raise ValueError(f"value must be within float range, but got {fmt_value(value)}")


def _scan_numeric(s: str) -> int:
    """
    Length of the numeric literal at the start of s; 0 if there is none.

    Accepts a leading sign, digits, one '.', one 'e'/'E' and a sign right after it.
    The span may still be malformed ("1e", "+"), float() decides.
    """
    num_end = 0
    has_decimal = False
    has_exp = False

    for i, c in enumerate(s):
        if c == ".":
            if has_decimal or has_exp:
                break
            has_decimal = True
        elif c in "eE":
            if has_exp or num_end == 0:
                break
            has_exp = True
        elif "0" <= c <= "9":
            pass
        elif c in "+-" and (i == 0 or s[i - 1] in "eE"):
            pass
        else:
            break
        num_end = i + 1

    return num_end


def _exp_start(s: str, num_end: int) -> int:
    """Index of the exponent marker within s[:num_end], or num_end if there is none."""
    for i, c in enumerate(s[:num_end]):
        if c in "eE":
            return i
    return num_end


# Module Sanity Checks -------------------------------------------------------------------------------------------------

if [p.exponent for p in PREFIXES] != sorted({p.exponent for p in PREFIXES}):
    raise AssertionError("Configuration Error: SI prefix exponents must be strictly increasing.")

if [p.exponent for p in PREFIXES if not p.symbol] != [0]:
    raise AssertionError("Configuration Error: exactly one SI prefix with exponent 0 and empty symbol required.")

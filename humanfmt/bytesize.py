"""
Byte size formatting and parsing.

    >>> si_bytes(82854982)
    '82.855 MB'
    >>> iec_bytes(82854982)
    '79.017 MiB'
    >>> parse_bytes("42 MiB")
    44040192
"""

# Standard library -----------------------------------------------------------------------------------------------------
import re
from dataclasses import dataclass
from decimal import Decimal, localcontext
from enum import StrEnum, unique
from typing import Self

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from .conf import HumanConf
from .errors import InvalidFormatError, ParseOverflowError
from .formatters import fmt_type, fmt_value
from .ftoa import float_to_string, validate_precision
from .sentinels import UNSET, UnsetType
from .sink import Renderable

# @formatter:off

# IEC sizes (binary, base 1024)
BYTE = 1
KIBYTE = 1024
MIBYTE = 1024 * KIBYTE
GIBYTE = 1024 * MIBYTE
TIBYTE = 1024 * GIBYTE
PIBYTE = 1024 * TIBYTE
EIBYTE = 1024 * PIBYTE

# SI sizes (decimal, base 1000)
KBYTE = 1000
MBYTE = 1000 * KBYTE
GBYTE = 1000 * MBYTE
TBYTE = 1000 * GBYTE
PBYTE = 1000 * TBYTE
EBYTE = 1000 * PBYTE

MAX_BYTES = 2**64 - 1

IEC_SIZES = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB")
SI_SIZES = ("B", "kB", "MB", "GB", "TB", "PB", "EB")

IEC_MULTIPLIERS = frozendict({
    "k": KIBYTE, "m": MIBYTE, "g": GIBYTE, "t": TIBYTE, "p": PIBYTE, "e": EIBYTE,
})
SI_MULTIPLIERS = frozendict({
    "k": KBYTE, "m": MBYTE, "g": GBYTE, "t": TBYTE, "p": PBYTE, "e": EBYTE,
})
BYTE_UNITS = frozenset({"b", "byte", "bytes"})

# @formatter:on

_NUMERIC_PREFIX = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class ByteBase(StrEnum):
    """
    Byte size unit systems.

    Attributes:
        SI (str)  : Decimal units, base 1000 - kB, MB, GB
        IEC (str) : Binary units, base 1024 - KiB, MiB, GiB
    """
    SI = "si"
    IEC = "iec"

    @property
    def base(self) -> int:
        return 1000 if self is ByteBase.SI else 1024

    @property
    def sizes(self) -> tuple[str, ...]:
        return SI_SIZES if self is ByteBase.SI else IEC_SIZES


@dataclass(frozen=True)
class ByteCalc:
    """Scaled byte value and the index of its unit in SI_SIZES / IEC_SIZES."""
    value: int | float
    unit_idx: int


@dataclass(frozen=True)
class Bytes(Renderable):
    """
    Byte size formatter.

    Attributes:
        value: Byte count, int in [0, 2**64 - 1].
        base: ByteBase.SI (1000) or ByteBase.IEC (1024).
        precision: Fractional digits for scaled values, None for HumanConf.BYTES_PRECISION.

    Examples:
        >>> str(Bytes.si(82854982))
        '82.855 MB'
        >>> str(Bytes.iec(82854982).with_precision(2))
        '79.02 MiB'
    """
    value: int
    base: ByteBase = ByteBase.SI
    precision: int | None = None

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"byte count must be int, but got {fmt_type(self.value)}")
        if not 0 <= self.value <= MAX_BYTES:
            raise ValueError(f"byte count must be in [0, 2**64 - 1], but got {fmt_value(self.value)}")
        object.__setattr__(self, "base", ByteBase(self.base))
        validate_precision(self.precision)

    @classmethod
    def si(cls, value: int, precision: int | None = None) -> Self:
        """`Bytes.si(82854982)` -> `"82.855 MB"`"""
        return cls(value=value, base=ByteBase.SI, precision=precision)

    @classmethod
    def iec(cls, value: int, precision: int | None = None) -> Self:
        """`Bytes.iec(82854982)` -> `"79.017 MiB"`"""
        return cls(value=value, base=ByteBase.IEC, precision=precision)

    def merge(self,
              value: int | UnsetType = UNSET,
              base: ByteBase | str | UnsetType = UNSET,
              precision: int | None | UnsetType = UNSET,
              ) -> Self:
        """Create a new Bytes with merged options; UNSET arguments are inherited."""
        value = self.value if value is UNSET else value
        base = self.base if base is UNSET else base
        precision = self.precision if precision is UNSET else precision
        return type(self)(value=value, base=base, precision=precision)

    def with_precision(self, precision: int) -> Self:
        return self.merge(precision=precision)

    def __str__(self) -> str:
        calc = calc_bytes(self.value, self.base)
        if calc.unit_idx == 0:
            return f"{calc.value} B"
        precision = HumanConf.BYTES_PRECISION if self.precision is None else self.precision
        return f"{float_to_string(calc.value, precision)} {self.base.sizes[calc.unit_idx]}"


# Methods --------------------------------------------------------------------------------------------------------------

def calc_bytes(n: int, base: ByteBase = ByteBase.SI) -> ByteCalc:
    """
    Scale a byte count down by the base until it drops below the base or the
    largest unit (exa/exbi) is reached.

    Values below the base are returned unscaled as int with unit index 0.

    Examples:
        >>> calc_bytes(999)
        ByteCalc(value=999, unit_idx=0)
        >>> calc_bytes(1024, ByteBase.IEC)
        ByteCalc(value=1.0, unit_idx=1)
    """
    step = ByteBase(base).base
    if n < step:
        return ByteCalc(value=n, unit_idx=0)

    value = float(n)
    idx = 0
    while value >= step and idx < len(SI_SIZES) - 1:
        value /= step
        idx += 1
    return ByteCalc(value=value, unit_idx=idx)


def si_bytes(value: int, precision: int | None = None) -> str:
    """
    Format a byte count with decimal SI units (base 1000).

    Examples:
        >>> si_bytes(999)
        '999 B'
        >>> si_bytes(1000)
        '1 kB'
        >>> si_bytes(82854982, precision=2)
        '82.85 MB'
    """
    return str(Bytes.si(value, precision=precision))


def iec_bytes(value: int, precision: int | None = None) -> str:
    """
    Format a byte count with binary IEC units (base 1024).

    Examples:
        >>> iec_bytes(1023)
        '1023 B'
        >>> iec_bytes(4096)
        '4 KiB'
    """
    return str(Bytes.iec(value, precision=precision))


def parse_bytes(text: str) -> int:
    """
    Parse a human byte size into a byte count.

    A leading numeric literal (optional sign, digits, one decimal point) is followed by an
    optional unit. Units are case-insensitive:

    - empty, "b", "byte", "bytes" - bytes
    - "KiB", "MiB", ... - IEC powers of 1024, by first letter k/m/g/t/p/e
    - anything else starting with k/m/g/t/p/e - SI powers of 1000 ("kB", "MB", "k", "megabytes")

    The product is computed exactly and truncated toward zero.

    Examples:
        >>> parse_bytes("42 MB")
        42000000
        >>> parse_bytes("1.5kB")
        1500
        >>> parse_bytes("42 KiB")
        43008

    Raises:
        InvalidFormatError: No numeric literal, or unrecognized unit.
        ParseOverflowError: Result is negative or exceeds 2**64 - 1.
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be str, but got {fmt_type(text)}")

    trimmed = text.strip()
    match = _NUMERIC_PREFIX.match(trimmed)
    if match is None:
        raise InvalidFormatError(f"no numeric value found in {fmt_value(text)}", text)

    unit = trimmed[match.end():].strip()
    multiplier = byte_multiplier(unit)
    if multiplier is None:
        raise InvalidFormatError(f"unrecognized byte unit {fmt_value(unit)} in {fmt_value(text)}", text)

    literal = match.group()
    with localcontext() as ctx:
        # Wide enough to hold every digit of the product
        ctx.prec = len(literal) + len(str(multiplier))
        result = Decimal(literal) * multiplier

    if result < 0 or result > MAX_BYTES:
        raise ParseOverflowError(f"byte count out of range [0, 2**64 - 1]: {fmt_value(text)}", text)

    return int(result)


def byte_multiplier(unit: str) -> int | None:
    """
    Multiplier of a byte unit suffix, None if the unit is not recognized.

    Examples:
        >>> byte_multiplier("")
        1
        >>> byte_multiplier("GiB")
        1073741824
        >>> byte_multiplier("gb")
        1000000000
        >>> byte_multiplier("furlong") is None
        True
    """
    lower = unit.lower()
    if not lower or lower in BYTE_UNITS:
        return 1

    if len(lower) >= 3 and lower.endswith("ib"):
        return IEC_MULTIPLIERS.get(lower[0])

    return SI_MULTIPLIERS.get(lower[0])

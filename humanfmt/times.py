"""
Relative time formatting ("3 days ago", "2 hours from now").

Times are plain integer nanoseconds, compatible with time.time_ns(); there is no
calendar or timezone arithmetic.

    >>> rel_time(0 - 5 * MINUTE, 0)
    '5 minutes ago'
    >>> rel_time(2 * HOUR, 0)
    '2 hours from now'
"""

# Standard library -----------------------------------------------------------------------------------------------------
import time
from dataclasses import dataclass
from typing import Self, Sequence

# Local ----------------------------------------------------------------------------------------------------------------
from .conf import HumanConf
from .formatters import fmt_type, fmt_value
from .sentinels import UNSET, UnsetType
from .sink import Renderable

# @formatter:off

# Durations in nanoseconds
SECOND = 1_000_000_000
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY
MONTH = 30 * DAY
YEAR = 365 * DAY
LONG_TIME = 37 * YEAR

MAX_DURATION = 2**63 - 1

VERY_LONG_TIME = "a very long time"

# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class Static:
    """Fixed phrase, rendered without a direction label."""
    text: str


@dataclass(frozen=True)
class Quantity:
    """
    Counted phrase: the delta divided by `div_by`, followed by the unit word and label.

    When singular and plural are the same text, it is used as-is ("1 second ago").
    """
    singular: str
    plural: str
    div_by: int


@dataclass(frozen=True)
class RelTimeMagnitude:
    """Bucket for deltas strictly below `duration`."""
    duration: int
    format: Static | Quantity


# @formatter:off

DEFAULT_MAGNITUDES = (
    RelTimeMagnitude(SECOND,       Static("now")),
    RelTimeMagnitude(2 * SECOND,   Quantity("1 second", "1 second", SECOND)),
    RelTimeMagnitude(MINUTE,       Quantity("second", "seconds", SECOND)),
    RelTimeMagnitude(2 * MINUTE,   Quantity("1 minute", "1 minute", MINUTE)),
    RelTimeMagnitude(HOUR,         Quantity("minute", "minutes", MINUTE)),
    RelTimeMagnitude(2 * HOUR,     Quantity("1 hour", "1 hour", HOUR)),
    RelTimeMagnitude(DAY,          Quantity("hour", "hours", HOUR)),
    RelTimeMagnitude(2 * DAY,      Quantity("1 day", "1 day", DAY)),
    RelTimeMagnitude(WEEK,         Quantity("day", "days", DAY)),
    RelTimeMagnitude(2 * WEEK,     Quantity("1 week", "1 week", WEEK)),
    RelTimeMagnitude(MONTH,        Quantity("week", "weeks", WEEK)),
    RelTimeMagnitude(2 * MONTH,    Quantity("1 month", "1 month", MONTH)),
    RelTimeMagnitude(YEAR,         Quantity("month", "months", MONTH)),
    RelTimeMagnitude(18 * MONTH,   Quantity("1 year", "1 year", YEAR)),
    RelTimeMagnitude(2 * YEAR,     Quantity("2 years", "2 years", YEAR)),
    RelTimeMagnitude(LONG_TIME,    Quantity("year", "years", YEAR)),
    RelTimeMagnitude(MAX_DURATION, Static(VERY_LONG_TIME)),
)

# @formatter:on


@dataclass(frozen=True)
class RelTime(Renderable):
    """
    Relative time formatter for the delta between two nanosecond timestamps.

    The delta a - b picks the phrase: negative deltas get a_label ("ago"), the rest
    b_label ("from now").

    Attributes:
        a: Timestamp described, nanoseconds.
        b: Reference timestamp, nanoseconds.
        a_label: Label for a before b.
        b_label: Label for a after b.
        magnitudes: Buckets with strictly ascending durations.

    Examples:
        >>> str(RelTime.between(-3 * WEEK, 0).with_labels("earlier", "later"))
        '3 weeks earlier'
    """
    a: int
    b: int
    a_label: str = HumanConf.PAST_LABEL
    b_label: str = HumanConf.FUTURE_LABEL
    magnitudes: Sequence[RelTimeMagnitude] = DEFAULT_MAGNITUDES

    def __post_init__(self):
        for name in ("a", "b"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be int nanoseconds, but got {fmt_type(value)}")
        for name in ("a_label", "b_label"):
            if not isinstance(getattr(self, name), str):
                raise TypeError(f"{name} must be str, but got {fmt_type(getattr(self, name))}")
        magnitudes = tuple(self.magnitudes)
        _validate_magnitudes(magnitudes)
        object.__setattr__(self, "magnitudes", magnitudes)

    @classmethod
    def between(cls, a: int, b: int) -> Self:
        return cls(a=a, b=b)

    @classmethod
    def since(cls, timestamp: int) -> Self:
        """Describe timestamp relative to the current time.time_ns()."""
        return cls(a=timestamp, b=time.time_ns())

    def merge(self,
              a: int | UnsetType = UNSET,
              b: int | UnsetType = UNSET,
              a_label: str | UnsetType = UNSET,
              b_label: str | UnsetType = UNSET,
              magnitudes: Sequence[RelTimeMagnitude] | UnsetType = UNSET,
              ) -> Self:
        """Create a new RelTime with merged options; UNSET arguments are inherited."""
        return type(self)(
            a=self.a if a is UNSET else a,
            b=self.b if b is UNSET else b,
            a_label=self.a_label if a_label is UNSET else a_label,
            b_label=self.b_label if b_label is UNSET else b_label,
            magnitudes=self.magnitudes if magnitudes is UNSET else magnitudes,
        )

    def with_labels(self, a_label: str, b_label: str) -> Self:
        return self.merge(a_label=a_label, b_label=b_label)

    def with_magnitudes(self, magnitudes: Sequence[RelTimeMagnitude]) -> Self:
        return self.merge(magnitudes=magnitudes)

    def __str__(self) -> str:
        diff = self.a - self.b
        label = self.a_label if diff < 0 else self.b_label
        diff = abs(diff)

        for mag in self.magnitudes:
            if diff < mag.duration:
                return _format_magnitude(mag, diff, label)

        return _join(VERY_LONG_TIME, label)


# Methods --------------------------------------------------------------------------------------------------------------

def rel_time(
        a: int,
        b: int,
        a_label: str = HumanConf.PAST_LABEL,
        b_label: str = HumanConf.FUTURE_LABEL,
        magnitudes: Sequence[RelTimeMagnitude] = DEFAULT_MAGNITUDES,
) -> str:
    """
    Describe timestamp a relative to timestamp b, both in nanoseconds.

    Examples:
        >>> rel_time(0, 0)
        'now'
        >>> rel_time(-SECOND, 0)
        '1 second ago'
        >>> rel_time(3 * DAY, 0)
        '3 days from now'
        >>> rel_time(-3 * WEEK, 0, "earlier", "later")
        '3 weeks earlier'
    """
    return str(RelTime(a=a, b=b, a_label=a_label, b_label=b_label, magnitudes=magnitudes))


def since(timestamp: int, a_label: str = HumanConf.PAST_LABEL, b_label: str = HumanConf.FUTURE_LABEL) -> str:
    """
    Describe a nanosecond timestamp relative to now.

        >>> since(time.time_ns() - 5 * MINUTE)
        '5 minutes ago'
    """
    return str(RelTime.since(timestamp).with_labels(a_label, b_label))


# Private Methods ------------------------------------------------------------------------------------------------------

def _format_magnitude(mag: RelTimeMagnitude, diff: int, label: str) -> str:
    fmt = mag.format
    if isinstance(fmt, Static):
        return fmt.text

    quantity = diff // fmt.div_by
    if quantity == 1 or fmt.singular == fmt.plural:
        return _join(fmt.singular, label)
    return _join(f"{quantity} {fmt.plural}", label)


def _join(phrase: str, label: str) -> str:
    return f"{phrase} {label}" if label else phrase


def _validate_magnitudes(magnitudes: tuple) -> None:
    if not magnitudes:
        raise ValueError("magnitudes must not be empty")
    for mag in magnitudes:
        if not isinstance(mag, RelTimeMagnitude):
            raise TypeError(f"magnitudes must hold RelTimeMagnitude, but got {fmt_type(mag)}")
        if not isinstance(mag.format, (Static, Quantity)):
            raise TypeError(f"magnitude format must be Static | Quantity, but got {fmt_type(mag.format)}")
        if isinstance(mag.format, Quantity) and mag.format.div_by <= 0:
            raise ValueError(f"div_by must be positive, but got {fmt_value(mag.format.div_by)}")
    durations = [mag.duration for mag in magnitudes]
    if any(later <= earlier for earlier, later in zip(durations, durations[1:])):
        raise ValueError(f"magnitude durations must be strictly ascending, but got {fmt_value(durations)}")


# Module Sanity Checks -------------------------------------------------------------------------------------------------

_validate_magnitudes(DEFAULT_MAGNITUDES)

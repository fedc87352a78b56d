#
# Humanfmt Defaults
#

# @formatter:off

class HumanConf:
    """
    Default configuration constants shared by humanfmt formatters.

    Formatter dataclasses fall back to these values when an option is left as None,
    so changing a default here changes it for every call site that did not set it.

    Attributes:
        FLOAT_PRECISION: Fractional digits for plain float rendering.
        BYTES_PRECISION: Fractional digits for byte sizes ("82.855 MB").
        SI_PRECISION: Fractional digits for SI-prefixed values ("2.2345 pF").
        MAX_PRECISION: Upper bound precision values are clamped to.
        THOUSAND_SEP: Default thousand separator for grouping.
        DECIMAL_SEP: Default decimal separator for grouping.
        PATTERN_PRECISION: Fractional digits when format_number() gets an empty pattern.
        CONJUNCTION: Default conjunction for word series.
        PAST_LABEL: Relative time label for deltas in the past.
        FUTURE_LABEL: Relative time label for deltas in the future.
    """

    FLOAT_PRECISION = 6
    BYTES_PRECISION = 3
    SI_PRECISION = 4
    MAX_PRECISION = 9

    THOUSAND_SEP = ","
    DECIMAL_SEP = "."
    PATTERN_PRECISION = 2

    CONJUNCTION = "and"

    PAST_LABEL = "ago"
    FUTURE_LABEL = "from now"

# @formatter:on

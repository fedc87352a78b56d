#
# Humanfmt - Byte Size Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from humanfmt.bytesize import ByteBase, ByteCalc, Bytes, MAX_BYTES
from humanfmt.bytesize import KIBYTE, MIBYTE, EIBYTE, KBYTE, MBYTE, EBYTE
from humanfmt.bytesize import byte_multiplier, calc_bytes, iec_bytes, parse_bytes, si_bytes
from humanfmt.errors import InvalidFormatError, ParseError, ParseErrorKind, ParseOverflowError


# Tests ----------------------------------------------------------------------------------------------------------------

class TestConstants:
    def test_powers(self):
        assert (KIBYTE, MIBYTE, EIBYTE) == (1024, 1024**2, 1024**6)
        assert (KBYTE, MBYTE, EBYTE) == (1000, 1000**2, 1000**6)
        assert MAX_BYTES == 2**64 - 1


class TestFormatBytes:

    @pytest.mark.parametrize("value, expected", [
        pytest.param(0, "0 B", id="zero"),
        pytest.param(999, "999 B", id="below_base"),
        pytest.param(1000, "1 kB", id="kilo"),
        pytest.param(1500, "1.5 kB", id="fraction"),
        pytest.param(82854982, "82.855 MB", id="mega"),
        pytest.param(MAX_BYTES, "18.447 EB", id="max"),
    ])
    def test_si(self, value, expected):
        assert si_bytes(value) == expected

    @pytest.mark.parametrize("value, expected", [
        pytest.param(1023, "1023 B", id="below_base"),
        pytest.param(1024, "1 KiB", id="kibi"),
        pytest.param(4096, "4 KiB", id="four_kibi"),
        pytest.param(82854982, "79.017 MiB", id="mebi"),
        pytest.param(MAX_BYTES, "16 EiB", id="max"),
    ])
    def test_iec(self, value, expected):
        assert iec_bytes(value) == expected

    @pytest.mark.parametrize("precision, expected", [
        pytest.param(0, "83 MB", id="p0"),
        pytest.param(1, "82.9 MB", id="p1"),
        pytest.param(2, "82.85 MB", id="p2"),
        pytest.param(20, "82.854982 MB", id="clamped"),
    ])
    def test_precision(self, precision, expected):
        assert si_bytes(82854982, precision=precision) == expected

    @pytest.mark.parametrize("value, error", [
        pytest.param(-1, ValueError, id="negative"),
        pytest.param(2**64, ValueError, id="too_large"),
        pytest.param(1.5, TypeError, id="float"),
        pytest.param(True, TypeError, id="bool"),
        pytest.param("1024", TypeError, id="str"),
    ])
    def test_rejects_bad_values(self, value, error):
        with pytest.raises(error):
            si_bytes(value)


class TestBytesFormatter:

    def test_presets(self):
        assert Bytes.si(82854982).base is ByteBase.SI
        assert Bytes.iec(82854982).base is ByteBase.IEC

    def test_base_from_str(self):
        b = Bytes(82854982, base="iec")
        assert b.base is ByteBase.IEC
        assert str(b) == "79.017 MiB"

    def test_merge_switches_base(self):
        b = Bytes.si(82854982).merge(base=ByteBase.IEC)
        assert str(b) == "79.017 MiB"

    def test_with_precision(self):
        assert str(Bytes.iec(82854982).with_precision(2)) == "79.02 MiB"

    @pytest.mark.parametrize("precision", [
        pytest.param(True, id="bool"),
        pytest.param(1.5, id="float"),
        pytest.param("2", id="str"),
    ])
    def test_rejects_bad_precision(self, precision):
        with pytest.raises(TypeError, match="precision"):
            Bytes(1, precision=precision)

    def test_invalid_base(self):
        with pytest.raises(ValueError):
            Bytes(1, base="decimal")

    def test_format_spec(self):
        assert f"{Bytes.si(1000):>6}" == "  1 kB"


class TestCalcBytes:

    @pytest.mark.parametrize("value, base, expected", [
        pytest.param(999, ByteBase.SI, ByteCalc(999, 0), id="si_unscaled"),
        pytest.param(1000, ByteBase.SI, ByteCalc(1.0, 1), id="si_kilo"),
        pytest.param(1024, ByteBase.IEC, ByteCalc(1.0, 1), id="iec_kibi"),
        pytest.param(3 * MIBYTE, ByteBase.IEC, ByteCalc(3.0, 2), id="iec_mebi"),
    ])
    def test_calc(self, value, base, expected):
        assert calc_bytes(value, base) == expected

    def test_stops_at_largest_unit(self):
        calc = calc_bytes(MAX_BYTES, ByteBase.SI)
        assert calc.unit_idx == 6
        assert calc.value == pytest.approx(18.446744073709553)

    def test_base_properties(self):
        assert ByteBase.SI.base == 1000
        assert ByteBase.IEC.base == 1024
        assert ByteBase.SI.sizes[1] == "kB"
        assert ByteBase.IEC.sizes[1] == "KiB"


class TestParseBytes:

    @pytest.mark.parametrize("text, expected", [
        pytest.param("42 MB", 42000000, id="si_mega"),
        pytest.param("42 mb", 42000000, id="lowercase"),
        pytest.param("42MB", 42000000, id="no_space"),
        pytest.param("42 MiB", 44040192, id="iec_mebi"),
        pytest.param("42 KiB", 43008, id="iec_kibi"),
        pytest.param("1.5 KiB", 1536, id="iec_fraction"),
        pytest.param("1.5kB", 1500, id="si_fraction"),
        pytest.param("42", 42, id="bare_number"),
        pytest.param("42 B", 42, id="b"),
        pytest.param("42 bytes", 42, id="bytes"),
        pytest.param("1 byte", 1, id="byte"),
        pytest.param("  7 B  ", 7, id="whitespace"),
        pytest.param("2 megabytes", 2000000, id="long_si_name"),
        pytest.param("1 k", 1000, id="letter_only"),
        pytest.param("+5 kB", 5000, id="plus_sign"),
        pytest.param(".5 kB", 500, id="leading_point"),
        pytest.param("0.5 B", 0, id="truncated"),
        pytest.param("1.9999 B", 1, id="truncated_toward_zero"),
        pytest.param("18 EB", 18 * 10**18, id="exa"),
        pytest.param("18446744073709551615", MAX_BYTES, id="max"),
    ])
    def test_parse(self, text, expected):
        assert parse_bytes(text) == expected

    @pytest.mark.parametrize("text, expected", [
        pytest.param("1.1 EiB", 11 * EIBYTE // 10, id="iec_fraction"),
        pytest.param("18446744073709551614.99999999999 B", MAX_BYTES - 1, id="long_fraction_below_max"),
        pytest.param("0.99999999999999999999999999999999 B", 0, id="many_nines"),
        pytest.param("0.123456789012345678901234567890123 EB", 123456789012345678, id="long_exa_fraction"),
    ])
    def test_parse_is_exact_for_long_literals(self, text, expected):
        assert parse_bytes(text) == expected

    @pytest.mark.parametrize("text", [
        pytest.param("", id="empty"),
        pytest.param("   ", id="blank"),
        pytest.param("abc", id="no_number"),
        pytest.param("MB", id="unit_only"),
        pytest.param("42 furlongs", id="unknown_unit"),
        pytest.param("42 XiB", id="unknown_iec_unit"),
        pytest.param("42 ib", id="short_ib"),
    ])
    def test_invalid_format(self, text):
        with pytest.raises(InvalidFormatError) as exc_info:
            parse_bytes(text)
        assert exc_info.value.kind is ParseErrorKind.INVALID_FORMAT
        assert exc_info.value.text == text

    @pytest.mark.parametrize("text", [
        pytest.param("-1 kB", id="negative"),
        pytest.param("16 EiB", id="iec_above_max"),
        pytest.param("18446744073709551616", id="max_plus_one"),
        pytest.param("20 EB", id="si_above_max"),
    ])
    def test_overflow(self, text):
        with pytest.raises(ParseOverflowError) as exc_info:
            parse_bytes(text)
        err = exc_info.value
        assert err.kind is ParseErrorKind.OVERFLOW
        assert isinstance(err, OverflowError)
        assert isinstance(err, ParseError)
        assert isinstance(err, ValueError)

    def test_rejects_non_str(self):
        with pytest.raises(TypeError):
            parse_bytes(42)


class TestByteMultiplier:

    @pytest.mark.parametrize("unit, expected", [
        pytest.param("", 1, id="empty"),
        pytest.param("B", 1, id="b"),
        pytest.param("Bytes", 1, id="bytes"),
        pytest.param("KiB", KIBYTE, id="kib"),
        pytest.param("gib", 1024**3, id="gib_lower"),
        pytest.param("GB", 1000**3, id="gb"),
        pytest.param("T", 1000**4, id="t"),
        pytest.param("furlong", None, id="unknown"),
    ])
    def test_multiplier(self, unit, expected):
        assert byte_multiplier(unit) == expected


class TestRoundTrip:
    """Formatted sizes parse back to the original count, up to display rounding."""

    @pytest.mark.parametrize("value", [
        pytest.param(0, id="zero"),
        pytest.param(1, id="one"),
        pytest.param(999, id="below_kilo"),
        pytest.param(1000, id="kilo"),
        pytest.param(1024, id="kibi"),
        pytest.param(82854982, id="mega"),
        pytest.param(10**12 + 12345, id="tera"),
        pytest.param(2**50 + 7, id="pebi"),
        pytest.param(9 * EBYTE, id="exa"),
        pytest.param(15 * EIBYTE + 123, id="exbi"),
    ])
    @pytest.mark.parametrize("fmt", [
        pytest.param(si_bytes, id="si"),
        pytest.param(iec_bytes, id="iec"),
    ])
    def test_format_then_parse(self, fmt, value):
        assert parse_bytes(fmt(value)) == pytest.approx(value, rel=1e-3)

    @pytest.mark.parametrize("fmt, value", [
        pytest.param(si_bytes, 999, id="si_below_kilo"),
        pytest.param(iec_bytes, 1023, id="iec_below_kibi"),
        pytest.param(si_bytes, 3 * MBYTE, id="si_whole_mega"),
        pytest.param(iec_bytes, 4 * MIBYTE, id="iec_whole_mebi"),
        pytest.param(si_bytes, 1500, id="si_one_and_a_half_kilo"),
    ])
    def test_exact_values_are_preserved(self, fmt, value):
        assert parse_bytes(fmt(value)) == value

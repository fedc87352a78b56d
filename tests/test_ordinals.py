#
# Humanfmt - Ordinals Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from humanfmt.ordinals import Ordinal, ordinal, ordinal_suffix


# Tests ----------------------------------------------------------------------------------------------------------------

class TestOrdinal:

    @pytest.mark.parametrize("value, expected", [
        pytest.param(0, "0th", id="zero"),
        pytest.param(1, "1st", id="1"),
        pytest.param(2, "2nd", id="2"),
        pytest.param(3, "3rd", id="3"),
        pytest.param(4, "4th", id="4"),
        pytest.param(11, "11th", id="11"),
        pytest.param(12, "12th", id="12"),
        pytest.param(13, "13th", id="13"),
        pytest.param(21, "21st", id="21"),
        pytest.param(22, "22nd", id="22"),
        pytest.param(23, "23rd", id="23"),
        pytest.param(42, "42nd", id="42"),
        pytest.param(101, "101st", id="101"),
        pytest.param(111, "111th", id="111"),
        pytest.param(112, "112th", id="112"),
        pytest.param(1013, "1013th", id="1013"),
        pytest.param(-1, "-1st", id="neg_1"),
        pytest.param(-11, "-11th", id="neg_11"),
        pytest.param(-23, "-23rd", id="neg_23"),
    ])
    def test_ordinal(self, value, expected):
        assert ordinal(value) == expected
        assert str(Ordinal(value)) == expected

    def test_suffix(self):
        assert ordinal_suffix(21) == "st"
        assert ordinal_suffix(112) == "th"

    def test_in_f_string(self):
        assert f"You came in {Ordinal(1)} place!" == "You came in 1st place!"
        assert f"[{Ordinal(3):>6}]" == "[   3rd]"

    @pytest.mark.parametrize("value", [
        pytest.param(1.0, id="float"),
        pytest.param(True, id="bool"),
        pytest.param("1", id="str"),
    ])
    def test_rejects_non_int(self, value):
        with pytest.raises(TypeError, match="must be int"):
            ordinal(value)
        with pytest.raises(TypeError):
            ordinal_suffix(value)

#
# Humanfmt - Collections Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from humanfmt.collections import BiDirectionalMap
from humanfmt.si import SI_PREFIXES


# Tests ----------------------------------------------------------------------------------------------------------------

class TestBiDirectionalMap:

    @pytest.fixture
    def bimap(self) -> BiDirectionalMap:
        return BiDirectionalMap({3: "k", 6: "M", 9: "G"})

    def test_forward_mapping(self, bimap):
        assert bimap[6] == "M"
        assert bimap.get(12) is None
        assert bimap.get(12, "?") == "?"
        assert list(bimap) == [3, 6, 9]
        assert len(bimap) == 3
        assert 3 in bimap
        assert "k" not in bimap

    def test_reverse_lookup(self, bimap):
        assert bimap.get_key("G") == 9
        with pytest.raises(KeyError):
            bimap.get_key("T")

    def test_from_pairs(self):
        bimap = BiDirectionalMap([(1, "a"), (2, "b")])
        assert dict(bimap.items()) == {1: "a", 2: "b"}

    @pytest.mark.parametrize("pairs", [
        pytest.param([(1, "a"), (1, "b")], id="duplicate_key"),
        pytest.param([(1, "a"), (2, "a")], id="duplicate_value"),
    ])
    def test_rejects_duplicates(self, pairs):
        with pytest.raises(ValueError, match="already exists"):
            BiDirectionalMap(pairs)

    def test_read_only(self, bimap):
        with pytest.raises(AttributeError):
            bimap._forward_map = {}
        with pytest.raises(TypeError):
            bimap[12] = "T"

    def test_equality_and_hash(self, bimap):
        assert bimap == {3: "k", 6: "M", 9: "G"}
        assert bimap == BiDirectionalMap({3: "k", 6: "M", 9: "G"})
        assert hash(bimap) == hash(BiDirectionalMap({3: "k", 6: "M", 9: "G"}))
        assert bimap != {3: "k"}

    def test_si_prefix_table(self):
        assert SI_PREFIXES[-6] == "µ"
        assert SI_PREFIXES.get_key("") == 0
        assert SI_PREFIXES.get_key("Q") == 30

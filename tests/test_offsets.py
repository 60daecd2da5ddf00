# tests/test_offsets.py
import pytest

def _hs(hexstring, text, source="little", target="little"):
    E = hexstring.Endianness
    return hexstring.HexString.from_hex_str(text, E(source), E(target))

def test_single_offset(hexstring):
    haystack = _hs(hexstring, "0011223344")
    assert haystack.get_offsets(_hs(hexstring, "2233")) == [2]

def test_single_offset_with_swapped_endian(hexstring):
    haystack = _hs(hexstring, "0011223344")
    needle = _hs(hexstring, "3322", "big", "little")
    assert haystack.get_offsets(needle) == [2]
    assert haystack.get_offsets(needle) == haystack.get_offsets(_hs(hexstring, "2233"))

def test_needle_tagged_differently_is_retagged(hexstring):
    haystack = _hs(hexstring, "0011223344")
    # tagged big, physically "33 22": same value as little "22 33"
    needle = _hs(hexstring, "3322", "big", "big")
    assert haystack.get_offsets(needle) == [2]
    assert needle.endianness is hexstring.Endianness.BIG

def test_multiple_offsets(hexstring):
    haystack = _hs(hexstring, "00112233440011223344")
    assert haystack.get_offsets(_hs(hexstring, "2233")) == [2, 7]

def test_no_matching_offsets(hexstring):
    haystack = _hs(hexstring, "0011223344")
    assert haystack.get_offsets(_hs(hexstring, "55")) == []

@pytest.mark.parametrize(
    "haystack,needle,expected",
    [
        ("aaaaaa", "aaaa", [0, 1]),
        ("aaaaaa", "aa", [0, 1, 2]),
        ("abababab", "abab", [0, 1, 2]),
        ("0011", "0011", [0]),
        ("00110011", "11", [1, 3]),
    ],
)
def test_overlapping_matches_are_all_reported(hexstring, haystack, needle, expected):
    assert _hs(hexstring, haystack).get_offsets(_hs(hexstring, needle)) == expected

def test_offsets_are_unit_indices_not_char_indices(hexstring):
    # "12" spans two units here but never sits on a unit boundary
    haystack = _hs(hexstring, "0112")
    assert haystack.get_offsets(_hs(hexstring, "12")) == [1]
    assert _hs(hexstring, "a12b").get_offsets(_hs(hexstring, "12")) == []

def test_empty_needle(hexstring):
    assert _hs(hexstring, "0011223344").get_offsets(_hs(hexstring, "")) == []

def test_needle_longer_than_haystack(hexstring):
    assert _hs(hexstring, "0011").get_offsets(_hs(hexstring, "001122")) == []

def test_empty_haystack(hexstring):
    assert _hs(hexstring, "").get_offsets(_hs(hexstring, "00")) == []

def test_haystack_not_modified(hexstring):
    haystack = _hs(hexstring, "0011223344")
    before = haystack.hex_bytes
    haystack.get_offsets(_hs(hexstring, "4433", "big", "big"))
    assert haystack.hex_bytes == before
    assert haystack.endianness is hexstring.Endianness.LITTLE

def test_big_endian_haystack(hexstring):
    haystack = _hs(hexstring, "0011223344", "big", "big")
    # little "33 22" is big "22 33"
    assert haystack.get_offsets(_hs(hexstring, "3322", "little", "little")) == [2]

def test_text_needle_in_hex_haystack(hexstring):
    E = hexstring.Endianness
    haystack = _hs(hexstring, "00416130416131")
    needle = hexstring.HexString.from_str("Aa", E.LITTLE, E.LITTLE)
    assert haystack.get_offsets(needle) == [1, 4]

import importlib
import pytest

@pytest.fixture(scope="session")
def hexstring():
    return importlib.import_module("bohelper.hexstring")

@pytest.fixture
def unit_list(hexstring):
    return [hexstring.HexByte.from_hex_str(s) for s in ("a0", "00", "ff", "90", "7b")]

@pytest.fixture
def ascii_units(hexstring):
    # "Aa0Aa1Aa2"
    return [hexstring.HexByte.from_hex_str(s)
            for s in ("41", "61", "30", "41", "61", "31", "41", "61", "32")]

import pytest
from pydantic import ValidationError

from gfshares.crypto.field import GF256


def test_equality_is_by_value():
    assert GF256(7) == GF256(7)
    assert GF256(7) != GF256(8)
    assert hash(GF256(7)) == hash(GF256(7))
    assert len({GF256(1), GF256(1), GF256(2)}) == 2


def test_raw_byte_access():
    assert GF256(0xAB).value == 0xAB
    assert int(GF256(0xAB)) == 0xAB
    assert bytes(GF256(0xAB)) == b"\xab"


@pytest.mark.parametrize("value", [0, 1, 128, 255])
def test_accepts_every_byte(value):
    assert GF256(value).value == value


@pytest.mark.parametrize("value", [-1, 256, 1000])
def test_rejects_out_of_range(value):
    with pytest.raises(ValidationError):
        GF256(value)


@pytest.mark.parametrize("value", ["1", 1.0, True, None, b"\x01"])
def test_rejects_non_int(value):
    with pytest.raises(ValidationError):
        GF256(value)


def test_is_immutable():
    element = GF256(3)
    with pytest.raises(ValidationError):
        element.value = 4
    assert element.value == 3


def test_no_integer_arithmetic():
    with pytest.raises(TypeError):
        GF256(1) + 1
    with pytest.raises(TypeError):
        GF256(1) + GF256(2)
    with pytest.raises(TypeError):
        GF256(2) * GF256(3)

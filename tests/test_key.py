import pytest

from siphashcd import KeyTooShort, SipError, SipHashKey

K0 = 0x0706050403020100
K1 = 0x0F0E0D0C0B0A0908


def test_from_tuple():
    key = SipHashKey.from_key((K0, K1))
    assert key == (K0, K1)
    assert key.k0 == K0
    assert key.k1 == K1


def test_from_bytes_like():
    raw = bytes(range(16))
    for key in (raw, bytearray(raw), memoryview(raw)):
        assert SipHashKey.from_key(key) == (K0, K1)


def test_from_u128():
    assert SipHashKey.from_key(0x0706050403020100_0F0E0D0C0B0A0908) == (K0, K1)


def test_existing_key_is_returned():
    key = SipHashKey(K0, K1)
    assert SipHashKey.from_key(key) is key


def test_longer_key_uses_first_sixteen_bytes():
    assert SipHashKey.from_key(bytes(range(17))) == (K0, K1)
    assert SipHashKey.from_key(bytes(range(32))) == (K0, K1)


@pytest.mark.parametrize("length", [0, 2, 3, 4, 15])
def test_short_key(length):
    with pytest.raises(KeyTooShort) as excinfo:
        SipHashKey.from_key(bytes(length))
    assert excinfo.value.actual_length == length
    assert str(length) in str(excinfo.value)


def test_short_key_is_a_value_error():
    assert issubclass(KeyTooShort, SipError)
    assert issubclass(SipError, ValueError)


def test_out_of_range_values():
    with pytest.raises(ValueError):
        SipHashKey.from_key((1 << 64, 0))
    with pytest.raises(ValueError):
        SipHashKey.from_key((0, -1))
    with pytest.raises(ValueError):
        SipHashKey.from_key(1 << 128)
    with pytest.raises(ValueError):
        SipHashKey.from_key(-1)


def test_unsupported_key_types():
    with pytest.raises(TypeError):
        SipHashKey.from_key("0123456789abcdef")
    with pytest.raises(TypeError):
        SipHashKey.from_key(True)
    with pytest.raises(TypeError):
        SipHashKey.from_key((1.0, 2))
    with pytest.raises(TypeError):
        SipHashKey.from_key([K0, K1])

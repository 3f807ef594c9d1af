import pytest

from enr.secret import SecretKey, wipe


def test_bytearray_input_is_wiped():
    raw = bytearray(b"\x01" * 32)
    secret = SecretKey(raw)
    assert raw == bytearray(32)
    assert secret.expose() == b"\x01" * 32


def test_bytes_input_is_copied():
    raw = b"\x01" * 32
    secret = SecretKey(raw)
    assert secret.expose() == raw
    assert len(secret) == 32


def test_zeroize():
    secret = SecretKey(b"\x02" * 32)
    assert not secret.is_zeroized
    secret.zeroize()
    assert secret.is_zeroized
    assert len(secret) == 32
    with pytest.raises(ValueError):
        secret.expose()


def test_context_manager_zeroizes_on_error():
    secret = SecretKey(b"\x03" * 32)
    with pytest.raises(RuntimeError):
        with secret:
            raise RuntimeError("boom")
    assert secret.is_zeroized


def test_repr_hides_secret():
    assert "03" not in repr(SecretKey(b"\x03" * 32))


def test_wipe():
    buffer = bytearray(b"abc")
    wipe(buffer)
    assert buffer == bytearray(3)


def test_all_zero_secret_is_usable():
    secret = SecretKey(bytes(32))
    assert not secret.is_zeroized
    assert secret.expose() == bytes(32)
    secret.zeroize()
    assert secret.is_zeroized

import pytest
import rlp

from enr import codec
from enr.exceptions import DecodingError, OrderingError

from conftest import RECORD_BYTES


def test_encode_int_is_minimal():
    assert codec.encode_int(0) == b""
    assert codec.encode_int(1) == b"\x01"
    assert codec.encode_int(255) == b"\xff"
    assert codec.encode_int(1024) == b"\x04\x00"
    with pytest.raises(ValueError):
        codec.encode_int(-1)


def test_decode_int_rejects_leading_zero():
    assert codec.decode_int(b"") == 0
    assert codec.decode_int(b"\x76\x5f") == 30303
    with pytest.raises(DecodingError):
        codec.decode_int(b"\x00")
    with pytest.raises(DecodingError):
        codec.decode_int(b"\x00\x01")


def test_decode_int_rejects_values_above_64_bits():
    assert codec.decode_int(b"\xff" * 8) == 2 ** 64 - 1
    with pytest.raises(DecodingError):
        codec.decode_int(b"\x01" + b"\x00" * 8)


def test_to_value():
    assert codec.to_value(b"v4") == b"v4"
    assert codec.to_value(bytearray(b"ab")) == b"ab"
    assert codec.to_value(30303) == b"\x76\x5f"
    assert codec.to_value(0) == b""
    assert codec.to_value("v4") == b"v4"
    assert codec.to_value([1, [b"x"]]) == [b"\x01", [b"x"]]
    with pytest.raises(TypeError):
        codec.to_value(1.5)
    with pytest.raises(TypeError):
        codec.to_value(True)


def test_to_key():
    assert codec.to_key("udp") == b"udp"
    assert codec.to_key(b"udp") == b"udp"
    with pytest.raises(TypeError):
        codec.to_key(1)  # type: ignore


def test_encode_content_matches_manual_rlp():
    pairs = [(b"id", b"v4"), (b"udp", b"\x76\x5f")]
    assert codec.encode_content(1, pairs) == rlp.encode(
        [b"\x01", b"id", b"v4", b"udp", b"\x76\x5f"]
    )
    assert codec.encode_record(b"sig", 0, pairs) == rlp.encode(
        [b"sig", b"", b"id", b"v4", b"udp", b"\x76\x5f"]
    )


def test_decode_record_of_example():
    signature, seq, pairs = codec.decode_record(RECORD_BYTES)
    assert len(signature) == 64
    assert seq == 1
    assert [key for key, _ in pairs] == [b"id", b"ip", b"secp256k1", b"udp"]


def test_decode_record_keeps_list_values():
    data = rlp.encode([b"sig", b"\x02", b"eth", [[b"\xfc\x64\xec\x04", b""]]])
    _, seq, pairs = codec.decode_record(data)
    assert seq == 2
    key, value = pairs[0]
    assert key == b"eth"
    assert codec.encode_rlp(value) == rlp.encode([[b"\xfc\x64\xec\x04", b""]])


@pytest.mark.parametrize("data", [
    b"",
    RECORD_BYTES[:-1],
    RECORD_BYTES + b"\x00",
    # b"\x05" encoded with a redundant short string prefix.
    bytes.fromhex("c3810580"),
    # A short list encoded with a long list prefix.
    bytes.fromhex("f8028080"),
    # A short string encoded with a long string prefix.
    bytes.fromhex("c4b8020000"),
])
def test_decode_rejects_non_canonical_rlp(data):
    with pytest.raises(DecodingError):
        codec.decode_record(data)


@pytest.mark.parametrize("items", [
    b"not a list",
    [],
    [b"sig"],
    [b"sig", b"\x01", b"id"],
    [[b"sig"], b"\x01"],
    [b"sig", [b"\x01"]],
    [b"sig", b"\x01", [b"id"], b"v4"],
    # The sequence number has a leading zero byte.
    [b"sig", b"\x00\x01", b"id", b"v4"],
])
def test_decode_rejects_wrong_shape(items):
    with pytest.raises(DecodingError):
        codec.decode_record(rlp.encode(items))


def test_decode_rejects_unsorted_keys():
    data = rlp.encode([b"sig", b"\x01", b"ip", b"\x7f\x00\x00\x01",
        b"id", b"v4"])
    with pytest.raises(OrderingError):
        codec.decode_record(data)


def test_decode_rejects_duplicate_keys():
    data = rlp.encode([b"sig", b"\x01", b"id", b"v4", b"id", b"v4"])
    with pytest.raises(OrderingError, match="Duplicate"):
        codec.decode_record(data)

#!/usr/bin/env python
# -*- codeing:utf-8 -*-
"""The canonical RLP encoding of node records.

The canonical encoding of a node record is an RLP list of
[signature, seq, k, v, ...]. The key/value pairs must be sorted by key
and must be unique, i.e. any key may be present only once. The keys can
technically be any byte sequence, but ASCII text is preferred.

content   = [seq, k, v, ...]
signature = sign(content)
record    = [signature, seq, k, v, ...]

The signature covers the exact bytes, so decoding only accepts the one
canonical form: minimal length prefixes, minimal integers, no trailing
bytes and keys in strictly ascending order. Input is never re-sorted.

See: https://github.com/ethereum/EIPs/blob/master/EIPS/eip-778.md
See: https://ethereum.org/en/developers/docs/data-structures-and-encoding/rlp/
"""

__author__ = "XiaoHuiHui"
__version__ = "1.0"

import typing
from typing import Any, Sequence, Union

import rlp
from rlp.exceptions import DecodingError as RLPDecodingError
from rlp.exceptions import DeserializationError
from rlp.sedes import big_endian_int

from enr import config as opts
from enr.exceptions import DecodingError, OrderingError

RLP = Union[bytes, list["RLP"]]
Pairs = Sequence[tuple[bytes, RLP]]


def encode_int(value: int) -> bytes:
    """Encode an unsigned integer as minimal big-endian bytes. Zero is
    encoded as the empty string.

    :param int value: The integer to encode.
    :return bytes: The minimal big-endian bytes.
    :raise ValueError: If the value is negative.
    """
    if value < 0:
        raise ValueError(f"Cannot encode negative integer {value}.")
    return value.to_bytes((value.bit_length() + 7) // 8, "big")


def decode_int(data: bytes, limit: int = opts.MAX_SEQ) -> int:
    """Decode minimal big-endian bytes into an unsigned integer.

    :param bytes data: Bytes taken from an RLP item.
    :param int limit: The largest value accepted.
    :return int: The decoded integer.
    :raise DecodingError: If the bytes have a leading zero or the value
        exceeds the limit.
    """
    try:
        value: int = big_endian_int.deserialize(data)
    except DeserializationError as err:
        raise DecodingError(f"Non-minimal integer encoding: {data!r}.") \
            from err
    if value > limit:
        raise DecodingError(f"Integer {value} exceeds {limit}.")
    return value


def to_key(key: str | bytes) -> bytes:
    """Convert a key given as ASCII text or bytes into bytes."""
    if isinstance(key, str):
        return key.encode("ascii")
    if isinstance(key, (bytes, bytearray)):
        return bytes(key)
    raise TypeError(f"Node record key must be str or bytes, not {key!r}.")


def to_value(value: Any) -> RLP:
    """Convert a value into an RLP item.

    Bytes are kept as they are, non-negative integers become minimal
    big-endian bytes, strings are UTF-8 encoded and lists or tuples are
    converted item by item.

    :param Any value: The value to convert.
    :return RLP: The RLP item.
    :raise TypeError: If the value has an unsupported type.
    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, bool):
        raise TypeError("Booleans are not node record values.")
    if isinstance(value, int):
        return encode_int(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (list, tuple)):
        return [to_value(item) for item in value]
    raise TypeError(f"Unsupported node record value: {value!r}.")


def _flatten(pairs: Pairs) -> list[RLP]:
    r: list[RLP] = []
    for key, value in pairs:
        r.append(key)
        r.append(value)
    return r


def encode_content(seq: int, pairs: Pairs) -> bytes:
    """Encode the signed part of a record, [seq, k, v, ...].

    :param int seq: The sequence number.
    :param Pairs pairs: The key/value pairs, already sorted by key.
    :return bytes: The RLP encoded content.
    """
    content: list[RLP] = [encode_int(seq)]
    content.extend(_flatten(pairs))
    return rlp.encode(content)  # type: ignore


def encode_record(signature: bytes, seq: int, pairs: Pairs) -> bytes:
    """Encode a whole record, [signature, seq, k, v, ...].

    :param bytes signature: The signature over the content.
    :param int seq: The sequence number.
    :param Pairs pairs: The key/value pairs, already sorted by key.
    :return bytes: The RLP encoded record.
    """
    record: list[RLP] = [signature, encode_int(seq)]
    record.extend(_flatten(pairs))
    return rlp.encode(record)  # type: ignore


def encode_rlp(item: RLP) -> bytes:
    return rlp.encode(item)  # type: ignore


def decode_rlp(data: bytes) -> RLP:
    """Strictly decode one RLP item which must span all of `data`.

    pyrlp already rejects most non-canonical prefixes. The result is
    encoded again and compared with the input so that any framing that
    is not the unique canonical one is refused as well.

    :param bytes data: The RLP bytes.
    :return RLP: The decoded bytes or nested list of bytes.
    :raise DecodingError: If the bytes are truncated, have trailing
        data or are not canonical.
    """
    try:
        item: RLP = rlp.decode(data, strict=True)  # type: ignore
    except RLPDecodingError as err:
        raise DecodingError(f"Malformed RLP: {err}") from err
    if rlp.encode(item) != data:
        raise DecodingError("RLP is not canonically encoded.")
    return item


def decode_record(data: bytes) -> tuple[bytes, int, list[tuple[bytes, RLP]]]:
    """Decode a record into its signature, sequence number and the list
    of key/value pairs.

    :param bytes data: The RLP encoded record.
    :return bytes: The signature.
    :return int: The sequence number.
    :return list[tuple[bytes, RLP]]: The pairs in their original order.
    :raise DecodingError: If the record is malformed.
    :raise OrderingError: If the keys are not strictly ascending.
    """
    item = decode_rlp(data)
    if not isinstance(item, (list, tuple)):
        raise DecodingError("Node record must be an RLP list.")
    if len(item) < 2:
        raise DecodingError(
            "Node record must contain a signature and a sequence number."
        )
    signature, raw_seq = item[0], item[1]
    if not isinstance(signature, bytes):
        raise DecodingError("Signature must be a byte string.")
    if not isinstance(raw_seq, bytes):
        raise DecodingError("Sequence number must be a byte string.")
    seq = decode_int(raw_seq)
    kvs = item[2:]
    if len(kvs) % 2 != 0:
        raise DecodingError("Node record has a key without a value.")
    pairs: list[tuple[bytes, RLP]] = []
    for i in range(0, len(kvs), 2):
        key = kvs[i]
        if not isinstance(key, bytes):
            raise DecodingError("Node record keys must be byte strings.")
        if pairs and key <= pairs[-1][0]:
            if key == pairs[-1][0]:
                raise OrderingError(f"Duplicate key {key!r}.")
            raise OrderingError(
                f"Key {key!r} is not sorted after {pairs[-1][0]!r}."
            )
        pairs.append((key, typing.cast(RLP, kvs[i + 1])))
    return signature, seq, pairs

#!/usr/bin/env python
# -*- codeing:utf-8 -*-
"""The data structure of Ethereum Node Records.

A node record holds a signature, a sequence number and an arbitrary set
of key/value pairs. The sequence number is a 64-bit unsigned integer.
Nodes should increase the number whenever the record changes and
republish the record.

An `ENR` is immutable. It is created by signing content with a private
key (see `ENRBuilder`) or by decoding bytes, which always verifies the
signature. Any change of content needs a new record with a new
sequence number.

See: https://github.com/ethereum/EIPs/blob/master/EIPS/eip-778.md
"""

__author__ = "XiaoHuiHui"
__version__ = "2.0"

import logging
from typing import Any, ItemsView, Iterator, KeysView, Mapping, Optional

from enr import codec
from enr import config as opts
from enr.codec import RLP
from enr.exceptions import (DecodingError, ENRError, InvalidSignatureError,
                            ReservedKeyError, SequenceError,
                            SizeExceededError, TextFormatError)
from enr.nodeid import NodeId
from enr.schemes import DEFAULT_SCHEMES, IdentityScheme, SchemeRegistry
from enr.secret import SecretKey
from enr.text import decode_text, encode_text

logger = logging.getLogger("enr.datatypes")


class ENR:
    """A signed, verified node record.

    Use `ENR.decode`, `ENR.from_text` or `ENRBuilder` to get one, the
    constructor does not sign or verify anything.
    """

    __slots__ = ("_signature", "_seq", "_content", "_scheme", "_raw",
        "_node_id")

    def __init__(self, signature: bytes, seq: int,
            pairs: list[tuple[bytes, RLP]], scheme: IdentityScheme,
            raw: bytes) -> None:
        self._signature = signature
        self._seq = seq
        self._content: dict[bytes, RLP] = dict(pairs)
        self._scheme = scheme
        self._raw = raw
        self._node_id: Optional[NodeId] = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ENR):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self) -> int:
        return hash(self._raw)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (str, bytes)):
            return False
        return codec.to_key(key) in self._content

    def __iter__(self) -> Iterator[bytes]:
        return iter(self._content)

    def __len__(self) -> int:
        return len(self._content)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        keys = ", ".join(key.decode(errors="replace") for key in self)
        return (
            f"ENR(node_id={self.node_id}, seq={self._seq}, "
            f"id={self.id}, keys=[{keys}])"
        )

    @property
    def signature(self) -> bytes:
        return self._signature

    @property
    def seq(self) -> int:
        return self._seq

    @property
    def scheme(self) -> IdentityScheme:
        return self._scheme

    @property
    def id(self) -> str:
        """The name of the identity scheme, e.g. "v4"."""
        return self._scheme.tag.decode()

    @property
    def public_key(self) -> bytes:
        """The encoded public key stored by the identity scheme."""
        return self._content[self._scheme.public_key_key]  # type: ignore

    @property
    def node_id(self) -> NodeId:
        """The node address derived from the public key. Computed on
        first use.
        """
        if self._node_id is None:
            self._node_id = self._scheme.derive_identifier(self.public_key)
        return self._node_id

    @property
    def size(self) -> int:
        return len(self._raw)

    def identifier(self) -> NodeId:
        return self.node_id

    def sequence(self) -> int:
        return self._seq

    def get(self, key: str | bytes, default: Any = None) -> Any:
        """Return the value of a key, or `default` when the record does
        not contain it.

        :param key: The key as ASCII text or bytes.
        :return: The raw value, bytes or a nested list of bytes.
        """
        return self._content.get(codec.to_key(key), default)

    def keys(self) -> KeysView[bytes]:
        return self._content.keys()

    def items(self) -> ItemsView[bytes, RLP]:
        return self._content.items()

    def content(self) -> dict[bytes, RLP]:
        """Return a copy of the key/value pairs."""
        return dict(self._content)

    def to_bytes(self) -> bytes:
        """Return the canonical RLP encoding. For a decoded record these
        are exactly the bytes it was decoded from.
        """
        return self._raw

    to_canonical_bytes = to_bytes

    def to_RLP(self) -> list[RLP]:
        """Converted the record into a list of RLP items,
        [signature, seq, k, v, ...].

        :return list[RLP]: The RLP items of the record.
        """
        r: list[RLP] = [self._signature, codec.encode_int(self._seq)]
        for key, value in self._content.items():
            r.append(key)
            r.append(value)
        return r

    def to_text(self) -> str:
        return encode_text(self._raw)

    def verify(self) -> bool:
        """Check the signature against the content again."""
        message = codec.encode_content(self._seq, list(self.items()))
        return self._scheme.verify(
            self.public_key, message, self._signature
        )

    def compare_content(self, other: "ENR") -> bool:
        """Whether two records hold the same sequence number and
        key/value pairs, regardless of their signatures.
        """
        return self._seq == other._seq and self._content == other._content

    @classmethod
    def finalize(cls, seq: int, attributes: Mapping[str | bytes, Any],
            scheme: IdentityScheme, secret: SecretKey) -> "ENR":
        """Sign content and return the resulting record.

        The "id" key and the public key of the scheme are added from the
        scheme and the secret. The keys are sorted before the content
        [seq, k, v, ...] is signed.

        :param int seq: The sequence number.
        :param Mapping attributes: The key/value pairs.
        :param IdentityScheme scheme: The identity scheme to sign with.
        :param SecretKey secret: The private key of the scheme.
        :return ENR: The signed record.
        :raise SequenceError: If seq is not an unsigned 64-bit integer.
        :raise ReservedKeyError: If attributes give "id" or the public key
            a different value than the scheme does.
        :raise SizeExceededError: If the encoded record exceeds 300 bytes.
        """
        if not 0 <= seq <= opts.MAX_SEQ:
            raise SequenceError(f"Sequence number {seq} is out of range.")
        content: dict[bytes, RLP] = {}
        for key, value in attributes.items():
            content[codec.to_key(key)] = codec.to_value(value)
        derived = {
            opts.ID_KEY: scheme.tag,
            scheme.public_key_key: scheme.public_key(secret),
        }
        for key, value in derived.items():
            if content.setdefault(key, value) != value:
                raise ReservedKeyError(
                    f"Key {key!r} does not match the identity scheme."
                )
        pairs = sorted(content.items())
        message = codec.encode_content(seq, pairs)
        signature = scheme.sign(secret, message)
        raw = codec.encode_record(signature, seq, pairs)
        if len(raw) > opts.MAX_RECORD_SIZE:
            logger.debug(f"Refused to build a record of {len(raw)} bytes.")
            raise SizeExceededError(len(raw), opts.MAX_RECORD_SIZE)
        return cls(signature, seq, pairs, scheme, raw)

    @classmethod
    def decode(cls, data: bytes,
            schemes: Optional[SchemeRegistry] = None) -> "ENR":
        """Decode and verify a record from its RLP encoding.

        :param bytes data: The RLP encoded record.
        :param SchemeRegistry schemes: The identity schemes to accept,
            `DEFAULT_SCHEMES` if omitted.
        :return ENR: The verified record.
        :raise SizeExceededError: If the data exceeds 300 bytes.
        :raise DecodingError: If the data is malformed or lacks the "id"
            or public key.
        :raise OrderingError: If the keys are unsorted or duplicated.
        :raise UnknownSchemeError: If the identity scheme is unknown.
        :raise InvalidSignatureError: If the signature does not verify.
        """
        if schemes is None:
            schemes = DEFAULT_SCHEMES
        data = bytes(data)
        try:
            return cls._decode(data, schemes)
        except ENRError as err:
            logger.debug(f"Rejected node record: {err}")
            raise

    @classmethod
    def _decode(cls, data: bytes, schemes: SchemeRegistry) -> "ENR":
        if len(data) > opts.MAX_RECORD_SIZE:
            raise SizeExceededError(len(data), opts.MAX_RECORD_SIZE)
        signature, seq, pairs = codec.decode_record(data)
        content = dict(pairs)
        tag = content.get(opts.ID_KEY)
        if not isinstance(tag, bytes):
            raise DecodingError("Node record has no identity scheme.")
        scheme = schemes.resolve(tag)
        public_key = content.get(scheme.public_key_key)
        if not isinstance(public_key, bytes):
            raise DecodingError(
                f"Node record has no {scheme.public_key_key!r} public key."
            )
        message = codec.encode_content(seq, pairs)
        if not scheme.verify(public_key, message, signature):
            raise InvalidSignatureError(
                "Unable to verify ENR node record signature."
            )
        return cls(signature, seq, pairs, scheme, data)

    @classmethod
    def from_RLP(cls, data: list[RLP],
            schemes: Optional[SchemeRegistry] = None) -> "ENR":
        """Decode a record that is already split into RLP items, e.g.
        when embedded in a larger RLP message.
        """
        return cls.decode(codec.encode_rlp(data), schemes)

    @classmethod
    def from_text(cls, text: str,
            schemes: Optional[SchemeRegistry] = None) -> "ENR":
        """Parse and verify a record from its text form. Every failure is
        a `TextFormatError`; a record that decodes from the base64 but is
        rejected keeps the specific error as `__cause__`.
        """
        # ENRs are RLP encoded and written to DNS TXT entries as base64
        # url-safe strings.
        try:
            data = decode_text(text)
        except ENRError as err:
            logger.debug(f"Rejected node record text: {err}")
            raise
        try:
            return cls.decode(data, schemes)
        except ENRError as err:
            raise TextFormatError(f"Invalid ENR text: {err}") from err

#!/usr/bin/env python
# -*- codeing:utf-8 -*-
"""A builder that stages key/value pairs and signs them into a node
record.

The builder owns the private key handed to it. The key is zeroized once
a record has been built, when building fails, on `close()` and when the
builder leaves a `with` block, so one builder signs at most one record.
A builder is meant for a single owner and is not thread safe.
"""

__author__ = "XiaoHuiHui"
__version__ = "1.0"

import logging
from types import TracebackType
from typing import Any, Optional, Type

from enr import codec
from enr import config as opts
from enr.codec import RLP
from enr.datatypes import ENR
from enr.exceptions import ENRError, ReservedKeyError, SequenceError
from enr.schemes import IdentityScheme, V4Scheme
from enr.secret import SecretKey

logger = logging.getLogger("enr.builder")


class ENRBuilder:
    """Stages the content of a new node record."""

    def __init__(self, scheme: IdentityScheme, secret: SecretKey) -> None:
        self.scheme = scheme
        self._secret: Optional[SecretKey] = secret
        self._content: dict[bytes, RLP] = {}

    def __enter__(self) -> "ENRBuilder":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType]
    ) -> None:
        self.close()

    def __del__(self) -> None:
        if getattr(self, "_secret", None) is not None:
            self.close()

    def __contains__(self, key: str | bytes) -> bool:
        return codec.to_key(key) in self._content

    @property
    def closed(self) -> bool:
        return self._secret is None

    def public_key(self) -> bytes:
        """The encoded public key the record will carry."""
        return self.scheme.public_key(self._require_secret())

    def _require_secret(self) -> SecretKey:
        if self._secret is None:
            raise ENRError("The builder is closed, its key was zeroized.")
        return self._secret

    def _check_key(self, key: str | bytes) -> bytes:
        raw = codec.to_key(key)
        if raw in (opts.ID_KEY, self.scheme.public_key_key):
            raise ReservedKeyError(
                f"Key {raw!r} is derived from the identity scheme."
            )
        return raw

    def get(self, key: str | bytes, default: Any = None) -> Any:
        return self._content.get(codec.to_key(key), default)

    def set(self, key: str | bytes, value: Any) -> "ENRBuilder":
        """Stage a key/value pair, replacing any staged value of the key.

        :param key: The key as ASCII text or bytes.
        :param value: Bytes, a non-negative integer, a string or a list
            of those.
        :return ENRBuilder: The builder itself, for chaining.
        :raise ReservedKeyError: If the key is "id" or the public key of
            the scheme.
        """
        self._content[self._check_key(key)] = codec.to_value(value)
        return self

    def remove(self, key: str | bytes) -> "ENRBuilder":
        """Unstage a key. Removing an absent key is not an error."""
        self._content.pop(self._check_key(key), None)
        return self

    def close(self) -> None:
        """Zeroize the private key. The builder can not build after
        this.
        """
        if self._secret is not None:
            self._secret.zeroize()
            self._secret = None

    def build(self, seq: int) -> ENR:
        """Sign the staged content with sequence number `seq`. The key is
        zeroized afterwards, whether signing succeeded or not.

        :param int seq: The sequence number of the new record.
        :return ENR: The signed record.
        :raise SizeExceededError: If the record would exceed 300 bytes.
        """
        secret = self._require_secret()
        try:
            enr = ENR.finalize(seq, self._content, self.scheme, secret)
        finally:
            self.close()
        logger.debug(f"Built node record {enr.node_id} with seq {seq}.")
        return enr

    def build_incrementing(self, previous_seq: int) -> ENR:
        """Build the successor of a record with sequence number
        `previous_seq`.

        :raise SequenceError: If `previous_seq` is already the largest
            sequence number. The key is zeroized.
        """
        if previous_seq >= opts.MAX_SEQ:
            self.close()
            raise SequenceError("Sequence number would overflow.")
        return self.build(previous_seq + 1)

    @classmethod
    def generate(cls, scheme: Optional[IdentityScheme] = None) \
            -> "ENRBuilder":
        """Return a builder with a freshly generated random key, using
        the "v4" scheme unless told otherwise.
        """
        if scheme is None:
            scheme = V4Scheme()
        secret, _ = scheme.generate_keypair()
        return cls(scheme, secret)

    @classmethod
    def from_enr(cls, enr: ENR, secret: SecretKey) -> "ENRBuilder":
        """Start a builder from the content of an existing record, to
        publish an updated version of it.

        :param ENR enr: The current record.
        :param SecretKey secret: The private key that signed it.
        :return ENRBuilder: A builder with all non-reserved pairs of the
            record staged.
        :raise ENRError: If the key does not belong to the record.
        """
        builder = cls(enr.scheme, secret)
        if builder.public_key() != enr.public_key:
            builder.close()
            raise ENRError("The secret key did not sign this record.")
        for key, value in enr.items():
            if key not in (opts.ID_KEY, enr.scheme.public_key_key):
                builder._content[key] = value
        return builder

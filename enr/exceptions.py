#!/usr/bin/env python
# -*- codeing:utf-8 -*-
"""Errors raised while building, encoding and decoding node records.

Every error derives from `ENRError`, which itself is a `ValueError`, so
callers used to catching `ValueError` around record parsing keep working.
"""

__author__ = "XiaoHuiHui"


class ENRError(ValueError):
    """Base class of all node record errors."""
    pass


class DecodingError(ENRError):
    """The bytes are not a well formed canonical node record."""
    pass


class OrderingError(DecodingError):
    """The keys of a record are not strictly ascending, or a key occurs
    twice.
    """
    pass


class TextFormatError(DecodingError):
    """The text form lacks the `enr:` prefix or its body is not a
    canonical unpadded URL-safe base64 string.
    """
    pass


class UnknownSchemeError(ENRError):
    """The `id` of a record names an identity scheme that is not
    registered.
    """

    def __init__(self, tag: bytes) -> None:
        super().__init__(f"Unknown identity scheme: {tag!r}.")
        self.tag = tag


class InvalidSignatureError(ENRError):
    """The signature of a record does not verify against its content."""
    pass


class SizeExceededError(ENRError):
    """The canonical encoding of a record is larger than allowed."""

    def __init__(self, size: int, limit: int) -> None:
        super().__init__(
            f"Node record is {size} bytes, the limit is {limit} bytes."
        )
        self.size = size
        self.limit = limit


class ReservedKeyError(ENRError):
    """A key derived from the identity scheme was set by hand."""
    pass


class InvalidKeyError(ENRError):
    """The private key material can not be used by the scheme."""
    pass


class SequenceError(ENRError):
    """A sequence number is outside the unsigned 64-bit range."""
    pass

#!/usr/bin/env python
# -*- codeing:utf-8 -*-
"""The text encoding of node records.

The textual form of a node record is the base64 encoding of its RLP
representation, prefixed by "enr:". Implementations should use the URL
safe base64 alphabet and omit padding characters.

See: https://github.com/ethereum/EIPs/blob/master/EIPS/eip-778.md
"""

__author__ = "XiaoHuiHui"
__version__ = "1.0"

import base64
import binascii
import re
import typing
from typing import Optional

from enr import config as opts
from enr.exceptions import TextFormatError

if typing.TYPE_CHECKING:
    from enr.datatypes import ENR
    from enr.schemes import SchemeRegistry

URLSAFE_ALPHABET = re.compile(r"[A-Za-z0-9_-]*")


def base64_padding(raw: str) -> str:
    """Add padding to the end of a non-standard base64 string to return
    it as a standardized base64 string.

    Since python's base64 parsing library only supports complete base64
    strings that comply with RFC4648. But the definition in the Ethereum
    specification is non-standard, it removes the padding at the end of
    the string. So this function is used to refill it.

    Also see: https://www.rfc-editor.org/rfc/rfc4648.txt

    :param str raw: Non-standard base64 string.
    :return str: Standard base64 string with paddings.
    """
    return raw + "=" * (-len(raw) % 4)


def encode_text(data: bytes) -> str:
    """Render record bytes as "enr:" followed by unpadded URL-safe
    base64.

    :param bytes data: The RLP encoded record.
    :return str: The text form.
    """
    raw = base64.urlsafe_b64encode(data)
    return f"{opts.RECORD_PREFIX}{raw.decode().rstrip('=')}"


def decode_text(text: str) -> bytes:
    """Parse the text form back into record bytes.

    Only the canonical form is accepted: the URL-safe alphabet without
    padding, and no set bits after the last encoded byte.

    :param str text: The text form.
    :return bytes: The RLP encoded record.
    :raise TextFormatError: If the prefix is missing or the body is not
        canonical unpadded URL-safe base64.
    """
    if not text.startswith(opts.RECORD_PREFIX):
        raise TextFormatError(
            f"String encoded ENR must start with '{opts.RECORD_PREFIX}'"
        )
    body = text[len(opts.RECORD_PREFIX):]
    if URLSAFE_ALPHABET.fullmatch(body) is None:
        raise TextFormatError(
            "ENR text contains characters outside URL-safe base64."
        )
    if len(body) % 4 == 1:
        raise TextFormatError("ENR text has an impossible base64 length.")
    try:
        data = base64.urlsafe_b64decode(base64_padding(body))
    except binascii.Error as err:
        raise TextFormatError(f"Invalid base64 in ENR text: {err}") from err
    # Python ignores the unused bits of the last character.
    if base64.urlsafe_b64encode(data).decode().rstrip("=") != body:
        raise TextFormatError("ENR text is not canonical base64.")
    return data


def to_text(record: "ENR") -> str:
    """Return the text form of a record.

    :param ENR record: The node record.
    :return str: "enr:" + base64url(record bytes).
    """
    return encode_text(record.to_bytes())


def from_text(text: str,
        schemes: Optional["SchemeRegistry"] = None) -> "ENR":
    """Parse and verify a record from its text form.

    :param str text: The text form.
    :param SchemeRegistry schemes: The identity schemes to accept,
        `DEFAULT_SCHEMES` if omitted.
    :return ENR: The verified record.
    :raise TextFormatError: If the text is not valid or the record it
        holds is rejected. The error of `ENR.decode` is the `__cause__`.
    """
    from enr.datatypes import ENR
    return ENR.from_text(text, schemes)

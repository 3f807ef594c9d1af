#!/usr/bin/env python
# -*- codeing:utf-8 -*-
"""The node identifier derived from a node record.

The node address is determined by the identity scheme of the record. For
the "v4" scheme it is the keccak256 hash of the uncompressed public key,
so a node id is always 32 bytes.
"""

__author__ = "XiaoHuiHui"

import secrets
from typing import NamedTuple

from enr import config as opts


class NodeId(NamedTuple):
    """A 32-byte node identifier."""

    raw: bytes

    def __str__(self) -> str:
        return self.raw.hex()[:7]

    def __bytes__(self) -> bytes:
        return self.raw

    def hex(self) -> str:
        return self.raw.hex()

    @classmethod
    def from_bytes(cls, raw: bytes) -> "NodeId":
        if len(raw) != opts.NODE_ID_SIZE:
            raise ValueError(
                f"Node id must be {opts.NODE_ID_SIZE} bytes, got {len(raw)}."
            )
        return cls(bytes(raw))

    @classmethod
    def from_hex(cls, text: str) -> "NodeId":
        if text.startswith("0x"):
            text = text[2:]
        return cls.from_bytes(bytes.fromhex(text))

    @classmethod
    def random(cls) -> "NodeId":
        return cls(secrets.token_bytes(opts.NODE_ID_SIZE))

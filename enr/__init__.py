#!/usr/bin/env python
# -*- codeing:utf-8 -*-
"""A simple implementation of Ethereum Improvement Proposals EIP-778.

The node record is defined by EIP-778.

The canonical encoding of a node record is an RLP list of
[signature, seq, k, v, ...]. The maximum encoded size of a node record
is 300 bytes. Implementations should reject records larger than this size.

Records are signed and encoded as follows:

content   = [seq, k, v, ...]
signature = sign(content)
record    = [signature, seq, k, v, ...]

See: https://github.com/ethereum/EIPs/blob/master/EIPS/eip-778.md
"""

__author__ = "XiaoHuiHui"
__version__ = "2.0"

import logging
from logging import Formatter, StreamHandler

from enr import config as opts
from enr.builder import ENRBuilder
from enr.datatypes import ENR
from enr.exceptions import (DecodingError, ENRError, InvalidKeyError,
                            InvalidSignatureError, OrderingError,
                            ReservedKeyError, SequenceError,
                            SizeExceededError, TextFormatError,
                            UnknownSchemeError)
from enr.nodeid import NodeId
from enr.schemes import (ALL_SCHEMES, DEFAULT_SCHEMES, Ed25519Scheme,
                         IdentityScheme, SchemeRegistry, V4Scheme)
from enr.secret import SecretKey
from enr.text import from_text, to_text

sh = StreamHandler()
fmt = Formatter(opts.LOG_FORMAT)
sh.setFormatter(fmt)
sh.setLevel(logging.DEBUG if opts.DEBUG else logging.INFO)

loggers = [
    logging.getLogger("enr.builder"),
    logging.getLogger("enr.datatypes"),
    logging.getLogger("enr.schemes")
]

for logger in loggers:
    logger.addHandler(sh)

__all__ = [
    "ALL_SCHEMES",
    "DEFAULT_SCHEMES",
    "DecodingError",
    "ENR",
    "ENRBuilder",
    "ENRError",
    "Ed25519Scheme",
    "IdentityScheme",
    "InvalidKeyError",
    "InvalidSignatureError",
    "NodeId",
    "OrderingError",
    "ReservedKeyError",
    "SchemeRegistry",
    "SecretKey",
    "SequenceError",
    "SizeExceededError",
    "TextFormatError",
    "UnknownSchemeError",
    "V4Scheme",
    "from_text",
    "to_text",
]

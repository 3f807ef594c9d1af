#!/usr/bin/env python
# -*- codeing:utf-8 -*-
"""Identity schemes of node records.

The "v4" scheme (secp256k1) is the default and the only one accepted by
`DEFAULT_SCHEMES`. The "ed25519" scheme is available through
`ALL_SCHEMES` or by adding it to a registry.
"""

__author__ = "XiaoHuiHui"
__version__ = "1.0"

from .base import IdentityScheme
from .ed25519 import Ed25519Scheme
from .registry import ALL_SCHEMES, DEFAULT_SCHEMES, SchemeRegistry
from .v4 import V4Scheme

__all__ = [
    "ALL_SCHEMES",
    "DEFAULT_SCHEMES",
    "Ed25519Scheme",
    "IdentityScheme",
    "SchemeRegistry",
    "V4Scheme",
]

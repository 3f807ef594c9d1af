#!/usr/bin/env python
# -*- codeing:utf-8 -*-
"""Constants of the node record format.

The values here follow EIP-778. They are plain module constants, import
them as `from enr import config as opts`.

See: https://github.com/ethereum/EIPs/blob/master/EIPS/eip-778.md
"""

__author__ = "XiaoHuiHui"
__version__ = "1.0"

# Logging
DEBUG = False
LOG_FORMAT = "%(asctime)s [%(name)s][%(levelname)s] %(message)s"
# Record limits
MAX_RECORD_SIZE = 300
MAX_SEQ = 2 ** 64 - 1
NODE_ID_SIZE = 32
# Text form
RECORD_PREFIX = "enr:"
# Reserved keys
ID_KEY = b"id"
# Identity schemes
V4_TAG = b"v4"
V4_PUBLIC_KEY_KEY = b"secp256k1"
ED25519_TAG = b"ed25519"
ED25519_PUBLIC_KEY_KEY = b"ed25519"
# Well-known endpoint keys
IP_KEY = b"ip"
IP6_KEY = b"ip6"
TCP_KEY = b"tcp"
UDP_KEY = b"udp"
TCP6_KEY = b"tcp6"
UDP6_KEY = b"udp6"

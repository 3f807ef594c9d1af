#!/usr/bin/env python
# -*- codeing:utf-8 -*-
"""The "v4" identity scheme.

This scheme is used by the Node Discovery Protocol v4 and is the default
identity scheme of node records.

To sign record content with this scheme, apply the keccak256 hash
function to content, then create a signature of the hash. The resulting
64-byte signature is encoded as the concatenation of the r and s
signature values (the recovery ID v is omitted).

To verify a record, check that the signature was made by the public key
in the "secp256k1" key/value pair of the record.

To derive a node address, take the keccak256 hash of the uncompressed
public key, i.e. keccak256(x || y). Note that x and y must be zero
padded up to length 32.

See: https://github.com/ethereum/devp2p/blob/master/enr.md
"""

__author__ = "XiaoHuiHui"
__version__ = "1.0"

import logging
import secrets
from typing import Any

from eth_hash.auto import keccak
from eth_keys import KeyAPI
from eth_keys.constants import SECPK1_N
from eth_keys.datatypes import PrivateKey, PublicKey, Signature
from eth_keys.exceptions import BadSignature
from eth_utils import ValidationError

from enr import config as opts
from enr.exceptions import DecodingError, InvalidKeyError
from enr.nodeid import NodeId
from enr.secret import SecretKey, wipe

from .base import IdentityScheme

logger = logging.getLogger("enr.schemes")

SECRET_KEY_SIZE = 32
SIGNATURE_SIZE = 64
COMPRESSED_PUBLIC_KEY_SIZE = 33
UNCOMPRESSED_PUBLIC_KEY_SIZE = 64


class V4Scheme(IdentityScheme):
    """The secp256k1 identity scheme named "v4"."""

    tag = opts.V4_TAG
    public_key_key = opts.V4_PUBLIC_KEY_KEY

    def __init__(self) -> None:
        self.keys = KeyAPI()

    def generate_keypair(self) -> tuple[SecretKey, bytes]:
        while True:
            raw = bytearray(secrets.token_bytes(SECRET_KEY_SIZE))
            if 0 < int.from_bytes(raw, "big") < SECPK1_N:
                break
            wipe(raw)
        secret = SecretKey(raw)
        return secret, self.public_key(secret)

    def secret_from_bytes(self, raw: bytes | bytearray) -> SecretKey:
        secret = SecretKey(raw)
        if len(secret) != SECRET_KEY_SIZE:
            secret.zeroize()
            raise InvalidKeyError(
                f"secp256k1 secret key must be {SECRET_KEY_SIZE} bytes."
            )
        if not 0 < int.from_bytes(secret.expose(), "big") < SECPK1_N:
            secret.zeroize()
            raise InvalidKeyError("Invalid secp256k1 secret key.")
        return secret

    def public_key(self, secret: SecretKey) -> bytes:
        private_key = PrivateKey(secret.expose())
        return private_key.public_key.to_compressed_bytes()

    def encode_public_key(self, public_key: Any) -> bytes:
        """Return the 33-byte compressed form of a public key.

        Accepts an `eth_keys` public key, the 33-byte compressed form or
        the 64-byte uncompressed form (with or without the 0x04 prefix).
        """
        if isinstance(public_key, PublicKey):
            return public_key.to_compressed_bytes()
        return self._load(bytes(public_key)).to_compressed_bytes()

    def _load(self, public_key: bytes) -> PublicKey:
        if len(public_key) == COMPRESSED_PUBLIC_KEY_SIZE:
            return PublicKey.from_compressed_bytes(public_key)
        if len(public_key) == UNCOMPRESSED_PUBLIC_KEY_SIZE + 1 \
                and public_key[0] == 0x04:
            public_key = public_key[1:]
        if len(public_key) == UNCOMPRESSED_PUBLIC_KEY_SIZE:
            return PublicKey(public_key)
        raise ValueError(
            f"Invalid secp256k1 public key length: {len(public_key)}."
        )

    def sign(self, secret: SecretKey, message: bytes) -> bytes:
        private_key = PrivateKey(secret.expose())
        signature = self.keys.ecdsa_sign(keccak(message), private_key)
        # Drop the recovery id v.
        return signature.to_bytes()[:SIGNATURE_SIZE]

    def verify(self, public_key: Any, message: bytes,
            signature: bytes) -> bool:
        if len(signature) != SIGNATURE_SIZE:
            return False
        try:
            if not isinstance(public_key, PublicKey):
                public_key = self._load(bytes(public_key))
            # eth_keys only accepts 65-byte signatures, the recovery id
            # is not used by the verification so any valid one works.
            sig = Signature(signature + b"\x00")
            return self.keys.ecdsa_verify(keccak(message), sig, public_key)
        except (BadSignature, ValidationError, ValueError) as err:
            logger.debug(f"Malformed v4 key or signature: {err}")
            return False

    def derive_identifier(self, public_key: Any) -> NodeId:
        try:
            if not isinstance(public_key, PublicKey):
                public_key = self._load(bytes(public_key))
        except (ValidationError, ValueError) as err:
            raise DecodingError(f"Invalid secp256k1 public key: {err}") \
                from err
        return NodeId(keccak(public_key.to_bytes()))

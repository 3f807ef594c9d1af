#!/usr/bin/env python
# -*- codeing:utf-8 -*-
"""The "ed25519" identity scheme.

An opt-in scheme, it is not part of `DEFAULT_SCHEMES`. The 32-byte
public key is stored under the "ed25519" key, the 64-byte Ed25519
signature is made over the RLP content itself and the node address is
the keccak256 hash of the public key.
"""

__author__ = "XiaoHuiHui"

import logging
from typing import Any

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import ed25519
from eth_hash.auto import keccak

from enr import config as opts
from enr.exceptions import DecodingError, InvalidKeyError
from enr.nodeid import NodeId
from enr.secret import SecretKey

from .base import IdentityScheme

logger = logging.getLogger("enr.schemes")

SECRET_KEY_SIZE = 32
PUBLIC_KEY_SIZE = 32
SIGNATURE_SIZE = 64


class Ed25519Scheme(IdentityScheme):
    """The Ed25519 identity scheme."""

    tag = opts.ED25519_TAG
    public_key_key = opts.ED25519_PUBLIC_KEY_KEY

    def generate_keypair(self) -> tuple[SecretKey, bytes]:
        private_key = ed25519.Ed25519PrivateKey.generate()
        secret = SecretKey(bytearray(private_key.private_bytes_raw()))
        return secret, private_key.public_key().public_bytes_raw()

    def secret_from_bytes(self, raw: bytes | bytearray) -> SecretKey:
        secret = SecretKey(raw)
        if len(secret) != SECRET_KEY_SIZE:
            secret.zeroize()
            raise InvalidKeyError(
                f"Ed25519 secret key must be {SECRET_KEY_SIZE} bytes."
            )
        return secret

    def _private_key(self, secret: SecretKey) -> ed25519.Ed25519PrivateKey:
        return ed25519.Ed25519PrivateKey.from_private_bytes(secret.expose())

    def public_key(self, secret: SecretKey) -> bytes:
        return self._private_key(secret).public_key().public_bytes_raw()

    def encode_public_key(self, public_key: Any) -> bytes:
        if isinstance(public_key, ed25519.Ed25519PublicKey):
            return public_key.public_bytes_raw()
        public_key = bytes(public_key)
        if len(public_key) != PUBLIC_KEY_SIZE:
            raise ValueError(
                f"Invalid Ed25519 public key length: {len(public_key)}."
            )
        return public_key

    def sign(self, secret: SecretKey, message: bytes) -> bytes:
        return self._private_key(secret).sign(message)

    def verify(self, public_key: Any, message: bytes,
            signature: bytes) -> bool:
        if len(signature) != SIGNATURE_SIZE:
            return False
        try:
            if not isinstance(public_key, ed25519.Ed25519PublicKey):
                public_key = ed25519.Ed25519PublicKey.from_public_bytes(
                    bytes(public_key)
                )
            public_key.verify(signature, message)
        except (InvalidSignature, ValueError) as err:
            logger.debug(f"Ed25519 verification failed: {err!r}")
            return False
        return True

    def derive_identifier(self, public_key: Any) -> NodeId:
        try:
            encoded = self.encode_public_key(public_key)
        except ValueError as err:
            raise DecodingError(str(err)) from err
        return NodeId(keccak(encoded))

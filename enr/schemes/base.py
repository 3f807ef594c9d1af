#!/usr/bin/env python
# -*- codeing:utf-8 -*-
"""The abstract identity scheme.

The identity scheme of a node record is named by its "id" key. The
scheme is used for two purposes: it defines how the record is signed and
verified, and how the node address (node id) is derived from the public
key stored in the record.

New schemes subclass `IdentityScheme` and are made known to the decoder
through a `SchemeRegistry`; the record and the codec never change.

See: https://github.com/ethereum/devp2p/blob/master/enr.md
"""

__author__ = "XiaoHuiHui"

from abc import ABCMeta, abstractmethod
from typing import Any, ClassVar

from enr.nodeid import NodeId
from enr.secret import SecretKey


class IdentityScheme(metaclass=ABCMeta):
    """The base abstract class of an identity scheme.

    Every scheme is stateless. The `tag` is the value stored under the
    "id" key and `public_key_key` is the key holding the encoded public
    key.
    """

    tag: ClassVar[bytes]
    public_key_key: ClassVar[bytes]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.tag.decode()})"

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(self.tag)

    @abstractmethod
    def generate_keypair(self) -> tuple[SecretKey, bytes]:
        """Generate new random key material.

        :return SecretKey: The private key.
        :return bytes: The encoded public key.
        """
        return NotImplemented

    @abstractmethod
    def secret_from_bytes(self, raw: bytes | bytearray) -> SecretKey:
        """Import a raw private key. A `bytearray` argument is wiped
        after the key has been copied.

        :param raw: The raw private key bytes.
        :return SecretKey: The validated private key.
        :raise InvalidKeyError: If the bytes are no valid private key.
        """
        return NotImplemented

    @abstractmethod
    def public_key(self, secret: SecretKey) -> bytes:
        """Return the encoded public key of a private key."""
        return NotImplemented

    @abstractmethod
    def encode_public_key(self, public_key: Any) -> bytes:
        """Return the canonical encoding of a public key, the value that
        is stored under `public_key_key`.

        :raise ValueError: If the key can not be encoded.
        """
        return NotImplemented

    @abstractmethod
    def sign(self, secret: SecretKey, message: bytes) -> bytes:
        """Sign the RLP encoded record content.

        :param SecretKey secret: The private key.
        :param bytes message: The content, [seq, k, v, ...].
        :return bytes: The fixed length signature.
        """
        return NotImplemented

    @abstractmethod
    def verify(self, public_key: Any, message: bytes,
            signature: bytes) -> bool:
        """Verify a signature over the record content. Malformed keys and
        signatures make this return False, it never raises for them.

        :return bool: Whether the signature is valid.
        """
        return NotImplemented

    @abstractmethod
    def derive_identifier(self, public_key: Any) -> NodeId:
        """Derive the node id from a public key.

        :raise DecodingError: If the public key is malformed.
        """
        return NotImplemented

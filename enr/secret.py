#!/usr/bin/env python
# -*- codeing:utf-8 -*-
"""A scoped holder of raw private key bytes.

The bytes are kept in a `bytearray` and overwritten with zeros when the
owner releases them: on `zeroize()`, when leaving a `with` block, or
when the object is garbage collected.
"""

__author__ = "XiaoHuiHui"

from types import TracebackType
from typing import Optional, Type


class SecretKey:
    """Raw private key material of an identity scheme.

    The constructor copies `raw`. If `raw` is a `bytearray`, the
    caller's buffer is wiped as well so only this object holds the
    secret afterwards.
    """

    __slots__ = ("_buffer", "_zeroized")

    def __init__(self, raw: bytes | bytearray) -> None:
        self._buffer = bytearray(raw)
        self._zeroized = False
        if isinstance(raw, bytearray):
            wipe(raw)

    def __enter__(self) -> "SecretKey":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType]
    ) -> None:
        self.zeroize()

    def __del__(self) -> None:
        self.zeroize()

    def __len__(self) -> int:
        return len(self._buffer)

    def __repr__(self) -> str:
        return "SecretKey(<redacted>)"

    @property
    def is_zeroized(self) -> bool:
        return self._zeroized

    def expose(self) -> bytes:
        """Return the secret as immutable bytes for the signing
        backend.

        :return bytes: A copy of the secret.
        :raise ValueError: If the secret has already been zeroized.
        """
        if self.is_zeroized:
            raise ValueError("The secret key has been zeroized.")
        return bytes(self._buffer)

    def zeroize(self) -> None:
        # `__del__` may run on a half constructed object.
        buffer = getattr(self, "_buffer", None)
        if buffer is not None:
            wipe(buffer)
        self._zeroized = True


def wipe(buffer: bytearray) -> None:
    """Overwrite a mutable buffer with zeros in place.

    :param bytearray buffer: The buffer to clear.
    """
    buffer[:] = bytes(len(buffer))

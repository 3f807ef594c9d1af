#!/usr/bin/env python
# -*- codeing:utf-8 -*-
"""Lookup of identity schemes by their "id" tag.

A registry is an immutable value handed to the decoder. There is no
global registry to mutate: to accept more schemes, build a new registry
with `with_scheme` and pass it along.
"""

__author__ = "XiaoHuiHui"

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from enr.exceptions import UnknownSchemeError

from .base import IdentityScheme
from .ed25519 import Ed25519Scheme
from .v4 import V4Scheme


class SchemeRegistry(Mapping[bytes, IdentityScheme]):
    """An immutable table from scheme tag to identity scheme."""

    def __init__(self, schemes: Iterable[IdentityScheme] = ()) -> None:
        table: dict[bytes, IdentityScheme] = {}
        for scheme in schemes:
            if scheme.tag in table:
                raise ValueError(
                    f"Identity scheme {scheme.tag!r} registered twice."
                )
            table[scheme.tag] = scheme
        self._table = MappingProxyType(table)

    def __getitem__(self, tag: bytes) -> IdentityScheme:
        return self._table[tag]

    def __iter__(self) -> Iterator[bytes]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        tags = ", ".join(tag.decode() for tag in self._table)
        return f"SchemeRegistry({tags})"

    def resolve(self, tag: bytes) -> IdentityScheme:
        """Return the scheme registered for a tag.

        :param bytes tag: The value of the "id" key.
        :return IdentityScheme: The matching scheme.
        :raise UnknownSchemeError: If no scheme has this tag.
        """
        try:
            return self._table[tag]
        except KeyError:
            raise UnknownSchemeError(tag) from None

    def with_scheme(self, scheme: IdentityScheme) -> "SchemeRegistry":
        """Return a new registry that also knows `scheme`."""
        return SchemeRegistry((*self._table.values(), scheme))


DEFAULT_SCHEMES = SchemeRegistry((V4Scheme(),))
ALL_SCHEMES = DEFAULT_SCHEMES.with_scheme(Ed25519Scheme())

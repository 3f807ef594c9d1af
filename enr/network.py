#!/usr/bin/env python
# -*- codeing:utf-8 -*-
"""Typed access to the well-known endpoint keys of a node record.

The record itself treats every value as opaque bytes. This module reads
and writes the pre-defined keys of EIP-778:

ip    IPv4 address, 4 bytes
tcp   TCP port, big endian integer
udp   UDP port, big endian integer
ip6   IPv6 address, 16 bytes
tcp6  IPv6-specific TCP port, big endian integer
udp6  IPv6-specific UDP port, big endian integer

If tcp6 or udp6 are absent, tcp and udp apply to both addresses.

See: https://github.com/ethereum/EIPs/blob/master/EIPS/eip-778.md
"""

__author__ = "XiaoHuiHui"

import ipaddress
from ipaddress import IPv4Address, IPv6Address
from typing import NamedTuple, Optional

from enr import config as opts
from enr.builder import ENRBuilder
from enr.datatypes import ENR

IPAddress = IPv4Address | IPv6Address


def _check_port(port: int) -> int:
    if port <= 0 or port > 65535:
        raise ValueError(f"Invalid port: {port}.")
    return port


def _decode_port(data: bytes) -> int:
    return _check_port(int.from_bytes(data, "big", signed=False))


def _get_bytes(enr: ENR, key: bytes) -> Optional[bytes]:
    value = enr.get(key)
    if value is None:
        return None
    if not isinstance(value, bytes):
        raise ValueError(f"Value of {key!r} must be a byte string.")
    return value


def _get_port(enr: ENR, key: bytes) -> Optional[int]:
    value = _get_bytes(enr, key)
    return None if value is None else _decode_port(value)


def get_ip(enr: ENR) -> Optional[IPv4Address]:
    value = _get_bytes(enr, opts.IP_KEY)
    if value is None:
        return None
    if len(value) != 4:
        raise ValueError(f"Invalid IPv4 address length: {len(value)}.")
    return IPv4Address(value)


def get_ip6(enr: ENR) -> Optional[IPv6Address]:
    value = _get_bytes(enr, opts.IP6_KEY)
    if value is None:
        return None
    if len(value) != 16:
        raise ValueError(f"Invalid IPv6 address length: {len(value)}.")
    return IPv6Address(value)


def get_tcp(enr: ENR) -> Optional[int]:
    return _get_port(enr, opts.TCP_KEY)


def get_udp(enr: ENR) -> Optional[int]:
    return _get_port(enr, opts.UDP_KEY)


def get_tcp6(enr: ENR) -> Optional[int]:
    return _get_port(enr, opts.TCP6_KEY)


def get_udp6(enr: ENR) -> Optional[int]:
    return _get_port(enr, opts.UDP6_KEY)


class Endpoint(NamedTuple):
    """A infomation tuple of the address and ports of a node."""

    address: IPAddress
    udp_port: Optional[int]
    tcp_port: Optional[int]

    def __str__(self) -> str:
        if self.address.version == 4:
            return f"{str(self.address)}:{self.udp_port}"
        else:
            return f"[{str(self.address)}]:{self.udp_port}"

    @classmethod
    def from_ENR(cls, enr: ENR) -> Optional["Endpoint"]:
        """Pick the endpoint of a record, IPv4 first. Returns None if the
        record holds no address.

        :param ENR enr: The node record.
        :return Endpoint: The address with its UDP and TCP port.
        :raise ValueError: If a value is malformed.
        """
        ip = get_ip(enr)
        if ip is not None:
            return cls(ip, get_udp(enr), get_tcp(enr))
        ip6 = get_ip6(enr)
        if ip6 is not None:
            udp6 = get_udp6(enr)
            tcp6 = get_tcp6(enr)
            return cls(
                ip6,
                get_udp(enr) if udp6 is None else udp6,
                get_tcp(enr) if tcp6 is None else tcp6
            )
        return None


def _encode_port(port: int) -> bytes:
    return _check_port(port).to_bytes(2, "big")


def set_ip(builder: ENRBuilder, address: str | IPAddress) -> ENRBuilder:
    """Stage an address under "ip" or "ip6", by its version."""
    ip = ipaddress.ip_address(address)
    key = opts.IP_KEY if ip.version == 4 else opts.IP6_KEY
    return builder.set(key, ip.packed)


def set_tcp(builder: ENRBuilder, port: int) -> ENRBuilder:
    return builder.set(opts.TCP_KEY, _encode_port(port))


def set_udp(builder: ENRBuilder, port: int) -> ENRBuilder:
    return builder.set(opts.UDP_KEY, _encode_port(port))


def set_tcp6(builder: ENRBuilder, port: int) -> ENRBuilder:
    return builder.set(opts.TCP6_KEY, _encode_port(port))


def set_udp6(builder: ENRBuilder, port: int) -> ENRBuilder:
    return builder.set(opts.UDP6_KEY, _encode_port(port))

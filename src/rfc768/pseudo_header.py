"""
IPv4 pseudo-header for checksum computation.

The pseudo-header is never transmitted. It is built right before a
checksum is computed or verified:

  0      7 8     15 16    23 24    31
 +--------+--------+--------+--------+
 |          source address           |
 +--------+--------+--------+--------+
 |        destination address        |
 +--------+--------+--------+--------+
 |  zero  |protocol|   UDP length    |
 +--------+--------+--------+--------+
"""
from __future__ import annotations

from dataclasses import dataclass
import ipaddress
import struct
from typing import TYPE_CHECKING, Union

from .constants import PROTOCOL_NUMBER
from .exceptions import PseudoHeaderError

if TYPE_CHECKING:
    from .datagram import Datagram

Address = Union[ipaddress.IPv4Address, str, int, bytes]

_TAIL = struct.Struct("!BBH")


def _to_address(value: Address) -> ipaddress.IPv4Address:
    if isinstance(value, ipaddress.IPv4Address):
        return value
    try:
        return ipaddress.IPv4Address(value)
    except ValueError:
        raise PseudoHeaderError.invalid_address(value) from None


@dataclass(frozen=True)
class PseudoHeader:
    """
    Addresses and length fed to the checksum engine.

    ``length`` must be the total length of the datagram being checksummed;
    that is the caller's job and is not checked here.
    """
    source: ipaddress.IPv4Address
    destination: ipaddress.IPv4Address
    length: int

    def __post_init__(self):
        # Accept dotted strings, ints and packed bytes for the addresses
        object.__setattr__(self, "source", _to_address(self.source))
        object.__setattr__(self, "destination", _to_address(self.destination))
        if not 0 <= self.length <= 0xFFFF:
            raise PseudoHeaderError.out_of_range(self.length)

    @classmethod
    def for_datagram(cls, source: Address, destination: Address,
                     datagram: "Datagram") -> "PseudoHeader":
        return cls(source, destination, datagram.header.length.raw_value)

    def serialize(self) -> bytes:
        return (
            self.source.packed
            + self.destination.packed
            + _TAIL.pack(0, PROTOCOL_NUMBER, self.length)
        )

    def __bytes__(self) -> bytes:
        return self.serialize()

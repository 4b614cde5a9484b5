"""
UDP header.

  0      7 8     15 16    23 24    31
 +--------+--------+--------+--------+
 |     Source      |   Destination   |
 |      Port       |      Port       |
 +--------+--------+--------+--------+
 |     Length      |    Checksum     |
 +--------+--------+--------+--------+
"""
from dataclasses import dataclass, replace
from typing import Any, Dict

from ._fields import to_octets
from .checksum import Checksum
from .constants import HEADER_SIZE
from .exceptions import ChecksumError, HeaderError, LengthError, PortError
from .length import Length
from .port import Port


@dataclass(frozen=True)
class Header:
    source: Port
    destination: Port
    length: Length
    checksum: Checksum = Checksum.ABSENT

    @classmethod
    def parse(cls, data) -> "Header":
        """
        Parse a header from the first 8 octets of ``data``.

        Raises:
            HeaderError: if fewer than 8 octets are given, or wrapping the
                error of the field that failed.
        """
        buf = to_octets(data)
        if len(buf) < HEADER_SIZE:
            raise HeaderError.insufficient_bytes(len(buf))

        try:
            source = Port.from_bytes(buf[0:2])
        except PortError as e:
            raise HeaderError.source(e) from e
        try:
            destination = Port.from_bytes(buf[2:4])
        except PortError as e:
            raise HeaderError.destination(e) from e
        try:
            length = Length.from_bytes(buf[4:6])
        except LengthError as e:
            raise HeaderError.length(e) from e
        try:
            checksum = Checksum.from_bytes(buf[6:8])
        except ChecksumError as e:
            raise HeaderError.checksum(e) from e

        return cls(source, destination, length, checksum)

    def serialize(self) -> bytes:
        return (
            self.source.serialize()
            + self.destination.serialize()
            + self.length.serialize()
            + self.checksum.serialize()
        )

    def with_checksum(self, checksum: Checksum) -> "Header":
        return replace(self, checksum=checksum)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source.raw_value,
            "destination": self.destination.raw_value,
            "length": self.length.raw_value,
            "checksum": self.checksum.raw_value,
        }

    def __bytes__(self) -> bytes:
        return self.serialize()

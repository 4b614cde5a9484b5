"""
Datagram length field.

The length counts the octets of the whole datagram, header included, so
the smallest legal value is the header size.
"""
from dataclasses import dataclass
from typing import Iterable

from ._fields import pack_u16, read_u16
from .constants import HEADER_SIZE, MAXIMUM_LENGTH, MINIMUM_LENGTH
from .exceptions import LengthError


@dataclass(frozen=True, order=True)
class Length:
    """Total datagram length in octets (8..65535)."""
    raw_value: int

    def __post_init__(self):
        if self.raw_value > MAXIMUM_LENGTH:
            raise LengthError.out_of_range(self.raw_value)
        if self.raw_value < MINIMUM_LENGTH:
            if self.raw_value < 0:
                raise LengthError.out_of_range(self.raw_value)
            raise LengthError.too_short(self.raw_value)

    @classmethod
    def from_bytes(cls, data: Iterable[int]) -> "Length":
        """Parse a length from its first 2 octets, then range-check it."""
        return cls(read_u16(data, LengthError))

    @classmethod
    def for_payload(cls, size: int) -> "Length":
        return cls(HEADER_SIZE + size)

    @property
    def data(self) -> int:
        """Number of payload octets the length describes."""
        return self.raw_value - MINIMUM_LENGTH

    def serialize(self) -> bytes:
        return pack_u16(self.raw_value)

    def __bytes__(self) -> bytes:
        return self.serialize()

    def __int__(self) -> int:
        return self.raw_value

    def __str__(self) -> str:
        return str(self.raw_value)

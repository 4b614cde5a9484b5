"""
Complete UDP datagram: header followed by payload.

Datagrams are immutable. Attaching a checksum returns a new datagram; the
original keeps its header untouched.
"""
from dataclasses import dataclass
from typing import Any, Dict, Union

from ._fields import to_octets
from .checksum import Checksum
from .constants import HEADER_SIZE, MAXIMUM_LENGTH
from .exceptions import DatagramError, HeaderError, LengthError
from .header import Header
from .length import Length
from .port import Port
from .pseudo_header import PseudoHeader

PortLike = Union[Port, int]


def _to_port(value: PortLike) -> Port:
    return value if isinstance(value, Port) else Port(value)


@dataclass(frozen=True)
class Datagram:
    """
    Header plus payload.

    ``header.length`` always equals ``8 + len(data)``; constructing a
    datagram that breaks this raises ``DatagramError.length_mismatch``.
    """
    header: Header
    data: bytes = b""

    def __post_init__(self):
        # Payload is stored as immutable bytes
        if not isinstance(self.data, bytes):
            object.__setattr__(self, "data", to_octets(self.data))
        if self.header.length.data != len(self.data):
            raise DatagramError.length_mismatch(self.header.length.data, len(self.data))

    @classmethod
    def create(cls, source: PortLike, destination: PortLike, data=b"",
               checksum: Checksum = Checksum.ABSENT) -> "Datagram":
        """
        Build a datagram, deriving the length field from the payload.

        Raises:
            DatagramError: ``data_too_large`` if the payload does not fit the
                16-bit length field.
        """
        payload = to_octets(data)
        total_length = HEADER_SIZE + len(payload)
        if total_length > MAXIMUM_LENGTH:
            raise DatagramError.data_too_large(len(payload))

        try:
            length = Length(total_length)
        except LengthError as e:
            raise DatagramError.length(e) from e

        header = Header(_to_port(source), _to_port(destination), length, checksum)
        return cls(header, payload)

    @classmethod
    def parse(cls, data) -> "Datagram":
        """
        Parse a datagram from ``data``.

        The length field is authoritative: exactly ``length.data`` octets
        after the header become the payload, and trailing octets are ignored.
        """
        buf = to_octets(data)
        try:
            header = Header.parse(buf)
        except HeaderError as e:
            raise DatagramError.header(e) from e

        expected = header.length.data
        available = len(buf) - HEADER_SIZE
        if available < expected:
            raise DatagramError.insufficient_data(expected, available)

        return cls(header, buf[HEADER_SIZE:HEADER_SIZE + expected])

    @property
    def source(self) -> Port:
        return self.header.source

    @property
    def destination(self) -> Port:
        return self.header.destination

    @property
    def checksum(self) -> Checksum:
        return self.header.checksum

    def with_checksum(self, pseudo_header: PseudoHeader) -> "Datagram":
        """Return a copy carrying the checksum computed over ``pseudo_header``."""
        zeroed = self.header.with_checksum(Checksum.ABSENT)
        checksum = Checksum.compute(
            pseudo_header.serialize(),
            zeroed.serialize(),
            self.data,
        )
        return Datagram(self.header.with_checksum(checksum), self.data)

    def verify_checksum(self, pseudo_header: PseudoHeader) -> bool:
        """
        Check the transmitted checksum against ``pseudo_header``.

        An absent checksum always passes.
        """
        if self.header.checksum.is_absent:
            return True
        return Checksum.verify(
            pseudo_header.serialize(),
            self.header.serialize(),
            self.data,
        )

    def serialize(self) -> bytes:
        return self.header.serialize() + self.data

    def to_dict(self) -> Dict[str, Any]:
        record = self.header.to_dict()
        record["data"] = self.data.hex()
        return record

    def __bytes__(self) -> bytes:
        return self.serialize()

    def __len__(self) -> int:
        return self.header.length.raw_value

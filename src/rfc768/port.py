"""
Port numbers.

A port is a 16-bit unsigned integer identifying the sending or receiving
process. Every 16-bit value is a legal port.
"""
from dataclasses import dataclass
from typing import ClassVar, Iterable

from ._fields import check_u16, pack_u16, read_u16
from .exceptions import PortError

# Classification boundaries (IANA ranges)
REGISTERED_START = 1024
DYNAMIC_START = 49152


@dataclass(frozen=True, order=True)
class Port:
    """
    Source or destination port.

    Ports 0-1023 are well-known, 1024-49151 registered and 49152-65535
    dynamic/private. Exactly one of the three predicates holds for any port.
    """
    raw_value: int

    DNS: ClassVar["Port"]
    DHCP: ClassVar["Port"]
    TFTP: ClassVar["Port"]
    NTP: ClassVar["Port"]
    SNMP: ClassVar["Port"]
    SYSLOG: ClassVar["Port"]

    def __post_init__(self):
        check_u16(self.raw_value, PortError)

    @classmethod
    def from_bytes(cls, data: Iterable[int]) -> "Port":
        """Parse a port from its first 2 octets (big-endian)."""
        return cls(read_u16(data, PortError))

    def serialize(self) -> bytes:
        return pack_u16(self.raw_value)

    @property
    def is_well_known(self) -> bool:
        return self.raw_value < REGISTERED_START

    @property
    def is_registered(self) -> bool:
        return REGISTERED_START <= self.raw_value < DYNAMIC_START

    @property
    def is_dynamic(self) -> bool:
        return self.raw_value >= DYNAMIC_START

    def __bytes__(self) -> bytes:
        return self.serialize()

    def __int__(self) -> int:
        return self.raw_value

    def __str__(self) -> str:
        return str(self.raw_value)


Port.DNS = Port(53)
Port.DHCP = Port(67)
Port.TFTP = Port(69)
Port.NTP = Port(123)
Port.SNMP = Port(161)
Port.SYSLOG = Port(514)

"""
RFC 768 User Datagram Protocol codec.

Validated value types for the UDP wire format plus the checksum engine.
"""

from .checksum import Checksum, compute_checksum, verify_checksum
from .constants import (
    HEADER_SIZE,
    MAXIMUM_LENGTH,
    MAXIMUM_PAYLOAD,
    MINIMUM_LENGTH,
    PROTOCOL_NUMBER,
)
from .datagram import Datagram
from .exceptions import (
    ChecksumError,
    DatagramError,
    HeaderError,
    LengthError,
    PortError,
    PseudoHeaderError,
    RFC768Error,
)
from .header import Header
from .length import Length
from .port import Port
from .pseudo_header import PseudoHeader

__all__ = [
    'Port',
    'Length',
    'Checksum',
    'PseudoHeader',
    'Header',
    'Datagram',
    'compute_checksum',
    'verify_checksum',
    'RFC768Error',
    'PortError',
    'LengthError',
    'ChecksumError',
    'PseudoHeaderError',
    'HeaderError',
    'DatagramError',
    'PROTOCOL_NUMBER',
    'HEADER_SIZE',
    'MINIMUM_LENGTH',
    'MAXIMUM_LENGTH',
    'MAXIMUM_PAYLOAD',
]

"""
UDP records extracted from captured IPv4 packets.

Decoding here is best-effort: a malformed datagram never aborts a read.
The codec error is kept on the record instead.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from rfc768 import Datagram, DatagramError, PseudoHeader


class ChecksumStatus(Enum):
    ABSENT = "absent"
    VALID = "valid"
    INVALID = "invalid"
    UNCHECKED = "unchecked"


@dataclass(frozen=True)
class UdpRecord:
    """One UDP datagram found in a capture."""
    packet_id: int
    """Monotonic integer starting at 1, counting UDP packets only"""

    timestamp_us: int
    src_ip: str
    dst_ip: str

    datagram: Optional[Datagram] = None
    """None when the datagram failed to parse"""

    error: Optional[DatagramError] = None
    checksum_status: ChecksumStatus = ChecksumStatus.UNCHECKED

    @property
    def is_valid(self) -> bool:
        return self.error is None and self.checksum_status is not ChecksumStatus.INVALID

    def to_dict(self) -> Dict[str, Any]:
        record: Dict[str, Any] = {
            "packet_id": self.packet_id,
            "timestamp_us": self.timestamp_us,
            "src_ip": self.src_ip,
            "dst_ip": self.dst_ip,
            "checksum_status": self.checksum_status.value,
            "error": str(self.error) if self.error else None,
            "is_valid": self.is_valid,
        }
        if self.datagram is not None:
            record.update(self.datagram.to_dict())
        return record


def checksum_status(datagram: Datagram, pseudo_header: Optional[PseudoHeader]) -> ChecksumStatus:
    if datagram.checksum.is_absent:
        return ChecksumStatus.ABSENT
    if pseudo_header is None:
        return ChecksumStatus.UNCHECKED
    if datagram.verify_checksum(pseudo_header):
        return ChecksumStatus.VALID
    return ChecksumStatus.INVALID


def decode_udp(packet_id: int, timestamp_us: int, src_ip: str, dst_ip: str,
               payload: bytes, verify: bool = True) -> UdpRecord:
    """Decode the UDP datagram carried in an IPv4 payload."""
    try:
        datagram = Datagram.parse(payload)
    except DatagramError as e:
        return UdpRecord(packet_id, timestamp_us, src_ip, dst_ip, error=e)

    pseudo = PseudoHeader.for_datagram(src_ip, dst_ip, datagram) if verify else None
    return UdpRecord(
        packet_id=packet_id,
        timestamp_us=timestamp_us,
        src_ip=src_ip,
        dst_ip=dst_ip,
        datagram=datagram,
        checksum_status=checksum_status(datagram, pseudo),
    )

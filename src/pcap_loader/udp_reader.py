"""
Reads UDP datagrams out of PCAP/PCAPNG capture files.

Scapy does the file parsing and the IP layer; the UDP part of every IPv4
packet with protocol 17 is handed to the rfc768 codec. Non-UDP packets and
IP fragments are skipped, since a lone fragment does not hold a whole
datagram.
"""
from dataclasses import dataclass
import logging
import os
from typing import Any, Dict, Iterator, Optional

try:
    from scapy.error import Scapy_Exception
    from scapy.layers.inet import IP
    from scapy.utils import PcapReader
    SCAPY_AVAILABLE = True
except ImportError:
    SCAPY_AVAILABLE = False

from rfc768 import PROTOCOL_NUMBER
from .records import UdpRecord, decode_udp

logger = logging.getLogger(__name__)


class CaptureFormatError(Exception):
    """Raised when a file cannot be read as a PCAP/PCAPNG capture."""
    pass


@dataclass(frozen=True)
class ReaderConfig:
    limit: int = 0
    """Max UDP records to yield (0 = no limit)"""

    verify_checksums: bool = True
    """Verify non-absent checksums against the IPv4 pseudo-header"""


class UdpPcapReader:
    """
    Iterates the UDP datagrams of a capture file.

    Usage:
        with UdpPcapReader("capture.pcap") as reader:
            for record in reader:
                ...
    """

    def __init__(self, filepath: str, config: Optional[ReaderConfig] = None):
        if not SCAPY_AVAILABLE:
            raise RuntimeError("Scapy not available. Install with: pip install scapy")

        self.filepath = filepath
        self.config = config or ReaderConfig()
        self._reader = None
        self._packets_seen = 0
        self._records = 0
        self._malformed = 0

    def open(self):
        if not os.path.exists(self.filepath):
            raise FileNotFoundError(f"Capture file not found: {self.filepath}")
        try:
            self._reader = PcapReader(self.filepath)
        except Scapy_Exception as e:
            raise CaptureFormatError(f"{self.filepath}: {e}") from e

    def close(self):
        if self._reader is not None:
            self._reader.close()
            self._reader = None

    def __enter__(self) -> "UdpPcapReader":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def __iter__(self) -> Iterator[UdpRecord]:
        if self._reader is None:
            raise RuntimeError("Reader not opened; call open() or use a with block")

        limit = self.config.limit
        for packet in self._reader:
            self._packets_seen += 1
            payload = _udp_payload(packet, self._packets_seen)
            if payload is None:
                continue

            ip = packet[IP]
            record = decode_udp(
                packet_id=self._records + 1,
                timestamp_us=int(round(packet.time * 1_000_000)),
                src_ip=ip.src,
                dst_ip=ip.dst,
                payload=payload,
                verify=self.config.verify_checksums,
            )
            self._records += 1
            if record.error is not None:
                self._malformed += 1
                logger.debug("Frame %d: malformed UDP datagram: %s",
                             self._packets_seen, record.error)
            yield record

            if limit > 0 and self._records >= limit:
                break

    def get_session_info(self) -> Dict[str, Any]:
        return {
            "filepath": self.filepath,
            "packets_seen": self._packets_seen,
            "udp_records": self._records,
            "malformed": self._malformed,
        }


def _udp_payload(packet, frame_number: int) -> Optional[bytes]:
    """Return the IPv4 payload of a UDP packet, or None to skip it."""
    if IP not in packet:
        logger.debug("Frame %d: not IPv4, skipped", frame_number)
        return None
    ip = packet[IP]
    if ip.proto != PROTOCOL_NUMBER:
        logger.debug("Frame %d: IP protocol %d, skipped", frame_number, ip.proto)
        return None
    if ip.frag or ip.flags.MF:
        logger.debug("Frame %d: IP fragment (offset %d, MF=%d), skipped",
                     frame_number, ip.frag, int(ip.flags.MF))
        return None

    raw = bytes(ip)
    end = ip.len if ip.len else len(raw)
    return raw[ip.ihl * 4:end]

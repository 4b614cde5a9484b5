"""
Capture file loading for UDP datagrams.
"""

from .records import ChecksumStatus, UdpRecord, checksum_status, decode_udp
from .udp_reader import CaptureFormatError, ReaderConfig, UdpPcapReader

__all__ = [
    'ChecksumStatus',
    'UdpRecord',
    'checksum_status',
    'decode_udp',
    'CaptureFormatError',
    'ReaderConfig',
    'UdpPcapReader',
]

"""
UDP checksum engine (RFC 768 / RFC 1071).

The checksum is the 16-bit one's complement of the one's complement sum of
the pseudo-header, the UDP header and the payload. The three regions are
summed as separate spans in that fixed order; they are never joined into
one buffer. Each span is paired on its own: an odd span ends with a word
whose low octet is zero, and its last octet is never paired with the next
span's first octet.

A computed value of 0 is transmitted as 0xFFFF, because a transmitted 0
means the sender did not compute a checksum at all.
"""
from dataclasses import dataclass
import struct
from typing import ClassVar, Iterable, Union

from ._fields import check_u16, pack_u16, read_u16, to_octets
from .exceptions import ChecksumError

Span = Union[bytes, bytearray, memoryview, Iterable[int]]

ALL_ONES = 0xFFFF


def sum_words(initial: int, data: Span) -> int:
    """
    Add every big-endian 16-bit word of ``data`` to ``initial``.

    An odd trailing octet is the high octet of a zero-padded word.
    The result is not folded.
    """
    buf = data if isinstance(data, (bytes, bytearray)) else to_octets(data)
    count, odd = divmod(len(buf), 2)
    total = initial
    if count:
        total += sum(struct.unpack_from(f"!{count}H", buf))
    if odd:
        total += buf[-1] << 8
    return total


def fold_carries(total: int) -> int:
    """Fold carries back into the low 16 bits until none remain."""
    # More than one round is needed once the carry itself overflows
    while total > 0xFFFF:
        total = (total & 0xFFFF) + (total >> 16)
    return total


def _span_sum(pseudo: Span, header: Span, data: Span) -> int:
    total = sum_words(0, pseudo)
    total = sum_words(total, header)
    total = sum_words(total, data)
    return fold_carries(total)


def compute_checksum(pseudo: Span, header: Span, data: Span) -> int:
    """
    Compute the checksum over the three spans.

    Args:
        pseudo: Serialized pseudo-header
        header: Serialized UDP header with its checksum field set to zero
        data: Payload

    Returns:
        The checksum in 1..0xFFFF (never 0)
    """
    checksum = ~_span_sum(pseudo, header, data) & 0xFFFF
    if checksum == 0:
        checksum = ALL_ONES
    return checksum


def verify_checksum(pseudo: Span, header: Span, data: Span) -> bool:
    """
    Check a received checksum.

    ``header`` must hold the checksum as transmitted. A correct region sums
    to all ones. An absent (zero) checksum is not special-cased here.
    """
    return _span_sum(pseudo, header, data) == ALL_ONES


@dataclass(frozen=True)
class Checksum:
    """
    Checksum field of a UDP header.

    Every 16-bit value is legal; 0 means no checksum was computed.
    """
    raw_value: int

    ABSENT: ClassVar["Checksum"]

    def __post_init__(self):
        check_u16(self.raw_value, ChecksumError)

    @classmethod
    def from_bytes(cls, data: Iterable[int]) -> "Checksum":
        """Parse a checksum from its first 2 octets (big-endian)."""
        return cls(read_u16(data, ChecksumError))

    @classmethod
    def compute(cls, pseudo: Span, header: Span, data: Span) -> "Checksum":
        return cls(compute_checksum(pseudo, header, data))

    @staticmethod
    def verify(pseudo: Span, header: Span, data: Span) -> bool:
        return verify_checksum(pseudo, header, data)

    @property
    def is_absent(self) -> bool:
        return self.raw_value == 0

    def serialize(self) -> bytes:
        return pack_u16(self.raw_value)

    def __bytes__(self) -> bytes:
        return self.serialize()

    def __int__(self) -> int:
        return self.raw_value

    def __str__(self) -> str:
        return f"0x{self.raw_value:X}"


Checksum.ABSENT = Checksum(0)

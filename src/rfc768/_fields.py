"""
Big-endian 16-bit field helpers shared by the value types.
"""
import struct
from itertools import islice
from typing import Iterable, Type

from .exceptions import _FieldError

_U16 = struct.Struct("!H")


def read_u16(data: Iterable[int], error_cls: Type[_FieldError]) -> int:
    """Read the first two octets of ``data`` as a big-endian integer.

    Only the first two octets are consumed; anything after them is ignored.
    """
    head = bytes(islice(data, 2))
    if not head:
        raise error_cls.empty()
    if len(head) < 2:
        raise error_cls.insufficient_bytes()
    return _U16.unpack(head)[0]


def check_u16(value: int, error_cls: Type[_FieldError]) -> int:
    if not 0 <= value <= 0xFFFF:
        raise error_cls.out_of_range(value)
    return value


def pack_u16(value: int) -> bytes:
    return _U16.pack(value)


def to_octets(data) -> bytes:
    """Coerce a bytes-like object or iterable of octets to bytes.

    A bare int is rejected; ``bytes(n)`` would silently build n zero octets.
    """
    if isinstance(data, int):
        raise TypeError(f"expected bytes or an iterable of octets, got int {data!r}")
    return data if isinstance(data, bytes) else bytes(data)

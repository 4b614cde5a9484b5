"""
Errors raised by the UDP codec.

Every error carries a ``kind`` tag plus the data that tag needs. Composite
errors (header, datagram) wrap the error of the field that failed in
``underlying`` instead of flattening it to a string, so callers can always
tell which field broke. Errors compare equal by type, kind and payload.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

from .constants import HEADER_SIZE, MINIMUM_LENGTH


class PortErrorKind(Enum):
    EMPTY = "empty"
    INSUFFICIENT_BYTES = "insufficient_bytes"
    OUT_OF_RANGE = "out_of_range"


class ChecksumErrorKind(Enum):
    EMPTY = "empty"
    INSUFFICIENT_BYTES = "insufficient_bytes"
    OUT_OF_RANGE = "out_of_range"


class LengthErrorKind(Enum):
    EMPTY = "empty"
    INSUFFICIENT_BYTES = "insufficient_bytes"
    TOO_SHORT = "too_short"
    OUT_OF_RANGE = "out_of_range"


class PseudoHeaderErrorKind(Enum):
    INVALID_ADDRESS = "invalid_address"
    OUT_OF_RANGE = "out_of_range"


class HeaderErrorKind(Enum):
    INSUFFICIENT_BYTES = "insufficient_bytes"
    SOURCE = "source"
    DESTINATION = "destination"
    LENGTH = "length"
    CHECKSUM = "checksum"


class DatagramErrorKind(Enum):
    DATA_TOO_LARGE = "data_too_large"
    LENGTH = "length"
    HEADER = "header"
    INSUFFICIENT_DATA = "insufficient_data"
    LENGTH_MISMATCH = "length_mismatch"


class RFC768Error(ValueError):
    """Base class for all codec errors."""

    kind: Enum

    def _payload(self) -> Tuple:
        return ()

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.kind == other.kind and self._payload() == other._payload()

    def __hash__(self):
        return hash((type(self), self.kind, self._payload()))

    def __repr__(self):
        args = ", ".join(repr(item) for item in self._payload())
        return f"{type(self).__name__}.{self.kind.value}({args})"


class _FieldError(RFC768Error):
    """Shared shape of the 16-bit field errors."""

    label = "Field"

    def __init__(self, kind: Enum, value: Optional[int] = None):
        self.kind = kind
        self.value = value
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.kind.name == "EMPTY":
            return f"{self.label} bytes cannot be empty"
        if self.kind.name == "INSUFFICIENT_BYTES":
            return f"{self.label} requires 2 bytes"
        return f"{self.label} value {self.value} is outside 0..65535"

    def _payload(self) -> Tuple:
        return () if self.value is None else (self.value,)

    @classmethod
    def empty(cls):
        return cls(cls.Kind.EMPTY)

    @classmethod
    def insufficient_bytes(cls):
        return cls(cls.Kind.INSUFFICIENT_BYTES)

    @classmethod
    def out_of_range(cls, value: int):
        return cls(cls.Kind.OUT_OF_RANGE, value)


class PortError(_FieldError):
    Kind = PortErrorKind
    label = "Port"


class ChecksumError(_FieldError):
    Kind = ChecksumErrorKind
    label = "Checksum"


class LengthError(_FieldError):
    Kind = LengthErrorKind
    label = "Length"

    def _describe(self) -> str:
        if self.kind is LengthErrorKind.TOO_SHORT:
            return f"Length {self.value} is less than minimum {MINIMUM_LENGTH}"
        return super()._describe()

    @classmethod
    def too_short(cls, value: int) -> "LengthError":
        return cls(LengthErrorKind.TOO_SHORT, value)


class PseudoHeaderError(RFC768Error):
    Kind = PseudoHeaderErrorKind

    def __init__(self, kind: PseudoHeaderErrorKind, value):
        self.kind = kind
        self.value = value
        if kind is PseudoHeaderErrorKind.INVALID_ADDRESS:
            message = f"Invalid IPv4 address: {value!r}"
        else:
            message = f"Pseudo-header length {value} is outside 0..65535"
        super().__init__(message)

    def _payload(self) -> Tuple:
        return (self.value,)

    @classmethod
    def invalid_address(cls, value) -> "PseudoHeaderError":
        return cls(PseudoHeaderErrorKind.INVALID_ADDRESS, value)

    @classmethod
    def out_of_range(cls, value: int) -> "PseudoHeaderError":
        return cls(PseudoHeaderErrorKind.OUT_OF_RANGE, value)


class HeaderError(RFC768Error):
    Kind = HeaderErrorKind

    def __init__(self, kind: HeaderErrorKind, count: Optional[int] = None,
                 underlying: Optional[RFC768Error] = None):
        self.kind = kind
        self.count = count
        self.underlying = underlying
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.kind is HeaderErrorKind.INSUFFICIENT_BYTES:
            return f"Header requires {HEADER_SIZE} bytes, got {self.count}"
        field = {
            HeaderErrorKind.SOURCE: "source port",
            HeaderErrorKind.DESTINATION: "destination port",
            HeaderErrorKind.LENGTH: "length",
            HeaderErrorKind.CHECKSUM: "checksum",
        }[self.kind]
        return f"Invalid {field}: {self.underlying}"

    def _payload(self) -> Tuple:
        if self.kind is HeaderErrorKind.INSUFFICIENT_BYTES:
            return (self.count,)
        return (self.underlying,)

    @classmethod
    def insufficient_bytes(cls, count: int) -> "HeaderError":
        return cls(HeaderErrorKind.INSUFFICIENT_BYTES, count=count)

    @classmethod
    def source(cls, error: PortError) -> "HeaderError":
        return cls(HeaderErrorKind.SOURCE, underlying=error)

    @classmethod
    def destination(cls, error: PortError) -> "HeaderError":
        return cls(HeaderErrorKind.DESTINATION, underlying=error)

    @classmethod
    def length(cls, error: LengthError) -> "HeaderError":
        return cls(HeaderErrorKind.LENGTH, underlying=error)

    @classmethod
    def checksum(cls, error: ChecksumError) -> "HeaderError":
        return cls(HeaderErrorKind.CHECKSUM, underlying=error)


class DatagramError(RFC768Error):
    Kind = DatagramErrorKind

    def __init__(self, kind: DatagramErrorKind, size: Optional[int] = None,
                 underlying: Optional[RFC768Error] = None,
                 expected: Optional[int] = None, got: Optional[int] = None):
        self.kind = kind
        self.size = size
        self.underlying = underlying
        self.expected = expected
        self.got = got
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.kind is DatagramErrorKind.DATA_TOO_LARGE:
            return f"Data too large: {self.size} bytes exceeds maximum"
        if self.kind is DatagramErrorKind.LENGTH:
            return f"Invalid length: {self.underlying}"
        if self.kind is DatagramErrorKind.HEADER:
            return f"Invalid header: {self.underlying}"
        if self.kind is DatagramErrorKind.INSUFFICIENT_DATA:
            return f"Insufficient data: expected {self.expected} bytes, got {self.got}"
        return (f"Length field declares {self.expected} data bytes, "
                f"payload has {self.got}")

    def _payload(self) -> Tuple:
        if self.kind is DatagramErrorKind.DATA_TOO_LARGE:
            return (self.size,)
        if self.kind in (DatagramErrorKind.LENGTH, DatagramErrorKind.HEADER):
            return (self.underlying,)
        return (self.expected, self.got)

    @classmethod
    def data_too_large(cls, size: int) -> "DatagramError":
        return cls(DatagramErrorKind.DATA_TOO_LARGE, size=size)

    @classmethod
    def length(cls, error: LengthError) -> "DatagramError":
        return cls(DatagramErrorKind.LENGTH, underlying=error)

    @classmethod
    def header(cls, error: HeaderError) -> "DatagramError":
        return cls(DatagramErrorKind.HEADER, underlying=error)

    @classmethod
    def insufficient_data(cls, expected: int, got: int) -> "DatagramError":
        return cls(DatagramErrorKind.INSUFFICIENT_DATA, expected=expected, got=got)

    @classmethod
    def length_mismatch(cls, declared: int, actual: int) -> "DatagramError":
        return cls(DatagramErrorKind.LENGTH_MISMATCH, expected=declared, got=actual)

"""A byte container for serialising values the way service messages carry them.

Every value is aligned to four bytes and stored little-endian. Booleans are
written as 32-bit integers; strings as a 32-bit byte length followed by the
UTF-8 bytes, a terminating zero byte and padding.
"""

import operator
import struct

_ALIGN = 4

_INT32 = struct.Struct("<i")
_UINT32 = struct.Struct("<I")
_INT64 = struct.Struct("<q")


class ParcelError(Exception):
    """Raised when a value cannot be written to or read from a parcel."""


class Parcel:
    """Sequential writer and reader over one byte buffer."""

    def __init__(self, data=b""):
        self._buffer = bytearray(data)
        self._read_pos = 0

    def __len__(self):
        return len(self._buffer)

    def _write_packed(self, codec, value):
        try:
            number = operator.index(value)
        except TypeError as exc:
            raise ParcelError(f"not an integer: {value!r}") from exc
        try:
            self._buffer += codec.pack(number)
        except struct.error as exc:
            raise ParcelError(f"value out of range: {number}") from exc

    def _take(self, size):
        end = self._read_pos + size
        if end > len(self._buffer):
            raise ParcelError(
                f"need {size} bytes at offset {self._read_pos}, "
                f"only {len(self._buffer) - self._read_pos} left"
            )
        chunk = bytes(self._buffer[self._read_pos:end])
        self._read_pos = end
        return chunk

    def write_string(self, value):
        if not isinstance(value, str):
            raise ParcelError(f"not a string: {value!r}")
        encoded = value.encode("utf-8")
        self._write_packed(_INT32, len(encoded))
        body = encoded + b"\x00"
        body += b"\x00" * (-len(body) % _ALIGN)
        self._buffer += body

    def write_bool(self, value):
        self._write_packed(_INT32, 1 if value else 0)

    def write_int32(self, value):
        self._write_packed(_INT32, value)

    def write_uint32(self, value):
        self._write_packed(_UINT32, value)

    def write_int64(self, value):
        self._write_packed(_INT64, value)

    def read_string(self):
        length = self.read_int32()
        if length < 0:
            raise ParcelError(f"invalid string length {length}")
        padded = length + 1
        padded += -padded % _ALIGN
        body = self._take(padded)
        try:
            return body[:length].decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ParcelError("string is not valid UTF-8") from exc

    def read_bool(self):
        return self.read_int32() != 0

    def read_int32(self):
        return _INT32.unpack(self._take(_INT32.size))[0]

    def read_uint32(self):
        return _UINT32.unpack(self._take(_UINT32.size))[0]

    def read_int64(self):
        return _INT64.unpack(self._take(_INT64.size))[0]

    def rewind(self, position=0):
        """Move the read cursor to ``position``."""
        if not 0 <= position <= len(self._buffer):
            raise ParcelError(f"position {position} outside parcel of {len(self._buffer)} bytes")
        self._read_pos = position

    def to_bytes(self):
        return bytes(self._buffer)
"""Big-endian binary primitives used by the book file format."""

from __future__ import annotations

import struct
from typing import BinaryIO

_INT32 = struct.Struct(">i")
_UINT32 = struct.Struct(">I")
_NULL_STRING = 0xFFFFFFFF


class DataStreamError(ValueError):
    """Raised when a stream holds truncated or malformed data."""


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size) or b""
    if len(data) != size:
        raise DataStreamError(f"expected {size} bytes, got {len(data)}")
    return data


def write_int32(stream: BinaryIO, value: int) -> None:
    """Write a signed 32-bit big-endian integer."""
    try:
        packed = _INT32.pack(value)
    except struct.error as exc:
        raise DataStreamError(f"cannot store {value!r} as int32") from exc
    stream.write(packed)


def read_int32(stream: BinaryIO) -> int:
    """Read a signed 32-bit big-endian integer."""
    (value,) = _INT32.unpack(_read_exact(stream, _INT32.size))
    return value


def write_qstring(stream: BinaryIO, text: str | None) -> None:
    """Write a string as a byte length followed by UTF-16BE data.

    ``None`` is written as the null-string marker.
    """
    if text is None:
        stream.write(_UINT32.pack(_NULL_STRING))
        return
    encoded = text.encode("utf-16-be", "surrogatepass")
    stream.write(_UINT32.pack(len(encoded)))
    stream.write(encoded)


def read_qstring(stream: BinaryIO) -> str | None:
    """Read a string written by :func:`write_qstring`; the null marker gives ``None``."""
    (length,) = _UINT32.unpack(_read_exact(stream, _UINT32.size))
    if length == _NULL_STRING:
        return None
    if length % 2:
        raise DataStreamError(f"odd UTF-16 byte length {length}")
    return _read_exact(stream, length).decode("utf-16-be", "surrogatepass")
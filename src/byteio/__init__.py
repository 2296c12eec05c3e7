"""byteio: fixed-width binary number codec

Read and write fixed-width numbers (u8-u64, i8-i64, f32, f64, bool) from and
to byte windows in big-endian or little-endian order, and lists of them.

Key Features:
- Four entry points: read_be, read_le, write_be, write_le
- Codec objects select the type at the call site (U32, F64, ListOf(U16), ...)
- Works in place on bytearray, memoryview, array and mmap windows
- Fails before writing anything when a window is too small

Quick Start:
    >>> from byteio import U16, U32, ListOf, read_be, read_le, write_be, write_le
    >>>
    >>> data = bytes([0x00, 0x00, 0x01, 0x01, 0xAB, 0xCD, 0xEF, 0x89])
    >>> read_be(U32, data) == 0x0101
    True
    >>> read_le(U16, data, offset=4) == 0xCDAB
    True
    >>>
    >>> buf = bytearray(8)
    >>> write_be(U32, 0xABCDEF, buf)
    >>> write_le(U32, 0xABCDEF, buf, offset=4)
    >>> buf.hex()
    '00abcdefefcdab00'
    >>> read_le(ListOf(U16), buf[0:4])
    [43776, 61389]
"""

from __future__ import annotations

__version__ = "0.1.0"

from .codec import (
    F32,
    F64,
    I8,
    I16,
    I32,
    I64,
    U8,
    U16,
    U32,
    U64,
    Bool,
    BoolCodec,
    ByteOrder,
    Codec,
    Decoder,
    Encoder,
    FloatCodec,
    IntCodec,
    ListOf,
    ScalarCodec,
    read,
    read_be,
    read_le,
    write,
    write_be,
    write_le,
)
from .exceptions import BufferTooSmall, ByteIOError, EncodeError, UnknownCodecError
from .registry import CODEC_REGISTRY, get_codec, register_codec
from .utils import check_window, element_count, encoded_size

__all__ = [
    # Core API
    "read_be",
    "read_le",
    "write_be",
    "write_le",
    "read",
    "write",
    "ByteOrder",
    # Capabilities
    "Decoder",
    "Encoder",
    "Codec",
    "ScalarCodec",
    "IntCodec",
    "FloatCodec",
    "BoolCodec",
    "ListOf",
    # Scalar codecs
    "U8",
    "U16",
    "U32",
    "U64",
    "I8",
    "I16",
    "I32",
    "I64",
    "F32",
    "F64",
    "Bool",
    # Exceptions
    "ByteIOError",
    "BufferTooSmall",
    "EncodeError",
    "UnknownCodecError",
    # Registry
    "CODEC_REGISTRY",
    "register_codec",
    "get_codec",
    # Sizing
    "encoded_size",
    "element_count",
    "check_window",
    # Version
    "__version__",
]

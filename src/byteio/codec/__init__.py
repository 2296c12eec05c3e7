"""Fixed-width binary codec for byteio.

This module provides the scalar codecs, the list adapter and the
read/write entry points.
"""

from __future__ import annotations

from .base import ByteOrder, Codec, Decoder, Encoder
from .decoder import read, read_be, read_le
from .encoder import write, write_be, write_le
from .scalar import (
    F32,
    F64,
    I8,
    I16,
    I32,
    I64,
    SCALAR_CODECS,
    U8,
    U16,
    U32,
    U64,
    Bool,
    BoolCodec,
    FloatCodec,
    IntCodec,
    ScalarCodec,
)
from .sequence import ListOf

__all__ = [
    "ByteOrder",
    "Codec",
    "Decoder",
    "Encoder",
    "ScalarCodec",
    "IntCodec",
    "FloatCodec",
    "BoolCodec",
    "ListOf",
    "SCALAR_CODECS",
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
    "read",
    "read_be",
    "read_le",
    "write",
    "write_be",
    "write_le",
]

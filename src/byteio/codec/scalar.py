"""Fixed-width scalar codecs.

This module provides the leaf codecs: unsigned and signed integers of
8/16/32/64 bits, IEEE-754 single and double precision floats, and booleans.

Integers are composed byte by byte in stream order; signed values use two's
complement. Floats go through the same-width unsigned integer codec, so their
bit pattern (including NaN payloads and signed zero) is carried unchanged.

Example:
    >>> buf = bytearray(4)
    >>> U16.encode(0x1234, buf, ByteOrder.LITTLE, offset=2)
    >>> buf.hex()
    '00003412'
    >>> U16.decode(buf, ByteOrder.LITTLE, offset=2) == 0x1234
    True
"""

from __future__ import annotations

import math
import struct
from abc import abstractmethod
from dataclasses import dataclass, field
from typing import Annotated, Any, Optional

from pydantic import Field, TypeAdapter, ValidationError

from ..exceptions import EncodeError
from .base import ByteOrder, Codec, Window, byte_view, require, writable_view


@dataclass(frozen=True)
class ScalarCodec(Codec):
    """Codec for a single value of fixed byte width.

    Subclasses implement ``_unpack`` and ``_pack``; window handling, bounds
    checks and offsets are done here.

    Attributes:
        name: Short type name used in messages and the registry (e.g. "u32")
        width: Encoded size in bytes
    """

    name: str
    width: int

    def decode(self, window: Window, order: ByteOrder, *, offset: int = 0) -> Any:
        order = ByteOrder.parse(order)
        view = byte_view(window)
        require(view, offset, self.width)
        return self._unpack(bytes(view[offset : offset + self.width]), order)

    def encode(self, value: Any, window: Window, order: ByteOrder, *, offset: int = 0) -> None:
        order = ByteOrder.parse(order)
        view = writable_view(window)
        require(view, offset, self.width)
        raw = self._pack(value, order)
        view[offset : offset + self.width] = raw

    def encoded_size(self, value: Any = None) -> int:
        return self.width

    def count(self, nbytes: int) -> int:
        return 1 if nbytes >= self.width else 0

    @abstractmethod
    def _unpack(self, raw: bytes, order: ByteOrder) -> Any:
        """Convert exactly ``width`` bytes in stream order to a value."""

    @abstractmethod
    def _pack(self, value: Any, order: ByteOrder) -> bytes:
        """Convert a value to exactly ``width`` bytes in stream order.

        Raises:
            EncodeError: If the value is not representable
        """


@dataclass(frozen=True)
class IntCodec(ScalarCodec):
    """Codec for a fixed-width integer.

    Values are range checked against the width before encoding. Signed
    integers are stored in two's complement.

    Attributes:
        signed: Whether the integer is signed
    """

    signed: bool = False
    _adapter: TypeAdapter = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        constraint = Field(strict=True, ge=self.min_value, le=self.max_value)
        object.__setattr__(self, "_adapter", TypeAdapter(Annotated[int, constraint]))

    @property
    def bits(self) -> int:
        return self.width * 8

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def validate(self, value: Any) -> int:
        """Validate that ``value`` is an integer within range.

        Raises:
            EncodeError: If value is not an int or is out of range
        """
        try:
            return self._adapter.validate_python(value)
        except ValidationError as err:
            raise EncodeError(
                f"{self.name}: cannot encode {value!r} "
                f"(expected int in [{self.min_value}, {self.max_value}])"
            ) from err

    def _unpack(self, raw: bytes, order: ByteOrder) -> int:
        value = 0
        for byte in raw if order is ByteOrder.BIG else reversed(raw):
            value = (value << 8) | byte

        # Sign bit set: convert from two's complement
        if self.signed and value & (1 << (self.bits - 1)):
            value -= 1 << self.bits
        return value

    def _pack(self, value: Any, order: ByteOrder) -> bytes:
        value = self.validate(value)
        if value < 0:
            value += 1 << self.bits

        if order is ByteOrder.BIG:
            shifts = range(self.bits - 8, -1, -8)
        else:
            shifts = range(0, self.bits, 8)
        return bytes((value >> shift) & 0xFF for shift in shifts)

    def parse_text(self, text: str) -> int:
        # Base 0 accepts 0x/0o/0b prefixes
        return int(text, 0)


# Exponent and mantissa bit counts per struct float format
FLOAT_LAYOUTS = {"e": (5, 10), "f": (8, 23), "d": (11, 52)}
_F64_MANTISSA_BITS = 52


@dataclass(frozen=True)
class FloatCodec(ScalarCodec):
    """Codec for an IEEE-754 float.

    The float is reinterpreted as the same-width unsigned integer, which is
    then encoded with the integer algorithm. NaNs of formats narrower than a
    double are widened and narrowed by hand, so signalling NaNs and their
    payloads keep every bit.

    Attributes:
        fmt: struct format character ("e", "f" or "d")
        uint: Unsigned integer codec of the same width; derived when omitted
    """

    fmt: str = "d"
    uint: Optional[IntCodec] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.fmt not in FLOAT_LAYOUTS:
            raise ValueError(f"{self.name}: unsupported float format {self.fmt!r}")

        size = struct.calcsize(">" + self.fmt)
        if size != self.width:
            raise ValueError(
                f"{self.name}: format {self.fmt!r} packs {size} bytes, width is {self.width}"
            )

        if self.uint is None:
            object.__setattr__(self, "uint", IntCodec(f"u{self.width * 8}", self.width))
        elif self.uint.width != self.width or self.uint.signed:
            raise ValueError(f"{self.name}: uint must be an unsigned {self.width}-byte codec")

    @property
    def exponent_bits(self) -> int:
        return FLOAT_LAYOUTS[self.fmt][0]

    @property
    def mantissa_bits(self) -> int:
        return FLOAT_LAYOUTS[self.fmt][1]

    def _unpack(self, raw: bytes, order: ByteOrder) -> float:
        pattern = self.uint._unpack(raw, order)
        if self.mantissa_bits < _F64_MANTISSA_BITS and self._is_nan(pattern):
            return self._widen_nan(pattern)
        return struct.unpack(">" + self.fmt, pattern.to_bytes(self.width, "big"))[0]

    def _pack(self, value: Any, order: ByteOrder) -> bytes:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise EncodeError(f"{self.name}: expected float, got {type(value).__name__}")

        narrow = self.mantissa_bits < _F64_MANTISSA_BITS
        if narrow and isinstance(value, float) and math.isnan(value):
            return self.uint._pack(self._narrow_nan(value), order)

        try:
            packed = struct.pack(">" + self.fmt, value)
        except (OverflowError, struct.error) as err:
            raise EncodeError(f"{self.name}: cannot encode {value!r}: {err}") from err

        return self.uint._pack(int.from_bytes(packed, "big"), order)

    def _is_nan(self, pattern: int) -> bool:
        exponent = (pattern >> self.mantissa_bits) & ((1 << self.exponent_bits) - 1)
        mantissa = pattern & ((1 << self.mantissa_bits) - 1)
        return exponent == (1 << self.exponent_bits) - 1 and mantissa != 0

    def _widen_nan(self, pattern: int) -> float:
        # struct sets the quiet bit when widening, so build the double directly
        sign = pattern >> (self.width * 8 - 1)
        mantissa = pattern & ((1 << self.mantissa_bits) - 1)
        bits = (
            (sign << 63)
            | (0x7FF << _F64_MANTISSA_BITS)
            | (mantissa << (_F64_MANTISSA_BITS - self.mantissa_bits))
        )
        return struct.unpack(">d", bits.to_bytes(8, "big"))[0]

    def _narrow_nan(self, value: float) -> int:
        bits = int.from_bytes(struct.pack(">d", value), "big")
        sign = bits >> 63
        mantissa = (bits & ((1 << _F64_MANTISSA_BITS) - 1)) >> (
            _F64_MANTISSA_BITS - self.mantissa_bits
        )
        if mantissa == 0:
            # Payload lived only in the dropped low bits; keep it a quiet NaN
            mantissa = 1 << (self.mantissa_bits - 1)
        exponent = (1 << self.exponent_bits) - 1
        return (sign << (self.width * 8 - 1)) | (exponent << self.mantissa_bits) | mantissa

    def parse_text(self, text: str) -> float:
        return float(text)


@dataclass(frozen=True)
class BoolCodec(ScalarCodec):
    """Codec for a boolean stored in one byte.

    Any nonzero byte decodes to True. Byte order has no effect.
    """

    width: int = 1

    def _unpack(self, raw: bytes, order: ByteOrder) -> bool:
        return raw[0] != 0

    def _pack(self, value: Any, order: ByteOrder) -> bytes:
        if not isinstance(value, bool):
            raise EncodeError(f"{self.name}: expected bool, got {type(value).__name__}")
        return b"\x01" if value else b"\x00"

    def parse_text(self, text: str) -> bool:
        key = text.strip().lower()
        if key in ("true", "1", "yes"):
            return True
        if key in ("false", "0", "no"):
            return False
        raise ValueError(f"Invalid bool value: {text!r}. Must be true/false or 1/0")


U8 = IntCodec("u8", 1)
U16 = IntCodec("u16", 2)
U32 = IntCodec("u32", 4)
U64 = IntCodec("u64", 8)

I8 = IntCodec("i8", 1, signed=True)
I16 = IntCodec("i16", 2, signed=True)
I32 = IntCodec("i32", 4, signed=True)
I64 = IntCodec("i64", 8, signed=True)

F32 = FloatCodec("f32", 4, fmt="f", uint=U32)
F64 = FloatCodec("f64", 8, fmt="d", uint=U64)

Bool = BoolCodec("bool")

SCALAR_CODECS: tuple[ScalarCodec, ...] = (U8, U16, U32, U64, I8, I16, I32, I64, F32, F64, Bool)

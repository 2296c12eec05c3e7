"""Encoding entry points.

This module provides write_be() and write_le(), which encode a value into a
caller-owned byte window using the codec named at the call site.
"""

from __future__ import annotations

from typing import TypeVar, Union

from .base import ByteOrder, Encoder, Window

T = TypeVar("T")


def write(
    codec: Encoder[T], value: T, window: Window, order: Union[ByteOrder, str], *, offset: int = 0
) -> None:
    """Encode a value into a byte window in the given byte order.

    Exactly the bytes the value needs are written starting at ``offset``;
    the rest of the window is left as it was. Nothing is written if the
    window is too small or the value is not representable.

    Args:
        codec: Codec naming the type to encode (e.g. U32, ListOf(U16))
        value: Value to encode
        window: Writable bytes-like object (bytearray, memoryview, array)
        order: ByteOrder, or one of "big", "little", "be", "le"
        offset: Position in the window to start writing at

    Raises:
        BufferTooSmall: If the window is too short for the value
        EncodeError: If the value is out of range or of the wrong type
        TypeError: If the window is read-only
        ValueError: If order is invalid or offset is negative
    """
    codec.encode(value, window, ByteOrder.parse(order), offset=offset)


def write_be(codec: Encoder[T], value: T, window: Window, *, offset: int = 0) -> None:
    """Encode a value into a byte window as big-endian.

    Raises:
        BufferTooSmall: If the window does not have enough space

    Example:
        >>> buf = bytearray(8)
        >>> write_be(U64, 1, buf)
        >>> list(buf)
        [0, 0, 0, 0, 0, 0, 0, 1]
    """
    codec.encode(value, window, ByteOrder.BIG, offset=offset)


def write_le(codec: Encoder[T], value: T, window: Window, *, offset: int = 0) -> None:
    """Encode a value into a byte window as little-endian.

    Raises:
        BufferTooSmall: If the window does not have enough space

    Example:
        >>> buf = bytearray(8)
        >>> write_le(U64, 1, buf)
        >>> list(buf)
        [1, 0, 0, 0, 0, 0, 0, 0]
    """
    codec.encode(value, window, ByteOrder.LITTLE, offset=offset)

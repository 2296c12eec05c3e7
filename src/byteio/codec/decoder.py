"""Decoding entry points.

This module provides read_be() and read_le(), which decode a value of the
type named by the codec argument from a byte window.
"""

from __future__ import annotations

from typing import TypeVar, Union

from .base import ByteOrder, Decoder, Window

T = TypeVar("T")


def read(
    codec: Decoder[T], window: Window, order: Union[ByteOrder, str], *, offset: int = 0
) -> T:
    """Decode a value from a byte window in the given byte order.

    Only the bytes the codec needs are read; anything after them is ignored,
    so a value can be read from the front of a larger buffer.

    Args:
        codec: Codec naming the type to decode (e.g. U32, ListOf(U16))
        window: Bytes-like object to read from
        order: ByteOrder, or one of "big", "little", "be", "le"
        offset: Position in the window to start reading at

    Returns:
        Decoded value

    Raises:
        BufferTooSmall: If the window is too short for the codec
        ValueError: If order is invalid or offset is negative
    """
    return codec.decode(window, ByteOrder.parse(order), offset=offset)


def read_be(codec: Decoder[T], window: Window, *, offset: int = 0) -> T:
    """Decode a big-endian value from a byte window.

    Raises:
        BufferTooSmall: If the window does not contain enough bytes

    Example:
        >>> data = bytes([0xAB, 0xCD, 0xEF, 0x01, 0x23])
        >>> hex(read_be(U32, data))
        '0xabcdef01'
        >>> hex(read_be(I16, data, offset=3))
        '0x123'
    """
    return codec.decode(window, ByteOrder.BIG, offset=offset)


def read_le(codec: Decoder[T], window: Window, *, offset: int = 0) -> T:
    """Decode a little-endian value from a byte window.

    Raises:
        BufferTooSmall: If the window does not contain enough bytes

    Example:
        >>> data = bytes([0xAB, 0xCD, 0xEF, 0x01, 0x23])
        >>> hex(read_le(U32, data))
        '0x1efcdab'
        >>> hex(read_le(I16, data, offset=3))
        '0x2301'
    """
    return codec.decode(window, ByteOrder.LITTLE, offset=offset)

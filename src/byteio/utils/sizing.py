"""Window size calculation utilities.

This module provides functions to check how many bytes a codec needs before
calling it, so callers can validate record sizes up front instead of handling
BufferTooSmall.
"""

from __future__ import annotations

from typing import Any

from ..codec.base import Codec, Window, byte_view, check_offset, require, writable_view


def encoded_size(codec: Codec, value: Any = None) -> int:
    """Calculate the number of bytes encoding ``value`` writes.

    Scalars always need their width. Lists need ``len(value)`` times the
    element width, so the value is required for them.

    Args:
        codec: Codec to size
        value: Value to encode (required for ListOf)

    Returns:
        Size in bytes

    Raises:
        TypeError: If the size depends on a value that was not given

    Example:
        >>> encoded_size(U32)
        4
        >>> encoded_size(ListOf(U16), [1, 2, 3])
        6
    """
    return codec.encoded_size(value)


def element_count(codec: Codec, window_or_length: Window | int, *, offset: int = 0) -> int:
    """Calculate how many values a decode would produce.

    For a list codec this is the number of whole element slots after
    ``offset``. For a scalar codec it is 1 if the value fits, else 0.

    Args:
        codec: Codec to decode with
        window_or_length: Byte window, or its length in bytes
        offset: Position decoding would start at

    Returns:
        Number of values

    Raises:
        ValueError: If offset is negative

    Example:
        >>> element_count(ListOf(U32), 10)
        2
        >>> element_count(U64, b"\\x00" * 4)
        0
    """
    check_offset(offset)
    if isinstance(window_or_length, int):
        length = window_or_length
    else:
        length = len(byte_view(window_or_length))
    return codec.count(length - offset)


def check_window(codec: Codec, window: Window, value: Any = None, *, offset: int = 0) -> None:
    """Check that a window is large enough for a decode or encode.

    With ``value`` None the check matches what decoding needs; otherwise it
    matches encoding ``value`` and also requires a writable window.

    Args:
        codec: Codec that will be used
        window: Byte window to check
        value: Value that will be encoded, or None for a decode check
        offset: Position the operation will start at

    Raises:
        BufferTooSmall: If the operation would fail for lack of space
        TypeError: If an encode check is made against a read-only window
        ValueError: If offset is negative
    """
    if value is None:
        # List decodes only need the offset to be inside the window
        size = codec.width if codec.width is not None else 0
        require(byte_view(window), offset, size)
    else:
        require(writable_view(window), offset, codec.encoded_size(value))

"""Exception hierarchy for byteio.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from ByteIOError for easy catching of any byteio-specific error.
"""

from __future__ import annotations


class ByteIOError(Exception):
    """Base exception for all byteio errors."""

    pass


class BufferTooSmall(ByteIOError, IndexError):
    """Raised when a byte window is shorter than a codec requires.

    The check happens before any byte of the output window is written, so a
    failed encode never leaves a partially written value behind.

    Examples:
        - Decoding a u32 from a 3-byte window
        - Encoding a 3-element u16 list into a 4-byte window
        - Reading at an offset past the end of the window

    Attributes:
        required: Number of bytes the operation needs after ``offset``
        window_size: Total length of the window in bytes
        offset: Position in the window where the operation starts
    """

    def __init__(self, required: int, window_size: int, offset: int = 0) -> None:
        self.required = required
        self.window_size = window_size
        self.offset = offset
        super().__init__(
            f"Window too small: need {required} byte(s) at offset {offset}, "
            f"window holds {window_size} byte(s)"
        )


class EncodeError(ByteIOError, ValueError):
    """Raised when a value cannot be represented by a codec.

    Examples:
        - Integer out of range for the codec width (e.g. 256 as u8)
        - Wrong value type (e.g. a string for an integer codec)
        - Float too large for single precision
    """

    pass


class UnknownCodecError(ByteIOError, KeyError):
    """Raised when a codec name is not present in the registry."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""

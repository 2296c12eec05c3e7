"""Codec capabilities and shared byte-window handling.

This module defines the two capabilities every codec provides:

- ``Decoder``: turns a byte window into a value for a given byte order
- ``Encoder``: writes a value into a byte window for a given byte order

``Codec`` is the abstract base that concrete scalar codecs and the sequence
adapter derive from. Any other object that satisfies the protocols can be
passed to the entry points as well.
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import Any, Optional, Protocol, TypeVar, Union, runtime_checkable

from ..exceptions import BufferTooSmall

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)
T_contra = TypeVar("T_contra", contravariant=True)

# Anything exposing the buffer protocol: bytes, bytearray, memoryview, array, mmap
Window = Any


class ByteOrder(str, enum.Enum):
    """Byte order of a multi-byte value in the stream.

    The values match the ``byteorder`` argument of ``int.to_bytes``.
    """

    BIG = "big"
    LITTLE = "little"

    @classmethod
    def parse(cls, value: Union[ByteOrder, str]) -> ByteOrder:
        """Normalize a byte order given as enum member or string.

        Accepts ``"big"``, ``"little"``, ``"be"`` and ``"le"`` (any case).

        Raises:
            ValueError: If the string names no byte order
        """
        if isinstance(value, ByteOrder):
            return value

        key = str(value).strip().lower()
        if key in ("big", "be"):
            return cls.BIG
        if key in ("little", "le"):
            return cls.LITTLE

        raise ValueError(f"Invalid byte order: {value!r}. Must be 'big', 'little', 'be' or 'le'")


@runtime_checkable
class Decoder(Protocol[T_co]):
    """Capability to decode a value from a byte window."""

    def decode(self, window: Window, order: ByteOrder, *, offset: int = 0) -> T_co: ...


@runtime_checkable
class Encoder(Protocol[T_contra]):
    """Capability to encode a value into a byte window."""

    def encode(self, value: T_contra, window: Window, order: ByteOrder, *, offset: int = 0) -> None: ...


def byte_view(window: Window) -> memoryview:
    """Return a flat, byte-addressed view over ``window`` without copying.

    Buffers with multi-byte items (``array('I')``, typed memoryviews) are
    reinterpreted as raw bytes.

    Raises:
        TypeError: If ``window`` does not support the buffer protocol
    """
    view = memoryview(window)
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view


def check_offset(offset: int) -> None:
    if offset < 0:
        raise ValueError(f"offset must be >= 0, got {offset}")


def require(view: memoryview, offset: int, size: int) -> None:
    """Check that ``size`` bytes are available at ``offset``.

    Raises:
        ValueError: If offset is negative
        BufferTooSmall: If the window ends before ``offset + size``
    """
    check_offset(offset)
    if len(view) - offset < size:
        raise BufferTooSmall(size, len(view), offset)


def writable_view(window: Window) -> memoryview:
    """Return a byte view over ``window`` that accepts writes.

    Raises:
        TypeError: If ``window`` is read-only (e.g. ``bytes``)
    """
    view = byte_view(window)
    if view.readonly:
        raise TypeError(f"Cannot encode into read-only window of type {type(window).__name__}")
    return view


class Codec(ABC):
    """Base class for all codecs.

    Subclasses provide ``name`` and ``width`` (bytes per value, or None when
    the encoded size depends on the value) and implement ``decode`` and
    ``encode``. The ``from_*``/``to_*`` helpers and sizing methods are shared.
    """

    name: str
    width: Optional[int]

    @abstractmethod
    def decode(self, window: Window, order: ByteOrder, *, offset: int = 0) -> Any:
        """Decode a value from ``window`` starting at ``offset``.

        Raises:
            BufferTooSmall: If the window is too short
        """

    @abstractmethod
    def encode(self, value: Any, window: Window, order: ByteOrder, *, offset: int = 0) -> None:
        """Encode ``value`` into ``window`` starting at ``offset``.

        Raises:
            BufferTooSmall: If the window is too short (nothing is written)
            EncodeError: If the value is not representable (nothing is written)
        """

    @abstractmethod
    def encoded_size(self, value: Any = None) -> int:
        """Return the number of bytes ``encode`` writes for ``value``."""

    @abstractmethod
    def count(self, nbytes: int) -> int:
        """Return how many values ``decode`` yields from ``nbytes`` bytes."""

    def parse_text(self, text: str) -> Any:
        """Parse a value from its command-line text form.

        Raises:
            TypeError: If the codec has no text form
        """
        raise TypeError(f"{self.name} values cannot be parsed from text")

    def from_be(self, window: Window, *, offset: int = 0) -> Any:
        return self.decode(window, ByteOrder.BIG, offset=offset)

    def from_le(self, window: Window, *, offset: int = 0) -> Any:
        return self.decode(window, ByteOrder.LITTLE, offset=offset)

    def to_be(self, value: Any, window: Window, *, offset: int = 0) -> None:
        self.encode(value, window, ByteOrder.BIG, offset=offset)

    def to_le(self, value: Any, window: Window, *, offset: int = 0) -> None:
        self.encode(value, window, ByteOrder.LITTLE, offset=offset)

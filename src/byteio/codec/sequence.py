"""Sequence adapter over fixed-width codecs.

``ListOf`` lifts any codec with a fixed ``width`` to lists of values. The
window is split into consecutive slots of the element width; slot ``i`` holds
element ``i``. No length field is written: on decode the number of elements is
the window length divided by the element width, and trailing bytes that do not
fill a whole slot are ignored.

Example:
    >>> buf = bytearray(8)
    >>> ListOf(U16).encode([0x1234, 0x5678], buf, ByteOrder.LITTLE)
    >>> buf.hex()
    '3412785600000000'
    >>> ListOf(U32).decode(buf, ByteOrder.BIG, offset=4)
    [0]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..exceptions import EncodeError
from .base import ByteOrder, Codec, Window, byte_view, require, writable_view


@dataclass(frozen=True)
class ListOf(Codec):
    """Codec for a list of values sharing one fixed-width element codec.

    Attributes:
        element: Codec used for every element; must have a fixed width
    """

    element: Codec

    def __post_init__(self) -> None:
        width = getattr(self.element, "width", None)
        if not isinstance(width, int) or width < 1:
            raise TypeError(
                f"ListOf requires an element codec with a fixed width, "
                f"got {getattr(self.element, 'name', self.element)!r}"
            )

    @property
    def name(self) -> str:  # type: ignore[override]
        return f"{self.element.name}[]"

    @property
    def width(self) -> Optional[int]:  # type: ignore[override]
        return None

    @property
    def element_width(self) -> int:
        return self.element.width  # type: ignore[return-value]

    def decode(self, window: Window, order: ByteOrder, *, offset: int = 0) -> list[Any]:
        order = ByteOrder.parse(order)
        view = byte_view(window)
        require(view, offset, 0)

        step = self.element_width
        return [
            self.element.decode(view, order, offset=offset + i * step)
            for i in range(self.count(len(view) - offset))
        ]

    def encode(self, value: Any, window: Window, order: ByteOrder, *, offset: int = 0) -> None:
        order = ByteOrder.parse(order)
        view = writable_view(window)
        size = self.encoded_size(value)
        require(view, offset, size)

        # Stage every element first so a bad element leaves the window untouched
        scratch = bytearray(size)
        step = self.element_width
        for i, item in enumerate(value):
            self.element.encode(item, scratch, order, offset=i * step)

        view[offset : offset + size] = scratch

    def encoded_size(self, value: Any = None) -> int:
        if value is None:
            raise TypeError(f"{self.name}: encoded size depends on the value; pass the list")
        try:
            return len(value) * self.element_width
        except TypeError as err:
            raise EncodeError(
                f"{self.name}: expected a sized sequence, got {type(value).__name__}"
            ) from err

    def count(self, nbytes: int) -> int:
        return max(nbytes, 0) // self.element_width

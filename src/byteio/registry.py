"""Name-based codec lookup for byteio.

This module maps short type names ("u32", "f64", "bool") to codec objects so
that text front ends such as the CLI can select a codec. Library code passes
codec objects directly and does not need the registry.
"""

from __future__ import annotations

from .codec.base import Codec
from .codec.scalar import SCALAR_CODECS
from .codec.sequence import ListOf
from .exceptions import UnknownCodecError

LIST_SUFFIX = "[]"

# Global registry: codec name -> codec
CODEC_REGISTRY: dict[str, Codec] = {codec.name: codec for codec in SCALAR_CODECS}


def register_codec(codec: Codec) -> None:
    """Register a codec under its name.

    Registered codecs can be looked up with get_codec(), including as list
    elements ("name[]").

    Args:
        codec: Codec with a ``name`` attribute

    Raises:
        ValueError: If the name is invalid or already registered to another codec

    Example:
        >>> register_codec(MyU24Codec("u24", 3))
        >>> get_codec("u24[]")
        ListOf(element=MyU24Codec(name='u24', width=3))
    """
    name = getattr(codec, "name", None)
    if not isinstance(name, str) or not name:
        raise ValueError(f"{type(codec).__name__} has no name. Cannot register.")
    if name.endswith(LIST_SUFFIX):
        raise ValueError(f"Codec name {name!r} must not end with {LIST_SUFFIX!r}")

    # Check for conflicts
    key = name.lower()
    existing = CODEC_REGISTRY.get(key)
    if existing is not None:
        if existing is not codec:
            raise ValueError(
                f"Codec name {name!r} already registered to {existing!r}. "
                f"Cannot register {codec!r} with the same name."
            )
        # Already registered, no-op
        return

    CODEC_REGISTRY[key] = codec


def get_codec(name: str) -> Codec:
    """Look up a codec by name.

    A trailing "[]" selects a list of the named element type.

    Args:
        name: Codec name, e.g. "u16" or "u16[]"

    Returns:
        The registered codec, or ListOf wrapping it

    Raises:
        UnknownCodecError: If no codec is registered under the name
    """
    key = name.strip().lower()
    if key.endswith(LIST_SUFFIX):
        return ListOf(get_codec(key[: -len(LIST_SUFFIX)]))

    codec = CODEC_REGISTRY.get(key)
    if codec is None:
        raise UnknownCodecError(
            f"Unknown codec: {name!r}. Registered codecs: {sorted(CODEC_REGISTRY)}"
        )
    return codec

"""CLI commands: decode, encode and list codecs."""

from __future__ import annotations

from ..codec.base import ByteOrder, Codec
from ..codec.sequence import ListOf
from ..registry import CODEC_REGISTRY, get_codec


def parse_hex(text: str) -> bytes:
    """Parse a hex string, ignoring whitespace, colons and a 0x prefix.

    Raises:
        ValueError: If the text is not valid hex
    """
    cleaned = "".join(text.split()).replace(":", "")
    if cleaned.lower().startswith("0x"):
        cleaned = cleaned[2:]
    return bytes.fromhex(cleaned)


def format_hex(data: bytes) -> str:
    """Format bytes as space-separated lowercase hex pairs."""
    return data.hex(" ")


def decode_command(type_name: str, hex_data: str, order: str, offset: int = 0) -> str:
    """Decode hex bytes as ``type_name`` and return the value's repr.

    Raises:
        ByteIOError: If the codec is unknown or the data is too short
        ValueError: If the hex data or byte order is invalid
    """
    codec = get_codec(type_name)
    data = parse_hex(hex_data)
    value = codec.decode(data, ByteOrder.parse(order), offset=offset)
    return repr(value)


def encode_command(type_name: str, values: list[str], order: str) -> str:
    """Encode text values as ``type_name`` and return the bytes as hex.

    Scalars take exactly one value; list types take any number.

    Raises:
        ByteIOError: If the codec is unknown or a value is not representable
        ValueError: If a value cannot be parsed or the value count is wrong
    """
    codec = get_codec(type_name)
    value = _parse_values(codec, values)
    buffer = bytearray(codec.encoded_size(value))
    codec.encode(value, buffer, ByteOrder.parse(order))
    return format_hex(bytes(buffer))


def types_command() -> str:
    """Return one line per registered codec with its width in bytes."""
    lines = []
    for name in sorted(CODEC_REGISTRY):
        codec = CODEC_REGISTRY[name]
        lines.append(f"{name:<8}{codec.width} byte{'s' if codec.width != 1 else ''}")
    lines.append("Append [] to any name for a list, e.g. u16[]")
    return "\n".join(lines)


def _parse_text(codec: Codec, text: str) -> object:
    # Protocol-only codecs may have no parse_text at all
    parse = getattr(codec, "parse_text", None)
    if parse is None:
        raise TypeError(f"{codec.name} values cannot be parsed from text")
    return parse(text)


def _parse_values(codec: Codec, values: list[str]) -> object:
    if isinstance(codec, ListOf):
        return [_parse_text(codec.element, text) for text in values]

    if len(values) != 1:
        raise ValueError(f"{codec.name} takes exactly one value, got {len(values)}")
    return _parse_text(codec, values[0])

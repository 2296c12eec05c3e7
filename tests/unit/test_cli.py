"""Tests for CLI tool."""

from __future__ import annotations

import subprocess
import sys

import pytest

from byteio import CODEC_REGISTRY, __version__, register_codec
from byteio.cli.commands import format_hex, parse_hex
from byteio.cli.main import main


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = subprocess.run(
        [sys.executable, "-m", "byteio.cli.main", "--help"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "byteio: fixed-width binary number codec" in result.stdout
    assert "decode" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = subprocess.run(
        [sys.executable, "-m", "byteio.cli.main", "--version"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert f"byteio {__version__}" in result.stdout


def test_cli_no_args(capsys: pytest.CaptureFixture[str]) -> None:
    """Test CLI with no arguments (should show help)."""
    assert main([]) == 0
    assert "byteio: fixed-width binary number codec" in capsys.readouterr().out


class TestDecodeCommand:
    """Test the decode subcommand."""

    def test_decode_be(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test decoding a big-endian scalar."""
        assert main(["decode", "u32", "00 00 01 01"]) == 0
        assert capsys.readouterr().out.strip() == "257"

    def test_decode_list_le(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test decoding a little-endian list."""
        assert main(["decode", "u16[]", "34127856", "--order", "le"]) == 0
        assert capsys.readouterr().out.strip() == "[4660, 22136]"

    def test_decode_offset(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test decoding at an offset."""
        assert main(["decode", "i16", "ab cd ef 01 23", "--offset", "3", "--order", "le"]) == 0
        assert capsys.readouterr().out.strip() == str(0x2301)

    def test_decode_short(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test a short window is reported as an error."""
        assert main(["decode", "u32", "00 01"]) == 1
        assert "Window too small" in capsys.readouterr().err

    def test_decode_unknown_type(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test an unknown type name."""
        assert main(["decode", "u128", "00"]) == 1
        assert "Unknown codec" in capsys.readouterr().err

    def test_decode_bad_hex(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test invalid hex."""
        assert main(["decode", "u8", "zz"]) == 1
        assert "Error" in capsys.readouterr().err


class TestEncodeCommand:
    """Test the encode subcommand."""

    def test_encode_negative_le(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test encoding a negative little-endian value."""
        assert main(["encode", "i16", "-2", "--order", "le"]) == 0
        assert capsys.readouterr().out.strip() == "fe ff"

    def test_encode_list(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test encoding a list with hex values."""
        assert main(["encode", "u16[]", "0x1234", "0x5678", "--order", "le"]) == 0
        assert capsys.readouterr().out.strip() == "34 12 78 56"

    def test_encode_float_and_bool(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test float and bool parsing."""
        assert main(["encode", "f32", "1.0"]) == 0
        assert main(["encode", "bool", "true"]) == 0
        assert capsys.readouterr().out.split("\n")[:2] == ["3f 80 00 00", "01"]

    def test_encode_out_of_range(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test a value that does not fit."""
        assert main(["encode", "u8", "256"]) == 1
        assert "u8" in capsys.readouterr().err

    def test_encode_wrong_count(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test scalars take exactly one value."""
        assert main(["encode", "u8", "1", "2"]) == 1
        assert "exactly one value" in capsys.readouterr().err

    def test_encode_bad_value(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test unparseable values."""
        assert main(["encode", "bool", "maybe"]) == 1
        assert "Invalid bool" in capsys.readouterr().err


def test_types_command(capsys: pytest.CaptureFixture[str]) -> None:
    """Test listing codec names."""
    assert main(["types"]) == 0
    out = capsys.readouterr().out
    assert "u64" in out
    assert "8 bytes" in out
    assert "1 byte\n" in out


def test_hex_helpers() -> None:
    """Test hex parsing and formatting."""
    assert parse_hex("0x0A 0b:0c") == b"\x0a\x0b\x0c"
    assert format_hex(b"\x00\xff") == "00 ff"


def test_encode_codec_without_text_form(capsys: pytest.CaptureFixture[str]) -> None:
    """Test encoding with a codec that cannot parse values reports an error."""

    class Nibbles:
        name = "nibbles"
        width = 1

        def decode(self, window, order, *, offset=0):
            byte = memoryview(window)[offset]
            return (byte >> 4, byte & 0x0F)

        def encode(self, value, window, order, *, offset=0):
            memoryview(window)[offset] = (value[0] << 4) | value[1]

    register_codec(Nibbles())
    try:
        assert main(["encode", "nibbles", "12"]) == 1
        assert "cannot be parsed" in capsys.readouterr().err
        assert main(["encode", "nibbles[]", "1", "2"]) == 1
        assert "cannot be parsed" in capsys.readouterr().err
        assert main(["decode", "nibbles", "a5"]) == 0
        assert capsys.readouterr().out.strip() == "(10, 5)"
    finally:
        CODEC_REGISTRY.pop("nibbles", None)

"""Integration tests: complete workflows over realistic record layouts."""

from __future__ import annotations

import mmap
import runpy
from pathlib import Path

import pytest

from byteio import (
    F32,
    I16,
    U8,
    U16,
    U32,
    Bool,
    BufferTooSmall,
    ListOf,
    check_window,
    encoded_size,
    read_be,
    read_le,
    write_be,
    write_le,
)

# Sensor record layout:
#   0  magic     u32 BE
#   4  version   u8
#   5  active    bool
#   6  count     u16 LE
#   8  offset_c  i16 LE
#  10  samples   f32 LE x count
HEADER_SIZE = 10
MAGIC = 0x53454E53


def build_record(samples: list[float], offset_c: int, active: bool = True) -> bytearray:
    """Build a sensor record in a fresh buffer."""
    record = bytearray(HEADER_SIZE + encoded_size(ListOf(F32), samples))
    write_be(U32, MAGIC, record)
    write_be(U8, 2, record, offset=4)
    write_be(Bool, active, record, offset=5)
    write_le(U16, len(samples), record, offset=6)
    write_le(I16, offset_c, record, offset=8)
    write_le(ListOf(F32), samples, record, offset=HEADER_SIZE)
    return record


def parse_record(record: bytes | bytearray | memoryview) -> dict:
    """Parse a sensor record, reading only what the header announces."""
    check_window(U32, record)
    if read_be(U32, record) != MAGIC:
        raise ValueError("bad magic")

    count = read_le(U16, record, offset=6)
    end = HEADER_SIZE + encoded_size(ListOf(F32), [0.0] * count)
    if len(record) < end:
        raise BufferTooSmall(end - HEADER_SIZE, len(record), HEADER_SIZE)

    return {
        "version": read_be(U8, record, offset=4),
        "active": read_be(Bool, record, offset=5),
        "offset_c": read_le(I16, record, offset=8),
        "samples": read_le(ListOf(F32), memoryview(record)[HEADER_SIZE:end]),
    }


class TestRecordWorkflow:
    """Test building and parsing a mixed-type record."""

    def test_roundtrip(self) -> None:
        """Test a record parses back to its inputs."""
        record = build_record([1.5, -0.25, 100.0], offset_c=-40)
        parsed = parse_record(bytes(record))

        assert parsed == {
            "version": 2,
            "active": True,
            "offset_c": -40,
            "samples": [1.5, -0.25, 100.0],
        }

    def test_header_layout(self) -> None:
        """Test the raw header bytes."""
        record = build_record([0.0], offset_c=-2, active=False)
        assert bytes(record[:HEADER_SIZE]) == bytes.fromhex("53454e53" "02" "00" "0100" "feff")
        assert bytes(record[HEADER_SIZE:]) == b"\x00\x00\x00\x00"

    def test_truncated_record(self) -> None:
        """Test a truncated record is detected before reading samples."""
        record = build_record([1.0, 2.0], offset_c=0)
        with pytest.raises(BufferTooSmall):
            parse_record(bytes(record[:-1]))

    def test_trailing_data_ignored(self) -> None:
        """Test records inside a larger buffer."""
        record = build_record([3.0], offset_c=7) + b"\xde\xad\xbe\xef"
        assert parse_record(bytes(record))["samples"] == [3.0]


class TestDocumentationExamples:
    """Test the usage shown in the package documentation."""

    def test_read(self, sample_window: bytes) -> None:
        """Test reading from a slice."""
        assert read_be(U32, sample_window) == 0x0101
        assert read_be(U16, sample_window[4:]) == 0xABCD
        assert read_le(U16, sample_window[4:]) == 0xCDAB
        assert read_le(U8, sample_window[4:]) == 0xAB

    def test_write(self, zero_buffer: bytearray) -> None:
        """Test writing into a buffer and a sub-window."""
        write_be(U32, 0xABCDEF, zero_buffer)
        assert zero_buffer == bytes([0x00, 0xAB, 0xCD, 0xEF, 0x00, 0x00, 0x00, 0x00])

        write_le(U32, 0xABCDEF, memoryview(zero_buffer)[4:])
        assert zero_buffer == bytes([0x00, 0xAB, 0xCD, 0xEF, 0xEF, 0xCD, 0xAB, 0x00])

    def test_lists(self, zero_buffer: bytearray) -> None:
        """Test reading and writing lists."""
        data = [0x1234, 0x5678]
        write_le(ListOf(U16), data, zero_buffer)
        assert zero_buffer == bytes([0x34, 0x12, 0x78, 0x56, 0x00, 0x00, 0x00, 0x00])
        assert read_le(ListOf(U16), zero_buffer[0:4]) == data

        u32_list = read_be(ListOf(U32), zero_buffer[4:])
        assert len(u32_list) == 1
        assert u32_list[0] == 0

    def test_codec_method(self) -> None:
        """Test calling the codec directly."""
        assert U32.from_be(bytes([0xAA, 0xBB, 0xCC, 0xDD])) == 0xAABBCCDD


class TestMappedFile:
    """Test codecs over a memory-mapped file window."""

    def test_mmap_window(self, tmp_path: Path) -> None:
        """Test encoding into and decoding from an mmap."""
        path = tmp_path / "data.bin"
        path.write_bytes(bytes(16))

        with path.open("r+b") as f, mmap.mmap(f.fileno(), 16) as mapped:
            write_be(ListOf(U32), [1, 2, 3], mapped, offset=4)
            assert read_be(ListOf(U32), mapped, offset=4) == [1, 2, 3]
            mapped.flush()

        assert path.read_bytes()[4:8] == b"\x00\x00\x00\x01"


def test_basic_usage_example() -> None:
    """Test the example script runs."""
    example_file = Path("examples/basic_usage.py")
    if not example_file.exists():
        pytest.skip("Example file not found")

    runpy.run_path(str(example_file), run_name="__main__")

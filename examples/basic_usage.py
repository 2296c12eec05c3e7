#!/usr/bin/env python3
"""Basic usage example for byteio.

This example demonstrates:
1. Reading numbers from a byte buffer
2. Writing numbers into a buffer and a sub-window
3. Reading and writing lists
4. Calling a codec directly
5. Handling a window that is too small
"""

from __future__ import annotations

from byteio import U16, U32, BufferTooSmall, ListOf, read_be, read_le, write_be, write_le


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("byteio Basic Usage Example")
    print("=" * 60)
    print()

    # Read from a buffer
    print("1. Reading from a buffer...")
    data = bytes([0x00, 0x00, 0x01, 0x01, 0xAB, 0xCD, 0xEF, 0x89])
    print(f"   Data: {data.hex(' ')}")
    print(f"   read_be(U32, data)           = {read_be(U32, data):#010x}")
    print(f"   read_be(U16, data, offset=4) = {read_be(U16, data, offset=4):#06x}")
    print(f"   read_le(U16, data, offset=4) = {read_le(U16, data, offset=4):#06x}")
    assert read_be(U32, data) == 0x0101
    assert read_le(U16, data[4:]) == 0xCDAB
    print()

    # Write into a buffer
    print("2. Writing into a buffer...")
    buf = bytearray(8)
    write_be(U32, 0xABCDEF, buf)
    print(f"   write_be(U32, 0xABCDEF, buf)           -> {buf.hex(' ')}")
    write_le(U32, 0xABCDEF, buf, offset=4)
    print(f"   write_le(U32, 0xABCDEF, buf, offset=4) -> {buf.hex(' ')}")
    assert buf == bytes([0x00, 0xAB, 0xCD, 0xEF, 0xEF, 0xCD, 0xAB, 0x00])
    print()

    # Lists
    print("3. Reading and writing lists...")
    buf = bytearray(8)
    values = [0x1234, 0x5678]
    write_le(ListOf(U16), values, buf)
    print(f"   write_le(ListOf(U16), {values}) -> {buf.hex(' ')}")
    assert read_le(ListOf(U16), buf[0:4]) == values

    u32_list = read_be(ListOf(U32), buf[4:])
    print(f"   read_be(ListOf(U32), buf[4:])      -> {u32_list}")
    assert u32_list == [0]
    print()

    # Codec methods
    print("4. Calling a codec directly...")
    print(f"   U32.from_be(aa bb cc dd) = {U32.from_be(bytes([0xAA, 0xBB, 0xCC, 0xDD])):#x}")
    print()

    # Errors
    print("5. Window too small...")
    small = bytearray(3)
    try:
        write_be(U32, 1, small)
    except BufferTooSmall as e:
        print(f"   {e}")
    print(f"   Buffer unchanged: {small.hex(' ')}")
    print()

    print("=" * 60)
    print("Example completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()

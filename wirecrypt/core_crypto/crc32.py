"""
CRC32 Checksum (From Scratch)

Classic reflected CRC32 (IEEE 802.3, polynomial 0xEDB88320) as used by the
service to checksum handshake blobs.

Components:
- Table: 256 precomputed 32-bit values, built once at import time
- Update: byte-wise table lookup over a running register
- Output: bitwise complement of the register, unsigned 32-bit
"""

from typing import Tuple


# Reversed representation of 0x04C11DB7
POLYNOMIAL = 0xEDB88320

# Mask for 32-bit arithmetic
MASK_32 = 0xFFFFFFFF


def _build_table() -> Tuple[int, ...]:
    """Build the 256-entry lookup table for POLYNOMIAL."""
    table = []
    for i in range(256):
        value = i
        for _ in range(8):
            value = (POLYNOMIAL ^ (value >> 1)) if value & 1 else value >> 1
        table.append(value)
    return tuple(table)


CRC32_TABLE = _build_table()


def _update_register(register: int, data: bytes) -> int:
    """Feed bytes through the raw (non-complemented) CRC register."""
    table = CRC32_TABLE
    for byte in data:
        register = table[(register ^ byte) & 0xFF] ^ (register >> 8)
    return register


def crc32_update(crc: int, data: bytes) -> int:
    """
    Continue a checksum over more data.

    Args:
        crc: A finished checksum of the preceding data (0 for none)
        data: Next chunk of bytes

    Returns:
        Checksum of the preceding data followed by `data`
    """
    register = _update_register(~crc & MASK_32, memoryview(data).cast('B'))
    return ~register & MASK_32


def checksum(data: bytes) -> int:
    """
    Compute the CRC32 of the input data.

    Args:
        data: Input bytes (any length, including zero)

    Returns:
        Unsigned 32-bit checksum

    Example:
        >>> hex(checksum(b"123456789"))
        '0xcbf43926'
    """
    return crc32_update(0, data)


class CRC32:
    """
    Incremental CRC32 accumulator.

    Example:
        crc = CRC32()
        crc.update(b"1234")
        crc.update(b"56789")
        assert crc.value == 0xCBF43926
    """

    digest_size = 4

    def __init__(self, data: bytes = b""):
        self._value = 0
        if data:
            self.update(data)

    def update(self, data: bytes) -> 'CRC32':
        """Add more bytes to the checksum."""
        self._value = crc32_update(self._value, data)
        return self

    @property
    def value(self) -> int:
        """Current checksum as an unsigned integer."""
        return self._value

    def digest(self) -> bytes:
        """Current checksum as 4 little-endian bytes, the order the service writes it."""
        return self._value.to_bytes(self.digest_size, byteorder='little')

    def hexdigest(self) -> str:
        return f"{self._value:08x}"

    def copy(self) -> 'CRC32':
        other = CRC32()
        other._value = self._value
        return other


# Self-test when run directly
if __name__ == "__main__":
    test_cases = [
        (b"", 0x00000000),
        (b"123456789", 0xCBF43926),
        (b"The quick brown fox jumps over the lazy dog", 0x414FA339),
    ]

    print("CRC32 Implementation Test")
    print("=" * 60)

    all_passed = True
    for data, expected in test_cases:
        result = checksum(data)
        passed = result == expected
        all_passed = all_passed and passed

        status = "✓ PASS" if passed else "✗ FAIL"
        print(f"\nInput: {data[:50]}")
        print(f"Expected: {expected:08x}")
        print(f"Got:      {result:08x}")
        print(f"Status:   {status}")

    print("\n" + "=" * 60)
    print(f"Overall: {'All tests passed!' if all_passed else 'Some tests failed!'}")

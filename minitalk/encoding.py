"""Bit-level encoding of a message into a stream of single-bit signals.

Each byte is sent as eight bits, least significant bit first. A set bit
travels as one kind of signal and a clear bit as the other; the receiver
collects eight bits and rebuilds the byte.
"""

from typing import Iterator, Optional, Union

BITS_PER_BYTE = 8


def encode_bits(data: Union[bytes, str]) -> Iterator[int]:
    """Yield the bits of data, each byte least significant bit first.

    Text is encoded as UTF-8 first.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    for byte in data:
        for shift in range(BITS_PER_BYTE):
            yield (byte >> shift) & 1


class BitDecoder:
    """Rebuild bytes from bits that arrive least significant bit first."""

    def __init__(self) -> None:
        self._value = 0
        self._count = 0

    @property
    def pending(self) -> int:
        """How many bits of the current byte have been received."""
        return self._count

    def push(self, bit: Union[int, bool]) -> Optional[int]:
        """Take one bit; return the completed byte after the eighth, else None."""
        if bit not in (0, 1):
            raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
        if bit:
            self._value |= 1 << self._count
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        byte = self._value
        self.reset()
        return byte

    def reset(self) -> None:
        """Discard any partly received byte."""
        self._value = 0
        self._count = 0
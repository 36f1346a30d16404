"""Wire format for messages carried one bit per signal.

Each byte travels most significant bit first; a one bit is sent as SIGUSR1
and a zero bit as SIGUSR2. A zero byte closes the message.
"""

from __future__ import annotations

import signal
from typing import Iterator, Optional, Union

BITS_PER_CHAR = 8
TERMINATOR = 0

Message = Union[str, bytes]


def _message_bytes(message: Message) -> bytes:
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    # The text ends at the first NUL, which is also the terminator on the wire.
    return data.split(b"\0", 1)[0]


def _check_bit(bit: int) -> int:
    if bit not in (0, 1):
        raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
    return int(bit)


def encode_bits(message: Message) -> Iterator[int]:
    """Yield the bits of ``message`` followed by a zero terminator byte, MSB first."""
    for byte in _message_bytes(message) + bytes([TERMINATOR]):
        for shift in reversed(range(BITS_PER_CHAR)):
            yield (byte >> shift) & 1


def signal_for_bit(bit: int) -> int:
    """Signal number that carries ``bit``: SIGUSR1 for 1, SIGUSR2 for 0."""
    return signal.SIGUSR1 if _check_bit(bit) else signal.SIGUSR2


def bit_for_signal(signum: int) -> int:
    """Bit carried by ``signum``; only SIGUSR1 and SIGUSR2 carry bits."""
    if signum == signal.SIGUSR1:
        return 1
    if signum == signal.SIGUSR2:
        return 0
    raise ValueError(f"signal {signum} does not carry a bit")


class Decoder:
    """Collects bits into bytes, eight at a time, most significant first."""

    def __init__(self) -> None:
        self._value = 0
        self._count = 0

    @property
    def pending(self) -> int:
        """Number of bits received towards the current byte."""
        return self._count

    def feed(self, bit: int) -> Optional[int]:
        """Add one bit; return the completed byte once eight have arrived."""
        self._value = (self._value << 1) | _check_bit(bit)
        self._count += 1
        if self._count < BITS_PER_CHAR:
            return None
        value = self._value & 0xFF
        self.reset()
        return value

    def reset(self) -> None:
        """Discard any partly received byte."""
        self._value = 0
        self._count = 0
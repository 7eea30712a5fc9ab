"""Bit-level framing of messages that travel one signal at a time.

Each byte is sent as eight bits, least significant bit first. A message
always ends with a newline byte. The receiver keeps one partial byte per
sender, keyed by process id, in a table of fixed capacity.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

MAX_CLIENTS = 256
BITS_PER_CHAR = 8
TERMINATOR = ord("\n")

Bits = Tuple[int, ...]
ByteLike = Union[int, str, bytes, bytearray]


def _byte_value(value: ByteLike) -> int:
    """Return the code of *value*, which must fit in one unsigned byte."""
    if isinstance(value, (bytes, bytearray)):
        if len(value) != 1:
            raise ValueError(f"expected a single byte, got {bytes(value)!r}")
        return value[0]
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        code = ord(value)
    elif isinstance(value, int) and not isinstance(value, bool):
        code = value
    else:
        raise TypeError(f"expected a byte value, got {type(value).__name__}")
    if not 0 <= code <= 0xFF:
        raise ValueError(f"byte value out of range: {code}")
    return code


def encode_char(value: ByteLike) -> Bits:
    """Return the eight bits of one byte, least significant first."""
    code = _byte_value(value)
    return tuple((code >> shift) & 1 for shift in range(BITS_PER_CHAR))


def encode_message(message: Union[str, bytes, bytearray]) -> Iterator[Bits]:
    """Yield one eight-bit frame per byte of *message*, then one for the newline.

    Text is turned into bytes the way command-line arguments are.
    """
    data = os.fsencode(message) if isinstance(message, str) else bytes(message)
    for byte in data:
        yield encode_char(byte)
    yield encode_char(TERMINATOR)


@dataclass
class ClientState:
    """The byte being assembled for one sender."""

    pid: int
    current_char: int = 0
    bit: int = 0

    def push(self, bit: int) -> Optional[int]:
        """Add one bit; return the byte once all eight have arrived."""
        if bit:
            self.current_char |= 1 << self.bit
        self.bit += 1
        if self.bit < BITS_PER_CHAR:
            return None
        value = self.current_char
        self.current_char = 0
        self.bit = 0
        return value


class Decoder:
    """Rebuilds bytes from bits arriving from many senders at once.

    Senders with a process id of zero or less, and new senders once the
    table is full, are ignored.
    """

    def __init__(self, max_clients: int = MAX_CLIENTS) -> None:
        if max_clients < 1:
            raise ValueError(f"max_clients must be positive, got {max_clients}")
        self.max_clients = max_clients
        self._clients: dict[int, ClientState] = {}

    def __len__(self) -> int:
        return len(self._clients)

    def state_for(self, pid: int) -> Optional[ClientState]:
        """Return the state of sender *pid*, creating it if there is room."""
        if pid <= 0:
            return None
        state = self._clients.get(pid)
        if state is None:
            if len(self._clients) >= self.max_clients:
                return None
            state = ClientState(pid)
            self._clients[pid] = state
        return state

    def feed(self, pid: int, bit: int) -> Optional[int]:
        """Take one bit from *pid*; return the completed byte, if any."""
        if bit not in (0, 1):
            raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
        state = self.state_for(pid)
        if state is None:
            return None
        return state.push(bit)
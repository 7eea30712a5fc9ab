"""Receiving side: rebuilds bytes from signals and acknowledges each one."""

from __future__ import annotations

import contextlib
import os
import signal
import sys
from typing import BinaryIO, Callable, Optional, Sequence

from .formatting import printf
from .protocol import Decoder


def _send_ack(pid: int) -> None:
    with contextlib.suppress(ProcessLookupError, PermissionError):
        os.kill(pid, signal.SIGUSR1)


class Server:
    """Turns SIGUSR1 (bit 0) and SIGUSR2 (bit 1) from senders into bytes.

    Each completed byte is written to *output* at once and acknowledged to
    its sender with SIGUSR1.
    """

    def __init__(
        self,
        output: Optional[BinaryIO] = None,
        acknowledge: Optional[Callable[[int], None]] = None,
        decoder: Optional[Decoder] = None,
    ) -> None:
        self.output = output if output is not None else sys.stdout.buffer
        self.acknowledge = acknowledge if acknowledge is not None else _send_ack
        self.decoder = decoder if decoder is not None else Decoder()

    def handle(self, signum: int, pid: int) -> Optional[int]:
        """Process one signal from *pid*; return the byte it completed, if any."""
        if signum == signal.SIGUSR2:
            bit = 1
        elif signum == signal.SIGUSR1:
            bit = 0
        else:
            raise ValueError(f"unexpected signal {signum}")
        value = self.decoder.feed(pid, bit)
        if value is not None:
            self.output.write(bytes((value,)))
            self.output.flush()
            self.acknowledge(pid)
        return value

    def serve_forever(self) -> None:
        """Wait for signals and handle them until interrupted."""
        watched = {signal.SIGUSR1, signal.SIGUSR2}
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, watched)
        try:
            while True:
                info = signal.sigwaitinfo(watched)
                self.handle(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print this process's id and serve until interrupted."""
    del argv
    printf("PID: %d\n", os.getpid())
    server = Server()
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        return 0
    return 0
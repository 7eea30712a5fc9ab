"""Sending side: delivers a message to a server one bit per signal."""

from __future__ import annotations

import os
import signal
import sys
from typing import Optional, Sequence, Tuple, Union

from .chars import atoi
from .formatting import printf
from .protocol import encode_message

_USAGE = "Error.\nCheck the arguments\n "
_BAD_PID = "Error.\nCheck the arguments\n"


class UsageError(Exception):
    """The command line does not name a server and a message."""


def parse_args(argv: Sequence[str]) -> Tuple[int, str]:
    """Return the server pid and the message from ``[pid, message]``."""
    if len(argv) != 2:
        raise UsageError(_USAGE)
    server_pid = atoi(argv[0])
    if server_pid <= 0:
        raise UsageError(_BAD_PID)
    return server_pid, argv[1]


def send_message(server_pid: int, message: Union[str, bytes]) -> None:
    """Send *message* and a trailing newline, waiting for an ack after each byte.

    A 0 bit is sent as SIGUSR1 and a 1 bit as SIGUSR2.
    """
    if server_pid <= 0:
        raise ValueError(f"server pid must be positive, got {server_pid}")
    acks = {signal.SIGUSR1}
    previous = signal.pthread_sigmask(signal.SIG_BLOCK, acks)
    try:
        for frame in encode_message(message):
            for bit in frame:
                os.kill(server_pid, signal.SIGUSR2 if bit else signal.SIGUSR1)
            signal.sigwait(acks)
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Send the message given on the command line; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        server_pid, message = parse_args(args)
    except UsageError as exc:
        printf("%s", str(exc))
        return 1
    try:
        send_message(server_pid, message)
    except ProcessLookupError:
        printf("%s", _BAD_PID)
        return 1
    return 0
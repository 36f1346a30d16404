"""Command that sends a message to a server process bit by bit through signals."""

from __future__ import annotations

import os
import sys
import time
from typing import Callable, Optional, Sequence

from .fmt import put_str
from .protocol import Message, encode_bits, signal_for_bit
from .textutil import parse_int

DEFAULT_DELAY = 420e-6
USAGE = "./client <pid> <message>\n"

KillFunc = Callable[[int, int], None]


def send_message(
    pid: int,
    message: Message,
    delay: float = DEFAULT_DELAY,
    kill: Optional[KillFunc] = None,
) -> int:
    """Send ``message`` and its terminator to ``pid``; return the number of signals sent.

    Each bit is one signal, followed by a pause of ``delay`` seconds so the
    receiver can keep up. Errors from delivering a signal propagate.
    """
    send = os.kill if kill is None else kill
    sent = 0
    for bit in encode_bits(message):
        send(pid, signal_for_bit(bit))
        sent += 1
        time.sleep(delay)
    return sent


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the client: ``client <pid> <message>``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        put_str(USAGE, sys.stdout)
        return 1
    pid_text, message = args
    try:
        send_message(parse_int(pid_text), message)
    except OSError as exc:
        print(f"client: cannot signal {pid_text}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Server that prints messages received one bit per signal and acknowledges them."""

from __future__ import annotations

import codecs
import os
import signal
import sys
from typing import Callable, Optional, Sequence, TextIO

from .fmt import put_number, put_str
from .protocol import TERMINATOR, Decoder, bit_for_signal

KillFunc = Callable[[int, int], None]

_SIGNALS = frozenset({signal.SIGUSR1, signal.SIGUSR2})


class Server:
    """Decodes incoming bit signals and writes the text to ``output``.

    When a message is complete a newline is written and SIGUSR1 is sent back
    to the sender, if the sender is known.
    """

    def __init__(self, output: Optional[TextIO] = None, kill: Optional[KillFunc] = None) -> None:
        self.output = output
        self._kill = kill
        self._decoder = Decoder()
        self._text = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._wait_for_info = False

    def _out(self) -> TextIO:
        return sys.stdout if self.output is None else self.output

    def handle(self, signum: int, sender_pid: Optional[int] = None) -> Optional[int]:
        """Take one signal; return the byte it completed, if any."""
        byte = self._decoder.feed(bit_for_signal(signum))
        if byte is None:
            return None
        out = self._out()
        if byte == TERMINATOR:
            out.write(self._text.decode(b"", final=True) + "\n")
            self._text.reset()
            out.flush()
            if sender_pid is not None:
                send = os.kill if self._kill is None else self._kill
                send(sender_pid, signal.SIGUSR1)
        else:
            out.write(self._text.decode(bytes([byte])))
            out.flush()
        return byte

    def _on_signal(self, signum: int, frame: object) -> None:
        self.handle(signum)

    def install(self) -> None:
        """Prepare to receive the bit signals.

        Where the platform can report the sender of a signal, the signals are
        blocked and collected synchronously by :meth:`run`; otherwise ordinary
        handlers are installed and no acknowledgement can be sent.
        """
        if hasattr(signal, "sigwaitinfo"):
            signal.pthread_sigmask(signal.SIG_BLOCK, _SIGNALS)
            self._wait_for_info = True
        else:
            for signum in _SIGNALS:
                signal.signal(signum, self._on_signal)
            self._wait_for_info = False

    def run(self) -> None:
        """Print this process's id, then receive messages forever."""
        out = self._out()
        put_str("PID is = ", out)
        put_number(os.getpid(), out)
        put_str("\n", out)
        out.flush()
        self.install()
        while True:
            if self._wait_for_info:
                info = signal.sigwaitinfo(_SIGNALS)
                self.handle(info.si_signo, info.si_pid)
            else:
                signal.pause()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the server until interrupted; arguments are ignored."""
    try:
        Server().run()
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())
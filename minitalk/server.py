"""Receive a message one bit per signal and write each completed byte out."""

import os
import signal
import sys
import threading
from types import FrameType
from typing import BinaryIO, Optional, Sequence

from .encoding import BitDecoder

SET_BIT_SIGNAL = signal.SIGUSR1
CLEAR_BIT_SIGNAL = signal.SIGUSR2


class Server:
    """Decode bits carried by SIGUSR1 (set) and SIGUSR2 (clear) signals."""

    def __init__(self, output: Optional[BinaryIO] = None) -> None:
        self._output = output
        self._decoder = BitDecoder()
        self._previous: dict = {}
        self._stopped = threading.Event()

    @property
    def output(self) -> BinaryIO:
        """The binary stream that received bytes are written to."""
        return self._output if self._output is not None else sys.stdout.buffer

    def handle(self, signum: int, frame: Optional[FrameType] = None) -> Optional[int]:
        """Take one signal as a bit; write and return the byte it completes."""
        if signum == SET_BIT_SIGNAL:
            bit = 1
        elif signum == CLEAR_BIT_SIGNAL:
            bit = 0
        else:
            return None
        byte = self._decoder.push(bit)
        if byte is not None:
            out = self.output
            out.write(bytes([byte]))
            out.flush()
        return byte

    def install(self) -> None:
        """Route both bit signals of this process to handle."""
        for sig in (SET_BIT_SIGNAL, CLEAR_BIT_SIGNAL):
            previous = signal.signal(sig, self.handle)
            self._previous.setdefault(sig, previous)

    def uninstall(self) -> None:
        """Put back the handlers that were in place before install."""
        for sig, previous in self._previous.items():
            signal.signal(sig, previous if previous is not None else signal.SIG_DFL)
        self._previous.clear()

    def stop(self) -> None:
        """Make serve return; safe to call from another thread."""
        self._stopped.set()

    def serve(self) -> None:
        """Announce the process id, then receive signals until stopped."""
        out = self.output
        out.write(f"pid : {os.getpid()}\n".encode("ascii"))
        out.flush()
        self.install()
        try:
            self._stopped.wait()
        finally:
            self.uninstall()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: run the server until interrupted."""
    args = sys.argv[1:] if argv is None else list(argv)
    server = Server()
    if args:
        server.output.write(b"Error\n")
        server.output.flush()
    try:
        server.serve()
    except KeyboardInterrupt:
        pass
    return 0
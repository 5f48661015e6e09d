"""Send a text message to a listening server process, one bit per signal."""

import os
import signal
import sys
import time
from typing import Optional, Sequence, Union

from .encoding import encode_bits
from .numbers import atoi

DEFAULT_DELAY = 100e-6
"""Pause after each signal, in seconds, so the receiver can keep up."""

SET_BIT_SIGNAL = signal.SIGUSR1
CLEAR_BIT_SIGNAL = signal.SIGUSR2


def _check_pid(pid: int) -> None:
    if pid <= 0:
        raise ValueError(f"not a valid server process id: {pid}")


def send_byte(pid: int, byte: int, delay: float = DEFAULT_DELAY) -> None:
    """Send one byte to pid as eight signals, least significant bit first."""
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"a byte must be in 0..255, got {byte}")
    _check_pid(pid)
    for bit in encode_bits(bytes([byte])):
        os.kill(pid, SET_BIT_SIGNAL if bit else CLEAR_BIT_SIGNAL)
        time.sleep(delay)


def send_message(pid: int, text: Union[str, bytes], delay: float = DEFAULT_DELAY) -> int:
    """Send every byte of text to pid; text is encoded as UTF-8.

    Returns the number of bytes sent.
    """
    _check_pid(pid)
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    for byte in data:
        send_byte(pid, byte, delay)
    return len(data)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: ``client <PID> <STRING>``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "client"
        print(f"{prog} <PID> <STRING>")
        return 1
    pid = atoi(args[0])
    try:
        send_message(pid, args[1])
    except (ValueError, OSError) as err:
        print(f"error: {err}", file=sys.stderr)
        return 1
    return 0
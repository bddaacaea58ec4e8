"""
Per-thread cooperative interrupt flag.

Python threads carry no interrupt status of their own, so cancellation that is
signalled by raising InterruptedError would be lost once the exception is
turned into a Failure. Outcome.attempt() and Outcome.or_else_get() set this
flag when they swallow an InterruptedError; long-running callers poll it:

    while not interrupt.is_interrupted():
        step()
"""

from __future__ import annotations

import threading

_state = threading.local()


def interrupt() -> None:
    """Mark the calling thread as interrupted."""
    _state.flag = True


def is_interrupted() -> bool:
    """Report whether the calling thread is marked as interrupted."""
    return getattr(_state, "flag", False)


def interrupted() -> bool:
    """Report and clear the calling thread's flag (test-and-clear)."""
    was_set = is_interrupted()
    _state.flag = False
    return was_set


def clear() -> None:
    _state.flag = False

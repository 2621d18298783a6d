"""
Jackknife backends.

Available backends:
    CPUJackknifeBackend: Sequential reference implementation
    ThreadedJackknifeBackend: Thread-pool fan-out of the leave-one-out calls
"""

from pyjackknife.jackknife.backends.cpu import (
    CPUJackknifeBackend,
    ThreadedJackknifeBackend,
)

__all__ = [
    "CPUJackknifeBackend",
    "ThreadedJackknifeBackend",
]

"""
Shared compute infrastructure for pyjackknife.

Domain backends live in {domain}/backends/. This module holds shared
numeric infrastructure.

Submodules:
    timing: Execution timing utilities
"""

from pyjackknife.core.compute.timing import Timer, timed

__all__ = [
    "Timer",
    "timed",
]

"""
Generic result container for pyjackknife computations.

The Result class provides a standardized envelope around the parameter
payload. This enables shared tooling for timing, warnings and
reproducibility while the jackknife module defines its own payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (n, k, policy)
    - timing is optional (don't burden unit tests)
    - provenance records library versions for reproducibility
    - Immutable (frozen=True)
"""

import platform
import sys
from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Version metadata attached to every result."""
    from pyjackknife import __version__

    return {
        'pyjackknife_version': __version__,
        'numpy_version': np.__version__,
        'python_version': sys.version.split()[0],
        'platform': platform.platform(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (estimates, standard errors)
        info: Structured metadata (n, k, policy used)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library and interpreter versions

    Examples:
        >>> Result(
        ...     params=JackknifeParams(...),
        ...     info={'n': 20, 'k': 2},
        ...     timing={'total_seconds': 0.01},
        ...     backend_name='cpu_jackknife'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)

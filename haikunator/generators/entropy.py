#!/usr/bin/env python3
"""
Randomness Sources
==================
Seed providers for non-deterministic name generation.

Two variants sit behind one interface:
- SystemEntropySource: os.urandom / secrets (cryptographically strong)
- FallbackRandomSource: random.Random seeded from time, PID and memory
  addresses. Weak. Only used when explicitly allowed.

The process default is chosen once by probing the platform (see
``probe_source``) and can be replaced with ``set_source`` for tests or
embedding hosts.

Usage:
    from haikunator.generators.entropy import get_source

    seed = get_source().next_uint32()
"""

import hashlib
import logging
import os
import random
import secrets
import time
from abc import ABC, abstractmethod
from typing import Optional

from haikunator.errors import RandomnessUnavailable
from haikunator.settings import get_setting

logger = logging.getLogger(__name__)


# =============================================================================
# Source Interface
# =============================================================================

class RandomnessSource(ABC):
    """Provides 32-bit unsigned seeds."""

    name: str = "abstract"
    strong: bool = False

    @abstractmethod
    def next_uint32(self) -> int:
        """Return an integer in [0, 2**32)."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(strong={self.strong})"


class SystemEntropySource(RandomnessSource):
    """OS entropy pool via ``secrets``. Thread-safe."""

    name = "system"
    strong = True

    def next_uint32(self) -> int:
        return secrets.randbits(32)


class FallbackRandomSource(RandomnessSource):
    """
    Non-cryptographic fallback for platforms without an entropy pool.

    Seeds a Mersenne Twister from the mix of several weak sources:
    - High-resolution time (nanoseconds)
    - Process ID (shifted to high bits)
    - Memory address of a new object

    Output is predictable to anyone who can guess those inputs. Names
    drawn from it must not be treated as secrets.
    """

    name = "fallback"
    strong = False

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = self._gather_seed()
        self._rng = random.Random(seed)
        logger.warning(
            "Using weak fallback randomness source; generated names are predictable"
        )

    @staticmethod
    def _gather_seed() -> int:
        time_entropy = time.time_ns()
        pid_entropy = os.getpid() << 48
        mem_entropy = id(object()) & 0xFFFFFFFF

        combined = time_entropy ^ pid_entropy ^ mem_entropy

        # Hash for uniform distribution
        digest = hashlib.sha256(combined.to_bytes(32, 'big')).digest()
        return int.from_bytes(digest[:8], 'big')

    def next_uint32(self) -> int:
        return self._rng.getrandbits(32)


# =============================================================================
# Selection
# =============================================================================

def probe_source(allow_weak: bool = False) -> RandomnessSource:
    """
    Pick the best available source.

    Args:
        allow_weak: Return ``FallbackRandomSource`` when the OS has no
            entropy pool instead of raising

    Raises:
        RandomnessUnavailable: No entropy pool and ``allow_weak`` is False
    """
    try:
        os.urandom(4)
    except NotImplementedError:
        if not allow_weak:
            raise RandomnessUnavailable(
                "No system randomness source available. "
                "Set entropy.allow_weak_fallback to accept a predictable fallback."
            )
        return FallbackRandomSource()

    logger.debug("Using system randomness source")
    return SystemEntropySource()


# Process default, probed on first use
_source = None


def get_source() -> RandomnessSource:
    """Get the process-wide randomness source."""
    global _source
    if _source is None:
        allow_weak = bool(get_setting('entropy.allow_weak_fallback', False))
        _source = probe_source(allow_weak=allow_weak)
    return _source


def set_source(source: Optional[RandomnessSource]) -> None:
    """Replace the process-wide source. ``None`` re-probes on next use."""
    global _source
    _source = source


__all__ = [
    'RandomnessSource',
    'SystemEntropySource',
    'FallbackRandomSource',
    'probe_source',
    'get_source',
    'set_source',
]

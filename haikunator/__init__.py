#!/usr/bin/env python3
"""
Haikunator - Readable Random Names
==================================

Generates short names like ``autumn-river-4821``: an adjective, a noun
and a token joined by a delimiter. Names can be random, or derived from
a seed so the same preview shows up every time.

Quick Start
-----------
    from haikunator import Haikunator

    haiku = Haikunator()

    # Random name
    haiku.generate().name                      # 'misty-pond-0372'

    # Reproducible preview
    haiku.preview("user-42").name              # same for every call

    # Options override the instance defaults per call
    haiku.generate(token_length=6, token_hex=True)

    # Unique batch
    names = haiku.bulk(10, seed="batch-1")

Modules
-------
    haikunator.generators - Hash, seeded stream, name assembly, entry points
    haikunator.config     - TokenConfig, three-layer merge, presets
    haikunator.errors     - Exception hierarchy
    haikunator.settings   - app.yaml loader

CLI Usage
---------
    python -m haikunator generate -n 5
    python -m haikunator preview "user-42" --hex -l 6
    python -m haikunator capacity --token-length 2
"""

__version__ = "0.1.0"
__author__ = "Haikunator"

from typing import List, Optional, Sequence

from . import config
from . import errors
from . import generators

from .config import (
    TokenConfig,
    DEFAULT_CONFIG,
    merge_config,
    PRESETS,
    get_preset,
    list_presets,
)
from .errors import (
    HaikunatorError,
    InvalidConfiguration,
    EmptyWordList,
    CapacityExceeded,
    UniquenessExhausted,
    RandomnessUnavailable,
)
from .generators import (
    fnv1a32,
    Mulberry32,
    rand_int,
    RandomnessSource,
    SystemEntropySource,
    FallbackRandomSource,
    get_source,
    set_source,
    NameParts,
    GeneratedName,
    assemble_name,
    seeded_generate,
    random_generate,
    capacity,
    bulk_seeded,
    bulk_random,
)
from .settings import get_setting


# =============================================================================
# Facade
# =============================================================================

class Haikunator:
    """
    Name generator bound to a set of word lists and default settings.

    Instance ``defaults`` form the middle config layer; keyword options
    passed to each method form the outer layer.

    Args:
        adjectives: Replacement adjectives (empty or None -> built-in)
        nouns: Replacement nouns (empty or None -> built-in)
        defaults: TokenConfig or dict. When None, ``generation.defaults``
            from app.yaml is used.
        source: RandomnessSource for random names (process default if None)
    """

    def __init__(self,
                 adjectives: Optional[Sequence[str]] = None,
                 nouns: Optional[Sequence[str]] = None,
                 defaults=None,
                 source: Optional[RandomnessSource] = None):
        self.adjectives = list(adjectives) if adjectives else None
        self.nouns = list(nouns) if nouns else None
        if defaults is None:
            defaults = get_setting('generation.defaults')
        self.defaults = TokenConfig.coerce(defaults)
        self._source = source

    def _options(self, options: dict) -> Optional[TokenConfig]:
        return TokenConfig.from_dict(options) if options else None

    def generate(self, **options) -> GeneratedName:
        """Random name. Keyword options: delimiter, token_length, token_hex, token_chars."""
        return random_generate(
            self.adjectives, self.nouns, self.defaults, self._options(options),
            source=self._source,
        )

    def preview(self, seed: str, **options) -> GeneratedName:
        """Deterministic name for ``seed``."""
        return seeded_generate(
            seed, self.adjectives, self.nouns, self.defaults, self._options(options),
        )

    def bulk(self, count: int, seed: Optional[str] = None, **options) -> List[GeneratedName]:
        """Unique batch: seeded when ``seed`` is given, random otherwise."""
        opts = self._options(options)
        if seed is not None:
            return bulk_seeded(seed, count, self.adjectives, self.nouns, self.defaults, opts)
        return bulk_random(
            count, self.adjectives, self.nouns, self.defaults, opts, source=self._source,
        )

    def capacity(self, **options) -> int:
        """Number of distinct names under these settings."""
        return capacity(self.adjectives, self.nouns, self.defaults, self._options(options))


def generate(**options) -> str:
    """Random name string with the built-in words."""
    return Haikunator().generate(**options).name


def preview(seed: str, **options) -> str:
    """Seeded name string with the built-in words."""
    return Haikunator().preview(seed, **options).name


__all__ = [
    # Version
    '__version__',
    # Facade
    'Haikunator',
    'generate',
    'preview',
    # Config
    'TokenConfig',
    'DEFAULT_CONFIG',
    'merge_config',
    'PRESETS',
    'get_preset',
    'list_presets',
    # Errors
    'HaikunatorError',
    'InvalidConfiguration',
    'EmptyWordList',
    'CapacityExceeded',
    'UniquenessExhausted',
    'RandomnessUnavailable',
    # Core
    'fnv1a32',
    'Mulberry32',
    'rand_int',
    'RandomnessSource',
    'SystemEntropySource',
    'FallbackRandomSource',
    'get_source',
    'set_source',
    'NameParts',
    'GeneratedName',
    'assemble_name',
    'seeded_generate',
    'random_generate',
    'capacity',
    'bulk_seeded',
    'bulk_random',
]

#!/usr/bin/env python3
"""
Name Generators
===============
- prng: FNV-1a hash and Mulberry32 stream (deterministic core)
- entropy: randomness sources for non-deterministic seeds
- haiku_generator: name assembly and entry points
- words: built-in word lists
"""

from .prng import (
    fnv1a32,
    Mulberry32,
    rand_int,
)
from .entropy import (
    RandomnessSource,
    SystemEntropySource,
    FallbackRandomSource,
    probe_source,
    get_source,
    set_source,
)
from .haiku_generator import (
    NameParts,
    GeneratedName,
    resolve_word_lists,
    assemble_name,
    canonical_seed_payload,
    seeded_generate,
    random_generate,
    capacity,
    bulk_seeded,
    bulk_random,
)
from .words import (
    default_adjectives,
    default_nouns,
    load_word_file,
)

__all__ = [
    # Deterministic core
    'fnv1a32',
    'Mulberry32',
    'rand_int',
    # Randomness sources
    'RandomnessSource',
    'SystemEntropySource',
    'FallbackRandomSource',
    'probe_source',
    'get_source',
    'set_source',
    # Generation
    'NameParts',
    'GeneratedName',
    'resolve_word_lists',
    'assemble_name',
    'canonical_seed_payload',
    'seeded_generate',
    'random_generate',
    'capacity',
    'bulk_seeded',
    'bulk_random',
    # Word lists
    'default_adjectives',
    'default_nouns',
    'load_word_file',
]

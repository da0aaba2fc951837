#!/usr/bin/env python3
"""
Haiku Name Generator
====================
Heroku-style names: adjective, noun and a random token joined by a
delimiter (e.g. ``autumn-river-4821``).

Entry points:
- seeded_generate: deterministic; same seed and arguments -> same name
- random_generate: seeded from a RandomnessSource
- bulk_seeded / bulk_random: batches with uniqueness enforced within the batch

Every draw goes through one Mulberry32 stream in a fixed order:
adjective, noun, then each token character.
"""

import json
import logging
from dataclasses import dataclass, asdict
from typing import List, Optional, Sequence, Tuple

from haikunator.config import TokenConfig, DEFAULT_CONFIG, merge_config
from haikunator.errors import (
    CapacityExceeded,
    EmptyWordList,
    InvalidConfiguration,
    UniquenessExhausted,
)
from haikunator.settings import get_setting
from .entropy import RandomnessSource, get_source
from .prng import Mulberry32, fnv1a32, rand_int
from .words import default_adjectives, default_nouns

logger = logging.getLogger(__name__)

DEFAULT_RETRY_MULTIPLIER = 20


# =============================================================================
# Data Classes
# =============================================================================

@dataclass(frozen=True)
class NameParts:
    """The pieces a name was built from."""
    adjective: str
    noun: str
    token: str


@dataclass(frozen=True)
class GeneratedName:
    """A generated name and its parts."""
    name: str
    parts: NameParts

    def to_dict(self) -> dict:
        return {'name': self.name, 'parts': asdict(self.parts)}

    def __str__(self) -> str:
        return self.name


# =============================================================================
# Assembly
# =============================================================================

def resolve_word_lists(adjectives: Optional[Sequence[str]] = None,
                       nouns: Optional[Sequence[str]] = None
                       ) -> Tuple[Sequence[str], Sequence[str]]:
    """Use caller lists when non-empty, otherwise the built-in lists."""
    return (
        adjectives if adjectives else default_adjectives(),
        nouns if nouns else default_nouns(),
    )


def assemble_name(adjectives: Sequence[str],
                  nouns: Sequence[str],
                  config: TokenConfig,
                  stream) -> GeneratedName:
    """
    Draw one name from a stream.

    Args:
        adjectives: Non-empty adjective list
        nouns: Non-empty noun list
        config: Fully merged config (see ``merge_config``)
        stream: Number stream with a ``next()`` method

    Raises:
        EmptyWordList: If either word list is empty
    """
    if not adjectives:
        raise EmptyWordList("Adjective list is empty")
    if not nouns:
        raise EmptyWordList("Noun list is empty")

    adjective = adjectives[rand_int(stream, len(adjectives))]
    noun = nouns[rand_int(stream, len(nouns))]

    chars = config.token_chars
    token = ''.join(chars[rand_int(stream, len(chars))] for _ in range(config.token_length))

    name = config.delimiter.join(p for p in (adjective, noun, token) if p)
    return GeneratedName(name=name, parts=NameParts(adjective, noun, token))


def _generate(seed_int: int, adjectives, nouns, defaults, options) -> GeneratedName:
    adjectives, nouns = resolve_word_lists(adjectives, nouns)
    config = merge_config(options, defaults, DEFAULT_CONFIG)
    return assemble_name(adjectives, nouns, config, Mulberry32(seed_int))


# =============================================================================
# Entry Points
# =============================================================================

def canonical_seed_payload(seed: str,
                           adjectives: Optional[Sequence[str]] = None,
                           nouns: Optional[Sequence[str]] = None,
                           defaults=None,
                           options=None) -> str:
    """
    Serialize a seed and every argument that affects the result.

    Compact JSON with a fixed key order; absent arguments become ``null``
    and configs use their camelCase wire form.
    """
    defaults = TokenConfig.coerce(defaults)
    options = TokenConfig.coerce(options)
    payload = {
        'seed': seed,
        'adjectives': list(adjectives) if adjectives is not None else None,
        'nouns': list(nouns) if nouns is not None else None,
        'defaults': defaults.to_dict() if defaults is not None else None,
        'options': options.to_dict() if options is not None else None,
    }
    return json.dumps(payload, separators=(',', ':'), ensure_ascii=False)


def seeded_generate(seed: str,
                    adjectives: Optional[Sequence[str]] = None,
                    nouns: Optional[Sequence[str]] = None,
                    defaults=None,
                    options=None) -> GeneratedName:
    """
    Deterministic generation for previews.

    The seed and all arguments are hashed together, so changing any of
    them (including word order) changes the name.

    Args:
        seed: Any string
        adjectives: Replacement adjectives (empty or None -> built-in)
        nouns: Replacement nouns (empty or None -> built-in)
        defaults: Caller default config (TokenConfig or dict)
        options: Per-call config (TokenConfig or dict), wins over defaults
    """
    seed_int = fnv1a32(canonical_seed_payload(seed, adjectives, nouns, defaults, options))
    return _generate(seed_int, adjectives, nouns, defaults, options)


def random_generate(adjectives: Optional[Sequence[str]] = None,
                    nouns: Optional[Sequence[str]] = None,
                    defaults=None,
                    options=None,
                    source: Optional[RandomnessSource] = None) -> GeneratedName:
    """
    Non-deterministic generation.

    Fetches one 32-bit seed from ``source`` (the process default when
    None) and runs the same pipeline as ``seeded_generate``.

    Raises:
        RandomnessUnavailable: If no source can be obtained
    """
    source = source or get_source()
    return _generate(source.next_uint32(), adjectives, nouns, defaults, options)


# =============================================================================
# Bulk Generation
# =============================================================================

def capacity(adjectives: Optional[Sequence[str]] = None,
             nouns: Optional[Sequence[str]] = None,
             defaults=None,
             options=None) -> int:
    """
    Number of distinct (adjective, noun, token) combinations.

    Duplicate words and alphabet characters are counted once.
    """
    adjectives, nouns = resolve_word_lists(adjectives, nouns)
    config = merge_config(options, defaults, DEFAULT_CONFIG)
    token_space = len(set(config.token_chars)) ** config.token_length
    return len(set(adjectives)) * len(set(nouns)) * token_space


def _retry_budget(count: int, retry_multiplier: Optional[int]) -> int:
    if retry_multiplier is None:
        retry_multiplier = get_setting('bulk.retry_multiplier', DEFAULT_RETRY_MULTIPLIER)
    return count * max(1, int(retry_multiplier))


def _check_bulk_request(count, adjectives, nouns, defaults, options) -> None:
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidConfiguration(f"count must be an integer, got {count!r}")
    if count < 0:
        raise InvalidConfiguration(f"count must be >= 0, got {count}")

    available = capacity(adjectives, nouns, defaults, options)
    if count > available:
        raise CapacityExceeded(
            f"Requested {count} unique names but only {available} combinations exist",
            requested=count,
            capacity=available,
        )


def _collect_unique(count: int, budget: int, draw) -> List[GeneratedName]:
    results = []
    seen = set()
    attempts = 0
    while len(results) < count:
        if attempts >= budget:
            raise UniquenessExhausted(
                f"Found only {len(results)} unique names of {count} after {attempts} attempts",
                requested=count,
                capacity=len(results),
            )
        result = draw(attempts)
        attempts += 1
        if result.name in seen:
            logger.debug(f"Bulk collision on '{result.name}' (attempt {attempts})")
            continue
        seen.add(result.name)
        results.append(result)
    return results


def bulk_seeded(seed: str,
                count: int,
                adjectives: Optional[Sequence[str]] = None,
                nouns: Optional[Sequence[str]] = None,
                defaults=None,
                options=None,
                retry_multiplier: Optional[int] = None) -> List[GeneratedName]:
    """
    Reproducible batch of unique names.

    Element ``i`` comes from ``seeded_generate(f"{seed}#{k}", ...)`` where
    ``k`` advances past any sub-seed whose name was already taken, so the
    whole batch repeats exactly for the same arguments.

    Raises:
        CapacityExceeded: ``count`` exceeds the number of combinations
        UniquenessExhausted: Retry budget spent before ``count`` names
    """
    _check_bulk_request(count, adjectives, nouns, defaults, options)
    return _collect_unique(
        count,
        _retry_budget(count, retry_multiplier),
        lambda index: seeded_generate(f"{seed}#{index}", adjectives, nouns, defaults, options),
    )


def bulk_random(count: int,
                adjectives: Optional[Sequence[str]] = None,
                nouns: Optional[Sequence[str]] = None,
                defaults=None,
                options=None,
                source: Optional[RandomnessSource] = None,
                retry_multiplier: Optional[int] = None) -> List[GeneratedName]:
    """
    Batch of unique random names.

    Raises:
        CapacityExceeded: ``count`` exceeds the number of combinations
        UniquenessExhausted: Retry budget spent before ``count`` names
    """
    _check_bulk_request(count, adjectives, nouns, defaults, options)
    source = source or get_source()
    return _collect_unique(
        count,
        _retry_budget(count, retry_multiplier),
        lambda _: random_generate(adjectives, nouns, defaults, options, source=source),
    )


__all__ = [
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
]

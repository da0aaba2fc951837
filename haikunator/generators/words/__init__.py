#!/usr/bin/env python3
"""
Word Lists
==========
Built-in adjective and noun lists, loaded once per process from YAML.

The lists are returned as tuples and shared by every call; there is no
API to modify them. Callers replace them per call by passing their own
non-empty lists to the generator.
"""

from functools import lru_cache
from pathlib import Path
from typing import Dict, Tuple

import yaml

from haikunator.errors import EmptyWordList
from haikunator.settings import get_setting, resolve_path

WORDS_DIR = Path(__file__).parent
DEFAULT_WORDS_FILE = WORDS_DIR / 'default.yaml'


@lru_cache(maxsize=4)
def _load_yaml(path: str) -> Dict[str, Tuple[str, ...]]:
    """Load a word-list YAML file with ``adjectives`` and ``nouns`` keys."""
    filepath = Path(path)
    if not filepath.exists():
        raise FileNotFoundError(f"Missing word list file: {filepath}")
    with open(filepath, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    return {
        'adjectives': tuple(str(w) for w in data.get('adjectives') or ()),
        'nouns': tuple(str(w) for w in data.get('nouns') or ()),
    }


def word_lists_path() -> Path:
    """Active word list file (``wordlists.path`` setting, else the bundled one)."""
    configured = get_setting('wordlists.path')
    if configured:
        return resolve_path(configured)
    return DEFAULT_WORDS_FILE


def _default_lists() -> Dict[str, Tuple[str, ...]]:
    return _load_yaml(str(word_lists_path()))


def default_adjectives() -> Tuple[str, ...]:
    """Built-in adjectives, in their fixed order."""
    return _default_lists()['adjectives']


def default_nouns() -> Tuple[str, ...]:
    """Built-in nouns, in their fixed order."""
    return _default_lists()['nouns']


def load_word_file(path) -> Tuple[str, ...]:
    """
    Read a plain-text word list: one word per line.

    Blank lines and lines starting with ``#`` are skipped.

    Raises:
        EmptyWordList: If the file holds no words
    """
    filepath = Path(path)
    words = []
    for line in filepath.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if line and not line.startswith('#'):
            words.append(line)
    if not words:
        raise EmptyWordList(f"Word list file is empty: {filepath}")
    return tuple(words)


__all__ = [
    'default_adjectives',
    'default_nouns',
    'load_word_file',
    'word_lists_path',
    'DEFAULT_WORDS_FILE',
]

"""
Tests for Randomness Sources
============================
Tests for source variants and selection in haikunator/generators/entropy.py.
"""

import logging
import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from haikunator.errors import RandomnessUnavailable
from haikunator.generators import entropy
from haikunator.generators.entropy import (
    RandomnessSource,
    SystemEntropySource,
    FallbackRandomSource,
    probe_source,
    get_source,
    set_source,
)


@pytest.fixture(autouse=True)
def reset_source():
    """Each test starts without a cached process source."""
    set_source(None)
    yield
    set_source(None)


@pytest.fixture
def no_urandom(monkeypatch):
    """Simulate a platform without an entropy pool."""
    def _missing(n):
        raise NotImplementedError("no entropy source")
    monkeypatch.setattr(entropy.os, "urandom", _missing)


class TestSources:
    """Tests for the source variants."""

    def test_system_source_range(self):
        source = SystemEntropySource()
        assert source.strong
        for _ in range(100):
            assert 0 <= source.next_uint32() < 2 ** 32

    def test_fallback_source_is_weak(self, caplog):
        with caplog.at_level(logging.WARNING):
            source = FallbackRandomSource()
        assert not source.strong
        assert "weak" in caplog.text
        assert 0 <= source.next_uint32() < 2 ** 32

    def test_fallback_source_seedable(self):
        a = FallbackRandomSource(seed=5)
        b = FallbackRandomSource(seed=5)
        assert [a.next_uint32() for _ in range(5)] == [b.next_uint32() for _ in range(5)]

    def test_interface_is_abstract(self):
        with pytest.raises(TypeError):
            RandomnessSource()


class TestProbeSource:
    """Tests for capability probing."""

    def test_prefers_system_source(self):
        assert isinstance(probe_source(), SystemEntropySource)
        assert isinstance(probe_source(allow_weak=True), SystemEntropySource)

    def test_missing_entropy_raises(self, no_urandom):
        with pytest.raises(RandomnessUnavailable):
            probe_source()

    def test_missing_entropy_with_opt_in(self, no_urandom):
        source = probe_source(allow_weak=True)
        assert isinstance(source, FallbackRandomSource)
        assert not source.strong


class TestProcessSource:
    """Tests for get_source() / set_source()."""

    def test_default_is_cached(self):
        assert get_source() is get_source()

    def test_set_source(self):
        custom = FallbackRandomSource(seed=1)
        set_source(custom)
        assert get_source() is custom

    def test_default_does_not_silently_degrade(self, no_urandom):
        """Without the setting, a missing entropy pool is an error."""
        with pytest.raises(RandomnessUnavailable):
            get_source()

    def test_setting_enables_fallback(self, no_urandom, monkeypatch):
        monkeypatch.setattr(
            entropy, "get_setting",
            lambda path, default=None: True if path == "entropy.allow_weak_fallback" else default,
        )
        assert isinstance(get_source(), FallbackRandomSource)

    def test_random_generate_propagates(self, no_urandom):
        from haikunator.generators import random_generate

        with pytest.raises(RandomnessUnavailable):
            random_generate()

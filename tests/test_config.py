"""
Tests for Token Configuration
=============================
Tests for TokenConfig, merge_config and presets in haikunator/config.py.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from haikunator.config import (
    TokenConfig,
    DEFAULT_CONFIG,
    HEX_CHARS,
    merge_config,
    get_preset,
    list_presets,
    PRESETS,
)
from haikunator.errors import InvalidConfiguration, HaikunatorError


class TestTokenConfig:
    """Tests for the TokenConfig record."""

    def test_all_fields_default_to_absent(self):
        """An empty config sets nothing."""
        cfg = TokenConfig()
        assert cfg.delimiter is None
        assert cfg.token_length is None
        assert cfg.token_hex is None
        assert cfg.token_chars is None
        assert not cfg.is_complete

    def test_default_config_is_complete(self):
        """Built-in defaults populate every field."""
        assert DEFAULT_CONFIG.is_complete
        assert DEFAULT_CONFIG.delimiter == "-"
        assert DEFAULT_CONFIG.token_length == 4
        assert DEFAULT_CONFIG.token_hex is False
        assert DEFAULT_CONFIG.token_chars == "0123456789"

    def test_frozen(self):
        """Configs cannot be modified."""
        with pytest.raises(Exception):
            DEFAULT_CONFIG.token_length = 9

    def test_from_dict_wire_keys(self):
        """camelCase keys map to fields."""
        cfg = TokenConfig.from_dict({"tokenLength": 6, "tokenHex": True})
        assert cfg == TokenConfig(token_length=6, token_hex=True)

    def test_from_dict_snake_keys(self):
        """snake_case keys are accepted too."""
        cfg = TokenConfig.from_dict({"token_chars": "ab", "delimiter": "."})
        assert cfg == TokenConfig(delimiter=".", token_chars="ab")

    def test_from_dict_unknown_key(self):
        """Unknown keys are rejected."""
        with pytest.raises(InvalidConfiguration, match="Unknown config key"):
            TokenConfig.from_dict({"tokenSize": 3})

    def test_from_dict_none(self):
        assert TokenConfig.from_dict(None) is None

    def test_to_dict_omits_absent(self):
        """Wire form keeps field order and drops unset fields."""
        cfg = TokenConfig(token_hex=True, delimiter="_")
        assert list(cfg.to_dict().items()) == [("delimiter", "_"), ("tokenHex", True)]

    def test_coerce_rejects_other_types(self):
        with pytest.raises(InvalidConfiguration):
            TokenConfig.coerce(["tokenLength", 3])


class TestMergeConfig:
    """Tests for the three-layer merge."""

    def test_no_layers_gives_defaults(self):
        assert merge_config() == DEFAULT_CONFIG

    def test_outer_wins_over_middle(self):
        """Per-call options beat caller defaults."""
        merged = merge_config(
            TokenConfig(token_length=6),
            TokenConfig(token_length=2, delimiter="_"),
        )
        assert merged.token_length == 6
        assert merged.delimiter == "_"

    def test_middle_wins_over_inner(self):
        merged = merge_config(None, TokenConfig(delimiter="."))
        assert merged.delimiter == "."
        assert merged.token_length == 4

    def test_absent_outer_field_falls_through(self):
        """None in the outer layer does not hide lower layers."""
        merged = merge_config(
            TokenConfig(delimiter=None, token_length=1),
            TokenConfig(delimiter="+"),
        )
        assert merged.delimiter == "+"

    def test_hex_overrides_middle_alphabet(self):
        """tokenHex in the outer layer forces the hex alphabet."""
        merged = merge_config(
            {"tokenLength": 6, "tokenHex": True},
            {"delimiter": "-", "tokenLength": 4, "tokenHex": False, "tokenChars": "0123456789"},
        )
        assert merged.token_hex is True
        assert merged.token_chars == HEX_CHARS
        assert merged.token_length == 6

    def test_hex_overrides_explicit_alphabet_same_layer(self):
        """tokenHex wins even over tokenChars in the same layer."""
        merged = merge_config(TokenConfig(token_hex=True, token_chars="xyz"))
        assert merged.token_chars == "0123456789abcdef"

    def test_false_outer_hex_beats_true_middle(self):
        """An explicit False is a value, not an absence."""
        merged = merge_config(TokenConfig(token_hex=False), TokenConfig(token_hex=True))
        assert merged.token_hex is False
        assert merged.token_chars == "0123456789"

    def test_zero_length_is_a_value(self):
        """token_length=0 is not treated as absent."""
        merged = merge_config(TokenConfig(token_length=0), TokenConfig(token_length=5))
        assert merged.token_length == 0

    def test_inputs_not_mutated(self):
        """Merging returns a new object and leaves layers alone."""
        outer = TokenConfig(token_hex=True, token_chars="ab")
        middle = TokenConfig(delimiter="_")
        merged = merge_config(outer, middle)
        assert outer == TokenConfig(token_hex=True, token_chars="ab")
        assert middle == TokenConfig(delimiter="_")
        assert merged is not outer and merged is not middle

    def test_dict_inputs_not_mutated(self):
        outer = {"tokenHex": True, "tokenChars": "ab"}
        merge_config(outer)
        assert outer == {"tokenHex": True, "tokenChars": "ab"}

    def test_negative_length_rejected(self):
        with pytest.raises(InvalidConfiguration, match="token_length"):
            merge_config(TokenConfig(token_length=-1))

    def test_non_integer_length_rejected(self):
        with pytest.raises(InvalidConfiguration):
            merge_config(TokenConfig(token_length=2.5))
        with pytest.raises(InvalidConfiguration):
            merge_config(TokenConfig(token_length=True))

    def test_empty_alphabet_with_positive_length_rejected(self):
        with pytest.raises(InvalidConfiguration, match="token_chars is empty"):
            merge_config(TokenConfig(token_chars=""))

    def test_empty_alphabet_with_zero_length_allowed(self):
        merged = merge_config(TokenConfig(token_chars="", token_length=0))
        assert merged.token_length == 0

    def test_non_string_delimiter_rejected(self):
        with pytest.raises(InvalidConfiguration, match="delimiter"):
            merge_config(TokenConfig(delimiter=3))

    def test_errors_are_value_errors(self):
        """Hierarchy roots at ValueError."""
        with pytest.raises(ValueError):
            merge_config(TokenConfig(token_length=-5))
        assert issubclass(InvalidConfiguration, HaikunatorError)


class TestPresets:
    """Tests for named presets."""

    def test_get_preset(self):
        assert get_preset("hex") == TokenConfig(token_length=6, token_hex=True)

    def test_unknown_preset_lists_available(self):
        with pytest.raises(InvalidConfiguration, match="Available presets"):
            get_preset("nope")

    def test_all_presets_merge_cleanly(self):
        for name in PRESETS:
            assert merge_config(None, get_preset(name)).is_complete

    def test_list_presets(self):
        presets = list_presets()
        assert set(presets) == set(PRESETS)
        assert presets["docker"]["config"] == {"delimiter": "_", "tokenLength": 0}
        assert all(p["description"] for p in presets.values())

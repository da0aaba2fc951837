#!/usr/bin/env python3
"""
Token Configuration
===================
Settings that shape the token and the joined name, plus the three-layer
merge that resolves them for a single call.

Layers, from weakest to strongest:
    inner   library built-in defaults (``DEFAULT_CONFIG``)
    middle  caller-supplied defaults
    outer   per-call options

Named presets can stand in for the middle layer.
"""

from dataclasses import dataclass, fields, replace
from typing import Optional

from .errors import InvalidConfiguration

DECIMAL_CHARS = "0123456789"
HEX_CHARS = "0123456789abcdef"

# Wire names used by host frameworks (camelCase) -> dataclass field names
_WIRE_KEYS = {
    'delimiter': 'delimiter',
    'tokenLength': 'token_length',
    'tokenHex': 'token_hex',
    'tokenChars': 'token_chars',
}


@dataclass(frozen=True)
class TokenConfig:
    """
    Name formatting settings. ``None`` means "not set in this layer".

    A fully merged config (see ``merge_config``) has every field populated.
    """
    delimiter: Optional[str] = None
    token_length: Optional[int] = None
    token_hex: Optional[bool] = None
    token_chars: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> Optional['TokenConfig']:
        """
        Build a config from plain data.

        Accepts camelCase wire keys (``tokenLength``) or snake_case keys
        (``token_length``). ``None`` values count as absent.

        Raises:
            InvalidConfiguration: On keys that are not config fields
        """
        if data is None:
            return None
        field_names = {f.name for f in fields(cls)}
        values = {}
        for key, value in data.items():
            name = _WIRE_KEYS.get(key, key)
            if name not in field_names:
                known = ', '.join(sorted(_WIRE_KEYS))
                raise InvalidConfiguration(
                    f"Unknown config key '{key}'. Known keys: {known}"
                )
            values[name] = value
        return cls(**values)

    @classmethod
    def coerce(cls, value) -> Optional['TokenConfig']:
        """Accept a TokenConfig, a plain dict, or None."""
        if value is None or isinstance(value, cls):
            return value
        if isinstance(value, dict):
            return cls.from_dict(value)
        raise InvalidConfiguration(f"Invalid config: {value!r}")

    def to_dict(self) -> dict:
        """Wire form: camelCase keys in field order, absent fields omitted."""
        result = {}
        for wire_key, name in _WIRE_KEYS.items():
            value = getattr(self, name)
            if value is not None:
                result[wire_key] = value
        return result

    @property
    def is_complete(self) -> bool:
        return all(getattr(self, f.name) is not None for f in fields(self))


DEFAULT_CONFIG = TokenConfig(
    delimiter="-",
    token_length=4,
    token_hex=False,
    token_chars=DECIMAL_CHARS,
)


def _pick(name: str, *layers: Optional[TokenConfig]):
    for layer in layers:
        if layer is not None:
            value = getattr(layer, name)
            if value is not None:
                return value
    return None


def merge_config(outer: Optional[TokenConfig] = None,
                 middle: Optional[TokenConfig] = None,
                 inner: TokenConfig = DEFAULT_CONFIG) -> TokenConfig:
    """
    Resolve one complete config from up to three layers.

    Each field takes the outer value if set, else the middle value, else
    the inner value. When ``token_hex`` ends up true the alphabet becomes
    ``HEX_CHARS`` whatever ``token_chars`` says.

    Args:
        outer: Per-call options (TokenConfig, dict, or None)
        middle: Caller defaults (TokenConfig, dict, or None)
        inner: Built-in defaults

    Returns:
        A new, validated TokenConfig. Inputs are never modified.

    Raises:
        InvalidConfiguration: If the merged values cannot produce a name
    """
    layers = (
        TokenConfig.coerce(outer),
        TokenConfig.coerce(middle),
        TokenConfig.coerce(inner),
    )
    merged = TokenConfig(**{f.name: _pick(f.name, *layers) for f in fields(TokenConfig)})

    if merged.token_hex:
        merged = replace(merged, token_hex=True, token_chars=HEX_CHARS)
    else:
        merged = replace(merged, token_hex=False)

    validate_config(merged)
    return merged


def validate_config(config: TokenConfig) -> None:
    """
    Check that a merged config can assemble a name.

    Raises:
        InvalidConfiguration: On a non-string delimiter, a negative or
            non-integer token length, or an empty alphabet with a
            positive token length
    """
    if not isinstance(config.delimiter, str):
        raise InvalidConfiguration(f"delimiter must be a string, got {config.delimiter!r}")

    length = config.token_length
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidConfiguration(f"token_length must be an integer, got {length!r}")
    if length < 0:
        raise InvalidConfiguration(f"token_length must be >= 0, got {length}")

    if not isinstance(config.token_chars, str):
        raise InvalidConfiguration(f"token_chars must be a string, got {config.token_chars!r}")
    if length > 0 and not config.token_chars:
        raise InvalidConfiguration(
            f"token_chars is empty but token_length is {length}"
        )


# =============================================================================
# Presets
# =============================================================================
# Named middle layers for common name shapes.

PRESETS = {
    "default": {
        "config": TokenConfig(),
        "description": "Built-in defaults: 4 decimal digits, '-' delimiter",
    },
    "hex": {
        "config": TokenConfig(token_length=6, token_hex=True),
        "description": "6 hexadecimal characters",
    },
    "short": {
        "config": TokenConfig(token_length=0),
        "description": "Adjective and noun only, no token",
    },
    "docker": {
        "config": TokenConfig(delimiter="_", token_length=0),
        "description": "Underscore-joined adjective_noun, no token",
    },
    "long": {
        "config": TokenConfig(token_length=8, token_chars="abcdefghijklmnopqrstuvwxyz0123456789"),
        "description": "8 lowercase alphanumeric characters",
    },
}


def get_preset(name: str) -> TokenConfig:
    """
    Look up a preset by name.

    Raises:
        InvalidConfiguration: If the preset is not found
    """
    preset = PRESETS.get(name)
    if preset is None:
        available = ', '.join(sorted(PRESETS.keys()))
        raise InvalidConfiguration(
            f"Unknown preset '{name}'. Available presets: {available}"
        )
    return preset["config"]


def list_presets() -> dict:
    """List all presets with their settings and descriptions."""
    return {
        name: {
            "config": p["config"].to_dict(),
            "description": p["description"],
        }
        for name, p in PRESETS.items()
    }


__all__ = [
    'TokenConfig',
    'DEFAULT_CONFIG',
    'DECIMAL_CHARS',
    'HEX_CHARS',
    'merge_config',
    'validate_config',
    'PRESETS',
    'get_preset',
    'list_presets',
]

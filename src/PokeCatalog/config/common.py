"""Typed accessors for the parsed YAML config.

Every error names the dotted config key (e.g. ``api.max_workers``) so a bad
override file points straight at the offending line.
"""

from __future__ import annotations

from typing import Any, Collection, Mapping


def get_section(raw: Mapping[str, Any], key: str, *, required: bool) -> Mapping[str, Any]:
    """Return the top-level section ``key`` (``log``, ``api``, ...).

    A missing optional section reads as an empty mapping, so every field of it
    falls back to its default.

    Raises:
        ValueError: If a required section is missing.
        TypeError: If the section is not a mapping.
    """
    section = raw.get(key)
    if section is None:
        if required:
            raise ValueError(f"Missing required config: {key}")
        return {}
    if not isinstance(section, Mapping):
        raise TypeError(f"{key} must be an object")
    return section


def get_required_value(section: Mapping[str, Any], field: str, config_key: str) -> Any:
    if field not in section:
        raise ValueError(f"Missing required config: {config_key}")
    return section[field]


def get_optional_value(section: Mapping[str, Any], field: str, default: Any) -> Any:
    return section.get(field, default)


def _expect(value: Any, kinds: type | tuple[type, ...], config_key: str, what: str) -> Any:
    # YAML booleans are ints in Python; only accept them where asked for.
    if isinstance(value, bool) and bool not in (kinds if isinstance(kinds, tuple) else (kinds,)):
        raise TypeError(f"{config_key} must be {what}")
    if not isinstance(value, kinds):
        raise TypeError(f"{config_key} must be {what}")
    return value


def expect_str(value: Any, config_key: str) -> str:
    return _expect(value, str, config_key, "a string")


def expect_bool(value: Any, config_key: str) -> bool:
    return _expect(value, bool, config_key, "a boolean")


def expect_int(value: Any, config_key: str) -> int:
    return _expect(value, int, config_key, "an integer")


def expect_float(value: Any, config_key: str) -> float:
    """Accept ints too (``timeout: 30``) and return a float."""
    return float(_expect(value, (int, float), config_key, "a number"))


def expect_str_list(value: Any, config_key: str) -> list[str]:
    """Validate a list such as ``output.formats``; each item must be a string."""
    items = _expect(value, list, config_key, "a list")
    return [expect_str(item, f"{config_key}[{idx}]") for idx, item in enumerate(items)]


def expect_choice(value: str, choices: Collection[str], config_key: str) -> str:
    """Check ``value`` against a closed set (sort keys, log levels, backends)."""
    if value not in choices:
        raise ValueError(f"{config_key} must be one of {sorted(choices)}")
    return value

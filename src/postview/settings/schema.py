"""Schema helpers for the application settings file."""

from __future__ import annotations

from copy import deepcopy
from typing import Any

from jsonschema import Draft202012Validator

from ..config import DEFAULT_BASE_URL, DEFAULT_PAGE_SIZE, PAGE_SIZE_OPTIONS

SETTINGS_SCHEMA: dict[str, Any] = {
    "$id": "postview/settings.schema.json",
    "type": "object",
    "required": ["schema", "api", "ui", "consistency", "logging"],
    "properties": {
        "schema": {"const": "postview/settings@1"},
        "api": {
            "type": "object",
            "required": ["base_url"],
            "properties": {
                "base_url": {"type": "string", "minLength": 1},
                "timeout": {"type": ["number", "null"], "exclusiveMinimum": 0},
            },
            "additionalProperties": False,
        },
        "ui": {
            "type": "object",
            "properties": {
                "page_size": {"type": "integer", "enum": list(PAGE_SIZE_OPTIONS)},
                "owner_sort_key": {"type": "string", "enum": ["name", "email"]},
            },
            "additionalProperties": True,
        },
        "consistency": {
            "type": "object",
            "properties": {
                "discard_stale_fetches": {"type": "boolean"},
            },
            "additionalProperties": False,
        },
        "logging": {
            "type": "object",
            "properties": {
                "level": {
                    "type": "string",
                    "enum": ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                },
            },
            "additionalProperties": False,
        },
    },
    "additionalProperties": True,
}

DEFAULT_SETTINGS: dict[str, Any] = {
    "schema": "postview/settings@1",
    "api": {
        "base_url": DEFAULT_BASE_URL,
        "timeout": None,
    },
    "ui": {
        "page_size": DEFAULT_PAGE_SIZE,
        "owner_sort_key": "name",
    },
    "consistency": {
        "discard_stale_fetches": True,
    },
    "logging": {
        "level": "WARNING",
    },
}

_SECTIONS = ("api", "ui", "consistency", "logging")

_validator = Draft202012Validator(SETTINGS_SCHEMA)


def merge_with_defaults(data: dict[str, Any] | None) -> dict[str, Any]:
    """Merge *data* with :data:`DEFAULT_SETTINGS` and validate the result."""

    merged = deepcopy(DEFAULT_SETTINGS)
    if data:
        for key, value in data.items():
            if key in _SECTIONS and isinstance(value, dict):
                merged.setdefault(key, {}).update(value)
                continue
            merged[key] = value
    _validator.validate(merged)
    return merged


def validate_settings(data: dict[str, Any]) -> None:
    """Validate *data* against the settings schema."""

    _validator.validate(data)


__all__ = ["DEFAULT_SETTINGS", "SETTINGS_SCHEMA", "merge_with_defaults", "validate_settings"]

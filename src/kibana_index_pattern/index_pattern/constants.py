"""Shared index pattern constants."""

from __future__ import annotations

FIELDS_FILENAME = "fields.yml"
INDEX_PATTERN_TYPE = "index-pattern"
SAVED_OBJECT_VERSION = 1
DEFAULT_TIME_FIELD = "@timestamp"

DEFAULT_VARIANT = "default"
LEGACY_VARIANT = "5.x"
TARGET_DIR_PARTS: tuple[str, ...] = ("_meta", "kibana")

NUMBER_TYPES: frozenset[str] = frozenset(
    {
        "half_float",
        "scaled_float",
        "float",
        "double",
        "integer",
        "long",
        "short",
        "byte",
        "bytes",
        "percent",
    }
)
STRING_TYPES: frozenset[str] = frozenset({"", "text", "keyword"})

# Declared types rendered with a non-default Kibana formatter.
TYPE_FORMATS: dict[str, str] = {
    "date": "date",
    "byte": "bytes",
    "bytes": "bytes",
    "percent": "percent",
}

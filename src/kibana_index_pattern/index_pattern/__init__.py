"""Index pattern generation exports."""

from .constants import DEFAULT_VARIANT, INDEX_PATTERN_TYPE, LEGACY_VARIANT
from .field_transformer import build_fields_and_format_map, transform_field
from .index_pattern_generator import (
    FieldsNotFoundError,
    FieldsParseError,
    IndexPatternError,
    IndexPatternGenerator,
    IndexPatternWriteError,
    clean_name,
)
from .pattern_models import GeneratedIndexPattern

__all__ = [
    "DEFAULT_VARIANT",
    "INDEX_PATTERN_TYPE",
    "LEGACY_VARIANT",
    "build_fields_and_format_map",
    "transform_field",
    "FieldsNotFoundError",
    "FieldsParseError",
    "IndexPatternError",
    "IndexPatternGenerator",
    "IndexPatternWriteError",
    "clean_name",
    "GeneratedIndexPattern",
]

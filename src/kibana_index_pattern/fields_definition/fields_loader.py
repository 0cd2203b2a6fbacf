"""Fields definition loading and flattening service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .field_models import FieldDefinition, FormatParams

_FIELD_KEYS: frozenset[str] = frozenset(
    {
        "type",
        "format",
        "multi_fields",
        "pattern",
        "input_format",
        "output_format",
        "output_precision",
        "label_template",
        "url_template",
        "index",
        "analyzed",
        "doc_values",
        "searchable",
        "aggregatable",
        "count",
    }
)


class FieldsDefinitionError(Exception):
    """Raised when fields.yml cannot be read or has an invalid structure."""


def load_fields_document(fields_path: Path | str) -> list[Any]:
    """Read and parse a fields.yml document into its list of top-level entries."""
    path = Path(fields_path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise FieldsDefinitionError(f"Failed to read fields file {path}: {exc}") from exc

    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise FieldsDefinitionError(f"Failed to parse fields file {path}: {exc}") from exc

    if parsed is None:
        return []
    if not isinstance(parsed, list):
        raise FieldsDefinitionError("Fields document root must be a list of entries.")
    return parsed


def flatten_fields(entries: Sequence[Any]) -> list[FieldDefinition]:
    """Return the declared fields in order, with group names joined into dotted paths."""
    fields: list[FieldDefinition] = []
    seen_paths: set[str] = set()
    _flatten_entries(entries, prefix="", fields=fields, seen_paths=seen_paths)
    return fields


def _flatten_entries(
    entries: Any, *, prefix: str, fields: list[FieldDefinition], seen_paths: set[str]
) -> None:
    if entries is None:
        return
    if not isinstance(entries, list):
        raise FieldsDefinitionError(f"Fields of '{prefix or '<root>'}' must be a list.")

    for entry in entries:
        if not isinstance(entry, Mapping):
            raise FieldsDefinitionError("Field entries must be mappings.")

        if "name" not in entry:
            stray_keys = sorted(_FIELD_KEYS.intersection(entry))
            if stray_keys:
                raise FieldsDefinitionError(
                    f"Field entry declares {', '.join(stray_keys)} without a name."
                )
            # Top-level key sections only group fields for documentation.
            _flatten_entries(
                entry.get("fields"), prefix=prefix, fields=fields, seen_paths=seen_paths
            )
            continue

        name = _require_name(entry.get("name"))
        path = name if not prefix else f"{prefix}.{name}"

        if entry.get("type") == "group":
            if entry.get("enabled", True) is False:
                continue
            _flatten_entries(entry.get("fields"), prefix=path, fields=fields, seen_paths=seen_paths)
            continue

        _register_field(_build_definition(path, name, entry), fields, seen_paths)
        for sub_entry in entry.get("multi_fields") or ():
            if not isinstance(sub_entry, Mapping):
                raise FieldsDefinitionError(f"Multi fields of '{path}' must be mappings.")
            sub_name = _require_name(sub_entry.get("name"))
            _register_field(
                _build_definition(f"{path}.{sub_name}", sub_name, sub_entry), fields, seen_paths
            )


def _build_definition(path: str, name: str, entry: Mapping[str, Any]) -> FieldDefinition:
    field_type = entry.get("type") or ""
    if not isinstance(field_type, str):
        raise FieldsDefinitionError(f"Field '{path}' type must be a string.")

    return FieldDefinition(
        path=path,
        name=name,
        type=field_type,
        format=_optional_string(entry.get("format"), path, "format"),
        format_params=_build_format_params(path, entry),
        index=_optional_bool(entry.get("index"), path, "index"),
        analyzed=_optional_bool(entry.get("analyzed"), path, "analyzed"),
        doc_values=_optional_bool(entry.get("doc_values"), path, "doc_values"),
        searchable=_optional_bool(entry.get("searchable"), path, "searchable"),
        aggregatable=_optional_bool(entry.get("aggregatable"), path, "aggregatable"),
        count=_optional_int(entry.get("count"), path, "count") or 0,
    )


def _build_format_params(path: str, entry: Mapping[str, Any]) -> FormatParams:
    return FormatParams(
        pattern=_optional_string(entry.get("pattern"), path, "pattern"),
        input_format=_optional_string(entry.get("input_format"), path, "input_format"),
        output_format=_optional_string(entry.get("output_format"), path, "output_format"),
        output_precision=_optional_int(entry.get("output_precision"), path, "output_precision"),
        label_template=_optional_string(entry.get("label_template"), path, "label_template"),
        url_template=_optional_string(entry.get("url_template"), path, "url_template"),
    )


def _register_field(
    definition: FieldDefinition, fields: list[FieldDefinition], seen_paths: set[str]
) -> None:
    if definition.path in seen_paths:
        raise FieldsDefinitionError(f"Duplicate field detected: {definition.path}")
    seen_paths.add(definition.path)
    fields.append(definition)


def _require_name(value: Any) -> str:
    # Unquoted YAML names such as `on` or `1.10` load as other scalars; quote them.
    if not isinstance(value, str):
        raise FieldsDefinitionError(f"Field name must be a string, got {value!r}.")
    name = value.strip()
    if not name:
        raise FieldsDefinitionError("Field name must not be empty.")
    return name


def _optional_string(value: Any, path: str, key: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise FieldsDefinitionError(f"Field '{path}' {key} must be a string.")
    return value or None


def _optional_bool(value: Any, path: str, key: str) -> bool | None:
    if value is None:
        return None
    if not isinstance(value, bool):
        raise FieldsDefinitionError(f"Field '{path}' {key} must be a boolean.")
    return value


def _optional_int(value: Any, path: str, key: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise FieldsDefinitionError(f"Field '{path}' {key} must be an integer.")
    return value

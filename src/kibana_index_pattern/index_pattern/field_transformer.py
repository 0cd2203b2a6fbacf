"""Kibana field entry and field format derivation."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from kibana_index_pattern.fields_definition.field_models import FieldDefinition, FormatParams

from .constants import NUMBER_TYPES, STRING_TYPES, TYPE_FORMATS


def build_fields_and_format_map(
    definitions: Sequence[FieldDefinition],
) -> tuple[list[dict[str, Any]], dict[str, dict[str, Any]]]:
    """Return the Kibana field list and the field format map for the given definitions."""
    fields: list[dict[str, Any]] = []
    format_map: dict[str, dict[str, Any]] = {}
    for definition in definitions:
        field_entry, format_entry = transform_field(definition)
        fields.append(field_entry)
        if format_entry is not None:
            format_map[definition.path] = format_entry
    return fields, format_map


def transform_field(definition: FieldDefinition) -> tuple[dict[str, Any], dict[str, Any] | None]:
    """Map one field definition to its Kibana field entry and optional format entry."""
    field_entry: dict[str, Any] = {
        "name": definition.path,
        "type": _kibana_type(definition.type),
        "count": definition.count,
        "scripted": False,
        "indexed": _flag(definition.index, True),
        "analyzed": _flag(definition.analyzed, False),
        "doc_values": _flag(definition.doc_values, True),
        "searchable": _flag(definition.searchable, True),
        "aggregatable": _flag(definition.aggregatable, True),
    }
    if definition.type == "text":
        field_entry["aggregatable"] = False
    elif definition.type == "binary":
        for key in ("indexed", "analyzed", "doc_values", "searchable", "aggregatable"):
            field_entry[key] = False

    return field_entry, _format_entry(definition)


def _kibana_type(declared_type: str) -> str:
    if declared_type in NUMBER_TYPES:
        return "number"
    if declared_type in STRING_TYPES:
        return "string"
    return declared_type


def _flag(value: bool | None, default: bool) -> bool:
    return default if value is None else value


def _format_entry(definition: FieldDefinition) -> dict[str, Any] | None:
    format_id = definition.format or TYPE_FORMATS.get(definition.type)
    params = _format_params(definition.format_params)
    if format_id is None and not params:
        return None

    entry: dict[str, Any] = {}
    if format_id is not None:
        entry["id"] = format_id
    if params:
        entry["params"] = params
    return entry


def _format_params(params: FormatParams) -> dict[str, Any]:
    candidates = (
        ("pattern", params.pattern),
        ("inputFormat", params.input_format),
        ("outputFormat", params.output_format),
        ("outputPrecision", params.output_precision),
        ("labelTemplate", params.label_template),
        ("urlTemplate", params.url_template),
    )
    return {key: value for key, value in candidates if value is not None}

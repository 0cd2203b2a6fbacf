"""Index pattern generator service."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from kibana_index_pattern.fields_definition import (
    FieldsDefinitionError,
    flatten_fields,
    load_fields_document,
)

from .constants import (
    DEFAULT_TIME_FIELD,
    DEFAULT_VARIANT,
    FIELDS_FILENAME,
    INDEX_PATTERN_TYPE,
    LEGACY_VARIANT,
    SAVED_OBJECT_VERSION,
    TARGET_DIR_PARTS,
)
from .field_transformer import build_fields_and_format_map
from .pattern_models import GeneratedIndexPattern

logger = logging.getLogger(__name__)

_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]+")


class IndexPatternError(Exception):
    """Base error for index pattern generation failures."""


class FieldsNotFoundError(IndexPatternError):
    """Raised when the beat directory has no fields.yml."""


class FieldsParseError(IndexPatternError):
    """Raised when fields.yml cannot be read, parsed or encoded."""


class IndexPatternWriteError(IndexPatternError):
    """Raised when a target directory or index pattern file cannot be written."""


def clean_name(name: str) -> str:
    """Strip every character that is not an ASCII letter or digit."""
    return _NON_ALPHANUMERIC.sub("", name)


class IndexPatternGenerator:  # pylint: disable=too-many-instance-attributes
    """Generate the 5.x and default index pattern files of one beat.

    `fields_yaml`, `target_dir_default` and `target_dir_5x` are resolved at
    construction but read again on every `generate()` call, so callers may
    redirect them in between.
    """

    def __init__(
        self,
        index_name: str,
        filename_prefix: str,
        beat_dir: Path | str,
        kibana_version: str,
        *,
        time_field_name: str | None = DEFAULT_TIME_FIELD,
    ) -> None:
        beat_path = Path(beat_dir)
        fields_yaml = beat_path / FIELDS_FILENAME
        if not fields_yaml.is_file():
            raise FieldsNotFoundError(f"Fields file not found: {fields_yaml}")

        self.index_name = index_name
        self.kibana_version = kibana_version
        self.time_field_name = time_field_name
        self.fields_yaml: Path | str | None = fields_yaml
        self.target_filename = f"{clean_name(filename_prefix)}.json"
        self.target_dir_default: Path | str = _create_target_dir(beat_path, DEFAULT_VARIANT)
        self.target_dir_5x: Path | str = _create_target_dir(beat_path, LEGACY_VARIANT)

    def generate(self) -> tuple[GeneratedIndexPattern, GeneratedIndexPattern]:
        """Build both index pattern documents and write them to their target directories."""
        attributes = self._build_attributes()
        legacy = self._write(LEGACY_VARIANT, self.target_dir_5x, attributes)
        default = self._write(
            DEFAULT_VARIANT, self.target_dir_default, self._build_saved_object(attributes)
        )
        return legacy, default

    def _build_attributes(self) -> dict[str, Any]:
        if not self.fields_yaml:
            raise FieldsParseError("Fields file path is not set.")
        try:
            definitions = flatten_fields(load_fields_document(self.fields_yaml))
        except FieldsDefinitionError as exc:
            raise FieldsParseError(str(exc)) from exc
        logger.debug("Loaded %d fields from %s", len(definitions), self.fields_yaml)

        fields, format_map = build_fields_and_format_map(definitions)
        attributes: dict[str, Any] = {"title": self.index_name}
        if self.time_field_name:
            attributes["timeFieldName"] = self.time_field_name
        try:
            attributes["fields"] = json.dumps(fields, separators=(",", ":"))
            attributes["fieldFormatMap"] = json.dumps(format_map, separators=(",", ":"))
        except (TypeError, ValueError) as exc:
            raise FieldsParseError(f"Failed to encode index pattern fields: {exc}") from exc
        return attributes

    def _build_saved_object(self, attributes: Mapping[str, Any]) -> dict[str, Any]:
        return {
            "version": self.kibana_version,
            "objects": [
                {
                    "id": self.index_name,
                    "type": INDEX_PATTERN_TYPE,
                    "version": SAVED_OBJECT_VERSION,
                    "attributes": dict(attributes),
                }
            ],
        }

    def _write(
        self, variant: str, target_dir: Path | str, document: Mapping[str, Any]
    ) -> GeneratedIndexPattern:
        destination = Path(target_dir) / self.target_filename
        try:
            with destination.open("w", encoding="utf-8") as handle:
                json.dump(document, handle, indent=2)
                handle.write("\n")
        except OSError as exc:
            raise IndexPatternWriteError(
                f"Failed to write {variant} index pattern to {destination}: {exc}"
            ) from exc
        logger.info("Wrote %s index pattern: %s", variant, destination)
        return GeneratedIndexPattern(variant=variant, path=destination, document=document)


def _create_target_dir(beat_dir: Path, variant: str) -> Path:
    target_dir = beat_dir.joinpath(*TARGET_DIR_PARTS, variant, INDEX_PATTERN_TYPE)
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise IndexPatternWriteError(f"Failed to create directory {target_dir}: {exc}") from exc
    logger.debug("Index pattern directory ready: %s", target_dir)
    return target_dir

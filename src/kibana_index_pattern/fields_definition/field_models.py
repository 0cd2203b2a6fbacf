"""Fields definition entities."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FormatParams:
    """Optional formatter parameters declared on a field."""

    pattern: str | None = None
    input_format: str | None = None
    output_format: str | None = None
    output_precision: int | None = None
    label_template: str | None = None
    url_template: str | None = None


@dataclass(frozen=True)
class FieldDefinition:  # pylint: disable=too-many-instance-attributes
    """One flattened field declared in fields.yml."""

    path: str
    name: str
    type: str = ""
    format: str | None = None
    format_params: FormatParams = field(default_factory=FormatParams)
    index: bool | None = None
    analyzed: bool | None = None
    doc_values: bool | None = None
    searchable: bool | None = None
    aggregatable: bool | None = None
    count: int = 0

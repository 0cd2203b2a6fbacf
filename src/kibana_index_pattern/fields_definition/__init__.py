"""Fields definition exports."""

from .field_models import FieldDefinition, FormatParams
from .fields_loader import FieldsDefinitionError, flatten_fields, load_fields_document

__all__ = [
    "FieldDefinition",
    "FormatParams",
    "FieldsDefinitionError",
    "flatten_fields",
    "load_fields_document",
]

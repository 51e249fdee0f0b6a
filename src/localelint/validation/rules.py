"""Validation rules for locale string-resource documents.

Each rule checks one aspect of a parsed document. Rules read only the
document; a document whose root is not an object is treated as having no
fields.
"""

import re
from typing import Any

from ..jsonvalue import JsonKind, is_composite, kind_of
from .framework import ValidationRule, Violation, ViolationCategory

REQUIRED_FIELDS = ("version", "lastUpdated", "metadata", "strings")
REQUIRED_METADATA_FIELDS = ("locale", "name", "fallback")

# Pattern only: calendar values such as month 13 are accepted
TIMESTAMP_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}Z")
TIMESTAMP_MESSAGE = "lastUpdated must be in ISO8601 format (YYYY-MM-DDThh:mm:ssZ)"

CURLY_PLACEHOLDER = re.compile(r"\{[^}]+\}")
SQUARE_PLACEHOLDER = re.compile(r"\[[^\]]+\]")


def _fields(document: Any) -> dict:
    return document if is_composite(document) else {}


class DocumentRootRule(ValidationRule):
    """Validate that the document root is an object."""

    category = ViolationCategory.FORMAT

    @property
    def name(self) -> str:
        return "document_root"

    def check(self, document: Any) -> list[Violation]:
        if is_composite(document):
            return []
        return [self.violation("Document root must be an object")]


class RequiredFieldsRule(ValidationRule):
    """Validate that every required top-level field is present."""

    category = ViolationCategory.SCHEMA

    @property
    def name(self) -> str:
        return "required_fields"

    def check(self, document: Any) -> list[Violation]:
        fields = _fields(document)
        return [
            self.violation(f'Required field "{field}" is missing')
            for field in REQUIRED_FIELDS
            if field not in fields
        ]


class MetadataFieldsRule(ValidationRule):
    """Validate that metadata carries locale, name and fallback."""

    category = ViolationCategory.SCHEMA

    @property
    def name(self) -> str:
        return "metadata_fields"

    def check(self, document: Any) -> list[Violation]:
        fields = _fields(document)
        if "metadata" not in fields or not is_composite(fields["metadata"]):
            return []

        metadata = fields["metadata"]
        return [
            self.violation(f'Required metadata field "{field}" is missing')
            for field in REQUIRED_METADATA_FIELDS
            if field not in metadata
        ]


class MetadataObjectRule(ValidationRule):
    """Validate that metadata, when present, is an object.

    Disabled by default: a non-object metadata value has historically been
    skipped silently.
    """

    category = ViolationCategory.FORMAT
    default_enabled = False

    @property
    def name(self) -> str:
        return "metadata_object"

    def check(self, document: Any) -> list[Violation]:
        fields = _fields(document)
        if "metadata" in fields and not is_composite(fields["metadata"]):
            return [self.violation("metadata must be an object")]
        return []


class TimestampFormatRule(ValidationRule):
    """Validate the lastUpdated timestamp pattern."""

    category = ViolationCategory.FORMAT

    @property
    def name(self) -> str:
        return "timestamp_format"

    def check(self, document: Any) -> list[Violation]:
        fields = _fields(document)
        if "lastUpdated" not in fields:
            return []

        value = fields["lastUpdated"]
        if kind_of(value) is JsonKind.STRING and TIMESTAMP_PATTERN.fullmatch(value):
            return []
        return [self.violation(TIMESTAMP_MESSAGE)]


class StringsShapeRule(ValidationRule):
    """Validate that strings is a non-empty object of string values."""

    category = ViolationCategory.FORMAT

    @property
    def name(self) -> str:
        return "strings_shape"

    def check(self, document: Any) -> list[Violation]:
        fields = _fields(document)
        if "strings" not in fields:
            return []

        strings = fields["strings"]
        if not is_composite(strings):
            return [self.violation("strings must be an object")]
        if not strings:
            return [self.violation("strings object cannot be empty")]

        return [
            self.violation(f'Value for key "{key}" must be a string')
            for key, value in strings.items()
            if kind_of(value) is not JsonKind.STRING
        ]


class PlaceholderConsistencyRule(ValidationRule):
    """Reject strings mixing {placeholder} and [placeholder] styles.

    Disabled by default.
    """

    category = ViolationCategory.FORMAT
    default_enabled = False

    @property
    def name(self) -> str:
        return "placeholder_consistency"

    def check(self, document: Any) -> list[Violation]:
        strings = _fields(document).get("strings")
        if strings is None or not is_composite(strings):
            return []

        violations = []
        for key, value in strings.items():
            if kind_of(value) is not JsonKind.STRING:
                continue
            if CURLY_PLACEHOLDER.search(value) and SQUARE_PLACEHOLDER.search(value):
                violations.append(self.violation(
                    f'Mixed placeholder styles found in "{key}". '
                    "Use either {placeholder} or [placeholder] style consistently"
                ))
        return violations

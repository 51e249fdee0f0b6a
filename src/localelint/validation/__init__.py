"""Validation engine for locale string-resource files.

The engine applies an ordered set of rules to one parsed document and
accumulates every violation into a FileResult. It performs no I/O.
"""

from .framework import (
    FileResult,
    Outcome,
    ValidationEngine,
    ValidationRule,
    Violation,
    ViolationCategory,
    validate_bytes,
)
from .rules import (
    DocumentRootRule,
    MetadataFieldsRule,
    MetadataObjectRule,
    PlaceholderConsistencyRule,
    RequiredFieldsRule,
    StringsShapeRule,
    TimestampFormatRule,
)

__all__ = [
    "FileResult",
    "Outcome",
    "ValidationEngine",
    "ValidationRule",
    "Violation",
    "ViolationCategory",
    "validate_bytes",
    "DocumentRootRule",
    "RequiredFieldsRule",
    "MetadataFieldsRule",
    "MetadataObjectRule",
    "TimestampFormatRule",
    "StringsShapeRule",
    "PlaceholderConsistencyRule",
]

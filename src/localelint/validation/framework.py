"""Core validation framework for locale string-resource files.

Implements the rule engine: a fixed, ordered set of pluggable rules applied to
one parsed document, with every violation accumulated into a ``FileResult``.
The engine performs no I/O; callers hand it raw bytes and attach the path.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..config import LocalelintConfig, create_default_config
from ..jsonvalue import DocumentParseError, parse_document

logger = logging.getLogger(__name__)


class Outcome(str, Enum):
    """Outcome of validating one file."""
    SUCCESS = "success"
    FAILURE = "failure"


class ViolationCategory(str, Enum):
    """Stable category carried by every violation."""
    SYNTAX = "syntax"
    SCHEMA = "schema"
    FORMAT = "format"
    IO = "io"
    INTERNAL = "internal"
    UNKNOWN = "unknown"  # loaded back from a results file


@dataclass
class Violation:
    """A single defect found in a document.

    Only the message takes part in equality; rule and category are not
    serialized into the results file.
    """
    message: str
    rule: str = field(default="report", compare=False)
    category: ViolationCategory = field(default=ViolationCategory.UNKNOWN, compare=False)

    def __str__(self) -> str:
        return self.message


@dataclass
class FileResult:
    """Validation result for one candidate file."""
    file: str
    violations: list[Violation] = field(default_factory=list)

    @property
    def outcome(self) -> Outcome:
        """Success iff no violations were recorded."""
        return Outcome.FAILURE if self.violations else Outcome.SUCCESS

    @property
    def success(self) -> bool:
        return self.outcome is Outcome.SUCCESS

    @property
    def errors(self) -> list[str]:
        """Violation messages in the order they were found."""
        return [violation.message for violation in self.violations]

    def add_violation(self, rule: str, category: ViolationCategory, message: str) -> None:
        """Add a violation."""
        self.violations.append(Violation(message, rule, category))

    @classmethod
    def from_read_error(cls, file: str, error: str | Exception) -> "FileResult":
        """Build the synthetic result for a file whose bytes could not be read."""
        result = cls(file)
        result.add_violation("read", ViolationCategory.IO, f"File reading error: {error}")
        return result

    def to_dict(self) -> dict:
        """Convert to the results-file record shape."""
        if self.success:
            return {"file": self.file, "success": True}
        return {"file": self.file, "errors": self.errors}


class ValidationRule(ABC):
    """Base class for validation rules.

    A rule is a pure function of the parsed document. Rules never raise for
    well-formed but invalid input; they return violations instead.
    """

    category: ViolationCategory = ViolationCategory.FORMAT
    default_enabled: bool = True

    def __init__(self, enabled: bool | None = None):
        self.enabled = self.default_enabled if enabled is None else enabled

    @property
    @abstractmethod
    def name(self) -> str:
        """Rule name for identification."""
        pass

    @property
    def description(self) -> str:
        """First line of the rule's docstring."""
        return (self.__doc__ or "").strip().split("\n")[0]

    @abstractmethod
    def check(self, document: Any) -> list[Violation]:
        """Execute the rule against a parsed document.

        Args:
            document: Parsed JSON value of one file

        Returns:
            Violations in a stable order, empty if the rule passes
        """
        pass

    def violation(self, message: str) -> Violation:
        return Violation(message, self.name, self.category)


class ValidationEngine:
    """Applies the registered rules to one document at a time."""

    def __init__(self, config: LocalelintConfig | None = None):
        self.config = config or create_default_config()
        self.rules: list[ValidationRule] = []

    @property
    def active_rules(self) -> list[ValidationRule]:
        return [rule for rule in self.rules if rule.enabled]

    def add_rule(self, rule: ValidationRule) -> None:
        """Add a validation rule."""
        self.rules.append(rule)

    def get_rule(self, name: str) -> ValidationRule:
        """Look up a registered rule by name.

        Raises:
            KeyError: If no rule with that name is registered
        """
        for rule in self.rules:
            if rule.name == name:
                return rule
        raise KeyError(name)

    def set_enabled(self, name: str, enabled: bool) -> None:
        """Toggle a registered rule on or off."""
        self.get_rule(name).enabled = enabled

    def validate(self, raw: bytes, path: str = "") -> FileResult:
        """Validate the raw bytes of one file.

        A parse failure yields exactly one syntax violation and no other rule
        runs. Otherwise every active rule runs and all violations are kept.
        Exceptions raised by a rule are not caught here.

        Args:
            raw: File content
            path: Path reported in the result

        Returns:
            FileResult for the file
        """
        try:
            document = parse_document(raw)
        except DocumentParseError as e:
            logger.debug(f"{path}: parse failed: {e}")
            result = FileResult(path)
            result.add_violation("parse", ViolationCategory.SYNTAX, f"JSON syntax error: {e}")
            return result

        return self.validate_document(document, path)

    def validate_document(self, document: Any, path: str = "") -> FileResult:
        """Run every active rule against an already parsed document."""
        result = FileResult(path)

        for rule in self.active_rules:
            logger.debug(f"Executing rule {rule.name} on {path or '<bytes>'}")
            result.violations.extend(rule.check(document))

        logger.debug(f"{path}: {result.outcome.value} with {len(result.violations)} violations")
        return result

    def create_default_rules(self) -> None:
        """Register the default rule set in its fixed order."""
        from .rules import (
            DocumentRootRule,
            MetadataFieldsRule,
            MetadataObjectRule,
            PlaceholderConsistencyRule,
            RequiredFieldsRule,
            StringsShapeRule,
            TimestampFormatRule,
        )

        for rule_cls in (
            DocumentRootRule,
            RequiredFieldsRule,
            MetadataObjectRule,
            MetadataFieldsRule,
            TimestampFormatRule,
            StringsShapeRule,
            PlaceholderConsistencyRule,
        ):
            rule = rule_cls()
            toggle = self.config.rules.is_enabled(rule.name)
            if toggle is not None:
                rule.enabled = toggle
            self.add_rule(rule)


def validate_bytes(raw: bytes, path: str = "", config: LocalelintConfig | None = None) -> FileResult:
    """Validate raw bytes with the default rule set."""
    engine = ValidationEngine(config)
    engine.create_default_rules()
    return engine.validate(raw, path)

"""Validation report model, results-file serialization and PR comment rendering."""

import json
import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from localelint.validation import FileResult, Violation

logger = logging.getLogger(__name__)

COMMENT_HEADING = "## JSON Validation Results"


class ReportFormatError(ValueError):
    """Raised when a results file does not match the record schema."""


@dataclass
class ValidationReport:
    """Ordered results of one validation run, one entry per candidate file.

    An empty report means no candidate files were offered; it is a success.
    """
    results: list[FileResult] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.results)

    def __iter__(self) -> Iterator[FileResult]:
        return iter(self.results)

    @property
    def failed(self) -> list[FileResult]:
        return [result for result in self.results if not result.success]

    @property
    def success(self) -> bool:
        return not self.failed

    @property
    def exit_code(self) -> int:
        """Exit code for CI: 0 = every file passed (or no files), 1 = any failure."""
        return 0 if self.success else 1

    @property
    def counters(self) -> dict[str, int]:
        return {
            "files": len(self.results),
            "passed": len(self.results) - len(self.failed),
            "failed": len(self.failed),
            "violations": sum(len(result.violations) for result in self.results),
        }

    def to_records(self) -> list[dict]:
        """Convert to the list of results-file records."""
        return [result.to_dict() for result in self.results]

    def to_json(self) -> str:
        return json.dumps(self.to_records(), indent=2, ensure_ascii=False)

    def write(self, path: str | Path) -> Path:
        """Write the results file, creating parent directories as needed."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_json() + "\n", encoding="utf-8")
        logger.info(f"Wrote {len(self.results)} results to {path}")
        return path

    @classmethod
    def from_records(cls, records: Any) -> "ValidationReport":
        """Rebuild a report from results-file records.

        Raises:
            ReportFormatError: If the records do not match the schema
        """
        if not isinstance(records, list):
            raise ReportFormatError("Results must be a JSON array")

        results = []
        for i, record in enumerate(records):
            if not isinstance(record, dict) or not isinstance(record.get("file"), str):
                raise ReportFormatError(f"Record {i} must be an object with a string 'file'")

            if record.get("success") is True and "errors" not in record:
                results.append(FileResult(record["file"]))
                continue

            errors = record.get("errors")
            if not isinstance(errors, list) or not errors or not all(isinstance(e, str) for e in errors):
                raise ReportFormatError(
                    f"Record {i} must carry either success: true or a non-empty list of error strings"
                )
            results.append(FileResult(record["file"], [Violation(message) for message in errors]))

        return cls(results)

    @classmethod
    def from_json(cls, text: str) -> "ValidationReport":
        try:
            records = json.loads(text)
        except (json.JSONDecodeError, RecursionError) as e:
            raise ReportFormatError(f"Invalid JSON in results: {e}") from e
        return cls.from_records(records)

    @classmethod
    def load(cls, path: str | Path) -> "ValidationReport":
        """Load a results file written by ``write``."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ReportFormatError(f"Results file is not valid UTF-8: {e}") from e
        return cls.from_json(text)


def render_comment(report: ValidationReport, expected_pattern: str = "**/*.json") -> str:
    """Render the Markdown pull request comment for a report."""
    comment = f"{COMMENT_HEADING}\n\n"

    if not report.results:
        comment += "⚠️ No JSON files were found in this PR for validation.\n\n"
        comment += "This could mean:\n"
        comment += "- The PR does not contain any JSON file changes\n"
        comment += "- The files are not in the expected location\n"
        comment += "- There might be an issue with the file detection\n\n"
        comment += f"Expected pattern: `{expected_pattern}`\n"
        return comment

    for result in report.results:
        if result.success:
            comment += f"### ✅ `{result.file}`\n"
            comment += "All validations passed successfully.\n\n"
        else:
            comment += f"### ❌ `{result.file}`\n"
            comment += "The following issues were found:\n"
            for error in result.errors:
                comment += f"- {error}\n"
            comment += "\n"

    return comment


def render_load_failure(error: Exception | str) -> str:
    """Render the comment posted when the results file cannot be loaded."""
    comment = f"{COMMENT_HEADING}\n\n"
    comment += "⚠️ Error occurred while loading validation results.\n"
    comment += f"Error details: {error}\n"
    return comment

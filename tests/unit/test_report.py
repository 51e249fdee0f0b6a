"""Unit tests for the validation report and comment rendering."""

import json

import pytest

from localelint.report import ReportFormatError, ValidationReport, render_comment, render_load_failure
from localelint.validation import FileResult, Violation, ViolationCategory


@pytest.fixture
def mixed_report():
    failed = FileResult("locales/de.json")
    failed.add_violation("required_fields", ViolationCategory.SCHEMA, 'Required field "version" is missing')
    failed.add_violation("strings_shape", ViolationCategory.FORMAT, 'Value for key "a" must be a string')
    return ValidationReport([FileResult("locales/en.json"), failed])


class TestValidationReport:
    """Test ValidationReport class."""

    def test_empty_report(self):
        report = ValidationReport()
        assert len(report) == 0
        assert report.success
        assert report.exit_code == 0
        assert report.to_records() == []

    def test_exit_code_and_counters(self, mixed_report):
        assert not mixed_report.success
        assert mixed_report.exit_code == 1
        assert [r.file for r in mixed_report.failed] == ["locales/de.json"]
        assert mixed_report.counters == {"files": 2, "passed": 1, "failed": 1, "violations": 2}

    def test_to_records(self, mixed_report):
        assert mixed_report.to_records() == [
            {"file": "locales/en.json", "success": True},
            {
                "file": "locales/de.json",
                "errors": [
                    'Required field "version" is missing',
                    'Value for key "a" must be a string',
                ],
            },
        ]

    def test_round_trip(self, mixed_report, tmp_path):
        path = mixed_report.write(tmp_path / "out" / "validation-results.json")
        loaded = ValidationReport.load(path)

        assert loaded == mixed_report
        assert [r.outcome for r in loaded] == [r.outcome for r in mixed_report]
        assert loaded.results[1].violations[0].category == ViolationCategory.UNKNOWN

    def test_written_file_is_indented_json(self, mixed_report, tmp_path):
        path = mixed_report.write(tmp_path / "validation-results.json")
        text = path.read_text(encoding="utf-8")

        assert json.loads(text) == mixed_report.to_records()
        assert '\n  {\n    "file": "locales/en.json"' in text

    def test_non_ascii_kept_verbatim(self, tmp_path):
        report = ValidationReport([FileResult("uk.json", [Violation('Value for key "привіт" must be a string')])])
        assert "привіт" in report.to_json()

    @pytest.mark.parametrize("records", [
        {"file": "a.json"},
        [{"success": True}],
        [{"file": 1, "success": True}],
        [{"file": "a.json"}],
        [{"file": "a.json", "errors": []}],
        [{"file": "a.json", "errors": [1]}],
        ["a.json"],
    ])
    def test_from_records_rejects_bad_shapes(self, records):
        with pytest.raises(ReportFormatError):
            ValidationReport.from_records(records)

    def test_from_json_invalid(self):
        with pytest.raises(ReportFormatError, match="Invalid JSON"):
            ValidationReport.from_json("[{")

    def test_load_rejects_invalid_utf8(self, tmp_path):
        path = tmp_path / "validation-results.json"
        path.write_bytes(b"\xff\xfe[]")

        with pytest.raises(ReportFormatError, match="not valid UTF-8"):
            ValidationReport.load(path)


class TestRenderComment:
    """Test Markdown comment rendering."""

    def test_mixed_report(self, mixed_report):
        comment = render_comment(mixed_report)

        assert comment == (
            "## JSON Validation Results\n\n"
            "### ✅ `locales/en.json`\n"
            "All validations passed successfully.\n\n"
            "### ❌ `locales/de.json`\n"
            "The following issues were found:\n"
            '- Required field "version" is missing\n'
            '- Value for key "a" must be a string\n'
            "\n"
        )

    def test_empty_report_notice(self):
        comment = render_comment(ValidationReport(), "locales/*.json")

        assert comment.startswith("## JSON Validation Results\n\n⚠️ No JSON files were found")
        assert comment.endswith("Expected pattern: `locales/*.json`\n")

    def test_load_failure(self):
        comment = render_load_failure(ReportFormatError("Results must be a JSON array"))

        assert "⚠️ Error occurred while loading validation results." in comment
        assert comment.endswith("Error details: Results must be a JSON array\n")

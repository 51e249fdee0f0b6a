"""Run the validation engine over a set of candidate files."""

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from localelint.config import LocalelintConfig, create_default_config
from localelint.discovery import Candidate, discover_candidates, read_candidate
from localelint.report import ValidationReport
from localelint.validation import FileResult, ValidationEngine, ViolationCategory

logger = logging.getLogger(__name__)


def validate_candidate(candidate: Candidate, engine: ValidationEngine) -> FileResult:
    """Validate one candidate, folding read errors and rule faults into the result."""
    if candidate.read_error is not None or candidate.content is None:
        return FileResult.from_read_error(candidate.path, candidate.read_error or "no content")

    try:
        return engine.validate(candidate.content, candidate.path)
    except Exception as e:
        logger.error(f"Validation of {candidate.path} failed with error: {e}")
        result = FileResult(candidate.path)
        result.add_violation("engine", ViolationCategory.INTERNAL, f"Rule execution failed: {e}")
        return result


def validate_candidates(
    candidates: Iterable[Candidate],
    engine: ValidationEngine,
    jobs: int = 1,
) -> ValidationReport:
    """Validate candidates and assemble the report in input order.

    Args:
        candidates: Explicit (path, bytes) pairs
        engine: Engine with its rules registered
        jobs: Number of worker threads; files are independent

    Returns:
        ValidationReport with one result per candidate
    """
    candidates = list(candidates)

    if jobs > 1 and len(candidates) > 1:
        with ThreadPoolExecutor(max_workers=jobs) as executor:
            # map() yields in submission order
            results = list(executor.map(lambda c: validate_candidate(c, engine), candidates))
    else:
        results = [validate_candidate(candidate, engine) for candidate in candidates]

    report = ValidationReport(results)
    counters = report.counters
    logger.info(
        f"Validated {counters['files']} files: {counters['passed']} passed, "
        f"{counters['failed']} failed, {counters['violations']} violations"
    )
    return report


def validate_paths(
    paths: Iterable[str | Path],
    config: LocalelintConfig | None = None,
    jobs: int | None = None,
    engine: ValidationEngine | None = None,
) -> ValidationReport:
    """Discover, read and validate files below the given paths.

    Args:
        paths: Files and directories to validate
        config: Configuration (default: built-in defaults)
        jobs: Worker threads (default: ``output.jobs`` from config)
        engine: Prepared engine (default: one with the default rules)

    Returns:
        ValidationReport in discovery order
    """
    config = config or create_default_config()
    if engine is None:
        engine = ValidationEngine(config)
        engine.create_default_rules()

    candidates = [read_candidate(path) for path in discover_candidates(paths, config.discovery)]
    if not candidates:
        logger.info("No JSON files to validate")

    return validate_candidates(candidates, engine, jobs or config.output.jobs)

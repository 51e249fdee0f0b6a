"""Candidate file discovery and reading for localelint."""

import fnmatch
import logging
import os
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from localelint.config import DiscoveryConfig

logger = logging.getLogger(__name__)


@dataclass
class Candidate:
    """A file offered for validation: its path and either its bytes or the read error."""
    path: str
    content: bytes | None = None
    read_error: str | None = None


def discover_candidates(
    paths: Iterable[str | Path],
    config: DiscoveryConfig | None = None,
) -> list[str]:
    """Expand input paths into an ordered list of candidate files.

    Directories are walked recursively and filtered by the include and
    exclude globs. Explicit files are kept when their name carries the
    configured suffix, even if they do not exist, so that the read error is
    reported for them. The first occurrence of a path wins.

    Args:
        paths: Files and directories as given by the caller
        config: Discovery settings (default: built-in defaults)

    Returns:
        Candidate file paths in input order
    """
    config = config or DiscoveryConfig()
    seen: set[str] = set()
    candidates: list[str] = []

    for raw_path in paths:
        path = Path(raw_path)
        if path.is_dir():
            found = [str(p) for p in _walk_directory(path, config)]
        elif str(raw_path).endswith(config.suffix):
            found = [str(raw_path)]
        else:
            logger.debug(f"Skipping {raw_path}: not a {config.suffix} file")
            found = []

        for candidate in found:
            if candidate not in seen:
                seen.add(candidate)
                candidates.append(candidate)

    logger.info(f"Discovered {len(candidates)} candidate files")
    return candidates


def _walk_directory(root: Path, config: DiscoveryConfig) -> Iterator[Path]:
    """Yield matching files below root in a stable order."""
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        for filename in sorted(filenames):
            file_path = Path(dirpath) / filename
            relative_str = str(file_path.relative_to(root)).replace("\\", "/")  # POSIX format
            if _matches_any(relative_str, config.include) and not _matches_any(relative_str, config.exclude):
                yield file_path


def _matches_any(relative_str: str, patterns: list[str]) -> bool:
    for pattern in patterns:
        if fnmatch.fnmatch(relative_str, pattern):
            return True
        # "**/" also matches files at the top level
        if pattern.startswith("**/") and fnmatch.fnmatch(relative_str, pattern[3:]):
            return True
    return False


def read_changed_files(source: str | Path) -> list[str]:
    """Read a newline separated list of changed file paths.

    Args:
        source: File holding the list, or "-" for stdin

    Returns:
        Paths in listed order, blank lines dropped
    """
    if str(source) == "-":
        text = sys.stdin.read()
    else:
        text = Path(source).read_text(encoding="utf-8")

    return [line.strip() for line in text.splitlines() if line.strip()]


def read_candidate(path: str) -> Candidate:
    """Read the bytes of one candidate file, capturing I/O failures."""
    try:
        return Candidate(path, content=Path(path).read_bytes())
    except OSError as e:
        logger.warning(f"Could not read {path}: {e}")
        return Candidate(path, read_error=str(e))

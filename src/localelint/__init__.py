"""localelint - Rule-based validator for locale string-resource files.

localelint checks locale JSON files for required fields, timestamp format and
string-table shape before they are merged, and reports every violation found
in a machine-readable results file.
"""

__version__ = "0.1.0"
__author__ = "localelint contributors"
__description__ = "Rule-based validator for locale string-resource files"

from localelint.config import LocalelintConfig
from localelint.validation import FileResult, ValidationEngine, validate_bytes

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    "LocalelintConfig",
    "FileResult",
    "ValidationEngine",
    "validate_bytes",
]

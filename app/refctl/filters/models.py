"""Data structures for source file classification.

This module defines the descriptor handed to the pre-import filter,
the rules that can decide a file's fate, and the classified result
produced by the classifier and scanner.
"""

from dataclasses import dataclass
from enum import Enum


class Rule(str, Enum):
    """Classification rule that produced a decision.

    Attributes:
        NO_PATH: No path was given; the prior decision passed through.
        EXCLUDED_FILE: Path matched an exact-file exclusion.
        EXCLUDED_DIR: Path started with an excluded directory prefix.
        PASS_THROUGH: Path lies outside wp-content/; the prior decision stands.
        WHITELISTED: Path under wp-content/ matched an include entry.
        NOT_WHITELISTED: Path under wp-content/ matched no include entry.
    """

    NO_PATH = "no_path"
    EXCLUDED_FILE = "excluded_file"
    EXCLUDED_DIR = "excluded_dir"
    PASS_THROUGH = "pass_through"
    WHITELISTED = "whitelisted"
    NOT_WHITELISTED = "not_whitelisted"


@dataclass(frozen=True, slots=True)
class FileDescriptor:
    """A candidate source file as seen by the documentation parser.

    Attributes:
        path: Slash-separated path relative to the WordPress root.
    """

    path: str


@dataclass(frozen=True, slots=True)
class ClassifiedFile:
    """Outcome of classifying a single source path.

    Attributes:
        path: The classified path (empty string when none was given).
        included: Whether the file is handed to the parser.
        rule: The rule that decided the outcome.
    """

    path: str
    included: bool
    rule: Rule

"""Source file filtering for the documentation parser.

This module provides the exclusion lists, the pre-import path
classifier, list configuration I/O, and the source tree scanner.
"""

from refctl.filters.classifier import PathClassifier
from refctl.filters.config import (
    ExclusionConfigError,
    load_exclusion_lists,
    resolve_exclusion_lists,
    save_exclusion_lists,
)
from refctl.filters.lists import CONTENT_PREFIX, ExclusionLists
from refctl.filters.models import ClassifiedFile, FileDescriptor, Rule
from refctl.filters.scanner import SourceScanner

__all__ = [
    "CONTENT_PREFIX",
    "ClassifiedFile",
    "ExclusionConfigError",
    "ExclusionLists",
    "FileDescriptor",
    "PathClassifier",
    "Rule",
    "SourceScanner",
    "load_exclusion_lists",
    "resolve_exclusion_lists",
    "save_exclusion_lists",
]

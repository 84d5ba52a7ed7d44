"""Pre-import path classifier for the documentation parser.

Decides, per source file, whether it is handed to the parser. Bundled
third-party libraries and asset directories are always dropped, and
everything under wp-content/ is dropped unless it is whitelisted.
Paths outside wp-content/ that match no deny rule keep whatever the
earlier filter stages decided.

Matching is a literal string comparison: exact entries must equal the
whole path and directory entries are plain prefixes. Paths are not
normalized, case-folded, or resolved.
"""

import logging
from collections.abc import Mapping

from refctl.filters.lists import CONTENT_PREFIX, ExclusionLists
from refctl.filters.models import ClassifiedFile, FileDescriptor, Rule

logger = logging.getLogger(__name__)


class PathClassifier:
    """Classifies relative source paths against a set of exclusion lists.

    The classifier holds no mutable state. The same instance can be used
    for any number of paths, from any thread.

    Args:
        lists: Allow/deny lists to classify against. Defaults to the
            built-in lists for a stock WordPress checkout.

    Example:
        >>> classifier = PathClassifier()
        >>> classifier.classify(True, "wp-includes/class-phpmailer.php")
        False
        >>> classifier.classify(True, "wp-admin/index.php")
        True
    """

    def __init__(self, lists: ExclusionLists | None = None) -> None:
        self._lists = lists if lists is not None else ExclusionLists.default()

    @property
    def lists(self) -> ExclusionLists:
        """The lists this classifier was built with."""
        return self._lists

    def explain(self, prior_include: bool | None, path: str | None) -> ClassifiedFile:
        """Classify a path and report which rule decided it.

        Args:
            prior_include: Decision from earlier filter stages. None means
                no decision was made and is treated as True.
            path: Slash-separated path relative to the WordPress root.

        Returns:
            ClassifiedFile carrying the decision and the deciding rule.
        """
        prior = True if prior_include is None else prior_include
        lists = self._lists

        if not path:
            return ClassifiedFile(path="", included=prior, rule=Rule.NO_PATH)

        if path in lists.exclude_files:
            return ClassifiedFile(path=path, included=False, rule=Rule.EXCLUDED_FILE)

        if path.startswith(lists.exclude_dirs):
            return ClassifiedFile(path=path, included=False, rule=Rule.EXCLUDED_DIR)

        if not path.startswith(CONTENT_PREFIX):
            return ClassifiedFile(path=path, included=prior, rule=Rule.PASS_THROUGH)

        if path.startswith(lists.include_content_dirs) or path in lists.include_content_files:
            return ClassifiedFile(path=path, included=True, rule=Rule.WHITELISTED)

        return ClassifiedFile(path=path, included=False, rule=Rule.NOT_WHITELISTED)

    def classify(self, prior_include: bool | None, path: str | None) -> bool:
        """Decide whether a path is handed to the parser.

        Args:
            prior_include: Decision from earlier filter stages (None = True).
            path: Slash-separated path relative to the WordPress root.

        Returns:
            True if the file should be parsed, False otherwise.
        """
        return self.explain(prior_include, path).included

    def __call__(
        self,
        prior_include: bool | None,
        file: FileDescriptor | Mapping[str, object] | None,
    ) -> bool:
        """Pre-import hook entry point, called once per candidate file.

        Args:
            prior_include: Decision from earlier filter stages (None = True).
            file: The candidate file, either a FileDescriptor or a mapping
                with a "path" key. Anything else passes the prior through.

        Returns:
            True if the file should be parsed, False otherwise.
        """
        if isinstance(file, FileDescriptor):
            path: object = file.path
        elif isinstance(file, Mapping):
            path = file.get("path")
        else:
            path = None

        result = self.explain(prior_include, path if isinstance(path, str) else None)
        logger.debug("%s -> %s (%s)", result.path, result.included, result.rule.value)
        return result.included

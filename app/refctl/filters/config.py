"""Exclusion list configuration.

Lets a user replace any of the built-in allow/deny lists from a TOML
file. Sections or keys that are left out keep their built-in values.

Configuration is stored in ~/.config/refctl/exclusions.toml::

    [exclude]
    files = ["wp-includes/class-phpmailer.php"]
    dirs = ["wp-includes/js/"]

    [include]
    content_files = ["wp-content/plugins/hello.php"]
    content_dirs = ["wp-content/themes/twentyfourteen/"]
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from refctl.core.paths import get_exclusions_path
from refctl.filters.lists import (
    DEFAULT_EXCLUDE_DIRS,
    DEFAULT_EXCLUDE_FILES,
    DEFAULT_INCLUDE_CONTENT_DIRS,
    DEFAULT_INCLUDE_CONTENT_FILES,
    ExclusionLists,
)


def _clean_entries(value: list[str]) -> list[str]:
    cleaned = [entry.strip() for entry in value]
    if any(not entry for entry in cleaned):
        msg = "list entries must not be empty"
        raise ValueError(msg)
    return cleaned


class ExcludeSection(BaseModel):
    """The [exclude] table."""

    model_config = ConfigDict(extra="forbid")

    files: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCLUDE_FILES),
        description="Exact relative paths to exclude",
    )
    dirs: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCLUDE_DIRS),
        description="Path prefixes to exclude",
    )

    @field_validator("files", "dirs")
    @classmethod
    def strip_entries(cls, value: list[str]) -> list[str]:
        """Strip whitespace around entries and reject empty ones."""
        return _clean_entries(value)


class IncludeSection(BaseModel):
    """The [include] table (whitelist under wp-content/)."""

    model_config = ConfigDict(extra="forbid")

    content_files: list[str] = Field(
        default_factory=lambda: list(DEFAULT_INCLUDE_CONTENT_FILES),
        description="Exact paths under wp-content/ to keep",
    )
    content_dirs: list[str] = Field(
        default_factory=lambda: list(DEFAULT_INCLUDE_CONTENT_DIRS),
        description="Path prefixes under wp-content/ to keep",
    )

    @field_validator("content_files", "content_dirs")
    @classmethod
    def strip_entries(cls, value: list[str]) -> list[str]:
        """Strip whitespace around entries and reject empty ones."""
        return _clean_entries(value)


class ExclusionConfig(BaseModel):
    """Root model of the exclusions file."""

    model_config = ConfigDict(extra="forbid")

    exclude: ExcludeSection = Field(default_factory=ExcludeSection)
    include: IncludeSection = Field(default_factory=IncludeSection)

    def to_lists(self) -> ExclusionLists:
        """Build the immutable lists used by the classifier."""
        return ExclusionLists(
            exclude_files=tuple(self.exclude.files),
            exclude_dirs=tuple(self.exclude.dirs),
            include_content_files=tuple(self.include.content_files),
            include_content_dirs=tuple(self.include.content_dirs),
        )

    @classmethod
    def from_lists(cls, lists: ExclusionLists) -> "ExclusionConfig":
        """Build a config model from existing lists."""
        return cls(
            exclude=ExcludeSection(
                files=list(lists.exclude_files),
                dirs=list(lists.exclude_dirs),
            ),
            include=IncludeSection(
                content_files=list(lists.include_content_files),
                content_dirs=list(lists.include_content_dirs),
            ),
        )


class ExclusionConfigError(Exception):
    """Base exception for exclusion configuration errors."""


class ExclusionConfigNotFoundError(ExclusionConfigError):
    """Raised when the exclusions file is not found."""


class ExclusionConfigParseError(ExclusionConfigError):
    """Raised when the exclusions file cannot be parsed."""


def load_exclusion_lists(path: Path | None = None) -> ExclusionLists:
    """Load exclusion lists from a TOML file.

    Args:
        path: Path to the file. If None, uses the default exclusions path.

    Returns:
        Immutable ExclusionLists built from the file.

    Raises:
        ExclusionConfigNotFoundError: If the file doesn't exist.
        ExclusionConfigParseError: If the TOML syntax is invalid.
        ExclusionConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_exclusions_path()

    if not config_path.exists():
        raise ExclusionConfigNotFoundError(f"Exclusions file not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ExclusionConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ExclusionConfigError(f"Failed to read exclusions file: {e}") from e

    try:
        return ExclusionConfig.model_validate(data).to_lists()
    except (ValueError, ValidationError) as e:
        raise ExclusionConfigError(f"Invalid exclusions content: {e}") from e


def resolve_exclusion_lists(path: Path | None = None) -> ExclusionLists:
    """Return the lists to classify with.

    An explicit path must exist. Without one, the user's exclusions file
    is used when present and the built-in lists otherwise.

    Raises:
        ExclusionConfigError: If the selected file is missing or invalid.
    """
    if path is not None:
        return load_exclusion_lists(path)
    if get_exclusions_path().exists():
        return load_exclusion_lists()
    return ExclusionLists.default()


def save_exclusion_lists(lists: ExclusionLists, path: Path | None = None) -> Path:
    """Save exclusion lists to a TOML file.

    The file is written atomically through a temporary file in the same
    directory followed by os.replace().

    Args:
        lists: The lists to save.
        path: Target path. If None, uses the default exclusions path.

    Returns:
        Path where the lists were saved.

    Raises:
        ExclusionConfigError: If the file cannot be written.
    """
    config_path = path or get_exclusions_path()
    data = ExclusionConfig.from_lists(lists).model_dump()

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ExclusionConfigError(f"Failed to write exclusions file: {e}") from e

    return config_path

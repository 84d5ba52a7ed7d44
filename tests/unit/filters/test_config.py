"""Unit tests for exclusion list configuration I/O."""

import tomllib
from pathlib import Path

import pytest

from refctl.filters.config import (
    ExclusionConfig,
    ExclusionConfigError,
    ExclusionConfigNotFoundError,
    ExclusionConfigParseError,
    load_exclusion_lists,
    resolve_exclusion_lists,
    save_exclusion_lists,
)
from refctl.filters.lists import DEFAULT_EXCLUDE_DIRS, DEFAULT_EXCLUDE_FILES, ExclusionLists


class TestLoadExclusionLists:
    """Tests for load_exclusion_lists."""

    def test_full_file(self, tmp_path: Path) -> None:
        path = tmp_path / "exclusions.toml"
        path.write_text(
            "[exclude]\n"
            'files = ["lib/a.php"]\n'
            'dirs = ["vendor/"]\n'
            "[include]\n"
            'content_files = ["wp-content/one.php"]\n'
            'content_dirs = ["wp-content/themes/mine/"]\n'
        )

        lists = load_exclusion_lists(path)

        assert lists == ExclusionLists(
            exclude_files=("lib/a.php",),
            exclude_dirs=("vendor/",),
            include_content_files=("wp-content/one.php",),
            include_content_dirs=("wp-content/themes/mine/",),
        )

    def test_missing_keys_use_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "exclusions.toml"
        path.write_text('[include]\ncontent_dirs = ["wp-content/themes/mine/"]\n')

        lists = load_exclusion_lists(path)

        assert lists.exclude_files == DEFAULT_EXCLUDE_FILES
        assert lists.exclude_dirs == DEFAULT_EXCLUDE_DIRS
        assert lists.include_content_dirs == ("wp-content/themes/mine/",)

    def test_empty_list_allowed(self, tmp_path: Path) -> None:
        path = tmp_path / "exclusions.toml"
        path.write_text("[exclude]\nfiles = []\n")

        assert load_exclusion_lists(path).exclude_files == ()

    def test_entries_stripped(self, tmp_path: Path) -> None:
        path = tmp_path / "exclusions.toml"
        path.write_text('[exclude]\nfiles = ["wp-includes/class-pop3.php "]\n')

        assert load_exclusion_lists(path).exclude_files == ("wp-includes/class-pop3.php",)

    def test_blank_entry_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "exclusions.toml"
        path.write_text('[exclude]\ndirs = ["  "]\n')

        with pytest.raises(ExclusionConfigError, match="must not be empty"):
            load_exclusion_lists(path)

    def test_unknown_key_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "exclusions.toml"
        path.write_text('[exclude]\npatterns = ["*.js"]\n')

        with pytest.raises(ExclusionConfigError, match="Invalid exclusions content"):
            load_exclusion_lists(path)

    def test_wrong_type_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "exclusions.toml"
        path.write_text('[exclude]\nfiles = "lib/a.php"\n')

        with pytest.raises(ExclusionConfigError):
            load_exclusion_lists(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ExclusionConfigNotFoundError):
            load_exclusion_lists(tmp_path / "nope.toml")

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "exclusions.toml"
        path.write_text("[exclude\nfiles = ")

        with pytest.raises(ExclusionConfigParseError, match="Invalid TOML"):
            load_exclusion_lists(path)

    def test_default_path_from_xdg(self, isolated_config_home: Path) -> None:
        path = isolated_config_home / "refctl" / "exclusions.toml"
        path.parent.mkdir(parents=True)
        path.write_text("[exclude]\nfiles = []\n")

        assert load_exclusion_lists().exclude_files == ()


class TestResolveExclusionLists:
    """Tests for resolve_exclusion_lists."""

    def test_builtin_when_no_user_file(self) -> None:
        assert resolve_exclusion_lists() == ExclusionLists.default()

    def test_user_file_when_present(self, isolated_config_home: Path) -> None:
        path = isolated_config_home / "refctl" / "exclusions.toml"
        path.parent.mkdir(parents=True)
        path.write_text('[exclude]\nfiles = ["only.php"]\n')

        assert resolve_exclusion_lists().exclude_files == ("only.php",)

    def test_explicit_path_must_exist(self, tmp_path: Path) -> None:
        with pytest.raises(ExclusionConfigNotFoundError):
            resolve_exclusion_lists(tmp_path / "missing.toml")


class TestSaveExclusionLists:
    """Tests for save_exclusion_lists."""

    def test_writes_sections(self, tmp_path: Path) -> None:
        path = tmp_path / "sub" / "exclusions.toml"

        written = save_exclusion_lists(ExclusionLists.default(), path)

        assert written == path
        with open(path, "rb") as f:
            data = tomllib.load(f)
        assert data["exclude"]["files"] == list(DEFAULT_EXCLUDE_FILES)
        assert data["include"]["content_files"] == ["wp-content/plugins/hello.php"]

    def test_saved_file_loads_back(self, tmp_path: Path) -> None:
        lists = ExclusionLists(exclude_dirs=("vendor/",), include_content_dirs=())
        path = tmp_path / "exclusions.toml"

        save_exclusion_lists(lists, path)

        assert load_exclusion_lists(path) == lists

    def test_no_temp_files_left(self, tmp_path: Path) -> None:
        save_exclusion_lists(ExclusionLists.default(), tmp_path / "exclusions.toml")

        assert [p.name for p in tmp_path.iterdir()] == ["exclusions.toml"]


class TestExclusionConfigModel:
    """Tests for the pydantic model."""

    def test_defaults_match_builtin_lists(self) -> None:
        assert ExclusionConfig().to_lists() == ExclusionLists.default()

    def test_from_lists(self) -> None:
        lists = ExclusionLists(exclude_files=("a.php",))
        config = ExclusionConfig.from_lists(lists)
        assert config.exclude.files == ["a.php"]
        assert config.include.content_dirs == []

"""Unit tests for building ignore rules from defaults, ignore files and excludes."""

import pytest

from projstruct.exclusion_rules.rule_loader import (
    DEFAULT_DIRECTORY_IGNORES,
    classify_exclude,
    load_rules,
    parse_ignore_lines,
    read_ignore_file,
)


@pytest.fixture
def gitignore(tmp_path):
    path = tmp_path / ".gitignore"
    path.write_text(
        "# dependencies\n"
        "node_modules/\n"
        "\n"
        "dist/   # build output\n"
        "./coverage/\n"
        "*.log\n"
        "   .env.local   \n"
        "docs/*.tmp\n"
    )
    return path


class TestParseIgnoreLines:
    def test_directory_and_file_entries_are_separated(self):
        directories, patterns = parse_ignore_lines(["dist/", "*.log", "build/", "secrets.env"])
        assert directories == ["dist", "build"]
        assert patterns == ["*.log", "secrets.env"]

    def test_comments_and_blank_lines_are_skipped(self):
        directories, patterns = parse_ignore_lines(["# comment", "", "   ", "\t# indented comment"])
        assert directories == []
        assert patterns == []

    def test_inline_comments_are_stripped(self):
        directories, patterns = parse_ignore_lines(["dist/ # generated", "*.log#logs"])
        assert directories == ["dist"]
        assert patterns == ["*.log"]

    def test_whitespace_is_trimmed(self):
        directories, patterns = parse_ignore_lines(["  dist/  ", "\t*.tmp \t"])
        assert directories == ["dist"]
        assert patterns == ["*.tmp"]

    def test_leading_current_directory_is_dropped(self):
        directories, patterns = parse_ignore_lines(["./coverage/", "./local.env"])
        assert directories == ["coverage"]
        assert patterns == ["local.env"]

    def test_bare_slash_is_ignored(self):
        directories, patterns = parse_ignore_lines(["/"])
        assert directories == []
        assert patterns == []

    def test_leading_slash_is_dropped(self):
        directories, patterns = parse_ignore_lines(["/build/", "/secret.txt", "/config/*.local"])
        assert directories == ["build"]
        assert patterns == ["secret.txt", "config/*.local"]

    def test_nested_directory_rule_is_kept_whole(self):
        directories, _ = parse_ignore_lines(["build/output/"])
        assert directories == ["build/output"]


class TestClassifyExclude:
    @pytest.mark.parametrize(
        "exclude, expected",
        [
            ("dist/", ("directory", "dist")),
            ("./dist/", ("directory", "dist")),
            ("coverage", ("directory", "coverage")),
            ("*.map", ("file", "*.map")),
            ("file?.txt", ("file", "file?.txt")),
            ("./*.bak", ("file", "*.bak")),
        ],
    )
    def test_classification(self, exclude, expected):
        assert classify_exclude(exclude) == expected


class TestReadIgnoreFile:
    def test_reads_rules(self, gitignore):
        directories, patterns = read_ignore_file(gitignore)
        assert directories == ["node_modules", "dist", "coverage"]
        assert patterns == ["*.log", ".env.local", "docs/*.tmp"]

    def test_missing_file_contributes_nothing(self, tmp_path):
        assert read_ignore_file(tmp_path / "missing") == ([], [])

    def test_directory_is_treated_as_missing(self, tmp_path):
        assert read_ignore_file(tmp_path) == ([], [])

    def test_invalid_utf8_does_not_fail(self, tmp_path):
        path = tmp_path / ".gitignore"
        path.write_bytes(b"caf\xe9/\n*.log\n")
        directories, patterns = read_ignore_file(path)
        assert len(directories) == 1
        assert patterns == ["*.log"]


class TestLoadRules:
    def test_defaults_only(self):
        rules = load_rules()
        assert rules.directory_names == frozenset(DEFAULT_DIRECTORY_IGNORES)
        assert rules.file_patterns == ()

    def test_defaults_can_be_disabled(self):
        rules = load_rules(defaults=())
        assert rules.directory_names == frozenset()
        assert rules.file_patterns == ()

    def test_merges_all_sources(self, gitignore):
        rules = load_rules(gitignore, ["build/", "*.map", "tmp"])
        assert rules.directory_names == frozenset(
            {".git", "node_modules", ".next", "dist", "coverage", "build", "tmp"}
        )
        assert rules.file_patterns == ("*.log", ".env.local", "docs/*.tmp", "*.map")

    def test_missing_ignore_file_is_fine(self, tmp_path):
        rules = load_rules(tmp_path / ".gitignore", ["dist/"])
        assert "dist" in rules.directory_names

    def test_empty_excludes_are_skipped(self):
        rules = load_rules(excludes=["", "/"], defaults=())
        assert rules.directory_names == frozenset()
        assert rules.file_patterns == ()

    def test_loaded_rules_filter_paths(self, gitignore):
        rules = load_rules(gitignore)
        assert rules.prunes("./packages/app/dist")
        assert rules.prunes("./.git")
        assert rules.hides("./server/debug.log")
        assert not rules.hides("./src/index.js")

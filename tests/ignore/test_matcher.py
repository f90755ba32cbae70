"""Tests for PatternMatcher verdicts."""

from pathlib import Path

import pytest

from project_zipper.ignore.matcher import PatternMatcher


def _matcher(*lines: str) -> PatternMatcher:
    return PatternMatcher.from_text("\n".join(lines))


def test_last_match_wins() -> None:
    matcher = _matcher("*.log", "!important.log")

    assert matcher.is_excluded("important.log") is False
    assert matcher.is_excluded("debug.log") is True


def test_later_exclusion_overrides_earlier_negation() -> None:
    matcher = _matcher("!keep.txt", "*.txt")

    assert matcher.is_excluded("keep.txt") is True


def test_negation_cannot_reinclude_inside_excluded_directory() -> None:
    matcher = _matcher("build/", "!build/keep.txt")

    assert matcher.is_excluded("build/keep.txt") is True


def test_negation_works_when_only_contents_are_excluded() -> None:
    matcher = _matcher("build/*", "!build/keep.txt")

    assert matcher.is_excluded("build/keep.txt") is False
    assert matcher.is_excluded("build/other.txt") is True
    assert matcher.is_excluded("build", is_dir=True) is False


def test_root_anchored_pattern_only_matches_at_root() -> None:
    matcher = _matcher("/node_modules")

    assert matcher.is_excluded("node_modules", is_dir=True) is True
    assert matcher.is_excluded("src/node_modules", is_dir=True) is False
    assert matcher.is_excluded("src/node_modules/pkg/index.js") is False


def test_unanchored_pattern_matches_at_every_depth() -> None:
    matcher = _matcher("node_modules")

    assert matcher.is_excluded("node_modules", is_dir=True) is True
    assert matcher.is_excluded("src/node_modules", is_dir=True) is True
    assert matcher.is_excluded("src/node_modules/pkg/index.js") is True


def test_directory_only_rule_needs_directory_kind() -> None:
    matcher = _matcher("cache/")

    assert matcher.is_excluded("cache", is_dir=True) is True
    assert matcher.is_excluded("cache", is_dir=False) is False
    assert matcher.is_excluded("cache/") is True
    assert matcher.is_excluded("cache/data.bin") is True


def test_files_inside_excluded_directory_are_excluded() -> None:
    matcher = _matcher("dist")

    assert matcher.is_excluded("dist/app/main.js") is True


def test_no_rules_excludes_nothing() -> None:
    matcher = PatternMatcher()

    assert matcher.is_excluded("anything.txt") is False
    assert matcher.is_excluded("deep/dir", is_dir=True) is False


def test_empty_and_dot_paths_are_included() -> None:
    matcher = _matcher("*")

    assert matcher.is_excluded("") is False
    assert matcher.is_excluded(".") is False


def test_leading_dot_slash_is_normalized() -> None:
    matcher = _matcher("/secret.txt")

    assert matcher.is_excluded("./secret.txt") is True


def test_absolute_path_is_rejected() -> None:
    matcher = _matcher("*.log")

    with pytest.raises(ValueError):
        matcher.is_excluded("/var/log/app.log")


def test_path_escaping_root_is_rejected() -> None:
    matcher = _matcher("*.log")

    with pytest.raises(ValueError):
        matcher.is_excluded("../outside.log")


def test_decide_reports_deciding_rule() -> None:
    matcher = _matcher("*.log", "!important.log")

    decision = matcher.decide("important.log")

    assert decision.excluded is False
    assert decision.rule is not None
    assert decision.rule.line_number == 2


def test_decide_reports_ancestor_rule() -> None:
    matcher = _matcher("vendor/", "!vendor/lib.py")

    decision = matcher.decide("vendor/lib.py")

    assert decision.excluded is True
    assert decision.rule is not None
    assert decision.rule.source == "vendor/"


def test_malformed_pattern_is_skipped_without_excluding() -> None:
    matcher = _matcher("[z-a]*", "*.tmp")

    assert len(matcher.errors) == 1
    assert matcher.is_excluded("zebra") is False
    assert matcher.is_excluded("x.tmp") is True


def test_patterns_expose_rule_sources() -> None:
    matcher = _matcher("# comment", "*.log", "", "!keep.log", "build/")

    assert matcher.patterns == ["*.log", "!keep.log", "build/"]


def test_from_root_without_ignore_file(tmp_path: Path) -> None:
    matcher = PatternMatcher.from_root(tmp_path)

    assert matcher.rules == ()
    assert matcher.errors == ()
    assert matcher.is_excluded("a/b/c.txt") is False


def test_from_root_reads_gitignore(tmp_path: Path, write_gitignore) -> None:
    write_gitignore(tmp_path, "*.pyc", "__pycache__/")

    matcher = PatternMatcher.from_root(tmp_path)

    assert len(matcher.rules) == 2
    assert matcher.is_excluded("pkg/module.pyc") is True
    assert matcher.is_excluded("pkg/__pycache__", is_dir=True) is True


def test_from_root_with_unreadable_ignore_file(tmp_path: Path) -> None:
    (tmp_path / ".gitignore").mkdir()

    matcher = PatternMatcher.from_root(tmp_path)

    assert matcher.rules == ()
    assert len(matcher.errors) == 1
    assert matcher.is_excluded("anything") is False


def test_matcher_is_reusable() -> None:
    matcher = _matcher("*.log")

    first = [matcher.is_excluded(path) for path in ("a.log", "b.txt")]
    second = [matcher.is_excluded(path) for path in ("a.log", "b.txt")]

    assert first == second == [True, False]

"""Cross-check PatternMatcher verdicts against pathspec's gitignore dialect.

``GitIgnoreSpec`` lets a negated rule re-include a file below an excluded
directory (``build/`` then ``!build/keep.txt``). Git itself never descends
into such a directory, so that case is covered in test_matcher.py and left
out here.
"""

import pytest
from pathspec import GitIgnoreSpec

from project_zipper.ignore.matcher import PatternMatcher


@pytest.mark.parametrize(
    ("lines", "paths"),
    [
        (["*.log", "!important.log"], ["debug.log", "important.log", "src/a.log", "a.txt"]),
        (["/node_modules"], ["node_modules/x.js", "src/node_modules/x.js"]),
        (["node_modules"], ["node_modules/x.js", "src/node_modules/x.js"]),
        (["docs/*.md"], ["docs/a.md", "docs/sub/a.md", "a.md"]),
        (["a/**/b"], ["a/b", "a/x/y/b", "ab", "x/a/b"]),
        (["**/cache"], ["cache", "deep/er/cache", "cache/file.bin"]),
        (["logs/**"], ["logs/x.txt", "logs/x/y.txt", "other/logs.txt"]),
        (["*.py[co]"], ["m.pyc", "m.pyo", "m.py", "pkg/m.pyc"]),
        (["build/*", "!build/keep.txt"], ["build/keep.txt", "build/other.txt"]),
        (["cache/"], ["cache/data.bin", "src/cache/data.bin"]),
        (["\\#notes", "foo.txt   "], ["#notes", "foo.txt", "notes"]),
        (["[!a]*.txt"], ["b.txt", "a.txt", "dir/c.txt"]),
    ],
)
def test_verdicts_agree_with_pathspec(lines: list[str], paths: list[str]) -> None:
    matcher = PatternMatcher.from_text("\n".join(lines))
    reference = GitIgnoreSpec.from_lines(lines)

    for path in paths:
        assert matcher.is_excluded(path) == reference.match_file(path), path

"""Decide whether root-relative paths are excluded by ignore rules."""

from __future__ import annotations

import logging
import os
from pathlib import Path, PurePosixPath, PureWindowsPath
from typing import Optional, Sequence

from project_zipper.constants import IGNORE_FILENAME
from project_zipper.filesystem import FileSystem, LocalFileSystem
from project_zipper.ignore.models import MatchDecision, Rule
from project_zipper.ignore.parser import parse_rules

logger = logging.getLogger(__name__)


class PatternMatcher:
    """Ordered ignore rules evaluated with last-match-wins semantics.

    A path inside an excluded directory stays excluded even when a later
    negated rule matches the path itself. The rule set never changes after
    construction, so one matcher can serve any number of scans.
    """

    def __init__(self, rules: Sequence[Rule] = (), errors: Sequence[str] = ()) -> None:
        self._rules = tuple(rules)
        self._errors = tuple(errors)

    @classmethod
    def from_text(cls, text: str) -> PatternMatcher:
        rules, errors = parse_rules(text)
        for error in errors:
            logger.debug("Skipping malformed ignore pattern (%s)", error)
        return cls(rules, errors)

    @classmethod
    def from_root(
        cls, root: Path, filesystem: Optional[FileSystem] = None
    ) -> PatternMatcher:
        filesystem = filesystem or LocalFileSystem()
        path = Path(root) / IGNORE_FILENAME
        try:
            if not filesystem.exists(path):
                logger.debug("No ignore file at %s", path)
                return cls()
            text = filesystem.read_text(path)
        except OSError as exc:
            logger.debug("Cannot read ignore file %s: %s", path, exc)
            return cls(errors=[f"Cannot read {path}: {exc}"])
        return cls.from_text(text)

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    @property
    def errors(self) -> tuple[str, ...]:
        return self._errors

    @property
    def patterns(self) -> list[str]:
        return [rule.source for rule in self._rules]

    def is_excluded(self, relative_path: str, is_dir: bool = False) -> bool:
        return self.decide(relative_path, is_dir=is_dir).excluded

    def decide(self, relative_path: str, is_dir: bool = False) -> MatchDecision:
        normalized, is_dir = _normalize(relative_path, is_dir)
        if not normalized:
            return MatchDecision(excluded=False)

        parts = normalized.split("/")
        for depth in range(1, len(parts)):
            decision = self._evaluate("/".join(parts[:depth]), is_dir=True)
            if decision.excluded:
                return decision
        return self._evaluate(normalized, is_dir=is_dir)

    def _evaluate(self, path: str, is_dir: bool) -> MatchDecision:
        decision = MatchDecision(excluded=False)
        for rule in self._rules:
            if rule.matches(path, is_dir=is_dir):
                decision = MatchDecision(excluded=not rule.negation, rule=rule)
        return decision


def _normalize(relative_path: str, is_dir: bool) -> tuple[str, bool]:
    text = str(relative_path)
    if os.sep != "/":
        text = text.replace(os.sep, "/")
    if PurePosixPath(text).is_absolute() or PureWindowsPath(text).drive:
        raise ValueError(f"Expected a path relative to the project root: {text}")

    if text.endswith("/"):
        is_dir = True
    parts = [part for part in text.split("/") if part not in ("", ".")]
    if ".." in parts:
        raise ValueError(f"Path escapes the project root: {text}")
    return "/".join(parts), is_dir

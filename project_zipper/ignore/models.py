"""Ignore rule data models."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Rule:
    pattern: str
    negation: bool = False
    directory_only: bool = False
    anchored: bool = False
    source: str = ""
    line_number: int = 0
    regex: Optional[re.Pattern[str]] = field(default=None, compare=False, repr=False)

    def matches(self, relative_path: str, is_dir: bool = False) -> bool:
        if self.directory_only and not is_dir:
            return False
        if self.regex is None:
            return False
        return self.regex.fullmatch(relative_path) is not None


@dataclass(frozen=True)
class MatchDecision:
    excluded: bool
    rule: Optional[Rule] = None

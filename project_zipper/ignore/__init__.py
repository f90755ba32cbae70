from project_zipper.ignore.matcher import PatternMatcher
from project_zipper.ignore.models import MatchDecision, Rule
from project_zipper.ignore.parser import PatternSyntaxError, parse_line, parse_rules

__all__ = [
    "MatchDecision",
    "PatternMatcher",
    "PatternSyntaxError",
    "Rule",
    "parse_line",
    "parse_rules",
]

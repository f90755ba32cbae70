"""Parse gitignore-style rule text into ordered rules.

Each non-blank, non-comment line becomes one ``Rule``. Glob patterns are
translated into regular expressions that are matched against root-relative
POSIX paths with ``fullmatch``:

- ``*`` matches any run of characters inside one path segment;
- ``?`` matches a single character other than ``/``;
- ``[...]`` is a character class (``!`` or ``^`` negates) that never matches ``/``;
- ``**/``, ``/**/`` and ``/**`` span directories, any other ``**`` acts like ``*``;
- a backslash escapes the next character.

Patterns without a slash (other than a trailing one) match at any depth.
"""

from __future__ import annotations

import re

from project_zipper.ignore.models import Rule

_ANY_DEPTH_PREFIX = "(?:.*/)?"
_SEGMENT_RUN = "[^/]*"

_POSIX_CLASSES = {
    "alnum": "a-zA-Z0-9",
    "alpha": "a-zA-Z",
    "blank": " \\t",
    "cntrl": "\\x00-\\x1f\\x7f",
    "digit": "0-9",
    "lower": "a-z",
    "space": " \\t\\n\\r\\f\\v",
    "upper": "A-Z",
    "xdigit": "0-9A-Fa-f",
}


class PatternSyntaxError(ValueError):
    """Raised for a pattern that cannot be turned into a matcher."""


def parse_rules(text: str) -> tuple[list[Rule], list[str]]:
    rules: list[Rule] = []
    errors: list[str] = []
    for line_number, line in enumerate(text.lstrip("\ufeff").splitlines(), start=1):
        try:
            rule = parse_line(line, line_number)
        except PatternSyntaxError as exc:
            errors.append(f"line {line_number}: {exc}")
            continue
        if rule is not None:
            rules.append(rule)
    return rules, errors


def parse_line(line: str, line_number: int = 0) -> Rule | None:
    source = line.rstrip("\r\n")
    text = _strip_trailing_spaces(source)
    if not text or text.startswith("#"):
        return None

    negation = text.startswith("!")
    if negation:
        text = text[1:]

    directory_only = False
    if text.endswith("/") and not _is_escaped(text, len(text) - 1):
        directory_only = True
        text = text.rstrip("/")

    anchored = "/" in text
    text = text.lstrip("/")
    if not text:
        return None

    return Rule(
        pattern=text,
        negation=negation,
        directory_only=directory_only,
        anchored=anchored,
        source=source,
        line_number=line_number,
        regex=compile_pattern(text, anchored),
    )


def compile_pattern(pattern: str, anchored: bool) -> re.Pattern[str]:
    body = translate_glob(pattern)
    prefix = "" if anchored else _ANY_DEPTH_PREFIX
    try:
        return re.compile(f"{prefix}{body}", re.DOTALL)
    except re.error as exc:
        raise PatternSyntaxError(f"{pattern!r}: {exc}") from exc


def translate_glob(pattern: str) -> str:
    parts: list[str] = []
    index = 0
    length = len(pattern)
    while index < length:
        char = pattern[index]
        if char == "\\":
            if index + 1 >= length:
                raise PatternSyntaxError(f"{pattern!r}: trailing backslash")
            parts.append(re.escape(pattern[index + 1]))
            index += 2
        elif char == "*":
            translated, index = _translate_stars(pattern, index)
            parts.append(translated)
        elif char == "?":
            parts.append("[^/]")
            index += 1
        elif char == "[":
            translated, end = _translate_class(pattern, index)
            if translated is None:
                parts.append(re.escape(char))
                index += 1
            else:
                parts.append(translated)
                index = end
        else:
            parts.append(re.escape(char))
            index += 1
    return "".join(parts)


def _translate_stars(pattern: str, start: int) -> tuple[str, int]:
    end = start
    length = len(pattern)
    while end < length and pattern[end] == "*":
        end += 1

    at_segment_start = start == 0 or pattern[start - 1] == "/"
    at_segment_end = end == length or pattern[end] == "/"
    if end - start < 2 or not (at_segment_start and at_segment_end):
        return _SEGMENT_RUN, end

    if start == 0 and end == length:
        return ".*", end
    if end == length:
        # "dir/**" matches everything inside dir, not dir itself
        return ".+", end
    # "**/" leading or "/**/" in the middle: zero or more directories
    return _ANY_DEPTH_PREFIX, end + 1


def _translate_class(pattern: str, start: int) -> tuple[str | None, int]:
    length = len(pattern)
    index = start + 1
    negate = index < length and pattern[index] in "!^"
    if negate:
        index += 1

    items: list[str] = []
    first = True
    while index < length:
        char = pattern[index]
        if char == "]" and not first:
            break
        first = False
        if pattern.startswith("[:", index):
            close = pattern.find(":]", index + 2)
            if close != -1:
                name = pattern[index + 2 : close]
                if name not in _POSIX_CLASSES:
                    raise PatternSyntaxError(
                        f"{pattern!r}: unknown character class [:{name}:]"
                    )
                items.append(_POSIX_CLASSES[name])
                index = close + 2
                continue
        if char == "\\" and index + 1 < length:
            items.append(re.escape(pattern[index + 1]))
            index += 2
            continue
        if char == "-" and items and index + 1 < length and pattern[index + 1] != "]":
            items.append("-")
        else:
            items.append(re.escape(char))
        index += 1
    else:
        # unterminated class, the bracket is taken literally
        return None, start

    body = "".join(items)
    if negate:
        return f"[^{body}/]", index + 1
    return f"(?!/)[{body}]", index + 1


def _strip_trailing_spaces(text: str) -> str:
    while text.endswith(" ") and not _is_escaped(text, len(text) - 1):
        text = text[:-1]
    return text


def _is_escaped(text: str, index: int) -> bool:
    backslashes = 0
    cursor = index - 1
    while cursor >= 0 and text[cursor] == "\\":
        backslashes += 1
        cursor -= 1
    return backslashes % 2 == 1

from __future__ import annotations

"""
Gitignore-Style Ignore Matching Engine.

Translates gitignore glob rules into anchored regular expressions and
evaluates them with gitignore precedence: every rule is tried in order
and the last matching rule decides, so a negated rule ('!') can re-include
a path excluded earlier. A path is also ignored when any of its parent
directories is ignored, and negation cannot re-include it in that case.
"""

import logging
import os
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from foldertree.domain.constants import DEFAULT_IGNORE_PATTERNS

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# CONFIGURATION DEFAULTS
# -----------------------------------------------------------------------------

def default_ignore_patterns() -> List[str]:
    """
    Get the built-in ignore patterns.

    Covers version control metadata, dependency folders, editor settings,
    build output, OS artifacts, logs, coverage reports and secret files.

    Returns:
        List[str]: Fresh copy of the gitignore-style default patterns.
    """
    return list(DEFAULT_IGNORE_PATTERNS)

# -----------------------------------------------------------------------------
# RULE COMPILATION
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class IgnoreRule:
    """
    A compiled gitignore rule.

    Attributes:
        pattern: Original pattern text.
        regex: Compiled expression matched against a relative path.
        negated: True for re-include rules ('!pattern').
        dir_only: True if the pattern ended with '/'.
        anchored: True if the pattern is relative to the root.
        source: Origin of the rule (a file path or '<defaults>').
    """
    pattern: str
    regex: re.Pattern
    negated: bool = False
    dir_only: bool = False
    anchored: bool = False
    source: str = ""

    def matches(self, rel_path: str, is_dir: bool) -> bool:
        if self.dir_only and not is_dir:
            return False
        target = rel_path if self.anchored else rel_path.rsplit("/", 1)[-1]
        return self.regex.match(target) is not None


def compile_rule(line: str, source: str = "") -> Optional[IgnoreRule]:
    """
    Compile one gitignore line into a rule.

    Args:
        line: Raw line from a pattern file.
        source: Label recorded on the rule.

    Returns:
        Optional[IgnoreRule]: None for blanks, comments and malformed patterns.
    """
    pattern = _strip_trailing_spaces(line.rstrip("\r\n"))
    if not pattern or pattern.startswith("#"):
        return None

    body = pattern
    negated = False
    if body.startswith("!"):
        negated = True
        body = body[1:]
    elif body.startswith(("\\!", "\\#")):
        body = body[1:]

    dir_only = body.endswith("/")
    body = body.rstrip("/")
    anchored = False
    if not body:
        return None

    # Everything inside a directory: ignore the directory itself
    if body.endswith("/**") and "**" not in body[:-3]:
        body = body[:-3]
        dir_only = True
        anchored = True

    # A slash anywhere but the end anchors the pattern to the root
    anchored = anchored or "/" in body
    body = body.lstrip("/")
    if not body:
        return None
    if body.startswith("**/"):
        # Leading '**/' matches at any depth; keep it anchored on the full path
        anchored = True

    try:
        regex = re.compile(_glob_to_regex(body), re.DOTALL)
    except re.error as e:
        logger.debug(f"Skipping malformed ignore pattern '{pattern}': {e}")
        return None

    return IgnoreRule(
        pattern=pattern,
        regex=regex,
        negated=negated,
        dir_only=dir_only,
        anchored=anchored,
        source=source,
    )


def compile_rules(patterns: Iterable[str], source: str = "") -> List[IgnoreRule]:
    """Compile many patterns, silently discarding blanks, comments and bad globs."""
    rules: List[IgnoreRule] = []
    for p in patterns:
        rule = compile_rule(p, source=source)
        if rule is not None:
            rules.append(rule)
    return rules


def _strip_trailing_spaces(pattern: str) -> str:
    """Remove trailing spaces unless escaped with a backslash."""
    stripped = pattern.rstrip(" ")
    if stripped.endswith("\\") and len(stripped) < len(pattern):
        return stripped[:-1] + " "
    return stripped


def _glob_to_regex(glob: str) -> str:
    """
    Translate a gitignore glob into a full-match regular expression.

    '*' and '?' never cross a '/', '**' spans any number of path segments,
    and bracket expressions are passed through with '!' negation mapped to '^'.
    """
    out: List[str] = []
    i, n = 0, len(glob)

    while i < n:
        c = glob[i]
        if c == "*":
            if glob[i:i + 2] == "**":
                at_segment_start = i == 0 or glob[i - 1] == "/"
                j = i + 2
                if at_segment_start and glob[j:j + 1] == "/":
                    # '**/' : zero or more leading directories
                    out.append("(?:.*/)?")
                    i = j + 1
                    continue
                if at_segment_start and j == n:
                    # trailing '/**' : everything inside
                    out.append(".*")
                    i = j
                    continue
                out.append("[^/]*")
                i = j
                continue
            out.append("[^/]*")
        elif c == "?":
            out.append("[^/]")
        elif c == "[":
            j = glob.find("]", i + 2 if glob[i + 1:i + 2] in ("!", "^") else i + 1)
            if j == -1:
                out.append(re.escape(c))
            else:
                inner = glob[i + 1:j]
                if inner.startswith("!"):
                    inner = "^" + inner[1:]
                out.append(f"[{inner}]")
                i = j
        elif c == "\\" and i + 1 < n:
            i += 1
            out.append(re.escape(glob[i]))
        else:
            out.append(re.escape(c))
        i += 1

    return "(?:" + "".join(out) + r")\Z"

# -----------------------------------------------------------------------------
# PATTERN FILE LOADING
# -----------------------------------------------------------------------------

def load_gitignore_patterns(gitignore_path: str) -> List[str]:
    """
    Read the raw patterns of a gitignore-style file.

    A missing or unreadable file yields an empty list.

    Args:
        gitignore_path: Path to the pattern file.

    Returns:
        List[str]: Pattern lines with comments and blanks removed.
    """
    if not os.path.isfile(gitignore_path):
        logger.debug(f"No ignore file at '{gitignore_path}'.")
        return []

    patterns: List[str] = []
    try:
        with open(gitignore_path, "r", encoding="utf-8") as f:
            for line in f:
                line = line.rstrip("\r\n")
                if not line.strip() or line.startswith("#"):
                    continue
                patterns.append(line)
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Ignore file '{gitignore_path}' unreadable: {e}")
        return []

    return patterns

# -----------------------------------------------------------------------------
# MATCHER
# -----------------------------------------------------------------------------

DEFAULTS_SOURCE = "<defaults>"


class IgnoreMatcher:
    """
    Ordered gitignore rule set answering 'is this relative path ignored?'.

    Built once per operation and treated as read-only while scanning.
    """

    def __init__(self, include_hidden: bool = False, patterns: Optional[Sequence[str]] = None):
        """
        Args:
            include_hidden: Skip the built-in default table entirely.
            patterns: Extra patterns appended after the defaults.
        """
        self.include_hidden = include_hidden
        self._rules: List[IgnoreRule] = []
        self.sources: List[str] = []

        if not include_hidden:
            self.add_patterns(default_ignore_patterns(), source=DEFAULTS_SOURCE)
        if patterns:
            self.add_patterns(patterns, source="<inline>")

    @property
    def rules(self) -> List[IgnoreRule]:
        return list(self._rules)

    def add_patterns(self, patterns: Iterable[str], source: str = "") -> int:
        """Append patterns after the existing rules; returns how many compiled."""
        rules = compile_rules(patterns, source=source)
        self._rules.extend(rules)
        if rules and source and source not in self.sources:
            self.sources.append(source)
        return len(rules)

    def load_rules(self, gitignore_path: str) -> int:
        """
        Append the rules of a gitignore-style file.

        Missing or unreadable files are ignored and the current rules stay
        active.

        Returns:
            int: Number of rules added.
        """
        added = self.add_patterns(load_gitignore_patterns(gitignore_path), source=gitignore_path)
        if added:
            logger.debug(f"Loaded {added} ignore rule(s) from '{gitignore_path}'.")
        return added

    def ignores(self, rel_path: str, is_dir: Optional[bool] = None) -> bool:
        """
        Decide whether a path relative to the scan root is ignored.

        Args:
            rel_path: Relative path; OS separators and a trailing '/' are accepted.
            is_dir: Directory flag. Defaults to True when rel_path ends with '/'.

        Returns:
            bool: True if the path or one of its parent directories is ignored.
        """
        normalized = rel_path.replace(os.sep, "/").replace("\\", "/")
        if is_dir is None:
            is_dir = normalized.endswith("/")
        normalized = normalized.strip("/")
        while normalized.startswith("./"):
            normalized = normalized[2:]
        if not normalized or normalized == ".":
            return False

        parts = normalized.split("/")
        for depth in range(1, len(parts)):
            if self._decide("/".join(parts[:depth]), True):
                return True
        return self._decide(normalized, is_dir)

    def _decide(self, rel_path: str, is_dir: bool) -> bool:
        ignored = False
        for rule in self._rules:
            if rule.matches(rel_path, is_dir):
                ignored = not rule.negated
        return ignored

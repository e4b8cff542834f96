"""Restricted glob patterns for file-name exclusion.

Only ``*`` (zero or more characters) and ``?`` (exactly one character) are wildcards.
Every other character, including ``[``, ``]`` and ``!``, is matched literally, and
``**`` is simply two consecutive ``*`` wildcards.
"""

import re
from typing import Optional, Tuple

from pathspec.pattern import RegexPattern  # type: ignore

WILDCARD_CHARS = ("*", "?")


def has_wildcard(pattern: str) -> bool:
    """Return True if pattern contains a ``*`` or ``?`` wildcard."""
    return any(char in pattern for char in WILDCARD_CHARS)


def translate_glob(glob: str, any_char: str = ".") -> str:
    """Translate a ``*``/``?`` glob into an unanchored regular expression body.

    Args:
        glob: The glob to translate.
        any_char: Regex used for a single wildcard character. Basename globs use
            ``[^/]`` so that a wildcard never crosses a path separator.

    Returns:
        str: The regular expression body (without anchors).

    Example:
        >>> translate_glob("*.log")
        '.*\\\\.log'
        >>> translate_glob("file?.[ch]", any_char="[^/]")
        'file[^/]\\\\.\\\\[ch\\\\]'
    """
    parts = []
    for char in glob:
        if char == "*":
            parts.append(any_char + "*")
        elif char == "?":
            parts.append(any_char)
        else:
            parts.append(re.escape(char))
    return "".join(parts)


class SimpleGlobPattern(RegexPattern):  # type: ignore
    """File-name pattern supporting only the ``*`` and ``?`` wildcards.

    A pattern without a ``/`` is matched against the base name of a path, wherever that
    path sits in the tree. A pattern containing a ``/`` is matched against the whole
    normalized relative path. Matching is always anchored to the full base name or the
    full path.

    Example:
        >>> SimpleGlobPattern("*.log").match_file("logs/app.log") is not None
        True
        >>> SimpleGlobPattern("*.log").match_file("app.log.txt") is not None
        False
        >>> SimpleGlobPattern("docs/*.md").match_file("docs/intro.md") is not None
        True
        >>> SimpleGlobPattern("docs/*.md").match_file("src/docs/intro.md") is not None
        False
    """

    @classmethod
    def pattern_to_regex(cls, pattern: str) -> Tuple[Optional[str], Optional[bool]]:
        """Convert the pattern into an anchored regular expression.

        Args:
            pattern: The glob pattern. A leading ``./`` is ignored.

        Returns:
            A tuple of (regex, include). Empty patterns yield (None, None), which pathspec
            treats as a null pattern that never matches.
        """
        if pattern.startswith("./"):
            pattern = pattern[2:]
        if not pattern:
            return None, None

        if "/" in pattern:
            return "^" + translate_glob(pattern.lstrip("/")) + "$", True

        return "^(?:.*/)?" + translate_glob(pattern, any_char="[^/]") + "$", True

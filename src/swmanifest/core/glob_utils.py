"""Pure utility functions for glob pattern handling.

Globs are compiled to regular expression fragments that are shared by the
build-time file matcher and the runtime request router. These functions
contain no I/O and are safe to use in the core domain.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable


_QUESTION_MARK = "[^/]"
_WILD_SINGLE = "[^/]*"
_WILD_OPEN = r"(?:.+\/)?"
_WILD_TAIL = ".*"
_SEPARATOR = r"\/"

# Order matters: "*" expands to a class containing no "." or "+".
_TO_ESCAPE_BASE: tuple[tuple[str, str], ...] = (
    (".", r"\."),
    ("+", r"\+"),
    ("*", _WILD_SINGLE),
)
_TO_ESCAPE_WILDCARD_QM = (*_TO_ESCAPE_BASE, ("?", _QUESTION_MARK))
_TO_ESCAPE_LITERAL_QM = (*_TO_ESCAPE_BASE, ("?", r"\?"))

NEGATION_PREFIX = "!"


def glob_to_regex(glob: str, literal_question_mark: bool = False) -> str:
    """Compile a glob into an unanchored regular expression fragment.

    The glob is processed one "/"-separated segment at a time:

    - ``*`` matches within a single segment and never crosses "/".
    - ``**`` followed by more segments matches any (possibly empty) run of
      whole segments.
    - A trailing ``**`` matches the rest of the path, including nothing, so
      "a/**" matches "a", "a/" and "a/x/y". The preceding separator is
      folded into the optional tail: "/api/**" compiles to
      ``\\/api(?:\\/.*)?`` rather than ``\\/api\\/.*``, so clients consuming
      the manifest also route the bare "/api" through this pattern.
    - ``?`` is a single-character wildcard, or a literal "?" when
      ``literal_question_mark`` is set (URL patterns with query strings).

    Args:
        glob: Glob pattern such as "/assets/**/*.png".
        literal_question_mark: Treat "?" as a literal character.

    Returns:
        Regex fragment. Callers add ``^``/``$`` anchors where needed.

    Example:
        glob_to_regex("/*.js") returns the fragment ``\\/[^/]*\\.js``.
    """
    to_escape = _TO_ESCAPE_LITERAL_QM if literal_question_mark else _TO_ESCAPE_WILDCARD_QM
    segments = glob.split("/")
    last = len(segments) - 1

    parts: list[str] = []
    for index, segment in enumerate(segments):
        if segment == "**":
            if index < last:
                parts.append(_WILD_OPEN)
            elif parts and parts[-1] == _SEPARATOR:
                # Fold the preceding separator so the bare prefix matches too.
                parts[-1] = f"(?:{_SEPARATOR}{_WILD_TAIL})?"
            else:
                parts.append(_WILD_TAIL)
            continue

        processed = segment
        for literal, replacement in to_escape:
            processed = processed.replace(literal, replacement)
        parts.append(processed)
        if index < last:
            parts.append(_SEPARATOR)

    return "".join(parts)


def join_urls(a: str, b: str) -> str:
    """Join two URL parts so that exactly one "/" separates them.

    Examples:
        >>> join_urls("/base/", "/index.html")
        '/base/index.html'
        >>> join_urls("/base", "index.html")
        '/base/index.html'
        >>> join_urls("/base/", "index.html")
        '/base/index.html'
    """
    if a.endswith("/") and b.startswith("/"):
        return a + b[1:]
    if not a.endswith("/") and not b.startswith("/"):
        return f"{a}/{b}"
    return a + b


def url_to_regex(url: str, base_href: str, literal_question_mark: bool = False) -> str:
    """Compile a URL glob, resolving relative URLs against base_href first.

    URLs that start with "/" or carry a scheme ("https://...") are compiled
    as-is.
    """
    if not url.startswith("/") and "://" not in url:
        url = join_urls(base_href, url)
    return glob_to_regex(url, literal_question_mark)


def split_negation(pattern: str) -> tuple[bool, str]:
    """Split a leading "!" off a pattern.

    Returns:
        Tuple of (positive, remainder).
    """
    if pattern.startswith(NEGATION_PREFIX):
        return False, pattern[len(NEGATION_PREFIX) :]
    return True, pattern


def glob_list_to_matcher(globs: Iterable[str]) -> Callable[[str], bool]:
    """Build a predicate from a list of globs with optional "!" negation.

    A path is accepted when any positive glob matches and no negative glob
    matches, regardless of the order the globs are listed in. An empty list
    accepts nothing.

    Args:
        globs: File globs, e.g. ["/**/*.js", "!/legacy/**"].

    Returns:
        Callable returning True for accepted paths.
    """
    positives: list[re.Pattern[str]] = []
    negatives: list[re.Pattern[str]] = []
    for glob in globs:
        positive, body = split_negation(glob)
        regex = re.compile(f"^{glob_to_regex(body)}$")
        (positives if positive else negatives).append(regex)

    def matches(path: str) -> bool:
        if not any(regex.search(path) for regex in positives):
            return False
        return not any(regex.search(path) for regex in negatives)

    return matches

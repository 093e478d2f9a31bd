"""Name normalization shared by every comparison.

A normalized name is upper-case, holds only A-Z and single spaces, and
has no leading or trailing space. normalize() is idempotent.
"""

import re

_NON_NAME_CHARS = re.compile(r"[^A-Z\s]")
_WHITESPACE_RUN = re.compile(r"\s+")


def normalize(raw: str | None) -> str:
    """Canonicalize a raw name for comparison.

    Args:
        raw: Any name string, or None for a missing value

    Returns:
        Normalized name. Empty string means no name is available and the
        caller must not compare it.
    """
    if raw is None:
        return ""
    text = raw if isinstance(raw, str) else str(raw)
    text = _NON_NAME_CHARS.sub("", text.upper())
    return _WHITESPACE_RUN.sub(" ", text).strip()

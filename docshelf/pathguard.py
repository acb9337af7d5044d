"""Relative-path validation shared by the tree builder and the HTTP layer.

Every document is keyed by a slash-separated path relative to the docs root.
Anything else (absolute paths, ``..``, empty segments) is rejected here before
it can reach a tree node or a lookup.

split_relative_path(raw) → list[str]   – the validated segments.
InvalidPath                            – raised on any malformed input.
"""

from docshelf.errors import InvalidPath


def split_relative_path(raw: str) -> list[str]:
    """Validate *raw* and return its ``/``-separated segments.

    Checks (in order)
    -----------------
    1. Not empty.
    2. No null bytes.
    3. No backslashes (rules out Windows-style path tricks).
    4. Must be relative – no leading ``/``.
    5. No empty segments (``a//b``, trailing ``/``) and no ``.`` / ``..``.
    """
    if not raw:
        raise InvalidPath(raw, "path is empty")

    if "\x00" in raw:
        raise InvalidPath(raw, "path must not contain null bytes")

    if "\\" in raw:
        raise InvalidPath(raw, "path must not contain backslashes")

    if raw.startswith("/"):
        raise InvalidPath(raw, "path must be relative (no leading /)")

    segments = raw.split("/")
    for seg in segments:
        if not seg:
            raise InvalidPath(raw, "path contains an empty segment")
        if seg in (".", ".."):
            raise InvalidPath(raw, f"path must not contain '{seg}' segments")

    return segments

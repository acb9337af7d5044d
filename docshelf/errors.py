"""Exceptions raised while turning document paths into a tree."""


class TreeError(Exception):
    """Base class for tree construction failures."""


class InvalidPath(TreeError, ValueError):
    """A relative path is empty or contains disallowed segments."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Invalid document path {path!r}: {reason}")
        self.path = path
        self.reason = reason


class ConflictingNode(TreeError):
    """Two documents make incompatible demands on the same tree position."""

    def __init__(self, path: str, detail: str) -> None:
        super().__init__(f"Conflicting node at {path!r}: {detail}")
        self.path = path
        self.detail = detail

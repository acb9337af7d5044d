"""Display tree built from the flat document listing.

The tree is used by the sidebar UI.  It is built in two passes: documents are
first placed into a mutable scratch structure keyed by path segment, then the
whole forest is frozen and sorted.  The result never depends on the order of
the input sequence.

Ordering
--------
Within every directory: sub-directories first, then files.  Both groups are
sorted case-sensitively by display name (plain code-point comparison).

Errors
------
* ``InvalidPath`` — a document's relative path is malformed.
* ``ConflictingNode`` — a segment is needed both as a file and as a
  directory, a relative path appears twice, or two siblings would share a
  display name.

Both derive from ``TreeError``; the builder never returns a partial tree.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from docshelf.documents import DocumentRecord
from docshelf.errors import ConflictingNode, InvalidPath, TreeError
from docshelf.pathguard import split_relative_path

__all__ = [
    "ConflictingNode",
    "InvalidPath",
    "NodeKind",
    "TreeError",
    "TreeNode",
    "build_tree",
]


class NodeKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class TreeNode:
    """One entry in the display hierarchy."""

    name: str
    path: str
    kind: NodeKind
    children: tuple["TreeNode", ...] | None = None  # directories only

    @property
    def is_dir(self) -> bool:
        return self.kind is NodeKind.DIRECTORY

    def to_dict(self) -> dict:
        data = {"name": self.name, "path": self.path, "type": self.kind.value}
        if self.children is not None:
            data["children"] = [child.to_dict() for child in self.children]
        return data


# ── scratch structure ────────────────────────────────────────────────────────


class _Dir:
    """Mutable directory used while placing documents."""

    __slots__ = ("name", "path", "dirs", "files")

    def __init__(self, name: str, path: str) -> None:
        self.name = name
        self.path = path
        self.dirs: dict[str, _Dir] = {}
        self.files: dict[str, DocumentRecord] = {}


def _place(root: _Dir, doc: DocumentRecord) -> None:
    segments = split_relative_path(doc.relative_path)
    *parents, leaf = segments

    level = root
    for depth, segment in enumerate(parents, start=1):
        prefix = "/".join(segments[:depth])
        if segment in level.files:
            raise ConflictingNode(
                prefix,
                f"{level.files[segment].relative_path!r} is a file but "
                f"{doc.relative_path!r} needs it as a directory",
            )
        child = level.dirs.get(segment)
        if child is None:
            child = level.dirs[segment] = _Dir(segment, prefix)
        level = child

    if leaf in level.dirs:
        raise ConflictingNode(
            doc.relative_path,
            f"{doc.relative_path!r} is a file but other documents need it as a directory",
        )
    if leaf in level.files:
        raise ConflictingNode(doc.relative_path, "duplicate document path")
    level.files[leaf] = doc


# ── freeze + sort ────────────────────────────────────────────────────────────


def _sort_key(node: TreeNode) -> tuple[int, str]:
    return (0 if node.is_dir else 1, node.name)


def _freeze(level: _Dir) -> tuple[TreeNode, ...]:
    nodes = [
        TreeNode(name=d.name, path=d.path, kind=NodeKind.DIRECTORY, children=_freeze(d))
        for d in level.dirs.values()
    ]
    nodes.extend(
        TreeNode(name=doc.title, path=doc.relative_path, kind=NodeKind.FILE)
        for doc in level.files.values()
    )

    seen: dict[str, str] = {}
    for node in nodes:
        if node.name in seen:
            raise ConflictingNode(
                node.path, f"display name {node.name!r} is already used by {seen[node.name]!r}"
            )
        seen[node.name] = node.path

    return tuple(sorted(nodes, key=_sort_key))


# ── public API ───────────────────────────────────────────────────────────────


def build_tree(documents: Iterable[DocumentRecord]) -> list[TreeNode]:
    """Group *documents* by directory into a sorted forest.

    Raises ``InvalidPath`` or ``ConflictingNode``; see module docstring.
    """
    root = _Dir("", "")
    for doc in documents:
        _place(root, doc)
    return list(_freeze(root))

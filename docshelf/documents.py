"""Document loader — discover ``.md`` files and split frontmatter from body.

Public API
----------
DocumentLoader(docs_dir).load() -> list[DocumentRecord]
    Every Markdown document under *docs_dir*, sorted by relative path.
DocumentLoader(docs_dir).get(relative_path) -> DocumentRecord | None
    One document, or ``None`` when it isn't part of the listing.

Discovery
---------
* Only ``*.md`` files are picked up.
* Any path segment starting with ``.`` is skipped (``.git``, ``.cache``, …).
* Directories in ``IGNORED_DIRS`` are skipped entirely (dependency and build
  output folders that rarely hold real documentation).

Frontmatter handling
--------------------
* If the file starts with ``---\\n``, the block up to the next ``---`` line is
  parsed as YAML.  On success ``frontmatter`` is the parsed dict; an empty
  block yields ``{}``.  Malformed YAML or a non-mapping falls back to ``{}``
  and the *entire* file content becomes the body.
* If there is no opening ``---``, ``frontmatter`` is ``{}`` and the whole
  file is the body.
"""

import logging
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

# ── discovery filters ────────────────────────────────────────────────────────

DOC_SUFFIX = ".md"

IGNORED_DIRS: frozenset[str] = frozenset({
    "node_modules",
    "vendor",
    "__pycache__",
    "venv",
    "dist",
    "build",
    "target",
    "coverage",
    "bower_components",
})


def _is_skipped(parts: tuple[str, ...]) -> bool:
    """Return True if a relative path (as *parts*) must not be listed."""
    *dirs, name = parts
    if name.startswith("."):
        return True
    return any(d.startswith(".") or d in IGNORED_DIRS for d in dirs)


# ── frontmatter splitter ─────────────────────────────────────────────────────

_DELIM = "---"


def _parse_frontmatter(content: str) -> tuple[dict[str, Any], str]:
    """Split *content* into (frontmatter_dict, body_string).

    Returns ({}, content) when there is no valid frontmatter block.
    """
    if not content.startswith(_DELIM + "\n"):
        return {}, content

    end = content.find("\n" + _DELIM + "\n", len(_DELIM))
    if end == -1:
        # closing delimiter may be the last line of the file
        if content.endswith("\n" + _DELIM):
            end = len(content) - len(_DELIM) - 1
        else:
            return {}, content

    raw_yaml = content[len(_DELIM) + 1 : end + 1]
    body = content[end + 1 + len(_DELIM) + 1 :]

    try:
        parsed = yaml.safe_load(raw_yaml)
    except yaml.YAMLError as exc:
        logger.warning("Malformed YAML frontmatter: %s", exc)
        return {}, content

    if parsed is None:
        return {}, body

    if not isinstance(parsed, dict):
        logger.warning("Frontmatter is not a mapping — treating as absent")
        return {}, content

    return parsed, body


# ── titles ───────────────────────────────────────────────────────────────────

_WORD_START = re.compile(r"\b\w")


def format_title(name: str) -> str:
    """Turn a file stem into a display title: ``getting-started`` → ``Getting Started``."""
    spaced = name.replace("-", " ").replace("_", " ")
    return _WORD_START.sub(lambda m: m.group(0).upper(), spaced)


def _derive_title(name: str, frontmatter: dict[str, Any]) -> str:
    title = frontmatter.get("title")
    if isinstance(title, str) and title.strip():
        return title.strip()
    return format_title(name)


# ── records ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class DocumentRecord:
    """One discovered document."""

    path: Path  # absolute location on disk
    relative_path: str  # slash-separated, unique key
    name: str  # file stem
    title: str
    content: str  # body without frontmatter
    frontmatter: dict[str, Any] = field(default_factory=dict)
    modified_at: datetime = datetime.fromtimestamp(0, tz=timezone.utc)
    size: int = 0

    def to_dict(self, include_content: bool = True) -> dict:
        data = {
            "path": str(self.path),
            "relativePath": self.relative_path,
            "name": self.name,
            "title": self.title,
            "frontmatter": self.frontmatter,
            "modifiedAt": self.modified_at.isoformat(),
            "size": self.size,
        }
        if include_content:
            data["content"] = self.content
        return data


# ── loader ───────────────────────────────────────────────────────────────────


class DocumentLoader:
    """Reads every Markdown document under an explicit root directory."""

    def __init__(self, docs_dir: Path | str) -> None:
        self.docs_dir = Path(docs_dir)

    def _read(self, path: Path, relative_path: str) -> DocumentRecord:
        content = path.read_text(encoding="utf-8")
        frontmatter, body = _parse_frontmatter(content)
        stats = path.stat()
        name = path.name[: -len(DOC_SUFFIX)]

        return DocumentRecord(
            path=path,
            relative_path=relative_path,
            name=name,
            title=_derive_title(name, frontmatter),
            content=body,
            frontmatter=frontmatter,
            modified_at=datetime.fromtimestamp(stats.st_mtime, tz=timezone.utc),
            size=stats.st_size,
        )

    def load(self) -> list[DocumentRecord]:
        """Return every document under the root, sorted by relative path."""
        if not self.docs_dir.is_dir():
            logger.warning("Docs directory %s does not exist", self.docs_dir)
            return []

        records: list[DocumentRecord] = []
        for path in self.docs_dir.rglob("*" + DOC_SUFFIX):
            rel = path.relative_to(self.docs_dir)
            if _is_skipped(rel.parts) or not path.is_file():
                continue

            try:
                records.append(self._read(path, rel.as_posix()))
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning("Skipping unreadable document %s: %s", rel, exc)

        records.sort(key=lambda r: r.relative_path)
        return records

    def get(self, relative_path: str) -> DocumentRecord | None:
        """Return the document stored at *relative_path*, if listed."""
        for record in self.load():
            if record.relative_path == relative_path:
                return record
        return None

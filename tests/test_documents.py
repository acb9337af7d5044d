"""Tests for docshelf.documents — discovery, frontmatter parsing, titles."""

from datetime import datetime
from pathlib import Path

import pytest

from docshelf.documents import (
    DocumentLoader,
    DocumentRecord,
    _parse_frontmatter,
    format_title,
)


# ── fixture ──────────────────────────────────────────────────────────────────


@pytest.fixture()
def docs(tmp_path: Path) -> Path:
    """Scaffold a mini docs tree under tmp_path."""

    (tmp_path / "guide" / "advanced").mkdir(parents=True)
    (tmp_path / "api").mkdir()

    (tmp_path / "guide" / "getting-started.md").write_text(
        '---\ntitle: "Start Here"\ntags: ["intro"]\n---\n# Start\n\nBody.\n'
    )
    (tmp_path / "guide" / "advanced" / "query_tuning.md").write_text("# Tuning\n")
    (tmp_path / "api" / "reference.md").write_text(
        "---\ntitle: [unclosed\n---\n# Reference\n"
    )
    (tmp_path / "readme.md").write_text("Plain readme.\n")

    # Should be skipped
    (tmp_path / "notes.txt").write_text("not markdown\n")
    (tmp_path / ".hidden.md").write_text("hidden\n")
    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "HEAD.md").write_text("ref\n")
    (tmp_path / "node_modules" / "pkg").mkdir(parents=True)
    (tmp_path / "node_modules" / "pkg" / "README.md").write_text("# Pkg\n")
    (tmp_path / "guide" / "broken.md").write_bytes(b"\xff\xfe\x00bad")

    return tmp_path


# ════════════════════════════════════════════════════════════════════════════════
# _parse_frontmatter (unit)
# ════════════════════════════════════════════════════════════════════════════════


class TestParseFrontmatter:
    def test_valid_frontmatter(self):
        content = '---\ntitle: "Hello"\ntags: [a, b]\n---\n# Body\n'
        fm, body = _parse_frontmatter(content)
        assert fm == {"title": "Hello", "tags": ["a", "b"]}
        assert body == "# Body\n"

    def test_no_frontmatter(self):
        content = "# Just a doc\n\nNo delimiters.\n"
        fm, body = _parse_frontmatter(content)
        assert fm == {}
        assert body == content

    def test_no_closing_delimiter(self):
        content = "---\ntitle: Orphan\n# No close\n"
        fm, body = _parse_frontmatter(content)
        assert fm == {}
        assert body == content

    def test_closing_delimiter_at_eof(self):
        fm, body = _parse_frontmatter("---\ntitle: Only\n---")
        assert fm == {"title": "Only"}
        assert body == ""

    def test_malformed_yaml(self):
        content = "---\ntitle: [broken\n---\n# Body\n"
        fm, body = _parse_frontmatter(content)
        assert fm == {}
        assert body == content

    def test_empty_frontmatter_block(self):
        fm, body = _parse_frontmatter("---\n---\n# Body\n")
        assert fm == {}
        assert body == "# Body\n"

    def test_scalar_frontmatter(self):
        content = "---\njust a string\n---\n# Body\n"
        fm, body = _parse_frontmatter(content)
        assert fm == {}
        assert body == content


class TestFormatTitle:
    @pytest.mark.parametrize(
        ("stem", "title"),
        [
            ("getting-started", "Getting Started"),
            ("query_tuning", "Query Tuning"),
            ("readme", "Readme"),
            ("API-v2", "API V2"),
        ],
    )
    def test_format_title(self, stem, title):
        assert format_title(stem) == title


# ════════════════════════════════════════════════════════════════════════════════
# DocumentLoader (integration — real files)
# ════════════════════════════════════════════════════════════════════════════════


class TestLoader:
    def test_lists_markdown_only_sorted(self, docs):
        records = DocumentLoader(docs).load()
        assert [r.relative_path for r in records] == [
            "api/reference.md",
            "guide/advanced/query_tuning.md",
            "guide/getting-started.md",
            "readme.md",
        ]

    def test_skips_hidden_and_ignored(self, docs):
        paths = {r.relative_path for r in DocumentLoader(docs).load()}
        assert ".hidden.md" not in paths
        assert ".git/HEAD.md" not in paths
        assert "node_modules/pkg/README.md" not in paths

    def test_skips_undecodable_file(self, docs, caplog):
        paths = {r.relative_path for r in DocumentLoader(docs).load()}
        assert "guide/broken.md" not in paths
        assert "broken.md" in caplog.text

    def test_record_fields(self, docs):
        record = DocumentLoader(docs).get("guide/getting-started.md")
        assert isinstance(record, DocumentRecord)
        assert record.path == docs / "guide" / "getting-started.md"
        assert record.name == "getting-started"
        assert record.title == "Start Here"
        assert record.frontmatter["tags"] == ["intro"]
        assert record.content.startswith("# Start")
        assert record.size == (docs / "guide" / "getting-started.md").stat().st_size
        assert isinstance(record.modified_at, datetime)

    def test_title_falls_back_to_filename(self, docs):
        record = DocumentLoader(docs).get("guide/advanced/query_tuning.md")
        assert record.title == "Query Tuning"
        assert record.frontmatter == {}

    def test_malformed_frontmatter_no_crash(self, docs):
        record = DocumentLoader(docs).get("api/reference.md")
        assert record.frontmatter == {}
        assert "unclosed" in record.content
        assert record.title == "Reference"

    def test_blank_title_ignored(self, tmp_path):
        (tmp_path / "blank.md").write_text("---\ntitle: '   '\n---\nBody\n")
        record = DocumentLoader(tmp_path).get("blank.md")
        assert record.title == "Blank"

    def test_get_unknown(self, docs):
        assert DocumentLoader(docs).get("missing.md") is None

    def test_missing_root(self, tmp_path):
        assert DocumentLoader(tmp_path / "nope").load() == []

    def test_to_dict_without_content(self, docs):
        data = DocumentLoader(docs).get("readme.md").to_dict(include_content=False)
        assert data["relativePath"] == "readme.md"
        assert data["title"] == "Readme"
        assert "content" not in data

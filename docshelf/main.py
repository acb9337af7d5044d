"""DocShelf — FastAPI backend."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from docshelf import config
from docshelf.documents import DocumentLoader, DocumentRecord
from docshelf.errors import InvalidPath, TreeError
from docshelf.formatting import format_date, format_file_size

logger = logging.getLogger(__name__)


# ── Lifespan (startup / shutdown) ────────────────────────────────────────────


@asynccontextmanager
async def lifespan(_app: FastAPI):
    # Startup ── resolve DOCS_DIR once; the loader gets it explicitly
    config.load()
    yield


# ── App ──────────────────────────────────────────────────────────────────────

app = FastAPI(title="DocShelf", lifespan=lifespan)


@app.exception_handler(TreeError)
async def tree_error_handler(_request: Request, exc: TreeError) -> JSONResponse:
    logger.error("Document tree could not be built: %s", exc)
    return JSONResponse({"detail": str(exc)}, status_code=500)


def _loader() -> DocumentLoader:
    return DocumentLoader(config.get().docs_dir)


def _summary(record: DocumentRecord) -> dict:
    data = record.to_dict(include_content=False)
    data["sizeLabel"] = format_file_size(record.size)
    data["modifiedLabel"] = format_date(record.modified_at)
    return data


# ── API routes ───────────────────────────────────────────────────────────────


@app.get("/api/healthz")
async def healthz() -> dict:
    """Liveness / health check."""
    return {"status": "ok"}


# ── Documents API ────────────────────────────────────────────────────────────


@app.get("/api/docs")
async def api_list_docs() -> list[dict]:
    """Flat listing of every document, sorted by relative path."""
    return [_summary(record) for record in _loader().load()]


@app.get("/api/docs/tree")
async def api_tree() -> list[dict]:
    """Return the document forest, directories first."""
    from docshelf.tree import build_tree

    forest = build_tree(_loader().load())
    return [node.to_dict() for node in forest]


# ── Document read (catch-all - must be after specific routes) ────────────────


@app.get("/api/docs/{path:path}")
async def api_read_doc(path: str) -> dict:
    """Read a single document — frontmatter, body and display labels."""
    from docshelf.pathguard import split_relative_path

    try:
        split_relative_path(path)
    except InvalidPath as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    record = _loader().get(path)
    if record is None:
        raise HTTPException(status_code=404, detail=f"Document not found: {path}")

    data = _summary(record)
    data["content"] = record.content
    return data

"""Centralised runtime configuration.

Usage
-----
    from docshelf import config

    # once, at startup:
    settings = config.load()   # resolves DOCS_DIR, prints diagnostics

    # anywhere else in the app:
    settings = config.get()    # returns cached Settings; raises if not loaded

The loader never reads the environment itself; it receives
``settings.docs_dir`` explicitly, so it can be pointed at any directory in
tests.
"""

import os
from dataclasses import dataclass
from pathlib import Path

# honour a .env file in the project root (local-dev convenience)
from dotenv import load_dotenv

load_dotenv()  # no-op when .env doesn't exist


# ── public data class ────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Settings:
    """Immutable, app-wide settings."""

    docs_dir: Path  # documents root (read-only)


# ── directory resolution ─────────────────────────────────────────────────────

DEFAULT_DOCS_SUBDIR = "docs"


def resolve_docs_dir(env_value: str | None, cwd: Path) -> Path:
    """Pick the documents root.

    Order: ``env_value`` if it names a directory, then ``<cwd>/docs``, then
    ``cwd`` itself.  A ``DOCS_DIR`` that isn't a directory prints a warning
    and falls through.
    """
    raw = (env_value or "").strip()
    if raw:
        candidate = Path(raw).expanduser()
        if candidate.is_dir():
            return candidate.resolve()
        print(f"  ⚠  DOCS_DIR={raw} is not a directory — falling back")

    default_dir = cwd / DEFAULT_DOCS_SUBDIR
    if default_dir.is_dir():
        return default_dir.resolve()

    return cwd.resolve()


# ── module-level singleton ───────────────────────────────────────────────────

_settings: Settings | None = None


def load() -> Settings:
    """Read env vars, resolve, cache, and return Settings.

    Idempotent: returns the cached singleton on subsequent calls.
    """
    global _settings
    if _settings is not None:
        return _settings

    docs_dir = resolve_docs_dir(os.environ.get("DOCS_DIR"), Path.cwd())
    _settings = Settings(docs_dir=docs_dir)

    print("✅  DocShelf — config loaded")
    print(f"     DOCS_DIR = {_settings.docs_dir}")
    return _settings


def get() -> Settings:
    """Return the already-loaded Settings.  Raises if load() hasn't run."""
    if _settings is None:
        raise RuntimeError("Config not initialised — call config.load() at startup.")
    return _settings

"""Schema loader: resolve SDL files from a path or glob and build a GraphQLSchema."""

from __future__ import annotations

import glob
import logging
from pathlib import Path

from graphql import GraphQLError, GraphQLSchema, build_schema

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

SDL_EXTENSIONS: frozenset[str] = frozenset({".graphql", ".graphqls", ".gql", ".gqls"})
_GLOB_CHARS = ("*", "?", "[")

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class SchemaLoadError(Exception):
    """Raised when the schema files cannot be found, read, or parsed."""


# ---------------------------------------------------------------------------
# File resolution
# ---------------------------------------------------------------------------


def resolve_schema_files(pointer: str) -> list[Path]:
    """Expand *pointer* into the list of SDL files it designates.

    *pointer* may be a single file, a directory (searched recursively for
    ``.graphql``, ``.graphqls``, ``.gql`` and ``.gqls`` files) or a glob
    pattern. Glob matches with other suffixes are skipped.
    Results are sorted so that concatenation order is stable.
    """
    if any(ch in pointer for ch in _GLOB_CHARS):
        matches = [Path(p) for p in glob.glob(pointer, recursive=True)]
        return sorted(p for p in matches if p.is_file() and p.suffix in SDL_EXTENSIONS)

    path = Path(pointer)
    if path.is_dir():
        return sorted(p for p in path.rglob("*") if p.is_file() and p.suffix in SDL_EXTENSIONS)
    if path.is_file():
        return [path]
    return []


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------


def load_schema(pointer: str) -> GraphQLSchema:
    """Load and build the schema designated by *pointer*.

    All matched files are joined into a single SDL document before building,
    so type extensions may live in a different file than their base type.

    Raises
    ------
    SchemaLoadError
        When no file matches, a file cannot be read, or the SDL is invalid.
    """
    files = resolve_schema_files(pointer)
    if not files:
        msg = f"No schema files found for '{pointer}'"
        raise SchemaLoadError(msg)

    logger.debug("Resolved %d schema file(s) for %s", len(files), pointer)

    sources: list[str] = []
    for file_path in files:
        try:
            sources.append(file_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as exc:
            msg = f"Cannot read schema file {file_path}: {exc}"
            raise SchemaLoadError(msg) from exc

    try:
        # build_schema reports SDL validation failures as TypeError.
        return build_schema("\n".join(sources))
    except (GraphQLError, TypeError) as exc:
        msg = f"Invalid schema '{pointer}': {exc}"
        raise SchemaLoadError(msg) from exc

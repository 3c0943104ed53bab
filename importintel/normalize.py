"""Canonicalize and classify the sources of raw import entries."""

from __future__ import annotations

import logging
import os
from dataclasses import replace
from pathlib import Path, PurePath
from typing import Iterable

import anyio

from ._logging import LogSink, get_logger
from .errors import ResolutionFailure
from .models import VARIABLE, Classification, FindImportsEntry


FALLBACK_EXTENSIONS = (".js", ".mjs", ".cjs", ".jsx", ".ts", ".tsx", ".json")


def is_relative_source_path(source: str) -> bool:
    return source in (".", "..") or source.startswith(("./", "../"))


def to_relative_source_path(path: str | os.PathLike, project_root: str | os.PathLike) -> str:
    """Express ``path`` relative to ``project_root`` as ``./a/b.js``."""
    relative = PurePath(os.path.relpath(path, project_root)).as_posix()
    if relative == "..":
        return relative
    if relative.startswith("../"):
        return relative
    if relative == ".":
        return "./"
    return f"./{relative}"


async def _probe(target: Path) -> Path | None:
    if await anyio.Path(target).is_file():
        return target

    for extension in FALLBACK_EXTENSIONS:
        candidate = Path(f"{target}{extension}")
        if await anyio.Path(candidate).is_file():
            return candidate

    if await anyio.Path(target).is_dir():
        for extension in FALLBACK_EXTENSIONS:
            candidate = target / f"index{extension}"
            if await anyio.Path(candidate).is_file():
                return candidate

    return None


async def resolve_relative_source(
    specifier: str,
    relative_path: str | os.PathLike,
    project_root: str | os.PathLike,
) -> str:
    """Resolve a relative ``specifier`` written in ``relative_path``.

    Existing files win over guessed extensions. Raises
    :class:`ResolutionFailure` when nothing on disk matches.
    """
    root = Path(os.path.abspath(project_root))
    importer_dir = (root / relative_path).parent
    target = Path(os.path.normpath(importer_dir / specifier))

    resolved = await _probe(target)
    if resolved is None:
        raise ResolutionFailure(
            specifier,
            str(relative_path),
            to_relative_source_path(target, root),
        )
    return to_relative_source_path(resolved, root)


async def normalize_entry(
    entry: FindImportsEntry,
    relative_path: str | os.PathLike,
    project_root: str | os.PathLike | None,
    logger: LogSink | None = None,
) -> FindImportsEntry:
    # Classified entries are already canonical.
    if entry.classification is not None or entry.source == VARIABLE:
        return entry

    if not is_relative_source_path(entry.source):
        return replace(entry, classification=Classification.EXTERNAL)

    if project_root is None:
        return replace(entry, classification=Classification.INTERNAL)

    try:
        source = await resolve_relative_source(entry.source, relative_path, project_root)
    except ResolutionFailure as exc:
        (logger or get_logger()).log(logging.WARNING, str(exc))
        source = exc.best_effort

    return replace(entry, source=source, classification=Classification.INTERNAL)


async def normalize_source_paths(
    entries: Iterable[FindImportsEntry],
    relative_path: str | os.PathLike,
    target_project_path: str | os.PathLike | None,
    logger: LogSink | None = None,
) -> list[FindImportsEntry]:
    normalized: list[FindImportsEntry] = []
    for entry in entries:
        normalized.append(
            await normalize_entry(entry, relative_path, target_project_path, logger=logger)
        )
    return normalized


def filter_internal_sources(entries: Iterable[FindImportsEntry]) -> list[FindImportsEntry]:
    return [entry for entry in entries if entry.classification is not Classification.INTERNAL]

"""Walk a dialect AST and collect raw import entries in document order."""

from __future__ import annotations

import logging
from typing import Any, Callable

from ._logging import LogSink, get_logger
from .dialects import Construct, DialectAdapter
from .dynamic import detect
from .errors import MalformedDeclaration
from .models import NAMESPACE, FindImportsEntry
from .specifiers import extract_specifiers


Visitor = Callable[[Any, DialectAdapter], "FindImportsEntry | None"]


def traverse(
    ast: Any,
    adapter: DialectAdapter,
    logger: LogSink | None = None,
    relative_path: str | None = None,
) -> list[FindImportsEntry]:
    sink = logger or get_logger()
    target = f" of {relative_path}" if relative_path else ""
    sink.log(logging.DEBUG, f"Started traversal{target} ({adapter.name})")
    entries: list[FindImportsEntry] = []

    stack = [adapter.root(ast)]
    while stack:
        node = stack.pop()

        construct = adapter.construct_of(node)
        if construct is not None:
            try:
                entry = VISITORS[construct](node, adapter)
            except MalformedDeclaration as exc:
                sink.log(logging.WARNING, f"Skipping declaration: {exc}")
                entry = None
            if entry is not None:
                entries.append(entry)

        # Reversed so the leftmost child is popped first.
        stack.extend(reversed(adapter.children(node)))

    return entries


def _required_source(node: Any, adapter: DialectAdapter) -> str:
    source = adapter.source_literal(node)
    if not source:
        raise MalformedDeclaration(adapter.node_type(node), "missing string source")
    return source


def _entry(
    node: Any,
    adapter: DialectAdapter,
    import_specifiers: tuple[str, ...],
) -> FindImportsEntry:
    return FindImportsEntry(
        import_specifiers=import_specifiers,
        source=_required_source(node, adapter),
        assertion_type=adapter.assertion_type(node),
    )


def visit_import_declaration(node: Any, adapter: DialectAdapter) -> FindImportsEntry:
    return _entry(node, adapter, extract_specifiers(node, adapter))


def visit_export_named_declaration(node: Any, adapter: DialectAdapter) -> FindImportsEntry | None:
    # A local export (`export const x = 1`, `export { x }`) references no other file.
    if not adapter.has_source(node):
        return None
    return _entry(node, adapter, extract_specifiers(node, adapter))


def visit_export_all_declaration(node: Any, adapter: DialectAdapter) -> FindImportsEntry | None:
    if not adapter.has_source(node):
        return None
    return _entry(node, adapter, (NAMESPACE,))


VISITORS: dict[Construct, Visitor] = {
    Construct.IMPORT_DECLARATION: visit_import_declaration,
    Construct.EXPORT_NAMED_DECLARATION: visit_export_named_declaration,
    Construct.EXPORT_ALL_DECLARATION: visit_export_all_declaration,
    Construct.DYNAMIC_IMPORT_CALL: detect,
    Construct.DYNAMIC_IMPORT_EXPRESSION: detect,
}

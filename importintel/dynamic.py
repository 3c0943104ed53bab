"""Detection of dynamic ``import()`` forms."""

from __future__ import annotations

from typing import Any

from .dialects import DialectAdapter
from .errors import MalformedDeclaration
from .models import DEFAULT, VARIABLE, FindImportsEntry


def detect(node: Any, adapter: DialectAdapter) -> FindImportsEntry | None:
    """Return an entry for a dynamic import, or ``None`` for any other node.

    Named bindings picked out of the awaited module are not tracked, so the
    entry always default-binds the module. A computed argument produces the
    ``[variable]`` source.
    """
    if not adapter.is_dynamic_import(node):
        return None

    argument = adapter.dynamic_import_argument(node)
    if argument is None:
        raise MalformedDeclaration(adapter.node_type(node), "dynamic import without an argument")

    source = adapter.string_literal(argument)
    if source == "":
        raise MalformedDeclaration(adapter.node_type(node), "dynamic import of an empty string")

    return FindImportsEntry(
        import_specifiers=(DEFAULT,),
        source=source if source is not None else VARIABLE,
    )

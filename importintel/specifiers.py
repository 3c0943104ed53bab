"""Turn the specifier list of one declaration into specifier tags."""

from __future__ import annotations

from typing import Any

from .dialects import DialectAdapter, SpecifierKind
from .errors import MalformedDeclaration
from .models import DEFAULT, FILE, NAMESPACE


def extract_specifiers(node: Any, adapter: DialectAdapter) -> tuple[str, ...]:
    """Return the tags of ``node``'s specifiers in source order.

    A declaration without specifiers (``import './x.js'``) references the
    whole file and yields ``("[file]",)``.
    """
    specifiers = adapter.specifiers(node)
    if not specifiers:
        return (FILE,)
    return tuple(specifier_tag(spec, adapter) for spec in specifiers)


def specifier_tag(spec: Any, adapter: DialectAdapter) -> str:
    kind = adapter.specifier_kind(spec)
    if kind is SpecifierKind.DEFAULT or adapter.exported_name(spec) == "default":
        return DEFAULT
    if kind is SpecifierKind.NAMESPACE:
        return NAMESPACE

    # Imported names win over local bindings; re-exports fall back to the exported name.
    for accessor in (
        adapter.imported_name,
        adapter.original_name,
        adapter.local_name,
        adapter.exported_name,
    ):
        value = accessor(spec)
        if value is not None:
            return value

    raise MalformedDeclaration(adapter.node_type(spec), "specifier has no resolvable name")

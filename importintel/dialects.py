"""Dialect adapters that hide parser-specific AST shapes.

Each supported parser backend gets one adapter class. An adapter maps the
backend's node type names onto a small set of logical constructs and exposes
named accessors, each reading a single field path of that backend's nodes.
Accessors return ``None`` when a field is absent so callers can decide on
their own fallback order.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, ClassVar

from tree_sitter import Node, Tree

from .errors import UnsupportedDialect


class Construct(Enum):
    IMPORT_DECLARATION = "ImportDeclaration"
    EXPORT_NAMED_DECLARATION = "ExportNamedDeclaration"
    EXPORT_ALL_DECLARATION = "ExportAllDeclaration"
    DYNAMIC_IMPORT_CALL = "DynamicImportCall"
    DYNAMIC_IMPORT_EXPRESSION = "DynamicImportExpression"


class SpecifierKind(Enum):
    DEFAULT = "default"
    NAMESPACE = "namespace"
    NAMED = "named"


class DialectAdapter(ABC):
    """Uniform view over the nodes of one AST dialect."""

    name: ClassVar[str]
    node_types: ClassVar[dict[str, Construct]] = {}

    @abstractmethod
    def node_type(self, node: Any) -> str | None: ...

    def construct_of(self, node: Any) -> Construct | None:
        node_type = self.node_type(node)
        if node_type is None:
            return None
        return self.node_types.get(node_type)

    @abstractmethod
    def root(self, ast: Any) -> Any: ...

    @abstractmethod
    def children(self, node: Any) -> list[Any]: ...

    @abstractmethod
    def specifiers(self, node: Any) -> list[Any]: ...

    @abstractmethod
    def specifier_kind(self, spec: Any) -> SpecifierKind: ...

    def imported_name(self, spec: Any) -> str | None:
        return None

    def original_name(self, spec: Any) -> str | None:
        return None

    def local_name(self, spec: Any) -> str | None:
        return None

    def exported_name(self, spec: Any) -> str | None:
        return None

    @abstractmethod
    def has_source(self, node: Any) -> bool: ...

    @abstractmethod
    def source_literal(self, node: Any) -> str | None: ...

    @abstractmethod
    def string_literal(self, node: Any) -> str | None: ...

    def assertion_type(self, node: Any) -> str | None:
        return None

    @abstractmethod
    def is_dynamic_import(self, node: Any) -> bool: ...

    @abstractmethod
    def dynamic_import_argument(self, node: Any) -> Any | None: ...


# Keys that never hold module references; skipping them keeps the walk small.
_NON_CHILD_KEYS = frozenset(
    {
        "loc",
        "span",
        "range",
        "extra",
        "comments",
        "leadingComments",
        "trailingComments",
        "innerComments",
        "tokens",
        "errors",
    }
)


class JsonAdapter(DialectAdapter):
    """Shared behaviour for parsers that emit JSON (dict/list) trees."""

    root_types: ClassVar[frozenset[str]] = frozenset()
    default_specifier_types: ClassVar[frozenset[str]] = frozenset(
        {"ImportDefaultSpecifier", "ExportDefaultSpecifier"}
    )
    namespace_specifier_types: ClassVar[frozenset[str]] = frozenset(
        {"ImportNamespaceSpecifier", "ExportNamespaceSpecifier"}
    )

    def node_type(self, node: Any) -> str | None:
        if not isinstance(node, dict):
            return None
        node_type = node.get("type")
        return node_type if isinstance(node_type, str) else None

    def root(self, ast: Any) -> Any:
        if not isinstance(ast, dict):
            raise UnsupportedDialect(self.name, f"expected a JSON object, got {type(ast).__name__}")
        if self.node_type(ast) not in self.root_types:
            raise UnsupportedDialect(self.name, f"unexpected root node {ast.get('type')!r}")
        return ast

    def offset(self, node: dict) -> int | None:
        start = node.get("start")
        return start if isinstance(start, int) else None

    def children(self, node: Any) -> list[Any]:
        if isinstance(node, list):
            return [item for item in node if isinstance(item, (dict, list))]
        if not isinstance(node, dict):
            return []

        children: list[Any] = []
        for key, value in node.items():
            if key in _NON_CHILD_KEYS:
                continue
            if isinstance(value, dict):
                children.append(value)
            elif isinstance(value, list):
                children.extend(item for item in value if isinstance(item, dict))

        offsets = [self.offset(child) for child in children]
        if children and all(offset is not None for offset in offsets):
            ordered = sorted(zip(offsets, range(len(children))))
            return [children[index] for _, index in ordered]
        return children

    def specifiers(self, node: Any) -> list[Any]:
        specifiers = node.get("specifiers") if isinstance(node, dict) else None
        if not isinstance(specifiers, list):
            return []
        return [spec for spec in specifiers if isinstance(spec, dict)]

    def specifier_kind(self, spec: Any) -> SpecifierKind:
        spec_type = self.node_type(spec)
        if spec_type in self.default_specifier_types:
            return SpecifierKind.DEFAULT
        if spec_type in self.namespace_specifier_types:
            return SpecifierKind.NAMESPACE
        return SpecifierKind.NAMED

    @abstractmethod
    def module_export_name(self, node: Any) -> str | None: ...

    def has_source(self, node: Any) -> bool:
        return isinstance(node, dict) and node.get("source") is not None

    def source_literal(self, node: Any) -> str | None:
        if not isinstance(node, dict):
            return None
        return self.string_literal(node.get("source"))

    def _field(self, node: Any, key: str) -> Any:
        return node.get(key) if isinstance(node, dict) else None


class BabelAdapter(JsonAdapter):
    """`@babel/parser` output, with or without ``createImportExpressions``."""

    name = "babel"
    root_types = frozenset({"File", "Program"})
    node_types = {
        "ImportDeclaration": Construct.IMPORT_DECLARATION,
        "ExportNamedDeclaration": Construct.EXPORT_NAMED_DECLARATION,
        "ExportAllDeclaration": Construct.EXPORT_ALL_DECLARATION,
        "CallExpression": Construct.DYNAMIC_IMPORT_CALL,
        "ImportExpression": Construct.DYNAMIC_IMPORT_EXPRESSION,
    }

    def root(self, ast: Any) -> Any:
        ast = super().root(ast)
        if ast.get("type") == "File":
            program = ast.get("program")
            if self.node_type(program) != "Program":
                raise UnsupportedDialect(self.name, "File node without a Program")
            return program
        return ast

    def module_export_name(self, node: Any) -> str | None:
        node_type = self.node_type(node)
        if node_type == "Identifier":
            return node.get("name")
        if node_type == "StringLiteral":
            return node.get("value")
        return None

    def imported_name(self, spec: Any) -> str | None:
        return self.module_export_name(self._field(spec, "imported"))

    def local_name(self, spec: Any) -> str | None:
        return self.module_export_name(self._field(spec, "local"))

    def exported_name(self, spec: Any) -> str | None:
        return self.module_export_name(self._field(spec, "exported"))

    def string_literal(self, node: Any) -> str | None:
        if self.node_type(node) != "StringLiteral":
            return None
        value = node.get("value")
        return value if isinstance(value, str) else None

    def assertion_type(self, node: Any) -> str | None:
        attributes = self._field(node, "attributes") or self._field(node, "assertions") or []
        for attribute in attributes:
            if self.module_export_name(self._field(attribute, "key")) == "type":
                return self.string_literal(self._field(attribute, "value"))
        return None

    def is_dynamic_import(self, node: Any) -> bool:
        node_type = self.node_type(node)
        if node_type == "ImportExpression":
            return True
        return node_type == "CallExpression" and self.node_type(node.get("callee")) == "Import"

    def dynamic_import_argument(self, node: Any) -> Any | None:
        if self.node_type(node) == "ImportExpression":
            return node.get("source")
        arguments = node.get("arguments") or []
        return arguments[0] if arguments else None


class OxcAdapter(JsonAdapter):
    """ESTree-compatible output of `oxc-parser`."""

    name = "oxc"
    root_types = frozenset({"Program"})
    node_types = {
        "ImportDeclaration": Construct.IMPORT_DECLARATION,
        "ExportNamedDeclaration": Construct.EXPORT_NAMED_DECLARATION,
        "ExportAllDeclaration": Construct.EXPORT_ALL_DECLARATION,
        "ImportExpression": Construct.DYNAMIC_IMPORT_EXPRESSION,
    }
    identifier_types: ClassVar[frozenset[str]] = frozenset(
        {"Identifier", "IdentifierName", "IdentifierReference", "BindingIdentifier"}
    )

    def root(self, ast: Any) -> Any:
        # parseSync() wraps the program together with module records and errors.
        if isinstance(ast, dict) and "type" not in ast and "program" in ast:
            ast = ast["program"]
        return super().root(ast)

    def module_export_name(self, node: Any) -> str | None:
        node_type = self.node_type(node)
        if node_type in self.identifier_types:
            return node.get("name")
        if node_type in ("Literal", "StringLiteral"):
            return self.string_literal(node)
        return None

    def imported_name(self, spec: Any) -> str | None:
        return self.module_export_name(self._field(spec, "imported"))

    def local_name(self, spec: Any) -> str | None:
        return self.module_export_name(self._field(spec, "local"))

    def exported_name(self, spec: Any) -> str | None:
        return self.module_export_name(self._field(spec, "exported"))

    def string_literal(self, node: Any) -> str | None:
        if self.node_type(node) not in ("Literal", "StringLiteral"):
            return None
        value = node.get("value")
        return value if isinstance(value, str) else None

    def assertion_type(self, node: Any) -> str | None:
        attributes = self._field(node, "attributes")
        if attributes is None:
            attributes = self._field(self._field(node, "withClause"), "withEntries")
        for attribute in attributes or []:
            if self.module_export_name(self._field(attribute, "key")) == "type":
                return self.string_literal(self._field(attribute, "value"))
        return None

    def is_dynamic_import(self, node: Any) -> bool:
        return self.node_type(node) == "ImportExpression"

    def dynamic_import_argument(self, node: Any) -> Any | None:
        return node.get("source")


class SwcAdapter(JsonAdapter):
    """`@swc/core` output; dynamic imports are calls with an ``Import`` callee."""

    name = "swc"
    root_types = frozenset({"Module", "Script"})
    node_types = {
        "ImportDeclaration": Construct.IMPORT_DECLARATION,
        "ExportNamedDeclaration": Construct.EXPORT_NAMED_DECLARATION,
        "ExportAllDeclaration": Construct.EXPORT_ALL_DECLARATION,
        "CallExpression": Construct.DYNAMIC_IMPORT_CALL,
    }

    def offset(self, node: dict) -> int | None:
        span = node.get("span")
        start = span.get("start") if isinstance(span, dict) else None
        return start if isinstance(start, int) else None

    def module_export_name(self, node: Any) -> str | None:
        if self.node_type(node) in ("Identifier", "StringLiteral"):
            value = node.get("value")
            return value if isinstance(value, str) else None
        return None

    def imported_name(self, spec: Any) -> str | None:
        return self.module_export_name(self._field(spec, "imported"))

    def original_name(self, spec: Any) -> str | None:
        return self.module_export_name(self._field(spec, "orig"))

    def local_name(self, spec: Any) -> str | None:
        return self.module_export_name(self._field(spec, "local"))

    def exported_name(self, spec: Any) -> str | None:
        # An unaliased re-export leaves `exported` null; the name is then `orig`.
        exported = self._field(spec, "exported")
        if exported is None:
            exported = self._field(spec, "orig")
        return self.module_export_name(exported)

    def string_literal(self, node: Any) -> str | None:
        if self.node_type(node) != "StringLiteral":
            return None
        value = node.get("value")
        return value if isinstance(value, str) else None

    def assertion_type(self, node: Any) -> str | None:
        clause = self._field(node, "asserts") or self._field(node, "with")
        for prop in self._field(clause, "properties") or []:
            if self.module_export_name(self._field(prop, "key")) == "type":
                return self.string_literal(self._field(prop, "value"))
        return None

    def is_dynamic_import(self, node: Any) -> bool:
        return self.node_type(node) == "CallExpression" and self.node_type(node.get("callee")) == "Import"

    def dynamic_import_argument(self, node: Any) -> Any | None:
        arguments = node.get("arguments") or []
        if not arguments:
            return None
        # Arguments are ExprOrSpread wrappers: {"spread": ..., "expression": ...}
        return self._field(arguments[0], "expression")


_SINGLE_CHAR_ESCAPES = {
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "0": "\0",
}


def decode_escape(escape: str) -> str:
    """Decode one JavaScript string escape such as ``\\n``, ``\\x41`` or ``\\u{1F600}``."""
    body = escape[1:]
    if not body:
        return escape
    if body.startswith("u{") and body.endswith("}"):
        return chr(int(body[2:-1], 16))
    if body[0] in "ux" and len(body) > 1:
        return chr(int(body[1:], 16))
    if body[0] in _SINGLE_CHAR_ESCAPES and len(body) == 1:
        return _SINGLE_CHAR_ESCAPES[body[0]]
    # Line continuations contribute nothing to the value.
    if body in ("\n", "\r\n", "\r", "\u2028", "\u2029"):
        return ""
    return body


class TreeSitterAdapter(DialectAdapter):
    """Trees from py-tree-sitter with the tree-sitter-javascript grammar."""

    name = "tree-sitter"
    node_types = {
        "import_statement": Construct.IMPORT_DECLARATION,
        "export_statement": Construct.EXPORT_NAMED_DECLARATION,
        "call_expression": Construct.DYNAMIC_IMPORT_CALL,
    }

    def node_type(self, node: Any) -> str | None:
        return node.type if isinstance(node, Node) else None

    def construct_of(self, node: Any) -> Construct | None:
        construct = super().construct_of(node)
        if construct is Construct.EXPORT_NAMED_DECLARATION and any(
            child.type in ("*", "namespace_export") for child in node.children
        ):
            return Construct.EXPORT_ALL_DECLARATION
        return construct

    def root(self, ast: Any) -> Any:
        if isinstance(ast, Tree):
            ast = ast.root_node
        if not isinstance(ast, Node):
            raise UnsupportedDialect(self.name, f"expected a tree-sitter Tree, got {type(ast).__name__}")
        if ast.type != "program":
            raise UnsupportedDialect(self.name, f"unexpected root node {ast.type!r}")
        return ast

    def children(self, node: Any) -> list[Any]:
        return list(node.children)

    def specifiers(self, node: Any) -> list[Any]:
        specifiers: list[Node] = []
        for child in node.named_children:
            if child.type == "import_clause":
                for part in child.named_children:
                    if part.type in ("identifier", "namespace_import"):
                        specifiers.append(part)
                    elif part.type == "named_imports":
                        specifiers.extend(
                            spec for spec in part.named_children if spec.type == "import_specifier"
                        )
            elif child.type == "export_clause":
                specifiers.extend(
                    spec for spec in child.named_children if spec.type == "export_specifier"
                )
            elif child.type == "namespace_export":
                specifiers.append(child)
        return specifiers

    def specifier_kind(self, spec: Any) -> SpecifierKind:
        if spec.type == "identifier":
            return SpecifierKind.DEFAULT
        if spec.type in ("namespace_import", "namespace_export"):
            return SpecifierKind.NAMESPACE
        return SpecifierKind.NAMED

    def _text(self, node: Node | None) -> str | None:
        if node is None or node.text is None:
            return None
        return node.text.decode("utf-8")

    def module_export_name(self, node: Node | None) -> str | None:
        if node is None:
            return None
        if node.type == "string":
            return self.string_literal(node)
        return self._text(node)

    def imported_name(self, spec: Any) -> str | None:
        if spec.type != "import_specifier":
            return None
        return self.module_export_name(spec.child_by_field_name("name"))

    def original_name(self, spec: Any) -> str | None:
        if spec.type != "export_specifier":
            return None
        return self.module_export_name(spec.child_by_field_name("name"))

    def local_name(self, spec: Any) -> str | None:
        if spec.type != "import_specifier":
            return None
        return self.module_export_name(spec.child_by_field_name("alias"))

    def exported_name(self, spec: Any) -> str | None:
        if spec.type != "export_specifier":
            return None
        alias = spec.child_by_field_name("alias")
        return self.module_export_name(alias or spec.child_by_field_name("name"))

    def has_source(self, node: Any) -> bool:
        return node.child_by_field_name("source") is not None

    def source_literal(self, node: Any) -> str | None:
        return self.string_literal(node.child_by_field_name("source"))

    def string_literal(self, node: Any) -> str | None:
        if node is None or node.type != "string":
            return None
        parts: list[str] = []
        for child in node.children:
            if child.type == "string_fragment":
                parts.append(self._text(child) or "")
            elif child.type == "escape_sequence":
                parts.append(decode_escape(self._text(child) or ""))
        return "".join(parts)

    def assertion_type(self, node: Any) -> str | None:
        for child in node.named_children:
            if child.type != "import_attribute":
                continue
            for obj in child.named_children:
                for pair in obj.named_children:
                    if pair.type != "pair":
                        continue
                    if self.module_export_name(pair.child_by_field_name("key")) == "type":
                        return self.string_literal(pair.child_by_field_name("value"))
        return None

    def is_dynamic_import(self, node: Any) -> bool:
        if node.type != "call_expression":
            return False
        function = node.child_by_field_name("function")
        return function is not None and function.type == "import"

    def dynamic_import_argument(self, node: Any) -> Any | None:
        arguments = node.child_by_field_name("arguments")
        if arguments is None:
            return None
        for argument in arguments.named_children:
            if argument.type != "comment":
                return argument
        return None


ADAPTERS: dict[str, DialectAdapter] = {
    adapter.name: adapter
    for adapter in (BabelAdapter(), SwcAdapter(), OxcAdapter(), TreeSitterAdapter())
}

SUPPORTED_DIALECTS = tuple(ADAPTERS)


def resolve_adapter(dialect: str) -> DialectAdapter:
    """Return the adapter for ``dialect`` or raise :class:`UnsupportedDialect`."""
    adapter = ADAPTERS.get(dialect) if isinstance(dialect, str) else None
    if adapter is None:
        raise UnsupportedDialect(dialect, f"supported: {', '.join(SUPPORTED_DIALECTS)}")
    return adapter

from __future__ import annotations

import pytest

from importintel.dialects import (
    SUPPORTED_DIALECTS,
    BabelAdapter,
    Construct,
    DialectAdapter,
    OxcAdapter,
    SpecifierKind,
    SwcAdapter,
    resolve_adapter,
)
from importintel.errors import UnsupportedDialect


def test_resolve_adapter_known_dialects():
    assert set(SUPPORTED_DIALECTS) == {"babel", "swc", "oxc", "tree-sitter"}
    for dialect in SUPPORTED_DIALECTS:
        assert resolve_adapter(dialect).name == dialect


def test_resolve_adapter_rejects_unknown_dialect():
    with pytest.raises(UnsupportedDialect) as excinfo:
        resolve_adapter("esprima")
    assert excinfo.value.dialect == "esprima"

    with pytest.raises(UnsupportedDialect):
        resolve_adapter(None)  # type: ignore[arg-type]


def test_unsupported_dialect_is_a_value_error():
    with pytest.raises(ValueError):
        resolve_adapter("acorn")


def test_root_rejects_foreign_shapes():
    with pytest.raises(UnsupportedDialect):
        BabelAdapter().root({"type": "Module", "body": []})
    with pytest.raises(UnsupportedDialect):
        SwcAdapter().root({"type": "Program", "body": []})
    with pytest.raises(UnsupportedDialect):
        OxcAdapter().root([])
    with pytest.raises(UnsupportedDialect):
        resolve_adapter("tree-sitter").root({"type": "Program"})


def test_babel_root_unwraps_file():
    program = {"type": "Program", "body": []}
    assert BabelAdapter().root({"type": "File", "program": program}) is program


def test_oxc_root_unwraps_parse_result():
    program = {"type": "Program", "body": []}
    assert OxcAdapter().root({"program": program, "errors": []}) is program


def test_accessors_return_none_for_absent_fields():
    spec = {"type": "ImportDefaultSpecifier"}
    for adapter in (BabelAdapter(), SwcAdapter(), OxcAdapter()):
        assert adapter.imported_name(spec) is None
        assert adapter.original_name(spec) is None
        assert adapter.local_name(spec) is None
        assert adapter.exported_name(spec) is None
        assert adapter.source_literal({"type": "ImportDeclaration"}) is None
        assert adapter.assertion_type({"type": "ImportDeclaration"}) is None


def test_field_paths_are_dialect_specific():
    babel_spec = {
        "type": "ExportSpecifier",
        "local": {"type": "Identifier", "name": "x"},
        "exported": {"type": "Identifier", "name": "y"},
    }
    swc_spec = {
        "type": "ExportSpecifier",
        "orig": {"type": "Identifier", "value": "x"},
        "exported": {"type": "Identifier", "value": "y"},
    }

    assert BabelAdapter().local_name(babel_spec) == "x"
    assert BabelAdapter().exported_name(babel_spec) == "y"
    # swc identifiers carry `value`, babel identifiers carry `name`.
    assert SwcAdapter().exported_name(babel_spec) is None
    assert SwcAdapter().original_name(swc_spec) == "x"
    assert BabelAdapter().original_name(swc_spec) is None


def test_specifier_kinds():
    adapter = BabelAdapter()
    assert adapter.specifier_kind({"type": "ImportDefaultSpecifier"}) is SpecifierKind.DEFAULT
    assert adapter.specifier_kind({"type": "ImportNamespaceSpecifier"}) is SpecifierKind.NAMESPACE
    assert adapter.specifier_kind({"type": "ExportNamespaceSpecifier"}) is SpecifierKind.NAMESPACE
    assert adapter.specifier_kind({"type": "ImportSpecifier"}) is SpecifierKind.NAMED


def test_construct_tables_follow_the_dialect():
    call = {"type": "CallExpression", "callee": {"type": "Import"}, "arguments": []}
    expression = {"type": "ImportExpression", "source": None}

    assert SwcAdapter().construct_of(call) is Construct.DYNAMIC_IMPORT_CALL
    assert SwcAdapter().construct_of(expression) is None
    assert OxcAdapter().construct_of(expression) is Construct.DYNAMIC_IMPORT_EXPRESSION
    assert OxcAdapter().construct_of(call) is None
    assert BabelAdapter().construct_of(call) is Construct.DYNAMIC_IMPORT_CALL
    assert BabelAdapter().construct_of(expression) is Construct.DYNAMIC_IMPORT_EXPRESSION


def test_children_follow_source_offsets():
    first = {"type": "ImportDeclaration", "start": 0}
    second = {"type": "ExpressionStatement", "start": 40}
    node = {"type": "Program", "start": 0, "later": second, "earlier": first}

    assert OxcAdapter().children(node) == [first, second]


def test_swc_children_use_span_offsets():
    first = {"type": "ImportDeclaration", "span": {"start": 1, "end": 20}}
    second = {"type": "ImportDeclaration", "span": {"start": 21, "end": 40}}
    node = {"type": "Module", "body": [second, first]}

    assert SwcAdapter().children(node) == [first, second]


def test_partial_adapter_cannot_be_instantiated():
    class NodeTypeOnly(DialectAdapter):
        name = "partial"

        def node_type(self, node):
            return None

    with pytest.raises(TypeError):
        NodeTypeOnly()

from __future__ import annotations

import pytest

from importintel.dialects import BabelAdapter, OxcAdapter, SwcAdapter
from importintel.dynamic import detect
from importintel.errors import MalformedDeclaration
from importintel.models import FindImportsEntry


def swc_import_call(expression):
    arguments = [] if expression is None else [{"spread": None, "expression": expression}]
    return {"type": "CallExpression", "callee": {"type": "Import"}, "arguments": arguments}


def test_swc_call_with_literal():
    node = swc_import_call({"type": "StringLiteral", "value": "./b.js"})

    assert detect(node, SwcAdapter()) == FindImportsEntry(("[default]",), "./b.js")


def test_swc_call_with_computed_argument():
    node = swc_import_call({"type": "Identifier", "value": "path"})

    assert detect(node, SwcAdapter()) == FindImportsEntry(("[default]",), "[variable]")


def test_babel_call_and_expression_forms():
    call = {
        "type": "CallExpression",
        "callee": {"type": "Import"},
        "arguments": [{"type": "StringLiteral", "value": "./b.js"}],
    }
    expression = {"type": "ImportExpression", "source": {"type": "Identifier", "name": "path"}}

    assert detect(call, BabelAdapter()).source == "./b.js"
    assert detect(expression, BabelAdapter()).source == "[variable]"


def test_oxc_import_expression():
    node = {"type": "ImportExpression", "source": {"type": "Literal", "value": "./b.js"}}

    assert detect(node, OxcAdapter()) == FindImportsEntry(("[default]",), "./b.js")


def test_template_literal_is_not_static():
    node = {
        "type": "ImportExpression",
        "source": {"type": "TemplateLiteral", "quasis": [], "expressions": []},
    }

    assert detect(node, OxcAdapter()).source == "[variable]"


def test_other_calls_are_ignored():
    node = {
        "type": "CallExpression",
        "callee": {"type": "Identifier", "value": "require"},
        "arguments": [{"spread": None, "expression": {"type": "StringLiteral", "value": "x"}}],
    }

    assert detect(node, SwcAdapter()) is None


def test_missing_argument_is_malformed():
    with pytest.raises(MalformedDeclaration):
        detect(swc_import_call(None), SwcAdapter())
    with pytest.raises(MalformedDeclaration):
        detect({"type": "ImportExpression"}, OxcAdapter())

"""
Tests for runtime import synthesis and prologue-aware insertion.
"""

from build_jsx.core.imports import ImportNeeds, build_runtime_import, insert_after_prologue, is_directive
from build_jsx.enums import ImportSymbol
from estree_helpers import directive, expr_stmt, ident, lit


def _specifiers(declaration):
  return [(s["imported"]["name"], s["local"]["name"]) for s in declaration["specifiers"]]


def test_nothing_needed():
  assert build_runtime_import(ImportNeeds(), "react") is None


def test_raise_flag_returns_local_name():
  needs = ImportNeeds()
  assert needs.raise_flag(ImportSymbol.JSXS) == "_jsxs"
  assert needs.jsxs is True


def test_specifier_order_is_fixed():
  needs = ImportNeeds()
  needs.raise_flag(ImportSymbol.JSXS)
  needs.raise_flag(ImportSymbol.JSX)
  needs.raise_flag(ImportSymbol.FRAGMENT)

  declaration = build_runtime_import(needs, "react")

  assert declaration["source"] == {"type": "Literal", "value": "react/jsx-runtime"}
  assert _specifiers(declaration) == [("Fragment", "_Fragment"), ("jsx", "_jsx"), ("jsxs", "_jsxs")]


def test_development_uses_dev_runtime():
  needs = ImportNeeds(jsx_dev=True)
  declaration = build_runtime_import(needs, "preact")
  assert declaration["source"]["value"] == "preact/jsx-dev-runtime"
  assert _specifiers(declaration) == [("jsxDEV", "_jsxDEV")]


def test_is_directive():
  assert is_directive(directive("use strict"))
  assert is_directive(expr_stmt(lit("use client")))
  assert not is_directive(expr_stmt(ident("x")))
  assert not is_directive({"type": "VariableDeclaration", "declarations": []})


def test_insert_at_top_without_prologue():
  stmt = expr_stmt(ident("x"))
  assert insert_after_prologue([stmt], "IMPORT") == ["IMPORT", stmt]


def test_insert_after_prologue():
  first, second, code = directive("use strict"), directive("use client"), expr_stmt(ident("x"))
  body = [first, second, code]

  result = insert_after_prologue(body, "IMPORT")

  assert result == [first, second, "IMPORT", code]
  assert body == [first, second, code]


def test_insert_into_empty_body():
  assert insert_after_prologue([], "IMPORT") == ["IMPORT"]


def test_parenthesized_string_is_not_directive():
  parenthesized = {"type": "ExpressionStatement", "start": 0, "end": 6, "expression": dict(lit("x"), start=1, end=4)}
  plain = {"type": "ExpressionStatement", "start": 0, "end": 4, "expression": dict(lit("x"), start=0, end=3)}

  assert not is_directive(parenthesized)
  assert is_directive(plain)
  assert insert_after_prologue([parenthesized], "IMPORT") == ["IMPORT", parenthesized]

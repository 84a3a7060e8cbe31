"""
Tests for the ESTree Transformer Base.

Verifies:
1. Enter hooks run in document order, leave hooks in post-order.
2. Parents receive the replacements of their children.
3. The input tree is never mutated.
4. Returning False from a visit hook skips descendants.
"""

import copy

import pytest

from build_jsx.core.walker import EstreeTransformer
from build_jsx.errors import UnsupportedNodeError
from estree_helpers import ident, lit, program


def _call(callee, *args):
  return {"type": "CallExpression", "callee": callee, "arguments": list(args)}


class RecordingTransformer(EstreeTransformer):
  def __init__(self):
    self.events = []

  def visit_CallExpression(self, node):
    self.events.append(("enter", node["callee"]["name"]))

  def leave_CallExpression(self, original_node, updated_node):
    self.events.append(("leave", original_node["callee"]["name"]))
    return updated_node


class RenamingTransformer(EstreeTransformer):
  def leave_Identifier(self, original_node, updated_node):
    return {"type": "Identifier", "name": original_node["name"].upper()}


class SkippingTransformer(EstreeTransformer):
  def visit_CallExpression(self, node):
    return False

  def leave_Identifier(self, original_node, updated_node):
    return {"type": "Identifier", "name": "changed"}


def test_enter_and_leave_order():
  tree = program({"type": "ExpressionStatement", "expression": _call(ident("outer"), _call(ident("a")), _call(ident("b")))})
  walker = RecordingTransformer()
  walker.transform(tree)

  assert walker.events == [
    ("enter", "outer"),
    ("enter", "a"),
    ("leave", "a"),
    ("enter", "b"),
    ("leave", "b"),
    ("leave", "outer"),
  ]


def test_replacements_flow_into_parents():
  tree = program({"type": "ExpressionStatement", "expression": _call(ident("f"), ident("x"), lit(1))})
  result = RenamingTransformer().transform(tree)

  call = result["body"][0]["expression"]
  assert call["callee"] == ident("F")
  assert call["arguments"] == [ident("X"), lit(1)]


def test_input_is_not_mutated():
  tree = program({"type": "ExpressionStatement", "expression": _call(ident("f"), ident("x"))})
  snapshot = copy.deepcopy(tree)

  RenamingTransformer().transform(tree)

  assert tree == snapshot


def test_positional_fields_are_not_walked():
  tree = program({"type": "ExpressionStatement", "expression": ident("x")})
  tree["comments"] = [{"type": "Block", "value": "c"}]
  tree["range"] = [0, 2]

  result = RenamingTransformer().transform(tree)

  assert result["comments"] is tree["comments"]
  assert result["range"] == [0, 2]


def test_visit_false_skips_children():
  tree = program({"type": "ExpressionStatement", "expression": _call(ident("f"), ident("x"))})
  result = SkippingTransformer().transform(tree)

  call = result["body"][0]["expression"]
  assert call["callee"] == ident("f")
  assert call["arguments"] == [ident("x")]


def test_non_node_root_is_rejected():
  with pytest.raises(UnsupportedNodeError, match="Expected an ESTree node"):
    RenamingTransformer().transform({"compilerOptions": {}})

"""
ESTree Node Model.

The lowering engine works on plain ESTree dictionaries (``{"type": ..., ...}``)
as produced by a JSX-aware JavaScript parser and consumed by any ESTree code
generator. This module provides:

1.  **Builders** for the output nodes the engine emits (identifiers, literals,
    member chains, objects, calls, imports).
2.  **Positional copying** (:func:`create`) so replacement nodes keep the
    location metadata of the node they were derived from.
3.  **Closed unions** describing the JSX input shapes the engine understands:
    tag names, attributes and children. Parsing into these unions rejects any
    unknown kind up front so later stages can match exhaustively.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from build_jsx.errors import UnsupportedNodeError

Node = Dict[str, Any]

# Fields copied verbatim from a source node onto its replacement.
POSITIONAL_FIELDS = ("start", "end", "loc", "range", "comments")


def is_node(value: Any) -> bool:
  """
  Checks whether a value is an ESTree node (a dict carrying a string `type`).

  Args:
      value: Any value found in a node field.

  Returns:
      bool: True if the value is a node.
  """
  return isinstance(value, dict) and isinstance(value.get("type"), str)


def create(template: Node, node: Node) -> Node:
  """
  Copies positional metadata from `template` onto `node`.

  Args:
      template: The source node whose position the new node inherits.
      node: The freshly built node.

  Returns:
      Node: `node`, updated in place.
  """
  for name in POSITIONAL_FIELDS:
    if name in template:
      node[name] = template[name]
  return node


# --- Builders ---


def identifier(name: str) -> Node:
  return {"type": "Identifier", "name": name}


def literal(value: Union[str, int, float, bool, None]) -> Node:
  return {"type": "Literal", "value": value}


def this_expression() -> Node:
  return {"type": "ThisExpression"}


def member_expression(obj: Node, prop: Node) -> Node:
  """Builds `obj.prop`, or `obj["prop"]` when `prop` is a literal."""
  return {
    "type": "MemberExpression",
    "object": obj,
    "property": prop,
    "computed": prop["type"] == "Literal",
    "optional": False,
  }


def to_member_expression(path: str) -> Node:
  """
  Folds a dotted path such as ``React.createElement`` into a member chain.

  Args:
      path (str): Dot-separated identifier path.

  Returns:
      Node: An Identifier for a single segment, else a MemberExpression chain.
  """
  parts = path.split(".")
  result = identifier(parts[0])
  for part in parts[1:]:
    result = member_expression(result, identifier(part))
  return result


def property_node(key: Node, value: Node) -> Node:
  return {
    "type": "Property",
    "key": key,
    "value": value,
    "kind": "init",
    "method": False,
    "shorthand": False,
    "computed": False,
  }


def spread_element(argument: Node) -> Node:
  return {"type": "SpreadElement", "argument": argument}


def object_expression(properties: Optional[List[Node]] = None) -> Node:
  return {"type": "ObjectExpression", "properties": list(properties or [])}


def array_expression(elements: List[Node]) -> Node:
  return {"type": "ArrayExpression", "elements": list(elements)}


def call_expression(callee: Node, arguments: List[Node]) -> Node:
  return {"type": "CallExpression", "callee": callee, "arguments": list(arguments), "optional": False}


def import_specifier(imported: str, local: str) -> Node:
  return {"type": "ImportSpecifier", "imported": identifier(imported), "local": identifier(local)}


def import_declaration(specifiers: List[Node], source: str) -> Node:
  return {"type": "ImportDeclaration", "specifiers": list(specifiers), "source": literal(source)}


# --- JSX Input Shapes ---


@dataclass
class PlainName:
  """A `JSXIdentifier`: ``div``, ``Button``, ``custom-element``."""

  text: str
  source: Node = field(default_factory=dict, repr=False, compare=False)


@dataclass
class NamespacedName:
  """A `JSXNamespacedName`: ``svg:rect``."""

  namespace: str
  name: str
  source: Node = field(default_factory=dict, repr=False, compare=False)

  @property
  def text(self) -> str:
    return f"{self.namespace}:{self.name}"


@dataclass
class MemberPath:
  """
  A `JSXMemberExpression`: ``ui.Dialog.Title``.

  Stored as the parser nests it (object + trailing property) so each level of
  the rebuilt member chain can inherit its own position.
  """

  object: Union[PlainName, "MemberPath"]
  property: PlainName
  source: Node = field(default_factory=dict, repr=False, compare=False)


TagName = Union[PlainName, MemberPath, NamespacedName]
AttributeName = Union[PlainName, NamespacedName]


@dataclass
class NamedAttribute:
  """A `JSXAttribute`: ``a="b"``, ``a={b}``, ``a=<b />`` or a bare ``a``."""

  name: AttributeName
  value: Optional[Node]
  source: Node = field(default_factory=dict, repr=False, compare=False)


@dataclass
class SpreadAttribute:
  """A `JSXSpreadAttribute`: ``{...props}``."""

  argument: Node
  source: Node = field(default_factory=dict, repr=False, compare=False)


Attribute = Union[NamedAttribute, SpreadAttribute]


@dataclass
class ExpressionChild:
  """A `JSXExpressionContainer` child; ``{}`` and ``{/* c */}`` are placeholders."""

  expression: Node
  is_empty_placeholder: bool


@dataclass
class TextChild:
  """A `JSXText` child holding raw, unnormalized text."""

  text: str
  source: Node = field(default_factory=dict, repr=False, compare=False)


@dataclass
class LoweredChild:
  """Any other child, typically the call that replaced a nested element."""

  node: Node


Child = Union[ExpressionChild, TextChild, LoweredChild]


def parse_tag_name(node: Node) -> TagName:
  """
  Converts a JSX name node into the tag-name union.

  Args:
      node: A `JSXIdentifier`, `JSXMemberExpression` or `JSXNamespacedName`.

  Returns:
      TagName: The typed name.

  Raises:
      UnsupportedNodeError: For any other node kind.
  """
  kind = node.get("type")
  if kind == "JSXIdentifier":
    return PlainName(node["name"], node)
  if kind == "JSXNamespacedName":
    return NamespacedName(node["namespace"]["name"], node["name"]["name"], node)
  if kind == "JSXMemberExpression":
    obj = parse_tag_name(node["object"])
    prop = parse_tag_name(node["property"])
    if isinstance(obj, NamespacedName) or not isinstance(prop, PlainName):
      raise UnsupportedNodeError(f"Unsupported member expression part in JSX name: {kind}")
    return MemberPath(obj, prop, node)
  raise UnsupportedNodeError(f"Unsupported JSX name node: `{kind}`")


def parse_attribute(node: Node) -> Attribute:
  """
  Converts a JSX attribute node into the attribute union.

  Args:
      node: A `JSXAttribute` or `JSXSpreadAttribute`.

  Returns:
      Attribute: The typed attribute.

  Raises:
      UnsupportedNodeError: For any other node kind, or a member-path attribute name.
  """
  kind = node.get("type")
  if kind == "JSXSpreadAttribute":
    return SpreadAttribute(node["argument"], node)
  if kind == "JSXAttribute":
    name = parse_tag_name(node["name"])
    if isinstance(name, MemberPath):
      raise UnsupportedNodeError("JSX attribute names cannot be member expressions")
    return NamedAttribute(name, node.get("value"), node)
  raise UnsupportedNodeError(f"Unsupported JSX attribute node: `{kind}`")


def parse_child(node: Node) -> Child:
  kind = node.get("type")
  if kind == "JSXExpressionContainer":
    expression = node["expression"]
    return ExpressionChild(expression, expression.get("type") == "JSXEmptyExpression")
  if kind == "JSXText":
    return TextChild(node["value"], node)
  return LoweredChild(node)

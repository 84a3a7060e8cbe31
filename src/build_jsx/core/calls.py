"""
Call Assembler.

Builds the call expression that replaces a lowered JSX node.

Classic runtime::

    <a b>c</a>   ->  React.createElement("a", {b: true}, "c")
    <a />        ->  React.createElement("a")
    <>c</>       ->  React.createElement(React.Fragment, null, "c")

Automatic runtime::

    <a key="k">c</a>  ->  _jsx("a", {children: "c"}, "k")
    <a>c{d}</a>       ->  _jsxs("a", {children: ["c", d]})

Automatic runtime, development::

    <a>c</a>  ->  _jsxDEV("a", {children: "c"}, undefined, false,
                  {fileName: "x.js", lineNumber: 1, columnNumber: 1}, this)
"""

from typing import List, Optional

from build_jsx.core.annotations import ResolvedSettings
from build_jsx.core.children import children_property
from build_jsx.core.imports import ImportNeeds
from build_jsx.core.nodes import (
  Node,
  call_expression,
  create,
  identifier,
  literal,
  object_expression,
  property_node,
  this_expression,
  to_member_expression,
)
from build_jsx.core.props import AutomaticProps
from build_jsx.enums import ImportSymbol

DEFAULT_FILE_NAME = "<source.js>"


def build_classic_call(
  source: Node,
  name: Node,
  props: Optional[Node],
  children: List[Node],
  settings: ResolvedSettings,
  is_fragment: bool = False,
) -> Node:
  """
  Assembles a classic `pragma(name, props, ...children)` call.

  The props slot is filled with `null` when there are children but no props,
  and omitted entirely when there are neither. Fragments always carry it.

  Args:
      source: The JSX node being replaced (for positions).
      name: Resolved tag, or the fragment symbol.
      props: Merged props expression, if any.
      children: Normalized children.
      settings: Effective configuration.
      is_fragment: Whether `source` is a fragment.

  Returns:
      Node: The positioned CallExpression.
  """
  arguments = [name]
  if props is not None or children or is_fragment:
    arguments.append(props if props is not None else literal(None))
  arguments.extend(children)

  return create(source, call_expression(to_member_expression(settings.pragma), arguments))


def build_automatic_call(
  source: Node,
  name: Node,
  props: AutomaticProps,
  children: List[Node],
  settings: ResolvedSettings,
  needs: ImportNeeds,
) -> Node:
  """
  Assembles a `_jsx`, `_jsxs` or `_jsxDEV` call.

  Args:
      source: The JSX node being replaced (for positions and dev locations).
      name: Resolved tag, or `_Fragment`.
      props: Merged object entries and diverted key.
      children: Normalized children; folded into the `children` prop.
      settings: Effective configuration.
      needs: Helper usage accumulator.

  Returns:
      Node: The positioned CallExpression.
  """
  properties = list(props.properties)
  children_prop = children_property(children)
  if children_prop is not None:
    properties.append(children_prop)

  arguments = [name, object_expression(properties)]
  is_static = len(children) > 1

  if settings.development:
    callee = needs.raise_flag(ImportSymbol.JSX_DEV)
    arguments.append(props.key if props.key is not None else identifier("undefined"))
    arguments.append(literal(is_static))
    arguments.append(source_location(source, settings.file_path))
    arguments.append(this_expression())
  else:
    callee = needs.raise_flag(ImportSymbol.JSXS if is_static else ImportSymbol.JSX)
    if props.key is not None:
      arguments.append(props.key)

  return create(source, call_expression(identifier(callee), arguments))


def source_location(source: Node, file_path: Optional[str]) -> Node:
  """
  Builds the `{fileName, lineNumber, columnNumber}` record passed to `jsxDEV`.

  Args:
      source: The JSX node being replaced.
      file_path: Path of the file, if known.

  Returns:
      Node: The ObjectExpression; line and column only when `source` has a `loc`.
  """
  properties = [property_node(identifier("fileName"), literal(file_path or DEFAULT_FILE_NAME))]

  loc = source.get("loc")
  if loc:
    start = loc["start"]
    properties.append(property_node(identifier("lineNumber"), literal(start["line"])))
    properties.append(property_node(identifier("columnNumber"), literal(start["column"] + 1)))

  return object_expression(properties)

"""
Children Normalizer.

Shapes the children of a JSX node into call arguments:

- ``{expr}`` passes `expr` through; ``{}`` and ``{/* comment */}`` are dropped.
- Text is whitespace-normalized the way JSX collapses it; text that
  normalizes to nothing is dropped.
- Already-lowered nodes (nested elements) pass through unchanged.
"""

import re
from typing import List, Optional

from build_jsx.core.nodes import (
  Child,
  ExpressionChild,
  Node,
  TextChild,
  array_expression,
  create,
  identifier,
  literal,
  property_node,
)

_SPACES_AROUND_EOL = re.compile(r" *(?:\r\n|\n|\r) *")
_EOL_RUNS = re.compile(r"\n+")
_TRAILING_EOL = re.compile(r"\n+\Z")


def normalize_text(value: str) -> str:
  """
  Collapses JSX text whitespace.

  Steps, in order: tabs become spaces; spaces around a line ending collapse
  into one line feed; runs of line feeds collapse; trailing line feeds are
  dropped; remaining line feeds become spaces.

  Args:
      value (str): Raw `JSXText` value.

  Returns:
      str: The normalized text, possibly empty.
  """
  value = value.replace("\t", " ")
  value = _SPACES_AROUND_EOL.sub("\n", value)
  value = _EOL_RUNS.sub("\n", value)
  value = _TRAILING_EOL.sub("", value)
  return value.replace("\n", " ")


def normalize_children(children: List[Child]) -> List[Node]:
  """
  Converts typed children into argument expressions, dropping empties.

  Args:
      children: The node's children, in source order.

  Returns:
      List[Node]: One expression per surviving child.
  """
  result: List[Node] = []
  for child in children:
    if isinstance(child, ExpressionChild):
      if child.is_empty_placeholder:
        continue
      result.append(child.expression)
    elif isinstance(child, TextChild):
      text = normalize_text(child.text)
      if not text:
        continue
      result.append(create(child.source, literal(text)))
    else:
      result.append(child.node)
  return result


def children_property(children: List[Node]) -> Optional[Node]:
  """
  Builds the `children` prop used by the automatic runtime.

  Args:
      children: Normalized children.

  Returns:
      Optional[Node]: None for no children, the child itself for one, an array otherwise.
  """
  if not children:
    return None
  value = children[0] if len(children) == 1 else array_expression(children)
  return property_node(identifier("children"), value)

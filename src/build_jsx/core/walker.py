"""
ESTree Transformer Base.

Provides :class:`EstreeTransformer`, a depth-first walker over ESTree
dictionaries modelled on the visitor/transformer protocol of concrete syntax
tree libraries:

- ``visit_<Type>(node)`` is called when entering a node, in document order.
  Returning ``False`` skips its descendants.
- ``leave_<Type>(original_node, updated_node)`` is called in strict
  post-order and returns the node that takes the original's slot.

The walk is a functional rebuild: ``updated_node`` is a shallow copy whose
child slots already hold the rewritten descendants. Input dictionaries are
never mutated, so a parent only ever observes the replacements of its
children.
"""

from typing import Any, List, Optional

from build_jsx.core.nodes import Node, is_node
from build_jsx.errors import UnsupportedNodeError

# Non-child fields that are carried over without descending.
SKIPPED_FIELDS = frozenset({"loc", "range", "comments"})


class EstreeTransformer:
  """
  Base class for ESTree rewriting passes.

  Subclasses declare ``visit_<Type>`` / ``leave_<Type>`` hooks for the node
  types they care about; all other nodes are copied through unchanged.
  """

  def transform(self, tree: Node) -> Node:
    """
    Walks `tree` and returns its rewritten copy.

    Args:
        tree: Root node (usually a `Program`).

    Returns:
        Node: The replacement produced for the root.

    Raises:
        UnsupportedNodeError: If `tree` is not an ESTree node.
    """
    if not is_node(tree):
      raise UnsupportedNodeError(f"Expected an ESTree node with a `type`, got {type(tree).__name__}")
    return self._walk(tree)

  def _walk(self, node: Node) -> Node:
    node_type = node["type"]

    visitor = getattr(self, f"visit_{node_type}", None)
    descend: Optional[bool] = visitor(node) if visitor else True

    updated = dict(node)
    if descend is not False:
      for key, value in node.items():
        if key in SKIPPED_FIELDS:
          continue
        if is_node(value):
          updated[key] = self._walk(value)
        elif isinstance(value, list):
          updated[key] = self._walk_list(value)

    leaver = getattr(self, f"leave_{node_type}", None)
    if leaver:
      return leaver(node, updated)
    return updated

  def _walk_list(self, values: List[Any]) -> List[Any]:
    return [self._walk(v) if is_node(v) else v for v in values]

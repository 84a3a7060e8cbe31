"""
Props Builder.

Merges the attributes of an element into the properties argument of the
lowered call. Both runtimes preserve source order, so that later keys (named
or spread in) override earlier ones:

- Classic: ``<a b {...c} d="e" />`` -> ``Object.assign({b: true}, c, {d: "e"})``
- Automatic: ``<a b {...c} d="e" />`` -> ``{b: true, ...c, d: "e"}``

In the automatic runtime a ``key`` attribute is pulled out of the properties
and passed as its own argument, which is only sound while no spread has been
seen yet.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from build_jsx.core.names import IdentifierPredicate, is_identifier_name, resolve_name
from build_jsx.core.nodes import (
  Attribute,
  NamedAttribute,
  Node,
  PlainName,
  SpreadAttribute,
  call_expression,
  create,
  literal,
  object_expression,
  property_node,
  spread_element,
  to_member_expression,
)
from build_jsx.errors import KeyOrderingError

MERGE_FUNCTION = "Object.assign"


@dataclass
class AutomaticProps:
  """
  Result of merging attributes for the automatic runtime.

  Attributes:
      properties: Object entries (`Property` / `SpreadElement`), in source order.
      key: Value of a leading `key` attribute, if any.
  """

  properties: List[Node] = field(default_factory=list)
  key: Optional[Node] = None


def attribute_value(attribute: NamedAttribute) -> Node:
  """
  Computes the value of a named attribute.

  Args:
      attribute: The attribute.

  Returns:
      Node: The container's expression, the literal or lowered element (without
      its `raw` source text), or `true` for a bare attribute.
  """
  value = attribute.value
  if value is None:
    return literal(True)
  if value.get("type") == "JSXExpressionContainer":
    return value["expression"]
  # Escapes are re-derived from `value` by the generator, never copied from `raw`.
  return {k: v for k, v in value.items() if k != "raw"}


def to_property(attribute: NamedAttribute, is_identifier: IdentifierPredicate = is_identifier_name) -> Node:
  """Builds the object property for a named attribute."""
  key = resolve_name(attribute.name, is_identifier)
  return create(attribute.source, property_node(key, attribute_value(attribute)))


def build_classic_props(attributes: List[Attribute], is_identifier: IdentifierPredicate = is_identifier_name) -> Optional[Node]:
  """
  Merges attributes into a single props expression for the classic runtime.

  Contiguous named attributes share one object literal; spreads stand alone.
  Two or more sources are combined with `Object.assign`, starting from a fresh
  object so a spread source is never mutated.

  Args:
      attributes: Element attributes, in source order.
      is_identifier: Identifier-shape predicate for keys.

  Returns:
      Optional[Node]: The props expression, or None when there are no attributes.
  """
  objects: List[Node] = []
  fields: List[Node] = []

  for attribute in attributes:
    if isinstance(attribute, SpreadAttribute):
      if fields:
        objects.append(object_expression(fields))
        fields = []
      objects.append(attribute.argument)
    else:
      fields.append(to_property(attribute, is_identifier))

  if fields:
    objects.append(object_expression(fields))

  if not objects:
    return None
  if len(objects) == 1:
    return objects[0]

  if objects[0]["type"] != "ObjectExpression":
    objects.insert(0, object_expression())
  return call_expression(to_member_expression(MERGE_FUNCTION), objects)


def build_automatic_props(attributes: List[Attribute], is_identifier: IdentifierPredicate = is_identifier_name) -> AutomaticProps:
  """
  Merges attributes into object entries for the automatic runtime.

  Args:
      attributes: Element attributes, in source order.
      is_identifier: Identifier-shape predicate for keys.

  Returns:
      AutomaticProps: Entries plus the diverted `key` value.

  Raises:
      KeyOrderingError: If `key` follows a spread attribute.
  """
  result = AutomaticProps()
  spread_seen = False

  for attribute in attributes:
    if isinstance(attribute, SpreadAttribute):
      spread_seen = True
      result.properties.append(create(attribute.source, spread_element(attribute.argument)))
    elif isinstance(attribute.name, PlainName) and attribute.name.text == "key":
      if spread_seen:
        raise KeyOrderingError("Expected `key` to come before any spread expressions")
      result.key = attribute_value(attribute)
    else:
      result.properties.append(to_property(attribute, is_identifier))

  return result

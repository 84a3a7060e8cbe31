"""
Name Resolver.

Turns JSX tag and attribute names into JavaScript expressions:

- ``<div>`` -> ``"div"`` (host tag, string literal)
- ``<Button>`` / ``<_x>`` / ``<$x>`` -> ``Button`` (component reference)
- ``<custom-element>`` -> ``"custom-element"``
- ``<svg:rect>`` -> ``"svg:rect"``
- ``<ui.Dialog>`` -> ``ui.Dialog``; ``<ui.my-part>`` -> ``ui["my-part"]``
"""

import re
from typing import Callable, Union

from build_jsx.core.annotations import ResolvedSettings
from build_jsx.core.imports import ImportNeeds
from build_jsx.core.nodes import (
  MemberPath,
  NamespacedName,
  Node,
  PlainName,
  TagName,
  create,
  identifier,
  literal,
  member_expression,
  to_member_expression,
)
from build_jsx.enums import ImportSymbol

IdentifierPredicate = Callable[[str], bool]

_HOST_TAG = re.compile(r"[a-z]")
_JOINERS = ("\u200c", "\u200d")


def is_identifier_name(name: str) -> bool:
  """
  Checks whether `name` is a JavaScript IdentifierName.

  `$` and `_` are allowed anywhere, the zero-width (non-)joiners only after
  the first character; everything else follows Unicode ID_Start/ID_Continue.

  Args:
      name (str): Candidate name.

  Returns:
      bool: True if `name` could be written as a bare identifier.
  """
  if not name or name[0] in _JOINERS:
    return False
  candidate = name.replace("$", "_")
  for joiner in _JOINERS:
    candidate = candidate.replace(joiner, "_")
  return candidate.isidentifier()


def resolve_name(name: Union[TagName, PlainName], is_identifier: IdentifierPredicate = is_identifier_name) -> Node:
  """
  Converts a JSX name into an Identifier, Literal or MemberExpression.

  No host-tag rule is applied; attribute keys and member segments use this.

  Args:
      name: The typed JSX name.
      is_identifier: Identifier-shape predicate.

  Returns:
      Node: The resolved expression, positioned like the source name.
  """
  if isinstance(name, MemberPath):
    node = member_expression(resolve_name(name.object, is_identifier), resolve_name(name.property, is_identifier))
  elif isinstance(name, NamespacedName):
    node = literal(name.text)
  elif is_identifier(name.text):
    node = identifier(name.text)
  else:
    node = literal(name.text)
  return create(name.source, node)


def resolve_tag(name: TagName, is_identifier: IdentifierPredicate = is_identifier_name) -> Node:
  """
  Resolves an element's tag name.

  Identifiers starting with a lowercase ASCII letter are host tags and become
  string literals; other identifiers stay component references.

  Args:
      name: The typed tag name.
      is_identifier: Identifier-shape predicate.

  Returns:
      Node: The first argument of the lowered call.
  """
  node = resolve_name(name, is_identifier)
  if node["type"] == "Identifier" and _HOST_TAG.match(node["name"]):
    return create(node, literal(node["name"]))
  return node


def resolve_fragment(settings: ResolvedSettings, needs: ImportNeeds) -> Node:
  """
  Resolves the symbol passed as the tag of a fragment.

  Args:
      settings: Effective configuration.
      needs: Helper usage accumulator; records `Fragment` in the automatic runtime.

  Returns:
      Node: `_Fragment` (automatic) or the fragment pragma's member chain (classic).
  """
  if settings.is_automatic:
    return identifier(needs.raise_flag(ImportSymbol.FRAGMENT))
  return to_member_expression(settings.pragma_frag)

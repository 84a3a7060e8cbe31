"""
Traversal Driver.

Provides :class:`JsxTransformer`, the single-pass rewriter that lowers every
`JSXElement` and `JSXFragment` in a program. It is composed of mixins, each
hooking one point of the walk:

- :class:`AnnotationMixin` (`Program` enter): resolves directives and options.
- :class:`ElementMixin` (`JSXElement`/`JSXFragment` leave): replaces the node
  with a call, after all of its descendants were lowered.
- :class:`InjectionMixin` (`Program` leave): adds the runtime import.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from build_jsx.config import BuildJsxOptions
from build_jsx.core.annotations import AnnotationMixin, Annotations, ResolvedSettings, resolve_settings
from build_jsx.core.calls import build_automatic_call, build_classic_call
from build_jsx.core.children import normalize_children
from build_jsx.core.imports import ImportNeeds, InjectionMixin
from build_jsx.core.names import IdentifierPredicate, is_identifier_name, resolve_fragment, resolve_tag
from build_jsx.core.nodes import Node, parse_attribute, parse_child, parse_tag_name
from build_jsx.core.props import build_automatic_props, build_classic_props
from build_jsx.core.tracer import get_tracer
from build_jsx.core.walker import EstreeTransformer

logger = logging.getLogger(__name__)


@dataclass
class LoweringContext:
  """
  Mutable state owned by one transformer run.

  Attributes:
      settings: Effective configuration, set when the `Program` is entered.
      needs: Runtime helpers referenced so far.
  """

  settings: Optional[ResolvedSettings] = None
  needs: ImportNeeds = field(default_factory=ImportNeeds)


class ElementMixin:
  """
  Mixin lowering JSX elements and fragments into calls.

  Assumed attributes on self:
      context (LoweringContext): Shared lowering state.
      is_identifier (IdentifierPredicate): Identifier-shape predicate.
  """

  def leave_JSXElement(self, original_node: Node, updated_node: Node) -> Node:
    opening = updated_node["openingElement"]
    name = resolve_tag(parse_tag_name(opening["name"]), self.is_identifier)
    attributes = [parse_attribute(a) for a in opening.get("attributes") or []]
    return self._lower(original_node, updated_node, name, attributes)

  def leave_JSXFragment(self, original_node: Node, updated_node: Node) -> Node:
    name = resolve_fragment(self._settings, self.context.needs)
    return self._lower(original_node, updated_node, name, None)

  @property
  def _settings(self) -> ResolvedSettings:
    # Roots other than a `Program` carry no comments: options alone apply.
    if self.context.settings is None:
      self.context.settings = resolve_settings(Annotations(), self.options)
    return self.context.settings

  def _lower(self, original_node: Node, updated_node: Node, name: Node, attributes: Optional[List]) -> Node:
    """
    Builds the call replacing one JSX node.

    Args:
        original_node: The node as found in the input (source of positions).
        updated_node: Copy whose children and attribute values are already lowered.
        name: Resolved tag or fragment symbol.
        attributes: Typed attributes, or None for a fragment.

    Returns:
        Node: The replacement CallExpression.
    """
    settings = self._settings
    children = normalize_children([parse_child(c) for c in updated_node.get("children") or []])

    if settings.is_automatic:
      props = build_automatic_props(attributes or [], self.is_identifier)
      call = build_automatic_call(original_node, name, props, children, settings, self.context.needs)
    else:
      props = build_classic_props(attributes, self.is_identifier) if attributes is not None else None
      call = build_classic_call(original_node, name, props, children, settings, is_fragment=attributes is None)

    callee = call["callee"]
    callee_name = callee.get("name") or settings.pragma
    logger.debug("Lowered %s into %s() with %d argument(s)", original_node["type"], callee_name, len(call["arguments"]))
    get_tracer().log_lowering(original_node["type"], callee_name, len(call["arguments"]))
    return call


class JsxTransformer(InjectionMixin, AnnotationMixin, ElementMixin, EstreeTransformer):
  """
  The JSX lowering pass.

  A new instance must be used for every tree: the context accumulates the
  helpers referenced by the tree it walks.
  """

  def __init__(self, options: BuildJsxOptions) -> None:
    """
    Initializes the transformer.

    Args:
        options: Validated options; directives found in the tree override them.
    """
    self.options = options
    self.is_identifier: IdentifierPredicate = options.is_identifier_name or is_identifier_name
    self.context = LoweringContext()

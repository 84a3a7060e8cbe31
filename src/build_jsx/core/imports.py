"""
Import Injection.

Handles the post-processing of the `Program` for the automatic runtime:
1.  Tracking which runtime helpers were referenced while lowering (:class:`ImportNeeds`).
2.  Synthesizing a single import statement for them.
3.  Inserting it after the directive prologue (``"use strict"`` and friends).
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from build_jsx.core.nodes import Node, import_declaration, import_specifier
from build_jsx.core.tracer import get_tracer
from build_jsx.enums import ImportSymbol

logger = logging.getLogger(__name__)

RUNTIME_SUFFIX = "/jsx-runtime"
DEV_RUNTIME_SUFFIX = "/jsx-dev-runtime"


@dataclass
class ImportNeeds:
  """
  Helpers referenced by lowered nodes. Flags are only ever raised.
  """

  fragment: bool = False
  jsx: bool = False
  jsxs: bool = False
  jsx_dev: bool = False

  def raise_flag(self, symbol: ImportSymbol) -> str:
    """
    Marks `symbol` as needed.

    Args:
        symbol: The helper being referenced.

    Returns:
        str: The local name to reference it by.
    """
    setattr(self, _FLAG_FIELDS[symbol], True)
    return symbol.local_name

  @property
  def symbols(self) -> List[ImportSymbol]:
    """Raised helpers, in specifier order."""
    return [s for s in ImportSymbol if getattr(self, _FLAG_FIELDS[s])]


_FLAG_FIELDS = {
  ImportSymbol.FRAGMENT: "fragment",
  ImportSymbol.JSX: "jsx",
  ImportSymbol.JSXS: "jsxs",
  ImportSymbol.JSX_DEV: "jsx_dev",
}


def build_runtime_import(needs: ImportNeeds, import_source: str) -> Optional[Node]:
  """
  Creates the `import {...} from "<source>/jsx-runtime"` declaration.

  Args:
      needs: Accumulated helper usage.
      import_source: Package the helpers come from (e.g. "react").

  Returns:
      Optional[Node]: The ImportDeclaration, or None if nothing is needed.
  """
  symbols = needs.symbols
  if not symbols:
    return None

  suffix = DEV_RUNTIME_SUFFIX if needs.jsx_dev else RUNTIME_SUFFIX
  specifiers = [import_specifier(s.value, s.local_name) for s in symbols]
  return import_declaration(specifiers, import_source + suffix)


def is_directive(statement: Node) -> bool:
  """
  Determines if a statement belongs to a directive prologue.

  Args:
      statement: A top-level statement.

  Parsers following ESTree mark directives with a `directive` field. Without
  it, a string-literal statement counts unless its positions show that the
  string is parenthesized (``("x");`` is an expression, not a directive).

  Args:
      statement: A top-level statement.

  Returns:
      bool: True for an expression statement that is a directive or a bare string.
  """
  if statement.get("type") != "ExpressionStatement":
    return False
  if "directive" in statement:
    return True
  expression = statement.get("expression") or {}
  if expression.get("type") != "Literal" or not isinstance(expression.get("value"), str):
    return False
  if "start" in statement and "start" in expression:
    return statement["start"] == expression["start"]
  return True


def insert_after_prologue(body: List[Node], statement: Node) -> List[Node]:
  """
  Returns a copy of `body` with `statement` placed after the directive prologue.

  Args:
      body: Program statements.
      statement: Statement to insert.

  Returns:
      List[Node]: The new statement list.
  """
  insert_idx = 0
  for stmt in body:
    if not is_directive(stmt):
      break
    insert_idx += 1
  return body[:insert_idx] + [statement] + body[insert_idx:]


class InjectionMixin:
  """
  Transformer mixin injecting the runtime import when the `Program` is left.

  Assumed attributes on self:
      context (LoweringContext): Shared lowering state with settings and needs.
  """

  def leave_Program(self, original_node: Node, updated_node: Node) -> Node:
    declaration = build_runtime_import(self.context.needs, self.context.settings.import_source)
    if declaration is None:
      return updated_node

    source = declaration["source"]["value"]
    names = [s.value for s in self.context.needs.symbols]
    logger.debug("Injecting import of %s from %s", names, source)
    get_tracer().log_import(source, names)

    updated_node["body"] = insert_after_prologue(list(updated_node["body"]), declaration)
    return updated_node

"""
Lowering Engine.

Entry points for running the JSX lowering pass over an ESTree program:

- :func:`build_jsx` returns the rewritten tree and raises on failure.
- :class:`JsxEngine` wraps the same pass for batch callers (the CLI), capturing
  failures and the execution trace in a :class:`LoweringResult`.
"""

import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from build_jsx.config import BuildJsxOptions, OptionsLike
from build_jsx.core.nodes import Node
from build_jsx.core.tracer import get_tracer, reset_tracer
from build_jsx.core.transformer import JsxTransformer
from build_jsx.errors import BuildJsxError

logger = logging.getLogger(__name__)


def build_jsx(tree: Node, options: OptionsLike = None) -> Node:
  """
  Lowers all JSX in `tree` into function calls.

  The global trace is reset first, so after the call it holds the events of
  this run only.

  Args:
      tree: An ESTree `Program` (with optional `comments`) containing JSX nodes.
      options: A :class:`BuildJsxOptions`, a mapping of option values, or None.

  Returns:
      Node: The rewritten tree. The input is not modified.

  Raises:
      BuildJsxError: On invalid configuration, conflicting directives, a
          `key` attribute placed after a spread in the automatic runtime, or
          a root that is not an ESTree node.
  """
  reset_tracer()
  transformer = JsxTransformer(BuildJsxOptions.coerce(options))
  return transformer.transform(tree)


class LoweringResult(BaseModel):
  """
  Structured result of lowering a single tree.
  """

  tree: Optional[Dict[str, Any]] = Field(default=None, description="The rewritten tree, absent on failure.")
  errors: List[str] = Field(default_factory=list, description="Error messages encountered.")
  success: bool = Field(default=True, description="True if the tree was fully lowered.")
  trace_events: List[Dict[str, Any]] = Field(default_factory=list, description="Execution trace log data.")

  @property
  def has_errors(self) -> bool:
    return len(self.errors) > 0


class JsxEngine:
  """
  Runs the lowering pass and reports the outcome instead of raising.
  """

  def __init__(self, options: OptionsLike = None) -> None:
    """
    Initializes the engine.

    Args:
        options: Options applied to every tree this engine lowers.

    Raises:
        ConfigurationError: If `options` fail validation.
    """
    self.options = BuildJsxOptions.coerce(options)

  def run(self, tree: Node, name: str = "<tree>") -> LoweringResult:
    """
    Lowers one tree.

    Args:
        tree: The ESTree program.
        name: Label used in the trace (usually the file name).

    Returns:
        LoweringResult: The rewritten tree or the failure message, plus trace.
    """
    reset_tracer()
    tracer = get_tracer()
    tracer.start_phase("Lowering", name)

    try:
      lowered = JsxTransformer(self.options).transform(tree)
      result = LoweringResult(tree=lowered)
    except BuildJsxError as e:
      logger.debug("Lowering %s failed: %s", name, e)
      result = LoweringResult(success=False, errors=[str(e)])
    finally:
      tracer.end_phase()

    result.trace_events = tracer.export()
    return result

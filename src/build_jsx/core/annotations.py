"""
Annotation Resolver.

Reads configuration directives from the comments attached to a `Program`:

.. code-block:: javascript

    /** @jsxRuntime automatic @jsxImportSource preact */
    /* @jsx h @jsxFrag Fragment */

Directives are matched left-to-right across all comments in document order;
a later directive overrides an earlier one with the same name. The directives
are then merged with the options (directives win) into a
:class:`ResolvedSettings` record, after checking that the combination is
coherent.
"""

import logging
import re
from typing import Any, Dict, Iterable, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from build_jsx.config import BuildJsxOptions
from build_jsx.core.nodes import Node
from build_jsx.core.tracer import get_tracer
from build_jsx.enums import Runtime
from build_jsx.errors import ConfigConflictError, InvalidRuntimeError

logger = logging.getLogger(__name__)

DIRECTIVE_PATTERN = re.compile(r"@(jsx|jsxFrag|jsxImportSource|jsxRuntime)\s+(\S+)")


class Annotations(BaseModel):
  """
  Directive values found in the comments of one file.

  Attributes:
      jsx: Value of `@jsx` (classic factory).
      jsx_frag: Value of `@jsxFrag` (classic fragment symbol).
      jsx_import_source: Value of `@jsxImportSource`.
      jsx_runtime: Value of `@jsxRuntime`, unvalidated.
  """

  model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

  jsx: Optional[str] = None
  jsx_frag: Optional[str] = None
  jsx_import_source: Optional[str] = None
  jsx_runtime: Optional[str] = None


class ResolvedSettings(BaseModel):
  """
  Effective per-file configuration after merging directives over options.
  """

  model_config = ConfigDict(frozen=True)

  runtime: Runtime
  pragma: str
  pragma_frag: str
  import_source: str
  development: bool = False
  file_path: Optional[str] = None

  @property
  def is_automatic(self) -> bool:
    return self.runtime is Runtime.AUTOMATIC


def scan_annotations(comments: Iterable[Node]) -> Annotations:
  """
  Collects directives from a sequence of comment records.

  Args:
      comments: ESTree comment records (`Block` or `Line`), in document order.

  Returns:
      Annotations: The last value seen for each directive.
  """
  found: Dict[str, Any] = {}
  for comment in comments:
    for match in DIRECTIVE_PATTERN.finditer(comment.get("value", "")):
      found[match.group(1)] = match.group(2)
  return Annotations.model_validate(found)


def resolve_settings(annotations: Annotations, options: BuildJsxOptions) -> ResolvedSettings:
  """
  Merges directives over options and validates the result.

  Args:
      annotations: Directives scanned from the file.
      options: Caller-supplied options.

  Returns:
      ResolvedSettings: The effective configuration.

  Raises:
      InvalidRuntimeError: If the runtime is not `automatic` or `classic`.
      ConfigConflictError: If a directive does not apply to the runtime.
  """
  raw_runtime = annotations.jsx_runtime or options.runtime or Runtime.CLASSIC.value

  try:
    runtime = Runtime(raw_runtime)
  except ValueError:
    raise InvalidRuntimeError(f"Unexpected `jsxRuntime` `{raw_runtime}`, expected `automatic` or `classic`") from None

  if runtime is Runtime.AUTOMATIC:
    if annotations.jsx:
      raise ConfigConflictError("Unexpected `@jsx` pragma w/ automatic runtime")
    if annotations.jsx_frag:
      raise ConfigConflictError("Unexpected `@jsxFrag` pragma w/ automatic runtime")
  elif annotations.jsx_import_source:
    raise ConfigConflictError("Unexpected `@jsxImportSource` w/ classic runtime")

  return ResolvedSettings(
    runtime=runtime,
    pragma=annotations.jsx or options.pragma,
    pragma_frag=annotations.jsx_frag or options.pragma_frag,
    import_source=annotations.jsx_import_source or options.import_source,
    development=options.development,
    file_path=options.file_path,
  )


class AnnotationMixin:
  """
  Transformer mixin resolving settings when the `Program` is entered.

  Assumed attributes on self:
      options (BuildJsxOptions): Caller-supplied options.
      context (LoweringContext): Shared lowering state; receives the settings.
  """

  def visit_Program(self, node: Node) -> Optional[bool]:
    annotations = scan_annotations(node.get("comments") or [])
    settings = resolve_settings(annotations, self.options)
    self.context.settings = settings

    logger.debug("Resolved JSX settings: %s", settings)
    get_tracer().log_settings(settings.model_dump(mode="json"), annotations.model_dump(by_alias=True, exclude_none=True))
    return True

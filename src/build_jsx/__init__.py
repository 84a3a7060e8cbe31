"""
build-jsx Package.

Lowers JSX in an ESTree program into plain function calls, using either the
classic runtime (``React.createElement(...)``) or the automatic runtime
(``_jsx(...)`` with an injected ``react/jsx-runtime`` import).

Usage
-----

.. code-block:: python

    from build_jsx import build_jsx

    # `tree` is an ESTree Program produced by a JSX-aware parser,
    # with comments attached under `tree["comments"]`.
    lowered = build_jsx(tree, {"runtime": "automatic", "importSource": "preact"})

Directive comments in the source (``/* @jsxRuntime classic @jsx h */``)
override the options.
"""

from build_jsx.config import BuildJsxOptions
from build_jsx.core.engine import JsxEngine, LoweringResult, build_jsx
from build_jsx.enums import Runtime
from build_jsx.errors import (
  BuildJsxError,
  ConfigConflictError,
  ConfigurationError,
  InvalidRuntimeError,
  KeyOrderingError,
  UnsupportedNodeError,
)

__version__ = "0.1.0"

__all__ = [
  "BuildJsxError",
  "BuildJsxOptions",
  "ConfigConflictError",
  "ConfigurationError",
  "InvalidRuntimeError",
  "JsxEngine",
  "KeyOrderingError",
  "LoweringResult",
  "Runtime",
  "UnsupportedNodeError",
  "__version__",
  "build_jsx",
]

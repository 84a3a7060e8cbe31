"""
Enumerations for build-jsx.

This module defines the standard enumerations shared by the configuration
layer and the lowering core.
"""

from enum import Enum


class Runtime(str, Enum):
  """
  Call-emission convention used when lowering JSX.

  CLASSIC calls a configured factory (the pragma) directly.
  AUTOMATIC calls helpers imported from ``<importSource>/jsx-runtime``.
  """

  CLASSIC = "classic"
  AUTOMATIC = "automatic"


class ImportSymbol(str, Enum):
  """
  Helpers that the automatic runtime may import.

  The member order is the order in which specifiers are emitted.
  """

  FRAGMENT = "Fragment"
  JSX = "jsx"
  JSXS = "jsxs"
  JSX_DEV = "jsxDEV"

  @property
  def local_name(self) -> str:
    """The fixed local alias bound by the import (e.g. ``_jsx``)."""
    return f"_{self.value}"

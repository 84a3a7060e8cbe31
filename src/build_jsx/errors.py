"""
Error Taxonomy.

Every failure raised while lowering a tree derives from :class:`BuildJsxError`.
Failures are never recovered from: the whole transform aborts and the caller
must fix its configuration or source before trying again.
"""


class BuildJsxError(ValueError):
  """Base class for all lowering failures."""


class ConfigurationError(BuildJsxError):
  """Options could not be validated."""


class ConfigConflictError(BuildJsxError):
  """
  A directive comment is incompatible with the effective runtime.

  Raised for ``@jsx``/``@jsxFrag`` with the automatic runtime and for
  ``@jsxImportSource`` with the classic runtime.
  """


class InvalidRuntimeError(BuildJsxError):
  """The effective runtime is neither ``automatic`` nor ``classic``."""


class KeyOrderingError(BuildJsxError):
  """A ``key`` attribute follows a spread attribute in the automatic runtime."""


class UnsupportedNodeError(BuildJsxError):
  """A JSX name or attribute node has a kind outside the supported shapes."""

"""
Runtime Configuration Store.

Defines :class:`BuildJsxOptions`, the validated option set accepted by the
lowering engine. Options may be given as a model instance, as a mapping using
either the camelCase names of the JavaScript ecosystem (``pragmaFrag``,
``importSource``, ``filePath``) or snake_case names, or loaded from the
``[tool.build_jsx]`` table of the nearest ``pyproject.toml``.

In-source directive comments (``@jsx``, ``@jsxFrag``, ``@jsxImportSource``,
``@jsxRuntime``) override these options per file; see
:mod:`build_jsx.core.annotations`.
"""

import tomllib
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from pydantic.alias_generators import to_camel

from build_jsx.errors import ConfigurationError

DEFAULT_PRAGMA = "React.createElement"
DEFAULT_PRAGMA_FRAG = "React.Fragment"
DEFAULT_IMPORT_SOURCE = "react"
DEFAULT_RUNTIME = "classic"

OptionsLike = Union["BuildJsxOptions", Mapping[str, Any], None]


class BuildJsxOptions(BaseModel):
  """
  Configuration container for the lowering engine.
  """

  model_config = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    arbitrary_types_allowed=True,
  )

  development: bool = Field(False, description="Use `jsxDEV` and pass source locations (automatic runtime only).")
  file_path: Optional[str] = Field(None, description="Path of the original file, reported to `jsxDEV`.")
  import_source: str = Field(DEFAULT_IMPORT_SOURCE, description="Package the automatic runtime helpers come from.")
  pragma: str = Field(DEFAULT_PRAGMA, description="Identifier or member path called in the classic runtime.")
  pragma_frag: str = Field(DEFAULT_PRAGMA_FRAG, description="Identifier or member path used for classic fragments.")
  runtime: str = Field(DEFAULT_RUNTIME, description="Either 'classic' or 'automatic'.")
  is_identifier_name: Optional[Callable[[str], bool]] = Field(
    None,
    exclude=True,
    description="Predicate deciding whether a name is a valid bare identifier.",
  )

  @model_validator(mode="before")
  @classmethod
  def drop_nulls(cls, data: Any) -> Any:
    """
    Treats explicit ``None`` values like absent keys so defaults apply.

    Args:
        data: Raw input given to the model.

    Returns:
        The input without ``None`` entries when it is a mapping.
    """
    if isinstance(data, Mapping):
      return {k: v for k, v in data.items() if v is not None}
    return data

  @classmethod
  def coerce(cls, options: OptionsLike) -> "BuildJsxOptions":
    """
    Normalizes any accepted options form into a model instance.

    Args:
        options: A model, a mapping of raw values, or None for defaults.

    Returns:
        BuildJsxOptions: The validated options.

    Raises:
        ConfigurationError: If the values fail validation.
    """
    if isinstance(options, cls):
      return options
    try:
      return cls.model_validate(dict(options or {}))
    except ValidationError as e:
      raise ConfigurationError(f"Invalid build-jsx options: {e}") from e

  @classmethod
  def load(
    cls,
    runtime: Optional[str] = None,
    pragma: Optional[str] = None,
    pragma_frag: Optional[str] = None,
    import_source: Optional[str] = None,
    development: Optional[bool] = None,
    file_path: Optional[str] = None,
    search_path: Optional[Path] = None,
  ) -> "BuildJsxOptions":
    """
    Loads configuration from pyproject.toml and overrides it with explicit arguments.

    Args:
        runtime: Override for the runtime.
        pragma: Override for the classic factory.
        pragma_frag: Override for the classic fragment symbol.
        import_source: Override for the automatic runtime import source.
        development: Override for development mode.
        file_path: Path of the source file being lowered.
        search_path: Directory to start searching for TOML config.

    Returns:
        BuildJsxOptions: The fully resolved configuration object.
    """
    toml_config, _ = _load_toml_settings(search_path or Path.cwd())
    merged: Dict[str, Any] = dict(toml_config)

    overrides = {
      "runtime": runtime,
      "pragma": pragma,
      "pragma_frag": pragma_frag,
      "import_source": import_source,
      "development": development,
      "file_path": file_path,
    }
    for key, value in overrides.items():
      if value is None:
        continue
      # Drop a camelCase spelling from TOML so the override is not shadowed.
      merged.pop(to_camel(key), None)
      merged[key] = value

    return cls.coerce(merged)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches parents for 'pyproject.toml' and extracts the `[tool.build_jsx]` table.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except tomllib.TOMLDecodeError:
        return {}, None

      tool_section = data.get("tool", {})
      return tool_section.get("build_jsx", {}), parent

  return {}, None

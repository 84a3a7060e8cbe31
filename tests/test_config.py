"""
Tests for the option model and its TOML persistence.

Verifies that:
1. Options accept camelCase and snake_case names, and ignore explicit None.
2. Invalid values surface as ConfigurationError.
3. BuildJsxOptions.load() picks up [tool.build_jsx] from pyproject.toml.
4. Explicit arguments override TOML settings, whatever their spelling there.
"""

import pytest

from build_jsx.config import BuildJsxOptions
from build_jsx.errors import BuildJsxError, ConfigurationError


@pytest.fixture
def toml_file(tmp_path):
  """Creates a pyproject.toml with a build_jsx table in the temp dir."""
  fpath = tmp_path / "pyproject.toml"
  content = """
[tool.build_jsx]
runtime = "automatic"
importSource = "preact"
development = true
"""
  fpath.write_text(content, encoding="utf-8")
  return fpath


def test_defaults():
  options = BuildJsxOptions.coerce(None)
  assert options.runtime == "classic"
  assert options.pragma == "React.createElement"
  assert options.pragma_frag == "React.Fragment"
  assert options.import_source == "react"
  assert options.development is False
  assert options.file_path is None
  assert options.is_identifier_name is None


def test_camel_and_snake_names():
  camel = BuildJsxOptions.coerce({"pragmaFrag": "F", "importSource": "preact", "filePath": "a.js"})
  snake = BuildJsxOptions.coerce({"pragma_frag": "F", "import_source": "preact", "file_path": "a.js"})
  assert camel == snake
  assert camel.pragma_frag == "F"


def test_none_values_use_defaults():
  options = BuildJsxOptions.coerce({"pragma": None, "runtime": None})
  assert options.pragma == "React.createElement"
  assert options.runtime == "classic"


def test_coerce_passes_models_through():
  options = BuildJsxOptions(pragma="h")
  assert BuildJsxOptions.coerce(options) is options


def test_invalid_value():
  with pytest.raises(ConfigurationError) as excinfo:
    BuildJsxOptions.coerce({"development": "sometimes"})
  assert isinstance(excinfo.value, BuildJsxError)
  assert isinstance(excinfo.value, ValueError)


def test_predicate_is_not_serialized():
  options = BuildJsxOptions.coerce({"isIdentifierName": str.isidentifier})
  assert options.is_identifier_name is str.isidentifier
  assert "is_identifier_name" not in options.model_dump()


def test_load_defaults_from_toml(tmp_path, toml_file):
  options = BuildJsxOptions.load(search_path=tmp_path)

  assert options.runtime == "automatic"
  assert options.import_source == "preact"
  assert options.development is True
  assert options.pragma == "React.createElement"


def test_load_finds_toml_in_parents(tmp_path, toml_file):
  nested = tmp_path / "src" / "pkg"
  nested.mkdir(parents=True)
  assert BuildJsxOptions.load(search_path=nested).import_source == "preact"


def test_cli_overrides_toml(tmp_path, toml_file):
  options = BuildJsxOptions.load(runtime="classic", import_source="solid-js", search_path=tmp_path)

  assert options.runtime == "classic"
  assert options.import_source == "solid-js"
  assert options.development is True


def test_load_without_tool_table(tmp_path):
  (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
  options = BuildJsxOptions.load(pragma="h", search_path=tmp_path)
  assert options.pragma == "h"
  assert options.runtime == "classic"


def test_load_ignores_broken_toml(tmp_path):
  (tmp_path / "pyproject.toml").write_text("[tool.build_jsx\n", encoding="utf-8")
  assert BuildJsxOptions.load(search_path=tmp_path).runtime == "classic"

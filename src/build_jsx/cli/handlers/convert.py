"""
Convert Command Handler.

Implements `build-jsx convert`:
1. Configuration loading (pyproject.toml + CLI overrides).
2. Reading ESTree JSON documents (a file, or every `*.json` under a directory).
3. Lowering via the Engine.
4. Output writing, trace logging and a batch summary.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from rich.table import Table

from build_jsx.config import BuildJsxOptions
from build_jsx.core.engine import JsxEngine, LoweringResult
from build_jsx.errors import BuildJsxError
from build_jsx.utils.console import console, log_error, log_info, log_success, log_warning


def handle_convert(
  input_path: Path,
  output_path: Optional[Path],
  overrides: Dict[str, Any],
  json_trace_path: Optional[Path] = None,
) -> int:
  """
  Handles the 'convert' command execution.

  Args:
      input_path: ESTree JSON file, or a directory of them.
      output_path: Destination file or directory; stdout when absent for a single file.
      overrides: Option values given on the command line (None means unset).
      json_trace_path: Optional path to dump the execution trace as JSON.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  if not input_path.exists():
    log_error(f"Input not found: {input_path}")
    return 1

  search_path = input_path if input_path.is_dir() else input_path.parent

  batch_results: Dict[str, LoweringResult] = {}

  if input_path.is_file():
    try:
      engine = _make_engine(overrides, search_path, str(input_path))
    except BuildJsxError as e:
      log_error(str(e))
      return 1
    result = _convert_single_file(input_path, output_path, engine, json_trace_path)
    return 0 if result.success else 1

  if not output_path:
    log_error("Directory conversion requires --out destination directory.")
    return 1

  json_files = sorted(input_path.rglob("*.json"))
  if not json_files:
    log_warning(f"No .json files found in {input_path}")
    return 0

  log_info(f"Processing {len(json_files)} files from {input_path}...")

  for src_file in json_files:
    rel_path = src_file.relative_to(input_path)
    batch_trace = (output_path / rel_path).with_suffix(".trace.json") if json_trace_path else None
    try:
      engine = _make_engine(overrides, search_path, str(src_file))
    except BuildJsxError as e:
      log_error(str(e))
      return 1
    batch_results[str(rel_path)] = _convert_single_file(src_file, output_path / rel_path, engine, batch_trace)

  _print_batch_summary(batch_results)
  return 0 if all(r.success for r in batch_results.values()) else 1


def _make_engine(overrides: Dict[str, Any], search_path: Path, file_path: str) -> JsxEngine:
  """
  Builds an engine whose `filePath` defaults to the file being converted.

  Args:
      overrides: CLI option values.
      search_path: Directory to start searching for pyproject.toml.
      file_path: Path of the converted document.

  Returns:
      JsxEngine: Engine configured for that file.
  """
  values = dict(overrides)
  if not values.get("file_path"):
    values["file_path"] = file_path
  return JsxEngine(BuildJsxOptions.load(search_path=search_path, **values))


def _convert_single_file(
  input_path: Path,
  output_path: Optional[Path],
  engine: JsxEngine,
  json_trace_path: Optional[Path] = None,
) -> LoweringResult:
  """
  Lowers a single ESTree JSON document.

  Args:
      input_path: Source JSON path.
      output_path: Destination JSON path, or None for stdout.
      engine: Configured engine.
      json_trace_path: Path to save trace event logs.

  Returns:
      LoweringResult: Result object containing status and tree.
  """
  try:
    with open(input_path, "rt", encoding="utf-8") as f:
      tree = json.load(f)
  except (OSError, json.JSONDecodeError) as e:
    log_error(f"Failed to read {input_path}: {e}")
    return LoweringResult(success=False, errors=[str(e)])

  result = engine.run(tree, name=str(input_path))

  if json_trace_path and result.trace_events:
    json_trace_path.parent.mkdir(parents=True, exist_ok=True)
    with open(json_trace_path, "wt", encoding="utf-8") as f:
      json.dump(result.trace_events, f, indent=2)
    log_info(f"Trace saved to [path]{json_trace_path}[/path]")

  if not result.success:
    log_error(f"Failed to convert {input_path}: {'; '.join(result.errors)}")
    return result

  output = json.dumps(result.tree, indent=2)
  if output_path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "wt", encoding="utf-8") as f:
      f.write(output + "\n")
    log_success(f"Lowered: [path]{input_path}[/path] -> [path]{output_path}[/path]")
  else:
    print(output)

  return result


def _print_batch_summary(results: Dict[str, LoweringResult]) -> None:
  """
  Renders a summary table of conversion results to the console.

  Args:
      results: Dictionary mapping filenames to lowering results.
  """
  total = len(results)
  failures = {name: res for name, res in results.items() if not res.success}

  if not failures:
    log_success(f"Batch Complete: {total}/{total} files lowered.")
    return

  table = Table(title="Lowering Report")
  table.add_column("File", style="cyan")
  table.add_column("Issues", style="red")

  for filename, res in failures.items():
    table.add_row(filename, "; ".join(res.errors) or "Unknown Error")

  console.print(table)
  console.print(f"\n[bold]Summary:[/bold] {total - len(failures)} Passed, {len(failures)} Failed.")

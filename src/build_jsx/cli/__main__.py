"""
Main Entry Point for the build-jsx CLI.

Parses arguments and dispatches to the command handlers in
`build_jsx.cli.handlers`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from build_jsx import __version__
from build_jsx.cli import handlers
from build_jsx.enums import Runtime
from build_jsx.utils.console import set_verbose


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(prog="build-jsx", description="build-jsx: lower JSX in ESTree programs")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: CONVERT ---
  cmd_conv = subparsers.add_parser("convert", help="Lower JSX in an ESTree JSON file or directory")
  cmd_conv.add_argument("path", type=Path, help="Input ESTree JSON file or directory")
  cmd_conv.add_argument("--out", type=Path, help="Output destination (file or dir); stdout if omitted")
  cmd_conv.add_argument(
    "--runtime",
    choices=[r.value for r in Runtime],
    default=None,
    help="Runtime to lower with (default: from toml, else classic)",
  )
  cmd_conv.add_argument("--pragma", default=None, help="Classic factory (default: React.createElement)")
  cmd_conv.add_argument("--pragma-frag", default=None, help="Classic fragment symbol (default: React.Fragment)")
  cmd_conv.add_argument("--import-source", default=None, help="Automatic runtime import source (default: react)")
  cmd_conv.add_argument(
    "--development",
    action="store_true",
    default=None,
    help="Use jsxDEV and pass source locations (automatic runtime)",
  )
  cmd_conv.add_argument("--file-path", default=None, help="File name reported to jsxDEV (default: the input path)")
  cmd_conv.add_argument(
    "--json-trace", type=Path, default=None, help="Dump the execution trace (events) to a JSON file."
  )

  args = parser.parse_args(argv)
  set_verbose(args.verbose)

  if args.command == "convert":
    overrides = {
      "runtime": args.runtime,
      "pragma": args.pragma,
      "pragma_frag": args.pragma_frag,
      "import_source": args.import_source,
      "development": args.development,
      "file_path": args.file_path,
    }
    return handlers.handle_convert(args.path, args.out, overrides, args.json_trace)

  return 0


if __name__ == "__main__":
  sys.exit(main())

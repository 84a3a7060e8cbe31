"""
Console and Logging Utilities.

All output of the command line goes to standard error through one
`rich.console.Console`, so that standard output stays reserved for the
lowered JSON. Library modules log with ``logging.getLogger(__name__)``; the
records reach the same console through a `RichHandler` on the root logger.

The module-level ``console`` is a stable proxy: :func:`set_console` swaps the
console behind it (e.g. for a recording console in tests) and moves the
handler along.

Attributes:
    console (_ConsoleProxy): Stable reference to the active Rich Console.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

LIBRARY_LOGGER = "build_jsx"

# Between INFO (20) and WARNING (30).
SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

_THEME = Theme(
  {
    "logging.level.success": "green",
    "path": "bold blue",
    "tag": "magenta",
    "callee": "cyan",
  }
)


def _new_console() -> Console:
  return Console(theme=_THEME, stderr=True)


def _install_handler(target: Console) -> None:
  """
  Points the root logger at `target`, replacing any previous RichHandler.

  Args:
      target (Console): Console that should receive log records.
  """
  root = logging.getLogger()
  for handler in [h for h in root.handlers if isinstance(h, RichHandler)]:
    root.removeHandler(handler)

  root.addHandler(RichHandler(console=target, show_time=False, show_path=False, markup=True, rich_tracebacks=True))
  root.setLevel(logging.INFO)


class _ConsoleProxy:
  """
  Forwards attribute access to the active `Console`.
  """

  def __init__(self) -> None:
    self.backend: Console = _new_console()
    _install_handler(self.backend)

  def use(self, target: Console) -> None:
    self.backend = target
    _install_handler(target)

  def print(self, *args: Any, **kwargs: Any) -> None:
    self.backend.print(*args, **kwargs)

  def export_text(self, **kwargs: Any) -> str:
    """Text recorded so far; the backend must be created with ``record=True``."""
    return self.backend.export_text(**kwargs)

  def __getattr__(self, name: str) -> Any:
    return getattr(self.backend, name)


console = _ConsoleProxy()


def set_console(new_console: Console) -> None:
  """
  Redirects console output and log records to `new_console`.

  Args:
      new_console (Console): The Rich console to use from now on.
  """
  console.use(new_console)


def reset_console() -> None:
  console.use(_new_console())


def get_console() -> Console:
  return console.backend


def set_verbose(verbose: bool) -> None:
  """
  Shows or hides debug records of the `build_jsx` loggers.

  The root logger stays at INFO so third-party debug output is never shown.

  Args:
      verbose (bool): True to show debug records.
  """
  logging.getLogger(LIBRARY_LOGGER).setLevel(logging.DEBUG if verbose else logging.NOTSET)


def _emit(level: int, msg: str) -> None:
  logging.log(level, msg, extra={"markup": True})


def log_info(msg: str) -> None:
  _emit(logging.INFO, msg)


def log_success(msg: str) -> None:
  _emit(SUCCESS_LEVEL_NUM, f"✅ {msg}")


def log_warning(msg: str) -> None:
  _emit(logging.WARNING, f"⚠️  {msg}")


def log_error(msg: str) -> None:
  """
  Reports a failure to the user.

  Args:
      msg (str): Message text; may contain rich markup such as ``[path]``.
  """
  _emit(logging.ERROR, f"❌ {msg}")

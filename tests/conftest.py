"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports (the package under `src/` and the
  ESTree builders in `estree_helpers.py`).
- Trace isolation so events from one test never leak into another.
"""

import sys
from pathlib import Path

import pytest

# Add src to path so we can import 'build_jsx' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))
sys.path.insert(0, str(Path(__file__).parent))

from build_jsx.core.tracer import reset_tracer  # noqa: E402


@pytest.fixture(autouse=True)
def isolate_tracer():
  """Gives every test a fresh global trace logger."""
  reset_tracer()
  yield
  reset_tracer()

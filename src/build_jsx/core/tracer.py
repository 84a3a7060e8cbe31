"""
Lowering Trace Logger.

Records what a lowering run did, as a flat list of events:

- phase boundaries (one phase per tree),
- the settings resolved from directives and options,
- every JSX element or fragment replaced by a call,
- the runtime import added to the program.

Events point to the phase they happened in through ``parent_id``, and
:meth:`TraceLogger.export` turns them into JSON-ready dicts.
"""

import time
import uuid
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class TraceEventType(str, Enum):
  PHASE_START = "phase_start"
  PHASE_END = "phase_end"
  SETTINGS = "settings"
  LOWERING = "lowering"
  IMPORT_ACTION = "import_action"


@dataclass
class TraceEvent:
  id: str
  type: TraceEventType
  timestamp: float
  description: str
  parent_id: Optional[str] = None
  metadata: Dict[str, Any] = field(default_factory=dict)


class TraceLogger:
  """
  Collects :class:`TraceEvent` records for one or more lowering runs.
  """

  def __init__(self):
    self._events: List[TraceEvent] = []
    self._open: List[str] = []

  def _record(self, kind: TraceEventType, description: str, metadata: Optional[Dict[str, Any]] = None, parent: Optional[str] = None) -> str:
    event = TraceEvent(
      id=uuid.uuid4().hex,
      type=kind,
      timestamp=time.time(),
      description=description,
      parent_id=parent if parent is not None else (self._open[-1] if self._open else None),
      metadata=metadata or {},
    )
    self._events.append(event)
    return event.id

  def start_phase(self, name: str, description: str = "") -> str:
    """
    Opens a phase; later events are attached to it until it is closed.

    Args:
        name: Phase label.
        description: Free-form detail, typically the file being lowered.

    Returns:
        str: The phase ID.
    """
    phase_id = self._record(TraceEventType.PHASE_START, name, {"detail": description})
    self._open.append(phase_id)
    return phase_id

  def end_phase(self):
    """Closes the innermost open phase, if any."""
    if self._open:
      phase_id = self._open.pop()
      self._record(TraceEventType.PHASE_END, "End Phase", parent=phase_id)

  def log_settings(self, settings: Dict[str, Any], annotations: Dict[str, Any]):
    self._record(
      TraceEventType.SETTINGS,
      f"Runtime: {settings.get('runtime')}",
      {"settings": settings, "annotations": annotations},
    )

  def log_lowering(self, node_type: str, callee: str, argument_count: int):
    self._record(
      TraceEventType.LOWERING,
      f"Lowered {node_type} -> {callee}(...)",
      {"node_type": node_type, "callee": callee, "arguments": argument_count},
    )

  def log_import(self, source: str, symbols: List[str]):
    self._record(TraceEventType.IMPORT_ACTION, f"Injected import from {source}", {"source": source, "symbols": symbols})

  def export(self) -> List[Dict[str, Any]]:
    """Returns the events as plain dicts, oldest first."""
    return [asdict(e) for e in self._events]


_GLOBAL_TRACER = TraceLogger()


def get_tracer() -> TraceLogger:
  return _GLOBAL_TRACER


def reset_tracer():
  global _GLOBAL_TRACER
  _GLOBAL_TRACER = TraceLogger()

"""
Tests for the Tracing System.
"""

from build_jsx.core.tracer import TraceEventType, TraceLogger, get_tracer, reset_tracer


def test_phase_nesting():
  logger = TraceLogger()

  p1 = logger.start_phase("Lowering", "a.json")
  logger.start_phase("Inner")
  logger.end_phase()  # End Inner
  logger.end_phase()  # End Lowering

  events = logger.export()

  assert len(events) == 4
  assert events[0]["type"] == TraceEventType.PHASE_START
  assert events[0]["metadata"] == {"detail": "a.json"}
  assert events[1]["parent_id"] == p1
  assert events[2]["type"] == TraceEventType.PHASE_END
  assert events[3]["parent_id"] == p1


def test_end_phase_without_start_is_ignored():
  logger = TraceLogger()
  logger.end_phase()
  assert logger.export() == []


def test_lowering_and_import_events_attach_to_phase():
  logger = TraceLogger()
  phase = logger.start_phase("Lowering")

  logger.log_lowering("JSXFragment", "_jsxs", 2)
  logger.log_import("react/jsx-runtime", ["Fragment", "jsxs"])

  lowering, injected = logger.export()[1:]
  assert lowering["type"] == TraceEventType.LOWERING
  assert lowering["parent_id"] == phase
  assert lowering["description"] == "Lowered JSXFragment -> _jsxs(...)"
  assert injected["type"] == TraceEventType.IMPORT_ACTION
  assert injected["metadata"] == {"source": "react/jsx-runtime", "symbols": ["Fragment", "jsxs"]}


def test_settings_event():
  logger = TraceLogger()
  logger.log_settings({"runtime": "classic", "pragma": "h"}, {"jsx": "h"})

  (event,) = logger.export()
  assert event["type"] == TraceEventType.SETTINGS
  assert event["description"] == "Runtime: classic"
  assert event["parent_id"] is None


def test_reset_replaces_global_tracer():
  before = get_tracer()
  before.log_import("react/jsx-runtime", ["jsx"])

  reset_tracer()

  assert get_tracer() is not before
  assert get_tracer().export() == []

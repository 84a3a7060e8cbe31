"""
Tests for the Lowering Engine wrapper and its trace output.
"""

import pytest

from build_jsx.core.engine import JsxEngine, LoweringResult, build_jsx
from build_jsx.core.tracer import TraceEventType, get_tracer
from build_jsx.errors import ConfigurationError
from estree_helpers import block_comment, first_expression, jsx_attr, jsx_element, jsx_spread, ident, program_of


def test_run_success():
  engine = JsxEngine({"runtime": "automatic"})

  result = engine.run(program_of(jsx_element("a")), name="a.json")

  assert isinstance(result, LoweringResult)
  assert result.success
  assert not result.has_errors
  assert first_expression(result.tree)["callee"]["name"] == "_jsx"


def test_run_failure_is_captured():
  tree = program_of(jsx_element("a", [jsx_spread(ident("b")), jsx_attr("key")]))

  result = JsxEngine({"runtime": "automatic"}).run(tree)

  assert not result.success
  assert result.tree is None
  assert result.errors == ["Expected `key` to come before any spread expressions"]


def test_trace_records_each_step():
  tree = program_of(jsx_element("a"), comments=[block_comment("@jsxRuntime automatic")])

  events = JsxEngine().run(tree, name="a.json").trace_events
  types = [e["type"] for e in events]

  assert types == [
    TraceEventType.PHASE_START,
    TraceEventType.SETTINGS,
    TraceEventType.LOWERING,
    TraceEventType.IMPORT_ACTION,
    TraceEventType.PHASE_END,
  ]
  assert events[0]["metadata"]["detail"] == "a.json"
  assert events[1]["metadata"]["settings"]["runtime"] == "automatic"
  assert events[1]["metadata"]["annotations"] == {"jsxRuntime": "automatic"}
  assert events[2]["metadata"] == {"node_type": "JSXElement", "callee": "_jsx", "arguments": 2}
  assert events[3]["metadata"]["symbols"] == ["jsx"]


def test_trace_is_reset_per_run():
  engine = JsxEngine()
  engine.run(program_of(jsx_element("a")))
  events = engine.run(program_of(jsx_element("b"))).trace_events
  assert sum(1 for e in events if e["type"] == TraceEventType.PHASE_START) == 1


def test_classic_trace_names_pragma():
  events = JsxEngine({"pragma": "h"}).run(program_of(jsx_element("a"))).trace_events
  lowering = [e for e in events if e["type"] == TraceEventType.LOWERING]
  assert lowering[0]["metadata"]["callee"] == "h"


def test_invalid_options_fail_early():
  with pytest.raises(ConfigurationError, match="Invalid build-jsx options"):
    JsxEngine({"development": "sometimes"})


def test_build_jsx_trace_holds_one_run():
  tree = program_of(jsx_element("a", [], [jsx_element("b")]))

  for _ in range(50):
    build_jsx(tree)

  types = [e["type"] for e in get_tracer().export()]
  assert types == [TraceEventType.SETTINGS, TraceEventType.LOWERING, TraceEventType.LOWERING]


@pytest.mark.parametrize("document", [{"compilerOptions": {"strict": True}}, [1, 2], "text"])
def test_run_rejects_non_estree_documents(document):
  result = JsxEngine().run(document, name="tsconfig.json")

  assert not result.success
  assert result.tree is None
  assert "Expected an ESTree node" in result.errors[0]

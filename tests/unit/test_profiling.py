"""Unit tests for the trace profiler."""

import json

import pytest

from eml_compiler import CompilerConfig, EMLCompiler
from eml_compiler.profiling import MeasureTime, Tracer


@pytest.fixture
def tracer(tmp_path):
    """Tracer writing into the test's temporary directory."""
    tracer = Tracer(str(tmp_path / "trace.json"))
    yield tracer
    tracer.finish()


class TestTracer:

    def test_measure_time_without_tracer_is_noop(self):
        with MeasureTime("parse") as measure:
            pass
        assert measure.tracer is None

    def test_measure_time_records_begin_end(self, tracer):
        with MeasureTime("parse", category="eml", tracer=tracer):
            pass
        assert [(e.name, e.ph, e.cat) for e in tracer.events] == [
            ("parse", "B", "eml"), ("parse", "E", "eml"),
        ]

    def test_trace_decorator(self, tracer):
        @MeasureTime.trace("work", tracer=tracer)
        def work():
            return 42

        assert work() == 42
        assert [e.ph for e in tracer.events] == ["B", "E"]

    def test_finish_writes_json(self, tracer, tmp_path):
        with MeasureTime("render", tracer=tracer):
            pass
        tracer.finish()
        data = json.loads((tmp_path / "trace.json").read_text())
        names = [event["name"] for event in data["traceEvents"]]
        assert names == ["process_name", "render", "render"]
        assert tracer.enabled is False

    def test_no_events_after_finish(self, tracer):
        tracer.finish()
        with MeasureTime("parse", tracer=tracer):
            pass
        assert len(tracer.events) == 0

    def test_events_capped(self, tmp_path):
        tracer = Tracer(str(tmp_path / "capped.json"), max_events=4)
        for _ in range(10):
            with MeasureTime("parse", tracer=tracer):
                pass
        assert len(tracer.events) == 4
        tracer.finish()

    def test_flush_clears_events(self, tracer, tmp_path):
        with MeasureTime("parse", tracer=tracer):
            pass
        tracer.flush()
        assert len(tracer.events) == 0
        assert (tmp_path / "trace.json").exists()


class TestCompilerTracing:

    def test_compiler_traces_phases(self, tmp_path):
        output = tmp_path / "trace.json"
        compiler = EMLCompiler(CompilerConfig(trace_file=str(output)))
        compiler.compile('<view grow="1">x</view>')
        begins = [e.name for e in compiler.tracer.events if e.ph == "B"]
        assert begins == ["parse", "transform", "render"]
        compiler.close()
        assert output.exists()

    def test_untraced_compiler_records_nothing(self, tmp_path):
        traced = EMLCompiler(CompilerConfig(trace_file=str(tmp_path / "trace.json")))
        plain = EMLCompiler()
        for _ in range(100):
            plain.compile('<view grow="1">x</view>')
        assert plain.tracer is None
        assert len(traced.tracer.events) == 0
        traced.close()

    def test_compilers_do_not_share_tracers(self, tmp_path):
        first = EMLCompiler(CompilerConfig(trace_file=str(tmp_path / "a.json")))
        second = EMLCompiler(CompilerConfig(trace_file=str(tmp_path / "b.json")))
        first.compile("<view>x</view>")
        assert first.tracer is not second.tracer
        assert len(second.tracer.events) == 0
        first.close()
        second.close()

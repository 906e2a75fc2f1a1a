"""
Chrome Tracing Format 프로파일러

트레이서는 전역 싱글톤이 아니다. trace_file이 지정된 EMLCompiler만 자기
Tracer를 가지며, 다른 컴파일러는 이벤트를 전혀 기록하지 않는다.

사용법:
    tracer = Tracer("trace.json")

    with MeasureTime("parse", category="eml", tracer=tracer):
        parse()

    tracer.finish()

결과 파일은 chrome://tracing 에서 열 수 있습니다.
"""
import atexit
import json
import logging
import threading
import time
from collections import deque
from functools import wraps
from typing import Any, Callable, Dict, Optional

from ..common.constants import DEFAULT_TRACE_FILE, MAX_TRACE_EVENTS

logger = logging.getLogger(__name__)


class TraceEvent:
    """Chrome Trace Event Format의 단일 이벤트"""

    def __init__(self, name: str, category: str, phase: str, timestamp: float,
                 thread_id: int, process_id: int, args: Optional[Dict[str, Any]] = None):
        self.name = name
        self.cat = category
        self.ph = phase  # 'B' = begin, 'E' = end
        self.ts = timestamp  # microseconds
        self.tid = thread_id
        self.pid = process_id
        self.args = args or {}

    def to_dict(self) -> Dict[str, Any]:
        event = {
            "name": self.name,
            "cat": self.cat,
            "ph": self.ph,
            "ts": self.ts,
            "tid": self.tid,
            "pid": self.pid,
        }
        if self.args:
            event["args"] = self.args
        return event


class Tracer:
    """이벤트 수집기 - 최근 max_events개만 보관하고 종료 시 JSON으로 저장"""

    def __init__(self, output_file: str = DEFAULT_TRACE_FILE,
                 max_events: int = MAX_TRACE_EVENTS):
        self.events = deque(maxlen=max_events)
        self.lock = threading.Lock()
        self.enabled = True
        self.start_time = time.perf_counter()
        self.output_file = output_file
        self.process_name = "EML Compiler"
        self.process_id = 1
        atexit.register(self.finish)

    def get_timestamp(self) -> float:
        return (time.perf_counter() - self.start_time) * 1_000_000

    def add_event(self, name: str, category: str, phase: str, args: Optional[Dict] = None):
        if not self.enabled:
            return
        event = TraceEvent(
            name=name,
            category=category,
            phase=phase,
            timestamp=self.get_timestamp(),
            thread_id=threading.get_ident(),
            process_id=self.process_id,
            args=args,
        )
        with self.lock:
            self.events.append(event)

    def begin(self, name: str, category: str = "function", args: Optional[Dict] = None):
        self.add_event(name, category, "B", args)

    def end(self, name: str, category: str = "function", args: Optional[Dict] = None):
        self.add_event(name, category, "E", args)

    def to_trace_data(self) -> Dict[str, Any]:
        with self.lock:
            events = [e.to_dict() for e in self.events]
        metadata = [{
            "name": "process_name",
            "ph": "M",
            "pid": self.process_id,
            "args": {"name": self.process_name},
        }]
        return {"traceEvents": metadata + events, "displayTimeUnit": "ms"}

    def flush(self):
        """지금까지의 이벤트를 파일로 저장하고 버퍼를 비움"""
        data = self.to_trace_data()
        with open(self.output_file, "w", encoding="utf-8") as f:
            json.dump(data, f)
        with self.lock:
            self.events.clear()
        logger.info("Trace saved to %s", self.output_file)

    def finish(self):
        """트레이스 종료 및 JSON 파일 저장"""
        if not self.enabled:
            return
        self.enabled = False
        atexit.unregister(self.finish)
        self.flush()


class MeasureTime:
    """시간 측정 컨텍스트 매니저 / 데코레이터 (tracer가 None이면 아무것도 하지 않음)"""

    def __init__(self, name: str, category: str = "function",
                 args: Optional[Dict] = None, tracer: Optional[Tracer] = None):
        self.name = name
        self.category = category
        self.args = args
        self.tracer = tracer

    def __enter__(self):
        if self.tracer is not None:
            self.tracer.begin(self.name, self.category, self.args)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.tracer is not None:
            self.tracer.end(self.name, self.category)
        return False

    @staticmethod
    def trace(name: str, category: str = "function",
              tracer: Optional[Tracer] = None) -> Callable:
        """데코레이터로 사용"""
        def decorator(func: Callable) -> Callable:
            @wraps(func)
            def wrapper(*args, **kwargs):
                with MeasureTime(name, category, tracer=tracer):
                    return func(*args, **kwargs)
            return wrapper
        return decorator

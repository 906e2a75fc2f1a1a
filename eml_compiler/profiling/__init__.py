from .measure_time import MeasureTime, Tracer, TraceEvent

__all__ = ['MeasureTime', 'Tracer', 'TraceEvent']

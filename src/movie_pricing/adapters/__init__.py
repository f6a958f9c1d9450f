from .log_sinks import JsonlLogSink, NullLogSink, StderrLogSink, build_log_sink

__all__ = ["JsonlLogSink", "NullLogSink", "StderrLogSink", "build_log_sink"]

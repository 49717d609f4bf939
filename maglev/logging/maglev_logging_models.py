from .models import Entry, LogLevel


class TableRebuilt(Entry, kw_only=True):
    backend_count: int
    table_size: int
    duration_ms: float
    level: LogLevel = LogLevel.DEBUG


class BackendAdded(Entry, kw_only=True):
    backend: str
    backend_count: int
    level: LogLevel = LogLevel.INFO


class BackendRemoved(Entry, kw_only=True):
    backend: str
    backend_count: int
    level: LogLevel = LogLevel.INFO


class MutationRejected(Entry, kw_only=True):
    operation: str
    backend: str
    reason: str
    level: LogLevel = LogLevel.WARN

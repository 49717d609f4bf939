from .logging_config import (
    LogFormat as LogFormat,
    LoggingConfig as LoggingConfig,
    LogOutput as LogOutput,
)
from .stream_type import StreamType as StreamType

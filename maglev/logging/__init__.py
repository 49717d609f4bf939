from .config import LoggingConfig as LoggingConfig
from .config import StreamType as StreamType
from .maglev_logging_models import (
    BackendAdded as BackendAdded,
    BackendRemoved as BackendRemoved,
    MutationRejected as MutationRejected,
    TableRebuilt as TableRebuilt,
)
from .models import Entry as Entry
from .models import Log as Log
from .models import LogLevel as LogLevel
from .models import LogLevelName as LogLevelName
from .streams import LoggerStream as LoggerStream

from __future__ import annotations

import sys
from typing import (
    Callable,
    TextIO,
    TypeVar,
)

from maglev.logging.config import LoggingConfig, StreamType
from maglev.logging.models import Entry, Log


T = TypeVar('T', bound=Entry)

DEFAULT_TEMPLATE = "{timestamp} - {level} - {thread_id} - {filename}:{function_name}.{line_number} - {message}"


class LoggerStream:
    def __init__(
        self,
        name: str | None = None,
        template: str | None = None,
    ) -> None:
        if name is None:
            name = "default"

        self._name = name
        self._default_template = template
        self._config = LoggingConfig()

    @property
    def name(self):
        return self._name

    def log(
        self,
        entry: T | Log[T],
        template: str | None = None,
        filter: Callable[[T], bool] | None = None,
    ) -> bool:
        if template is None:
            template = self._default_template

        return self._log(
            entry,
            template=template,
            filter=filter,
        )

    def _log(
        self,
        entry_or_log: T | Log[T],
        template: str | None = None,
        filter: Callable[[T], bool] | None = None,
    ) -> bool:

        entry: Entry = None
        if isinstance(entry_or_log, Log):
            entry = entry_or_log.entry

        else:
            entry = entry_or_log

        if self._config.enabled(self._name, entry.level) is False:
            return False

        if filter and filter(entry) is False:
            return False

        if isinstance(entry_or_log, Log):
            log = entry_or_log

        else:
            log_file, line_number, function_name = self._find_caller()
            log = Log(
                entry=entry,
                filename=log_file,
                function_name=function_name,
                line_number=line_number,
            )

        stream = self._get_stream()

        if self._config.format == 'json':
            stream.write(log.to_json() + "\n")

        else:
            if template is None:
                template = DEFAULT_TEMPLATE

            stream.write(
                entry.to_template(
                    template,
                    context=log.context(),
                )
                + "\n"
            )

        stream.flush()

        return True

    def _get_stream(self) -> TextIO:
        # Resolved per write so redirected/captured streams are honored.
        if self._config.output == StreamType.STDOUT:
            return sys.stdout

        return sys.stderr

    def _find_caller(self):
        """
        Find the stack frame of the caller so that we can note the source
        file name, line number and function name.
        """
        frame = sys._getframe(3)
        code = frame.f_code

        return (
            code.co_filename,
            frame.f_lineno,
            code.co_name,
        )

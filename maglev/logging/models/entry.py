from typing import Any, Dict

import msgspec
from msgspec import structs

from .log_level import LogLevel


class Entry(msgspec.Struct, kw_only=True):
    """
    Base log record. Subclasses add typed fields, all of which are
    available to templates by name alongside the caller context.
    """

    message: str | None = None
    tags: set[str] = msgspec.field(
        default_factory=set,
    )
    level: LogLevel

    def to_template(
        self,
        template: str,
        context: Dict[str, Any] | None = None,
    ) -> str:
        fields = structs.asdict(self)
        fields["level"] = self.level.value

        if context:
            fields.update(context)

        return template.format(**fields)

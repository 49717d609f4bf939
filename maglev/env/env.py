from __future__ import annotations

from typing import Callable, Dict, Literal, Union

from pydantic import BaseModel, StrictInt, StrictStr, field_validator

from maglev.hashing import HASH_FUNCTIONS
from maglev.logging.models import LogLevel

PrimaryType = Union[str, int, float, bytes, bool]


class Env(BaseModel):
    MAGLEV_TABLE_SIZE: StrictInt = 65537
    MAGLEV_HASH_FUNCTION: StrictStr = "sha256"
    MAGLEV_REMOVAL_POLICY: Literal["preserve", "swap"] = "preserve"
    MAGLEV_LOAD_FACTOR: StrictInt = 100
    MAGLEV_LOG_LEVEL: StrictStr = "info"
    MAGLEV_LOG_OUTPUT: Literal["stdout", "stderr"] = "stderr"
    MAGLEV_LOG_FORMAT: Literal["template", "json"] = "template"

    @field_validator("MAGLEV_HASH_FUNCTION")
    @classmethod
    def validate_hash_function(cls, value: str) -> str:
        if value.lower() not in HASH_FUNCTIONS:
            raise ValueError(
                f"MAGLEV_HASH_FUNCTION must be one of {sorted(HASH_FUNCTIONS)}, got {value!r}"
            )

        return value.lower()

    @field_validator("MAGLEV_LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        LogLevel.to_level(value)
        return value.lower()

    @field_validator("MAGLEV_LOAD_FACTOR")
    @classmethod
    def validate_load_factor(cls, value: int) -> int:
        if value < 1:
            raise ValueError(f"MAGLEV_LOAD_FACTOR must be >= 1, got {value}")

        return value

    @classmethod
    def types_map(cls) -> Dict[str, Callable[[str], PrimaryType]]:
        return {
            "MAGLEV_TABLE_SIZE": int,
            "MAGLEV_HASH_FUNCTION": str,
            "MAGLEV_REMOVAL_POLICY": str,
            "MAGLEV_LOAD_FACTOR": int,
            "MAGLEV_LOG_LEVEL": str,
            "MAGLEV_LOG_OUTPUT": str,
            "MAGLEV_LOG_FORMAT": str,
        }

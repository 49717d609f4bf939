"""
Maglev consistent hashing.

Provides:
- MaglevTable, a slot-to-backend lookup table with minimal remapping
  when backends join or leave
- Pluggable 64-bit backend hash functions
- Table size validation and sizing helpers
"""

from maglev.errors import (
    BackendNotFound as BackendNotFound,
    DuplicateBackend as DuplicateBackend,
    IndexOutOfRange as IndexOutOfRange,
    InvalidTableSize as InvalidTableSize,
    MaglevError as MaglevError,
    NoBackendsAvailable as NoBackendsAvailable,
    TableCapacityExceeded as TableCapacityExceeded,
    TableSizeMismatch as TableSizeMismatch,
    UnknownHashFunction as UnknownHashFunction,
)
from maglev.hashing import (
    HASH_FUNCTIONS as HASH_FUNCTIONS,
    BackendHasher as BackendHasher,
    get_hasher as get_hasher,
)
from maglev.table import (
    MaglevTable as MaglevTable,
    Permutation as Permutation,
    TableState as TableState,
    is_valid_table_size as is_valid_table_size,
    recommended_table_size as recommended_table_size,
)

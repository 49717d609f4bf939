"""
Exceptions raised by Maglev tables and their helpers.

Every error derives from MaglevError and from the builtin exception
closest to its meaning, so callers can catch either. A call that raises
leaves the table it was made on untouched.
"""


class MaglevError(Exception):
    """Base class for every error raised by the maglev package."""

    pass


class InvalidTableSize(MaglevError, ValueError):
    """
    Raised when a table size is not a prime in the range [2, 2**32).

    Primality guarantees every skip value is coprime to the table size,
    which makes each backend's permutation visit every slot exactly once.
    """

    def __init__(self, table_size: int) -> None:
        self.table_size = table_size
        super().__init__(
            f"Table size must be a prime below 2**32, got {table_size}"
        )


class DuplicateBackend(MaglevError, ValueError):
    """Raised when adding a backend that is already part of the table."""

    def __init__(self, backend: str) -> None:
        self.backend = backend
        super().__init__(f"Backend {backend!r} already exists")


class BackendNotFound(MaglevError, LookupError):
    """Raised when removing a backend the table does not hold."""

    def __init__(self, backend: str) -> None:
        self.backend = backend
        super().__init__(f"Backend {backend!r} not found")


class IndexOutOfRange(MaglevError, IndexError):
    """Raised when a lookup index falls outside [0, table_size)."""

    def __init__(self, index: int, table_size: int) -> None:
        self.index = index
        self.table_size = table_size
        super().__init__(
            f"Slot index {index} outside of range [0, {table_size})"
        )


class NoBackendsAvailable(MaglevError, LookupError):
    """Raised when looking up a slot on a table with no backends."""

    def __init__(self) -> None:
        super().__init__("No backends available")


class TableCapacityExceeded(MaglevError, ValueError):
    """
    Raised when a table would hold more backends than it has slots.

    Population only terminates while every backend can still claim a
    free slot, so the backend count may never exceed the table size.
    """

    def __init__(self, backend_count: int, table_size: int) -> None:
        self.backend_count = backend_count
        self.table_size = table_size
        super().__init__(
            f"Cannot place {backend_count} backends in a table of {table_size} slots"
        )


class TableSizeMismatch(MaglevError, ValueError):
    """Raised when comparing two tables of different sizes."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Cannot compare a table of {expected} slots with one of {actual} slots"
        )


class UnknownHashFunction(MaglevError, KeyError):
    """Raised when resolving a hash function name that is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown hash function {self.name!r}"

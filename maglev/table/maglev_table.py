"""
Maglev Table - consistent slot-to-backend lookup table.

Implements the lookup table from Google's Maglev load balancer. Each
backend derives its own permutation of the slots from a hash of its
identifier, then backends take turns claiming their most preferred free
slot until the table is full.

Key properties:
- Consistent: a slot resolves to the same backend for as long as the
  backend list is unchanged, in every process holding the same list
- Balanced: each backend owns close to table_size / N slots
- Minimal disruption: adding or removing one backend remaps close to
  table_size / N slots

Callers map their own request keys into [0, table_size) and look the
resulting index up here.
"""

from __future__ import annotations

import time
from typing import Iterable, Literal

from maglev.env import Env, configure_logging, load_env
from maglev.errors import (
    BackendNotFound,
    DuplicateBackend,
    MaglevError,
    TableCapacityExceeded,
    TableSizeMismatch,
)
from maglev.hashing import BackendHasher, resolve_hasher
from maglev.logging import (
    BackendAdded,
    BackendRemoved,
    LoggerStream,
    MutationRejected,
    TableRebuilt,
)

from .permutation import Permutation, generate_permutations
from .populator import populate
from .table_size import (
    DEFAULT_TABLE_SIZE,
    recommended_table_size,
    validate_table_size,
)
from .table_state import TableState


RemovalPolicy = Literal["preserve", "swap"]


class MaglevTable:
    """
    Maglev lookup table over an ordered list of backends.

    Every mutation rebuilds the whole table into a new TableState and
    publishes it with a single assignment. Mutations are expected to come
    from one owner; readers may keep the TableState returned by snapshot().

    Example usage:
        table = MaglevTable(["backend-1", "backend-2", "backend-3"], 65537)

        # Route a request
        slot = stable_hash(request_key) % table.table_size
        backend = table.lookup(slot)

        # Membership changes
        table.add_backend("backend-4")
        table.remove_backend("backend-2")
    """

    def __init__(
        self,
        backends: Iterable[str] = (),
        table_size: int = DEFAULT_TABLE_SIZE,
        hash_function: str | BackendHasher | None = None,
        removal_policy: RemovalPolicy = "preserve",
        logger: LoggerStream | None = None,
    ) -> None:
        """
        Initialize MaglevTable.

        Args:
            backends: Initial backends, in priority order.
            table_size: Number of slots. Must be prime.
            hash_function: Registered hash function name or a callable
                           returning a stable 64-bit integer. Defaults to
                           "sha256".
            removal_policy: "preserve" keeps the surviving backends in
                            order on removal. "swap" moves the last backend
                            into the removed one's position.
            logger: Stream for table events. Defaults to a stream named
                    "maglev".

        Raises:
            InvalidTableSize: If table_size is not prime.
            DuplicateBackend: If backends lists an identifier twice.
            TableCapacityExceeded: If there are more backends than slots.
            UnknownHashFunction: If hash_function names no registered hash.
        """
        if removal_policy not in ("preserve", "swap"):
            raise ValueError(
                f"removal_policy must be 'preserve' or 'swap', got {removal_policy!r}"
            )

        self._table_size = validate_table_size(table_size)
        self._hash_name, self._hasher = resolve_hasher(hash_function)
        self._removal_policy: RemovalPolicy = removal_policy

        if logger is None:
            logger = LoggerStream(name="maglev")

        self._logger = logger

        initial_backends = tuple(backends)
        seen: set[str] = set()
        for backend in initial_backends:
            if backend in seen:
                raise DuplicateBackend(backend)

            seen.add(backend)

        self._state = self._build(initial_backends)

    @classmethod
    def from_env(
        cls,
        backends: Iterable[str] = (),
        env: Env | None = None,
        logger: LoggerStream | None = None,
    ) -> MaglevTable:
        """
        Build a table from MAGLEV_* settings.

        Loads the settings from the environment and a .env file when env
        is not given. When MAGLEV_TABLE_SIZE is not set explicitly and
        backends is non-empty, the table is sized with
        recommended_table_size(len(backends), MAGLEV_LOAD_FACTOR).

        The MAGLEV_LOG_* settings are applied through configure_logging()
        before building, which changes the logging level, output and format
        for every LoggerStream in the current context, not only this table's.
        """
        if env is None:
            env = load_env(Env)

        configure_logging(env)

        backends = tuple(backends)

        table_size = env.MAGLEV_TABLE_SIZE
        if "MAGLEV_TABLE_SIZE" not in env.model_fields_set and backends:
            table_size = recommended_table_size(
                len(backends),
                load_factor=env.MAGLEV_LOAD_FACTOR,
            )

        return cls(
            backends,
            table_size=table_size,
            hash_function=env.MAGLEV_HASH_FUNCTION,
            removal_policy=env.MAGLEV_REMOVAL_POLICY,
            logger=logger,
        )

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def table_size(self) -> int:
        return self._table_size

    @property
    def backends(self) -> tuple[str, ...]:
        return self._state.backends

    @property
    def backend_count(self) -> int:
        return len(self._state.backends)

    @property
    def hash_function(self) -> str:
        return self._hash_name

    @property
    def removal_policy(self) -> RemovalPolicy:
        return self._removal_policy

    def __len__(self) -> int:
        return len(self._state.backends)

    def __contains__(self, backend: object) -> bool:
        return backend in self._state.backends

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(backends={list(self._state.backends)!r}, "
            f"table_size={self._table_size})"
        )

    def contains(self, backend: str) -> bool:
        """Check if a backend is part of the table."""
        return backend in self._state.backends

    # =========================================================================
    # Lookup Operations
    # =========================================================================

    def lookup(self, slot_index: int) -> str:
        """
        Get the backend owning a slot.

        Args:
            slot_index: Slot in [0, table_size).

        Returns:
            The owning backend identifier.

        Raises:
            IndexOutOfRange: If slot_index is outside [0, table_size).
            NoBackendsAvailable: If the table holds no backends.
        """
        return self._state.lookup(slot_index)

    def lookup_index(self, slot_index: int) -> int:
        """Position of the owning backend in the backend list."""
        return self._state.lookup_index(slot_index)

    def snapshot(self) -> TableState:
        """The current immutable table state, safe to hand to readers."""
        return self._state

    def slot_owners(self) -> list[str | None]:
        return self._state.owners().tolist()

    def permutation(self, backend: str) -> Permutation:
        """Preference ordering of a backend in this table."""
        if backend not in self._state.backends:
            raise BackendNotFound(backend)

        return Permutation.from_backend(backend, self._table_size, self._hasher)

    # =========================================================================
    # Backend Management
    # =========================================================================

    def add_backend(self, backend: str) -> None:
        """
        Append a backend and rebuild the table.

        Raises:
            DuplicateBackend: If the backend is already present.
            TableCapacityExceeded: If the table has no room for it.
        """
        current = self._state

        if backend in current.backends:
            raise self._rejected("add", backend, DuplicateBackend(backend))

        if len(current.backends) + 1 > self._table_size:
            raise self._rejected(
                "add",
                backend,
                TableCapacityExceeded(len(current.backends) + 1, self._table_size),
            )

        self._state = self._build(current.backends + (backend,))

        self._logger.log(
            BackendAdded(
                message=f"Added backend {backend}",
                backend=backend,
                backend_count=len(self._state.backends),
            )
        )

    def remove_backend(self, backend: str) -> None:
        """
        Remove a backend and rebuild the table.

        Raises:
            BackendNotFound: If the backend is not present.
        """
        current = self._state

        if backend not in current.backends:
            raise self._rejected("remove", backend, BackendNotFound(backend))

        remaining = list(current.backends)
        position = remaining.index(backend)

        if self._removal_policy == "swap":
            remaining[position] = remaining[-1]
            remaining.pop()

        else:
            del remaining[position]

        self._state = self._build(tuple(remaining))

        self._logger.log(
            BackendRemoved(
                message=f"Removed backend {backend}",
                backend=backend,
                backend_count=len(self._state.backends),
            )
        )

    # =========================================================================
    # Statistics
    # =========================================================================

    def get_distribution(self) -> dict[str, int]:
        """
        Get the number of slots each backend owns.

        Returns:
            Dict mapping backend -> owned slot count, zero included.
        """
        return self._state.slot_counts()

    def count_changed_slots(self, other: MaglevTable | TableState) -> int:
        """
        Count slots resolving to a different backend in another table.

        Owners are compared by identifier, not by position, so a backend
        that moved in the list still counts as the same owner.

        Raises:
            TableSizeMismatch: If the tables differ in size.
        """
        other_state = other.snapshot() if isinstance(other, MaglevTable) else other

        if other_state.table_size != self._table_size:
            raise TableSizeMismatch(self._table_size, other_state.table_size)

        return int((self._state.owners() != other_state.owners()).sum())

    def get_table_info(self) -> dict:
        """Get information about the table state."""
        return {
            "table_size": self._table_size,
            "backend_count": len(self._state.backends),
            "hash_function": self._hash_name,
            "removal_policy": self._removal_policy,
            "backends": self._state.slot_counts(),
        }

    # =========================================================================
    # Internal Methods
    # =========================================================================

    def _build(self, backends: tuple[str, ...]) -> TableState:
        start = time.monotonic()

        permutations = generate_permutations(
            backends,
            self._table_size,
            self._hasher,
        )
        slots = populate(permutations, self._table_size)

        state = TableState(backends=backends, slots=slots)

        self._logger.log(
            TableRebuilt(
                message=f"Rebuilt table of {self._table_size} slots for {len(backends)} backends",
                backend_count=len(backends),
                table_size=self._table_size,
                duration_ms=round((time.monotonic() - start) * 1000, 3),
            )
        )

        return state

    def _rejected(
        self,
        operation: str,
        backend: str,
        error: MaglevError,
    ) -> MaglevError:
        self._logger.log(
            MutationRejected(
                message=f"Rejected {operation} of backend {backend}: {error}",
                operation=operation,
                backend=backend,
                reason=type(error).__name__,
            )
        )

        return error

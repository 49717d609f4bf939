"""
Per-backend preference orderings over the slots of a Maglev table.

Each backend's ordering is the arithmetic sequence

    permutation[j] = (offset + j * skip) mod table_size

with offset and skip derived from the backend's 64-bit digest. With a
prime table size every skip in [1, table_size - 1] is coprime to it, so
the sequence visits every slot exactly once. Permutations depend only on
their own backend, which is what keeps the remaining backends' preferences
unchanged when another backend joins or leaves.
"""

from dataclasses import dataclass
from typing import Iterator, Sequence

import numpy as np

from maglev.hashing import BackendHasher, hash64


@dataclass(slots=True, frozen=True)
class Permutation:
    """A backend's full preference ordering over table slots."""

    backend: str
    offset: int
    skip: int
    table_size: int

    @classmethod
    def from_backend(
        cls,
        backend: str,
        table_size: int,
        hasher: BackendHasher,
    ) -> "Permutation":
        digest = hash64(backend, hasher)

        offset = (digest >> 32) % table_size
        skip = (digest & 0xFFFFFFFF) % (table_size - 1) + 1

        return cls(
            backend=backend,
            offset=offset,
            skip=skip,
            table_size=table_size,
        )

    def __len__(self) -> int:
        return self.table_size

    def __getitem__(self, position: int) -> int:
        if position < 0:
            position += self.table_size

        if not 0 <= position < self.table_size:
            raise IndexError(
                f"Permutation position {position} outside of range [0, {self.table_size})"
            )

        return (self.offset + position * self.skip) % self.table_size

    def __iter__(self) -> Iterator[int]:
        slot = self.offset
        for _ in range(self.table_size):
            yield slot
            slot += self.skip
            if slot >= self.table_size:
                slot -= self.table_size

    def to_array(self) -> np.ndarray:
        # table_size < 2**32 keeps offset + j * skip below 2**64.
        positions = np.arange(self.table_size, dtype=np.uint64)
        return (
            np.uint64(self.offset) + positions * np.uint64(self.skip)
        ) % np.uint64(self.table_size)


def generate_permutations(
    backends: Sequence[str],
    table_size: int,
    hasher: BackendHasher,
) -> list[Permutation]:
    return [
        Permutation.from_backend(backend, table_size, hasher)
        for backend in backends
    ]

import operator
from dataclasses import dataclass

import numpy as np

from maglev.errors import IndexOutOfRange, NoBackendsAvailable


@dataclass(slots=True, frozen=True)
class TableState:
    """
    An immutable pairing of a backend sequence and its populated slots.

    MaglevTable publishes a new TableState on every rebuild rather than
    editing the current one, so a reference held by a reader always
    describes a fully populated table.
    """

    backends: tuple[str, ...]
    slots: np.ndarray

    @property
    def table_size(self) -> int:
        return len(self.slots)

    def lookup_index(self, slot_index: int) -> int:
        slot_index = operator.index(slot_index)

        if not 0 <= slot_index < len(self.slots):
            raise IndexOutOfRange(slot_index, len(self.slots))

        if not self.backends:
            raise NoBackendsAvailable()

        return int(self.slots[slot_index])

    def lookup(self, slot_index: int) -> str:
        return self.backends[self.lookup_index(slot_index)]

    def owners(self) -> np.ndarray:
        """Backend identifier of every slot, as an object array."""
        if not self.backends:
            return np.full(len(self.slots), None, dtype=object)

        return np.asarray(self.backends, dtype=object)[self.slots]

    def slot_counts(self) -> dict[str, int]:
        counts = np.bincount(
            self.slots[self.slots >= 0],
            minlength=len(self.backends),
        )

        return {
            backend: int(count)
            for backend, count in zip(self.backends, counts)
        }

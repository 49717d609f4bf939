from typing import Sequence

import numpy as np

from maglev.errors import TableCapacityExceeded

from .permutation import Permutation


UNOWNED = -1


def populate(
    permutations: Sequence[Permutation],
    table_size: int,
) -> np.ndarray:
    """
    Assign every slot to a backend by round-robin preference satisfaction.

    Backends take turns in list order. On its turn a backend walks its
    permutation from where it last stopped until it reaches a slot nobody
    has claimed, claims it, and yields the turn. Order therefore breaks
    ties within a round; it does not fix each backend's total share.

    Args:
        permutations: One permutation per backend, in backend order.
        table_size: Number of slots (prime).

    Returns:
        A read-only int64 array of length table_size holding the owning
        backend's position for every slot, or UNOWNED everywhere when
        there are no backends.

    Raises:
        TableCapacityExceeded: If there are more backends than slots.
    """
    backend_count = len(permutations)
    if backend_count > table_size:
        raise TableCapacityExceeded(backend_count, table_size)

    entries = [UNOWNED] * table_size

    if backend_count > 0:
        offsets = [permutation.offset for permutation in permutations]
        skips = [permutation.skip for permutation in permutations]

        # Cursor per backend, stored as the slot it will try next.
        cursors = list(offsets)
        claimed = 0

        while claimed < table_size:
            for backend_index in range(backend_count):
                skip = skips[backend_index]
                slot = cursors[backend_index]

                while entries[slot] != UNOWNED:
                    slot = (slot + skip) % table_size

                entries[slot] = backend_index
                cursors[backend_index] = (slot + skip) % table_size

                claimed += 1
                if claimed == table_size:
                    break

    slots = np.array(entries, dtype=np.int64)
    slots.flags.writeable = False

    return slots

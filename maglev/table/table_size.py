import operator

from sympy import isprime, nextprime

from maglev.errors import InvalidTableSize


MAX_TABLE_SIZE = 2**32 - 1

DEFAULT_TABLE_SIZE = 65537

DEFAULT_LOAD_FACTOR = 100


def is_valid_table_size(table_size: int) -> bool:
    if isinstance(table_size, bool):
        return False

    try:
        table_size = operator.index(table_size)
    except TypeError:
        return False

    return table_size <= MAX_TABLE_SIZE and bool(isprime(table_size))


def validate_table_size(table_size: int) -> int:
    if not is_valid_table_size(table_size):
        raise InvalidTableSize(table_size)

    return operator.index(table_size)


def recommended_table_size(
    backend_count: int,
    load_factor: int = DEFAULT_LOAD_FACTOR,
) -> int:
    """
    Smallest prime strictly greater than backend_count * load_factor.

    Maglev's per-backend share only gets close to table_size / N when the
    table is much larger than the backend set, so the usual choice is a
    load factor around 100.

    Args:
        backend_count: Expected number of backends (>= 0).
        load_factor: Slots wanted per backend (>= 1).

    Returns:
        A prime table size, at least 2.

    Raises:
        ValueError: If either argument is out of range.
        InvalidTableSize: If the result does not fit below 2**32.
    """
    if backend_count < 0:
        raise ValueError(f"backend_count must be >= 0, got {backend_count}")

    if load_factor < 1:
        raise ValueError(f"load_factor must be >= 1, got {load_factor}")

    table_size = int(nextprime(backend_count * load_factor))
    return validate_table_size(table_size)

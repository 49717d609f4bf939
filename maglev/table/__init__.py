"""Maglev lookup table construction and maintenance."""

from maglev.table.maglev_table import (
    MaglevTable as MaglevTable,
    RemovalPolicy as RemovalPolicy,
)
from maglev.table.permutation import (
    Permutation as Permutation,
    generate_permutations as generate_permutations,
)
from maglev.table.populator import (
    UNOWNED as UNOWNED,
    populate as populate,
)
from maglev.table.table_size import (
    DEFAULT_LOAD_FACTOR as DEFAULT_LOAD_FACTOR,
    DEFAULT_TABLE_SIZE as DEFAULT_TABLE_SIZE,
    MAX_TABLE_SIZE as MAX_TABLE_SIZE,
    is_valid_table_size as is_valid_table_size,
    recommended_table_size as recommended_table_size,
    validate_table_size as validate_table_size,
)
from maglev.table.table_state import TableState as TableState

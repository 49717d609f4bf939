import pytest

from maglev.errors import InvalidTableSize
from maglev.table import (
    MAX_TABLE_SIZE,
    is_valid_table_size,
    recommended_table_size,
    validate_table_size,
)


class TestTableSizeValidation:
    @pytest.mark.parametrize("table_size", [2, 3, 11, 13, 10007, 65537, 4294967291])
    def test_primes_are_valid(self, table_size: int):
        assert is_valid_table_size(table_size)
        assert validate_table_size(table_size) == table_size

    @pytest.mark.parametrize("table_size", [-7, 0, 1, 4, 50, 65536, 65535, MAX_TABLE_SIZE])
    def test_non_primes_are_invalid(self, table_size: int):
        assert not is_valid_table_size(table_size)

        with pytest.raises(InvalidTableSize) as error:
            validate_table_size(table_size)

        assert error.value.table_size == table_size
        assert isinstance(error.value, ValueError)

    def test_primes_above_32_bits_are_invalid(self):
        assert not is_valid_table_size(4294967311)

    @pytest.mark.parametrize("table_size", [11.0, "11", True, None])
    def test_non_integers_are_invalid(self, table_size):
        assert not is_valid_table_size(table_size)


class TestRecommendedTableSize:
    def test_is_next_prime_after_load(self):
        assert recommended_table_size(3) == 307
        assert recommended_table_size(10, load_factor=1) == 11

    def test_empty_backend_set(self):
        assert recommended_table_size(0) == 2

    def test_result_is_valid(self):
        for backend_count in range(1, 50):
            table_size = recommended_table_size(backend_count)
            assert is_valid_table_size(table_size)
            assert table_size > backend_count * 100

    def test_rejects_negative_backend_count(self):
        with pytest.raises(ValueError):
            recommended_table_size(-1)

    def test_rejects_zero_load_factor(self):
        with pytest.raises(ValueError):
            recommended_table_size(3, load_factor=0)

    def test_rejects_sizes_beyond_32_bits(self):
        with pytest.raises(InvalidTableSize):
            recommended_table_size(2**32, load_factor=1)

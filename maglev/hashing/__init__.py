"""Backend identifier hash functions."""

from maglev.hashing.backend_hashers import (
    DEFAULT_HASH_FUNCTION as DEFAULT_HASH_FUNCTION,
    HASH_FUNCTIONS as HASH_FUNCTIONS,
    BackendHasher as BackendHasher,
    HashFunctionName as HashFunctionName,
    blake2b_64 as blake2b_64,
    get_hasher as get_hasher,
    hash64 as hash64,
    md5_64 as md5_64,
    resolve_hasher as resolve_hasher,
    sha256_64 as sha256_64,
    xxh64 as xxh64,
)

"""
Stable 64-bit hash functions for backend identifiers.

Permutations are derived from these digests, so every process routing
with the same backend list must use the same function. None of these
depend on per-process randomization (unlike the builtin ``hash``).
"""

import hashlib
from typing import Callable, Literal

import xxhash

from maglev.errors import UnknownHashFunction


BackendHasher = Callable[[str], int]

HashFunctionName = Literal["sha256", "md5", "blake2b", "xxh64"]

DEFAULT_HASH_FUNCTION: HashFunctionName = "sha256"

MASK_64 = 0xFFFFFFFFFFFFFFFF


def sha256_64(backend: str) -> int:
    digest = hashlib.sha256(backend.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], byteorder="big")


def md5_64(backend: str) -> int:
    digest = hashlib.md5(backend.encode("utf-8"), usedforsecurity=False).digest()
    return int.from_bytes(digest[:8], byteorder="big")


def blake2b_64(backend: str) -> int:
    digest = hashlib.blake2b(backend.encode("utf-8"), digest_size=8).digest()
    return int.from_bytes(digest, byteorder="big")


def xxh64(backend: str) -> int:
    return xxhash.xxh64_intdigest(backend.encode("utf-8"))


HASH_FUNCTIONS: dict[str, BackendHasher] = {
    "sha256": sha256_64,
    "md5": md5_64,
    "blake2b": blake2b_64,
    "xxh64": xxh64,
}


def get_hasher(name: str) -> BackendHasher:
    """
    Resolve a registered hash function by name.

    Args:
        name: One of the keys of HASH_FUNCTIONS (case-insensitive).

    Returns:
        The hash function.

    Raises:
        UnknownHashFunction: If no function is registered under the name.
    """
    hasher = HASH_FUNCTIONS.get(name.lower())
    if hasher is None:
        raise UnknownHashFunction(name)

    return hasher


def resolve_hasher(
    hash_function: str | BackendHasher | None,
) -> tuple[str, BackendHasher]:
    """Return a (name, function) pair for a name, a callable or None."""
    if hash_function is None:
        hash_function = DEFAULT_HASH_FUNCTION

    if isinstance(hash_function, str):
        return hash_function.lower(), get_hasher(hash_function)

    name = getattr(hash_function, "__name__", type(hash_function).__name__)
    return name, hash_function


def hash64(backend: str, hasher: BackendHasher) -> int:
    """Apply a hasher and clamp its output to an unsigned 64-bit integer."""
    return hasher(backend) & MASK_64

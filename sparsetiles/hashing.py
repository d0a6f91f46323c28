"""
Stateless hashing of coordinate vectors into [0, size).

Two strategies are available
* content_hash: BLAKE2b over the exact integer sequence. Stable across processes, platforms and PYTHONHASHSEED
* UNHHash: the legacy UNH CMAC scheme that sums entries of a 2048-long random table. The table is owned by the
    instance and drawn from an explicit seed, so two instances with the same seed agree
"""
import hashlib
import struct
from typing import Callable, Optional, Sequence

import numpy as np

HashFunctionT = Callable[[Sequence[int]], int]

UNH_TABLE_SIZE = 2048
UNH_INCREMENT = 449

_INT64_OFFSET = 1 << 63
_UINT64_RANGE = 1 << 64


def content_hash(coordinates: Sequence[int]) -> int:
    """ Unsigned 64-bit digest of the coordinates. Order and value matter, nothing else does """
    digest = hashlib.blake2b(digest_size=8)
    for c in coordinates:
        c = int(c)
        n_bytes = (c.bit_length() + 8) // 8
        digest.update(struct.pack('!I', n_bytes))
        digest.update(c.to_bytes(n_bytes, 'big', signed=True))
    return int.from_bytes(digest.digest(), 'big')


class UNHHash:
    """ Legacy hashing with a random lookup table, kept for reproducing indices of older experiments """

    def __init__(self, seed: Optional[int] = None, increment: int = UNH_INCREMENT) -> None:
        self.seed = seed
        self.increment = increment
        rng = np.random.default_rng(seed)
        info = np.iinfo(np.int64)
        self.table = tuple(int(x) for x in rng.integers(info.min, info.max, size=UNH_TABLE_SIZE,
                                                          dtype=np.int64, endpoint=True))

    def __call__(self, coordinates: Sequence[int]) -> int:
        """ Sum table entries picked by each displaced coordinate, with 64-bit wrap-around """
        total = 0
        for i, c in enumerate(coordinates):
            total += self.table[(int(c) + self.increment * i) & (UNH_TABLE_SIZE - 1)]
        return (total + _INT64_OFFSET) % _UINT64_RANGE - _INT64_OFFSET

    def __repr__(self):
        return f'UNHHash(seed={self.seed}, increment={self.increment})'


def check_size(size: int) -> None:
    """ Size of the index space has to be a positive integer """
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        raise TypeError(f'Size should be an integer, got {type(size).__name__}')
    if size < 1:
        raise ValueError(f'Size should be at least 1, got {size}')


def hash_index(coordinates: Sequence[int], size: int, hash_function: Optional[HashFunctionT] = None) -> int:
    """
    Map coordinates into [0, size). No state is kept, so distinct coordinates may collide.
    content_hash is 64-bit, so when size is larger than 2 ** 64 only the bottom 2 ** 64 indices are ever returned
    """
    check_size(size)
    if hash_function is None:
        hash_function = content_hash
    # Python modulo is non-negative for a positive divisor even when the hash is negative
    return int(hash_function(coordinates)) % int(size)

"""
Index hash table (IHT): bounded, insertion-ordered assignment of coordinate vectors to dense indices
"""
from __future__ import annotations
import logging
import threading
from typing import Dict, Optional, Sequence, Tuple

from sparsetiles.hashing import HashFunctionT, check_size, content_hash

logger = logging.getLogger(__name__)


class IndexHashTable:
    """
    Assign 0, 1, 2, ... to coordinate vectors in the order they are first seen.
    * Assigned indices never change and are never evicted
    * Once capacity is reached, unseen vectors are hashed into [0, capacity) instead of being stored.
        These overflow indices collide with stored ones, which degrades features but never raises
    """

    def __init__(self, capacity: int, hash_function: Optional[HashFunctionT] = None) -> None:
        check_size(capacity)
        self._capacity = int(capacity)
        self.hash_function = content_hash if hash_function is None else hash_function
        self.overflow_count = 0
        # Rely on the feature of dict that it preserves insertion order
        self.dictionary: Dict[Tuple[int, ...], int] = {}
        self._lock = threading.Lock()

    def lookup_or_insert(self, coordinates: Sequence[int]) -> int:
        """ Return the stored index, assigning the next free one if there is room """
        key = tuple(coordinates)
        with self._lock:
            index = self.dictionary.get(key)
            if index is not None:
                return index

            count = len(self.dictionary)
            if count < self._capacity:
                self.dictionary[key] = count
                return count

            if self.overflow_count == 0:
                logger.warning('Index hash table of capacity %d is full, starting to allow collisions', self._capacity)
            self.overflow_count += 1
        return int(self.hash_function(key)) % self._capacity

    def lookup_read_only(self, coordinates: Sequence[int]) -> Optional[int]:
        """ Return the stored index or None. Never inserts and never falls back to hashing """
        return self.dictionary.get(tuple(coordinates))

    def getindex(self, coordinates: Sequence[int], readonly: bool = False) -> Optional[int]:
        if readonly:
            return self.lookup_read_only(coordinates)
        return self.lookup_or_insert(coordinates)

    def is_full(self) -> bool:
        """ Whether every index has been assigned """
        return len(self.dictionary) >= self._capacity

    # ========== Properties ==========
    @property
    def count(self) -> int:
        """ Number of distinct coordinate vectors stored """
        return len(self.dictionary)

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self):
        return len(self.dictionary)

    def __contains__(self, coordinates) -> bool:
        return tuple(coordinates) in self.dictionary

    def __str__(self):
        return (f'IndexHashTable(capacity={self._capacity}, count={self.count}, '
                f'overflow_count={self.overflow_count})')

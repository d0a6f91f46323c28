"""
Entry points that turn floats (and optional integer tags) into num_tilings feature indices.

The first argument selects the index engine
* IndexHashTable: bounded and stateful, dense indices in first-seen order
* int: unbounded and stateless, indices hashed into [0, size)
* None: no engine, the raw coordinate vectors are returned
"""
import logging
from typing import Iterable, List, Optional, Sequence, Union

import numpy as np

from sparsetiles.coordinates import CoordinatesT, WrapWidthsT, check_wrap_width_values, tiling_coordinates
from sparsetiles.hashing import HashFunctionT, check_size, hash_index
from sparsetiles.index_hash_table import IndexHashTable
from sparsetiles.quantizer import check_num_tilings

logger = logging.getLogger(__name__)

IndexEngineT = Union[IndexHashTable, int, None]


def _assign_indices(iht_or_size: IndexEngineT, coordinates: List[CoordinatesT], readonly: bool,
                    hash_function: Optional[HashFunctionT] = None) -> list:
    if isinstance(iht_or_size, IndexHashTable):
        return [iht_or_size.getindex(coords, readonly) for coords in coordinates]
    if isinstance(iht_or_size, (int, np.integer)) and not isinstance(iht_or_size, bool):
        return [hash_index(coords, iht_or_size, hash_function) for coords in coordinates]
    if iht_or_size is None:
        return coordinates
    raise TypeError(f'Expected an IndexHashTable, an integer size or None, got {type(iht_or_size).__name__}')


def tiles(iht_or_size: IndexEngineT, num_tilings: int, floats: Sequence[float], ints: Iterable[int] = (),
          readonly: bool = False) -> list:
    """
    Return one index per tiling for the given point.
    With an IndexHashTable and readonly=True, unseen tiles come back as None and the table is left untouched.
    """
    return _assign_indices(iht_or_size, tiling_coordinates(num_tilings, floats, None, ints), readonly)


def tiles_wrap(iht_or_size: IndexEngineT, num_tilings: int, floats: Sequence[float],
               wrap_widths: Sequence[Optional[int]], ints: Iterable[int] = (), readonly: bool = False) -> list:
    """ Same as tiles, but float i is cyclic with period wrap_widths[i] (None or 0 means no wrapping) """
    return _assign_indices(iht_or_size, tiling_coordinates(num_tilings, floats, wrap_widths, ints), readonly)


class TileCoder:
    """
    Tile coder that remembers its index engine, number of tilings and wrap widths.
    * Pass an int for a stateless coder over [0, size) or an IndexHashTable for dense indices
    * hash_function only applies to the stateless engine. IndexHashTable owns its own fallback hash
    """

    def __init__(self, iht_or_size: Union[IndexHashTable, int], num_tilings: int, wrap_widths: WrapWidthsT = None,
                 hash_function: Optional[HashFunctionT] = None) -> None:
        if isinstance(iht_or_size, IndexHashTable):
            if hash_function is not None:
                raise ValueError('hash_function should be given to the IndexHashTable, not the TileCoder')
        else:
            check_size(iht_or_size)
        check_num_tilings(num_tilings)
        if wrap_widths is not None:
            check_wrap_width_values(wrap_widths)

        self.iht_or_size = iht_or_size
        self.num_tilings = num_tilings
        self.wrap_widths = None if wrap_widths is None else tuple(wrap_widths)
        self.hash_function = hash_function
        logger.debug('Created TileCoder with %d tilings over %d features', num_tilings, self.num_features)

    def coordinates(self, floats: Sequence[float], ints: Iterable[int] = ()) -> List[CoordinatesT]:
        """ Coordinate vectors of the active tiles, before index assignment """
        return tiling_coordinates(self.num_tilings, floats, self.wrap_widths, ints)

    def tile(self, floats: Sequence[float], ints: Iterable[int] = ()) -> List[int]:
        """ Active feature indices, one per tiling """
        return _assign_indices(self.iht_or_size, self.coordinates(floats, ints), False, self.hash_function)

    def tile_read_only(self, floats: Sequence[float], ints: Iterable[int] = ()) -> List[Optional[int]]:
        """ Same as tile, but never grows the IndexHashTable """
        return _assign_indices(self.iht_or_size, self.coordinates(floats, ints), True, self.hash_function)

    # ========== Properties ==========
    @property
    def num_features(self) -> int:
        """ Length of the weight vector a consumer needs """
        if isinstance(self.iht_or_size, IndexHashTable):
            return self.iht_or_size.capacity
        return int(self.iht_or_size)

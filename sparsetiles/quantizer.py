"""
Quantize floats into integer tile-width units.

After quantization one unit equals 1 / num_tilings of a tile, so tilings can be displaced from each other by
whole units.
"""
import math
from fractions import Fraction
from typing import Sequence, Tuple

import numpy as np


def check_num_tilings(num_tilings: int) -> None:
    """ Number of tilings has to be a positive integer """
    if isinstance(num_tilings, bool) or not isinstance(num_tilings, (int, np.integer)):
        raise TypeError(f'num_tilings should be an integer, got {type(num_tilings).__name__}')
    if num_tilings < 1:
        raise ValueError(f'num_tilings should be at least 1, got {num_tilings}')


def _as_python_number(value):
    if isinstance(value, np.floating):
        return float(value)
    if isinstance(value, np.integer):
        return int(value)
    return value


def quantize(values: Sequence[float], num_tilings: int) -> Tuple[int, ...]:
    """
    Return floor(x * num_tilings) for each value.
    * Floor goes toward negative infinity, so negative coordinates land in the correct tile
    * Results are python ints so that coordinate vectors hash the same no matter where the floats came from
    * Floats whose product overflows, and integers of any size, are floored exactly instead of through float64
    """
    check_num_tilings(num_tilings)
    flat = [_as_python_number(v) for v in np.asarray(values, dtype=object).reshape(-1).tolist()]
    for value in flat:
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError(f'Values should be finite, got {flat}')

    if all(isinstance(value, float) for value in flat):
        with np.errstate(over='ignore'):
            scaled = np.asarray(flat, dtype=np.float64) * num_tilings
        if np.all(np.isfinite(scaled)):
            return tuple(int(x) for x in np.floor(scaled))
    return tuple(math.floor(Fraction(value) * int(num_tilings)) for value in flat)

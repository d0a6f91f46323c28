"""
Generate the integer coordinates of the active tile in each tiling.

Tilings are displaced from each other by the odd-number scheme: tiling t is shifted by t * (2i + 1) quantized units
along dimension i. The tiling index leads every coordinate vector so that different tilings never share a tile.
"""
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from sparsetiles.quantizer import check_num_tilings, quantize

CoordinatesT = Tuple[int, ...]
WrapWidthsT = Optional[Sequence[Optional[int]]]


def _is_integer(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def check_wrap_width_values(wrap_widths: Sequence[Optional[int]]) -> None:
    """ None or 0 means that dimension does not wrap, anything else has to be a positive integer """
    for width in wrap_widths:
        if width is None:
            continue
        if not _is_integer(width):
            raise TypeError(f'Wrap width should be an integer or None, got {width!r}')
        if width < 0:
            raise ValueError(f'Wrap width should be positive, or None/0 for no wrap, got {width}')


def check_wrap_widths(wrap_widths: Sequence[Optional[int]], num_dims: int) -> None:
    """ One width per continuous dimension """
    if len(wrap_widths) != num_dims:
        raise ValueError(f'Expected {num_dims} wrap widths (one per float), got {len(wrap_widths)}')
    check_wrap_width_values(wrap_widths)


def check_discrete_tags(discrete_tags: Iterable[int]) -> Tuple[int, ...]:
    """ Tags are appended verbatim, so they have to be integers already """
    tags = tuple(discrete_tags)
    for tag in tags:
        if not _is_integer(tag):
            raise TypeError(f'Discrete tags should be integers, got {tag!r}')
    return tuple(int(tag) for tag in tags)


def generate_coordinates(tiling_index: int, num_tilings: int, quantized: Sequence[int],
                         wrap_widths: WrapWidthsT = None, discrete_tags: Iterable[int] = ()) -> CoordinatesT:
    """
    Coordinate vector of the active tile in one tiling.
    * Output is (tiling_index, c_0, ..., c_{d-1}, *discrete_tags)
    * On a wrapped dimension the displacement is reduced modulo num_tilings before it is added. This keeps the wrap
        boundary at the same place for every tiling so that values near 0 and near the width generalize together
    """
    check_num_tilings(num_tilings)
    if not 0 <= tiling_index < num_tilings:
        raise ValueError(f'Tiling index {tiling_index} is out of range for {num_tilings} tilings')
    if wrap_widths is not None:
        check_wrap_widths(wrap_widths, len(quantized))

    tiling_index = int(tiling_index)
    num_tilings = int(num_tilings)
    coordinates = [tiling_index]
    displacement = tiling_index
    step = tiling_index * 2
    for i, q in enumerate(quantized):
        q = int(q)
        width = None if wrap_widths is None else wrap_widths[i]
        if width:
            coordinates.append(((q + displacement % num_tilings) // num_tilings) % int(width))
        else:
            coordinates.append((q + displacement) // num_tilings)
        displacement += step
    coordinates.extend(check_discrete_tags(discrete_tags))
    return tuple(coordinates)


def tiling_coordinates(num_tilings: int, floats: Sequence[float], wrap_widths: WrapWidthsT = None,
                       discrete_tags: Iterable[int] = ()) -> List[CoordinatesT]:
    """ Coordinate vectors for all tilings, in tiling order """
    quantized = quantize(floats, num_tilings)
    tags = check_discrete_tags(discrete_tags)
    return [generate_coordinates(tiling, num_tilings, quantized, wrap_widths, tags) for tiling in range(num_tilings)]

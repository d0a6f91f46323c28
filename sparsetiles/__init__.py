"""
Reference:
* Sutton & Barto, Reinforcement Learning: An Introduction, section 9.5.4 (tile coding)
* http://incompleteideas.net/tiles/tiles3.html

Roughly
* Tile coding lays num_tilings overlapping grids over the input space. Each grid is displaced from its neighbour
    by a fraction of a tile, so a point activates exactly one tile per grid
* The active tiles form a sparse binary feature vector. A linear approximator sums the weights of the active tiles
* Generalization happens between points that share tiles. Points closer than 1 / num_tilings of a tile share
    every tile; points further than a full tile apart share none
* Floats are gridded at unit intervals, so any scaling has to be done before calling tiles
* num_tilings should be a power of 2 and at least 4 times the number of floats for the displacement to work well
"""
from sparsetiles.quantizer import quantize
from sparsetiles.coordinates import generate_coordinates, tiling_coordinates
from sparsetiles.hashing import content_hash, hash_index, UNHHash
from sparsetiles.index_hash_table import IndexHashTable
from sparsetiles.tiles import tiles, tiles_wrap, TileCoder

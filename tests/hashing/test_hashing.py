"""
Tests for sparsetiles/hashing.py
"""
import os
import subprocess
import sys
from pathlib import Path

import numpy as np
import pytest

from sparsetiles.hashing import UNHHash, content_hash, hash_index


def test_content_hash():
    """ Pure function of the exact integer sequence """
    assert content_hash((0, 1, 2)) == content_hash([0, 1, 2])
    assert content_hash((0, 1, 2)) == content_hash(np.array([0, 1, 2]))
    assert content_hash((0, 1, 2)) != content_hash((0, 2, 1))
    assert content_hash((0, 1)) != content_hash((0, 1, 0))
    assert content_hash((-1,)) != content_hash((255,))
    assert 0 <= content_hash((10 ** 30, -10 ** 30)) < 2 ** 64


def test_content_hash_is_stable_across_processes():
    """ Hash does not depend on PYTHONHASHSEED """
    root = Path(__file__).resolve().parents[2]
    code = 'from sparsetiles.hashing import content_hash; print(content_hash((3, -7, 12)))'
    outputs = set()
    for seed in ('0', '1', '12345'):
        env = dict(os.environ, PYTHONHASHSEED=seed)
        result = subprocess.run([sys.executable, '-c', code], cwd=root, env=env, capture_output=True, text=True,
                                check=True)
        outputs.add(int(result.stdout.strip()))
    assert outputs == {content_hash((3, -7, 12))}


def test_hash_index():
    """ Indices are deterministic and always in [0, size) """
    for size in (1, 7, 32, 2048, 2 ** 100):
        for coords in ((0, 0), (1, -5), (7, 10 ** 12), (3,)):
            index = hash_index(coords, size)
            assert 0 <= index < size
            assert index == hash_index(coords, size)
            if size > 2 ** 64:
                assert index < 2 ** 64

    assert hash_index((1, 2), 1) == 0


def test_hash_index_custom_function():
    """ Negative hashes still map into range """
    assert hash_index((1, 2), 3, hash_function=lambda coords: -5) == 1
    assert hash_index((1, 2), 10, hash_function=lambda coords: 42) == 2


def test_hash_index_invalid_size():
    """ Size has to be a positive integer """
    with pytest.raises(ValueError, match='Size should be at least 1, got 0'):
        hash_index((0,), 0)

    with pytest.raises(TypeError):
        hash_index((0,), 32.0)

    with pytest.raises(TypeError):
        hash_index((0,), True)


def test_unh_hash_table():
    """ Table is owned by the instance and reproducible from the seed """
    unh = UNHHash(seed=1)
    assert len(unh.table) == 2048
    assert all(-2 ** 63 <= x < 2 ** 63 for x in unh.table)
    assert unh.table == UNHHash(seed=1).table
    assert unh.table != UNHHash(seed=2).table
    assert repr(unh) == 'UNHHash(seed=1, increment=449)'


def test_unh_hash():
    """ Sum of table entries picked by displaced coordinates """
    unh = UNHHash(seed=1)
    assert unh((3,)) == unh.table[3]
    assert unh((-1,)) == unh.table[2047]
    assert unh((5, 0)) == _wrap(unh.table[5] + unh.table[449])
    assert unh((0, 2048 - 449)) == _wrap(unh.table[0] + unh.table[0])

    # Overflow wraps around like 64-bit integers
    unh.table = (2 ** 62,) * 2048
    assert unh((0, 0)) == -2 ** 63
    assert unh((0, 0, 0)) == -2 ** 62


def test_unh_hash_index():
    """ Legacy strategy plugs into hash_index """
    unh = UNHHash(seed=7)
    other = UNHHash(seed=7)
    for coords in ((0, 0), (1, -5), (2, 10 ** 12)):
        index = hash_index(coords, 32, unh)
        assert 0 <= index < 32
        assert index == hash_index(coords, 32, other)


def _wrap(value):
    return (value + 2 ** 63) % 2 ** 64 - 2 ** 63

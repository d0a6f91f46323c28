"""
Time tile coding for small and large index spaces, with and without an IndexHashTable
"""
import time

from sparsetiles import IndexHashTable, TileCoder, UNHHash


def bench(name: str, coder: TileCoder, point, n_iters: int = 100_000) -> None:
    start_time = time.perf_counter()
    for _ in range(n_iters):
        coder.tile(point)
    elapsed = time.perf_counter() - start_time
    print(f'{name:<45} {elapsed / n_iters * 1e6:8.2f} us/call')


if __name__ == '__main__':
    for size in (32, 2048):
        for point in ([0.0], [0.0, 1.0, 2.0, 3.0]):
            bench(f'hash size={size} dims={len(point)}', TileCoder(size, 8), point)
            bench(f'unh size={size} dims={len(point)}', TileCoder(size, 8, hash_function=UNHHash(seed=0)), point)
            bench(f'iht capacity={size} dims={len(point)}', TileCoder(IndexHashTable(size), 8), point)

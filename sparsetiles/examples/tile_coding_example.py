from sparsetiles import IndexHashTable, tiles, tiles_wrap


iht = IndexHashTable(128)

# Features on a 2D grid. Neighbouring points share most of their tiles
for i in range(10):
    for j in range(10):
        point = [4 * 0.1 * i, 4 * 0.1 * j]
        print(f'{[round(0.1 * i, 1), round(0.1 * j, 1)]}: {tiles(iht, 4, point)}')

print(tiles(iht, 4, [0.0, 0.0]))
print(tiles(iht, 4, [0.9, 0.999]))
print(tiles(iht, 4, [4 * 0.98, 4 * 0.999]))

# Angle in [0, 2pi) scaled to 8 tiles per revolution, wrapping at 8
print(tiles_wrap(iht, 4, [0.1, 1.0], [8, None]))
print(tiles_wrap(iht, 4, [8.1, 1.0], [8, None]))

# Separate tiles per action
for action in range(3):
    print(f'Action {action}: {tiles(iht, 4, [1.0, 1.0], [action])}')

print(iht)

import functools


@functools.cache
def init_neighbors(n: int) -> tuple[tuple[int, ...], ...]:
    """Neighbors of each cell on an NxN board, as flat row-major indices.

    Each list is in row-major order within the cell's 3x3 neighborhood.
    """

    def idx(row: int, col: int):
        return n * row + col

    def pos(idx: int):
        return (idx // n, idx % n)

    ns: list[tuple[int, ...]] = []
    for i in range(0, n * n):
        row, col = pos(i)
        out = []
        for dr in range(-1, 2):
            nr = row + dr
            if nr < 0 or nr >= n:
                continue
            for dc in range(-1, 2):
                nc = col + dc
                if nc < 0 or nc >= n:
                    continue
                if dr == 0 and dc == 0:
                    continue
                out.append(idx(nr, nc))
        ns.append(tuple(out))
    return tuple(ns)


def is_adjacent(a: tuple[int, int], b: tuple[int, int]) -> bool:
    dr = abs(a[0] - b[0])
    dc = abs(a[1] - b[1])
    return dr <= 1 and dc <= 1 and (dr, dc) != (0, 0)

"""Graph traversals and grid flood problems."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Sequence

_FOUR_WAYS = ((-1, 0), (0, -1), (0, 1), (1, 0))
_EIGHT_WAYS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)

LAND = "1"
EMPTY, FRESH, ROTTEN = 0, 1, 2


def _require_vertices(adj: Sequence[Sequence[int]]) -> None:
    if not adj:
        raise ValueError("the graph has no vertices")


def dfs_order(adj: Sequence[Sequence[int]]) -> list[int]:
    """Vertices reachable from vertex 0, in depth-first order.

    Neighbours are explored in the order the adjacency list gives them.
    Raises ValueError for a graph without vertices.
    """
    _require_vertices(adj)
    visited = [False] * len(adj)
    visited[0] = True
    order = [0]
    stack: list[Iterator[int]] = [iter(adj[0])]
    while stack:
        for neighbour in stack[-1]:
            if not visited[neighbour]:
                visited[neighbour] = True
                order.append(neighbour)
                stack.append(iter(adj[neighbour]))
                break
        else:
            stack.pop()
    return order


def bfs_order(adj: Sequence[Sequence[int]]) -> list[int]:
    """Vertices reachable from vertex 0, in breadth-first order.

    Raises ValueError for a graph without vertices.
    """
    _require_vertices(adj)
    visited = [False] * len(adj)
    visited[0] = True
    order: list[int] = []
    queue: deque[int] = deque([0])
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adj[node]:
            if not visited[neighbour]:
                visited[neighbour] = True
                queue.append(neighbour)
    return order


def count_provinces(is_connected: Sequence[Sequence[int]]) -> int:
    """Number of connected groups in an adjacency matrix; links count both ways."""
    size = len(is_connected)
    neighbours: list[list[int]] = [[] for _ in range(size)]
    for i, row in enumerate(is_connected):
        for j, linked in enumerate(row):
            if linked == 1 and i != j:
                neighbours[i].append(j)
                neighbours[j].append(i)
    visited = [False] * size
    provinces = 0
    for start in range(size):
        if visited[start]:
            continue
        provinces += 1
        visited[start] = True
        stack = [start]
        while stack:
            for neighbour in neighbours[stack.pop()]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append(neighbour)
    return provinces


def count_islands(grid: Sequence[Sequence[str]], diagonal: bool = False) -> int:
    """Number of islands of '1' cells in a rectangular grid.

    Cells join sideways and vertically, and also across corners when diagonal is true.
    """
    if not grid:
        return 0
    rows, cols = len(grid), len(grid[0])
    offsets = _EIGHT_WAYS if diagonal else _FOUR_WAYS
    seen: set[tuple[int, int]] = set()
    islands = 0
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell != LAND or (r, c) in seen:
                continue
            islands += 1
            seen.add((r, c))
            queue: deque[tuple[int, int]] = deque([(r, c)])
            while queue:
                cr, cc = queue.popleft()
                for dr, dc in offsets:
                    nr, nc = cr + dr, cc + dc
                    if (
                        0 <= nr < rows
                        and 0 <= nc < cols
                        and (nr, nc) not in seen
                        and grid[nr][nc] == LAND
                    ):
                        seen.add((nr, nc))
                        queue.append((nr, nc))
    return islands


def flood_fill(
    image: Sequence[Sequence[int]], sr: int, sc: int, color: int
) -> list[list[int]]:
    """A copy of image with the region of (sr, sc) repainted in color.

    The region is every cell of the starting colour joined to it sideways or
    vertically. Raises IndexError when (sr, sc) lies outside the image.
    """
    result = [list(row) for row in image]
    if not (0 <= sr < len(result) and 0 <= sc < len(result[sr])):
        raise IndexError(f"pixel ({sr}, {sc}) is outside the image")
    initial = result[sr][sc]
    if initial == color:
        return result
    rows, cols = len(result), len(result[0])
    result[sr][sc] = color
    stack = [(sr, sc)]
    while stack:
        r, c = stack.pop()
        for dr, dc in _FOUR_WAYS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < rows and 0 <= nc < cols and result[nr][nc] == initial:
                result[nr][nc] = color
                stack.append((nr, nc))
    return result


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Minutes until no fresh orange is left, or -1 if some can never rot.

    Cells hold 0 (empty), 1 (fresh) or 2 (rotten); rot spreads sideways and
    vertically one cell per minute. The grid passed in is left unchanged.
    """
    cells = [list(row) for row in grid]
    rows = len(cells)
    cols = len(cells[0]) if rows else 0
    frontier: list[tuple[int, int]] = []
    fresh = 0
    for r, row in enumerate(cells):
        for c, cell in enumerate(row):
            if cell == ROTTEN:
                frontier.append((r, c))
            elif cell == FRESH:
                fresh += 1
    if fresh == 0:
        return 0
    minutes = 0
    while frontier:
        following: list[tuple[int, int]] = []
        for r, c in frontier:
            for dr, dc in _FOUR_WAYS:
                nr, nc = r + dr, c + dc
                if 0 <= nr < rows and 0 <= nc < cols and cells[nr][nc] == FRESH:
                    cells[nr][nc] = ROTTEN
                    fresh -= 1
                    following.append((nr, nc))
        if following:
            minutes += 1
        frontier = following
    return -1 if fresh > 0 else minutes
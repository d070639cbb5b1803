"""Graph algorithms: two-colouring, minimum spanning trees and traversal."""

from __future__ import annotations

import heapq
import math
from collections import defaultdict, deque
from collections.abc import Hashable, Iterable

__all__ = ["is_bipartite", "prim_mst", "bfs"]


def _check_vertex(vertex: int, vertices: int) -> None:
    if not 0 <= vertex < vertices:
        raise ValueError(f"vertex {vertex} outside 0..{vertices - 1}")


def is_bipartite(vertices: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Whether the undirected graph on ``0..vertices-1`` can be two-coloured."""
    neighbours: list[list[int]] = [[] for _ in range(vertices)]
    for a, b in edges:
        _check_vertex(a, vertices)
        _check_vertex(b, vertices)
        neighbours[a].append(b)
        neighbours[b].append(a)

    colours: list[int | None] = [None] * vertices
    for start in range(vertices):
        if colours[start] is not None:
            continue
        colours[start] = 1
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for other in neighbours[node]:
                if colours[other] is None:
                    colours[other] = 1 - colours[node]
                    queue.append(other)
                elif colours[other] == colours[node]:
                    return False
    return True


def prim_mst(
    vertices: int, edges: Iterable[tuple[int, int, int]], source: int
) -> list[tuple[int, int]]:
    """Minimum spanning tree of a connected weighted graph, by Prim's algorithm.

    ``edges`` holds ``(a, b, weight)`` triples. The tree comes back as
    ``(parent, vertex)`` pairs for every vertex except ``source``, in vertex
    order. A graph that is not connected raises ValueError.
    """
    _check_vertex(source, vertices)
    neighbours: list[list[tuple[int, int]]] = [[] for _ in range(vertices)]
    for a, b, weight in edges:
        _check_vertex(a, vertices)
        _check_vertex(b, vertices)
        neighbours[a].append((b, weight))
        neighbours[b].append((a, weight))

    key = [math.inf] * vertices
    parent: list[int | None] = [None] * vertices
    in_tree = [False] * vertices
    key[source] = 0
    heap = [(0, source)]
    while heap:
        _, node = heapq.heappop(heap)
        if in_tree[node]:
            continue
        in_tree[node] = True
        for other, weight in neighbours[node]:
            if not in_tree[other] and key[other] > weight:
                key[other] = weight
                parent[other] = node
                heapq.heappush(heap, (weight, other))

    unreached = [vertex for vertex, seen in enumerate(in_tree) if not seen]
    if unreached:
        raise ValueError(f"graph is not connected; unreachable: {unreached}")
    return [(parent[v], v) for v in range(vertices) if v != source]


def bfs(edges: Iterable[tuple[Hashable, Hashable]], start: Hashable = 1) -> list[Hashable]:
    """Vertices reachable from ``start`` in breadth-first order.

    Neighbours are visited in the order their edges were given.
    """
    neighbours: defaultdict[Hashable, list[Hashable]] = defaultdict(list)
    for a, b in edges:
        neighbours[a].append(b)
        neighbours[b].append(a)

    seen = {start}
    order: list[Hashable] = []
    queue = deque([start])
    while queue:
        node = queue.popleft()
        order.append(node)
        for other in neighbours[node]:
            if other not in seen:
                seen.add(other)
                queue.append(other)
    return order
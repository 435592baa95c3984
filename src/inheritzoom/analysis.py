"""Post-extraction graph analysis (cycle detection, neighborhoods)."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

from inheritzoom.model import InheritanceGraph


def _adjacency(graph: InheritanceGraph) -> dict[str, list[str]]:
    adjacency: dict[str, list[str]] = {node_id: [] for node_id in graph.nodes}
    for edge in graph.edges:
        if edge.source in adjacency and edge.target in adjacency:
            adjacency[edge.source].append(edge.target)
    return adjacency


def find_cycles(graph: InheritanceGraph) -> list[list[str]]:
    """Return strongly-connected components of size ≥ 2 using Tarjan's algorithm.

    Each returned list is a group of type names that inherit from each other
    through a chain of edges — only possible with broken input, but reported
    rather than rejected. Edges to undeclared types are ignored.
    """
    adjacency = _adjacency(graph)
    index: dict[str, int] = {}
    lowlink: dict[str, int] = {}
    on_stack: set[str] = set()
    stack: list[str] = []
    sccs: list[list[str]] = []
    counter = [0]

    def _visit(v: str) -> None:
        index[v] = lowlink[v] = counter[0]
        counter[0] += 1
        stack.append(v)
        on_stack.add(v)

        for w in adjacency[v]:
            if w not in index:
                _visit(w)
                lowlink[v] = min(lowlink[v], lowlink[w])
            elif w in on_stack:
                lowlink[v] = min(lowlink[v], index[w])

        if lowlink[v] == index[v]:
            scc: list[str] = []
            while True:
                w = stack.pop()
                on_stack.discard(w)
                scc.append(w)
                if w == v:
                    break
            if len(scc) >= 2:
                sccs.append(scc)

    for v in adjacency:
        if v not in index:
            _visit(v)

    return sccs


@dataclass(frozen=True)
class NeighborInfo:
    """A type reached from the focus type by :func:`neighborhood`."""

    name: str
    distance: int
    method_count: int  # cumulative along the discovery path
    relation: str | None = None  # None for the start node


def neighborhood(
    graph: InheritanceGraph, start: str, max_depth: int
) -> dict[str, NeighborInfo]:
    """Breadth-first walk from *start*, following edges in both directions.

    Stops at *max_depth* hops. Edges followed against their direction get
    ``" (reverse)"`` appended to the relation. Raises KeyError if *start* is
    not a node.
    """
    if start not in graph.nodes:
        raise KeyError(start)

    start_count = len(graph.nodes[start].methods)
    results = {start: NeighborInfo(start, 0, start_count)}
    queue = deque([(start, 0, start_count)])

    while queue:
        current, distance, method_count = queue.popleft()
        if distance >= max_depth:
            continue

        for edge in graph.edges:
            if edge.source == current:
                other, relation = edge.target, edge.relation
            elif edge.target == current:
                other, relation = edge.source, f"{edge.relation} (reverse)"
            else:
                continue
            if other in results or other not in graph.nodes:
                continue

            count = method_count + len(graph.nodes[other].methods)
            results[other] = NeighborInfo(other, distance + 1, count, relation)
            queue.append((other, distance + 1, count))

    return results

"""Graphs over vertices numbered ``0 .. vertices - 1``, stored as adjacency lists or maps."""

from __future__ import annotations

__all__ = ["Graph", "WeightedGraph", "WeightedMapGraph"]


def _check_count(vertices: int) -> None:
    if vertices < 0:
        raise ValueError(f"vertex count must not be negative, got {vertices}")


def _check_vertex(vertex: int, count: int) -> None:
    if not 0 <= vertex < count:
        raise IndexError(f"vertex {vertex} is outside 0..{count - 1}")


class Graph:
    """An unweighted graph kept as one neighbour list per vertex."""

    def __init__(self, vertices: int) -> None:
        _check_count(vertices)
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def add_edge(self, src: int, dest: int, bidirectional: bool = True) -> None:
        """Add the edge ``src -> dest``, and ``dest -> src`` too when bidirectional."""
        _check_vertex(src, len(self))
        _check_vertex(dest, len(self))
        self._adjacency[src].append(dest)
        if bidirectional:
            self._adjacency[dest].append(src)

    def has_path(self, src: int, dest: int) -> bool:
        """Return whether ``dest`` can be reached from ``src`` along the edges."""
        _check_vertex(src, len(self))
        _check_vertex(dest, len(self))
        if src == dest:
            return True
        visited = {src}
        stack = [src]
        while stack:
            current = stack.pop()
            for neighbour in self._adjacency[current]:
                if neighbour == dest:
                    return True
                if neighbour not in visited:
                    visited.add(neighbour)
                    stack.append(neighbour)
        return False

    def dfs_order(self, start: int) -> list[int]:
        """Return the depth-first visiting order from ``start``.

        Neighbours are visited in ascending order, so the result does not
        depend on the order in which edges were added.
        """
        _check_vertex(start, len(self))
        ordered = [sorted(neighbours) for neighbours in self._adjacency]
        visited = {start}
        order = [start]
        stack = [iter(ordered[start])]
        while stack:
            for neighbour in stack[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    stack.append(iter(ordered[neighbour]))
                    break
            else:
                stack.pop()
        return order

    def lines(self) -> list[str]:
        """Return one ``"v->n , n , "`` line per vertex."""
        return [
            f"{vertex}->" + "".join(f"{neighbour} , " for neighbour in neighbours)
            for vertex, neighbours in enumerate(self._adjacency)
        ]


class WeightedGraph:
    """A weighted graph kept as one list of ``(neighbour, weight)`` pairs per vertex."""

    def __init__(self, vertices: int) -> None:
        _check_count(vertices)
        self._adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertices)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def add_edge(self, src: int, dest: int, weight: int, bidirectional: bool = True) -> None:
        """Add the edge ``src -> dest`` with ``weight``, and its reverse when bidirectional."""
        _check_vertex(src, len(self))
        _check_vertex(dest, len(self))
        self._adjacency[src].append((dest, weight))
        if bidirectional:
            self._adjacency[dest].append((src, weight))

    def lines(self) -> list[str]:
        """Return one ``"v->(n w)(n w)"`` line per vertex."""
        return [
            f"{vertex}->" + "".join(f"({dest} {weight})" for dest, weight in edges)
            for vertex, edges in enumerate(self._adjacency)
        ]


class WeightedMapGraph:
    """A weighted graph kept as one ``{neighbour: weight}`` map per vertex."""

    def __init__(self, vertices: int) -> None:
        _check_count(vertices)
        self._adjacency: list[dict[int, int]] = [{} for _ in range(vertices)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def add_edge(self, src: int, dest: int, weight: int, bidirectional: bool = True) -> None:
        """Set the weight of the edge ``src -> dest``.

        Only the forward entry is recorded, whatever ``bidirectional`` says;
        setting the same pair again replaces its weight.
        """
        _check_vertex(src, len(self))
        _check_vertex(dest, len(self))
        self._adjacency[src][dest] = weight

    def lines(self) -> list[str]:
        """Return one ``"v->(n w)(n w)"`` line per vertex."""
        return [
            f"{vertex}->" + "".join(f"({dest} {weight})" for dest, weight in edges.items())
            for vertex, edges in enumerate(self._adjacency)
        ]
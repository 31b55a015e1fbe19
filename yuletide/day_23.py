"""LAN Party: triangles and the largest clique in a network of computers."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable
from itertools import combinations

from yuletide.day import Part
from yuletide.errors import InvalidInputError
from yuletide.input import Input

_log = logging.getLogger(__name__)

_LETTERS = 26
_T = ord("t") - ord("a")


def _label_to_id(label: str) -> int:
    if len(label) != 2 or not all("a" <= ch <= "z" for ch in label):
        raise InvalidInputError(f"invalid computer name: {label!r}")
    return (ord(label[0]) - ord("a")) * _LETTERS + ord(label[1]) - ord("a")


def _label_from_id(node: int) -> str:
    high, low = divmod(node, _LETTERS)
    return chr(ord("a") + high) + chr(ord("a") + low)


class Network:
    """Computers joined by undirected connections."""

    def __init__(self, connections: Iterable[tuple[str, str]]) -> None:
        self._edges: defaultdict[int, list[int]] = defaultdict(list)
        self._links: set[tuple[int, int]] = set()
        for left, right in connections:
            a, b = _label_to_id(left), _label_to_id(right)
            self._edges[a].append(b)
            self._edges[b].append(a)
            self._links.add((a, b))
            self._links.add((b, a))

    @classmethod
    def from_input(cls, input: Input) -> Network:
        connections = []
        for line in input.lines():
            parts = line.rstrip().split("-")
            if len(parts) >= 2:
                connections.append((parts[0], parts[1]))
        return cls(connections)

    def _is_clique(self, vertices: Iterable[int]) -> bool:
        return all((v, w) in self._links for v, w in combinations(vertices, 2))

    def _triangles(self) -> set[tuple[int, ...]]:
        triangles = set()
        for node, neighbours in self._edges.items():
            for pair in combinations(neighbours, 2):
                if self._is_clique(pair):
                    triangles.add(tuple(sorted((*pair, node))))
        return triangles

    def count_lan_parties(self) -> int:
        """Triangles with at least one computer whose name starts with t."""
        return sum(
            1
            for triangle in self._triangles()
            if any(node // _LETTERS == _T for node in triangle)
        )

    def _clique_of_size(self, size: int) -> list[int] | None:
        for node, neighbours in self._edges.items():
            if len(neighbours) < size:
                continue
            for subset in combinations(neighbours, size - 1):
                if self._is_clique(subset):
                    return [*subset, node]
        return None

    def largest_party(self) -> list[str]:
        """Names in a largest clique, sorted; empty if there is no triangle."""
        best: list[int] = []
        size = 3
        while (clique := self._clique_of_size(size)) is not None:
            _log.info("found a clique of size %d, trying %d...", size, size + 1)
            best = clique
            size += 1
        names = [_label_from_id(node) for node in sorted(best)]
        _log.info("password: %s", ",".join(names))
        return names


def run(input: Input, part: Part) -> int:
    network = Network.from_input(input)
    if part is Part.ONE:
        return network.count_lan_parties()
    return len(network.largest_party())
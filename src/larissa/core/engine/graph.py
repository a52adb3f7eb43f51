# src/larissa/core/engine/graph.py
"""
Grafo dirigido do pipeline.

Vértices são identificados por id (de nó ou de porta) e carregam o objeto
correspondente. As arestas são mantidas em listas de adjacência de saída e
de entrada, preservando a ordem de inserção, o que torna enumeração de
sinks e caminhada reversa determinísticas.

Decisões arquiteturais:
    - Detecção de ciclo por DFS de três cores (branco/cinza/preto)
    - Alcançabilidade (`reaches`) por DFS iterativa, sem recursão
    - Remoção de vértice remove todas as arestas incidentes
    - Operações inválidas (vértice duplicado, aresta sem vértice) são StateError

Limites explícitos:
    - Não conhece nós, portas ou status; apenas ids e valores
    - Não executa nada
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Tuple

from ..exceptions import StateError


_WHITE, _GRAY, _BLACK = 0, 1, 2


class DirectedGraph:
    def __init__(self) -> None:
        self._vertices: Dict[str, Any] = {}
        self._out: Dict[str, List[str]] = {}
        self._in: Dict[str, List[str]] = {}

    # -----------------------------
    # Vértices
    # -----------------------------
    def add_vertex(self, key: str, value: Any) -> None:
        if key in self._vertices:
            raise StateError(f"Vertex already exists: {key}")
        self._vertices[key] = value
        self._out[key] = []
        self._in[key] = []

    def remove_vertex(self, key: str) -> None:
        self._require(key)
        for target in list(self._out[key]):
            self.remove_edge(key, target)
        for source in list(self._in[key]):
            self.remove_edge(source, key)
        del self._vertices[key]
        del self._out[key]
        del self._in[key]

    def has_vertex(self, key: str) -> bool:
        return key in self._vertices

    def vertex_value(self, key: str) -> Any:
        self._require(key)
        return self._vertices[key]

    def vertices(self) -> Iterator[Tuple[str, Any]]:
        return iter(list(self._vertices.items()))

    def vertex_count(self) -> int:
        return len(self._vertices)

    # -----------------------------
    # Arestas
    # -----------------------------
    def add_edge(self, source: str, target: str) -> None:
        self._require(source)
        self._require(target)
        if target in self._out[source]:
            raise StateError(f"Edge already exists: {source} -> {target}")
        self._out[source].append(target)
        self._in[target].append(source)

    def remove_edge(self, source: str, target: str) -> None:
        if not self.has_edge(source, target):
            raise StateError(f"Edge does not exist: {source} -> {target}")
        self._out[source].remove(target)
        self._in[target].remove(source)

    def has_edge(self, source: str, target: str) -> bool:
        return source in self._out and target in self._out[source]

    def edges(self) -> List[Tuple[str, str]]:
        return [(s, t) for s, targets in self._out.items() for t in targets]

    def edge_count(self) -> int:
        return sum(len(targets) for targets in self._out.values())

    def out_degree(self, key: str) -> int:
        self._require(key)
        return len(self._out[key])

    def in_degree(self, key: str) -> int:
        self._require(key)
        return len(self._in[key])

    # -----------------------------
    # Consultas
    # -----------------------------
    def sinks(self) -> Iterator[Tuple[str, Any]]:
        """Vértices sem aresta de saída, em ordem de inserção."""
        return iter([(k, v) for k, v in self._vertices.items() if not self._out[k]])

    def vertices_to(self, key: str) -> Iterator[Tuple[str, Any]]:
        """Predecessores diretos de `key` (adjacência reversa)."""
        self._require(key)
        return iter([(s, self._vertices[s]) for s in self._in[key]])

    def vertices_from(self, key: str) -> Iterator[Tuple[str, Any]]:
        self._require(key)
        return iter([(t, self._vertices[t]) for t in self._out[key]])

    def reaches(self, source: str, target: str) -> bool:
        """True se existe caminho (possivelmente vazio) de `source` até `target`."""
        self._require(source)
        self._require(target)
        seen = {source}
        stack = [source]
        while stack:
            key = stack.pop()
            if key == target:
                return True
            for child in self._out[key]:
                if child not in seen:
                    seen.add(child)
                    stack.append(child)
        return False

    def has_cycle(self) -> bool:
        color: Dict[str, int] = {k: _WHITE for k in self._vertices}

        for root in self._vertices:
            if color[root] != _WHITE:
                continue
            color[root] = _GRAY
            stack: List[Tuple[str, Iterator[str]]] = [(root, iter(self._out[root]))]
            while stack:
                key, children = stack[-1]
                child = next(children, None)
                if child is None:
                    color[key] = _BLACK
                    stack.pop()
                elif color[child] == _GRAY:
                    return True
                elif color[child] == _WHITE:
                    color[child] = _GRAY
                    stack.append((child, iter(self._out[child])))
        return False

    def _require(self, key: str) -> None:
        if key not in self._vertices:
            raise StateError(f"Unknown vertex: {key}")

# src/larissa/core/engine/planner.py
"""
Planejador de execução do pipeline.

Produz uma ordem de execução sobre os nós do grafo em que todo produtor
aparece antes de qualquer nó que consuma um de seus outputs.

Algoritmo (caminhada reversa a partir dos sinks):
    1. Sinks são os vértices sem aresta de saída (nós ou portas).
    2. A partir de cada sink, uma DFS percorre as arestas de entrada,
       atravessando vértices de porta e de nó, que se alternam.
    3. Um vértice só é expandido uma vez; um nó entra na ordem depois que
       todos os seus ancestrais já entraram (pós-ordem).

Decisões arquiteturais:
    - DFS iterativa com pilha explícita: cadeias longas não esbarram no
      limite de recursão
    - Conjunto de visitados: cada vértice e cada aresta são percorridos uma
      vez, então o custo é linear no tamanho do grafo mesmo com muitos
      caminhos convergentes

Limites explícitos:
    - Não executa nós
    - Não valida aciclicidade (garantida na inserção de arestas)
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List, Optional, Set, Tuple

from larissa.core.pipeline.node import Node

from .graph import DirectedGraph


def _walk_ancestors(
    graph: DirectedGraph,
    root: str,
    visited: Set[str],
    order: List[Node],
) -> None:
    if root in visited:
        return
    visited.add(root)
    stack: List[Tuple[str, Iterator[Tuple[str, Any]]]] = [(root, graph.vertices_to(root))]
    while stack:
        key, parents = stack[-1]
        for parent_key, _ in parents:
            if parent_key not in visited:
                visited.add(parent_key)
                stack.append((parent_key, graph.vertices_to(parent_key)))
                break
        else:
            stack.pop()
            value = graph.vertex_value(key)
            if isinstance(value, Node):
                order.append(value)


def plan_execution(
    graph: DirectedGraph,
    roots: Optional[Iterable[str]] = None,
) -> List[Node]:
    """
    Calcula a ordem de execução dos nós a partir da caminhada reversa.

    Args:
        graph (DirectedGraph): Grafo do pipeline (nós e portas).
        roots (Optional[Iterable[str]]): Vértices de partida. Quando omitido,
            todos os sinks do grafo são usados.

    Returns:
        List[Node]: Nós em ordem topológica válida (não necessariamente única).
    """
    if roots is None:
        keys = [key for key, _ in graph.sinks()]
    else:
        keys = list(roots)

    visited: Set[str] = set()
    order: List[Node] = []
    for key in keys:
        _walk_ancestors(graph, key, visited, order)
    return order

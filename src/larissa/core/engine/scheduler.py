# src/larissa/core/engine/scheduler.py
"""
Scheduler de execução do pipeline.

Executa uma ordem planejada de nós, alimentando os inputs de cada nó com os
valores já produzidos pelas portas de saída conectadas a montante.

Modos:
    - "sequential" (padrão): no máximo uma execução de nó pendente por vez,
      na ordem do plano. Cada `run()` é aguardado até o fim antes do próximo.
    - "concurrent" (opt-in): um nó só é admitido quando todos os seus
      produtores estão FINISHED; ramos independentes podem se intercalar.
      Após a primeira falha nenhum nó novo é admitido, os nós em voo são
      aguardados e a primeira falha é relançada.

Políticas:
    - Nós já FINISHED são pulados (retomada de pipeline parcialmente executado)
    - Falhas não são capturadas: interrompem o restante da ordem
    - Sem retry, sem rollback, sem timeout, sem cancelamento

Cada transição relevante é registrada no Event Log do RunContext.
"""

from __future__ import annotations

import asyncio
from typing import Any, Dict, List, Mapping, Optional, Sequence, Set

from larissa.core.config.hashing import compute_config_hash
from larissa.core.errors import exception_to_payload
from larissa.core.exceptions import StateError
from larissa.core.pipeline.context import RunContext
from larissa.core.pipeline.node import Node
from larissa.core.pipeline.port import Port
from larissa.core.pipeline.types import NodeStatus

from .graph import DirectedGraph


def feed_inputs(graph: DirectedGraph, node: Node) -> None:
    """Copia para os inputs de `node` os valores das saídas conectadas."""
    for port in node.inputs.values():
        if not graph.has_vertex(port.id):
            continue
        for _, source in graph.vertices_to(port.id):
            if isinstance(source, Port) and source.has_value():
                port.set_value(source.value)


def producers_of(graph: DirectedGraph, node: Node) -> List[Node]:
    """Nós donos das portas de saída conectadas aos inputs de `node`."""
    found: List[Node] = []
    for port in node.inputs.values():
        if not graph.has_vertex(port.id):
            continue
        for _, source in graph.vertices_to(port.id):
            if isinstance(source, Port) and source.node not in found:
                found.append(source.node)
    return found


class Scheduler:
    def __init__(
        self,
        *,
        order: Sequence[Node],
        graph: DirectedGraph,
        ctx: RunContext,
        config: Optional[Mapping[str, Any]] = None,
        mode: str = "sequential",
    ) -> None:
        if mode not in ("sequential", "concurrent"):
            raise ValueError(f"Unknown scheduler mode: {mode}")
        self.order: List[Node] = list(order)
        self.graph = graph
        self.ctx = ctx
        self.config: Mapping[str, Any] = ctx.config if config is None else config
        self.mode = mode

    async def run(self) -> None:
        self.ctx.log(
            node_id=None,
            level="info",
            message="run started",
            mode=self.mode,
            order=[n.id for n in self.order],
            config_hash=compute_config_hash(dict(self.config)),
        )
        if self.mode == "concurrent":
            await self._run_concurrent()
        else:
            await self._run_sequential()
        self.ctx.log(node_id=None, level="info", message="run finished")

    async def _run_sequential(self) -> None:
        for node in self.order:
            await self._run_node(node)

    async def _run_concurrent(self) -> None:
        pending: List[Node] = list(self.order)
        scheduled: Set[str] = {n.id for n in self.order}
        deps: Dict[str, List[Node]] = {
            n.id: [p for p in producers_of(self.graph, n) if p.id in scheduled]
            for n in self.order
        }
        running: Dict["asyncio.Task[None]", Node] = {}
        failure: BaseException | None = None

        while pending or running:
            if failure is None:
                for node in list(pending):
                    if all(p.status is NodeStatus.FINISHED for p in deps[node.id]):
                        pending.remove(node)
                        running[asyncio.ensure_future(self._run_node(node))] = node
            if not running:
                if failure is None:
                    raise StateError(
                        "No schedulable node: producers did not finish",
                        details={"pending": [n.id for n in pending]},
                    )
                break

            done, _ = await asyncio.wait(list(running), return_when=asyncio.FIRST_COMPLETED)
            for task in done:
                running.pop(task)
                exc = task.exception()
                if exc is not None and failure is None:
                    failure = exc

        if failure is not None:
            raise failure

    async def _run_node(self, node: Node) -> None:
        if node.status is NodeStatus.FINISHED:
            self.ctx.log(node_id=node.id, level="debug", message="node skipped", reason="finished")
            return

        feed_inputs(self.graph, node)
        self.ctx.log(node_id=node.id, level="info", message="node started", title=node.title)
        try:
            await node.run()
        except Exception as exc:
            self.ctx.log(
                node_id=node.id,
                level="error",
                message="node failed",
                error=exception_to_payload(exc).to_dict(),
            )
            raise
        self.ctx.log(node_id=node.id, level="info", message="node finished")

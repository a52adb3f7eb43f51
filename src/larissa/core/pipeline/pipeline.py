# src/larissa/core/pipeline/pipeline.py
"""
Pipeline: variante de nó que possui um grafo de nós e portas.

Estrutura do grafo:
    - vértice de nó para cada membro
    - input-port → nó e nó → output-port, criados na inserção do nó
    - output-port → input-port, criados por `connect`

Invariantes (após toda operação de mutação):
    - O grafo é acíclico
    - Ids de nós e portas são únicos no pipeline
    - Toda porta no grafo pertence a um nó membro

Erros de mutação (NotFoundError, StateError, CycleError) são síncronos e
deixam o pipeline exatamente como antes da chamada.

A computação do pipeline (herdada de `Node.run`) planeja a ordem a partir
do grafo e a executa pelo Scheduler; um pipeline FINISHED não executa de
novo até ser resetado.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from larissa.core.config.loader import resolve_config
from larissa.core.engine.graph import DirectedGraph
from larissa.core.engine.planner import plan_execution
from larissa.core.engine.scheduler import Scheduler

from ..exceptions import CycleError, StateError
from .block import Block
from .context import RunContext
from .node import Node
from .port import Port
from .registry import Environment
from .types import NodeKind, NodeStatus


class Pipeline(Node):
    def __init__(
        self,
        env: Optional[Environment] = None,
        *,
        config: Optional[Mapping[str, Any]] = None,
        ctx: Optional[RunContext] = None,
        node_id: Optional[str] = None,
    ) -> None:
        super().__init__(node_id)
        self.config: Dict[str, Any] = resolve_config(dict(config or {}))
        self.env = env if env is not None else Environment.from_config(self.config)
        self._owns_ctx = ctx is None
        self.ctx = ctx if ctx is not None else RunContext.new(config=self.config)
        self.graph = DirectedGraph()
        self._nodes: Dict[str, Node] = {}

    # ------------------------------------------------------------------
    # Interface de capacidade
    # ------------------------------------------------------------------
    @property
    def kind(self) -> NodeKind:
        return NodeKind.PIPELINE

    def set_options(self, options: Any) -> None:
        self.config = resolve_config(dict(options or {}))

    def _compute_status(self) -> NodeStatus:
        return NodeStatus.INSTANTIATED

    def _can_run(self) -> bool:
        return True

    async def _compute(self) -> None:
        order = plan_execution(self.graph)
        self._begin_run()
        await self._schedule(order)

    # ------------------------------------------------------------------
    # Membros
    # ------------------------------------------------------------------
    @property
    def nodes(self) -> List[Node]:
        return list(self._nodes.values())

    def has_node(self, node: Node) -> bool:
        return self._nodes.get(node.id) is node

    def new_node(self, identifier: str, options: Any = None) -> Block:
        """Cria um Block a partir de "bloco" ou "plugin/bloco" e o registra."""
        block_type = self.env.resolve(identifier)
        node = Block(block_type, options)
        self.add_node(node)
        return node

    def add_node(self, node: Node) -> Node:
        """Registra um nó já construído (ex.: um pipeline aninhado)."""
        if node is self:
            raise StateError("A pipeline cannot contain itself")
        if node.id in self._nodes or self.graph.has_vertex(node.id):
            raise StateError(f"Node already in pipeline: {node.id}", details={"node_id": node.id})
        ports = node.ports()
        for port in ports:
            if port.node is not node:
                raise StateError(
                    f"Port {port.id} does not belong to node {node.id}",
                    details={"node_id": node.id, "port_id": port.id},
                )
            if self.graph.has_vertex(port.id):
                raise StateError(f"Port already in pipeline: {port.id}", details={"port_id": port.id})

        self._nodes[node.id] = node
        self.graph.add_vertex(node.id, node)
        for port in node.inputs.values():
            self.graph.add_vertex(port.id, port)
            self.graph.add_edge(port.id, node.id)
        for port in node.outputs.values():
            self.graph.add_vertex(port.id, port)
            self.graph.add_edge(node.id, port.id)
        return node

    def remove_node(self, node: Node) -> None:
        """Remove o nó, suas portas e todas as arestas incidentes."""
        if not self.has_node(node):
            raise StateError("Node not found in pipeline", details={"node_id": node.id})
        del self._nodes[node.id]
        for port in node.ports():
            if self.graph.has_vertex(port.id):
                self.graph.remove_vertex(port.id)
        self.graph.remove_vertex(node.id)

    # ------------------------------------------------------------------
    # Conexões
    # ------------------------------------------------------------------
    def connect(self, producer: Union[Node, Port], consumer: Union[Node, Port]) -> None:
        """
        Conecta uma porta de saída a uma porta de entrada.

        Um Node é resolvido para seu output (input) default. Compatibilidade
        de tipos entre as portas não é verificada.

        A verificação de ciclo precede as de conexão duplicada e de input já
        conectado: toda conexão que fecharia um ciclo falha com CycleError.

        Raises:
            NotFoundError: nó sem porta default.
            StateError: nó fora do pipeline, direção inválida, conexão
                duplicada ou input já conectado.
            CycleError: a conexão criaria um ciclo; o grafo não é alterado.
        """
        output = producer.output() if isinstance(producer, Node) else producer
        input_ = consumer.input() if isinstance(consumer, Node) else consumer

        if not self.has_node(output.node):
            raise StateError("Output node not found in pipeline", details={"node_id": output.node.id})
        if not self.has_node(input_.node):
            raise StateError("Input node not found in pipeline", details={"node_id": input_.node.id})
        if not output.is_output:
            raise StateError(f"Port '{output.name}' is not an output port", details={"port_id": output.id})
        if not input_.is_input:
            raise StateError(f"Port '{input_.name}' is not an input port", details={"port_id": input_.id})
        # output → input fecha um ciclo sse output já é alcançável a partir de input
        if self.graph.reaches(input_.id, output.id):
            raise CycleError(output.id, input_.id)
        if self.graph.has_edge(output.id, input_.id):
            raise StateError(
                f"Ports {output.id} and {input_.id} are already connected",
                details={"producer": output.id, "consumer": input_.id},
            )
        if any(isinstance(src, Port) for _, src in self.graph.vertices_to(input_.id)):
            raise StateError(
                f"Input '{input_.name}' of node {input_.node.id} is already connected",
                details={"consumer": input_.id},
            )

        self.graph.add_edge(output.id, input_.id)

    def connections(self) -> List[Tuple[Port, Port]]:
        pairs: List[Tuple[Port, Port]] = []
        for source, target in self.graph.edges():
            out = self.graph.vertex_value(source)
            inp = self.graph.vertex_value(target)
            if isinstance(out, Port) and isinstance(inp, Port):
                pairs.append((out, inp))
        return pairs

    # ------------------------------------------------------------------
    # Execução
    # ------------------------------------------------------------------
    async def run_node(self, node: Node) -> None:
        """
        Executa um nó membro junto com seus ancestrais ainda não finalizados.

        O status do próprio pipeline não é alterado.
        """
        if not self.has_node(node):
            raise StateError("Node not found in pipeline", details={"node_id": node.id})
        order = plan_execution(self.graph, roots=[node.id])
        self._begin_run()
        await self._schedule(order)

    def _begin_run(self) -> None:
        """Abre um RunContext novo por run, exceto quando fornecido pelo embutidor."""
        if self._owns_ctx:
            self.ctx = RunContext.new(config=self.config)

    async def _schedule(self, order: List[Node]) -> None:
        scheduler = Scheduler(
            order=order,
            graph=self.graph,
            ctx=self.ctx,
            config=self.config,
            mode=self.config["scheduler"]["mode"],
        )
        await scheduler.run()

    def reset(self) -> None:
        """Reseta todos os nós membros e, em seguida, o próprio pipeline."""
        for node in self._nodes.values():
            node.reset()
        super().reset()

# src/larissa/core/pipeline/node.py
"""
Máquina de estados de um nó.

Um Node é a menor unidade executável do engine: possui status, portas de
entrada/saída nomeadas e as operações de ciclo de vida `can_run`, `run` e
`reset`. As variantes concretas (Block, Pipeline) implementam a interface
de capacidade declarada pelos métodos abstratos desta classe.

Transições (dentro de um ciclo de execução):
    INSTANTIATED → RUNNING → {FINISHED | ERRORED}

Regras de `run()`:
    - inputs obrigatórios sem valor → ERRORED + StateError
    - status RUNNING → StateError, status inalterado
    - status FINISHED → retorno imediato, sem efeitos colaterais
    - falha da computação → ERRORED, erro capturado em `error` e relançado

Mutações de `status` e `title` notificam os assinantes de forma síncrona
com o nome do campo e o novo valor.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional
from uuid import uuid4

from ..exceptions import NotFoundError, StateError
from .port import Port
from .types import NodeKind, NodeStatus


ChangeListener = Callable[[str, Any], None]


class Node(ABC):
    def __init__(self, node_id: Optional[str] = None) -> None:
        self.id: str = node_id or uuid4().hex
        self.inputs: Dict[str, Port] = {}
        self.outputs: Dict[str, Port] = {}
        self.default_input: Optional[Port] = None
        self.default_output: Optional[Port] = None
        self.error: Optional[BaseException] = None
        self._title: Optional[str] = None
        self._status: NodeStatus = NodeStatus.INSTANTIATED
        self._listeners: List[ChangeListener] = []

    # ------------------------------------------------------------------
    # Interface de capacidade (implementada por cada variante)
    # ------------------------------------------------------------------
    @property
    @abstractmethod
    def kind(self) -> NodeKind:
        ...

    @abstractmethod
    def set_options(self, options: Any) -> None:
        ...

    @abstractmethod
    def _compute_status(self) -> NodeStatus:
        ...

    @abstractmethod
    def _can_run(self) -> bool:
        ...

    @abstractmethod
    async def _compute(self) -> None:
        ...

    # ------------------------------------------------------------------
    # Notificação de mudanças
    # ------------------------------------------------------------------
    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Registra `listener(field, value)` e retorna o handle de cancelamento."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, field_name: str, value: Any) -> None:
        for listener in list(self._listeners):
            listener(field_name, value)

    @property
    def status(self) -> NodeStatus:
        return self._status

    @status.setter
    def status(self, status: NodeStatus) -> None:
        status = NodeStatus(status)
        if self._status is not status:
            self._status = status
            self._emit("status", status)

    @property
    def title(self) -> Optional[str]:
        return self._title

    def set_title(self, title: str) -> None:
        self._title = title
        self._emit("title", title)

    # ------------------------------------------------------------------
    # Portas
    # ------------------------------------------------------------------
    def has_default_input(self) -> bool:
        return self.default_input is not None

    def has_default_output(self) -> bool:
        return self.default_output is not None

    def input(self, name: Optional[str] = None) -> Port:
        if name is None:
            if self.default_input is None:
                raise NotFoundError(f"Node {self.id} has no default input")
            return self.default_input
        port = self.inputs.get(name)
        if port is None:
            raise NotFoundError(f"Unknown input: {name}", details={"node_id": self.id})
        return port

    def output(self, name: Optional[str] = None) -> Port:
        if name is None:
            if self.default_output is None:
                raise NotFoundError(f"Node {self.id} has no default output")
            return self.default_output
        port = self.outputs.get(name)
        if port is None:
            raise NotFoundError(f"Unknown output: {name}", details={"node_id": self.id})
        return port

    def ports(self) -> List[Port]:
        return list(self.inputs.values()) + list(self.outputs.values())

    # ------------------------------------------------------------------
    # Ciclo de vida
    # ------------------------------------------------------------------
    def compute_status(self) -> None:
        self.status = self._compute_status()

    def reset(self) -> None:
        self.error = None
        self.compute_status()
        for port in self.inputs.values():
            port.reset()
        for port in self.outputs.values():
            port.reset()

    def reset_input(self, port: Port) -> None:
        if self.inputs.get(port.name) is not port:
            raise NotFoundError(f"Unknown input: {port.name}", details={"node_id": self.id})
        port.reset()
        self.compute_status()

    def can_run(self) -> bool:
        for port in self.inputs.values():
            if port.is_required() and not port.has_value():
                return False
        return self._can_run()

    async def run(self) -> None:
        if not self.can_run():
            self.status = NodeStatus.ERRORED
            raise StateError(
                "Cannot run node, required input ports do not have values",
                details={
                    "node_id": self.id,
                    "missing": [
                        p.name for p in self.inputs.values()
                        if p.is_required() and not p.has_value()
                    ],
                },
            )
        if self.status is NodeStatus.RUNNING:
            raise StateError("Node is already running", details={"node_id": self.id})
        if self.status is NodeStatus.FINISHED:
            return

        self.error = None
        self.status = NodeStatus.RUNNING
        try:
            await self._compute()
        except Exception as exc:
            self.error = exc
            self.status = NodeStatus.ERRORED
            raise
        self.status = NodeStatus.FINISHED

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.id} {self.status.value}>"

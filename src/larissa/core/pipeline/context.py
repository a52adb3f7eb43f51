# src/larissa/core/pipeline/context.py
"""
Contextos de execução do pipeline.

Este módulo define as duas estruturas passadas durante a execução:

    - BlockContext: visão restrita que o executor de um bloco recebe
      (`get_input`, `get_options`, `set_output`). É o único meio pelo qual
      uma computação folha lê e escreve portas.
    - RunContext: contexto compartilhado de uma run do pipeline, com
      identidade da execução, configuração resolvida e Event Log
      estruturado.

Invariantes:
    - Logs sempre incluem `run_id` e `node_id`
    - O BlockContext só enxerga as portas do seu próprio nó
    - Nenhum estado global é compartilhado entre runs

Limites explícitos:
    - Não executa nós
    - Não planeja nem coordena execução
    - Não persiste eventos
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Dict, List, Optional
from uuid import uuid4

if TYPE_CHECKING:  # pragma: no cover
    from .block import Block


class BlockContext:
    """Contexto entregue ao executor de um BlockType."""

    def __init__(self, block: "Block") -> None:
        self._block = block

    @property
    def node_id(self) -> str:
        return self._block.id

    def get_input(self, name: str) -> Any:
        """Valor atual da porta de entrada `name`.

        Raises:
            NotFoundError: se a porta não existe.
            StateError: se a porta não possui valor.
        """
        return self._block.input(name).value

    def has_input(self, name: str) -> bool:
        return self._block.input(name).has_value()

    def get_options(self) -> Any:
        return self._block.options

    def set_output(self, name: str, value: Any) -> None:
        self._block.output(name).set_value(value)


@dataclass
class RunContext:
    """
    Contexto de execução compartilhado de uma run do pipeline.

    Campos canônicos:
    - run_id: identificador único da execução
    - created_at: timestamp UTC de criação do contexto
    - config: configuração efetiva do pipeline
    - meta: metadados livres do embutidor
    - events: Event Log estruturado, em ordem de registro
    """

    run_id: str
    created_at: datetime
    config: Dict[str, Any] = field(default_factory=dict)
    meta: Dict[str, Any] = field(default_factory=dict)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)

    @classmethod
    def new(cls, *, config: Optional[Dict[str, Any]] = None, **meta: Any) -> "RunContext":
        return cls(
            run_id=uuid4().hex,
            created_at=datetime.now(timezone.utc),
            config=dict(config or {}),
            meta=meta,
        )

    # -----------------------------
    # Logging
    # -----------------------------
    def log(self, *, node_id: Optional[str], level: str, message: str, **extra: Any) -> None:
        event = {
            "run_id": self.run_id,
            "node_id": node_id,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def events_for(self, node_id: Optional[str]) -> List[Dict[str, Any]]:
        return [e for e in self.events if e["node_id"] == node_id]

    def messages(self, node_id: Optional[str] = None) -> List[str]:
        events = self.events if node_id is None else self.events_for(node_id)
        return [e["message"] for e in events]

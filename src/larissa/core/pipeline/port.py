# src/larissa/core/pipeline/port.py
"""
Portas de nós.

Uma porta é uma célula de valor nomeada e tipada que pertence a exatamente
um nó durante toda a sua vida. O valor começa ausente, é escrito uma vez por
execução (pelo executor do nó dono, para outputs; pelo scheduler, para
inputs) e é lido pelos consumidores a jusante.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from uuid import uuid4

from ..exceptions import StateError
from .types import PortDirection, PortSpec

if TYPE_CHECKING:  # pragma: no cover
    from .node import Node


_ABSENT = object()


class Port:
    def __init__(
        self,
        *,
        node: "Node",
        name: str,
        type: str,
        direction: PortDirection,
        required: bool = False,
    ) -> None:
        self.id: str = uuid4().hex
        self.node = node
        self.name = name
        self.type = type
        self.direction = PortDirection(direction)
        self.required = required
        self._value: Any = _ABSENT

    @classmethod
    def from_spec(cls, node: "Node", spec: PortSpec, direction: PortDirection) -> "Port":
        return cls(
            node=node,
            name=spec.name,
            type=spec.type,
            direction=direction,
            required=spec.required,
        )

    @property
    def is_input(self) -> bool:
        return self.direction is PortDirection.INPUT

    @property
    def is_output(self) -> bool:
        return self.direction is PortDirection.OUTPUT

    def is_required(self) -> bool:
        return self.required

    def has_value(self) -> bool:
        return self._value is not _ABSENT

    @property
    def value(self) -> Any:
        if self._value is _ABSENT:
            raise StateError(
                f"{self.direction.value} port '{self.name}' has no value",
                details={"port_id": self.id, "node_id": self.node.id},
            )
        return self._value

    def set_value(self, value: Any) -> None:
        self._value = value

    def reset(self) -> None:
        self._value = _ABSENT

    def __repr__(self) -> str:
        return f"<Port {self.direction.value}:{self.name} ({self.type}) of {self.node.id}>"

# src/larissa/core/pipeline/block.py
"""
Block: variante de nó que envolve um BlockType.

As portas são instanciadas a partir das specs do descritor no momento da
construção. Um descritor com exatamente uma spec de entrada (saída) torna
essa porta o input (output) default do bloco.

A computação delega ao executor do descritor, entregando um BlockContext.
Qualquer falha do executor é encapsulada em ExecutionError.
"""

from __future__ import annotations

import inspect
from typing import Any, Optional

from ..exceptions import ExecutionError
from .context import BlockContext
from .node import Node
from .port import Port
from .types import BlockType, NodeKind, NodeStatus, PortDirection


class Block(Node):
    def __init__(
        self,
        block_type: BlockType,
        options: Any = None,
        *,
        node_id: Optional[str] = None,
    ) -> None:
        super().__init__(node_id)
        self.block_type = block_type
        self.options: Any = None
        self.set_options(options)

        for spec in block_type.inputs:
            self.inputs[spec.name] = Port.from_spec(self, spec, PortDirection.INPUT)
        for spec in block_type.outputs:
            self.outputs[spec.name] = Port.from_spec(self, spec, PortDirection.OUTPUT)

        if len(self.inputs) == 1:
            self.default_input = next(iter(self.inputs.values()))
        if len(self.outputs) == 1:
            self.default_output = next(iter(self.outputs.values()))

        self.set_title(block_type.name)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.BLOCK

    def set_options(self, options: Any) -> None:
        # opções não são validadas contra o schema do BlockType
        self.options = {} if options is None else options

    def _compute_status(self) -> NodeStatus:
        return NodeStatus.INSTANTIATED

    def _can_run(self) -> bool:
        return True

    async def _compute(self) -> None:
        ctx = BlockContext(self)
        try:
            result = self.block_type.executor(ctx)
            if inspect.isawaitable(result):
                await result
        except ExecutionError:
            raise
        except Exception as exc:
            raise ExecutionError(
                f"Block '{self.block_type.name}' failed: {exc}",
                node_id=self.id,
                cause=exc,
                details={"block_type": self.block_type.name},
            ) from exc

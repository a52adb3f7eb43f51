# src/larissa/__init__.py
"""
Larissa — engine de dataflow embutível.

Compõe unidades de computação ("nós") que trocam valores por portas
tipadas e dirigidas, conecta-as em um grafo de dependências e as executa em
uma ordem consistente com esse grafo.

Uso típico:

    pipeline = Pipeline()
    a = pipeline.new_node("number", {"value": 3})
    b = pipeline.new_node("number", {"value": 4})
    total = pipeline.new_node("sum")
    pipeline.connect(a, total.input("value1"))
    pipeline.connect(b, total.input("value2"))
    await pipeline.run()
    total.output().value  # 7
"""

from .core.pipeline.pipeline import Pipeline
from .core.pipeline.block import Block
from .core.pipeline.context import BlockContext, RunContext
from .core.pipeline.node import Node
from .core.pipeline.port import Port
from .core.pipeline.registry import BlockRegistry, Environment, Plugin
from .core.pipeline.types import BlockType, NodeKind, NodeStatus, PortSpec
from .core.exceptions import (
    CycleError,
    ExecutionError,
    LarissaError,
    NotFoundError,
    StateError,
)

__version__ = "0.1.0"

__all__ = [
    "Pipeline",
    "Block",
    "BlockContext",
    "RunContext",
    "Node",
    "Port",
    "BlockRegistry",
    "Environment",
    "Plugin",
    "BlockType",
    "NodeKind",
    "NodeStatus",
    "PortSpec",
    "CycleError",
    "ExecutionError",
    "LarissaError",
    "NotFoundError",
    "StateError",
]

# src/larissa/core/pipeline/types.py
"""
Tipos canônicos do pipeline do Larissa.

Componentes principais:
    - NodeStatus → enum de estados do ciclo de vida de um nó
    - NodeKind   → tag explícita da variante de nó (block, pipeline)
    - PortSpec   → especificação imutável de uma porta de bloco
    - BlockType  → descritor imutável de uma computação folha

Invariantes:
    - Enums possuem valores textuais canônicos
    - PortSpec e BlockType são imutáveis após criados
    - Nenhuma lógica de execução vive neste módulo
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Iterable, Mapping, Optional, Tuple, Union


class NodeStatus(str, Enum):
    """
    Estados do ciclo de vida de um nó.

    Transições válidas dentro de um ciclo de execução:
        INSTANTIATED → RUNNING → {FINISHED | ERRORED}

    READY é reconhecido como estado, mas reservado: nenhuma transição
    do engine o atribui.
    """
    INSTANTIATED = "INSTANTIATED"
    READY = "READY"
    RUNNING = "RUNNING"
    FINISHED = "FINISHED"
    ERRORED = "ERRORED"


class NodeKind(str, Enum):
    """Variantes concretas de nó."""
    BLOCK = "block"
    PIPELINE = "pipeline"


class PortDirection(str, Enum):
    INPUT = "input"
    OUTPUT = "output"


@dataclass(frozen=True)
class PortSpec:
    """Especificação de uma porta declarada por um BlockType."""

    name: str
    type: str
    required: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("port name must be a non-empty string")
        if not isinstance(self.type, str) or not self.type.strip():
            raise ValueError(f"port '{self.name}' must declare a type")

    @classmethod
    def coerce(cls, spec: Union["PortSpec", Mapping[str, Any]]) -> "PortSpec":
        if isinstance(spec, PortSpec):
            return spec
        return cls(
            name=spec["name"],
            type=spec["type"],
            required=bool(spec.get("required", False)),
        )


Executor = Callable[[Any], Union[Awaitable[None], None]]


@dataclass(frozen=True)
class BlockType:
    """
    Descritor imutável de uma computação folha.

    Campos:
        - name: nome do bloco no registry
        - inputs: specs ordenadas das portas de entrada
        - outputs: specs ordenadas das portas de saída
        - options: schema das opções (não validado pelo engine) ou None
        - executor: callable(ctx), normalmente uma coroutine function, que
          lê inputs/opções do BlockContext e escreve outputs

    O descritor é fornecido pelo registry e nunca pertence ao pipeline.
    """

    name: str
    executor: Executor
    inputs: Tuple[PortSpec, ...] = field(default_factory=tuple)
    outputs: Tuple[PortSpec, ...] = field(default_factory=tuple)
    options: Optional[Mapping[str, Any]] = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("block type name must be a non-empty string")
        if not callable(self.executor):
            raise ValueError(f"block type '{self.name}' executor must be callable")
        for specs in (self.inputs, self.outputs):
            names = [s.name for s in specs]
            if len(names) != len(set(names)):
                raise ValueError(f"block type '{self.name}' declares duplicate port names")

    @classmethod
    def define(
        cls,
        *,
        name: str,
        executor: Executor,
        inputs: Iterable[Union[PortSpec, Mapping[str, Any]]] = (),
        outputs: Iterable[Union[PortSpec, Mapping[str, Any]]] = (),
        options: Optional[Mapping[str, Any]] = None,
    ) -> "BlockType":
        """Constrói um BlockType a partir de mapeamentos simples."""
        return cls(
            name=name,
            executor=executor,
            inputs=tuple(PortSpec.coerce(s) for s in inputs),
            outputs=tuple(PortSpec.coerce(s) for s in outputs),
            options=options,
        )

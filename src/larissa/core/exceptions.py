"""
Larissa — Canonical Exceptions (v1)

Este módulo define a taxonomia de exceções do engine de dataflow.

Categorias:
- NotFoundError  → plugin, bloco ou porta desconhecidos
- StateError     → violação de estado (nó em execução, nó fora do pipeline,
                   inputs obrigatórios ausentes, conexão inválida)
- CycleError     → conexão que criaria um ciclo no grafo
- ExecutionError → falha levantada pela computação de um nó

Regras:
- Erros de mutação de grafo são síncronos e não deixam mutação parcial.
- ExecutionError sobe até o chamador de `run()`; não há retry nem rollback.
- Exceções carregam apenas dados estruturados (serializáveis) em `details`.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class LarissaError(Exception):
    """Base class para exceções internas do engine.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = dict(details or {})
        self.hint = hint

    def __str__(self) -> str:
        return self.message


class NotFoundError(LarissaError):
    """Plugin, bloco, input ou output desconhecido."""


class StateError(LarissaError):
    """
    Operação incompatível com o estado atual de um nó ou pipeline.

    Exemplos:
        - `run()` em um nó que já está RUNNING
        - `run()` com inputs obrigatórios sem valor
        - `connect`/`remove_node` com nó que não pertence ao pipeline
    """


class CycleError(LarissaError):
    """
    Conexão rejeitada porque criaria um ciclo no grafo do pipeline.

    Invariantes:
        - `details` contém os ids das duas portas (`producer`, `consumer`)
        - O grafo permanece exatamente como antes da chamada
    """

    def __init__(self, producer_id: str, consumer_id: str) -> None:
        super().__init__(
            f"cannot connect ports {producer_id} and {consumer_id} because of cycle",
            details={"producer": producer_id, "consumer": consumer_id},
            hint="Remove one of the existing connections before connecting these ports.",
        )
        self.producer_id = producer_id
        self.consumer_id = consumer_id


class ExecutionError(LarissaError):
    """
    Falha levantada pela computação de um nó (ou executor de bloco).

    A exceção original fica disponível em `cause` (e em `__cause__`,
    quando levantada com `raise ... from exc`).
    """

    def __init__(
        self,
        message: str,
        *,
        node_id: Optional[str] = None,
        cause: Optional[BaseException] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        merged: Dict[str, Any] = {"node_id": node_id}
        if cause is not None:
            merged["exception_class"] = cause.__class__.__name__
        merged.update(details or {})
        super().__init__(message, details=merged)
        self.node_id = node_id
        self.cause = cause

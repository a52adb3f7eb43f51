"""
Larissa — Canonical Error Payload (v1)

Este módulo define o formato canônico de erro serializável do engine,
utilizado no Event Log do `RunContext` quando um nó falha.

Erros são registrados de forma:
- explícita
- serializável
- rastreável

O payload nunca embute stack trace; apenas código estável, mensagem,
detalhes estruturados e uma dica ao operador.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional

from .exceptions import (
    CycleError,
    ExecutionError,
    LarissaError,
    NotFoundError,
    StateError,
)


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload canônico de erro.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador
    """

    type: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Grafo / Registro
NOT_FOUND = "NOT_FOUND"
INVALID_STATE = "INVALID_STATE"
CYCLE_DETECTED = "CYCLE_DETECTED"

# Execução
NODE_EXECUTION_ERROR = "NODE_EXECUTION_ERROR"
UNEXPECTED_ERROR = "UNEXPECTED_ERROR"

_CODES = (
    (CycleError, CYCLE_DETECTED),
    (NotFoundError, NOT_FOUND),
    (StateError, INVALID_STATE),
    (ExecutionError, NODE_EXECUTION_ERROR),
)


def exception_to_payload(exc: BaseException) -> ErrorPayload:
    """Converte uma exceção em ErrorPayload (serializável, acionável).

    Regras:
    - LarissaError: código pela classe, com message/details/hint da exceção.
    - Outras exceções: UNEXPECTED_ERROR, sem expor stack trace.
    """
    if isinstance(exc, LarissaError):
        code = next((c for cls, c in _CODES if isinstance(exc, cls)), UNEXPECTED_ERROR)
        return ErrorPayload(
            type=code,
            message=exc.message or exc.__class__.__name__,
            details=dict(exc.details),
            hint=exc.hint,
        )

    return ErrorPayload(
        type=UNEXPECTED_ERROR,
        message=str(exc) or "Unexpected error during execution",
        details={"exception_class": exc.__class__.__name__},
        hint="Check the node executor and the run event log.",
    )

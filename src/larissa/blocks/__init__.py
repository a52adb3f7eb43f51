# src/larissa/blocks/__init__.py
"""
Blocos embutidos do Larissa.

Resolvidos pelo nome simples, sem prefixo de plugin:
    - number → número literal (opção `value`)
    - string → string literal (opção `value`)
    - sum    → `value1` + `value2` em `result`

Limites explícitos:
    - Não valida schemas de opções
"""

from larissa.core.pipeline.registry import BlockRegistry

from .number import number
from .string import string
from .sum import sum_block

BUILTIN_BLOCKS = BlockRegistry.of([number, string, sum_block])

__all__ = ["BUILTIN_BLOCKS", "number", "string", "sum_block"]

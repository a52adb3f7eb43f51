# src/larissa/plugins/logic/__init__.py
"""
Plugin `logic`: portas booleanas AND, OR e NOT.

Os blocos são endereçados como "logic/AND", "logic/OR" e "logic/NOT".
O módulo expõe `plugin`, carregável via `Environment.from_config`.
"""

from larissa.core.pipeline.registry import BlockRegistry, Plugin

from .blocks import AND, NOT, OR

plugin = Plugin(name="logic", registry=BlockRegistry.of([AND, OR, NOT]))

__all__ = ["plugin", "AND", "OR", "NOT"]

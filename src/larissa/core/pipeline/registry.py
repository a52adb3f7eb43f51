# src/larissa/core/pipeline/registry.py
"""
Registro de tipos de bloco e resolução de plugins.

Este módulo define:
    - BlockRegistry: registro explícito nome → BlockType
    - Plugin: um namespace nomeado de BlockTypes
    - Environment: ponto único de resolução de identificadores

Identificadores aceitos por `Environment.resolve`:
    - "nome"          → registry embutido
    - "plugin/nome"   → BlockType do plugin informado

Decisões arquiteturais:
    - Plugins são injetados pelo embutidor (código ou configuração),
      nunca codificados no scheduler
    - Nomes duplicados são rejeitados no registro
    - Falhas de resolução são NotFoundError e não mutam nada

Limites explícitos:
    - Não valida schemas de opções
    - Não instancia nós
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..exceptions import NotFoundError, StateError
from .types import BlockType


class DuplicateBlockTypeError(StateError):
    """Um BlockType com o mesmo nome já está registrado."""


@dataclass
class BlockRegistry:
    """Registro canônico de BlockTypes, preservando a ordem de registro."""

    _types: Dict[str, BlockType] = field(default_factory=dict, init=False, repr=False)

    @classmethod
    def of(cls, block_types: Iterable[BlockType]) -> "BlockRegistry":
        registry = cls()
        for block_type in block_types:
            registry.register(block_type)
        return registry

    def register(self, block_type: BlockType) -> None:
        if block_type.name in self._types:
            raise DuplicateBlockTypeError(f"Duplicate block type: {block_type.name}")
        self._types[block_type.name] = block_type

    def resolve(self, name: str) -> BlockType:
        try:
            return self._types[name]
        except KeyError:
            raise NotFoundError(f"Unknown block type: {name}") from None

    def names(self) -> List[str]:
        return list(self._types)

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __len__(self) -> int:
        return len(self._types)


@dataclass
class Plugin:
    """Namespace nomeado de BlockTypes fornecido por um pacote externo."""

    name: str
    registry: BlockRegistry = field(default_factory=BlockRegistry)

    def get_block_type(self, name: str) -> BlockType:
        try:
            return self.registry.resolve(name)
        except NotFoundError:
            raise NotFoundError(
                f"Unknown block type '{name}' in plugin '{self.name}'",
                details={"plugin": self.name, "block": name},
            ) from None


class Environment:
    """
    Resolve identificadores de bloco para BlockTypes.

    O registry embutido atende nomes sem prefixo; plugins atendem
    identificadores no formato "plugin/bloco".
    """

    def __init__(self, builtins: Optional[BlockRegistry] = None) -> None:
        if builtins is None:
            from larissa.blocks import BUILTIN_BLOCKS

            builtins = BUILTIN_BLOCKS
        self.builtins = builtins
        self._plugins: Dict[str, Plugin] = {}

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "Environment":
        """Cria um Environment carregando os plugins declarados em `plugins`."""
        env = cls()
        for name, module_path in (config.get("plugins") or {}).items():
            module = importlib.import_module(module_path)
            plugin = getattr(module, "plugin", None)
            if not isinstance(plugin, Plugin):
                raise NotFoundError(
                    f"Module '{module_path}' does not expose a Plugin named 'plugin'",
                    details={"plugin": name, "module": module_path},
                )
            env.add_plugin(plugin, name=name)
        return env

    def add_plugin(self, plugin: Plugin, *, name: Optional[str] = None) -> None:
        key = name or plugin.name
        if "/" in key:
            raise ValueError(f"Plugin name must not contain '/': {key}")
        if key in self._plugins:
            raise StateError(f"Plugin already registered: {key}")
        self._plugins[key] = plugin

    def get_plugin(self, name: str) -> Plugin:
        try:
            return self._plugins[name]
        except KeyError:
            raise NotFoundError(f"Unknown plugin: {name}", details={"plugin": name}) from None

    def plugin_names(self) -> List[str]:
        return list(self._plugins)

    def resolve(self, identifier: str) -> BlockType:
        plugin_name, sep, block_name = identifier.partition("/")
        if not sep:
            return self.builtins.resolve(identifier)
        return self.get_plugin(plugin_name).get_block_type(block_name)

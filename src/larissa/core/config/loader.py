# src/larissa/core/config/loader.py
"""
Loader canônico de configuração do engine.

A configuração efetiva é resolvida a partir de:
    - DEFAULT_CONFIG (embutido, sempre presente)
    - um arquivo opcional em YAML ou JSON
    - overrides opcionais passados pelo código embutidor

Precedência: overrides > arquivo > defaults.

Chaves reconhecidas (v1):
    scheduler.mode  → "sequential" (padrão) | "concurrent"
    plugins         → mapa nome do plugin → módulo Python que expõe `plugin`

Invariantes:
    - O resultado é sempre um dicionário puro (`dict`)
    - Overrides nunca mutam os defaults
    - Valores fora do domínio são rejeitados explicitamente
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import json

import yaml  # PyYAML

from .errors import (
    ConfigFileNotFoundError,
    InvalidConfigRootTypeError,
    InvalidConfigValueError,
    UnsupportedConfigFormatError,
)
from .merge import deep_merge


SCHEDULER_MODES = ("sequential", "concurrent")

DEFAULT_CONFIG: Dict[str, Any] = {
    "scheduler": {"mode": "sequential"},
    "plugins": {},
}


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de configuração e valida sua estrutura básica.

    Decisões arquiteturais:
        - O arquivo deve existir no momento do carregamento
        - Arquivos vazios são interpretados como dicionários vazios
        - O conteúdo raiz deve ser um dicionário

    Raises:
        ConfigFileNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o formato não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    if not path.exists():
        raise ConfigFileNotFoundError(f"Config file not found: {path}")

    suffix = path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    else:
        raise UnsupportedConfigFormatError(f"Unsupported config format: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root must be a dict, got: {type(data).__name__}"
        )

    return data


def _validate(config: Dict[str, Any]) -> Dict[str, Any]:
    mode = config["scheduler"].get("mode")
    if mode not in SCHEDULER_MODES:
        raise InvalidConfigValueError(
            f"scheduler.mode must be one of {SCHEDULER_MODES}, got: {mode!r}"
        )

    plugins = config["plugins"]
    if not isinstance(plugins, dict):
        raise InvalidConfigValueError("plugins must be a mapping of name -> module path")
    for name, module in plugins.items():
        if not isinstance(name, str) or not name or "/" in name:
            raise InvalidConfigValueError(f"Invalid plugin name: {name!r}")
        if not isinstance(module, str) or not module.strip():
            raise InvalidConfigValueError(f"Plugin '{name}' must map to a module path")

    return config


def resolve_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Resolve a configuração efetiva a partir de DEFAULT_CONFIG e overrides.

    Args:
        overrides (Optional[Dict[str, Any]]): Overrides explícitos.

    Returns:
        Dict[str, Any]: Configuração final validada.

    Raises:
        ConfigTypeConflictError: Conflito estrutural durante o merge.
        InvalidConfigValueError: Valor fora do domínio aceito.
    """
    if overrides is None:
        overrides = {}
    if not isinstance(overrides, dict):
        raise InvalidConfigRootTypeError(
            f"Config root must be a dict, got: {type(overrides).__name__}"
        )
    return _validate(deep_merge(DEFAULT_CONFIG, overrides))


def load_config(
    *,
    path: Optional[Union[str, Path]] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Carrega e resolve a configuração efetiva do engine.

    Política de resolução:
        - DEFAULT_CONFIG é sempre a base
        - O arquivo (quando informado) é obrigatório no caminho indicado
        - Overrides têm prioridade sobre o arquivo

    Args:
        path (Optional[str | Path]): Arquivo YAML/JSON de configuração.
        overrides (Optional[Dict[str, Any]]): Overrides explícitos.

    Returns:
        Dict[str, Any]: Configuração final resolvida.
    """
    effective: Dict[str, Any] = {}
    if path is not None:
        effective = _load_file(Path(path))
    if overrides:
        effective = deep_merge(effective, overrides)
    return resolve_config(effective)

# src/larissa/core/config/__init__.py
"""
Camada de configuração do Larissa.

Responsabilidades do pacote:
    - Defaults embutidos do engine (DEFAULT_CONFIG)
    - Carregamento de arquivos YAML/JSON
    - Resolução da configuração final via deep-merge determinístico
    - Validação estrutural (modo do scheduler, mapa de plugins)
    - Hash canônico para rastreabilidade no Event Log

Limites explícitos:
    - Não valida schemas de opções de blocos
    - Não executa pipeline
"""

from .errors import (
    ConfigError,
    ConfigFileNotFoundError,
    ConfigTypeConflictError,
    InvalidConfigRootTypeError,
    InvalidConfigValueError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash
from .loader import DEFAULT_CONFIG, SCHEDULER_MODES, load_config, resolve_config
from .merge import deep_merge

__all__ = [
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigTypeConflictError",
    "InvalidConfigRootTypeError",
    "InvalidConfigValueError",
    "UnsupportedConfigFormatError",
    "DEFAULT_CONFIG",
    "SCHEDULER_MODES",
    "compute_config_hash",
    "deep_merge",
    "load_config",
    "resolve_config",
]

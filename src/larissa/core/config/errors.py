# src/larissa/core/config/errors.py
"""
Exceções canônicas da camada de configuração do Larissa.

As exceções aqui definidas representam violações estruturais da
configuração do engine, e não erros de execução de nós.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa erro de grafo ou de execução
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do engine.

    Permite captura genérica de erros de configuração, separada da
    taxonomia de erros do pipeline (`larissa.core.exceptions`).
    """


class ConfigFileNotFoundError(ConfigError):
    """Arquivo de configuração não encontrado no caminho especificado."""


class UnsupportedConfigFormatError(ConfigError):
    """
    Formato do arquivo de configuração não suportado.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """O conteúdo raiz da configuração não é um dicionário (`dict`)."""


class ConfigTypeConflictError(ConfigError):
    """
    Conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"scheduler": {"mode": "sequential"}}
        - override: {"scheduler": "concurrent"}
    """


class InvalidConfigValueError(ConfigError):
    """Valor estruturalmente válido, mas fora do domínio aceito pelo engine."""

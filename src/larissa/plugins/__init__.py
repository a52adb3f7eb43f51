# src/larissa/plugins/__init__.py
"""
Plugins de blocos distribuídos com o Larissa.

Cada pacote de plugin expõe um `plugin` (larissa.Plugin) no nível do
módulo, de modo que possa ser carregado pela configuração:

    plugins:
      logic: larissa.plugins.logic
"""

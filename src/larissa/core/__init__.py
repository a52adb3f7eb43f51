# src/larissa/core/__init__.py
"""
Core do Larissa.

Este pacote contém a implementação canônica do engine de dataflow:
    - config    → defaults, carregamento, merge e hashing de configuração
    - pipeline  → portas, nós, blocos, registry e o Pipeline
    - engine    → grafo dirigido, planner e scheduler
    - exceptions / errors → taxonomia de erros e payload serializável

O core é projetado para ser:
    - embutível (nenhuma superfície de CLI, rede ou UI)
    - determinístico no modo de execução padrão
    - testável de forma isolada
"""

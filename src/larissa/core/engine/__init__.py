# src/larissa/core/engine/__init__.py
"""
Engine do Larissa.

Este pacote contém a implementação responsável por **planejar** e
**executar** o grafo de um pipeline.

Componentes principais:
    - graph     → grafo dirigido de vértices de nó e de porta, com
                  detecção de ciclo por DFS de três cores
    - planner   → ordem de execução por caminhada reversa a partir dos sinks
    - scheduler → execução da ordem (sequencial por padrão, concorrente
                  opcional), alimentação de inputs e Event Log

Princípios fundamentais:
    - Planejamento e execução são responsabilidades separadas
    - No modo padrão há no máximo uma execução de nó em andamento
    - Falhas sobem ao chamador sem retry nem rollback

Limites explícitos:
    - Não define blocos folha
    - Não persiste estado do pipeline
    - Não verifica compatibilidade de tipos entre portas
"""

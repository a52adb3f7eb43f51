# src/larissa/core/pipeline/__init__.py
"""
# Pipeline Core — Larissa

Este pacote define os **nós** e as **estruturas fundamentais** que compõem
um pipeline de dataflow.

## Componentes

- **types**
  - `NodeStatus`: estados do ciclo de vida de um nó
  - `NodeKind`: variantes de nó (block, pipeline)
  - `PortSpec`, `BlockType`: descritores imutáveis de blocos

- **port**
  - `Port`: célula de valor nomeada e tipada, dona única: um nó

- **node**
  - `Node`: máquina de estados e interface de capacidade das variantes

- **block**
  - `Block`: nó que envolve um BlockType e suas opções

- **context**
  - `BlockContext`: visão do executor sobre as portas do bloco
  - `RunContext`: identidade da run e Event Log estruturado

- **registry**
  - `BlockRegistry`, `Plugin`, `Environment`: resolução de "bloco" e
    "plugin/bloco"

- **pipeline**
  - `Pipeline`: nó que possui o grafo, as operações de mutação e a execução

## Invariantes

- O grafo de um pipeline é sempre acíclico
- Cada porta pertence a exatamente um nó membro
- Transições de status são monotônicas dentro de uma execução
"""

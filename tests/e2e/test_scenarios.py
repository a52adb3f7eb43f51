"""
E2E — Larissa

Valida o engine de ponta a ponta, usando apenas a API pública:
- construção de pipeline a partir de um arquivo de configuração
- blocos embutidos e blocos de plugin
- rejeição de ciclos sem mutação parcial
- remoção de nó inexistente
- ordem de execução topologicamente válida
"""

from __future__ import annotations

import pytest

from larissa import CycleError, NodeStatus, Pipeline, StateError
from larissa.core.config.loader import load_config


@pytest.mark.asyncio
async def test_sum_of_two_numbers():
    p = Pipeline()
    a = p.new_node("number", {"value": 3})
    b = p.new_node("number", {"value": 4})
    total = p.new_node("sum")
    p.connect(a, total.input("value1"))
    p.connect(b, total.input("value2"))

    await p.run()

    assert total.output("result").value == 7
    assert p.status is NodeStatus.FINISHED
    assert all(n.status is NodeStatus.FINISHED for n in p.nodes)


@pytest.mark.asyncio
async def test_logic_plugin_from_config_file(tmp_path, engine_config_yaml):
    path = tmp_path / "larissa.yaml"
    path.write_text(engine_config_yaml, encoding="utf-8")

    p = Pipeline(config=load_config(path=path))
    t = p.new_node("logic/AND")
    t.input("boolean1").set_value(True)
    t.input("boolean2").set_value(False)

    await p.run()

    assert t.output("boolean").value is False


@pytest.mark.asyncio
async def test_cycle_rejected_then_pipeline_still_runs(make_block_type):
    from larissa.core.pipeline.block import Block

    p = Pipeline()
    src = p.new_node("number", {"value": 9})
    first = Block(make_block_type("relay_first", inputs=("in",)))
    second = Block(make_block_type("relay_second", inputs=("in",)))
    p.add_node(first)
    p.add_node(second)
    p.connect(src, first)
    p.connect(first, second)
    edges = p.graph.edge_count()

    with pytest.raises(CycleError):
        p.connect(second, first)
    assert p.graph.edge_count() == edges

    await p.run()
    assert second.output().value == 9


def test_remove_node_from_other_pipeline():
    p1 = Pipeline()
    p2 = Pipeline()
    stranger = p2.new_node("number", {"value": 1})
    p1.new_node("number", {"value": 2})

    with pytest.raises(StateError):
        p1.remove_node(stranger)
    assert p2.has_node(stranger)
    assert len(p1.nodes) == 1


@pytest.mark.asyncio
async def test_execution_order_is_topological():
    p = Pipeline(config={"scheduler": {"mode": "concurrent"}})
    a = p.new_node("number", {"value": 1})
    b = p.new_node("number", {"value": 2})
    c = p.new_node("number", {"value": 3})
    ab = p.new_node("sum")
    abc = p.new_node("sum")
    p.connect(a, ab.input("value1"))
    p.connect(b, ab.input("value2"))
    p.connect(ab, abc.input("value1"))
    p.connect(c, abc.input("value2"))

    await p.run()

    started = [e["node_id"] for e in p.ctx.events if e["message"] == "node started"]
    finished = [e["node_id"] for e in p.ctx.events if e["message"] == "node finished"]
    for producer, consumer in p.connections():
        assert finished.index(producer.node.id) < started.index(consumer.node.id)
    assert abc.output().value == 6

# tests/core/engine/test_planner_backward_walk.py
"""
Testes do planner (caminhada reversa a partir dos sinks).

Invariantes verificados:
- todo produtor aparece antes de seus consumidores
- cadeias independentes são todas incluídas
- cada nó aparece exatamente uma vez
"""

from larissa.core.engine.planner import plan_execution


def _index(order):
    return {node.id: i for i, node in enumerate(order)}


def test_linear_chain(recording_env):
    from larissa.core.pipeline.pipeline import Pipeline

    p = Pipeline(recording_env)
    a = p.new_node("rec/source", {"value": 1})
    b = p.new_node("rec/relay")
    c = p.new_node("rec/relay")
    p.connect(a, b)
    p.connect(b, c)

    order = plan_execution(p.graph)
    assert [n.id for n in order] == [a.id, b.id, c.id]


def test_diamond_orders_every_edge(recording_env):
    from larissa.core.pipeline.pipeline import Pipeline

    p = Pipeline(recording_env)
    src = p.new_node("rec/source", {"value": 1})
    left = p.new_node("rec/relay")
    right = p.new_node("rec/relay")
    join = p.new_node("rec/join")
    p.connect(src, left)
    p.connect(src, right)
    p.connect(left, join.input("left"))
    p.connect(right, join.input("right"))

    order = plan_execution(p.graph)
    idx = _index(order)
    assert len(order) == 4
    for out, inp in p.connections():
        assert idx[out.node.id] < idx[inp.node.id]


def test_independent_chains_are_all_planned(recording_env):
    from larissa.core.pipeline.pipeline import Pipeline

    p = Pipeline(recording_env)
    a1 = p.new_node("rec/source", {"value": 1})
    b1 = p.new_node("rec/relay")
    a2 = p.new_node("rec/source", {"value": 2})
    b2 = p.new_node("rec/relay")
    lonely = p.new_node("rec/source", {"value": 3})
    p.connect(a1, b1)
    p.connect(a2, b2)

    order = plan_execution(p.graph)
    idx = _index(order)
    assert set(idx) == {a1.id, b1.id, a2.id, b2.id, lonely.id}
    assert idx[a1.id] < idx[b1.id]
    assert idx[a2.id] < idx[b2.id]


def test_roots_restrict_plan_to_upstream(recording_env):
    from larissa.core.pipeline.pipeline import Pipeline

    p = Pipeline(recording_env)
    a = p.new_node("rec/source", {"value": 1})
    b = p.new_node("rec/relay")
    c = p.new_node("rec/relay")
    p.connect(a, b)
    p.connect(b, c)

    order = plan_execution(p.graph, roots=[b.id])
    assert [n.id for n in order] == [a.id, b.id]


def test_long_chain_is_planned_without_recursion(recording_env):
    from larissa.core.pipeline.pipeline import Pipeline

    p = Pipeline(recording_env)
    chain = [p.new_node("rec/source", {"value": 1})]
    for _ in range(1500):
        relay = p.new_node("rec/relay")
        p.connect(chain[-1], relay)
        chain.append(relay)

    order = plan_execution(p.graph)

    assert [n.id for n in order] == [n.id for n in chain]


def _diamond_ladder(p, layers):
    tip = p.new_node("rec/source", {"value": 1})
    for _ in range(layers):
        left = p.new_node("rec/relay")
        right = p.new_node("rec/relay")
        join = p.new_node("rec/join")
        p.connect(tip, left)
        p.connect(tip, right)
        p.connect(left, join.input("left"))
        p.connect(right, join.input("right"))
        tip = join
    return tip


def test_diamond_ladder_expands_each_vertex_once(recording_env, monkeypatch):
    from larissa.core.pipeline.pipeline import Pipeline

    p = Pipeline(recording_env)
    _diamond_ladder(p, 20)

    expanded = []
    vertices_to = p.graph.vertices_to

    def counting(key):
        expanded.append(key)
        return vertices_to(key)

    monkeypatch.setattr(p.graph, "vertices_to", counting)

    order = plan_execution(p.graph)

    assert len(order) == 61
    assert len(expanded) == len(set(expanded)) == p.graph.vertex_count()
    idx = _index(order)
    for out, inp in p.connections():
        assert idx[out.node.id] < idx[inp.node.id]

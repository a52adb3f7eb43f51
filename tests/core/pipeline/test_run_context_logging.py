# tests/core/pipeline/test_run_context_logging.py
"""
Testes do Event Log do RunContext.

Os testes asseguram que:
- eventos sempre carregam run_id, node_id, level, message e timestamp
- campos extras são preservados
- uma run de pipeline registra início, fim e transições de cada nó
"""

import pytest


def test_log_event_structure(dummy_ctx):
    dummy_ctx.log(node_id="n1", level="info", message="hello", foo=1)

    assert len(dummy_ctx.events) == 1
    ev = dummy_ctx.events[0]
    assert ev["run_id"] == "run-test-001"
    assert ev["node_id"] == "n1"
    assert ev["level"] == "info"
    assert ev["message"] == "hello"
    assert ev["foo"] == 1
    assert "timestamp" in ev


def test_events_are_filtered_by_node(dummy_ctx):
    dummy_ctx.log(node_id="a", level="info", message="one")
    dummy_ctx.log(node_id="b", level="info", message="two")
    dummy_ctx.log(node_id="a", level="info", message="three")

    assert dummy_ctx.messages("a") == ["one", "three"]
    assert dummy_ctx.messages() == ["one", "two", "three"]


def test_new_context_has_fresh_identity():
    from larissa.core.pipeline.context import RunContext

    c1 = RunContext.new(config={"x": 1}, source="test")
    c2 = RunContext.new()
    assert c1.run_id != c2.run_id
    assert c1.created_at.tzinfo is not None
    assert c1.meta == {"source": "test"}


@pytest.mark.asyncio
async def test_pipeline_run_is_logged(pipeline):
    a = pipeline.new_node("number", {"value": 1})
    b = pipeline.new_node("number", {"value": 2})
    total = pipeline.new_node("sum")
    pipeline.connect(a, total.input("value1"))
    pipeline.connect(b, total.input("value2"))

    await pipeline.run()

    ctx = pipeline.ctx
    assert [e["message"] for e in ctx.events_for(None)] == ["run started", "run finished"]
    started = ctx.events_for(None)[0]
    assert started["order"][-1] == total.id
    assert len(started["config_hash"]) == 64
    assert ctx.messages(total.id) == ["node started", "node finished"]


@pytest.mark.asyncio
async def test_run_hashes_pipeline_config_not_supplied_context(env, dummy_ctx):
    from larissa.core.config.hashing import compute_config_hash
    from larissa.core.pipeline.pipeline import Pipeline

    p = Pipeline(env, config={"scheduler": {"mode": "concurrent"}}, ctx=dummy_ctx)
    p.new_node("number", {"value": 1})

    await p.run()

    started = dummy_ctx.events_for(None)[0]
    assert p.ctx is dummy_ctx
    assert started["config_hash"] == compute_config_hash(p.config)
    assert started["config_hash"] != compute_config_hash(dummy_ctx.config)


@pytest.mark.asyncio
async def test_each_run_gets_a_fresh_context(env):
    from larissa.core.pipeline.pipeline import Pipeline

    p = Pipeline(env)
    p.new_node("number", {"value": 1})

    await p.run()
    first = p.ctx
    p.reset()
    await p.run()

    assert p.ctx is not first
    assert p.ctx.run_id != first.run_id
    assert [e["message"] for e in p.ctx.events_for(None)] == ["run started", "run finished"]
    assert p.ctx.config == p.config

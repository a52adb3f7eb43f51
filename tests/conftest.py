# tests/conftest.py
"""
Fixtures compartilhados para testes do Larissa.

Este módulo define fixtures reutilizáveis que fornecem:
- configurações mínimas e determinísticas
- RunContext controlado
- Environment com o plugin `logic` registrado
- fábricas de BlockType de teste (pass-through, falha, bloqueio)

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Nenhuma fixture executa pipeline
    - Nenhuma fixture realiza I/O
"""

from datetime import datetime, timezone

import asyncio

import pytest


# =====================================================
# Config fixtures
# =====================================================

@pytest.fixture
def engine_config_yaml() -> str:
    """YAML de configuração semelhante ao uso real: scheduler + plugins."""
    return """\
scheduler:
  mode: sequential
plugins:
  logic: larissa.plugins.logic
"""


@pytest.fixture
def dummy_config() -> dict:
    return {"scheduler": {"mode": "sequential"}, "plugins": {}}


# =====================================================
# Pipeline fixtures
# =====================================================

@pytest.fixture
def dummy_ctx(dummy_config):
    """
    RunContext determinístico para testes.

    `run_id` e `created_at` são fixos para garantir reprodutibilidade.
    """
    from larissa.core.pipeline.context import RunContext
    return RunContext(
        run_id="run-test-001",
        created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
        config=dummy_config,
        meta={"source": "pytest"},
    )


@pytest.fixture
def env():
    """Environment com built-ins e o plugin `logic`."""
    from larissa.core.pipeline.registry import Environment
    from larissa.plugins.logic import plugin

    environment = Environment()
    environment.add_plugin(plugin)
    return environment


@pytest.fixture
def pipeline(env, dummy_ctx):
    from larissa.core.pipeline.pipeline import Pipeline
    return Pipeline(env, ctx=dummy_ctx)


@pytest.fixture
def make_block_type():
    """
    Fábrica de BlockTypes de teste.

    Retorna uma função `make(name, inputs=(), outputs=(), executor=None)`.
    Sem executor, o bloco copia o primeiro input (ou `options["value"]`) para
    todos os outputs. Inputs são declarados como obrigatórios.
    """
    from larissa.core.pipeline.types import BlockType

    def make(name, inputs=(), outputs=("out",), executor=None, required=True):
        async def passthrough(ctx):
            if inputs:
                value = ctx.get_input(inputs[0])
            else:
                value = ctx.get_options().get("value")
            for out in outputs:
                ctx.set_output(out, value)

        return BlockType.define(
            name=name,
            inputs=[{"name": n, "type": "any", "required": required} for n in inputs],
            outputs=[{"name": n, "type": "any"} for n in outputs],
            executor=executor or passthrough,
        )

    return make


@pytest.fixture
def recording_env(make_block_type):
    """
    Environment cujo plugin `rec` registra a ordem de início/fim das execuções.

    O log de chamadas fica em `env.calls` como tuplas (evento, node_id).
    """
    from larissa.core.pipeline.registry import BlockRegistry, Environment, Plugin

    calls = []

    def recorder(first_input):
        async def run(ctx):
            calls.append(("start", ctx.node_id))
            await asyncio.sleep(0)
            value = ctx.get_input(first_input) if first_input else ctx.get_options().get("value")
            ctx.set_output("out", value)
            calls.append(("end", ctx.node_id))
        return run

    registry = BlockRegistry.of([
        make_block_type("source", executor=recorder(None)),
        make_block_type("relay", inputs=("in",), executor=recorder("in")),
        make_block_type("join", inputs=("left", "right"), executor=recorder("left")),
    ])
    environment = Environment()
    environment.add_plugin(Plugin(name="rec", registry=registry))
    environment.calls = calls
    return environment

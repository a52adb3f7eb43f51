# src/larissa/plugins/logic/blocks.py
"""Portas booleanas do plugin `logic`."""

from __future__ import annotations

from larissa.core.pipeline.context import BlockContext
from larissa.core.pipeline.types import BlockType


_BINARY_INPUTS = [
    {"name": "boolean1", "type": "boolean", "required": True},
    {"name": "boolean2", "type": "boolean", "required": True},
]
_BOOLEAN_OUTPUT = [{"name": "boolean", "type": "boolean"}]


async def _and(ctx: BlockContext) -> None:
    value1 = ctx.get_input("boolean1")
    value2 = ctx.get_input("boolean2")
    ctx.set_output("boolean", value1 and value2)


async def _or(ctx: BlockContext) -> None:
    value1 = ctx.get_input("boolean1")
    value2 = ctx.get_input("boolean2")
    ctx.set_output("boolean", value1 or value2)


async def _not(ctx: BlockContext) -> None:
    ctx.set_output("boolean", not ctx.get_input("boolean"))


AND = BlockType.define(name="AND", inputs=_BINARY_INPUTS, outputs=_BOOLEAN_OUTPUT, executor=_and)
OR = BlockType.define(name="OR", inputs=_BINARY_INPUTS, outputs=_BOOLEAN_OUTPUT, executor=_or)
NOT = BlockType.define(
    name="NOT",
    inputs=[{"name": "boolean", "type": "boolean", "required": True}],
    outputs=_BOOLEAN_OUTPUT,
    executor=_not,
)

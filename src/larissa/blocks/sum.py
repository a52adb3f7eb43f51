# src/larissa/blocks/sum.py
"""Bloco embutido: soma de dois números."""

from __future__ import annotations

from larissa.core.pipeline.context import BlockContext
from larissa.core.pipeline.types import BlockType


async def add(ctx: BlockContext) -> None:
    ctx.set_output("result", ctx.get_input("value1") + ctx.get_input("value2"))


sum_block = BlockType.define(
    name="sum",
    inputs=[
        {"name": "value1", "type": "number", "required": True},
        {"name": "value2", "type": "number", "required": True},
    ],
    outputs=[{"name": "result", "type": "number"}],
    options=None,
    executor=add,
)

# src/larissa/blocks/string.py
"""Bloco embutido: string literal (opção `value`)."""

from __future__ import annotations

from larissa.core.pipeline.context import BlockContext
from larissa.core.pipeline.types import BlockType


async def set_output(ctx: BlockContext) -> None:
    ctx.set_output("string", ctx.get_options().get("value", ""))


string = BlockType.define(
    name="string",
    outputs=[{"name": "string", "type": "string"}],
    options={
        "type": "object",
        "properties": {
            "value": {"type": "string", "required": True, "multiLine": True},
        },
    },
    executor=set_output,
)

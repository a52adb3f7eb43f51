# src/larissa/blocks/number.py
"""
Bloco embutido: número literal.

Opções:
    - value: número escrito no output `number` (padrão 0)

Valores não numéricos (incluindo bool) são rejeitados com TypeError.
"""

from __future__ import annotations

from larissa.core.pipeline.context import BlockContext
from larissa.core.pipeline.types import BlockType


async def set_output(ctx: BlockContext) -> None:
    value = ctx.get_options().get("value", 0)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"number option 'value' must be numeric, got {type(value).__name__}")
    ctx.set_output("number", value)


number = BlockType.define(
    name="number",
    outputs=[{"name": "number", "type": "number"}],
    options={
        "type": "object",
        "properties": {
            "value": {"type": "number", "required": True},
        },
    },
    executor=set_output,
)

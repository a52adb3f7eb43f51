# tests/blocks/test_builtin_blocks.py
"""Blocos embutidos: number, string e sum."""

import pytest

from larissa.blocks import BUILTIN_BLOCKS
from larissa.core.exceptions import ExecutionError
from larissa.core.pipeline.block import Block


def test_builtin_registry_names():
    assert BUILTIN_BLOCKS.names() == ["number", "string", "sum"]


@pytest.mark.asyncio
async def test_number_writes_option_value():
    node = Block(BUILTIN_BLOCKS.resolve("number"), {"value": 2.5})
    await node.run()
    assert node.output("number").value == 2.5


@pytest.mark.asyncio
async def test_number_defaults_to_zero():
    node = Block(BUILTIN_BLOCKS.resolve("number"))
    await node.run()
    assert node.output().value == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("value", ["3", True, None])
async def test_number_rejects_non_numeric(value):
    node = Block(BUILTIN_BLOCKS.resolve("number"), {"value": value})
    with pytest.raises(ExecutionError) as info:
        await node.run()
    assert isinstance(info.value.cause, TypeError)


@pytest.mark.asyncio
async def test_string_writes_option_value():
    node = Block(BUILTIN_BLOCKS.resolve("string"), {"value": "hello"})
    await node.run()
    assert node.output("string").value == "hello"


@pytest.mark.asyncio
async def test_sum_adds_inputs():
    node = Block(BUILTIN_BLOCKS.resolve("sum"))
    node.input("value1").set_value(3)
    node.input("value2").set_value(4)
    await node.run()
    assert node.output("result").value == 7


def test_sum_requires_both_inputs():
    node = Block(BUILTIN_BLOCKS.resolve("sum"))
    node.input("value1").set_value(3)
    assert node.can_run() is False

import pytest_asyncio

from .pytest import FakeSuiNode, gen_node_context

__all__ = [
    'node_context',
    'sui_client',
]


@pytest_asyncio.fixture
async def node_context():
    async for context in gen_node_context(FakeSuiNode()):
        yield context


@pytest_asyncio.fixture
async def sui_client(node_context):
    return node_context.make_client()
